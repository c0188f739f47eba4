"""Domain layer: typed columns, inference and statistics."""
