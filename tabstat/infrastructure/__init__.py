"""Infrastructure layer: caching, logging and file ingestion adapters."""
