from .summary import SummaryPresenter, format_quantile_label, format_value

__all__ = ["SummaryPresenter", "format_quantile_label", "format_value"]
