from .query_enhancer import enhance_query, order_by_clause
from .sort_params import parse_sort_param, parse_sort_params

__all__ = [
    "enhance_query",
    "order_by_clause",
    "parse_sort_param",
    "parse_sort_params",
]
