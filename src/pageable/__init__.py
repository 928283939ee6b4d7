from __future__ import annotations

from .core import Direction, InvalidArgumentError, PageableError, UnknownSortFieldError
from .schemas import Order, PageRequest, Sort
from .services import enhance_query, order_by_clause

__all__ = [
    "Direction",
    "InvalidArgumentError",
    "Order",
    "PageRequest",
    "PageableError",
    "Sort",
    "UnknownSortFieldError",
    "enhance_query",
    "order_by_clause",
]
