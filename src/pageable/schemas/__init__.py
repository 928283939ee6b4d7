from __future__ import annotations

from .paging import Order, PageRequest, Sort

__all__ = [
    "Order",
    "PageRequest",
    "Sort",
]
