from __future__ import annotations

from .enums import Direction
from .exceptions import InvalidArgumentError, PageableError, UnknownSortFieldError

__all__ = [
    "Direction",
    "InvalidArgumentError",
    "PageableError",
    "UnknownSortFieldError",
]
