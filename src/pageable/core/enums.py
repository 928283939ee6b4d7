from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> "Direction":
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            raise ValueError(
                f"Invalid sort direction: {value!r}. Expected 'asc' or 'desc'"
            ) from None
