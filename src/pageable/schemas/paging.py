from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.pageable.core.enums import Direction
from src.pageable.core.exceptions import InvalidArgumentError


@contextmanager
def _invalid_page_request() -> Iterator[None]:
    try:
        yield
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid page request: {exc}") from exc


# ======================
#   Сортировка
# ======================

class Order(BaseModel):
    """Одна директива сортировки: свойство + направление."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    property: str
    direction: Direction = Direction.ASC

    @field_validator("property")
    @classmethod
    def _property_not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("sort property must not be blank")
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, v):
        if isinstance(v, str):
            return Direction.parse(v)
        return v

    @classmethod
    def asc(cls, property_name: str) -> "Order":
        return cls(property=property_name, direction=Direction.ASC)

    @classmethod
    def desc(cls, property_name: str) -> "Order":
        return cls(property=property_name, direction=Direction.DESC)

    @classmethod
    def by(cls, property_name: str) -> "Order":
        return cls.asc(property_name)

    @property
    def ascending(self) -> bool:
        return self.direction is Direction.ASC

    @property
    def descending(self) -> bool:
        return self.direction is Direction.DESC


def _as_order(item: Any) -> Order:
    if isinstance(item, Order):
        return item
    if isinstance(item, str):
        return Order.by(item)
    return Order.model_validate(item)


class Sort(BaseModel):
    """Упорядоченный набор Order. Порядок = приоритет в ORDER BY."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *orders: Union[Order, str]) -> "Sort":
        """Sort.by(Order.asc("a"), "b") — строки трактуются как ASC."""
        return cls(orders=tuple(_as_order(o) for o in orders))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    def and_(self, other: "Sort") -> "Sort":
        return Sort(orders=self.orders + other.orders)

    def is_sorted(self) -> bool:
        return bool(self.orders)

    def __len__(self) -> int:
        return len(self.orders)


# ======================
#   Запрос страницы
# ======================

class PageRequest(BaseModel):
    """Запрос страницы: offset/limit + сортировка. Неизменяемый."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    offset: int = Field(ge=0)
    limit: int = Field(ge=1)
    sort: Sort = Field(default_factory=Sort)

    # Все пути конструирования с валидацией отдают InvalidArgumentError
    # вместо pydantic ValidationError.
    def __init__(self, **data) -> None:
        with _invalid_page_request():
            super().__init__(**data)

    @classmethod
    def model_validate(cls, *args, **kwargs) -> "PageRequest":
        with _invalid_page_request():
            return super().model_validate(*args, **kwargs)

    @classmethod
    def model_validate_json(cls, *args, **kwargs) -> "PageRequest":
        with _invalid_page_request():
            return super().model_validate_json(*args, **kwargs)

    @field_validator("sort", mode="before")
    @classmethod
    def _coerce_sort(cls, v):
        if v is None:
            return Sort()
        if isinstance(v, (list, tuple)):
            # элементы: Order, имя свойства или dict вида {"property", "direction"}
            return Sort(orders=tuple(_as_order(item) for item in v))
        return v

    @classmethod
    def of(
        cls,
        page: int,
        size: int,
        sort: Union[Sort, Iterable[Order], None] = None,
    ) -> "PageRequest":
        """Адресация номером страницы (0-based): offset = page * size."""
        if page < 0:
            raise InvalidArgumentError(f"Page index must not be negative, got {page}")
        if size < 1:
            raise InvalidArgumentError(f"Page size must be positive, got {size}")
        if sort is not None and not isinstance(sort, Sort):
            sort = Sort.by(*sort)
        return cls(offset=page * size, limit=size, sort=sort)

    @property
    def page_number(self) -> int:
        return self.offset // self.limit

    @property
    def page_size(self) -> int:
        return self.limit

    def next_page(self) -> "PageRequest":
        return PageRequest(offset=self.offset + self.limit, limit=self.limit, sort=self.sort)

    def previous_or_first(self) -> "PageRequest":
        return PageRequest(
            offset=max(0, self.offset - self.limit),
            limit=self.limit,
            sort=self.sort,
        )
