from __future__ import annotations

from typing import Iterable

from src.pageable.core.enums import Direction
from src.pageable.schemas.paging import Order, Sort

_DIRECTIONS = {d.value.lower() for d in Direction}


def parse_sort_param(value: str) -> list[Order]:
    """
    Parse one ``sort`` parameter in the ``property[,property...][,asc|desc]`` form.

    A trailing ``asc``/``desc`` token applies to every property before it;
    without it all properties are ascending. Blank tokens are skipped.
    """
    tokens = [t.strip() for t in (value or "").split(",")]
    tokens = [t for t in tokens if t]
    if not tokens:
        return []

    direction = Direction.ASC
    if tokens[-1].lower() in _DIRECTIONS:
        direction = Direction.parse(tokens.pop())

    return [Order(property=t, direction=direction) for t in tokens]


def parse_sort_params(values: Iterable[str] | None) -> Sort:
    orders: list[Order] = []
    for value in values or ():
        orders.extend(parse_sort_param(value))
    return Sort(orders=tuple(orders))
