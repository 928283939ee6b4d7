from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.sql.elements import UnaryExpression
from sqlalchemy.sql.selectable import FromClause, GenerativeSelect

from src.pageable.core.exceptions import InvalidArgumentError, UnknownSortFieldError
from src.pageable.schemas.paging import PageRequest

logger = logging.getLogger(__name__)


def _as_from_clause(table: Any) -> FromClause:
    """Table / alias / subquery as is; ORM-класс (или aliased) -> его selectable."""
    if table is None:
        raise InvalidArgumentError("table must not be None")
    if isinstance(table, FromClause):
        return table

    insp = inspect(table, raiseerr=False)
    selectable = getattr(insp, "selectable", None)
    if isinstance(selectable, FromClause):
        return selectable

    raise InvalidArgumentError(
        f"Expected a SQLAlchemy table or mapped class, got {type(table).__name__}"
    )


def _ensure_open_for_paging(select: Any) -> None:
    if select is None:
        raise InvalidArgumentError("select must not be None")
    if not isinstance(select, GenerativeSelect):
        raise InvalidArgumentError(
            f"Expected a SELECT statement, got {type(select).__name__}"
        )
    # ORDER BY / LIMIT / OFFSET задаёт только PageRequest.
    # _order_by_clauses, _limit_clause, _offset_clause, _fetch_clause: атрибуты
    # GenerativeSelect в SQLAlchemy 2.0, публичного аналога для чтения нет
    if select._order_by_clauses:
        raise InvalidArgumentError(
            "select must not contain ORDER BY; sorting is taken from the page request."
        )
    if (
        select._limit_clause is not None
        or select._offset_clause is not None
        or select._fetch_clause is not None
    ):
        raise InvalidArgumentError(
            "select must not contain LIMIT/OFFSET/FETCH; "
            "pagination is taken from the page request."
        )


def _ensure_page_bounds(page_request: Any) -> None:
    if not isinstance(page_request, PageRequest):
        raise InvalidArgumentError("page_request must be a PageRequest")
    # model_copy(update=...) и model_construct() идут в обход валидации модели
    if page_request.offset < 0:
        raise InvalidArgumentError(f"offset must not be negative, got {page_request.offset}")
    if page_request.limit < 1:
        raise InvalidArgumentError(f"limit must be positive, got {page_request.limit}")


def order_by_clause(table: Any, page_request: PageRequest) -> list[UnaryExpression]:
    """
    Build the ORDER BY list for ``page_request.sort`` against ``table``.

    Entries keep the request order (first entry is the primary sort key).
    Resolution is fail-fast: the first property missing from the table raises
    UnknownSortFieldError and the remaining entries are not looked at.
    """
    if not isinstance(page_request, PageRequest):
        raise InvalidArgumentError("page_request must be a PageRequest")

    columns = _as_from_clause(table).c
    clauses: list[UnaryExpression] = []

    for order in page_request.sort.orders:
        column = columns.get(order.property)
        if column is None:
            logger.warning("Rejecting unknown sort property %r", order.property)
            raise UnknownSortFieldError(order.property)
        clauses.append(column.asc() if order.ascending else column.desc())

    return clauses


def enhance_query(
    table: Any,
    select: GenerativeSelect,
    page_request: PageRequest,
) -> GenerativeSelect:
    """
    Apply ORDER BY, OFFSET and LIMIT from ``page_request`` to ``select``.

    The statement goes through the order_by -> offset -> limit stages and
    the new statement is returned; ``select`` itself is left untouched
    (SQLAlchemy statements are generative).
    """
    _ensure_open_for_paging(select)
    _ensure_page_bounds(page_request)
    clauses = order_by_clause(table, page_request)

    stmt = select
    if clauses:
        stmt = stmt.order_by(*clauses)
    stmt = stmt.offset(page_request.offset).limit(page_request.limit)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Paged query: offset=%d limit=%d sort=%s",
            page_request.offset,
            page_request.limit,
            ", ".join(f"{o.property} {o.direction.value}" for o in page_request.sort.orders)
            or "-",
        )
    return stmt
