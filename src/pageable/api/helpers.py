from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.sql.selectable import GenerativeSelect

from src.pageable.core.exceptions import InvalidArgumentError, UnknownSortFieldError
from src.pageable.schemas.paging import PageRequest
from src.pageable.services.query_enhancer import enhance_query


def http_400(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def enhance_or_400(
    table: Any,
    select: GenerativeSelect,
    page_request: PageRequest,
) -> GenerativeSelect:
    """enhance_query для роутеров: любая ошибка пагинации/сортировки -> HTTP 400."""
    try:
        return enhance_query(table, select, page_request)
    except UnknownSortFieldError as exc:
        raise http_400(f"Unknown sort property '{exc.property}'")
    except InvalidArgumentError as exc:
        raise http_400(str(exc))
