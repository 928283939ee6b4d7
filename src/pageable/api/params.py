from __future__ import annotations

from typing import List

from fastapi import Query

from src.config import get_settings
from src.pageable.schemas.paging import PageRequest
from src.pageable.services.sort_params import parse_sort_params


def get_page_request(
    page: int = Query(0, ge=0, description="Номер страницы (с 0)"),
    size: int | None = Query(None, ge=1, description="Размер страницы"),
    sort: List[str] = Query([], description="property[,asc|desc]; параметр можно повторять"),
) -> PageRequest:
    """DI-зависимость FastAPI: query-string -> PageRequest.

    Размер страницы без явного значения берётся из настроек и
    обрезается до max_page_size.
    """
    settings = get_settings()
    resolved_size = min(size or settings.default_page_size, settings.max_page_size)
    return PageRequest.of(page, resolved_size, parse_sort_params(sort))
