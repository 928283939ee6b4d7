from __future__ import annotations


class PageableError(Exception):
    """Базовая ошибка пагинации/сортировки запросов."""


class InvalidArgumentError(PageableError, ValueError):
    """Нарушен контракт вызова: пустые аргументы, неверный PageRequest и т.п."""


class UnknownSortFieldError(PageableError, ValueError):
    """Свойство сортировки отсутствует в целевой таблице."""

    def __init__(self, property_name: str) -> None:
        self.property = property_name
        super().__init__(f"Unknown sort property {property_name}")
