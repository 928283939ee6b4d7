"""
Demo: paged query over the "user" table.

    CREATE TABLE "user" (
       id uuid NOT NULL PRIMARY KEY,
       "name" varchar NOT NULL,
       status varchar NOT NULL,
       created_on timestamp NOT NULL
    );

Nothing is executed: the enhanced statement is compiled for the configured
dialect and printed.
"""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.engine import make_url
from sqlalchemy.sql.selectable import GenerativeSelect

from src.config import get_settings
from src.pageable.models import User
from src.pageable.schemas.paging import Order, PageRequest, Sort
from src.pageable.services.query_enhancer import enhance_query

logger = logging.getLogger("pageable_demo")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] [demo] %(message)s",
    )


def build_demo_query() -> GenerativeSelect:
    sort = Sort.by(
        Order.asc("created_on"),
        Order.asc("status"),
        Order.desc("name"),
    )
    # третья страница по 10 строк -> OFFSET 20 LIMIT 10
    page_request = PageRequest.of(2, 10, sort)

    stmt = select(User.__table__)
    return enhance_query(User, stmt, page_request)


def render_sql(stmt: GenerativeSelect, dialect_name: str) -> str:
    dialect = make_url(f"{dialect_name}://").get_dialect()()
    return str(stmt.compile(dialect=dialect, compile_kwargs={"literal_binds": True}))


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    stmt = build_demo_query()
    logger.info("Rendering demo query env=%s dialect=%s", settings.app_env, settings.demo_dialect)
    print(render_sql(stmt, settings.demo_dialect))


if __name__ == "__main__":
    main()
