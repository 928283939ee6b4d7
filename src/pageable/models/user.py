from __future__ import annotations

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class User(Base):
    """Демо-таблица пользователей ("user")."""

    __tablename__ = "user"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)

    # произвольный текстовый статус, без CHECK
    status: Mapped[str] = mapped_column(String, nullable=False)

    created_on: Mapped[datetime] = mapped_column(nullable=False)
