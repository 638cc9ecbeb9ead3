"""
Base classes for all SQLAlchemy ORM models.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from shared.domain.notifications import Notifiable


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Entity(Notifiable, Base):
    """
    Identifiable domain entity with its own validity state.

    The id is assigned at construction time (not at flush), so a freshly
    built entity can be addressed before it is persisted. Subclasses validate
    their input in ``__init__`` and record notifications instead of raising.
    """

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    def __init__(self, id: uuid.UUID | None = None, **kwargs: Any):
        super().__init__(id=id or uuid.uuid4(), **kwargs)

    def __repr__(self) -> str:
        state = "invalid" if self.invalid else "valid"
        return f"<{self.__class__.__name__}(id={self.id}, {state})>"
