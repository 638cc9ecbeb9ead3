"""
Repository Pattern for database access.

Provides a thin abstraction between business logic and SQLAlchemy queries.
Repositories never commit: staged changes are finalized by the owning
service's unit of work.

Usage:
    from rest_api.services.crud.repository import BaseRepository

    customer_repo = BaseRepository(Customer, db)
    customers = customer_repo.find_all()
    customer = customer_repo.find_by_id(customer_id)
    matches = customer_repo.search("ana", fields=("name", "email"))
"""

from __future__ import annotations

import uuid
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import func, or_, select, exists as sql_exists
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from rest_api.models import Entity
from shared.utils.validators import escape_like_pattern

ModelT = TypeVar("ModelT", bound=Entity)


class BaseRepository(Generic[ModelT]):
    """
    Base repository providing common database operations for one entity type.
    """

    def __init__(self, model: type[ModelT], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session."""
        return self._session

    def _base_query(self) -> Select:
        """Create base select query."""
        return select(self._model)

    def find_by_id(self, entity_id: uuid.UUID) -> ModelT | None:
        """
        Find entity by primary key.

        Returns:
            Entity or None if not found.
        """
        return self._session.get(self._model, entity_id)

    def find_all(self) -> Sequence[ModelT]:
        """Find all entities."""
        return self._session.scalars(self._base_query()).all()

    def find_one_by(self, **criteria: Any) -> ModelT | None:
        """Find the first entity whose columns equal the given values."""
        query = self._base_query().filter_by(**criteria)
        return self._session.scalars(query).first()

    def search(self, term: str, fields: Sequence[str]) -> Sequence[ModelT]:
        """
        Case-insensitive substring search over the given columns.

        Wildcards in ``term`` are escaped, so any text matches literally.
        """
        pattern = f"%{escape_like_pattern(term)}%"
        conditions = [
            getattr(self._model, field_name).ilike(pattern, escape="\\")
            for field_name in fields
        ]
        query = self._base_query().where(or_(*conditions))
        return self._session.scalars(query).all()

    def count(self) -> int:
        """Count all entities."""
        query = select(func.count()).select_from(self._model)
        return self._session.scalar(query) or 0

    def exists(self, entity_id: uuid.UUID) -> bool:
        """Check if entity exists by ID."""
        query = select(sql_exists().where(self._model.id == entity_id))
        return self._session.scalar(query) or False

    def add(self, entity: ModelT) -> ModelT:
        """Add entity to session (not committed)."""
        self._session.add(entity)
        return entity

    def merge(self, entity: ModelT) -> ModelT:
        """Copy the state of a detached entity onto its persistent row (not committed)."""
        return self._session.merge(entity)

    def delete(self, entity: ModelT) -> None:
        """Delete entity from session (not committed)."""
        self._session.delete(entity)
