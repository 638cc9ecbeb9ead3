"""
CRUD service contract and its SQLAlchemy unit-of-work implementation.

Architecture:
    CrudController → CrudService (validation + staging) → Repository → Model

Mutating operations never raise for expected business-rule failures. They
record notifications on the service and leave ``invalid`` set; nothing is
persisted until ``commit()`` is awaited.

Usage:
    from rest_api.services.crud import SqlAlchemyCrudService

    class CustomerService(SqlAlchemyCrudService[Customer]):
        search_fields = ("name", "email")

        def __init__(self, db: Session):
            super().__init__(db=db, model=Customer)

        def _validate_add(self, entity: Customer) -> None:
            if self._repo.find_one_by(email=entity.email):
                self.add_notification("email", "email already registered")
"""

from __future__ import annotations

import asyncio
import uuid
from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_api.models import Entity
from rest_api.services.crud.repository import BaseRepository
from shared.config.constants import Messages, Properties
from shared.config.logging import get_logger
from shared.domain import Notifiable
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import DatabaseError
from shared.utils.validators import normalize_search_term

logger = get_logger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)


class CrudService(Notifiable, ABC, Generic[EntityT]):
    """
    Domain-side CRUD contract consumed by CrudController.

    After each mutating call ``notifications`` holds only the failures of
    that call, and ``invalid`` is True exactly when that list is non-empty.
    """

    @abstractmethod
    def query_all(self) -> Sequence[EntityT]:
        """Return every record. An empty store yields an empty sequence."""

    @abstractmethod
    def search(self, filter_text: str | None) -> Sequence[EntityT]:
        """Return records matching a free-text filter. A blank filter returns everything."""

    @abstractmethod
    async def get_by_id(self, entity_id: uuid.UUID) -> EntityT | None:
        """Return the record or None when it does not exist."""

    @abstractmethod
    async def add(self, entity: EntityT) -> None:
        """Stage a new record, or record notifications when it is rejected."""

    @abstractmethod
    async def update(self, entity: EntityT) -> None:
        """Stage changes to an existing record, or record notifications."""

    @abstractmethod
    async def delete(self, entity_id: uuid.UUID) -> None:
        """Stage removal of a record, or record notifications."""

    @abstractmethod
    async def commit(self) -> None:
        """Finalize everything staged since the last commit."""


class SqlAlchemyCrudService(CrudService[EntityT], Generic[EntityT]):
    """
    CrudService backed by one SQLAlchemy session used as a unit of work.

    Subclasses set ``search_fields`` and override the ``_validate_*`` hooks to
    add business rules. Hooks record notifications; they must not raise for
    expected failures.
    """

    search_fields: tuple[str, ...] = ()

    def __init__(self, db: Session, model: type[EntityT]):
        self._db = db
        self._model = model
        self._repo: BaseRepository[EntityT] = BaseRepository(model, db)

    @property
    def db(self) -> Session:
        """Database session."""
        return self._db

    @property
    def repo(self) -> BaseRepository[EntityT]:
        """Repository for data access."""
        return self._repo

    @property
    def entity_name(self) -> str:
        return self._model.__name__

    # =========================================================================
    # Read Operations
    # =========================================================================

    def query_all(self) -> Sequence[EntityT]:
        return self._repo.find_all()

    def search(self, filter_text: str | None) -> Sequence[EntityT]:
        term = normalize_search_term(filter_text)
        if not term or not self.search_fields:
            return self.query_all()
        return self._repo.search(term, self.search_fields)

    async def get_by_id(self, entity_id: uuid.UUID) -> EntityT | None:
        return await asyncio.to_thread(self._repo.find_by_id, entity_id)

    # =========================================================================
    # Write Operations
    # =========================================================================

    async def add(self, entity: EntityT) -> None:
        await asyncio.to_thread(self._add, entity)

    async def update(self, entity: EntityT) -> None:
        await asyncio.to_thread(self._update, entity)

    async def delete(self, entity_id: uuid.UUID) -> None:
        await asyncio.to_thread(self._delete, entity_id)

    async def commit(self) -> None:
        try:
            await asyncio.to_thread(safe_commit, self._db)
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to commit {self.entity_name}",
                error=str(e),
                exc_info=True,
            )
            raise DatabaseError(f"commit of {self.entity_name}") from e

    def rollback(self) -> None:
        """Discard staged changes and notifications."""
        self._db.rollback()
        self.clear_notifications()

    def _add(self, entity: EntityT) -> None:
        self.clear_notifications()
        self.add_notifications(entity)
        if self.invalid:
            return

        if self._repo.exists(entity.id):
            self.add_notification(Properties.ID, Messages.RECORD_ALREADY_EXISTS)
            return

        self._validate_add(entity)
        if self.valid:
            self._repo.add(entity)

    def _update(self, entity: EntityT) -> None:
        self.clear_notifications()
        self.add_notifications(entity)
        if self.invalid:
            return

        current = self._repo.find_by_id(entity.id)
        if current is None:
            self.add_notification(Properties.ID, Messages.RECORD_NOT_FOUND)
            return

        self._validate_update(current, entity)
        if self.valid:
            self._repo.merge(entity)

    def _delete(self, entity_id: uuid.UUID) -> None:
        self.clear_notifications()

        entity = self._repo.find_by_id(entity_id)
        if entity is None:
            self.add_notification(Properties.ID, Messages.RECORD_NOT_FOUND)
            return

        self._validate_delete(entity)
        if self.valid:
            self._repo.delete(entity)

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_add(self, entity: EntityT) -> None:
        """Business rules for new records. Record notifications on failure."""
        pass

    def _validate_update(self, current: EntityT, changes: EntityT) -> None:
        """Business rules for changes to ``current``. Record notifications on failure."""
        pass

    def _validate_delete(self, entity: EntityT) -> None:
        """Business rules for removal. Record notifications on failure."""
        pass
