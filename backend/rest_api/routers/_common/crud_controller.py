"""
Generic CRUD controller.

CrudController provides list / search / get / create / update / delete over
one entity type, given a CrudService, a mapper and an ordering function.
It never raises for expected outcomes: missing records and rejected input
come back as NotFound / ValidationFailed results carrying notifications.
Every other exception (persistence, mapping, cancellation) propagates.

Flow of a mutating request:
    map view model → check entity / ids → mutate → check service → commit

Usage:
    controller = CrudController(
        service=CustomerService(db),
        mapper=CustomerMapper(),
        order=order_customers,
    )
    result = await controller.create(CustomerCreate(name="Ana", email="ana@example.com"))
"""

import uuid
from typing import Callable, Generic, Sequence, TypeVar

from pydantic import BaseModel

from rest_api.mappers.base import EntityMapper
from rest_api.models import Entity
from rest_api.routers._common.results import (
    ActionResult,
    PreconditionFailed,
    Success,
    ValidationFailed,
    not_found,
)
from rest_api.routers.schemas import IdOutput
from rest_api.services.crud import CrudService
from shared.config.constants import Messages, Properties
from shared.config.logging import crud_logger as logger
from shared.domain import Notification

CreateT = TypeVar("CreateT", bound=BaseModel)
QueryT = TypeVar("QueryT", bound=BaseModel)
EntityT = TypeVar("EntityT", bound=Entity)

# Pure function giving a deterministic total order over query view models
Ordering = Callable[[Sequence[QueryT]], list[QueryT]]


class CrudController(Generic[CreateT, QueryT, EntityT]):
    """
    CRUD orchestration shared by every entity endpoint.

    Type parameters:
        CreateT: view model with the data needed to create or update a record
        QueryT: view model with the data shown to clients
        EntityT: domain entity
    """

    def __init__(
        self,
        service: CrudService[EntityT],
        mapper: EntityMapper[CreateT, QueryT, EntityT],
        order: Ordering,
    ):
        self._service = service
        self._mapper = mapper
        self._order = order

    # =========================================================================
    # Queries
    # =========================================================================

    def list_all(self) -> ActionResult:
        """All records, mapped and ordered."""
        entities = self._service.query_all()
        return Success(self._order(self._mapper.to_view_models(entities)))

    def search(self, filter_text: str | None) -> ActionResult:
        """Records matching the free-text filter, mapped and ordered."""
        entities = self._service.search(filter_text or "")
        return Success(self._order(self._mapper.to_view_models(entities)))

    async def get_by_id(self, id: uuid.UUID) -> ActionResult:
        entity = await self._service.get_by_id(id)

        if entity is None:
            return not_found(Properties.ID, Messages.RECORD_NOT_FOUND)

        return Success(self._mapper.to_view_model(entity))

    # =========================================================================
    # Commands
    # =========================================================================

    async def delete(self, id: uuid.UUID) -> ActionResult:
        entity = await self._service.get_by_id(id)

        if entity is None:
            return not_found(Properties.ID, Messages.RECORD_NOT_FOUND)

        await self._service.delete(id)

        if self._service.invalid:
            return self._rejected("delete", id, self._service.notifications)

        await self._service.commit()
        logger.info("Record deleted", entity=self._entity_name(entity), entity_id=str(id))

        return Success()

    async def create(self, view_model: CreateT) -> ActionResult:
        entity = self._mapper.to_entity(view_model)

        if entity.invalid:
            return self._rejected("create", entity.id, entity.notifications)

        await self._service.add(entity)

        if self._service.invalid:
            return self._rejected("create", entity.id, self._service.notifications)

        await self._service.commit()
        logger.info("Record created", entity=self._entity_name(entity), entity_id=str(entity.id))

        return Success(IdOutput(id=entity.id))

    async def update(self, id: uuid.UUID, view_model: CreateT) -> ActionResult:
        entity = self._mapper.to_entity(view_model)

        if entity.id != id:
            logger.warning(
                "Update rejected: ids do not match",
                entity=self._entity_name(entity),
                path_id=str(id),
                body_id=str(entity.id),
            )
            return PreconditionFailed((Notification(Properties.ID, Messages.IDS_DO_NOT_MATCH),))

        await self._service.update(entity)

        if self._service.invalid:
            return self._rejected("update", id, self._service.notifications)

        await self._service.commit()
        logger.info("Record updated", entity=self._entity_name(entity), entity_id=str(id))

        return Success()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _rejected(
        self,
        operation: str,
        id: uuid.UUID,
        notifications: tuple[Notification, ...],
    ) -> ValidationFailed:
        logger.warning(
            f"{operation.capitalize()} rejected",
            entity_id=str(id),
            notifications=[n.property for n in notifications],
        )
        return ValidationFailed(tuple(notifications))

    @staticmethod
    def _entity_name(entity: EntityT) -> str:
        return type(entity).__name__
