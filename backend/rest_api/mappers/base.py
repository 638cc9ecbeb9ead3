"""
Mapper boundary between wire-facing view models and domain entities.
"""

from typing import Generic, Iterable, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

CreateT = TypeVar("CreateT", bound=BaseModel)
QueryT = TypeVar("QueryT", bound=BaseModel)
EntityT = TypeVar("EntityT")


@runtime_checkable
class EntityMapper(Protocol[CreateT, QueryT, EntityT]):
    """
    Converts create view models into entities and entities into query view models.

    Building an entity runs its own validation, so ``to_entity`` may return an
    invalid entity. Mapper faults (unexpected exceptions) propagate unchanged.
    """

    def to_entity(self, view_model: CreateT) -> EntityT:
        ...

    def to_view_model(self, entity: EntityT) -> QueryT:
        ...

    def to_view_models(self, entities: Iterable[EntityT]) -> list[QueryT]:
        ...


class SchemaMapper(Generic[CreateT, QueryT, EntityT]):
    """
    Mapper whose entity -> view model direction is ``QuerySchema.model_validate``.

    Subclasses implement ``to_entity``.
    """

    query_schema: type[QueryT]

    def to_entity(self, view_model: CreateT) -> EntityT:
        raise NotImplementedError

    def to_view_model(self, entity: EntityT) -> QueryT:
        return self.query_schema.model_validate(entity)

    def to_view_models(self, entities: Iterable[EntityT]) -> list[QueryT]:
        return [self.to_view_model(entity) for entity in entities]
