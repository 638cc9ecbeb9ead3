"""
Router factory exposing a CrudController over FastAPI.

Every entity gets the same six endpoints:

    GET    {prefix}                    list, ordered
    GET    {prefix}/pesquisa?filtro=   search, ordered
    GET    {prefix}/{id}               single record or 404
    POST   {prefix}                    create, returns {"id": ...}
    PUT    {prefix}/{id}               update, empty body
    DELETE {prefix}/{id}               delete, empty body

Usage:
    router = build_crud_router(
        prefix="/api/customers",
        tags=["customers"],
        create_schema=CustomerCreate,
        query_schema=CustomerOutput,
        get_controller=get_customer_controller,
    )
"""

# Endpoint annotations reference the schemas passed to the factory, so they
# must stay real objects (no postponed evaluation in this module).

import uuid
from typing import Any, Callable

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel

from rest_api.routers._common.crud_controller import CrudController
from rest_api.routers._common.results import to_response
from rest_api.routers.schemas import IdOutput, NotificationOutput

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": list[NotificationOutput]},
}
BAD_REQUEST_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": list[NotificationOutput]},
}


def build_crud_router(
    *,
    prefix: str,
    tags: list[str],
    create_schema: type[BaseModel],
    query_schema: type[BaseModel],
    get_controller: Callable[..., CrudController],
) -> APIRouter:
    """Create an APIRouter with the CRUD endpoints of one entity."""
    router = APIRouter(prefix=prefix, tags=tags)

    @router.get("", response_model=list[query_schema])
    def list_all(controller: CrudController = Depends(get_controller)) -> Response:
        """List every record, in the entity's display order."""
        return to_response(controller.list_all())

    # Registered before /{id} so that "pesquisa" is not parsed as an id
    @router.get("/pesquisa", response_model=list[query_schema])
    def search(
        filter_text: str = Query("", alias="filtro", description="Free-text filter"),
        controller: CrudController = Depends(get_controller),
    ) -> Response:
        """Search records. An empty filter returns every record."""
        return to_response(controller.search(filter_text))

    @router.get("/{id}", response_model=query_schema, responses=NOT_FOUND_RESPONSE)
    async def get_by_id(
        id: uuid.UUID,
        controller: CrudController = Depends(get_controller),
    ) -> Response:
        """Get one record by id. A malformed id is a 400 validation error, not a 404."""
        return to_response(await controller.get_by_id(id))

    @router.post("", response_model=IdOutput, responses=BAD_REQUEST_RESPONSE)
    async def create(
        view_model: create_schema,  # type: ignore[valid-type]
        controller: CrudController = Depends(get_controller),
    ) -> Response:
        """Create a record and return its id."""
        return to_response(await controller.create(view_model))

    @router.put("/{id}", responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE})
    async def update(
        id: uuid.UUID,
        view_model: create_schema,  # type: ignore[valid-type]
        controller: CrudController = Depends(get_controller),
    ) -> Response:
        """
        Replace the data of a record. The body id must match the path id.
        A malformed path id is a 400 validation error.
        """
        return to_response(await controller.update(id, view_model))

    @router.delete("/{id}", responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE})
    async def delete(
        id: uuid.UUID,
        controller: CrudController = Depends(get_controller),
    ) -> Response:
        """Delete a record. A malformed id is a 400 validation error, not a 404."""
        return to_response(await controller.delete(id))

    return router
