"""
Common building blocks shared across routers.

- results: Success / NotFound / ValidationFailed / PreconditionFailed
- crud_controller: generic CRUD orchestration
- crud_router: FastAPI router factory for a CrudController
"""

from .results import (
    ActionResult,
    Success,
    NotFound,
    ValidationFailed,
    PreconditionFailed,
    not_found,
    bad_request,
    to_response,
)
from .crud_controller import CrudController
from .crud_router import build_crud_router

__all__ = [
    # Results
    "ActionResult",
    "Success",
    "NotFound",
    "ValidationFailed",
    "PreconditionFailed",
    "not_found",
    "bad_request",
    "to_response",
    # Controller
    "CrudController",
    "build_crud_router",
]
