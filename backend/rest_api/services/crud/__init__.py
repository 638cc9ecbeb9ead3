"""
CRUD Services - Generic operations for entity management.

Provides:
- CrudService: the contract consumed by CrudController
- SqlAlchemyCrudService: unit-of-work implementation with validation hooks
- BaseRepository: type-safe data access
"""

from .repository import BaseRepository
from .service import CrudService, SqlAlchemyCrudService

__all__ = [
    "BaseRepository",
    "CrudService",
    "SqlAlchemyCrudService",
]
