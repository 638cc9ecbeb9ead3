"""
Mappers between view models and domain entities.
"""

from .base import EntityMapper, SchemaMapper
from .customer import CustomerMapper
from .product import ProductMapper

__all__ = [
    "EntityMapper",
    "SchemaMapper",
    "CustomerMapper",
    "ProductMapper",
]
