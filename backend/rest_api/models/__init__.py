"""
SQLAlchemy ORM models.

All entities inherit from Entity (UUID id + notification state).
"""

from .base import Base, Entity
from .customer import Customer
from .product import Product

__all__ = [
    "Base",
    "Entity",
    "Customer",
    "Product",
]
