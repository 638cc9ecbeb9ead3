"""
Product Service.

Business rules:
- Product names are unique
- A product with stock on hand cannot be deleted
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Product
from rest_api.services.crud import SqlAlchemyCrudService


class ProductService(SqlAlchemyCrudService[Product]):
    """Service for product management."""

    search_fields = ("name", "description")

    def __init__(self, db: Session):
        super().__init__(db=db, model=Product)

    def _validate_add(self, entity: Product) -> None:
        if self._repo.find_one_by(name=entity.name) is not None:
            self.add_notification("name", "product name already registered")

    def _validate_update(self, current: Product, changes: Product) -> None:
        owner = self._repo.find_one_by(name=changes.name)
        if owner is not None and owner.id != current.id:
            self.add_notification("name", "product name already registered")

    def _validate_delete(self, entity: Product) -> None:
        if entity.in_stock:
            self.add_notification(
                "stock_quantity", "product with stock on hand cannot be deleted"
            )
