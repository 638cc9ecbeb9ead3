"""
Customer Service.

Business rules:
- Email addresses are unique across customers

Usage:
    from rest_api.services.domain import CustomerService

    service = CustomerService(db)
    await service.add(customer)
    if service.valid:
        await service.commit()
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Customer
from rest_api.services.crud import SqlAlchemyCrudService


class CustomerService(SqlAlchemyCrudService[Customer]):
    """Service for customer management."""

    search_fields = ("name", "email", "phone")

    def __init__(self, db: Session):
        super().__init__(db=db, model=Customer)

    def _validate_add(self, entity: Customer) -> None:
        if self._repo.find_one_by(email=entity.email) is not None:
            self.add_notification("email", "email already registered")

    def _validate_update(self, current: Customer, changes: Customer) -> None:
        owner = self._repo.find_one_by(email=changes.email)
        if owner is not None and owner.id != current.id:
            self.add_notification("email", "email already registered")
