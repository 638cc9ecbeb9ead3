"""
Customer endpoints.
"""

from typing import Sequence

from fastapi import Depends
from sqlalchemy.orm import Session

from rest_api.mappers import CustomerMapper
from rest_api.models import Customer
from rest_api.routers._common import CrudController, build_crud_router
from rest_api.routers.schemas import CustomerCreate, CustomerOutput
from rest_api.services.domain import CustomerService
from shared.config.settings import settings
from shared.infrastructure.db import get_db


def order_customers(customers: Sequence[CustomerOutput]) -> list[CustomerOutput]:
    """Alphabetical by name; email and id break ties."""
    return sorted(customers, key=lambda c: (c.name.casefold(), c.email, str(c.id)))


def get_customer_controller(
    db: Session = Depends(get_db),
) -> CrudController[CustomerCreate, CustomerOutput, Customer]:
    return CrudController(
        service=CustomerService(db),
        mapper=CustomerMapper(),
        order=order_customers,
    )


router = build_crud_router(
    prefix=f"{settings.api_prefix}/customers",
    tags=["customers"],
    create_schema=CustomerCreate,
    query_schema=CustomerOutput,
    get_controller=get_customer_controller,
)
