"""
Customer mapping.
"""

from rest_api.mappers.base import SchemaMapper
from rest_api.models import Customer
from rest_api.routers.schemas import CustomerCreate, CustomerOutput
from shared.domain import Email


class CustomerMapper(SchemaMapper[CustomerCreate, CustomerOutput, Customer]):
    query_schema = CustomerOutput

    def to_entity(self, view_model: CustomerCreate) -> Customer:
        return Customer(
            id=view_model.id,
            name=view_model.name,
            email=Email(view_model.email),
            phone=view_model.phone,
        )
