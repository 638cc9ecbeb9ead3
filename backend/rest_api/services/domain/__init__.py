"""
Domain Services.

Services contain the business rules of each entity and stage changes through
the CRUD unit of work.

Structure:
    Router / CrudController (thin)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)
"""

from .customer_service import CustomerService
from .product_service import ProductService

__all__ = [
    "CustomerService",
    "ProductService",
]
