"""
Sample data for development databases.
"""

from sqlalchemy.orm import Session

from rest_api.models import Customer, Product
from rest_api.services.crud import BaseRepository
from shared.config.logging import get_logger
from shared.domain import Email
from shared.infrastructure.db import safe_commit

logger = get_logger(__name__)


def _sample_customers() -> list[Customer]:
    return [
        Customer(name="Ana Souza", email=Email("ana.souza@example.com"), phone="+55 11 91234-5678"),
        Customer(name="Bruno Lima", email=Email("bruno.lima@example.com")),
        Customer(name="Carla Mendes", email=Email("carla.mendes@example.com"), phone="+55 21 99876-5432"),
    ]


def _sample_products() -> list[Product]:
    return [
        Product(name="Notebook", description="A5 dotted notebook", price_cents=2490, stock_quantity=40),
        Product(name="Pen", description="Black gel pen", price_cents=350, stock_quantity=200),
        Product(name="Stapler", price_cents=1890),
    ]


def seed(db: Session) -> dict[str, int]:
    """
    Insert sample customers and products into empty tables.

    Returns:
        Number of records inserted per entity.
    """
    inserted = {"customers": 0, "products": 0}

    if BaseRepository(Customer, db).count() == 0:
        customers = _sample_customers()
        db.add_all(customers)
        inserted["customers"] = len(customers)

    if BaseRepository(Product, db).count() == 0:
        products = _sample_products()
        db.add_all(products)
        inserted["products"] = len(products)

    safe_commit(db)

    if any(inserted.values()):
        logger.info("Seed data inserted", **inserted)
    else:
        logger.info("Seed skipped: tables already populated")

    return inserted
