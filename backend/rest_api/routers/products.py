"""
Product endpoints.
"""

from typing import Sequence

from fastapi import Depends
from sqlalchemy.orm import Session

from rest_api.mappers import ProductMapper
from rest_api.models import Product
from rest_api.routers._common import CrudController, build_crud_router
from rest_api.routers.schemas import ProductCreate, ProductOutput
from rest_api.services.domain import ProductService
from shared.config.settings import settings
from shared.infrastructure.db import get_db


def order_products(products: Sequence[ProductOutput]) -> list[ProductOutput]:
    """Alphabetical by name, cheapest first for equal names; id breaks ties."""
    return sorted(products, key=lambda p: (p.name.casefold(), p.price_cents, str(p.id)))


def get_product_controller(
    db: Session = Depends(get_db),
) -> CrudController[ProductCreate, ProductOutput, Product]:
    return CrudController(
        service=ProductService(db),
        mapper=ProductMapper(),
        order=order_products,
    )


router = build_crud_router(
    prefix=f"{settings.api_prefix}/products",
    tags=["products"],
    create_schema=ProductCreate,
    query_schema=ProductOutput,
    get_controller=get_product_controller,
)
