"""
Product mapping.
"""

from rest_api.mappers.base import SchemaMapper
from rest_api.models import Product
from rest_api.routers.schemas import ProductCreate, ProductOutput


class ProductMapper(SchemaMapper[ProductCreate, ProductOutput, Product]):
    query_schema = ProductOutput

    def to_entity(self, view_model: ProductCreate) -> Product:
        return Product(
            id=view_model.id,
            name=view_model.name,
            description=view_model.description,
            price_cents=view_model.price_cents,
            stock_quantity=view_model.stock_quantity,
        )
