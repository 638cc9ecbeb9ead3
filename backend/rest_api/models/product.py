"""
Product model.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits
from shared.domain import Contract
from .base import Entity


class Product(Entity):
    """
    Product offered for sale. Prices are stored in cents.
    """

    __tablename__ = "product"

    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    price_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __init__(
        self,
        name: str | None,
        price_cents: int | None,
        description: str | None = None,
        stock_quantity: int | None = 0,
        id: uuid.UUID | None = None,
    ):
        name = name.strip() if name else name
        stock_quantity = 0 if stock_quantity is None else stock_quantity
        super().__init__(
            id=id,
            name=name,
            description=description or None,
            price_cents=price_cents,
            stock_quantity=stock_quantity,
        )

        self.add_notifications(
            Contract()
            .requires()
            .is_not_none_or_whitespace(name, "name", "name is required")
            .has_max_len(
                name,
                Limits.MAX_NAME_LENGTH,
                "name",
                f"name must have at most {Limits.MAX_NAME_LENGTH} characters",
            )
            .has_max_len(
                description,
                Limits.MAX_DESCRIPTION_LENGTH,
                "description",
                f"description must have at most {Limits.MAX_DESCRIPTION_LENGTH} characters",
            )
            .is_not_none(price_cents, "price_cents", "price_cents is required")
            .is_greater_or_equal_than(price_cents, 0, "price_cents", "price_cents must be zero or positive")
            .is_lower_or_equal_than(
                price_cents,
                Limits.MAX_INT,
                "price_cents",
                f"price_cents must be at most {Limits.MAX_INT}",
            )
            .is_greater_or_equal_than(
                stock_quantity, 0, "stock_quantity", "stock_quantity must be zero or positive"
            )
            .is_lower_or_equal_than(
                stock_quantity,
                Limits.MAX_INT,
                "stock_quantity",
                f"stock_quantity must be at most {Limits.MAX_INT}",
            )
        )

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0
