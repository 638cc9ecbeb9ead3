"""
Customer model.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits
from shared.domain import Contract, Email
from .base import Entity


class Customer(Entity):
    """
    Customer registered in the system.

    Validation rules:
    - name is required, up to 120 characters
    - email must be a valid address (see Email)
    - phone is optional, up to 30 characters
    """

    __tablename__ = "customer"

    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[Optional[str]] = mapped_column(String(Limits.MAX_PHONE_LENGTH))

    def __init__(
        self,
        name: str | None,
        email: Email,
        phone: str | None = None,
        id: uuid.UUID | None = None,
    ):
        name = name.strip() if name else name
        super().__init__(id=id, name=name, email=email.address, phone=phone or None)

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
                phone,
                Limits.MAX_PHONE_LENGTH,
                "phone",
                f"phone must have at most {Limits.MAX_PHONE_LENGTH} characters",
            ),
            email,
        )
