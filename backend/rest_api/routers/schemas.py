"""
Pydantic view models for the CRUD endpoints.

Create view models keep business fields optional: missing or malformed data
is reported by entity validation as notifications, so every rejection uses
the same error contract.
"""

import uuid

from pydantic import BaseModel, ConfigDict


# =============================================================================
# Shared Schemas
# =============================================================================


class NotificationOutput(BaseModel):
    """One element of every error response body."""

    model_config = ConfigDict(from_attributes=True)

    property: str
    message: str


class IdOutput(BaseModel):
    """Body of a successful create."""

    id: uuid.UUID


# =============================================================================
# Customer Schemas
# =============================================================================


class CustomerCreate(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class CustomerOutput(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    phone: str | None = None


# =============================================================================
# Product Schemas
# =============================================================================


class ProductCreate(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None
    description: str | None = None
    price_cents: int | None = None
    stock_quantity: int | None = None


class ProductOutput(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str | None = None
    price_cents: int
    stock_quantity: int
