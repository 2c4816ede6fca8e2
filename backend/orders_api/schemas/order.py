"""Order Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - OrderCreate requires all five fields; order_id 1-64 chars, item_name non-blank
    - order_id is stored and looked up exactly as sent (no trimming); blank ids rejected everywhere
    - order_date / delivery_date leave the schema in canonical YYYY/MM/DD form
    - cost is a finite number (NaN / inf rejected)
    - OrderResponse mirrors the ORM row (from_attributes)

Design Decisions:
    - Dates normalized in field_validator: stored text matches the ListByDate fragment shape
    - InvalidDateError re-raised as ValueError so Pydantic reports it as a field error (400)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from orders_api.core.errors import InvalidDateError
from orders_api.core.normalize_date import normalize_date


def _non_blank_id(value: str) -> str:
    if not value.strip():
        raise ValueError("order_id must not be empty or whitespace")
    return value


def _canonical_date(value: object) -> str:
    try:
        return normalize_date(value)
    except InvalidDateError as e:
        raise ValueError(e.message) from e


class OrderCreate(BaseModel):
    """Full order payload for creation."""
    order_id: str = Field(min_length=1, max_length=64)
    item_name: str = Field(min_length=1, max_length=255)
    cost: float = Field(allow_inf_nan=False)
    order_date: str
    delivery_date: str

    @field_validator("order_id")
    @classmethod
    def check_order_id(cls, v: str) -> str:
        return _non_blank_id(v)

    @field_validator("item_name")
    @classmethod
    def strip_item_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty or whitespace")
        return v

    @field_validator("order_date", "delivery_date", mode="before")
    @classmethod
    def normalize_dates(cls, v: object) -> str:
        return _canonical_date(v)


class OrderDeliveryUpdate(BaseModel):
    """New delivery date for an existing order."""
    order_id: str = Field(min_length=1, max_length=64)
    delivery_date: str

    @field_validator("order_id")
    @classmethod
    def check_order_id(cls, v: str) -> str:
        return _non_blank_id(v)

    @field_validator("delivery_date", mode="before")
    @classmethod
    def normalize_delivery_date(cls, v: object) -> str:
        return _canonical_date(v)


class OrderLookup(BaseModel):
    """Search body — a single order_id."""
    order_id: str = Field(min_length=1, max_length=64)

    @field_validator("order_id")
    @classmethod
    def check_order_id(cls, v: str) -> str:
        return _non_blank_id(v)


class OrderResponse(BaseModel):
    """Order response — public-facing order record."""
    model_config = ConfigDict(from_attributes=True)

    order_id: str
    item_name: str
    cost: float
    order_date: str
    delivery_date: str
    created_at: datetime | None = None


class MessageResponse(BaseModel):
    """Acknowledgment for create and delete."""
    message: str


class OrderUpdateResponse(BaseModel):
    """Acknowledgment plus the updated record."""
    message: str
    order: OrderResponse
