"""Storefront domain entities: Product, ShippingRate, Order and StoreSettings."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Literal, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .money import ZERO, quantize_money
from .serializers import CommonSerializersMixin, DatetimeSerializerMixin


OrderStatus = Literal["pending", "processing", "sent", "delivered", "cancelled"]
PaymentMethod = Literal["pix", "card", "cash_exact", "cash_change"]

ORDER_STATUSES: tuple[str, ...] = (
    "pending",
    "processing",
    "sent",
    "delivered",
    "cancelled",
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


_CLEARABLE_PRODUCT_FIELDS = frozenset(
    {
        "image_url_2",
        "image_url_3",
        "description",
        "sku",
        "discount_percentage",
        "discount_expires_at",
    }
)


class Product(CommonSerializersMixin, BaseModel):
    """Catalog product."""

    id: UUID = Field(default_factory=uuid4)
    store: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0)
    image_url: str = ""
    image_url_2: Optional[str] = None
    image_url_3: Optional[str] = None
    description: Optional[str] = Field(None, max_length=2000)
    active: bool = True
    stock: int = Field(default=0, ge=0)
    sku: Optional[str] = Field(None, max_length=100)
    discount_percentage: Optional[Decimal] = Field(None, ge=0, le=100)
    discount_expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None

    def has_active_discount(self, now: Optional[datetime] = None) -> bool:
        """A discount applies while its percentage is positive and not expired."""
        if not self.discount_percentage or self.discount_percentage <= 0:
            return False
        if self.discount_expires_at is None:
            return True
        now = now or _utcnow()
        expires_at = self.discount_expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at > now

    def active_discount_percentage(self, now: Optional[datetime] = None) -> Decimal:
        if self.has_active_discount(now):
            return self.discount_percentage or Decimal(0)
        return Decimal(0)

    def effective_price(self, now: Optional[datetime] = None) -> Decimal:
        """Unit price actually charged, discount applied."""
        pct = self.active_discount_percentage(now)
        if not pct:
            return quantize_money(self.price)
        return quantize_money(self.price * (1 - pct / Decimal(100)))

    def update_details(self, **changes: object) -> None:
        """Apply the provided fields and stamp `updated_at`.

        None only clears optional fields; for required ones it is ignored.
        """
        for name, value in changes.items():
            if value is not None or name in _CLEARABLE_PRODUCT_FIELDS:
                setattr(self, name, value)
        self.updated_at = _utcnow()


class ShippingRate(CommonSerializersMixin, BaseModel):
    """Delivery price for a city/neighborhood pair."""

    id: UUID = Field(default_factory=uuid4)
    store_name: str = Field(default="", max_length=100)
    state: str = Field(default="SP", min_length=2, max_length=2)
    city: str = Field(..., min_length=1, max_length=100)
    neighborhood: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"{self.city} - {self.neighborhood}"

    def update_details(self, **changes: object) -> None:
        for name, value in changes.items():
            if value is not None:
                setattr(self, name, value)
        self.updated_at = _utcnow()


class CustomerInfo(BaseModel):
    """Buyer contact and delivery details collected at checkout."""

    model_config = ConfigDict(str_strip_whitespace=True)

    responsible_name: str = Field(..., min_length=2, max_length=100)
    business_name: Optional[str] = Field(None, max_length=100)
    address: str = Field(..., min_length=5, max_length=200)
    complement: Optional[str] = Field(None, max_length=200)
    phone: str = Field(..., min_length=9, max_length=20)
    email: EmailStr = Field(..., max_length=100)
    order_notes: Optional[str] = Field(None, max_length=1000)


class OrderItem(BaseModel):
    """Order line frozen at checkout time."""

    product_id: UUID
    product_name: str
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0)
    discount_percentage: Decimal = Field(default=Decimal(0), ge=0, le=100)
    subtotal: Decimal = Field(..., ge=0)


class Order(CommonSerializersMixin, BaseModel):
    """Persisted order record."""

    id: UUID = Field(default_factory=uuid4)
    order_number: int = Field(..., ge=1)
    store: str
    items: List[OrderItem] = Field(..., min_length=1)
    customer: CustomerInfo
    total_amount: Decimal = Field(..., ge=0)
    total_discount: Decimal = Field(default=ZERO, ge=0)
    status: OrderStatus = "pending"
    payment_method: Optional[PaymentMethod] = None
    change_for: Optional[Decimal] = Field(None, ge=0)
    whatsapp_message: str = ""
    shipping_city: Optional[str] = None
    shipping_neighborhood: Optional[str] = None
    shipping_cost: Decimal = Field(default=ZERO, ge=0)
    internal_comments: Optional[str] = None
    external_comments: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None

    def update_status(self, status: OrderStatus) -> None:
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        self.status = status
        self.updated_at = _utcnow()

    def set_comments(
        self,
        internal_comments: Optional[str] = None,
        external_comments: Optional[str] = None,
    ) -> None:
        """Replace whichever comment was provided; None leaves it untouched."""
        if internal_comments is not None:
            self.internal_comments = internal_comments
        if external_comments is not None:
            self.external_comments = external_comments
        self.updated_at = _utcnow()


class StoreSettings(DatetimeSerializerMixin, BaseModel):
    """Per-store operational settings."""

    store: str
    observation: str = Field(default="", max_length=1000)
    whatsapp_number: str = Field(..., min_length=8, max_length=20)
    is_open_manually: bool = True
    updated_at: Optional[datetime] = None

    @field_validator("whatsapp_number", mode="before")
    @classmethod
    def keep_digits_only(cls, v: object) -> object:
        if isinstance(v, str):
            return re.sub(r"\D", "", v)
        return v

    def touch(self) -> None:
        self.updated_at = _utcnow()
