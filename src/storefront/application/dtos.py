"""Data Transfer Objects for the storefront application layer."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities import CustomerInfo, OrderItem, OrderStatus, PaymentMethod
from ..domain.serializers import CommonSerializersMixin, DatetimeSerializerMixin


class CreateProductDTO(BaseModel):
    """DTO for creating a product."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Pomada Modeladora Premium",
                "category": "gels-pomadas",
                "price": "24.90",
                "image_url": "https://example.com/pomada.jpg",
                "description": "Pomada de alta fixação com acabamento matte",
                "active": True,
                "stock": 50,
            }
        }
    )

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


class UpdateProductDTO(BaseModel):
    """DTO for updating a product; omitted fields are left untouched."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(None, ge=0)
    image_url: Optional[str] = None
    image_url_2: Optional[str] = None
    image_url_3: Optional[str] = None
    description: Optional[str] = Field(None, max_length=2000)
    active: Optional[bool] = None
    stock: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=100)
    discount_percentage: Optional[Decimal] = Field(None, ge=0, le=100)
    discount_expires_at: Optional[datetime] = None


class ProductResponseDTO(CommonSerializersMixin, BaseModel):
    """DTO for returning product data."""

    id: UUID
    store: str
    name: str
    category: str
    price: Decimal
    effective_price: Decimal
    has_active_discount: bool
    image_url: str
    image_url_2: Optional[str]
    image_url_3: Optional[str]
    description: Optional[str]
    active: bool
    stock: int
    sku: Optional[str]
    discount_percentage: Optional[Decimal]
    discount_expires_at: Optional[datetime]
    created_at: datetime
    updated_at: Optional[datetime]


class RenameCategoryDTO(BaseModel):
    """DTO for moving every product of a category to a new name."""

    old_name: str = Field(..., min_length=1, max_length=100)
    new_name: str = Field(..., min_length=1, max_length=100)


class RenameCategoryResponseDTO(BaseModel):
    old_name: str
    new_name: str
    updated_products: int


class CreateShippingRateDTO(BaseModel):
    """DTO for creating a shipping rate."""

    store_name: str = Field(default="", max_length=100)
    state: str = Field(default="SP", min_length=2, max_length=2)
    city: str = Field(..., min_length=1, max_length=100)
    neighborhood: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0)


class UpdateShippingRateDTO(BaseModel):
    """DTO for updating a shipping rate."""

    store_name: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, min_length=2, max_length=2)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    neighborhood: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(None, ge=0)


class ShippingRateResponseDTO(CommonSerializersMixin, BaseModel):
    """DTO for returning shipping rate data."""

    id: UUID
    store_name: str
    state: str
    city: str
    neighborhood: str
    price: Decimal
    created_at: datetime
    updated_at: Optional[datetime]


class UpdateStoreSettingsDTO(BaseModel):
    """DTO for upserting store settings."""

    observation: Optional[str] = Field(None, max_length=1000)
    whatsapp_number: Optional[str] = Field(None, max_length=30)
    is_open_manually: Optional[bool] = None


class StoreSettingsResponseDTO(DatetimeSerializerMixin, BaseModel):
    """DTO for returning store settings."""

    store: str
    observation: str
    whatsapp_number: str
    is_open_manually: bool
    updated_at: Optional[datetime]


class OrderResponseDTO(CommonSerializersMixin, BaseModel):
    """DTO for returning order data."""

    id: UUID
    order_number: int
    store: str
    items: List[OrderItem]
    customer: CustomerInfo
    total_amount: Decimal
    total_discount: Decimal
    status: OrderStatus
    payment_method: Optional[PaymentMethod]
    change_for: Optional[Decimal]
    whatsapp_message: str
    shipping_city: Optional[str]
    shipping_neighborhood: Optional[str]
    shipping_cost: Decimal
    internal_comments: Optional[str]
    external_comments: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime]


class UpdateOrderStatusDTO(BaseModel):
    """DTO for moving an order to a new status."""

    status: OrderStatus


class UpdateOrderCommentsDTO(BaseModel):
    """DTO for updating order comments; omitted comments are kept."""

    internal_comments: Optional[str] = Field(None, max_length=2000)
    external_comments: Optional[str] = Field(None, max_length=2000)


class CheckoutItemDTO(BaseModel):
    product_id: UUID
    quantity: int = Field(..., ge=1, le=1000)


class CheckoutRequestDTO(BaseModel):
    """DTO for submitting a cart for checkout."""

    items: List[CheckoutItemDTO]
    customer: CustomerInfo
    shipping_rate_id: Optional[UUID] = Field(
        None, description="Delivery rate; omit for store pickup"
    )
    payment_method: PaymentMethod = "pix"
    change_for: Optional[Decimal] = Field(
        None, gt=0, description="Cash amount the customer pays with (cash_change only)"
    )


class CheckoutResponseDTO(BaseModel):
    """DTO returned after a successful checkout."""

    order: OrderResponseDTO
    whatsapp_message: str
    whatsapp_url: str
    pix_payload: Optional[str] = None


class CreatePixChargeDTO(BaseModel):
    """DTO for requesting a PIX copy-and-paste code."""

    amount: Decimal = Field(..., ge=0)
    transaction_id: Optional[str] = Field(None, min_length=1, max_length=25)


class PixChargeResponseDTO(BaseModel):
    """DTO carrying a generated PIX payload."""

    payload: str
    amount: Decimal
    transaction_id: str
