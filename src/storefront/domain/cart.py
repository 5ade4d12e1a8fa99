"""Shopping cart aggregate.

The cart is never persisted server-side: checkout rebuilds it from the
submitted product ids so prices always come from the catalog.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .entities import OrderItem, Product
from .money import ZERO, quantize_money


class CartItem(BaseModel):
    """A product and how many units of it are being ordered."""

    product: Product
    quantity: int = Field(..., ge=1)

    def line_total(self, now: Optional[datetime] = None) -> Decimal:
        return quantize_money(self.product.effective_price(now) * self.quantity)

    def line_discount(self, now: Optional[datetime] = None) -> Decimal:
        full = quantize_money(self.product.price * self.quantity)
        return full - self.line_total(now)

    def to_order_item(self, now: Optional[datetime] = None) -> OrderItem:
        return OrderItem(
            product_id=self.product.id,
            product_name=self.product.name,
            quantity=self.quantity,
            unit_price=self.product.effective_price(now),
            discount_percentage=self.product.active_discount_percentage(now),
            subtotal=self.line_total(now),
        )


class Cart(BaseModel):
    """In-progress product selection."""

    items: List[CartItem] = Field(default_factory=list)

    def _find(self, product_id: UUID) -> Optional[CartItem]:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add units of `product`, merging with an existing line."""
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        existing = self._find(product.id)
        if existing is not None:
            existing.quantity += quantity
        else:
            self.items.append(CartItem(product=product, quantity=quantity))

    def remove_item(self, product_id: UUID) -> None:
        self.items = [i for i in self.items if i.product.id != product_id]

    def update_quantity(self, product_id: UUID, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(product_id)
            return
        existing = self._find(product_id)
        if existing is not None:
            existing.quantity = quantity

    def clear(self) -> None:
        self.items = []

    @property
    def is_empty(self) -> bool:
        return not self.items

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def subtotal(self, now: Optional[datetime] = None) -> Decimal:
        return sum((item.line_total(now) for item in self.items), ZERO)

    def total_discount(self, now: Optional[datetime] = None) -> Decimal:
        return sum((item.line_discount(now) for item in self.items), ZERO)

    def total(
        self, shipping_cost: Decimal = ZERO, now: Optional[datetime] = None
    ) -> Decimal:
        return quantize_money(self.subtotal(now) + shipping_cost)

    def to_order_items(self, now: Optional[datetime] = None) -> List[OrderItem]:
        return [item.to_order_item(now) for item in self.items]
