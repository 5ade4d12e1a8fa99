"""Checkout use case: cart -> persisted order + WhatsApp handoff (+ PIX)."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timezone
from typing import Optional

from ...domain.cart import Cart
from ...domain.entities import Order, ShippingRate
from ...domain.errors import (
    EmptyCartError,
    InvalidChangeError,
    ProductNotFoundError,
    ProductUnavailableError,
    ShippingRateNotFoundError,
    StoreClosedError,
)
from ...domain.money import ZERO, quantize_money
from ...domain.order_repository import OrderRepository
from ...domain.product_repository import ProductRepository
from ...domain.shipping_rate_repository import ShippingRateRepository
from ...messaging.whatsapp import build_order_message, build_whatsapp_url
from ...pix import encode_pix_payload
from ..dtos import CheckoutRequestDTO, CheckoutResponseDTO
from .order import to_order_response
from .pix import PixService
from .store_settings import StoreSettingsService

logger = logging.getLogger(__name__)


def pix_transaction_id(order_number: int) -> str:
    """Reference printed in the PIX payload so payments can be matched."""
    return f"PED{order_number}"


class CheckoutService:
    """Turns a submitted cart into an order and its handoff artifacts."""

    def __init__(
        self,
        store: str,
        product_repository: ProductRepository,
        order_repository: OrderRepository,
        shipping_rate_repository: ShippingRateRepository,
        settings_service: StoreSettingsService,
        pix_service: PixService,
    ):
        self.store = store
        self.product_repository = product_repository
        self.order_repository = order_repository
        self.shipping_rate_repository = shipping_rate_repository
        self.settings_service = settings_service
        self.pix_service = pix_service

    async def _build_cart(self, dto: CheckoutRequestDTO) -> Cart:
        cart = Cart()
        for line in dto.items:
            product = await self.product_repository.get_by_id(line.product_id)
            if product is None or product.store != self.store:
                raise ProductNotFoundError(f"Product {line.product_id} not found")
            if not product.active:
                raise ProductUnavailableError(
                    f"Product '{product.name}' is not available"
                )
            cart.add_item(product, line.quantity)
        return cart

    async def _resolve_shipping(
        self, dto: CheckoutRequestDTO
    ) -> Optional[ShippingRate]:
        if dto.shipping_rate_id is None:
            return None
        rate = await self.shipping_rate_repository.get_by_id(dto.shipping_rate_id)
        if rate is None:
            raise ShippingRateNotFoundError(
                f"Shipping rate {dto.shipping_rate_id} not found"
            )
        return rate

    async def checkout(
        self, dto: CheckoutRequestDTO, now: Optional[datetime] = None
    ) -> CheckoutResponseDTO:
        """Validate the cart, persist the order and build the handoff links."""
        now = now or datetime.now(timezone.utc)
        if not dto.items:
            raise EmptyCartError("Cannot check out an empty cart")

        store_settings = await self.settings_service.load()
        if not store_settings.is_open_manually:
            raise StoreClosedError(
                store_settings.observation or "The store is not accepting orders"
            )

        cart = await self._build_cart(dto)
        shipping_rate = await self._resolve_shipping(dto)
        shipping_cost = (
            quantize_money(shipping_rate.price) if shipping_rate is not None else ZERO
        )
        total = cart.total(shipping_cost, now=now)

        change_for = None
        if dto.payment_method == "cash_change":
            if dto.change_for is None or dto.change_for < total:
                raise InvalidChangeError(
                    f"Change must be requested for at least the order total ({total})"
                )
            change_for = quantize_money(dto.change_for)

        # Must fail before an order number is reserved.
        pix_request = None
        if dto.payment_method == "pix" and self.pix_service.enabled:
            pix_request = self.pix_service.payment_request(total)

        order = Order(
            order_number=await self.order_repository.next_order_number(self.store),
            store=self.store,
            items=cart.to_order_items(now),
            customer=dto.customer,
            total_amount=total,
            total_discount=cart.total_discount(now),
            payment_method=dto.payment_method,
            change_for=change_for,
            shipping_city=shipping_rate.city if shipping_rate else None,
            shipping_neighborhood=shipping_rate.neighborhood if shipping_rate else None,
            shipping_cost=shipping_cost,
            created_at=now,
        )
        order.whatsapp_message = build_order_message(order)

        pix_payload = None
        if pix_request is not None:
            pix_payload = encode_pix_payload(
                dataclasses.replace(
                    pix_request,
                    transaction_id=pix_transaction_id(order.order_number),
                )
            )

        created = await self.order_repository.create(order)
        logger.info(
            "Order #%s created for store %s (total %s, %d items)",
            created.order_number,
            self.store,
            created.total_amount,
            cart.item_count(),
        )

        return CheckoutResponseDTO(
            order=to_order_response(created),
            whatsapp_message=created.whatsapp_message,
            whatsapp_url=build_whatsapp_url(
                store_settings.whatsapp_number, created.whatsapp_message
            ),
            pix_payload=pix_payload,
        )
