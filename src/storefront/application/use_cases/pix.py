"""PIX charge use case."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...domain.errors import PixNotConfiguredError
from ...pix import DEFAULT_TRANSACTION_ID, PixPaymentRequest, encode_pix_payload
from ..dtos import PixChargeResponseDTO


class PixService:
    """Builds static PIX payloads for the store's configured merchant account."""

    def __init__(self, pix_key: str, merchant_name: str, merchant_city: str):
        self.pix_key = pix_key
        self.merchant_name = merchant_name
        self.merchant_city = merchant_city

    @property
    def enabled(self) -> bool:
        return bool(self.pix_key)

    def payment_request(
        self, amount: Decimal, transaction_id: Optional[str] = None
    ) -> PixPaymentRequest:
        """Validated encoder input for `amount`; encoding it cannot fail."""
        if not self.enabled:
            raise PixNotConfiguredError("PIX key is not configured for this store")
        return PixPaymentRequest(
            payee_key=self.pix_key,
            payee_name=self.merchant_name,
            payee_city=self.merchant_city,
            amount=amount,
            transaction_id=transaction_id or DEFAULT_TRANSACTION_ID,
        )

    def create_charge(
        self, amount: Decimal, transaction_id: Optional[str] = None
    ) -> PixChargeResponseDTO:
        request = self.payment_request(amount, transaction_id)
        return PixChargeResponseDTO(
            payload=encode_pix_payload(request),
            amount=request.amount,
            transaction_id=request.transaction_id,
        )
