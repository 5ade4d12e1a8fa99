"""Shipping rate use cases."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from ...domain.entities import ShippingRate
from ...domain.shipping_rate_repository import ShippingRateRepository
from ..dtos import (
    CreateShippingRateDTO,
    ShippingRateResponseDTO,
    UpdateShippingRateDTO,
)


class ShippingRateService:
    """Service for shipping rate operations."""

    def __init__(self, shipping_rate_repository: ShippingRateRepository):
        self.shipping_rate_repository = shipping_rate_repository

    async def create_rate(self, dto: CreateShippingRateDTO) -> ShippingRateResponseDTO:
        rate = ShippingRate(**dto.model_dump())
        created = await self.shipping_rate_repository.create(rate)
        return ShippingRateResponseDTO(**created.model_dump())

    async def get_rate_by_id(self, rate_id: UUID) -> Optional[ShippingRateResponseDTO]:
        rate = await self.shipping_rate_repository.get_by_id(rate_id)
        if not rate:
            return None
        return ShippingRateResponseDTO(**rate.model_dump())

    async def get_rates(self) -> List[ShippingRateResponseDTO]:
        """Get all rates ordered by city, then neighborhood."""
        rates = await self.shipping_rate_repository.get_all()
        return [ShippingRateResponseDTO(**r.model_dump()) for r in rates]

    async def update_rate(
        self, rate_id: UUID, dto: UpdateShippingRateDTO
    ) -> Optional[ShippingRateResponseDTO]:
        rate = await self.shipping_rate_repository.get_by_id(rate_id)
        if not rate:
            return None
        rate.update_details(**dto.model_dump(exclude_unset=True))
        updated = await self.shipping_rate_repository.update(rate)
        return ShippingRateResponseDTO(**updated.model_dump())

    async def delete_rate(self, rate_id: UUID) -> bool:
        return await self.shipping_rate_repository.delete(rate_id)
