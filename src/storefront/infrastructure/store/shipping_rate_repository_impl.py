"""Shipping rate repository implementation over a storage abstraction."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from ...domain.entities import ShippingRate
from ...domain.shipping_rate_repository import ShippingRateRepository
from ..storage import KeyValueStore


class ShippingRateRepositoryImpl(ShippingRateRepository):
    """Shipping rate repository using a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def create(self, rate: ShippingRate) -> ShippingRate:
        await self.store.set(f"shipping_rate:{rate.id}", rate.model_dump_json())
        await self.store.zadd(
            "shipping_rates:all", {str(rate.id): rate.created_at.timestamp()}
        )
        return rate

    async def get_by_id(self, rate_id: UUID) -> Optional[ShippingRate]:
        data = await self.store.get(f"shipping_rate:{rate_id}")
        if not data:
            return None
        return ShippingRate.model_validate_json(data)

    async def get_all(self) -> List[ShippingRate]:
        ids = await self.store.zrevrange("shipping_rates:all", 0, -1)
        raws = await self.store.mget([f"shipping_rate:{rid}" for rid in ids])
        rates = [ShippingRate.model_validate_json(raw) for raw in raws if raw]
        return sorted(rates, key=lambda r: (r.city.lower(), r.neighborhood.lower()))

    async def update(self, rate: ShippingRate) -> ShippingRate:
        await self.store.set(f"shipping_rate:{rate.id}", rate.model_dump_json())
        return rate

    async def delete(self, rate_id: UUID) -> bool:
        removed = await self.store.delete(f"shipping_rate:{rate_id}")
        await self.store.zrem("shipping_rates:all", str(rate_id))
        return removed > 0
