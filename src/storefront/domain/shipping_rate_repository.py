"""Shipping rate domain repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from .entities import ShippingRate


class ShippingRateRepository(ABC):
    """Abstract repository interface for ShippingRate entities."""

    @abstractmethod
    async def create(self, rate: ShippingRate) -> ShippingRate:
        pass

    @abstractmethod
    async def get_by_id(self, rate_id: UUID) -> Optional[ShippingRate]:
        pass

    @abstractmethod
    async def get_all(self) -> List[ShippingRate]:
        """Get all rates ordered by city, then neighborhood."""
        pass

    @abstractmethod
    async def update(self, rate: ShippingRate) -> ShippingRate:
        pass

    @abstractmethod
    async def delete(self, rate_id: UUID) -> bool:
        pass
