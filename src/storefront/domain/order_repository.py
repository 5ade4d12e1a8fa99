"""Order domain repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from .entities import Order


class OrderRepository(ABC):
    """Abstract repository interface for Order entities."""

    @abstractmethod
    async def next_order_number(self, store: str) -> int:
        """Allocate the next sequential order number for a store."""
        pass

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Create a new order."""
        pass

    @abstractmethod
    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Get order by ID."""
        pass

    @abstractmethod
    async def get_by_ids(self, order_ids: Sequence[UUID]) -> List[Order]:
        """Get the existing orders among `order_ids`, newest first."""
        pass

    @abstractmethod
    async def get_all(self, store: str, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get a store's orders, newest first."""
        pass

    @abstractmethod
    async def get_by_status(
        self, store: str, status: str, skip: int = 0, limit: int = 100
    ) -> List[Order]:
        """Get a store's orders with a given status, newest first."""
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        """Update an existing order."""
        pass

    @abstractmethod
    async def delete(self, order_id: UUID) -> bool:
        """Delete an order."""
        pass
