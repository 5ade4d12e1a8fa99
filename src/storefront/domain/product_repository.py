"""Product domain repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from .entities import Product


class ProductRepository(ABC):
    """Abstract repository interface for Product entities."""

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Create a new product."""
        pass

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """Get product by ID."""
        pass

    @abstractmethod
    async def get_all(self, store: str, skip: int = 0, limit: int = 100) -> List[Product]:
        """Get a store's products, newest first."""
        pass

    @abstractmethod
    async def get_by_category(
        self, store: str, category: str, skip: int = 0, limit: int = 100
    ) -> List[Product]:
        """Get a store's products in one category, newest first."""
        pass

    @abstractmethod
    async def get_categories(self, store: str) -> List[str]:
        """Get the distinct categories in use, sorted."""
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Update an existing product."""
        pass

    @abstractmethod
    async def delete(self, product_id: UUID) -> bool:
        """Delete a product."""
        pass
