"""Catalog use cases."""

from __future__ import annotations

from datetime import datetime
from typing import Awaitable, Callable, List, Optional
from uuid import UUID

from ...domain.entities import Product
from ...domain.product_repository import ProductRepository
from ..dtos import (
    CreateProductDTO,
    ProductResponseDTO,
    RenameCategoryDTO,
    RenameCategoryResponseDTO,
    UpdateProductDTO,
)

# Upper bound used when a whole category has to be walked.
_CATEGORY_SCAN_LIMIT = 10_000
# Index page size used when filters are applied after loading.
_SCAN_BATCH_SIZE = 100


def to_product_response(
    product: Product, now: Optional[datetime] = None
) -> ProductResponseDTO:
    return ProductResponseDTO(
        **product.model_dump(),
        effective_price=product.effective_price(now),
        has_active_discount=product.has_active_discount(now),
    )


class ProductService:
    """Service for catalog operations scoped to one store."""

    def __init__(self, product_repository: ProductRepository, store: str):
        self.product_repository = product_repository
        self.store = store

    async def create_product(self, dto: CreateProductDTO) -> ProductResponseDTO:
        """Create a new product."""
        product = Product(store=self.store, **dto.model_dump())
        created = await self.product_repository.create(product)
        return to_product_response(created)

    async def get_product_by_id(self, product_id: UUID) -> Optional[ProductResponseDTO]:
        """Get product by ID."""
        product = await self.product_repository.get_by_id(product_id)
        if not product or product.store != self.store:
            return None
        return to_product_response(product)

    async def get_products(
        self,
        skip: int = 0,
        limit: int = 100,
        category: Optional[str] = None,
        active_only: bool = False,
        search: Optional[str] = None,
    ) -> List[ProductResponseDTO]:
        """Get products, newest first, optionally filtered.

        `search` matches product names case-insensitively. `skip` and
        `limit` apply to the filtered result.
        """
        fetch = self._page_fetcher(category)
        needle = search.strip().casefold() if search else ""
        if not active_only and not needle:
            products = await fetch(skip, limit)
        else:

            def matches(product: Product) -> bool:
                if active_only and not product.active:
                    return False
                return needle in product.name.casefold()

            products = await self._scan(fetch, matches, skip, limit)
        return [to_product_response(p) for p in products]

    def _page_fetcher(
        self, category: Optional[str]
    ) -> Callable[[int, int], Awaitable[List[Product]]]:
        async def fetch(skip: int, limit: int) -> List[Product]:
            if category:
                return await self.product_repository.get_by_category(
                    self.store, category, skip=skip, limit=limit
                )
            return await self.product_repository.get_all(
                self.store, skip=skip, limit=limit
            )

        return fetch

    async def _scan(
        self,
        fetch: Callable[[int, int], Awaitable[List[Product]]],
        matches: Callable[[Product], bool],
        skip: int,
        limit: int,
    ) -> List[Product]:
        """Walk the index in batches until `limit` matches past `skip` are found."""
        found: List[Product] = []
        skipped = 0
        offset = 0
        while len(found) < limit:
            batch = await fetch(offset, _SCAN_BATCH_SIZE)
            if not batch:
                break
            for product in batch:
                if not matches(product):
                    continue
                if skipped < skip:
                    skipped += 1
                    continue
                found.append(product)
                if len(found) == limit:
                    break
            offset += _SCAN_BATCH_SIZE
        return found

    async def get_categories(self) -> List[str]:
        return await self.product_repository.get_categories(self.store)

    async def update_product(
        self, product_id: UUID, dto: UpdateProductDTO
    ) -> Optional[ProductResponseDTO]:
        """Update product details."""
        product = await self.product_repository.get_by_id(product_id)
        if not product or product.store != self.store:
            return None

        product.update_details(**dto.model_dump(exclude_unset=True))
        updated = await self.product_repository.update(product)
        return to_product_response(updated)

    async def delete_product(self, product_id: UUID) -> bool:
        """Delete a product by ID."""
        product = await self.product_repository.get_by_id(product_id)
        if not product or product.store != self.store:
            return False
        return await self.product_repository.delete(product_id)

    async def rename_category(self, dto: RenameCategoryDTO) -> RenameCategoryResponseDTO:
        """Move every product of `old_name` to `new_name`."""
        if dto.old_name == dto.new_name:
            raise ValueError("New category name must differ from the current one")

        products = await self.product_repository.get_by_category(
            self.store, dto.old_name, skip=0, limit=_CATEGORY_SCAN_LIMIT
        )
        for product in products:
            product.update_details(category=dto.new_name)
            await self.product_repository.update(product)

        return RenameCategoryResponseDTO(
            old_name=dto.old_name,
            new_name=dto.new_name,
            updated_products=len(products),
        )
