"""Product repository implementation over a storage abstraction."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from ...domain.entities import Product
from ...domain.product_repository import ProductRepository
from ..storage import KeyValueStore


class ProductRepositoryImpl(ProductRepository):
    """Product repository using a KeyValueStore.

    Layout:
      product:<id>                              JSON document
      products:all:<store>                      zset, score = created_at
      products:by_category:<store>:<category>   zset, score = created_at
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def _load_many(self, ids: list[str]) -> List[Product]:
        raws = await self.store.mget([f"product:{pid}" for pid in ids])
        return [Product.model_validate_json(raw) for raw in raws if raw]

    async def create(self, product: Product) -> Product:
        await self.store.set(f"product:{product.id}", product.model_dump_json())

        created_ts = product.created_at.timestamp()
        await self.store.zadd(
            f"products:all:{product.store}", {str(product.id): created_ts}
        )
        await self.store.zadd(
            f"products:by_category:{product.store}:{product.category}",
            {str(product.id): created_ts},
        )
        return product

    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        data = await self.store.get(f"product:{product_id}")
        if not data:
            return None
        return Product.model_validate_json(data)

    async def get_all(self, store: str, skip: int = 0, limit: int = 100) -> List[Product]:
        ids = await self.store.zrevrange(f"products:all:{store}", skip, skip + limit - 1)
        return await self._load_many(ids)

    async def get_by_category(
        self, store: str, category: str, skip: int = 0, limit: int = 100
    ) -> List[Product]:
        key = f"products:by_category:{store}:{category}"
        ids = await self.store.zrevrange(key, skip, skip + limit - 1)
        return await self._load_many(ids)

    async def get_categories(self, store: str) -> List[str]:
        ids = await self.store.zrevrange(f"products:all:{store}", 0, -1)
        products = await self._load_many(ids)
        return sorted({p.category for p in products})

    async def update(self, product: Product) -> Product:
        product_key = f"product:{product.id}"
        existing_raw = await self.store.get(product_key)
        old_category: Optional[str] = None
        if existing_raw:
            old_category = Product.model_validate_json(existing_raw).category

        await self.store.set(product_key, product.model_dump_json())

        if old_category and old_category != product.category:
            await self.store.zrem(
                f"products:by_category:{product.store}:{old_category}",
                str(product.id),
            )
            await self.store.zadd(
                f"products:by_category:{product.store}:{product.category}",
                {str(product.id): product.created_at.timestamp()},
            )
        return product

    async def delete(self, product_id: UUID) -> bool:
        product_key = f"product:{product_id}"
        existing_raw = await self.store.get(product_key)
        if not existing_raw:
            return False
        product = Product.model_validate_json(existing_raw)

        await self.store.delete(product_key)
        await self.store.zrem(f"products:all:{product.store}", str(product_id))
        await self.store.zrem(
            f"products:by_category:{product.store}:{product.category}",
            str(product_id),
        )
        return True
