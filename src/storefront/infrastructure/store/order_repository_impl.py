"""Order repository implementation over a storage abstraction."""

from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

from ...domain.entities import Order
from ...domain.order_repository import OrderRepository
from ..storage import KeyValueStore


class OrderRepositoryImpl(OrderRepository):
    """Order repository using a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def _load_many(self, ids: Sequence[str]) -> List[Order]:
        raws = await self.store.mget([f"order:{oid}" for oid in ids])
        return [Order.model_validate_json(raw) for raw in raws if raw]

    async def next_order_number(self, store: str) -> int:
        return await self.store.incr(f"orders:seq:{store}")

    async def create(self, order: Order) -> Order:
        await self.store.set(f"order:{order.id}", order.model_dump_json())

        created_ts = order.created_at.timestamp()
        await self.store.zadd(f"orders:all:{order.store}", {str(order.id): created_ts})
        await self.store.zadd(
            f"orders:by_status:{order.store}:{order.status}",
            {str(order.id): created_ts},
        )
        return order

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        data = await self.store.get(f"order:{order_id}")
        if not data:
            return None
        return Order.model_validate_json(data)

    async def get_by_ids(self, order_ids: Sequence[UUID]) -> List[Order]:
        if not order_ids:
            return []
        orders = await self._load_many([str(oid) for oid in order_ids])
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    async def get_all(self, store: str, skip: int = 0, limit: int = 100) -> List[Order]:
        ids = await self.store.zrevrange(f"orders:all:{store}", skip, skip + limit - 1)
        return await self._load_many(ids)

    async def get_by_status(
        self, store: str, status: str, skip: int = 0, limit: int = 100
    ) -> List[Order]:
        key = f"orders:by_status:{store}:{status}"
        ids = await self.store.zrevrange(key, skip, skip + limit - 1)
        return await self._load_many(ids)

    async def update(self, order: Order) -> Order:
        order_key = f"order:{order.id}"
        existing_raw = await self.store.get(order_key)
        old_status: Optional[str] = None
        if existing_raw:
            old_status = Order.model_validate_json(existing_raw).status

        await self.store.set(order_key, order.model_dump_json())

        if old_status and old_status != order.status:
            await self.store.zrem(
                f"orders:by_status:{order.store}:{old_status}", str(order.id)
            )
            await self.store.zadd(
                f"orders:by_status:{order.store}:{order.status}",
                {str(order.id): order.created_at.timestamp()},
            )
        return order

    async def delete(self, order_id: UUID) -> bool:
        order_key = f"order:{order_id}"
        existing_raw = await self.store.get(order_key)
        if not existing_raw:
            return False
        order = Order.model_validate_json(existing_raw)

        await self.store.delete(order_key)
        await self.store.zrem(f"orders:all:{order.store}", str(order_id))
        await self.store.zrem(
            f"orders:by_status:{order.store}:{order.status}", str(order_id)
        )
        return True
