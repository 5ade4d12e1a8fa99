"""Order administration use cases."""

from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

from ...domain.entities import Order
from ...domain.order_repository import OrderRepository
from ..dtos import OrderResponseDTO, UpdateOrderCommentsDTO, UpdateOrderStatusDTO


def to_order_response(order: Order) -> OrderResponseDTO:
    return OrderResponseDTO(**order.model_dump())


class OrderService:
    """Service for order listing and back-office updates."""

    def __init__(self, order_repository: OrderRepository, store: str):
        self.order_repository = order_repository
        self.store = store

    async def _get_own(self, order_id: UUID) -> Optional[Order]:
        order = await self.order_repository.get_by_id(order_id)
        if not order or order.store != self.store:
            return None
        return order

    async def get_orders(
        self, skip: int = 0, limit: int = 100, status: Optional[str] = None
    ) -> List[OrderResponseDTO]:
        """Get orders, newest first, optionally filtered by status."""
        if status:
            orders = await self.order_repository.get_by_status(
                self.store, status, skip=skip, limit=limit
            )
        else:
            orders = await self.order_repository.get_all(
                self.store, skip=skip, limit=limit
            )
        return [to_order_response(o) for o in orders]

    async def get_order_by_id(self, order_id: UUID) -> Optional[OrderResponseDTO]:
        order = await self._get_own(order_id)
        if not order:
            return None
        return to_order_response(order)

    async def get_orders_by_ids(
        self, order_ids: Sequence[UUID]
    ) -> List[OrderResponseDTO]:
        """Get the known orders among `order_ids`; unknown ids are skipped."""
        orders = await self.order_repository.get_by_ids(order_ids)
        return [to_order_response(o) for o in orders if o.store == self.store]

    async def update_status(
        self, order_id: UUID, dto: UpdateOrderStatusDTO
    ) -> Optional[OrderResponseDTO]:
        order = await self._get_own(order_id)
        if not order:
            return None
        order.update_status(dto.status)
        updated = await self.order_repository.update(order)
        return to_order_response(updated)

    async def update_comments(
        self, order_id: UUID, dto: UpdateOrderCommentsDTO
    ) -> Optional[OrderResponseDTO]:
        order = await self._get_own(order_id)
        if not order:
            return None
        order.set_comments(
            internal_comments=dto.internal_comments,
            external_comments=dto.external_comments,
        )
        updated = await self.order_repository.update(order)
        return to_order_response(updated)

    async def delete_order(self, order_id: UUID) -> bool:
        order = await self._get_own(order_id)
        if not order:
            return False
        return await self.order_repository.delete(order_id)
