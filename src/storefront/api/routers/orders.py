"""Order administration API routes."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...application.dtos import (
    OrderResponseDTO,
    UpdateOrderCommentsDTO,
    UpdateOrderStatusDTO,
)
from ...application.use_cases.order import OrderService
from ..dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/", response_model=List[OrderResponseDTO])
async def get_orders(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    status_filter: Optional[str] = Query(
        None, alias="status", description="Filter by order status"
    ),
    ids: Optional[List[UUID]] = Query(
        None, description="Only return these orders (customer order history)"
    ),
    order_service: OrderService = Depends(get_order_service),
) -> List[OrderResponseDTO]:
    """Get orders, newest first."""
    if ids:
        return await order_service.get_orders_by_ids(ids)
    return await order_service.get_orders(skip=skip, limit=limit, status=status_filter)


@router.get("/{order_id}", response_model=OrderResponseDTO)
async def get_order(
    order_id: UUID, order_service: OrderService = Depends(get_order_service)
) -> OrderResponseDTO:
    """Get order by ID."""
    order = await order_service.get_order_by_id(order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Order not found"
        )
    return order


@router.patch("/{order_id}/status", response_model=OrderResponseDTO)
async def update_order_status(
    order_id: UUID,
    status_data: UpdateOrderStatusDTO,
    order_service: OrderService = Depends(get_order_service),
) -> OrderResponseDTO:
    """Move an order to a new status."""
    order = await order_service.update_status(order_id, status_data)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Order not found"
        )
    return order


@router.patch("/{order_id}/comments", response_model=OrderResponseDTO)
async def update_order_comments(
    order_id: UUID,
    comments_data: UpdateOrderCommentsDTO,
    order_service: OrderService = Depends(get_order_service),
) -> OrderResponseDTO:
    """Update internal and/or customer-facing comments."""
    order = await order_service.update_comments(order_id, comments_data)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Order not found"
        )
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: UUID, order_service: OrderService = Depends(get_order_service)
):
    """Delete an order."""
    success = await order_service.delete_order(order_id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Order not found"
        )
