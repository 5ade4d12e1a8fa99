"""Shipping rate API routes."""

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from ...application.dtos import (
    CreateShippingRateDTO,
    ShippingRateResponseDTO,
    UpdateShippingRateDTO,
)
from ...application.use_cases.shipping_rate import ShippingRateService
from ..dependencies import get_shipping_rate_service

router = APIRouter(prefix="/shipping-rates", tags=["shipping"])


@router.post(
    "/", response_model=ShippingRateResponseDTO, status_code=status.HTTP_201_CREATED
)
async def create_shipping_rate(
    rate_data: CreateShippingRateDTO,
    rate_service: ShippingRateService = Depends(get_shipping_rate_service),
) -> ShippingRateResponseDTO:
    """Create a new shipping rate."""
    return await rate_service.create_rate(rate_data)


@router.get("/", response_model=List[ShippingRateResponseDTO])
async def get_shipping_rates(
    rate_service: ShippingRateService = Depends(get_shipping_rate_service),
) -> List[ShippingRateResponseDTO]:
    """Get all shipping rates ordered by city and neighborhood."""
    return await rate_service.get_rates()


@router.get("/{rate_id}", response_model=ShippingRateResponseDTO)
async def get_shipping_rate(
    rate_id: UUID,
    rate_service: ShippingRateService = Depends(get_shipping_rate_service),
) -> ShippingRateResponseDTO:
    rate = await rate_service.get_rate_by_id(rate_id)
    if not rate:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Shipping rate not found"
        )
    return rate


@router.put("/{rate_id}", response_model=ShippingRateResponseDTO)
async def update_shipping_rate(
    rate_id: UUID,
    rate_data: UpdateShippingRateDTO,
    rate_service: ShippingRateService = Depends(get_shipping_rate_service),
) -> ShippingRateResponseDTO:
    rate = await rate_service.update_rate(rate_id, rate_data)
    if not rate:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Shipping rate not found"
        )
    return rate


@router.delete("/{rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shipping_rate(
    rate_id: UUID,
    rate_service: ShippingRateService = Depends(get_shipping_rate_service),
):
    success = await rate_service.delete_rate(rate_id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Shipping rate not found"
        )
