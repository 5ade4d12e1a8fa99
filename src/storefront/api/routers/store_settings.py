"""Store settings API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...application.dtos import StoreSettingsResponseDTO, UpdateStoreSettingsDTO
from ...application.use_cases.store_settings import StoreSettingsService
from ..dependencies import get_store_settings_service

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=StoreSettingsResponseDTO)
async def get_store_settings(
    settings_service: StoreSettingsService = Depends(get_store_settings_service),
) -> StoreSettingsResponseDTO:
    """Get the store settings (defaults when never saved)."""
    return await settings_service.get_settings()


@router.put("", response_model=StoreSettingsResponseDTO)
async def update_store_settings(
    settings_data: UpdateStoreSettingsDTO,
    settings_service: StoreSettingsService = Depends(get_store_settings_service),
) -> StoreSettingsResponseDTO:
    """Update opening status, schedule observation and WhatsApp number."""
    try:
        return await settings_service.update_settings(settings_data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
