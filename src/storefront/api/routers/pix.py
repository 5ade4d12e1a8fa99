"""PIX charge API route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from prometheus_client import Counter

from ...application.dtos import CreatePixChargeDTO, PixChargeResponseDTO
from ...application.use_cases.pix import PixService
from ...domain.errors import PixNotConfiguredError
from ..dependencies import get_pix_service

router = APIRouter(prefix="/pix", tags=["pix"])

pix_charges_total = Counter(
    "pix_charges_total",
    "Total PIX payloads requested",
    ["status"],
)


@router.post(
    "/charges",
    response_model=PixChargeResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_pix_charge(
    charge_data: CreatePixChargeDTO,
    pix_service: PixService = Depends(get_pix_service),
) -> PixChargeResponseDTO:
    """Build a PIX copy-and-paste payload (also the QR code content)."""
    try:
        result = pix_service.create_charge(
            charge_data.amount, charge_data.transaction_id
        )
    except PixNotConfiguredError as e:
        pix_charges_total.labels(status="unavailable").inc()
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        )
    except ValueError as e:
        pix_charges_total.labels(status="client_error").inc()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    pix_charges_total.labels(status="success").inc()
    return result
