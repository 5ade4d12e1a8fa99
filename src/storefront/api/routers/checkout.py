"""Checkout API route."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from prometheus_client import Counter, Histogram

from ...application.dtos import CheckoutRequestDTO, CheckoutResponseDTO
from ...application.use_cases.checkout import CheckoutService
from ...domain.errors import (
    PixNotConfiguredError,
    ProductNotFoundError,
    ShippingRateNotFoundError,
)
from ..dependencies import get_checkout_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])

checkout_requests_total = Counter(
    "checkout_requests_total",
    "Total checkout requests processed",
    ["status"],
)
checkout_request_duration_milliseconds = Histogram(
    "checkout_request_duration_milliseconds",
    "Wall time to process a checkout request (ms)",
    ["status"],
)


def _observe(outcome: str, start_time: float) -> None:
    checkout_requests_total.labels(status=outcome).inc()
    elapsed = (time.perf_counter() - start_time) * 1000
    checkout_request_duration_milliseconds.labels(status=outcome).observe(elapsed)


@router.post(
    "", response_model=CheckoutResponseDTO, status_code=status.HTTP_201_CREATED
)
async def checkout(
    checkout_data: CheckoutRequestDTO,
    checkout_service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutResponseDTO:
    """Create an order from a cart and return the WhatsApp handoff link."""
    start_time = time.perf_counter()
    try:
        result = await checkout_service.checkout(checkout_data)
        _observe("success", start_time)
        return result
    except (ProductNotFoundError, ShippingRateNotFoundError) as e:
        _observe("client_error", start_time)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        _observe("client_error", start_time)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PixNotConfiguredError as e:
        _observe("server_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        )
    except Exception as e:
        logger.exception("Internal server error while processing checkout: %s", e)
        _observe("server_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while processing checkout",
        )
