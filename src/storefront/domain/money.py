from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Final


CENTS: Final[Decimal] = Decimal("0.01")
ZERO: Final[Decimal] = Decimal("0.00")


def quantize_money(value: Decimal) -> Decimal:
    """Round a monetary value to cents (half up)."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_brl(value: Decimal) -> str:
    """Render a value the way order messages show it: 'R$ 19.90'."""
    return f"R$ {format(quantize_money(value), 'f')}"
