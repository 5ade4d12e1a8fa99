"""Domain-specific exceptions."""

from __future__ import annotations


class InvalidPixRequestError(ValueError):
    """Raised when a PIX payment request cannot be encoded."""


class InvalidAmountError(InvalidPixRequestError):
    """Raised when a payment amount is negative or not a finite number."""


class InvalidPixPayloadError(ValueError):
    """Raised when a PIX payload string is not well-formed TLV text."""


class PixNotConfiguredError(RuntimeError):
    """Raised when a PIX charge is requested but no merchant key is set."""


class EmptyCartError(ValueError):
    """Raised when checking out a cart with no items."""


class StoreClosedError(ValueError):
    """Raised when checking out while the store is manually closed."""


class ProductUnavailableError(ValueError):
    """Raised when an inactive product is ordered."""


class InvalidChangeError(ValueError):
    """Raised when a cash change amount does not cover the order total."""


class ProductNotFoundError(LookupError):
    """Raised when a product lookup fails."""


class ShippingRateNotFoundError(LookupError):
    """Raised when a shipping rate lookup fails."""
