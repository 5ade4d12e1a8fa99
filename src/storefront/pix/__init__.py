"""PIX static payment code encoding."""

from .crc import crc16_ccitt_false
from .payload import (
    DEFAULT_TRANSACTION_ID,
    PixPaymentRequest,
    encode_pix_payload,
    iter_tlv_fields,
    tlv_field,
    verify_pix_payload,
)

__all__ = [
    "DEFAULT_TRANSACTION_ID",
    "PixPaymentRequest",
    "crc16_ccitt_false",
    "encode_pix_payload",
    "iter_tlv_fields",
    "tlv_field",
    "verify_pix_payload",
]
