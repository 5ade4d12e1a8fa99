"""Static PIX payment code (BR Code) encoder.

The payload is a sequence of EMV tag-length-value fields:

    000201                       payload format indicator
    26..                         merchant account info (GUI + payee key)
    52040000                     merchant category code
    5303986                      currency (BRL)
    54..                         amount, two decimals
    5802BR                       country code
    59..                         merchant name (max 25 chars)
    60..                         merchant city (max 15 chars)
    62..                         additional data (transaction id)
    6304XXXX                     CRC-16/CCITT-FALSE over everything before XXXX

Lengths are decimal character counts, so every value is kept ASCII.
"""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Final, Iterator, Union

from ..domain.errors import (
    InvalidAmountError,
    InvalidPixPayloadError,
    InvalidPixRequestError,
)
from .crc import crc16_ccitt_false


PAYLOAD_FORMAT_INDICATOR: Final[str] = "000201"
PIX_GUI: Final[str] = "BR.GOV.BCB.PIX"
MERCHANT_CATEGORY_CODE: Final[str] = "52040000"
TRANSACTION_CURRENCY: Final[str] = "5303986"
COUNTRY_CODE: Final[str] = "5802BR"
CRC_HEADER: Final[str] = "6304"

MAX_FIELD_LENGTH: Final[int] = 99
MAX_NAME_LENGTH: Final[int] = 25
MAX_CITY_LENGTH: Final[int] = 15
DEFAULT_TRANSACTION_ID: Final[str] = "***"

# Nested sub-fields must leave room for their own 4-character headers.
MAX_KEY_LENGTH: Final[int] = MAX_FIELD_LENGTH - len(f"0014{PIX_GUI}") - 4
MAX_TRANSACTION_ID_LENGTH: Final[int] = MAX_FIELD_LENGTH - 4

_CENTS = Decimal("0.01")

AmountLike = Union[Decimal, int, float, str]


def tlv_field(tag: str, value: str) -> str:
    """Format a single `<tag><len><value>` field."""
    if len(value) > MAX_FIELD_LENGTH:
        raise InvalidPixRequestError(
            f"Field {tag} value has {len(value)} characters; "
            f"at most {MAX_FIELD_LENGTH} fit in a two-digit length"
        )
    return f"{tag}{len(value):02d}{value}"


def transliterate(text: str) -> str:
    """Strip accents so that 'São Paulo' becomes 'Sao Paulo'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _require_ascii(field_name: str, value: str) -> str:
    if not value.isascii():
        raise InvalidPixRequestError(
            f"{field_name} must contain only ASCII characters: {value!r}"
        )
    return value


def _coerce_amount(value: AmountLike) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError("Amount must be a number")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidAmountError(f"Amount must be finite, got {value}")
        # str() keeps the shortest repr, so 19.9 stays 19.9 and not 19.899...
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}")
    # Integer digits + ".00" must fit in tag 54.
    if amount and amount.adjusted() > MAX_FIELD_LENGTH - 4:
        raise InvalidAmountError(f"Amount is too large to encode: {amount}")
    with localcontext() as ctx:
        ctx.prec = MAX_FIELD_LENGTH + 1
        amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if amount == 0:
        # normalizes "-0" so it never renders as "-0.00"
        amount = Decimal("0.00")
    if len(format(amount, "f")) > MAX_FIELD_LENGTH:
        raise InvalidAmountError(f"Amount is too large to encode: {amount}")
    return amount


@dataclass(frozen=True)
class PixPaymentRequest:
    """Immutable input of the PIX encoder.

    Names and cities are transliterated to ASCII at construction; keys and
    transaction ids must already be ASCII. Truncation of name and city
    happens at encoding time so the request keeps the full values. Amounts
    are stored rounded to cents. A request that constructs always encodes.
    """

    payee_key: str
    payee_name: str
    payee_city: str
    amount: Decimal
    transaction_id: str = DEFAULT_TRANSACTION_ID

    def __post_init__(self) -> None:
        for field_name in ("payee_key", "payee_name", "payee_city", "transaction_id"):
            value = getattr(self, field_name)
            if value is None:
                raise InvalidPixRequestError(f"{field_name} is required")
            if not isinstance(value, str):
                raise InvalidPixRequestError(f"{field_name} must be a string")
        if self.amount is None:
            raise InvalidAmountError("amount is required")

        _require_ascii("payee_key", self.payee_key)
        _require_ascii("transaction_id", self.transaction_id)
        if len(self.payee_key) > MAX_KEY_LENGTH:
            raise InvalidPixRequestError(
                f"payee_key must have at most {MAX_KEY_LENGTH} characters"
            )
        if len(self.transaction_id) > MAX_TRANSACTION_ID_LENGTH:
            raise InvalidPixRequestError(
                f"transaction_id must have at most {MAX_TRANSACTION_ID_LENGTH} characters"
            )

        object.__setattr__(
            self,
            "payee_name",
            _require_ascii("payee_name", transliterate(self.payee_name)),
        )
        object.__setattr__(
            self,
            "payee_city",
            _require_ascii("payee_city", transliterate(self.payee_city)),
        )
        object.__setattr__(self, "amount", _coerce_amount(self.amount))

    @property
    def formatted_amount(self) -> str:
        """Amount with exactly two decimals and '.' as separator."""
        return format(self.amount, "f")


def encode_pix_payload(request: PixPaymentRequest) -> str:
    """Serialize `request` into a static PIX copy-and-paste payload."""
    merchant_account_info = tlv_field("00", PIX_GUI) + tlv_field(
        "01", request.payee_key
    )
    additional_data = tlv_field("05", request.transaction_id)

    payload = (
        PAYLOAD_FORMAT_INDICATOR
        + tlv_field("26", merchant_account_info)
        + MERCHANT_CATEGORY_CODE
        + TRANSACTION_CURRENCY
        + tlv_field("54", request.formatted_amount)
        + COUNTRY_CODE
        + tlv_field("59", request.payee_name[:MAX_NAME_LENGTH])
        + tlv_field("60", request.payee_city[:MAX_CITY_LENGTH])
        + tlv_field("62", additional_data)
        + CRC_HEADER
    )
    return payload + crc16_ccitt_false(payload)


def iter_tlv_fields(data: str) -> Iterator[tuple[str, str]]:
    """Yield `(tag, value)` pairs from a flat TLV string."""
    pos = 0
    while pos < len(data):
        header = data[pos : pos + 4]
        if len(header) < 4 or not header.isdigit():
            raise InvalidPixPayloadError(f"Malformed TLV header at offset {pos}")
        tag, length = header[:2], int(header[2:])
        value = data[pos + 4 : pos + 4 + length]
        if len(value) != length:
            raise InvalidPixPayloadError(
                f"Field {tag} declares {length} characters but only {len(value)} remain"
            )
        yield tag, value
        pos += 4 + length


def verify_pix_payload(payload: str) -> bool:
    """Return True when the trailing checksum matches the payload body."""
    if len(payload) < 8 or payload[-8:-4] != CRC_HEADER:
        return False
    body, checksum = payload[:-4], payload[-4:]
    try:
        return crc16_ccitt_false(body) == checksum.upper()
    except ValueError:
        return False
