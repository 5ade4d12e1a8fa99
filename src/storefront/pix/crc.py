from __future__ import annotations

from typing import Final


CRC16_POLYNOMIAL: Final[int] = 0x1021
CRC16_INITIAL: Final[int] = 0xFFFF


def crc16_ccitt_false(data: str) -> str:
    """Return the CRC-16/CCITT-FALSE of `data` as 4 uppercase hex digits.

    Polynomial 0x1021, initial register 0xFFFF, MSB first, no reflection and
    no final XOR. Each character contributes its code point, so callers must
    pass text restricted to code points 0-255.
    """
    crc = CRC16_INITIAL
    for char in data:
        code = ord(char)
        if code > 0xFF:
            raise ValueError(f"Character {char!r} is outside the 8-bit range")
        crc ^= code << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC16_POLYNOMIAL) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return f"{crc:04X}"
