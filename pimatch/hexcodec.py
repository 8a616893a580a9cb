"""Hex codec bridging raw bytes and digit strings."""

from __future__ import annotations

from .errors import InvalidDigitError, OddLengthError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def bytes_to_hex(data: bytes) -> str:
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    if len(text) % 2:
        raise OddLengthError(len(text))
    for idx, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise InvalidDigitError(char, idx)
    return bytes.fromhex(text)


def is_decimal_byte(value: int) -> bool:
    """True when both nibbles are 0-9, i.e. the byte's hex form is all digits."""
    return (value >> 4) <= 9 and (value & 0x0F) <= 9
