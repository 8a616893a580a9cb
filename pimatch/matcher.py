"""Verified leftmost match search."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .dictionary import DictionaryLike, as_dictionary
from .errors import HexDecodeError
from .hexcodec import bytes_to_hex, hex_to_bytes
from .types import MatchLocation

logger = logging.getLogger(__name__)


class Locator(Protocol):
    def find(self, key: str) -> int: ...


def find_verified_match(
    data: bytes,
    dictionary: DictionaryLike,
    search: Optional[Locator] = None,
) -> MatchLocation | None:
    """Return the leftmost dictionary position whose digits spell ``data`` in hex.

    The located slice is decoded again and compared with ``data``; any
    disagreement is logged and reported as no match.
    """
    digits = as_dictionary(dictionary)
    if not data:
        return None
    key = bytes_to_hex(data)
    locator = search if search is not None else digits
    position = locator.find(key)
    if position < 0:
        return None
    hex_length = len(key)
    try:
        decoded = hex_to_bytes(digits.slice(position, hex_length))
    except HexDecodeError as exc:
        logger.error("Match at %d for key %s failed to decode: %s", position, key, exc)
        return None
    if decoded != bytes(data):
        logger.error("Match at %d for key %s decoded to different bytes", position, key)
        return None
    return MatchLocation(position=position, hex_length=hex_length)
