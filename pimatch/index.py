"""Precomputed window index over a digit dictionary."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from functools import lru_cache
import logging

from .dictionary import DigitDictionary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class DigitIndex:
    """Maps every ``key_length``-digit window to its ascending start positions.

    Lookups walk the positions in order, so the first hit is the leftmost
    occurrence, exactly what ``str.find`` would return.
    """

    dictionary: DigitDictionary
    key_length: int
    positions_by_window: dict[str, tuple[int, ...]]

    def __repr__(self) -> str:
        return f"DigitIndex(key_length={self.key_length}, windows={len(self.positions_by_window)})"

    def find(self, key: str) -> int:
        if len(key) < self.key_length:
            return self.dictionary.find(key)
        digits = self.dictionary.digits
        for pos in self.positions_by_window.get(key[: self.key_length], ()):
            if digits.startswith(key, pos):
                return pos
        return -1


def _build_windows(digits: str, key_length: int) -> dict[str, tuple[int, ...]]:
    positions_by_window: dict[str, list[int]] = defaultdict(list)
    limit = len(digits) - key_length + 1
    for idx in range(max(limit, 0)):
        positions_by_window[digits[idx : idx + key_length]].append(idx)
    return {window: tuple(positions) for window, positions in positions_by_window.items()}


@lru_cache(maxsize=8)
def build_index(dictionary: DigitDictionary, key_length: int = 4) -> DigitIndex:
    if key_length < 1:
        raise ValueError("Index key length must be positive.")
    windows = _build_windows(dictionary.digits, key_length)
    logger.debug("Built digit index: %d windows of %d digits over %d digits", len(windows), key_length, len(dictionary))
    return DigitIndex(dictionary=dictionary, key_length=key_length, positions_by_window=windows)
