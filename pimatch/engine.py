"""Greedy longest-match compression engine."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import warnings

from .config import CompressionConfig
from .dictionary import DigitDictionary
from .hexcodec import is_decimal_byte
from .index import DigitIndex, build_index
from .matcher import find_verified_match
from .types import Match, Raw, Segment
from .validation import require_valid_config, validate_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchStage:
    name: str

    def find(self, key: str) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class ScanSearchStage(SearchStage):
    dictionary: DigitDictionary

    def find(self, key: str) -> int:
        return self.dictionary.find(key)


@dataclass(frozen=True)
class IndexedSearchStage(SearchStage):
    index: DigitIndex

    def find(self, key: str) -> int:
        return self.index.find(key)


def matchable_run_length(data: bytes, start: int, limit: int) -> int:
    """Count bytes from ``start`` whose hex form is all digits, up to ``limit``."""
    run = 0
    end = min(len(data), start + limit)
    idx = start
    while idx < end and is_decimal_byte(data[idx]):
        run += 1
        idx += 1
    return run


@dataclass(frozen=True)
class CompressionEngine:
    dictionary: DigitDictionary
    search: SearchStage
    config: CompressionConfig
    last_lookups: int = 0

    def _longest_candidate(self, data: bytes, start: int) -> int:
        remaining = len(data) - start
        if not self.config.prune_candidates:
            return remaining
        return matchable_run_length(data, start, min(remaining, len(self.dictionary) // 2))

    def compress_bytes(self, data: bytes) -> list[Segment]:
        data = bytes(data)
        segments: list[Segment] = []
        lookups = 0
        n = len(data)
        idx = 0
        while idx < n:
            match = None
            length = self._longest_candidate(data, idx)
            while length > 0:
                lookups += 1
                location = find_verified_match(data[idx : idx + length], self.dictionary, self.search)
                if location is not None:
                    match = Match(location.position, location.hex_length, length)
                    break
                length -= 1
            if match is not None:
                segments.append(match)
                idx += match.original_byte_length
                continue
            literal = data[idx : idx + 1]
            if self.config.coalesce_raw and segments and isinstance(segments[-1], Raw):
                segments[-1] = Raw(segments[-1].data + literal)
            else:
                segments.append(Raw(literal))
            idx += 1

        object.__setattr__(self, "last_lookups", lookups)
        logger.debug("Compressed %d bytes into %d segments with %d lookups", n, len(segments), lookups)
        return segments


def default_engine(dictionary: DigitDictionary, config: CompressionConfig) -> CompressionEngine:
    require_valid_config(config)
    for warning in validate_config(config):
        warnings.warn(warning.message, RuntimeWarning)
    if config.search_mode == "index":
        stage: SearchStage = IndexedSearchStage(
            name="index", index=build_index(dictionary, config.index_key_length)
        )
    else:
        stage = ScanSearchStage(name="scan", dictionary=dictionary)
    return CompressionEngine(dictionary=dictionary, search=stage, config=config)
