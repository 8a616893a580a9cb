"""Core compression and decompression APIs."""

from __future__ import annotations

import logging
from typing import Iterable

from .config import CompressionConfig
from .dictionary import DictionaryLike, as_dictionary
from .engine import default_engine
from .errors import (
    EncodingError,
    HexDecodeError,
    InvalidHexError,
    LengthMismatchError,
    OutOfBoundsError,
    RoundTripError,
)
from .hexcodec import hex_to_bytes
from .types import CompressionResult, Match, Raw, Segment
from .utils import format_segment

logger = logging.getLogger(__name__)


def compress(data: bytes, dictionary: DictionaryLike, config: CompressionConfig | None = None) -> list[Segment]:
    cfg = config or CompressionConfig()
    digits = as_dictionary(dictionary)
    engine = default_engine(digits, cfg)
    segments = engine.compress_bytes(data)

    if cfg.verify:
        roundtrip = decompress(segments, digits)
        if roundtrip != bytes(data):
            raise RoundTripError("Round-trip verification failed.")

    return segments


def compress_text(text: str, dictionary: DictionaryLike, config: CompressionConfig | None = None) -> list[Segment]:
    cfg = config or CompressionConfig()
    return compress(text.encode(cfg.text_encoding), dictionary, cfg)


def compress_with_stats(
    data: bytes,
    dictionary: DictionaryLike,
    config: CompressionConfig | None = None,
) -> CompressionResult:
    segments = compress(data, dictionary, config)
    matches = [seg for seg in segments if isinstance(seg, Match)]
    return CompressionResult(
        segments=segments,
        original_length=len(data),
        match_count=len(matches),
        raw_count=len(segments) - len(matches),
        matched_bytes=sum(seg.original_byte_length for seg in matches),
        rendered_length=sum(len(format_segment(seg)) for seg in segments),
    )


def _expand_match(segment: Match, digits: str, segment_index: int) -> bytes:
    end = segment.position + segment.hex_length
    if segment.position < 0 or segment.hex_length < 0 or end > len(digits):
        raise OutOfBoundsError(
            f"reference [{segment.position}, {end}) exceeds dictionary length {len(digits)}.",
            segment_index,
        )
    try:
        decoded = hex_to_bytes(digits[segment.position : end])
    except HexDecodeError as exc:
        raise InvalidHexError(f"dictionary slice is not valid hex ({exc}).", segment_index) from exc
    if len(decoded) != segment.original_byte_length:
        raise LengthMismatchError(
            f"decoded {len(decoded)} bytes, expected {segment.original_byte_length}.",
            segment_index,
        )
    return decoded


def decompress(segments: Iterable[Segment], dictionary: DictionaryLike) -> bytes:
    digits = as_dictionary(dictionary).digits
    out = bytearray()
    for idx, segment in enumerate(segments):
        if isinstance(segment, Match):
            out.extend(_expand_match(segment, digits, idx))
        elif isinstance(segment, Raw):
            out.extend(segment.data)
        else:
            raise TypeError(f"Segment {idx} is not a Match or Raw segment.")
    logger.debug("Decompressed into %d bytes", len(out))
    return bytes(out)


def decompress_text(segments: Iterable[Segment], dictionary: DictionaryLike, encoding: str = "utf-8") -> str:
    data = decompress(segments, dictionary)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise EncodingError(f"Decompressed data is not valid {encoding}: {exc.reason} at byte {exc.start}.") from exc
