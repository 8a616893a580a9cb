"""Utility helpers for segment sequences."""

from __future__ import annotations

from typing import Iterable

from .types import Match, Raw, Segment


def format_segment(segment: Segment) -> str:
    if isinstance(segment, Match):
        return f"Pi[{segment.position}] ({segment.original_byte_length} bytes)"
    if isinstance(segment, Raw):
        return f"Raw[0x{segment.data.hex().upper()}]"
    raise TypeError("Unknown segment type.")


def render_segments(segments: Iterable[Segment], separator: str = " ") -> str:
    return separator.join(format_segment(segment) for segment in segments)


def total_byte_length(segments: Iterable[Segment]) -> int:
    return sum(segment.byte_length for segment in segments)
