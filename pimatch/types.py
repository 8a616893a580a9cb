"""Shared types for the pimatch codec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class MatchLocation:
    position: int
    hex_length: int


@dataclass(frozen=True)
class Match:
    """Back-reference to ``hex_length`` dictionary digits starting at ``position``."""

    position: int
    hex_length: int
    original_byte_length: int

    @property
    def byte_length(self) -> int:
        return self.original_byte_length


@dataclass(frozen=True)
class Raw:
    data: bytes

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("Raw segment must hold at least one byte.")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def byte_length(self) -> int:
        return len(self.data)


Segment = Union[Match, Raw]
SegmentSeq = Sequence[Segment]


@dataclass(frozen=True)
class CompressionResult:
    segments: list[Segment]
    original_length: int
    match_count: int
    raw_count: int
    matched_bytes: int
    rendered_length: int

    @property
    def expansion_ratio(self) -> float:
        if not self.original_length:
            return 0.0
        return self.rendered_length / self.original_length
