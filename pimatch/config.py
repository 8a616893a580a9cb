"""Configuration for pimatch compression."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompressionConfig:
    search_mode: str = "scan"
    index_key_length: int = 4
    prune_candidates: bool = True
    coalesce_raw: bool = False
    verify: bool = False
    text_encoding: str = "utf-8"
