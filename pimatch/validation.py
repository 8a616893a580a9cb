"""Config validation."""

from __future__ import annotations

from dataclasses import dataclass

from .config import CompressionConfig

SEARCH_MODES = ("scan", "index")
MAX_SENSIBLE_INDEX_KEY = 8


@dataclass(frozen=True)
class ConfigWarning:
    field: str
    message: str


def require_valid_config(config: CompressionConfig) -> None:
    if config.search_mode not in SEARCH_MODES:
        raise ValueError("Unsupported search mode.")
    if config.index_key_length < 1:
        raise ValueError("Index key length must be positive.")


def validate_config(config: CompressionConfig) -> list[ConfigWarning]:
    warnings: list[ConfigWarning] = []
    if config.coalesce_raw:
        warnings.append(
            ConfigWarning(
                field="coalesce_raw",
                message="Raw coalescing merges literal runs; segment counts differ from single-byte output.",
            )
        )
    if config.search_mode == "index" and config.index_key_length > MAX_SENSIBLE_INDEX_KEY:
        warnings.append(
            ConfigWarning(
                field="index_key_length",
                message=f"Index keys longer than {MAX_SENSIBLE_INDEX_KEY} digits fall back to scanning for most lookups.",
            )
        )
    return warnings
