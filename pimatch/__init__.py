"""pimatch: encode bytes as references into a fixed digit string."""

from .compressor import compress, compress_text, compress_with_stats, decompress, decompress_text
from .config import CompressionConfig
from .dictionary import DigitDictionary, as_dictionary, default_dictionary, load_dictionary
from .engine import CompressionEngine, default_engine
from .errors import (
    DecompressionError,
    DictionaryError,
    EncodingError,
    HexDecodeError,
    InvalidDigitError,
    InvalidHexError,
    LengthMismatchError,
    OddLengthError,
    OutOfBoundsError,
    PiMatchError,
    RoundTripError,
)
from .hexcodec import bytes_to_hex, hex_to_bytes
from .index import DigitIndex, build_index
from .matcher import find_verified_match
from .types import CompressionResult, Match, MatchLocation, Raw, Segment
from .utils import format_segment, render_segments

__all__ = [
    "compress",
    "compress_text",
    "compress_with_stats",
    "decompress",
    "decompress_text",
    "CompressionConfig",
    "CompressionEngine",
    "default_engine",
    "DigitDictionary",
    "as_dictionary",
    "default_dictionary",
    "load_dictionary",
    "DigitIndex",
    "build_index",
    "find_verified_match",
    "bytes_to_hex",
    "hex_to_bytes",
    "Match",
    "MatchLocation",
    "Raw",
    "Segment",
    "CompressionResult",
    "format_segment",
    "render_segments",
    "PiMatchError",
    "HexDecodeError",
    "OddLengthError",
    "InvalidDigitError",
    "DecompressionError",
    "OutOfBoundsError",
    "InvalidHexError",
    "LengthMismatchError",
    "EncodingError",
    "DictionaryError",
    "RoundTripError",
]
