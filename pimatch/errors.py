"""Error types raised by the pimatch codec."""

from __future__ import annotations


class PiMatchError(ValueError):
    """Base class for every codec error."""


class HexDecodeError(PiMatchError):
    pass


class OddLengthError(HexDecodeError):
    def __init__(self, length: int):
        super().__init__(f"Hex string has odd length {length}.")
        self.length = length


class InvalidDigitError(HexDecodeError):
    def __init__(self, char: str, index: int):
        super().__init__(f"Invalid hex digit {char!r} at index {index}.")
        self.char = char
        self.index = index


class DecompressionError(PiMatchError):
    """A segment could not be expanded against the dictionary."""

    def __init__(self, message: str, segment_index: int):
        super().__init__(f"Segment {segment_index}: {message}")
        self.segment_index = segment_index


class OutOfBoundsError(DecompressionError):
    pass


class InvalidHexError(DecompressionError):
    pass


class LengthMismatchError(DecompressionError):
    pass


class EncodingError(PiMatchError):
    pass


class DictionaryError(PiMatchError):
    pass


class RoundTripError(PiMatchError):
    pass
