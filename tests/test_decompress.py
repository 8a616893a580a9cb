import pytest

from pimatch import (
    DecompressionError,
    EncodingError,
    InvalidHexError,
    LengthMismatchError,
    Match,
    OddLengthError,
    OutOfBoundsError,
    Raw,
    decompress,
    decompress_text,
)


def test_reference_past_end(pi_prefix):
    segments = [Match(position=len(pi_prefix) - 1, hex_length=4, original_byte_length=2)]
    with pytest.raises(OutOfBoundsError) as excinfo:
        decompress(segments, pi_prefix)
    assert excinfo.value.segment_index == 0


def test_negative_position(pi_prefix):
    with pytest.raises(OutOfBoundsError):
        decompress([Raw(b"x"), Match(-1, 2, 1)], pi_prefix)


def test_reference_ending_exactly_at_dictionary_end(pi_prefix):
    segments = [Match(len(pi_prefix) - 2, 2, 1)]
    assert decompress(segments, pi_prefix) == b"\x44"


def test_odd_hex_length(pi_prefix):
    with pytest.raises(InvalidHexError) as excinfo:
        decompress([Match(0, 3, 1)], pi_prefix)
    assert isinstance(excinfo.value.__cause__, OddLengthError)


def test_length_mismatch(pi_prefix):
    with pytest.raises(LengthMismatchError) as excinfo:
        decompress([Raw(b"a"), Raw(b"b"), Match(0, 2, 2)], pi_prefix)
    assert excinfo.value.segment_index == 2
    assert isinstance(excinfo.value, DecompressionError)


def test_raw_bytes_pass_through(pi_prefix):
    assert decompress([Raw(b"\xff\x00"), Match(0, 4, 2)], pi_prefix) == b"\xff\x00\x31\x41"


def test_unknown_segment_type(pi_prefix):
    with pytest.raises(TypeError):
        decompress([("raw", b"x")], pi_prefix)


def test_invalid_text(pi_prefix):
    with pytest.raises(EncodingError):
        decompress_text([Raw(b"\xff")], pi_prefix)


def test_text_decodes_with_encoding(pi_prefix):
    assert decompress_text([Raw(b"\xe9")], pi_prefix, encoding="latin-1") == "é"
