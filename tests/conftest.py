import pytest

from pimatch import DigitDictionary, default_dictionary

PI_PREFIX = "3141592653589793238462643383279502884197169399375105820974944"


@pytest.fixture
def pi_prefix():
    return DigitDictionary(PI_PREFIX)


@pytest.fixture
def pi_digits():
    return default_dictionary()


@pytest.fixture
def tie_dictionary():
    # "27" occurs at positions 5 and 40 only.
    return DigitDictionary("00000" + "27" + "0" * 33 + "27")


@pytest.fixture(params=[b"", b"1", b"hello, world", b"\x00\x05\x19\x99", bytes(range(256)), "pi ≈ 3.14159".encode("utf-8")])
def sample_bytes(request):
    return request.param
