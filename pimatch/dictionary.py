"""Digit dictionary: the fixed corpus every segment points into."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import DictionaryError

# Leading 501 digits of pi, decimal point removed.
PI_DIGITS = (
    "3"
    "14159265358979323846264338327950288419716939937510"
    "58209749445923078164062862089986280348253421170679"
    "82148086513282306647093844609550582231725359408128"
    "48111745028410270193852110555964462294895493038196"
    "44288109756659334461284756482337867831652712019091"
    "45648566923460348610454326648213393607260249141273"
    "72458700660631558817488152092096282925409171536436"
    "78925903600113305305488204665213841469519415116094"
    "33057270365759591953092186117381932611793105118548"
    "07446237996274956735188575272489122793818301194912"
)


@dataclass(frozen=True, repr=False)
class DigitDictionary:
    digits: str

    def __post_init__(self) -> None:
        if self.digits and not (self.digits.isascii() and self.digits.isdigit()):
            bad = next(idx for idx, char in enumerate(self.digits) if char not in "0123456789")
            raise DictionaryError(f"Dictionary contains non-digit character {self.digits[bad]!r} at index {bad}.")

    @classmethod
    def from_string(cls, text: str) -> "DigitDictionary":
        return cls("".join(text.split()))

    def __len__(self) -> int:
        return len(self.digits)

    def __repr__(self) -> str:
        head = self.digits[:12]
        suffix = "..." if len(self.digits) > 12 else ""
        return f"DigitDictionary({head!r}{suffix}, length={len(self.digits)})"

    def find(self, key: str) -> int:
        return self.digits.find(key)

    def slice(self, position: int, length: int) -> str:
        return self.digits[position : position + length]


DictionaryLike = Union[DigitDictionary, str]


def as_dictionary(value: DictionaryLike) -> DigitDictionary:
    if isinstance(value, DigitDictionary):
        return value
    if isinstance(value, str):
        return DigitDictionary.from_string(value)
    raise TypeError("Dictionary must be a DigitDictionary or a string of digits.")


def default_dictionary() -> DigitDictionary:
    return DigitDictionary(PI_DIGITS)


def load_dictionary(path: Union[str, Path]) -> DigitDictionary:
    """Read a digits file such as ``3.14159...``.

    Whitespace is ignored and a single decimal point is dropped so that
    published digit listings load unchanged.
    """
    text = "".join(Path(path).read_text(encoding="utf-8").split())
    if text.count(".") == 1:
        text = text.replace(".", "")
    return DigitDictionary(text)
