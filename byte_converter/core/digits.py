"""Digit alphabet for radices 2 through 16.

Maps the characters ``0-9``, ``a-f`` and ``A-F`` to digit values 0..15
and back. Decoding is case-insensitive, encoding lets the caller pick
the case. Inputs may be one-character strings or integer bytes, since
the escape lexer works on raw bytes and the numeral codecs on text.
"""

from __future__ import annotations

from typing import Union

from byte_converter.core.errors import InvalidDigit

_LOWER = "0123456789abcdef"
_UPPER = "0123456789ABCDEF"

_VALUES = {}
for _value, _char in enumerate(_LOWER):
    _VALUES[_char] = _value
    _VALUES[_UPPER[_value]] = _value
    _VALUES[ord(_char)] = _value
    _VALUES[ord(_UPPER[_value])] = _value

_OCTAL = frozenset("01234567") | frozenset(b"01234567")

DigitChar = Union[str, int]


def value_of(char: DigitChar) -> int:
    """Return the digit value (0..15) of a hex digit character or byte.

    Raises:
        InvalidDigit: ``char`` is not one of ``0-9a-fA-F``.
    """
    try:
        return _VALUES[char]
    except (KeyError, TypeError):
        raise InvalidDigit(char) from None


def char_of(digit: int, uppercase: bool = False) -> str:
    """Return the character for ``digit``; ``digit`` must be 0..15."""
    if not 0 <= digit <= 15:
        raise ValueError("digit out of range 0..15: {}".format(digit))
    return (_UPPER if uppercase else _LOWER)[digit]


def is_hex_digit(char: DigitChar) -> bool:
    try:
        return char in _VALUES
    except TypeError:
        return False


def is_octal_digit(char: DigitChar) -> bool:
    try:
        return char in _OCTAL
    except TypeError:
        return False
