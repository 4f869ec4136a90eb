"""Arbitrary-base byte/digit conversion and radix inference.

WHY: Numbers typed by a user (``"ff"``, ``"0b1010"``, ``"777"``) must
become an IR byte buffer, and any IR buffer must be re-rendered as a
numeral in another radix. Neither side is bounded in length, so the
conversion works digit by digit instead of going through a fixed-width
machine integer.

HOW: A byte buffer is treated as a base-256 bignum stored
least-significant byte first. ``digits_to_bytes`` folds the source digits
into that buffer with schoolbook multiply-accumulate, propagating the
carry across every byte. ``bytes_to_digits`` runs repeated long division
by the target radix and collects the remainders. Radix inference looks at
the largest digit value present and offers every radix above it.

RULES:
- Digit sequences are least-significant-first (``digits[0]`` is the
  rightmost character of the source text)
- Byte buffers are little-endian (least-significant byte first)
- Results are minimal: no high zero bytes, no most-significant zero digits
- Zero from a non-empty digit sequence is ``b"\\x00"`` / ``[0]``
- Empty input maps to empty output in both directions
- A digit >= radix raises InvalidDigit, a too-small width raises WidthOverflow
- Radix must be in 2..16
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from byte_converter.core.digits import char_of, value_of
from byte_converter.core.errors import InvalidDigit, WidthOverflow

MIN_RADIX = 2
MAX_RADIX = 16


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(
            "radix must be between {} and {}, got {}".format(MIN_RADIX, MAX_RADIX, radix)
        )


def digits_to_bytes(
    digits: Sequence[int],
    radix: int,
    width: Optional[int] = None,
) -> bytes:
    """Convert least-significant-first digits into a little-endian byte buffer.

    HOW: Walk the digits from most to least significant. For each one,
    multiply the accumulated buffer by ``radix`` and add the digit, carrying
    overflow from byte to byte and growing the buffer only when a carry is
    left over after the highest byte.

    Args:
        digits: Digit values, ``digits[0]`` least significant.
        radix: Source radix, 2..16.
        width: If given, pad the result with high zero bytes to exactly
               this many bytes.

    Returns:
        The minimal little-endian encoding of the magnitude, or the padded
        encoding when ``width`` is given.

    Raises:
        InvalidDigit: a digit is negative or not below ``radix``.
        WidthOverflow: the magnitude needs more than ``width`` bytes.
    """
    _check_radix(radix)

    out = bytearray()
    for digit in reversed(digits):
        if not 0 <= digit < radix:
            raise InvalidDigit(digit, radix)
        carry = digit
        for i in range(len(out)):
            carry += out[i] * radix
            out[i] = carry & 0xFF
            carry >>= 8
        while carry:
            out.append(carry & 0xFF)
            carry >>= 8

    # Every digit was zero
    if digits and not out:
        out.append(0)

    if width is not None:
        if len(out) > width:
            raise WidthOverflow(len(out), width)
        out.extend(bytes(width - len(out)))

    return bytes(out)


def bytes_to_digits(data: Iterable[int], radix: int) -> List[int]:
    """Convert a little-endian byte buffer into least-significant-first digits.

    HOW: Long division of the whole buffer by ``radix``, most significant
    byte first; the remainder is the next digit. Repeat on the quotient
    until it is zero.
    """
    _check_radix(radix)

    work = list(data)
    if not work:
        return []
    while len(work) > 1 and work[-1] == 0:
        work.pop()

    digits: List[int] = []
    while True:
        remainder = 0
        for i in range(len(work) - 1, -1, -1):
            work[i], remainder = divmod((remainder << 8) | work[i], radix)
        digits.append(remainder)
        while len(work) > 1 and work[-1] == 0:
            work.pop()
        if work[-1] == 0:
            return digits


def parse_numeral(text: str, radix: int, width: Optional[int] = None) -> bytes:
    """Parse a conventional (most-significant-first) numeral into IR bytes."""
    digits = [value_of(char) for char in reversed(text)]
    return digits_to_bytes(digits, radix, width)


def format_numeral(data: bytes, radix: int, uppercase: bool = True) -> str:
    """Render IR bytes as a conventional numeral in ``radix``.

    Digits come back least significant first, so each one is prepended
    to the text being built.
    """
    return "".join(char_of(digit, uppercase) for digit in reversed(bytes_to_digits(data, radix)))


def infer_radices(text: str) -> List[int]:
    """Return every radix in 2..16 in which ``text`` is a valid numeral.

    A numeral valid in radix r is also valid in every radix above r, so the
    result is the contiguous range from the minimal consistent radix up to 16.

    RULES:
    - Characters outside 0-9a-fA-F → no candidates
    - Empty text → no candidates (an empty string is not a numeral)
    """
    if not text:
        return []
    try:
        largest = max(value_of(char) for char in text)
    except InvalidDigit:
        return []
    return list(range(max(largest + 1, MIN_RADIX), MAX_RADIX + 1))


def minimal_radix(text: str) -> Optional[int]:
    candidates = infer_radices(text)
    return candidates[0] if candidates else None
