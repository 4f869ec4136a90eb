"""Base 2–16 number codec.

WHY: A bare string of digits like ``"777"`` or ``"ff00"`` is the most
ambiguous input the tool sees: it could be binary, octal, decimal, hex,
or anything in between. This codec offers every plausible radix and
turns the chosen one into an IR magnitude.

HOW: identify() honours an explicit ``0b``/``0o``/``0x`` prefix, and
otherwise asks radix inference for every radix the digits allow, keeping
the ones configured in NUMERAL_RADICES. decode() runs the arbitrary-base
converter; encode() runs it in reverse.

RULES:
- A prefix pins the radix when the remaining digits are valid in it;
  otherwise ("0b1f") the whole text is treated as plain digits
- Without a prefix, offered radices = inferred radices ∩ NUMERAL_RADICES
- IR is the minimal little-endian magnitude
- Any non-empty IR up to MAX_NUMERAL_BYTES can be rendered in every
  configured radix; digit strings too long to fit that many bytes are
  not offered
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.config import MAX_NUMERAL_BYTES, NUMERAL_RADICES, UPPERCASE_DIGITS
from byte_converter.core.errors import ConversionError
from byte_converter.core.radix import MAX_RADIX, MIN_RADIX, format_numeral, infer_radices, parse_numeral

_PREFIXES = {"0b": 2, "0o": 8, "0x": 16}


@dataclass(frozen=True)
class NumeralVariant:
    radix: int

    @property
    def label(self) -> str:
        return "Base {}".format(self.radix)


ALL_RADICES = frozenset(NumeralVariant(radix) for radix in range(MIN_RADIX, MAX_RADIX + 1))


def split_prefix(text: str) -> Tuple[Optional[int], str]:
    """Split a ``0b``/``0o``/``0x`` prefix off ``text``.

    Returns:
        (radix, digits); radix is None when there is no prefix.
    """
    prefix = text[:2].lower()
    if len(text) > 2 and prefix in _PREFIXES:
        return _PREFIXES[prefix], text[2:]
    return None, text


class NumeralCodec(BaseCodec):
    """Numbers in any radix from 2 to 16 using 0-9 and a-f."""

    key = "numeral"

    def __init__(
        self,
        radices: Iterable[int] = NUMERAL_RADICES,
        uppercase: bool = UPPERCASE_DIGITS,
        max_bytes: int = MAX_NUMERAL_BYTES,
    ) -> None:
        self.radices = tuple(sorted(set(radices)))
        self.uppercase = uppercase
        self.max_bytes = max_bytes

    def _too_long(self, digits: str) -> bool:
        # every digit in radix 2 or above adds at least one bit
        return len(digits.lstrip("0")) > self.max_bytes * 8

    @property
    def name(self) -> str:
        return "Base 2-16 number"

    def identify(self, text: str) -> Optional[List[NumeralVariant]]:
        radix, digits = split_prefix(text)
        if self._too_long(digits):
            return None
        if radix is not None and radix in infer_radices(digits):
            return [NumeralVariant(radix)]

        return found([
            NumeralVariant(candidate)
            for candidate in infer_radices(text)
            if candidate in self.radices
        ])

    def decode(self, text: str, variant: NumeralVariant) -> bytes:
        self._check_variant(variant, ALL_RADICES)
        prefix_radix, digits = split_prefix(text)
        if prefix_radix != variant.radix:
            digits = text
        if self._too_long(digits):
            raise ConversionError("{} digits exceed the {}-byte numeral limit".format(
                len(digits), self.max_bytes))
        return parse_numeral(digits, variant.radix)

    def variants(self, ir: bytes) -> Optional[List[NumeralVariant]]:
        if not ir or len(ir) > self.max_bytes:
            return None
        return [NumeralVariant(radix) for radix in self.radices]

    def encode(self, ir: bytes, variant: NumeralVariant) -> str:
        self._check_variant(variant, ALL_RADICES)
        return format_numeral(ir, variant.radix, self.uppercase)
