"""Fixed-width integer codec (8 to 128 bits, signed and unsigned).

WHY: The same number means different bytes depending on the integer type
it is stored in: ``-1`` is ``ff`` as an i8 and ``ffffffff`` as an i32.
This codec offers every primitive width the value fits.

HOW: Decimal text (optionally signed) is range-checked against each width
directly. Other numerals go through the base converter: the radix is
chosen the way a reader would guess it (prefix, else decimal, else the
smallest configured radix that fits), converted once to find its byte
size, and only widths at least that large are offered. decode() pads the
magnitude to the full width, little-endian.

RULES:
- Widths come from INTEGER_WIDTHS (8, 16, 32, 64, 128)
- Negative values only produce signed variants
- Non-negative values produce unsigned and signed variants of every width
  whose byte size holds the magnitude (signed reads the bit pattern)
- encode() accepts IR whose length is exactly one of the widths
- Endianness is dual: the hub also renders the reversed IR
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.codecs.numeral import split_prefix
from byte_converter.config import INTEGER_WIDTHS, NUMERAL_RADICES
from byte_converter.core.errors import ConversionError
from byte_converter.core.ir import Endianness
from byte_converter.core.radix import infer_radices, parse_numeral

_DECIMAL_RE = re.compile(r"^[+-]?[0-9]+$")


def _max_digits(bits: int, radix: int) -> int:
    """Number of ``radix`` digits in the largest ``bits``-bit magnitude."""
    limit = (1 << bits) - 1
    count = 0
    while limit:
        limit //= radix
        count += 1
    return count


@dataclass(frozen=True)
class IntVariant:
    bits: int
    signed: bool

    @property
    def size(self) -> int:
        return self.bits // 8

    @property
    def label(self) -> str:
        return "{}{}".format("i" if self.signed else "u", self.bits)

    def holds(self, value: int) -> bool:
        if self.signed:
            return -(1 << (self.bits - 1)) <= value < (1 << (self.bits - 1))
        return 0 <= value < (1 << self.bits)


class FixedIntCodec(BaseCodec):
    """Primitive signed and unsigned integers."""

    key = "fixed_int"
    endianness = Endianness.DUAL

    def __init__(
        self,
        widths: Iterable[int] = INTEGER_WIDTHS,
        radices: Iterable[int] = NUMERAL_RADICES,
    ) -> None:
        self.widths = tuple(sorted(set(widths)))
        self.radices = tuple(sorted(set(radices)))
        self._all = frozenset(
            IntVariant(bits, signed) for bits in self.widths for signed in (False, True)
        )

    @property
    def name(self) -> str:
        return "Primitive integers"

    def _pick_radix(self, text: str) -> Optional[int]:
        """Choose the radix a non-decimal numeral is read in, or None."""
        prefix_radix, digits = split_prefix(text)
        if prefix_radix is not None and prefix_radix in infer_radices(digits):
            return prefix_radix
        candidates = [radix for radix in infer_radices(text) if radix in self.radices]
        if 10 in candidates:
            return 10
        return candidates[0] if candidates else None

    def _digits(self, text: str, radix: int) -> str:
        prefix_radix, digits = split_prefix(text)
        return digits if prefix_radix == radix else text

    def _too_long(self, digits: str, radix: int) -> bool:
        """True when ``digits`` cannot fit the widest integer whatever their value."""
        significant = digits.lstrip("+-").lstrip("0")
        return len(significant) > _max_digits(self.widths[-1], radix)

    def _magnitude(self, text: str, radix: int, width: Optional[int] = None) -> bytes:
        return parse_numeral(self._digits(text, radix), radix, width)

    def identify(self, text: str) -> Optional[List[IntVariant]]:
        if _DECIMAL_RE.match(text):
            if self._too_long(text, 10):
                return None
            value = int(text, 10)
            return found([
                IntVariant(bits, signed)
                for bits in self.widths
                for signed in (False, True)
                if IntVariant(bits, signed).holds(value)
            ])

        radix = self._pick_radix(text)
        if radix is None:
            return None
        if self._too_long(self._digits(text, radix), radix):
            return None
        try:
            size = len(self._magnitude(text, radix))
        except ConversionError:
            return None
        return found([
            IntVariant(bits, signed)
            for bits in self.widths
            if bits // 8 >= size
            for signed in (False, True)
        ])

    def decode(self, text: str, variant: IntVariant) -> bytes:
        self._check_variant(variant, self._all)
        if _DECIMAL_RE.match(text):
            if self._too_long(text, 10):
                raise ConversionError("{} digits do not fit in {}".format(len(text), variant.label))
            value = int(text, 10)
            if not variant.holds(value):
                raise ConversionError("{} does not fit in {}".format(text, variant.label))
            return value.to_bytes(variant.size, "little", signed=variant.signed)

        radix = self._pick_radix(text)
        if radix is None:
            raise ConversionError("{!r} is not an integer".format(text))
        if self._too_long(self._digits(text, radix), radix):
            raise ConversionError("{} digits do not fit in {}".format(len(text), variant.label))
        return self._magnitude(text, radix, width=variant.size)

    def variants(self, ir: bytes) -> Optional[List[IntVariant]]:
        if len(ir) * 8 not in self.widths:
            return None
        return [IntVariant(len(ir) * 8, False), IntVariant(len(ir) * 8, True)]

    def encode(self, ir: bytes, variant: IntVariant) -> str:
        self._check_variant(variant, self._all)
        if len(ir) != variant.size:
            raise ConversionError(
                "{} needs {} byte(s), got {}".format(variant.label, variant.size, len(ir))
            )
        return str(int.from_bytes(ir, "little", signed=variant.signed))
