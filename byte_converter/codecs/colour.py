"""``#RRGGBB`` colour codec.

The six hex digits are read as one base-16 number, so the IR is the
24-bit value least-significant byte first (blue, green, red). Dual
endianness lets the hub show the byte-swapped reading as well.
"""

from __future__ import annotations

import enum
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec
from byte_converter.config import UPPERCASE_DIGITS
from byte_converter.core.errors import ConversionError
from byte_converter.core.ir import Endianness
from byte_converter.core.radix import format_numeral, infer_radices, parse_numeral


class ColourForm(enum.Enum):
    RGB = "rgb"

    @property
    def label(self) -> str:
        return "#RRGGBB"


class ColourCodec(BaseCodec):
    key = "colour"
    endianness = Endianness.DUAL

    def __init__(self, uppercase: bool = UPPERCASE_DIGITS) -> None:
        self.uppercase = uppercase

    @property
    def name(self) -> str:
        return "Colour"

    def identify(self, text: str) -> Optional[List[ColourForm]]:
        if len(text) == 7 and text[0] == "#" and 16 in infer_radices(text[1:]):
            return [ColourForm.RGB]
        return None

    def decode(self, text: str, variant: ColourForm) -> bytes:
        self._check_variant(variant, (ColourForm.RGB,))
        if self.identify(text) is None:
            raise ConversionError("{!r} is not a #RRGGBB colour".format(text))
        return parse_numeral(text[1:], 16, width=3)

    def variants(self, ir: bytes) -> Optional[List[ColourForm]]:
        return [ColourForm.RGB] if len(ir) == 3 else None

    def encode(self, ir: bytes, variant: ColourForm) -> str:
        self._check_variant(variant, (ColourForm.RGB,))
        if len(ir) != 3:
            raise ConversionError("a colour needs 3 bytes, got {}".format(len(ir)))
        return "#" + format_numeral(ir, 16, self.uppercase).rjust(6, "0")
