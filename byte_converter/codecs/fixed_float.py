"""IEEE 754 floating point codec (16, 32 and 64-bit).

HOW: ``float()`` parses the text; ``struct`` packs it little-endian as
half (``e``), single (``f``) or double (``d``) precision. A width is only
offered when packing does not overflow.
"""

from __future__ import annotations

import enum
import struct
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.core.errors import ConversionError
from byte_converter.core.ir import Endianness


class FloatWidth(enum.Enum):
    HALF = 16
    SINGLE = 32
    DOUBLE = 64

    @property
    def label(self) -> str:
        return "{}-bit".format(self.value)

    @property
    def size(self) -> int:
        return self.value // 8

    @property
    def struct_format(self) -> str:
        return {16: "<e", 32: "<f", 64: "<d"}[self.value]


_BY_SIZE = {width.size: width for width in FloatWidth}


def _parse(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ConversionError("{!r} is not a floating point number".format(text)) from None


class FixedFloatCodec(BaseCodec):
    """Half, single and double precision floats."""

    key = "fixed_float"
    endianness = Endianness.DUAL

    @property
    def name(self) -> str:
        return "Floats"

    def identify(self, text: str) -> Optional[List[FloatWidth]]:
        try:
            number = _parse(text)
        except ConversionError:
            return None

        variants = []
        for width in FloatWidth:
            try:
                struct.pack(width.struct_format, number)
            except (OverflowError, struct.error):
                continue
            variants.append(width)
        return found(variants)

    def decode(self, text: str, variant: FloatWidth) -> bytes:
        self._check_variant(variant, tuple(FloatWidth))
        try:
            return struct.pack(variant.struct_format, _parse(text))
        except (OverflowError, struct.error) as exc:
            raise ConversionError("{} does not fit in a {} float".format(text, variant.label)) from exc

    def variants(self, ir: bytes) -> Optional[List[FloatWidth]]:
        width = _BY_SIZE.get(len(ir))
        return [width] if width is not None else None

    def encode(self, ir: bytes, variant: FloatWidth) -> str:
        self._check_variant(variant, tuple(FloatWidth))
        if len(ir) != variant.size:
            raise ConversionError("{} float needs {} bytes, got {}".format(
                variant.label, variant.size, len(ir)))
        (number,) = struct.unpack(variant.struct_format, ir)
        return repr(number)
