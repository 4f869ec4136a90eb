"""Byte-ordered literal codecs: ``[1, 2, 3]`` lists and hex byte strings.

WHY: Unlike the numeric codecs, these formats list bytes in buffer order,
so the IR is exactly the sequence written, with no magnitude or byte-order
interpretation.

HOW: Whitespace is stripped before matching. The byte list regex accepts
decimal values 0–255 separated by commas with an optional trailing comma.
Hex byte strings are pairs of hex digits, optionally separated by
whitespace, converted pairwise with the digit alphabet.

RULES:
- Byte list renders as ``[1, 2, 3]``
- Hex bytes needs an even number of digits; renders as space-separated pairs
"""

from __future__ import annotations

import enum
import re
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec
from byte_converter.config import UPPERCASE_DIGITS
from byte_converter.core.digits import char_of, value_of
from byte_converter.core.errors import ConversionError

_BYTE = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])"
_BYTE_LIST_RE = re.compile(r"^\[(?:{b},)*{b},?\]$|^\[\]$".format(b=_BYTE))
_HEX_PAIRS_RE = re.compile(r"^(?:[0-9A-Fa-f]{2})+$")
_WHITESPACE_RE = re.compile(r"\s")


class ListForm(enum.Enum):
    DECIMAL = "decimal"

    @property
    def label(self) -> str:
        return "decimal list"


class ByteListCodec(BaseCodec):
    key = "byte_list"

    @property
    def name(self) -> str:
        return "Byte list"

    def identify(self, text: str) -> Optional[List[ListForm]]:
        if _BYTE_LIST_RE.match(_WHITESPACE_RE.sub("", text)):
            return [ListForm.DECIMAL]
        return None

    def decode(self, text: str, variant: ListForm) -> bytes:
        self._check_variant(variant, (ListForm.DECIMAL,))
        cleaned = _WHITESPACE_RE.sub("", text)
        if not _BYTE_LIST_RE.match(cleaned):
            raise ConversionError("{!r} is not a byte list".format(text))
        return bytes(int(item) for item in cleaned[1:-1].split(",") if item)

    def variants(self, ir: bytes) -> Optional[List[ListForm]]:
        return [ListForm.DECIMAL]

    def encode(self, ir: bytes, variant: ListForm) -> str:
        self._check_variant(variant, (ListForm.DECIMAL,))
        return "[{}]".format(", ".join(str(byte) for byte in ir))


class HexForm(enum.Enum):
    PAIRS = "pairs"

    @property
    def label(self) -> str:
        return "hex pairs"


class HexBytesCodec(BaseCodec):
    key = "hex_bytes"

    def __init__(self, uppercase: bool = UPPERCASE_DIGITS) -> None:
        self.uppercase = uppercase

    @property
    def name(self) -> str:
        return "Hex bytes"

    def identify(self, text: str) -> Optional[List[HexForm]]:
        if _HEX_PAIRS_RE.match(_WHITESPACE_RE.sub("", text)):
            return [HexForm.PAIRS]
        return None

    def decode(self, text: str, variant: HexForm) -> bytes:
        self._check_variant(variant, (HexForm.PAIRS,))
        cleaned = _WHITESPACE_RE.sub("", text)
        if not _HEX_PAIRS_RE.match(cleaned):
            raise ConversionError("{!r} is not a hex byte string".format(text))
        return bytes(
            value_of(cleaned[i]) * 16 + value_of(cleaned[i + 1]) for i in range(0, len(cleaned), 2)
        )

    def variants(self, ir: bytes) -> Optional[List[HexForm]]:
        return [HexForm.PAIRS] if ir else None

    def encode(self, ir: bytes, variant: HexForm) -> str:
        self._check_variant(variant, (HexForm.PAIRS,))
        return " ".join(
            char_of(byte >> 4, self.uppercase) + char_of(byte & 0x0F, self.uppercase) for byte in ir
        )
