"""Escaped string codec (C and Python dialects).

WHY: Byte strings copied out of source code or a debugger arrive as
escaped text (``"\\x7fELF\\x02\\x01"``). The user may not know which
dialect produced them, so identification tries both.

HOW: identify() runs a full decode in each dialect and offers the ones
that succeed. decode() delegates to the core escape codec. Encoding is
dialect-independent, so the encode side exposes a single variant.

RULES:
- Decode variants are Dialect.C and Dialect.PYTHON
- The only encode variant is EscapeForm.MINIMAL
- Every IR can be rendered (encoding never fails)
"""

from __future__ import annotations

import enum
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.core.errors import LexError
from byte_converter.core.escape import Dialect, decode_escaped, encode_escaped


class EscapeForm(enum.Enum):
    MINIMAL = "minimal"

    @property
    def label(self) -> str:
        return "Escaped (\\xHH)"


class EscapedStringCodec(BaseCodec):
    """Backslash-escaped strings."""

    key = "escaped"

    @property
    def name(self) -> str:
        return "Escaped string"

    def identify(self, text: str) -> Optional[List[Dialect]]:
        variants = []
        for dialect in Dialect:
            try:
                decode_escaped(text, dialect)
            except LexError:
                continue
            variants.append(dialect)
        return found(variants)

    def decode(self, text: str, variant: Dialect) -> bytes:
        self._check_variant(variant, tuple(Dialect))
        return decode_escaped(text, variant)

    def variants(self, ir: bytes) -> Optional[List[EscapeForm]]:
        return [EscapeForm.MINIMAL]

    def encode(self, ir: bytes, variant: EscapeForm) -> str:
        self._check_variant(variant, (EscapeForm.MINIMAL,))
        return encode_escaped(ir)
