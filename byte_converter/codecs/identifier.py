"""UUID codec.

The IR is the 128-bit UUID value stored least-significant byte first,
matching the other numeric codecs. Rendering always uses the canonical
lowercase hyphenated form.
"""

from __future__ import annotations

import enum
import uuid
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec
from byte_converter.core.errors import ConversionError


class UuidForm(enum.Enum):
    HYPHENATED = "hyphenated"

    @property
    def label(self) -> str:
        return "RFC 4122"


class UUIDCodec(BaseCodec):
    key = "uuid"

    @property
    def name(self) -> str:
        return "UUID"

    def identify(self, text: str) -> Optional[List[UuidForm]]:
        try:
            uuid.UUID(text)
        except ValueError:
            return None
        return [UuidForm.HYPHENATED]

    def decode(self, text: str, variant: UuidForm) -> bytes:
        self._check_variant(variant, (UuidForm.HYPHENATED,))
        try:
            value = uuid.UUID(text)
        except ValueError:
            raise ConversionError("{!r} is not a UUID".format(text)) from None
        return value.int.to_bytes(16, "little")

    def variants(self, ir: bytes) -> Optional[List[UuidForm]]:
        return [UuidForm.HYPHENATED] if len(ir) == 16 else None

    def encode(self, ir: bytes, variant: UuidForm) -> str:
        self._check_variant(variant, (UuidForm.HYPHENATED,))
        if len(ir) != 16:
            raise ConversionError("a UUID needs 16 bytes, got {}".format(len(ir)))
        return str(uuid.UUID(int=int.from_bytes(ir, "little")))
