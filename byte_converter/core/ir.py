"""Intermediate representation and the records built around it.

WHY: Every codec decodes text into the same pivot format and encodes the
same pivot format back into text. Keeping that format a plain byte string
means no codec needs to know any other codec exists.

HOW: The IR itself is just ``bytes``. Interpretation records one way the
input text can be read (codec + variant); Rendering records one way the
IR can be written back out. Endianness tells the hub whether a codec's
output depends on byte order.

RULES:
- IR is an ordered, finite byte string; its length is significant
- Numeric codecs store values least-significant byte first
- Interpretation.variant is opaque outside its codec
- Rendering.byte_order is None for byte-order-invariant codecs
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from byte_converter.codecs.base import BaseCodec

IR = bytes


class Endianness(str, enum.Enum):
    """Whether a codec's rendering is sensitive to IR byte order.

    RULES:
    - default: encode is invariant to byte order, render once
    - dual: also render the byte-reversed IR (little- and big-endian readings)
    """

    DEFAULT = "default"
    DUAL = "dual"


@dataclass(frozen=True)
class Interpretation:
    """One way the input text can be read.

    Attributes:
        codec: The codec whose identify() produced the variant.
        variant: The codec-specific variant tag.
    """

    codec: BaseCodec
    variant: Any

    @property
    def label(self) -> str:
        return self.variant.label


@dataclass(frozen=True)
class Rendering:
    """One textual form of an IR buffer.

    Attributes:
        codec_key: Registry key of the codec that produced the text.
        codec_name: Human-readable codec name, used to group output.
        variant: Label of the variant used.
        text: The rendered text.
        byte_order: "little-endian"/"big-endian" for dual codecs, else None.
    """

    codec_key: str
    codec_name: str
    variant: str
    text: str
    byte_order: Optional[str] = None
