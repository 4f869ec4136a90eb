"""Codec registry: the static list of every text <-> IR format.

WHY: The hub and the CLI need one place to find every codec, both to
probe input text and to render an IR in every compatible format. A
static tuple built once at import keeps that list free of global
mutation.

HOW: CODECS holds one instance per codec, in menu order. CODECS_BY_KEY is
a read-only mapping from each codec's ``key`` to its instance.

RULES:
- Keys are snake_case identifiers (used in CLI flags and JSON reports)
- Order here is the order of the "Possible types" and "Other formats" menus
- Every codec listed here must be importable without side effects
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from byte_converter.codecs.base import BaseCodec
from byte_converter.codecs.base64_family import Base64Codec, Base85Codec, Base91Codec
from byte_converter.codecs.byte_list import ByteListCodec, HexBytesCodec
from byte_converter.codecs.colour import ColourCodec
from byte_converter.codecs.digest import DigestCodec
from byte_converter.codecs.escaped import EscapedStringCodec
from byte_converter.codecs.fixed_float import FixedFloatCodec
from byte_converter.codecs.fixed_int import FixedIntCodec
from byte_converter.codecs.identifier import UUIDCodec
from byte_converter.codecs.network import IPv4Codec, IPv6Codec
from byte_converter.codecs.numeral import NumeralCodec
from byte_converter.codecs.text import UnicodeNameCodec, UrlCodec, Utf8Codec
from byte_converter.codecs.timestamp import TimestampCodec

CODECS: Tuple[BaseCodec, ...] = (
    IPv4Codec(),
    IPv6Codec(),
    TimestampCodec(),
    FixedFloatCodec(),
    UUIDCodec(),
    FixedIntCodec(),
    NumeralCodec(),
    HexBytesCodec(),
    ColourCodec(),
    Base64Codec(),
    Base85Codec(),
    Base91Codec(),
    EscapedStringCodec(),
    UrlCodec(),
    UnicodeNameCodec(),
    ByteListCodec(),
    Utf8Codec(),
    DigestCodec(),
)

CODECS_BY_KEY: Mapping[str, BaseCodec] = MappingProxyType({codec.key: codec for codec in CODECS})
