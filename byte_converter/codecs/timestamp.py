"""Unix timestamp codec for RFC 2822 and RFC 3339 date strings.

WHY: Timestamps show up in binary structures as 32- or 64-bit second
counts. Turning a human date into those bytes (and back) is a common
step when reading headers or crafting test data.

HOW: RFC 2822 dates are parsed with ``email.utils``, RFC 3339 dates
with a strict regex followed by ``datetime.fromisoformat`` on a
normalised string. The resulting Unix time is stored as a signed
little-endian integer of the chosen width. Encoding reads the integer
back and prints it in both standards, in UTC.

RULES:
- Variant = (bits, format); bits is 32 or 64
- A 32-bit variant is only offered when the timestamp fits in an i32
- Dates without an explicit offset are rejected for RFC 3339 and read as
  UTC for RFC 2822 ("-0000")
- Sub-second precision is dropped (whole seconds)
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.core.errors import ConversionError
from byte_converter.core.ir import Endianness

_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)

_TIMESTAMP_BITS = (32, 64)


class TimestampFormat(enum.Enum):
    RFC2822 = "rfc2822"
    RFC3339 = "rfc3339"


@dataclass(frozen=True)
class TimestampVariant:
    bits: int
    standard: TimestampFormat

    @property
    def size(self) -> int:
        return self.bits // 8

    @property
    def label(self) -> str:
        return "{}-bit {}".format(self.bits, self.standard.value)


_ALL = frozenset(
    TimestampVariant(bits, standard) for bits in _TIMESTAMP_BITS for standard in TimestampFormat
)


def parse_rfc2822(text: str) -> datetime:
    try:
        moment = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        moment = None
    if moment is None:
        raise ConversionError("{!r} is not an RFC 2822 date".format(text))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def parse_rfc3339(text: str) -> datetime:
    match = _RFC3339_RE.match(text)
    if match is None:
        raise ConversionError("{!r} is not an RFC 3339 date".format(text))

    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    # fromisoformat only accepts 3 or 6 fraction digits before Python 3.11
    fraction = (match.group("fraction") or "").ljust(6, "0")[:6]
    normalised = "{}T{}.{}{}".format(match.group("date"), match.group("time"), fraction, offset)
    try:
        return datetime.fromisoformat(normalised)
    except ValueError:
        raise ConversionError("{!r} is not a valid date".format(text)) from None


_PARSERS = {
    TimestampFormat.RFC2822: parse_rfc2822,
    TimestampFormat.RFC3339: parse_rfc3339,
}


def _fits(timestamp: int, bits: int) -> bool:
    return -(1 << (bits - 1)) <= timestamp < (1 << (bits - 1))


class TimestampCodec(BaseCodec):
    """Unix time stored as a signed 32- or 64-bit integer."""

    key = "timestamp"
    endianness = Endianness.DUAL

    @property
    def name(self) -> str:
        return "Unix time"

    def identify(self, text: str) -> Optional[List[TimestampVariant]]:
        variants = []
        for standard, parse in _PARSERS.items():
            try:
                timestamp = int(parse(text).timestamp())
            except (ConversionError, OverflowError):
                continue
            variants.extend(
                TimestampVariant(bits, standard) for bits in _TIMESTAMP_BITS if _fits(timestamp, bits)
            )
        return found(variants)

    def decode(self, text: str, variant: TimestampVariant) -> bytes:
        self._check_variant(variant, _ALL)
        timestamp = int(_PARSERS[variant.standard](text).timestamp())
        if not _fits(timestamp, variant.bits):
            raise ConversionError("{} does not fit in {} bits".format(timestamp, variant.bits))
        return timestamp.to_bytes(variant.size, "little", signed=True)

    def variants(self, ir: bytes) -> Optional[List[TimestampVariant]]:
        if len(ir) * 8 not in _TIMESTAMP_BITS:
            return None
        try:
            self._moment(ir)
        except ConversionError:
            return None
        return [TimestampVariant(len(ir) * 8, standard) for standard in TimestampFormat]

    def encode(self, ir: bytes, variant: TimestampVariant) -> str:
        self._check_variant(variant, _ALL)
        if len(ir) != variant.size:
            raise ConversionError("{} needs {} bytes, got {}".format(variant.label, variant.size, len(ir)))
        moment = self._moment(ir)
        if variant.standard is TimestampFormat.RFC2822:
            return format_datetime(moment)
        return moment.isoformat().replace("+00:00", "Z")

    @staticmethod
    def _moment(ir: bytes) -> datetime:
        timestamp = int.from_bytes(ir, "little", signed=True)
        try:
            return datetime.fromtimestamp(timestamp, tz=timezone.utc)
        except (OverflowError, ValueError, OSError):
            raise ConversionError("{} is outside the representable date range".format(timestamp)) from None
