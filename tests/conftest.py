"""Shared test fixtures for the byte_converter test suite.

WHY: Several modules need codecs configured the same way regardless of
what a developer's .env or shell exports (radix list, digit case). Building
them here keeps every test independent of BYTECONV_* variables.

HOW: Fixtures construct codec instances with explicit arguments and expose
a few IR buffers that are reused across codec, hub and CLI tests.

RULES:
- Codec fixtures never read configuration defaults that affect output
- IR fixtures are little-endian, like every numeric IR
"""

import pytest

from byte_converter.codecs.byte_list import HexBytesCodec
from byte_converter.codecs.colour import ColourCodec
from byte_converter.codecs.fixed_int import FixedIntCodec
from byte_converter.codecs.numeral import NumeralCodec

STANDARD_RADICES = (2, 8, 10, 16)
INTEGER_WIDTHS = (8, 16, 32, 64, 128)
NUMERAL_BYTES = 1024

# 127.0.0.1 stored least-significant byte first
LOOPBACK_IR = b"\x01\x00\x00\x7f"


@pytest.fixture
def numeral_codec():
    return NumeralCodec(radices=STANDARD_RADICES, uppercase=True, max_bytes=NUMERAL_BYTES)


@pytest.fixture
def int_codec():
    return FixedIntCodec(widths=INTEGER_WIDTHS, radices=STANDARD_RADICES)


@pytest.fixture
def hex_bytes_codec():
    return HexBytesCodec(uppercase=False)


@pytest.fixture
def colour_codec():
    return ColourCodec(uppercase=False)


@pytest.fixture
def loopback_ir():
    """The IR of the IPv4 loopback address."""
    return LOOPBACK_IR


@pytest.fixture
def all_bytes():
    """Every byte value once, in order."""
    return bytes(range(256))
