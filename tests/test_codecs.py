"""Unit tests for every codec module.

WHY: Each codec is a two-way contract: identify() must offer exactly the
plausible readings, decode() must produce the documented IR layout, and
encode() must render the IR back. A codec that over-identifies floods the
menu; one that mis-orders bytes gives wrong answers everywhere.

HOW: For each codec, known inputs are identified, decoded to hand-checked
IR, and rendered back. Foreign variants must raise VariantMismatch and
bad data must raise ConversionError subclasses.

RULES:
- Numeric IR is little-endian (least-significant byte first)
- Codecs whose output depends on configuration are built by fixtures
"""

import pytest

from byte_converter.codecs import CODECS, CODECS_BY_KEY
from byte_converter.codecs.base import BaseCodec, found
from byte_converter.codecs.base64_family import (
    BASE64_VARIANTS,
    STANDARD,
    STANDARD_NO_PAD,
    URL_SAFE,
    URL_SAFE_NO_PAD,
    Base64Codec,
    Base85Codec,
    Base85Flavour,
    Base91Codec,
    Base91Form,
    base64_decode,
    base64_encode,
    base85_decode,
    base85_encode,
)
from byte_converter.codecs.byte_list import ByteListCodec, HexForm, ListForm
from byte_converter.codecs.colour import ColourForm
from byte_converter.codecs.digest import DigestCodec, DigestVariant
from byte_converter.codecs.escaped import EscapedStringCodec, EscapeForm
from byte_converter.codecs.fixed_float import FixedFloatCodec, FloatWidth
from byte_converter.codecs.fixed_int import IntVariant
from byte_converter.codecs.identifier import UUIDCodec, UuidForm
from byte_converter.codecs.network import AddressForm, IPv4Codec, IPv6Codec
from byte_converter.codecs.numeral import NumeralCodec, NumeralVariant, split_prefix
from byte_converter.codecs.text import (
    NameForm,
    TextForm,
    UnicodeNameCodec,
    UrlCodec,
    UrlForm,
    Utf8Codec,
)
from byte_converter.codecs.timestamp import (
    TimestampCodec,
    TimestampFormat,
    TimestampVariant,
    parse_rfc3339,
)
from byte_converter.core.errors import ConversionError, InvalidText, VariantMismatch
from byte_converter.core.escape import Dialect
from byte_converter.core.ir import Endianness


def _labels(variants):
    return [variant.label for variant in variants]


# =========================================================================
# Registry and base contract
# =========================================================================

class TestRegistry:
    """The static codec list."""

    def test_keys_are_unique(self):
        assert len(CODECS_BY_KEY) == len(CODECS)

    def test_every_codec_has_a_name(self):
        for codec in CODECS:
            assert codec.name
            assert codec.key

    def test_every_codec_supports_a_direction(self):
        for codec in CODECS:
            assert codec.can_decode or codec.can_encode

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            CODECS_BY_KEY["extra"] = Utf8Codec()

    def test_found_collapses_empty(self):
        assert found([]) is None
        assert found([1]) == [1]


class TestBaseCodec:
    """Defaults of a codec that implements nothing."""

    class _Nothing(BaseCodec):
        key = "nothing"

        @property
        def name(self):
            return "Nothing"

    def test_defaults(self):
        codec = self._Nothing()
        assert codec.identify("x") is None
        assert codec.variants(b"x") is None
        assert not codec.can_decode
        assert not codec.can_encode
        assert codec.endianness is Endianness.DEFAULT

    def test_unsupported_direction_raises_variant_mismatch(self):
        codec = self._Nothing()
        with pytest.raises(VariantMismatch):
            codec.decode("x", None)
        with pytest.raises(VariantMismatch):
            codec.encode(b"x", None)


# =========================================================================
# Numbers
# =========================================================================

class TestNumeralCodec:
    """Base 2-16 numerals."""

    def test_hex_digits_offer_only_hex(self, numeral_codec):
        assert numeral_codec.identify("ff") == [NumeralVariant(16)]

    def test_octal_digits_offer_configured_radices(self, numeral_codec):
        assert numeral_codec.identify("777") == [
            NumeralVariant(8), NumeralVariant(10), NumeralVariant(16)
        ]

    def test_prefix_pins_radix(self, numeral_codec):
        assert numeral_codec.identify("0x1f") == [NumeralVariant(16)]
        assert numeral_codec.identify("0b101") == [NumeralVariant(2)]

    def test_invalid_prefix_falls_back_to_plain_digits(self, numeral_codec):
        assert numeral_codec.identify("0b1f") == [NumeralVariant(16)]
        assert numeral_codec.decode("0b1f", NumeralVariant(16)) == b"\x1f\x0b"

    def test_not_a_number(self, numeral_codec):
        assert numeral_codec.identify("hello") is None
        assert numeral_codec.identify("") is None

    def test_decode(self, numeral_codec):
        assert numeral_codec.decode("ff", NumeralVariant(16)) == b"\xff"
        assert numeral_codec.decode("0x1ff", NumeralVariant(16)) == b"\xff\x01"
        assert numeral_codec.decode("777", NumeralVariant(8)) == b"\xff\x01"

    def test_encode_every_configured_radix(self, numeral_codec):
        variants = numeral_codec.variants(b"\xff")
        assert _labels(variants) == ["Base 2", "Base 8", "Base 10", "Base 16"]
        assert [numeral_codec.encode(b"\xff", v) for v in variants] == [
            "11111111", "377", "255", "FF"
        ]

    def test_empty_ir_is_not_a_number(self, numeral_codec):
        assert numeral_codec.variants(b"") is None

    def test_foreign_variant(self, numeral_codec):
        with pytest.raises(VariantMismatch):
            numeral_codec.decode("ff", STANDARD)

    def test_split_prefix(self):
        assert split_prefix("0XFF") == (16, "FF")
        assert split_prefix("0x") == (None, "0x")
        assert split_prefix("ff") == (None, "ff")

    def test_size_limit(self):
        codec = NumeralCodec(radices=(2, 16), max_bytes=2)
        assert codec.identify("1" * 16) == [NumeralVariant(2), NumeralVariant(16)]
        assert codec.identify("1" * 17) is None
        assert codec.identify("0x" + "f" * 17) is None
        assert codec.variants(b"\xff\xff") is not None
        assert codec.variants(b"\xff\xff\xff") is None

    def test_leading_zeros_do_not_count_towards_the_limit(self):
        codec = NumeralCodec(radices=(2,), max_bytes=1)
        assert codec.identify("0" * 40 + "1") == [NumeralVariant(2)]
        assert codec.decode("0" * 40 + "1", NumeralVariant(2)) == b"\x01"

    def test_decode_over_the_limit(self):
        codec = NumeralCodec(radices=(2,), max_bytes=1)
        with pytest.raises(ConversionError, match="limit"):
            codec.decode("1" * 9, NumeralVariant(2))


class TestFixedIntCodec:
    """Primitive signed and unsigned integers."""

    def test_negative_is_signed_only(self, int_codec):
        assert _labels(int_codec.identify("-1")) == ["i8", "i16", "i32", "i64", "i128"]

    def test_unsigned_byte_boundary(self, int_codec):
        assert _labels(int_codec.identify("255")) == [
            "u8", "u16", "i16", "u32", "i32", "u64", "i64", "u128", "i128"
        ]

    def test_decode_decimal(self, int_codec):
        assert int_codec.decode("-1", IntVariant(16, True)) == b"\xff\xff"
        assert int_codec.decode("258", IntVariant(32, False)) == b"\x02\x01\x00\x00"

    def test_decode_out_of_range(self, int_codec):
        with pytest.raises(ConversionError):
            int_codec.decode("256", IntVariant(8, False))

    def test_hex_numeral_needs_wide_enough_type(self, int_codec):
        labels = _labels(int_codec.identify("0x1ff"))
        assert "u8" not in labels
        assert labels[:2] == ["u16", "i16"]
        assert int_codec.decode("0x1ff", IntVariant(32, False)) == b"\xff\x01\x00\x00"

    def test_not_an_integer(self, int_codec):
        assert int_codec.identify("1.5") is None
        assert int_codec.identify("hello") is None

    def test_decimal_wider_than_128_bits(self, int_codec):
        assert _labels(int_codec.identify(str((1 << 128) - 1))) == ["u128"]
        assert int_codec.identify("1" + "0" * 39) is None
        assert int_codec.identify("9" * 5000) is None
        assert int_codec.identify("-" + "9" * 5000) is None

    def test_leading_zeros_are_not_digits(self, int_codec):
        assert _labels(int_codec.identify("0" * 50 + "1"))[:2] == ["u8", "i8"]

    def test_decode_very_long_decimal(self, int_codec):
        with pytest.raises(ConversionError, match="do not fit"):
            int_codec.decode("9" * 5000, IntVariant(128, False))

    def test_hex_wider_than_128_bits(self, int_codec):
        assert _labels(int_codec.identify("0x" + "f" * 32)) == ["u128", "i128"]
        assert int_codec.identify("0x" + "f" * 33) is None
        assert int_codec.identify("f" * 5000) is None
        with pytest.raises(ConversionError):
            int_codec.decode("0x" + "f" * 5000, IntVariant(128, False))

    def test_encode(self, int_codec):
        assert int_codec.encode(b"\xff\xff", IntVariant(16, True)) == "-1"
        assert int_codec.encode(b"\xff\xff", IntVariant(16, False)) == "65535"

    def test_variants_need_exact_width(self, int_codec):
        assert int_codec.variants(b"\x01\x02\x03") is None
        assert _labels(int_codec.variants(b"\x01\x02")) == ["u16", "i16"]

    def test_encode_length_mismatch(self, int_codec):
        with pytest.raises(ConversionError):
            int_codec.encode(b"\x01", IntVariant(16, False))

    def test_is_dual_endian(self, int_codec):
        assert int_codec.endianness is Endianness.DUAL


class TestFixedFloatCodec:
    """IEEE 754 half, single and double."""

    def test_identify_small_value(self):
        assert FixedFloatCodec().identify("1.5") == [
            FloatWidth.HALF, FloatWidth.SINGLE, FloatWidth.DOUBLE
        ]

    def test_large_value_only_fits_double(self):
        assert FixedFloatCodec().identify("1e300") == [FloatWidth.DOUBLE]

    def test_not_a_float(self):
        assert FixedFloatCodec().identify("abc") is None

    def test_decode_single(self):
        assert FixedFloatCodec().decode("1.0", FloatWidth.SINGLE) == b"\x00\x00\x80\x3f"

    def test_decode_double(self):
        assert FixedFloatCodec().decode("1.0", FloatWidth.DOUBLE) == b"\x00" * 6 + b"\xf0\x3f"

    def test_encode(self):
        codec = FixedFloatCodec()
        assert codec.variants(b"\x00\x00\x80\x3f") == [FloatWidth.SINGLE]
        assert codec.encode(b"\x00\x00\x80\x3f", FloatWidth.SINGLE) == "1.0"

    def test_odd_sizes_are_not_floats(self):
        assert FixedFloatCodec().variants(b"\x00\x00\x00") is None


class TestTimestampCodec:
    """Unix time from RFC 2822 and RFC 3339 dates."""

    def test_rfc3339_identifies_both_widths(self):
        assert TimestampCodec().identify("1970-01-01T00:00:10Z") == [
            TimestampVariant(32, TimestampFormat.RFC3339),
            TimestampVariant(64, TimestampFormat.RFC3339),
        ]

    def test_rfc2822(self):
        variants = TimestampCodec().identify("Thu, 01 Jan 1970 00:00:10 +0000")
        assert TimestampVariant(32, TimestampFormat.RFC2822) in variants

    def test_after_2038_needs_64_bits(self):
        assert TimestampCodec().identify("2040-01-01T00:00:00Z") == [
            TimestampVariant(64, TimestampFormat.RFC3339)
        ]

    def test_decode(self):
        variant = TimestampVariant(32, TimestampFormat.RFC3339)
        assert TimestampCodec().decode("1970-01-01T00:00:10Z", variant) == b"\x0a\x00\x00\x00"

    def test_offset_is_applied(self):
        variant = TimestampVariant(32, TimestampFormat.RFC3339)
        assert TimestampCodec().decode("1970-01-01T01:00:00+01:00", variant) == b"\x00" * 4

    def test_fraction_is_truncated(self):
        variant = TimestampVariant(64, TimestampFormat.RFC3339)
        assert TimestampCodec().decode("1970-01-01T00:00:01.5Z", variant) == b"\x01" + b"\x00" * 7

    def test_encode_both_standards(self):
        codec = TimestampCodec()
        ir = b"\x0a\x00\x00\x00"
        assert codec.encode(ir, TimestampVariant(32, TimestampFormat.RFC3339)) == "1970-01-01T00:00:10Z"
        assert codec.encode(ir, TimestampVariant(32, TimestampFormat.RFC2822)) == (
            "Thu, 01 Jan 1970 00:00:10 +0000"
        )

    def test_rfc3339_requires_offset(self):
        with pytest.raises(ConversionError):
            parse_rfc3339("1970-01-01T00:00:00")

    def test_not_a_date(self):
        assert TimestampCodec().identify("hello") is None


# =========================================================================
# Structured binary values
# =========================================================================

class TestNetworkCodecs:
    """IPv4 and IPv6 addresses, optionally with a port."""

    def test_ipv4(self, loopback_ir):
        codec = IPv4Codec()
        assert codec.identify("127.0.0.1") == [AddressForm.WITHOUT_PORT]
        assert codec.decode("127.0.0.1", AddressForm.WITHOUT_PORT) == loopback_ir
        assert codec.encode(loopback_ir, AddressForm.WITHOUT_PORT) == "127.0.0.1"

    def test_ipv4_with_port(self):
        codec = IPv4Codec()
        assert codec.identify("127.0.0.1:8080") == [AddressForm.WITH_PORT]
        ir = codec.decode("127.0.0.1:8080", AddressForm.WITH_PORT)
        assert ir == b"\x01\x00\x00\x7f\x90\x1f"
        assert codec.variants(ir) == [AddressForm.WITH_PORT]
        assert codec.encode(ir, AddressForm.WITH_PORT) == "127.0.0.1:8080"

    def test_ipv4_bad_port(self):
        assert IPv4Codec().identify("127.0.0.1:70000") is None

    @pytest.mark.parametrize("port", ["\u00b2", "\u0668\u0660", "+80", "", "123456"])
    def test_port_must_be_ascii_digits(self, port):
        assert IPv4Codec().identify("127.0.0.1:" + port) is None
        assert IPv6Codec().identify("[::1]:" + port) is None
        with pytest.raises(ConversionError):
            IPv4Codec().decode("127.0.0.1:" + port, AddressForm.WITH_PORT)

    def test_ipv4_rejects_ipv6(self):
        assert IPv4Codec().identify("::1") is None

    def test_ipv6(self):
        codec = IPv6Codec()
        assert codec.identify("::1") == [AddressForm.WITHOUT_PORT]
        ir = codec.decode("::1", AddressForm.WITHOUT_PORT)
        assert ir == b"\x01" + b"\x00" * 15
        assert codec.encode(ir, AddressForm.WITHOUT_PORT) == "::1"

    def test_ipv6_with_port(self):
        codec = IPv6Codec()
        assert codec.identify("[::1]:443") == [AddressForm.WITH_PORT]
        ir = codec.decode("[::1]:443", AddressForm.WITH_PORT)
        assert len(ir) == 18
        assert codec.encode(ir, AddressForm.WITH_PORT) == "[::1]:443"

    def test_sizes(self):
        assert IPv4Codec().variants(b"\x00" * 5) is None
        assert IPv6Codec().variants(b"\x00" * 4) is None

    def test_address_sizes(self):
        assert IPv4Codec.size == 4
        assert IPv6Codec.size == 16
        assert IPv4Codec().variants(b"\x00" * 4) == [AddressForm.WITHOUT_PORT]
        assert IPv6Codec().variants(b"\x00" * 18) == [AddressForm.WITH_PORT]
        with pytest.raises(ConversionError, match="needs 6 bytes"):
            IPv4Codec().encode(b"\x00" * 4, AddressForm.WITH_PORT)


class TestUUIDCodec:
    """RFC 4122 identifiers."""

    TEXT = "12345678-1234-5678-1234-567812345678"

    def test_round_trip(self):
        codec = UUIDCodec()
        assert codec.identify(self.TEXT) == [UuidForm.HYPHENATED]
        ir = codec.decode(self.TEXT, UuidForm.HYPHENATED)
        assert ir == bytes.fromhex("12345678123456781234567812345678")[::-1]
        assert codec.encode(ir, UuidForm.HYPHENATED) == self.TEXT

    def test_not_a_uuid(self):
        assert UUIDCodec().identify("1234") is None
        assert UUIDCodec().variants(b"\x00" * 15) is None


class TestColourCodec:
    """#RRGGBB colours."""

    def test_identify(self, colour_codec):
        assert colour_codec.identify("#ff8000") == [ColourForm.RGB]
        assert colour_codec.identify("#fff") is None
        assert colour_codec.identify("#gggggg") is None

    def test_decode_is_little_endian(self, colour_codec):
        assert colour_codec.decode("#ff8000", ColourForm.RGB) == b"\x00\x80\xff"

    def test_encode(self, colour_codec):
        assert colour_codec.encode(b"\x00\x80\xff", ColourForm.RGB) == "#ff8000"
        assert colour_codec.encode(b"\x01\x00\x00", ColourForm.RGB) == "#000001"

    def test_only_three_bytes(self, colour_codec):
        assert colour_codec.variants(b"\x00\x00") is None


# =========================================================================
# Binary-to-text encodings
# =========================================================================

class TestBase64:
    """Base64 alphabets and padding rules."""

    def test_padded_input_matches_padded_variants(self):
        assert Base64Codec().identify("aGVsbG8=") == [STANDARD, URL_SAFE]

    def test_unpadded_input(self):
        variants = Base64Codec().identify("aGVsbG8")
        assert STANDARD_NO_PAD in variants
        assert URL_SAFE_NO_PAD in variants
        assert STANDARD not in variants

    def test_decode(self):
        assert base64_decode("aGVsbG8=", STANDARD) == b"hello"
        assert base64_decode("aGVsbG8", STANDARD_NO_PAD) == b"hello"

    def test_url_safe_alphabet(self):
        assert base64_encode(b"\xfb\xff", STANDARD) == "+/8="
        assert base64_encode(b"\xfb\xff", URL_SAFE) == "-_8="
        assert base64_encode(b"\xfb\xff", URL_SAFE_NO_PAD) == "-_8"
        assert base64_decode("-_8=", URL_SAFE) == b"\xfb\xff"

    def test_standard_alphabet_is_not_url_safe(self):
        variants = Base64Codec().identify("ab+/")
        assert STANDARD in variants
        assert URL_SAFE not in variants

    def test_bad_length(self):
        assert Base64Codec().identify("a") is None
        assert Base64Codec().identify("") is None

    def test_every_variant_round_trips(self):
        codec = Base64Codec()
        data = b"\x00\x10\x83\x10\x51\x87\x20\x92\x8b"
        assert codec.variants(data) == list(BASE64_VARIANTS)
        for variant in BASE64_VARIANTS:
            assert codec.decode(codec.encode(data, variant), variant) == data


class TestBase85:
    """Ascii85, RFC 1924 and Z85."""

    def test_ascii85(self):
        assert base85_encode(b"hello", Base85Flavour.ASCII85) == "BOu!rDZ"
        assert base85_decode("BOu!rDZ", Base85Flavour.ASCII85) == b"hello"

    def test_ascii85_adobe_framing(self):
        assert base85_decode("<~BOu!rDZ~>", Base85Flavour.ASCII85) == b"hello"

    def test_rfc1924(self):
        assert base85_encode(b"hello", Base85Flavour.RFC1924) == "Xk~0{Zv"
        assert base85_decode("Xk~0{Zv", Base85Flavour.RFC1924) == b"hello"

    def test_z85_reference_vector(self):
        data = bytes.fromhex("864FD26FB559F75B")
        assert base85_encode(data, Base85Flavour.Z85) == "HelloWorld"
        assert base85_decode("HelloWorld", Base85Flavour.Z85) == data
        assert Base85Flavour.Z85 in Base85Codec().identify("HelloWorld")

    def test_z85_needs_whole_groups(self):
        with pytest.raises(ConversionError):
            base85_encode(b"abc", Base85Flavour.Z85)
        with pytest.raises(ConversionError):
            base85_decode("Hell", Base85Flavour.Z85)

    def test_variants_skip_z85_for_partial_groups(self):
        assert Base85Codec().variants(b"abc") == [Base85Flavour.ASCII85, Base85Flavour.RFC1924]


class TestBase91:
    """basE91 via the base91 package."""

    def test_round_trip(self, all_bytes):
        codec = Base91Codec()
        text = codec.encode(all_bytes, Base91Form.BASEN)
        assert codec.identify(text) == [Base91Form.BASEN]
        assert codec.decode(text, Base91Form.BASEN) == all_bytes

    def test_rejects_characters_outside_alphabet(self):
        assert Base91Codec().identify("hello world") is None
        assert Base91Codec().identify("") is None
        with pytest.raises(ConversionError):
            Base91Codec().decode("a b", Base91Form.BASEN)


# =========================================================================
# Text and byte literals
# =========================================================================

class TestEscapedStringCodec:
    """Dialect detection on top of the escape codec."""

    def test_both_dialects(self):
        assert EscapedStringCodec().identify(r"\x41") == [Dialect.C, Dialect.PYTHON]

    def test_c_only(self):
        assert EscapedStringCodec().identify(r"\x4") == [Dialect.C]

    def test_python_only(self):
        assert EscapedStringCodec().identify(r"\N{SNOWMAN}") == [Dialect.PYTHON]

    def test_malformed(self):
        assert EscapedStringCodec().identify(r"\q") is None

    def test_text_that_is_not_utf8(self):
        assert EscapedStringCodec().identify("a\udcff") is None

    def test_decode_and_encode(self):
        codec = EscapedStringCodec()
        assert codec.decode(r"\x00A", Dialect.C) == b"\x00\x0a"
        assert codec.decode(r"\x00A", Dialect.PYTHON) == b"\x00A"
        assert codec.encode(b"\x00A", EscapeForm.MINIMAL) == r"\x00\x41"

    def test_string_is_not_a_dialect(self):
        with pytest.raises(VariantMismatch):
            EscapedStringCodec().decode("abc", "C")


class TestUtf8Codec:
    """Plain text."""

    def test_everything_is_text(self):
        assert Utf8Codec().identify("anything") == [TextForm.UTF8]

    def test_decode(self):
        assert Utf8Codec().decode("é", TextForm.UTF8) == b"\xc3\xa9"

    def test_invalid_utf8_is_not_rendered(self):
        assert Utf8Codec().variants(b"\xff") is None
        with pytest.raises(InvalidText):
            Utf8Codec().encode(b"\xff", TextForm.UTF8)


class TestUnicodeNameCodec:
    """Single characters by name."""

    def test_decode(self):
        codec = UnicodeNameCodec()
        assert codec.identify("SNOWMAN") == [NameForm.CHARACTER]
        assert codec.decode("SNOWMAN", NameForm.CHARACTER) == "☃".encode("utf-8")

    def test_encode(self):
        assert UnicodeNameCodec().encode(b"A", NameForm.CHARACTER) == "LATIN CAPITAL LETTER A"

    def test_only_single_characters(self):
        assert UnicodeNameCodec().variants(b"AB") is None
        assert UnicodeNameCodec().identify("NOT A CHARACTER NAME") is None


class TestUrlCodec:
    """Percent and form encoding."""

    def test_identify(self):
        codec = UrlCodec()
        assert codec.identify("a%20b") == [UrlForm.PERCENT, UrlForm.FORM]
        assert codec.identify("a+b") == [UrlForm.FORM]
        assert codec.identify("100%") is None
        assert codec.identify("plain") is None

    def test_decode(self):
        codec = UrlCodec()
        assert codec.decode("a%20b", UrlForm.PERCENT) == b"a b"
        assert codec.decode("a+b%21", UrlForm.FORM) == b"a b!"

    def test_encode(self):
        codec = UrlCodec()
        assert codec.encode(b"a b/", UrlForm.PERCENT) == "a%20b%2F"
        assert codec.encode(b"a b/", UrlForm.FORM) == "a+b%2F"


class TestByteLiterals:
    """Byte lists and hex byte strings."""

    def test_byte_list(self):
        codec = ByteListCodec()
        assert codec.identify("[1, 2, 255]") == [ListForm.DECIMAL]
        assert codec.decode("[1, 2, 255]", ListForm.DECIMAL) == b"\x01\x02\xff"
        assert codec.encode(b"\x01\x02", ListForm.DECIMAL) == "[1, 2]"

    def test_byte_list_range(self):
        assert ByteListCodec().identify("[256]") is None

    def test_empty_byte_list(self):
        assert ByteListCodec().decode("[]", ListForm.DECIMAL) == b""

    def test_hex_bytes(self, hex_bytes_codec):
        assert hex_bytes_codec.identify("de ad be ef") == [HexForm.PAIRS]
        assert hex_bytes_codec.decode("de ad be ef", HexForm.PAIRS) == b"\xde\xad\xbe\xef"
        assert hex_bytes_codec.encode(b"\xde\xad", HexForm.PAIRS) == "de ad"

    def test_hex_bytes_needs_pairs(self, hex_bytes_codec):
        assert hex_bytes_codec.identify("abc") is None


# =========================================================================
# Digests
# =========================================================================

class TestDigestCodec:
    """One-way hash renderings."""

    def test_encode_only(self):
        codec = DigestCodec(("md5", "sha256"))
        assert not codec.can_decode
        assert codec.can_encode
        assert codec.identify("abc") is None

    def test_known_digests(self):
        codec = DigestCodec(("md5", "sha256"))
        assert _labels(codec.variants(b"abc")) == ["md5", "sha256"]
        assert codec.encode(b"abc", DigestVariant("md5")) == "900150983cd24fb0d6963f7d28e17f72"
        assert codec.encode(b"abc", DigestVariant("sha256")) == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_unconfigured_algorithm(self):
        with pytest.raises(VariantMismatch):
            DigestCodec(("md5",)).encode(b"abc", DigestVariant("sha1"))

    def test_empty_ir(self):
        assert DigestCodec(("md5",)).variants(b"") is None
