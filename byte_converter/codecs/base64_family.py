"""Base64, Base85 and Base91 codecs.

WHY: Binary blobs travel through text channels in one of many radix-64,
-85 or -91 alphabets. Several alphabets accept the same string, so the
user is offered every alphabet that decodes the input cleanly.

HOW: Base64 variants share one implementation: text in the variant's
alphabet is translated into the standard alphabet, padded, and decoded by
``base64.b64decode(validate=True)``; encoding runs the same steps
backwards. Base85 uses ``base64.a85*``/``base64.b85*``, with Z85 as an
alphabet translation of RFC 1924 (both pack 4 bytes big-endian into 5
digits). Base91 uses the ``base91`` package.

RULES:
- Empty text is never identified
- Padded Base64 variants require a length that is a multiple of 4;
  unpadded variants reject ``=``
- "URL-safe" is the URL-safe alphabet with padding, "URL-safe no padding"
  the same alphabet without it
- Z85 requires text length divisible by 5 and IR length divisible by 4
- Base91 text must only use the 91-character alphabet
"""

from __future__ import annotations

import base64
import binascii
import enum
import string
from dataclasses import dataclass
from typing import List, Optional

import base91

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.core.errors import ConversionError

# ---------------------------------------------------------------------------
# Base64
# ---------------------------------------------------------------------------

_B64_STANDARD = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"


@dataclass(frozen=True)
class Base64Variant:
    """One Base64 alphabet/padding configuration."""

    label: str
    alphabet: str
    padded: bool

    def to_standard(self, text: str) -> str:
        return text.translate(str.maketrans(self.alphabet, _B64_STANDARD))

    def from_standard(self, text: str) -> str:
        return text.translate(str.maketrans(_B64_STANDARD, self.alphabet))


STANDARD = Base64Variant("Standard", _B64_STANDARD, True)
STANDARD_NO_PAD = Base64Variant("Standard no padding", _B64_STANDARD, False)
URL_SAFE = Base64Variant("URL-safe", _B64_STANDARD[:62] + "-_", True)
URL_SAFE_NO_PAD = Base64Variant("URL-safe no padding", _B64_STANDARD[:62] + "-_", False)
IMAP = Base64Variant("IMAP UTF-7", _B64_STANDARD[:62] + "+,", False)
BCRYPT = Base64Variant(
    "bcrypt", "./" + string.ascii_uppercase + string.ascii_lowercase + string.digits, False
)
CRYPT = Base64Variant(
    "crypt", "./" + string.digits + string.ascii_uppercase + string.ascii_lowercase, False
)

BASE64_VARIANTS = (STANDARD, STANDARD_NO_PAD, URL_SAFE, URL_SAFE_NO_PAD, IMAP, BCRYPT, CRYPT)


def base64_decode(text: str, variant: Base64Variant) -> bytes:
    """Strictly decode ``text`` in the given Base64 configuration."""
    body = text.rstrip("=")
    if variant.padded:
        if len(text) % 4 or len(text) - len(body) > 2:
            raise ConversionError("bad Base64 padding")
    elif body != text:
        raise ConversionError("{} does not use padding".format(variant.label))

    if len(body) % 4 == 1 or any(char not in variant.alphabet for char in body):
        raise ConversionError("{!r} is not {} Base64".format(text, variant.label))

    standard = variant.to_standard(body)
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except binascii.Error as exc:
        raise ConversionError(str(exc)) from exc


def base64_encode(data: bytes, variant: Base64Variant) -> str:
    encoded = variant.from_standard(base64.b64encode(data).decode("ascii").rstrip("="))
    if variant.padded:
        encoded += "=" * (-len(encoded) % 4)
    return encoded


class Base64Codec(BaseCodec):
    key = "base64"

    @property
    def name(self) -> str:
        return "Base64 data"

    def identify(self, text: str) -> Optional[List[Base64Variant]]:
        if not text:
            return None
        variants = []
        for variant in BASE64_VARIANTS:
            try:
                base64_decode(text, variant)
            except ConversionError:
                continue
            variants.append(variant)
        return found(variants)

    def decode(self, text: str, variant: Base64Variant) -> bytes:
        self._check_variant(variant, BASE64_VARIANTS)
        return base64_decode(text, variant)

    def variants(self, ir: bytes) -> Optional[List[Base64Variant]]:
        return list(BASE64_VARIANTS) if ir else None

    def encode(self, ir: bytes, variant: Base64Variant) -> str:
        self._check_variant(variant, BASE64_VARIANTS)
        return base64_encode(ir, variant)


# ---------------------------------------------------------------------------
# Base85
# ---------------------------------------------------------------------------

_RFC1924_ALPHABET = (
    string.digits + string.ascii_uppercase + string.ascii_lowercase + "!#$%&()*+-;<=>?@^_`{|}~"
)
_Z85_ALPHABET = (
    string.digits + string.ascii_lowercase + string.ascii_uppercase + ".-:+=^!/*?&<>()[]{}@%$#"
)
_Z85_TO_RFC1924 = str.maketrans(_Z85_ALPHABET, _RFC1924_ALPHABET)
_RFC1924_TO_Z85 = str.maketrans(_RFC1924_ALPHABET, _Z85_ALPHABET)


class Base85Flavour(enum.Enum):
    ASCII85 = "ascii85"
    RFC1924 = "RFC 1924"
    Z85 = "z85"

    @property
    def label(self) -> str:
        return self.value


def base85_decode(text: str, flavour: Base85Flavour) -> bytes:
    if flavour is Base85Flavour.Z85:
        if len(text) % 5 or any(char not in _Z85_ALPHABET for char in text):
            raise ConversionError("{!r} is not Z85".format(text))
        text = text.translate(_Z85_TO_RFC1924)

    try:
        if flavour is Base85Flavour.ASCII85:
            adobe = text.startswith("<~") and text.endswith("~>")
            return base64.a85decode(text, adobe=adobe)
        return base64.b85decode(text)
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc


def base85_encode(data: bytes, flavour: Base85Flavour) -> str:
    if flavour is Base85Flavour.ASCII85:
        return base64.a85encode(data).decode("ascii")
    if flavour is Base85Flavour.RFC1924:
        return base64.b85encode(data).decode("ascii")
    if len(data) % 4:
        raise ConversionError("Z85 needs a multiple of 4 bytes, got {}".format(len(data)))
    return base64.b85encode(data).decode("ascii").translate(_RFC1924_TO_Z85)


class Base85Codec(BaseCodec):
    key = "base85"

    @property
    def name(self) -> str:
        return "Base85 data"

    def identify(self, text: str) -> Optional[List[Base85Flavour]]:
        if not text:
            return None
        variants = []
        for flavour in Base85Flavour:
            try:
                base85_decode(text, flavour)
            except ConversionError:
                continue
            variants.append(flavour)
        return found(variants)

    def decode(self, text: str, variant: Base85Flavour) -> bytes:
        self._check_variant(variant, tuple(Base85Flavour))
        return base85_decode(text, variant)

    def variants(self, ir: bytes) -> Optional[List[Base85Flavour]]:
        if not ir:
            return None
        flavours = [Base85Flavour.ASCII85, Base85Flavour.RFC1924]
        if len(ir) % 4 == 0:
            flavours.append(Base85Flavour.Z85)
        return flavours

    def encode(self, ir: bytes, variant: Base85Flavour) -> str:
        self._check_variant(variant, tuple(Base85Flavour))
        return base85_encode(ir, variant)


# ---------------------------------------------------------------------------
# Base91
# ---------------------------------------------------------------------------

_BASE91_ALPHABET = frozenset(
    string.ascii_uppercase + string.ascii_lowercase + string.digits + '!#$%&()*+,./:;<=>?@[]^_`{|}~"'
)


class Base91Form(enum.Enum):
    BASEN = "basE91"

    @property
    def label(self) -> str:
        return self.value


class Base91Codec(BaseCodec):
    key = "base91"

    @property
    def name(self) -> str:
        return "Base91 data"

    def identify(self, text: str) -> Optional[List[Base91Form]]:
        if not text or any(char not in _BASE91_ALPHABET for char in text):
            return None
        return [Base91Form.BASEN]

    def decode(self, text: str, variant: Base91Form) -> bytes:
        self._check_variant(variant, (Base91Form.BASEN,))
        if any(char not in _BASE91_ALPHABET for char in text):
            raise ConversionError("{!r} is not basE91".format(text))
        return bytes(base91.decode(text))

    def variants(self, ir: bytes) -> Optional[List[Base91Form]]:
        return [Base91Form.BASEN] if ir else None

    def encode(self, ir: bytes, variant: Base91Form) -> str:
        self._check_variant(variant, (Base91Form.BASEN,))
        return base91.encode(ir)
