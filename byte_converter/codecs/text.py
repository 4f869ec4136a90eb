"""Text codecs: UTF-8 strings, Unicode character names, URL encoding.

WHY: Sometimes the bytes *are* the text. Plain UTF-8 is the fallback
reading of any input, a character name (``"SNOWMAN"``) is a convenient
way to type a single code point, and percent-encoding is how bytes hide
inside URLs and form bodies.

HOW: UTF-8 decoding on the encode side is checked: IR that is not valid
UTF-8 is simply not offered as text instead of being reinterpreted.
Character names go through ``unicodedata``; URL encoding through
``urllib.parse``.

RULES:
- utf8: every text identifies; only valid UTF-8 IR renders
- unicode_name: input must be a full character name; IR must be exactly
  one named character
- url: text is identified only if it contains a %XX escape or a "+"
  (form variant); encoding offers percent and form variants
"""

from __future__ import annotations

import enum
import re
import unicodedata
import urllib.parse
from typing import List, Optional

from byte_converter.codecs.base import BaseCodec, found
from byte_converter.core.errors import ConversionError, InvalidText

_PERCENT_RE = re.compile(r"%[0-9A-Fa-f]{2}")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_utf8(data: bytes) -> str:
    """Strict UTF-8 decode; raises InvalidText instead of guessing."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidText("bytes are not valid UTF-8: {}".format(exc.reason)) from exc


class TextForm(enum.Enum):
    UTF8 = "UTF-8"

    @property
    def label(self) -> str:
        return self.value


class Utf8Codec(BaseCodec):
    key = "utf8"

    @property
    def name(self) -> str:
        return "Unicode 8 string"

    def identify(self, text: str) -> Optional[List[TextForm]]:
        return [TextForm.UTF8]

    def decode(self, text: str, variant: TextForm) -> bytes:
        self._check_variant(variant, (TextForm.UTF8,))
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            # Lone surrogates from a mis-decoded terminal
            raise InvalidText(str(exc)) from exc

    def variants(self, ir: bytes) -> Optional[List[TextForm]]:
        try:
            decode_utf8(ir)
        except InvalidText:
            return None
        return [TextForm.UTF8]

    def encode(self, ir: bytes, variant: TextForm) -> str:
        self._check_variant(variant, (TextForm.UTF8,))
        return decode_utf8(ir)


class NameForm(enum.Enum):
    CHARACTER = "character"

    @property
    def label(self) -> str:
        return "Unicode name"


class UnicodeNameCodec(BaseCodec):
    key = "unicode_name"

    @property
    def name(self) -> str:
        return "Unicode character name"

    def identify(self, text: str) -> Optional[List[NameForm]]:
        try:
            unicodedata.lookup(text)
        except KeyError:
            return None
        return [NameForm.CHARACTER]

    def decode(self, text: str, variant: NameForm) -> bytes:
        self._check_variant(variant, (NameForm.CHARACTER,))
        try:
            return unicodedata.lookup(text).encode("utf-8")
        except KeyError:
            raise ConversionError("no Unicode character named {!r}".format(text)) from None

    def variants(self, ir: bytes) -> Optional[List[NameForm]]:
        try:
            text = decode_utf8(ir)
        except InvalidText:
            return None
        if len(text) != 1 or not unicodedata.name(text, ""):
            return None
        return [NameForm.CHARACTER]

    def encode(self, ir: bytes, variant: NameForm) -> str:
        self._check_variant(variant, (NameForm.CHARACTER,))
        text = decode_utf8(ir)
        name = unicodedata.name(text, "") if len(text) == 1 else ""
        if not name:
            raise ConversionError("IR is not a single named character")
        return name


class UrlForm(enum.Enum):
    PERCENT = "percent"
    FORM = "form"

    @property
    def label(self) -> str:
        return "percent-encoded" if self is UrlForm.PERCENT else "form-encoded"


class UrlCodec(BaseCodec):
    key = "url"

    @property
    def name(self) -> str:
        return "URL encoding"

    def identify(self, text: str) -> Optional[List[UrlForm]]:
        if _BAD_PERCENT_RE.search(text):
            return None
        variants = []
        if _PERCENT_RE.search(text):
            variants.append(UrlForm.PERCENT)
        if _PERCENT_RE.search(text) or "+" in text:
            variants.append(UrlForm.FORM)
        return found(variants)

    def decode(self, text: str, variant: UrlForm) -> bytes:
        self._check_variant(variant, tuple(UrlForm))
        if variant is UrlForm.FORM:
            text = text.replace("+", " ")
        return urllib.parse.unquote_to_bytes(text)

    def variants(self, ir: bytes) -> Optional[List[UrlForm]]:
        return list(UrlForm) if ir else None

    def encode(self, ir: bytes, variant: UrlForm) -> str:
        self._check_variant(variant, tuple(UrlForm))
        if variant is UrlForm.FORM:
            return urllib.parse.quote_plus(ir)
        return urllib.parse.quote_from_bytes(ir, safe="")
