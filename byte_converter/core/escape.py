"""Backslash escape-sequence lexer and codec (C and Python dialects).

WHY: Escaped strings such as ``"GET /\\r\\n\\x00"`` are the most common
way bytes are pasted around in source code, logs, and debuggers. The two
dialects disagree on details (how many digits follow ``\\x``, whether
``\\N{...}`` exists), so decoding must be dialect-aware while encoding
produces one canonical form both dialects accept.

HOW: EscapeLexer is a single-pass state machine over the input bytes.
Each call to next_token() looks at the byte under the cursor, consumes one
complete escape unit, and returns an EscapeToken carrying its span and the
bytes it stands for. Hex runs are paired into bytes directly; octal runs
go through the radix module's digit/byte converter. decode_escaped()
concatenates token values; encode_escaped() walks the bytes and picks the
shortest escape per byte.

RULES:
- Every token consumes at least one input byte; the cursor only moves forward
- Text that cannot be encoded as UTF-8 (lone surrogates) raises LexError
- Any malformed escape raises LexError and the lexer abandons the rest of
  the input (all-or-nothing decode)
- C: ``\\x`` takes a run of >= 1 hex digits, ceil(n/2) bytes in text order
- Python: ``\\x`` takes exactly two hex digits; ``\\N{NAME}`` is legal
- ``\\u``/``\\U`` take exactly 4/8 hex digits naming a Unicode scalar,
  emitted as UTF-8
- Octal: backslash + 1..3 octal digits, value must fit in one byte
- Encoding always emits ``\\xHH`` (uppercase) for non-printable bytes
"""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass
from typing import Callable, Iterator, List, NoReturn, Optional, Union

from byte_converter.core.digits import is_hex_digit, is_octal_digit, value_of
from byte_converter.core.errors import LexError, WidthOverflow
from byte_converter.core.radix import digits_to_bytes

_BACKSLASH = 0x5C

# Two-character escapes: letter after the backslash -> byte value
_SPECIAL_ESCAPES = {
    ord("\\"): 0x5C,
    ord("'"): 0x27,
    ord('"'): 0x22,
    ord("a"): 0x07,
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("v"): 0x0B,
}

# Byte value -> escape text used when encoding
_ENCODE_SPECIAL = {
    0x5C: "\\\\",
    0x27: "\\'",
    0x22: '\\"',
    0x07: "\\a",
    0x08: "\\b",
    0x0C: "\\f",
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
    0x0B: "\\v",
}

_MAX_OCTAL_DIGITS = 3


class Dialect(enum.Enum):
    """Rule set governing which escapes are legal."""

    C = "C"
    PYTHON = "Python"

    @property
    def label(self) -> str:
        return self.value


class TokenKind(enum.Enum):
    LITERAL = "literal"
    SPECIAL = "special"
    HEX = "hex"
    OCTAL = "octal"
    UNICODE = "unicode"
    NAMED = "named"


@dataclass(frozen=True)
class EscapeToken:
    """One lexical unit of escaped text.

    Attributes:
        kind: Which escape form produced the token.
        start: Offset of the first consumed input byte.
        end: Offset just past the last consumed input byte (> start).
        value: Decoded bytes the token stands for.
    """

    kind: TokenKind
    start: int
    end: int
    value: bytes


class EscapeLexer:
    """Restartable scanner yielding one EscapeToken per escape unit.

    WHY: Decoding, validation, and diagnostics all need the same view of
    where each escape starts and ends. Keeping the cursor explicit lets a
    caller resume scanning from any token boundary.

    HOW: ``position`` is the cursor into ``data``. next_token() dispatches
    on the byte under the cursor (and the byte after a backslash) to a
    small handler that validates the escape, advances the cursor past it,
    and returns the token.

    RULES:
    - next_token() returns None once the input is exhausted
    - On error the cursor jumps to the end and LexError is raised
    - Iterating the lexer yields tokens until exhaustion
    """

    def __init__(
        self,
        data: Union[bytes, bytearray, str],
        dialect: Dialect = Dialect.C,
        position: int = 0,
    ) -> None:
        if isinstance(data, str):
            try:
                data = data.encode("utf-8")
            except UnicodeEncodeError as exc:
                offset = len(data[:exc.start].encode("utf-8"))
                raise LexError(offset, "text is not valid UTF-8") from None
        self._data = bytes(data)
        self.dialect = dialect
        self.position = position

    def __iter__(self) -> Iterator[EscapeToken]:
        return self

    def __next__(self) -> EscapeToken:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self._data)

    def next_token(self) -> Optional[EscapeToken]:
        """Consume and return the next token, or None at end of input.

        Raises:
            LexError: the escape under the cursor is malformed.
        """
        if self.exhausted:
            return None

        start = self.position
        byte = self._data[start]
        if byte != _BACKSLASH:
            return self._emit(TokenKind.LITERAL, start, start + 1, bytes([byte]))

        if start + 1 >= len(self._data):
            self._fail(start, "dangling backslash")

        letter = self._data[start + 1]
        if letter in _SPECIAL_ESCAPES:
            return self._emit(
                TokenKind.SPECIAL, start, start + 2, bytes([_SPECIAL_ESCAPES[letter]])
            )
        if letter == ord("x"):
            return self._lex_hex(start)
        if letter == ord("u"):
            return self._lex_unicode(start, 4)
        if letter == ord("U"):
            return self._lex_unicode(start, 8)
        if letter == ord("N"):
            return self._lex_named(start)
        if is_octal_digit(letter):
            return self._lex_octal(start)

        self._fail(start, "unknown escape \\{}".format(chr(letter)))

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _lex_hex(self, start: int) -> EscapeToken:
        digits_start = start + 2
        if self.dialect is Dialect.PYTHON:
            count = self._run(digits_start, 2, is_hex_digit)
            if count != 2:
                self._fail(start, "\\x needs exactly 2 hex digits")
        else:
            count = self._run(digits_start, None, is_hex_digit)
            if count == 0:
                self._fail(start, "\\x needs at least 1 hex digit")

        end = digits_start + count
        run = self._data[digits_start:end]
        # odd runs get a leading zero nibble
        if count % 2:
            run = b"0" + run
        value = bytes(
            value_of(run[i]) * 16 + value_of(run[i + 1]) for i in range(0, len(run), 2)
        )
        return self._emit(TokenKind.HEX, start, end, value)

    def _lex_unicode(self, start: int, size: int) -> EscapeToken:
        digits_start = start + 2
        if self._run(digits_start, size, is_hex_digit) != size:
            self._fail(start, "\\{} needs exactly {} hex digits".format(
                chr(self._data[start + 1]), size))

        end = digits_start + size
        scalar = 0
        for byte in self._data[digits_start:end]:
            scalar = scalar * 16 + value_of(byte)
        if scalar > 0x10FFFF or 0xD800 <= scalar <= 0xDFFF:
            self._fail(start, "U+{:04X} is not a Unicode scalar value".format(scalar))
        return self._emit(TokenKind.UNICODE, start, end, chr(scalar).encode("utf-8"))

    def _lex_named(self, start: int) -> EscapeToken:
        if self.dialect is not Dialect.PYTHON:
            self._fail(start, "\\N escapes are not supported in the {} dialect".format(
                self.dialect.label))

        brace = start + 2
        if brace >= len(self._data) or self._data[brace] != ord("{"):
            self._fail(start, "\\N must be followed by {NAME}")
        close = self._data.find(b"}", brace + 1)
        if close == -1:
            self._fail(start, "unterminated \\N{...} escape")

        raw_name = self._data[brace + 1:close]
        try:
            character = unicodedata.lookup(raw_name.decode("ascii"))
        except (KeyError, UnicodeDecodeError):
            self._fail(start, "unknown Unicode character name {!r}".format(
                raw_name.decode("utf-8", errors="replace")))
        return self._emit(TokenKind.NAMED, start, close + 1, character.encode("utf-8"))

    def _lex_octal(self, start: int) -> EscapeToken:
        digits_start = start + 1
        count = self._run(digits_start, _MAX_OCTAL_DIGITS, is_octal_digit)
        end = digits_start + count
        digits = [value_of(b) for b in reversed(self._data[digits_start:end])]
        try:
            value = digits_to_bytes(digits, 8, width=1)
        except WidthOverflow:
            self._fail(start, "octal escape \\{} does not fit in a byte".format(
                self._data[digits_start:end].decode("ascii")))
        return self._emit(TokenKind.OCTAL, start, end, value)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _run(self, offset: int, limit: Optional[int], accept: Callable[[int], bool]) -> int:
        """Count consecutive accepted bytes from ``offset``, up to ``limit``."""
        count = 0
        while offset + count < len(self._data) and (limit is None or count < limit):
            if not accept(self._data[offset + count]):
                break
            count += 1
        return count

    def _emit(self, kind: TokenKind, start: int, end: int, value: bytes) -> EscapeToken:
        self.position = end
        return EscapeToken(kind=kind, start=start, end=end, value=value)

    def _fail(self, start: int, reason: str) -> NoReturn:
        self.position = len(self._data)
        raise LexError(start, reason)


def tokenize(text: Union[str, bytes], dialect: Dialect = Dialect.C) -> List[EscapeToken]:
    """Lex the whole input; raises LexError on the first malformed escape."""
    return list(EscapeLexer(text, dialect))


def decode_escaped(text: Union[str, bytes], dialect: Dialect = Dialect.C) -> bytes:
    """Decode escaped text into raw bytes.

    Raises:
        LexError: any escape in ``text`` is malformed for ``dialect``.
            Nothing decoded before the error is returned.
    """
    out = bytearray()
    for token in EscapeLexer(text, dialect):
        out.extend(token.value)
    return bytes(out)


def encode_escaped(data: bytes) -> str:
    """Encode raw bytes as minimal escaped text accepted by every dialect.

    RULES:
    - Printable ASCII passes through, except ``\\``, ``'`` and ``"``
    - Control characters with a letter escape use it (``\\n``, ``\\t``, ...)
    - Everything else is ``\\xHH`` with uppercase digits
    - A hex digit character right after a ``\\xHH`` is hex-escaped as well,
      otherwise the C dialect would read it as part of the same hex run
    """
    parts: List[str] = []
    after_hex = False
    for byte in data:
        if byte in _ENCODE_SPECIAL:
            parts.append(_ENCODE_SPECIAL[byte])
            after_hex = False
        elif 0x20 <= byte <= 0x7E and not (after_hex and is_hex_digit(byte)):
            parts.append(chr(byte))
            after_hex = False
        else:
            parts.append("\\x{:02X}".format(byte))
            after_hex = True
    return "".join(parts)
