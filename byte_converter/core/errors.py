"""Error taxonomy for identification, decoding, and encoding.

WHY: Callers probe many codecs cheaply and only care *why* a conversion
failed once the user has picked one. Typed exceptions let the CLI report
the specific failure kind while identification stays silent.

HOW: Every recoverable input error derives from ConversionError, which is
itself a ValueError so generic ``except ValueError`` handlers still work.
VariantMismatch sits outside that tree: it signals a caller bug.

RULES:
- identify()/variants() swallow ConversionError and return None
- decode()/encode() on a chosen variant propagate ConversionError
- VariantMismatch is never caught by library code or the CLI
"""

from __future__ import annotations

from typing import Optional


class ConversionError(ValueError):
    """Base class for input that cannot be converted."""


class InvalidDigit(ConversionError):
    """Raised when a character or digit value is outside the radix alphabet.

    RULES:
    - ``digit`` is the offending character (str) or value (int)
    - ``radix`` is None when the character is not a base-16 digit at all
    """

    def __init__(self, digit: object, radix: Optional[int] = None) -> None:
        self.digit = digit
        self.radix = radix
        if radix is None:
            message = "{!r} is not a digit in 0-9a-fA-F".format(digit)
        else:
            message = "{!r} is not a valid base {} digit".format(digit, radix)
        super().__init__(message)


class WidthOverflow(ConversionError):
    """Raised when a magnitude needs more bytes than a fixed width allows."""

    def __init__(self, required: int, width: int) -> None:
        self.required = required
        self.width = width
        super().__init__(
            "value needs {} byte(s) but the width is {}".format(required, width)
        )


class EscapeError(ConversionError):
    """Base class for escaped-string codec failures."""


class LexError(EscapeError):
    """Raised by the escape lexer on a malformed escape sequence.

    RULES:
    - ``position`` is the byte offset of the backslash that started the
      offending escape
    - ``reason`` is a short human-readable description
    """

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__("{} at byte {}".format(reason, position))


class InvalidText(ConversionError):
    """Raised when bytes must be text but are not valid UTF-8."""


class VariantMismatch(TypeError):
    """Raised when a codec receives a variant it never produced.

    WHY: Variants are opaque tags handed back by identify()/variants().
    Passing one codec's variant to another codec is a programming error,
    so it must fail loudly instead of silently picking a default.
    """

    def __init__(self, codec: str, variant: object) -> None:
        self.codec = codec
        self.variant = variant
        super().__init__("{!r} is not a variant of the {} codec".format(variant, codec))
