"""Abstract base codec: the two-direction conversion contract.

WHY: The hub, the CLI, and the tests need to drive every format the same
way: ask whether text *could* be this type, decode a chosen reading into
IR, ask which renderings an IR supports, and render one. One ABC keeps
that contract in one place.

HOW: BaseCodec declares ``key``, ``name`` and ``endianness`` plus four
methods. The defaults describe a codec with neither direction, so a
decode-only or encode-only codec simply overrides the half it supports.
_check_variant() is the shared guard against foreign variants.

RULES:
- identify()/variants() never raise for bad input; None means "not this type"
- An empty variant list is reported as None
- decode()/encode() assume the variant came from identify()/variants() on
  the same input; a foreign variant raises VariantMismatch
- Every variant exposes a ``label`` string for menus and reports

To add a new format:
1. Create a new module in codecs/
2. Subclass BaseCodec, set key/name/endianness
3. Implement identify()+decode() and/or variants()+encode()
4. Add an instance to CODECS in codecs/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Container, List, Optional

from byte_converter.core.errors import VariantMismatch
from byte_converter.core.ir import Endianness

Variant = Any


class BaseCodec(ABC):
    """Abstract base for every text <-> IR codec."""

    key: str = ""
    endianness: Endianness = Endianness.DEFAULT

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Base64 data'."""

    def identify(self, text: str) -> Optional[List[Variant]]:
        """Return the variants ``text`` could be read as, or None."""
        return None

    def decode(self, text: str, variant: Variant) -> bytes:
        """Decode ``text`` as ``variant`` into IR bytes."""
        raise VariantMismatch(self.key, variant)

    def variants(self, ir: bytes) -> Optional[List[Variant]]:
        """Return the variants ``ir`` can be rendered as, or None."""
        return None

    def encode(self, ir: bytes, variant: Variant) -> str:
        """Render ``ir`` as text using ``variant``."""
        raise VariantMismatch(self.key, variant)

    @property
    def can_decode(self) -> bool:
        return type(self).identify is not BaseCodec.identify

    @property
    def can_encode(self) -> bool:
        return type(self).variants is not BaseCodec.variants

    def _check_variant(self, variant: Variant, allowed: Container[Any]) -> None:
        try:
            known = variant in allowed
        except TypeError:
            known = False
        if not known:
            raise VariantMismatch(self.key, variant)

    def __repr__(self) -> str:
        return "<{} {}>".format(type(self).__name__, self.key)


def found(variants: List[Variant]) -> Optional[List[Variant]]:
    """Collapse an empty variant list to None."""
    return variants or None
