"""Dispatcher: probe every codec, decode a choice, render everywhere.

WHY: The CLI (and any other front end) needs three operations that span
all codecs: "what could this text be", "turn this reading into IR", and
"show this IR in every other format". Keeping them here means front ends
never iterate codecs or handle byte order themselves.

HOW: identify_all() asks each decode-capable codec for variants and
wraps each one in an Interpretation. decode() delegates to the chosen
codec. render_all() asks each encode-capable codec for variants of the IR
and encodes each one; for dual-endianness codecs it repeats the process
on the byte-reversed IR and tags both results with their byte order.

RULES:
- Identification failures are silent (None/empty), logged at DEBUG
- decode()/render_all() propagate ConversionError; nothing is partially
  applied
- Reversed renderings are only produced for IR longer than one byte
- Output order follows the codec order in CODECS, then variant order
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from byte_converter.codecs import CODECS
from byte_converter.codecs.base import BaseCodec
from byte_converter.core.errors import ConversionError
from byte_converter.core.ir import Endianness, Interpretation, Rendering

logger = logging.getLogger(__name__)

LITTLE_ENDIAN = "little-endian"
BIG_ENDIAN = "big-endian"


def identify_all(text: str, codecs: Iterable[BaseCodec] = CODECS) -> List[Interpretation]:
    """Return every (codec, variant) reading of ``text``.

    Args:
        text: The raw user input.
        codecs: Codecs to probe, in menu order.

    Returns:
        Interpretations in codec order; empty when nothing matches.
    """
    interpretations: List[Interpretation] = []
    for codec in codecs:
        if not codec.can_decode:
            continue
        try:
            variants = codec.identify(text)
        except (ConversionError, OverflowError) as exc:
            logger.debug("%s rejected input: %s", codec.key, exc)
            continue
        if not variants:
            logger.debug("%s: no interpretation", codec.key)
            continue
        logger.debug("%s: %d interpretation(s)", codec.key, len(variants))
        interpretations.extend(Interpretation(codec=codec, variant=v) for v in variants)
    return interpretations


def decode(interpretation: Interpretation, text: str) -> bytes:
    """Decode ``text`` into IR using a previously identified reading.

    Raises:
        ConversionError: the chosen reading cannot actually be decoded.
    """
    ir = interpretation.codec.decode(text, interpretation.variant)
    logger.info(
        "Decoded input as %s (%s): %d byte(s)",
        interpretation.codec.name,
        interpretation.label,
        len(ir),
    )
    return ir


def _render_codec(codec: BaseCodec, ir: bytes, byte_order: Optional[str] = None) -> List[Rendering]:
    variants = codec.variants(ir)
    if not variants:
        return []
    return [
        Rendering(
            codec_key=codec.key,
            codec_name=codec.name,
            variant=variant.label,
            text=codec.encode(ir, variant),
            byte_order=byte_order,
        )
        for variant in variants
    ]


def render_all(ir: bytes, codecs: Iterable[BaseCodec] = CODECS) -> List[Rendering]:
    """Render ``ir`` in every compatible format.

    Dual-endianness codecs render the IR as stored (little-endian) and, when
    it is longer than one byte, byte-reversed (big-endian).
    """
    renderings: List[Rendering] = []
    for codec in codecs:
        if not codec.can_encode:
            continue
        if codec.endianness is Endianness.DUAL and len(ir) > 1:
            renderings.extend(_render_codec(codec, ir, LITTLE_ENDIAN))
            renderings.extend(_render_codec(codec, ir[::-1], BIG_ENDIAN))
        else:
            renderings.extend(_render_codec(codec, ir))
    return renderings
