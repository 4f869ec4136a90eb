"""Hash digest codec (encode only).

Digests are one-way, so this codec has no identify()/decode(); every
non-empty IR renders as the hex digest of each configured algorithm.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, List, Optional

from byte_converter.codecs.base import BaseCodec
from byte_converter.config import DIGEST_ALGORITHMS


@dataclass(frozen=True)
class DigestVariant:
    algorithm: str

    @property
    def label(self) -> str:
        return self.algorithm


class DigestCodec(BaseCodec):
    key = "digest"

    def __init__(self, algorithms: Iterable[str] = DIGEST_ALGORITHMS) -> None:
        self._variants = tuple(DigestVariant(name) for name in algorithms)

    @property
    def name(self) -> str:
        return "Hashes"

    def variants(self, ir: bytes) -> Optional[List[DigestVariant]]:
        return list(self._variants) if ir else None

    def encode(self, ir: bytes, variant: DigestVariant) -> str:
        self._check_variant(variant, self._variants)
        return hashlib.new(variant.algorithm, ir).hexdigest()
