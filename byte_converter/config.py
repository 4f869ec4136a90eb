"""Configuration constants and .env loading.

WHY: Centralizes every tunable value (offered radices, digit case, input
size limit, log level) so it is easy to find and override without
touching codec logic. Integer, float, and digest catalogues are plain
data here rather than buried in the codecs.

HOW: python-dotenv loads the .env file on import. Constants are
module-level values read from environment variables with defaults.
parse_radices() turns the radix list into a validated tuple and raises a
clear error on bad values.

RULES:
- All defaults can be overridden via BYTECONV_* environment variables
- NUMERAL_RADICES values must lie in 2..16
- MAX_INPUT_LENGTH bounds the text the CLI accepts
- MAX_NUMERAL_BYTES bounds the IR the numeral codec reads or renders;
  radix conversion is quadratic in the digit count
"""

from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

from byte_converter.core.radix import MAX_RADIX, MIN_RADIX

# Load .env from the working directory
load_dotenv()


def parse_radices(raw: str) -> Tuple[int, ...]:
    """Parse a comma-separated radix list such as ``"2,8,10,16"``.

    RULES:
    - Whitespace around entries is ignored, empty entries are skipped
    - Result is sorted and de-duplicated
    - Raises ValueError for non-integers, values outside 2..16, or an
      empty list
    """
    radices = set()
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            radix = int(part)
        except ValueError:
            raise ValueError("Invalid radix in BYTECONV_RADICES: {!r}".format(part)) from None
        if not MIN_RADIX <= radix <= MAX_RADIX:
            raise ValueError(
                "Radix {} out of range; BYTECONV_RADICES values must be {}-{}".format(
                    radix, MIN_RADIX, MAX_RADIX)
            )
        radices.add(radix)
    if not radices:
        raise ValueError("BYTECONV_RADICES must list at least one radix")
    return tuple(sorted(radices))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Numeral rendering
# ---------------------------------------------------------------------------

NUMERAL_RADICES: Tuple[int, ...] = parse_radices(os.getenv("BYTECONV_RADICES", "2,8,10,16"))
UPPERCASE_DIGITS: bool = _env_flag("BYTECONV_UPPERCASE", "true")

# ---------------------------------------------------------------------------
# Limits and logging
# ---------------------------------------------------------------------------

MAX_INPUT_LENGTH = int(os.getenv("BYTECONV_MAX_INPUT", "65536"))
MAX_NUMERAL_BYTES = int(os.getenv("BYTECONV_MAX_NUMERAL_BYTES", "1024"))
LOG_LEVEL = os.getenv("BYTECONV_LOG_LEVEL", "WARNING").upper()

# ---------------------------------------------------------------------------
# Fixed-size type catalogues
# ---------------------------------------------------------------------------

INTEGER_WIDTHS: Tuple[int, ...] = (8, 16, 32, 64, 128)
"""Integer widths in bits offered by the fixed_int codec."""

DIGEST_ALGORITHMS: Tuple[str, ...] = ("md5", "sha1", "sha256", "sha512", "blake2b")
"""hashlib algorithm names rendered by the digest codec."""
