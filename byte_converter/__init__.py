"""Byte Converter: identify a value's format and re-render it everywhere.

WHY: A string like ``"7f000001"`` could be a hex number, an IPv4 address,
Base64, or plain text. This package guesses every plausible reading,
converts the chosen one into a canonical byte string (the IR), and
renders that IR in every other format it fits.

HOW: Three stages. Identify (each codec reports the variants it could
read), decode (the chosen variant produces IR bytes), render (every codec
that accepts the IR produces text). The escape-sequence codec and the
arbitrary-base converter in core/ do the heavy lifting for the two
hardest formats.

RULES:
- Every codec decodes to and encodes from the same IR (plain bytes)
- Adding a new format = one new codec module, no hub changes
- Numeric IR is stored least-significant byte first
"""

__version__ = "0.1.0"
