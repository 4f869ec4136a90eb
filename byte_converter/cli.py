"""Command-line interface for the byte format converter.

WHY: Users paste a value into the terminal and want to know what it could
be and what it looks like in every other format. The CLI wires the hub
together behind a single command that can also be piped or scripted.

HOW: Uses argparse to accept the value, an optional interpretation index,
codec filters, and a JSON switch. Without ``--choose`` it prints the
"Possible types" menu; with it, the chosen reading is decoded into IR and
every compatible rendering is printed under "Other formats". Status and
errors go to stderr, results to stdout.

RULES:
- Positional argument: the value to convert
- --choose N selects interpretation N from the menu (0-based)
- --from / --to: comma-separated codec keys (default: all registered)
- --json prints a single JSON report instead of the text menus
- Input longer than MAX_INPUT_LENGTH is rejected before any codec runs
- Exit status: 0 on success, 1 on no match or conversion error, 2 on usage error
- ConversionError is reported as "Error: ..."; VariantMismatch is a bug
  and is never caught
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import groupby
from typing import Any, Dict, List, NoReturn, Optional, Sequence

from byte_converter import __version__
from byte_converter.codecs import CODECS, CODECS_BY_KEY
from byte_converter.codecs.base import BaseCodec
from byte_converter.config import LOG_LEVEL, MAX_INPUT_LENGTH
from byte_converter.core.errors import ConversionError
from byte_converter.core.ir import Interpretation, Rendering
from byte_converter.hub import decode, identify_all, render_all

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    _status("Error: {}".format(msg))
    sys.exit(1)


def _select_codecs(raw: Optional[str], flag: str) -> List[BaseCodec]:
    """Resolve a comma-separated list of codec keys.

    RULES:
    - None means every registered codec, in registry order
    - Unknown keys exit with status 1 and list the available keys
    """
    if not raw:
        return list(CODECS)

    selected: List[BaseCodec] = []
    for key in (part.strip() for part in raw.split(",")):
        if key not in CODECS_BY_KEY:
            available = ", ".join(sorted(CODECS_BY_KEY))
            _fail("Unknown codec '{}' in {}. Available codecs: {}".format(key, flag, available))
        selected.append(CODECS_BY_KEY[key])
    return selected


def _print_interpretations(interpretations: Sequence[Interpretation]) -> None:
    print("***************")
    print("Possible types:")
    print("***************")
    index = 0
    for name, group in groupby(interpretations, key=lambda item: item.codec.name):
        print(name)
        for interpretation in group:
            print("    {:<4} {}".format(index, interpretation.label))
            index += 1


def _print_renderings(renderings: Sequence[Rendering]) -> None:
    print("**************")
    print("Other formats:")
    print("**************")
    for name, group in groupby(renderings, key=lambda item: item.codec_name):
        print(name)
        for rendering in group:
            label = rendering.variant
            if rendering.byte_order:
                label = "{} ({})".format(label, rendering.byte_order)
            print("    {:<32} {}".format(label, rendering.text))


def build_report(
    value: str,
    interpretations: Sequence[Interpretation],
    selected: Optional[int] = None,
    ir: Optional[bytes] = None,
    renderings: Sequence[Rendering] = (),
) -> Dict[str, Any]:
    """Build the JSON-serialisable report printed by ``--json``.

    The layout is described by tests/report_schema.json.
    """
    return {
        "input": value,
        "interpretations": [
            {
                "index": index,
                "codec": item.codec.key,
                "name": item.codec.name,
                "variant": item.label,
            }
            for index, item in enumerate(interpretations)
        ],
        "selected": selected,
        "ir": ir.hex() if ir is not None else None,
        "renderings": [
            {
                "codec": item.codec_key,
                "name": item.codec_name,
                "variant": item.variant,
                "byte_order": item.byte_order,
                "text": item.text,
            }
            for item in renderings
        ],
    }


def run(args: argparse.Namespace) -> int:
    """Run one conversion described by parsed arguments; returns the exit code."""
    value: str = args.value
    if len(value) > MAX_INPUT_LENGTH:
        _fail("Input is {} characters long; the limit is {} (BYTECONV_MAX_INPUT)".format(
            len(value), MAX_INPUT_LENGTH))

    sources = _select_codecs(args.from_codecs, "--from")
    targets = _select_codecs(args.to_codecs, "--to")

    interpretations = identify_all(value, sources)
    if not interpretations:
        if args.json:
            print(json.dumps(build_report(value, interpretations), indent=2))
        _status("No representation found.")
        return 1

    if args.choose is None:
        if args.json:
            print(json.dumps(build_report(value, interpretations), indent=2))
        else:
            _print_interpretations(interpretations)
        return 0

    if not 0 <= args.choose < len(interpretations):
        _fail("--choose must be between 0 and {}".format(len(interpretations) - 1))

    chosen = interpretations[args.choose]
    try:
        ir = decode(chosen, value)
        renderings = render_all(ir, targets)
    except ConversionError as exc:
        _fail("Cannot convert as {} ({}): {}".format(chosen.codec.name, chosen.label, exc))

    if args.json:
        print(json.dumps(
            build_report(value, interpretations, args.choose, ir, renderings), indent=2
        ))
    else:
        _status("Decoded as {} ({}): {} byte(s)".format(chosen.codec.name, chosen.label, len(ir)))
        _print_renderings(renderings)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separating parser construction from main() lets tests inspect the
    parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="byteconv",
        description="Guess what a value could be (numbers, escaped strings, Base64, "
                    "addresses, timestamps, ...) and show it in every other format.",
    )

    parser.add_argument(
        "value",
        help="The value to identify and convert.",
    )

    parser.add_argument(
        "--choose",
        type=int,
        default=None,
        metavar="N",
        help="Convert using interpretation N from the 'Possible types' menu.",
    )

    parser.add_argument(
        "--from",
        dest="from_codecs",
        default=None,
        help="Comma-separated codecs to try when identifying the value. "
             "Available: {}. Default: all.".format(", ".join(sorted(CODECS_BY_KEY))),
    )

    parser.add_argument(
        "--to",
        dest="to_codecs",
        default=None,
        help="Comma-separated codecs to render the converted bytes with. Default: all.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of text menus.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: %(default)s).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.debug("Converting %r", args.value)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
