"""Command-line interface for the German hyphenator.

WHY: Content editors want to pre-hyphenate word lists and texts (or inspect
where the engine would break a word) without writing Python. The CLI wraps
the library behind a single filter-style command.

HOW: Uses argparse to accept an input path (or "-" for stdin) and an
optional output path. The default mode hyphenates the whole text; --strip
removes markers again, --boundaries reports offsets per word, --native
passes text through as a natively hyphenating surface would receive it.
--show swaps the invisible soft hyphens for a visible marker.

RULES:
- Usage:
    python -m hyphenate_german input.txt -o output.txt
    python -m hyphenate_german input.txt --show   # outputs to stdout
    cat input.txt | python -m hyphenate_german -
- Exit codes: 0 = success, 1 = error.
- Status and log messages go to stderr; text goes to stdout unless -o is set.
- Files are read and written with the configured encoding (HYPHENATE_ENCODING).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from .config import ENCODING, LOG_FORMAT, VISIBLE_MARKER, load_encoding, load_log_level
from .core import SOFT_HYPHEN, find_boundaries, split_runs, strip_markers
from .display import display_text

logger = logging.getLogger(__name__)


def _error(msg: str) -> NoReturn:
    """Print an error message to stderr and exit with status 1."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)
    sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyphenate-german",
        description="Insert soft hyphens (U+00AD) at German syllable boundaries.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input text file, or '-' for stdin (default)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--strip",
        action="store_true",
        help="Remove soft hyphens instead of inserting them",
    )
    mode.add_argument(
        "--boundaries",
        action="store_true",
        help="Print each word with its boundary offsets, one per line",
    )
    mode.add_argument(
        "--native",
        action="store_true",
        help="Pass text through unchanged (surface hyphenates natively)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Replace soft hyphens with a visible marker ('{}' by default)".format(
            VISIBLE_MARKER
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: HYPHENATE_LOG_LEVEL or WARNING)",
    )
    return parser


def _read_input(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        _error("Input file not found: {}".format(path))
    except UnicodeDecodeError as e:
        _error("Could not decode {} as {}: {}".format(path, encoding, e))
    except OSError as e:
        _error("Could not read {}: {}".format(path, e))


def format_boundaries(text: str) -> str:
    """Render one "word<TAB>offsets" line per non-whitespace run of text."""
    lines: List[str] = []
    for run in split_runs(text):
        if run.isspace():
            continue
        offsets = find_boundaries(run)
        lines.append("{}\t{}".format(run, ",".join(str(o) for o in offsets)))
    return "\n".join(lines) + "\n" if lines else ""


def main(argv: Optional[List[str]] = None) -> None:
    """Run the hyphenation CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    args = _build_parser().parse_args(argv)

    try:
        level = load_log_level(args.log_level)
        encoding = load_encoding(ENCODING)
    except ValueError as e:
        _error(str(e))
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    raw = _read_input(args.input, encoding)
    logger.info("Read %d characters from %s", len(raw), args.input)

    if args.strip:
        result = strip_markers(raw)
    elif args.boundaries:
        result = format_boundaries(raw)
    else:
        result = display_text(raw, native_hyphenation=args.native)

    markers = result.count(SOFT_HYPHEN)
    logger.debug("Output contains %d soft hyphens", markers)

    if args.show:
        result = result.replace(SOFT_HYPHEN, VISIBLE_MARKER)

    if args.output:
        try:
            with open(args.output, "w", encoding=encoding) as f:
                f.write(result)
        except OSError as e:
            _error("Could not write {}: {}".format(args.output, e))
        print(
            "Wrote {} characters ({} soft hyphens) to {}".format(
                len(result), markers, args.output
            ),
            file=sys.stderr,
        )
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
