"""Interactive command-line loop.

Usage:
    python -m pimatch                          # Embedded pi digits
    python -m pimatch -d pi-1m.txt             # Digits loaded from a file
    python -m pimatch --search index           # Indexed dictionary search
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .compressor import compress_text, decompress_text
from .config import CompressionConfig
from .dictionary import DigitDictionary, default_dictionary, load_dictionary
from .errors import PiMatchError
from .utils import render_segments

logger = logging.getLogger(__name__)

PROMPT = "Enter text to compress ({sentinel} to quit): "


def run_loop(
    dictionary: DigitDictionary,
    config: CompressionConfig,
    stdin: TextIO,
    stdout: TextIO,
    sentinel: str = "Q",
) -> int:
    """Compress and restore one line at a time until the sentinel or EOF."""
    handled = 0
    while True:
        stdout.write(PROMPT.format(sentinel=sentinel))
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        text = line.strip()
        if text == sentinel:
            break

        handled += 1
        try:
            segments = compress_text(text, dictionary, config)
            stdout.write(render_segments(segments) + "\n")
            restored = decompress_text(segments, dictionary, config.text_encoding)
        except PiMatchError as exc:
            logger.warning("Line %d failed: %s", handled, exc)
            stdout.write(f"Error: {exc}\n")
            continue

        stdout.write(restored + "\n")
        if restored == text:
            size = len(text.encode(config.text_encoding))
            stdout.write(f"Round trip OK ({size} bytes -> {len(segments)} segments)\n")
        else:
            stdout.write("Round trip FAILED\n")
    return handled


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Encode text as references into the digits of pi")
    parser.add_argument(
        "-d", "--dictionary",
        default=None,
        help="Path to a digits file (default: embedded pi digits)",
    )
    parser.add_argument("--quit", default="Q", help="Line that ends the session (default: Q)")
    parser.add_argument("--search", choices=["scan", "index"], default="scan")
    parser.add_argument("--coalesce-raw", action="store_true", help="Merge runs of unmatched bytes")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.dictionary:
        try:
            dictionary = load_dictionary(args.dictionary)
        except OSError as exc:
            stdout.write(f"Error: cannot read dictionary {args.dictionary}: {exc}\n")
            return 1
        except PiMatchError as exc:
            stdout.write(f"Error loading dictionary: {exc}\n")
            return 1
    else:
        dictionary = default_dictionary()
    logger.info("Loaded dictionary with %d digits", len(dictionary))

    config = CompressionConfig(search_mode=args.search, coalesce_raw=args.coalesce_raw)
    run_loop(dictionary, config, stdin, stdout, sentinel=args.quit)
    return 0
