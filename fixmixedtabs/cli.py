"""Command line front end: check, tabify or untabify files without the editor.

Usage:
  fixmixedtabs check src/*.py --tab-width 4
  fixmixedtabs untabify notes.txt --dry-run
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .columns import InvalidTabWidthError, check_tab_width
from .config import load_config, tab_width_from_config
from .converter import apply_replacements, tabify, untabify
from .detector import detect
from .lines import split_lines

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MIXED = 1
EXIT_ERROR = 2

_CONVERTERS = {"tabify": tabify, "untabify": untabify}


def _read(path: str) -> str:
    # newline="" keeps \r\n and \r intact so they survive a rewrite.
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixmixedtabs",
        description="Find and fix files that mix tab and space indentation.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("paths", nargs="+", help="Files to process")
        p.add_argument(
            "--tab-width",
            type=int,
            default=None,
            help="Columns per tab stop (default: configured tab_width)",
        )

    add_common(sub.add_parser("check", help="Report files with mixed indentation"))
    for name in _CONVERTERS:
        p = sub.add_parser(name, help=f"{name.capitalize()} leading whitespace in place")
        add_common(p)
        p.add_argument(
            "-n", "--dry-run", action="store_true", help="Show what would change only"
        )
    return parser


def _resolve_tab_width(value: int | None) -> int:
    if value is None:
        return tab_width_from_config(load_config())
    return check_tab_width(value)


def _check(paths: Sequence[str], tab_width: int) -> int:
    status = EXIT_OK
    for path in paths:
        mixed = detect(split_lines(_read(path)), tab_width)
        logger.debug("%s: mixed=%s", path, mixed)
        if mixed:
            print(f"mixed: {path}")
            status = EXIT_MIXED
    return status


def _convert(command: str, paths: Sequence[str], tab_width: int, dry_run: bool) -> int:
    convert = _CONVERTERS[command]
    for path in paths:
        content = _read(path)
        replacements = convert(split_lines(content), tab_width)
        if not replacements:
            logger.debug("%s: unchanged", path)
            continue
        if dry_run:
            print(f"would change ({len(replacements)} lines): {path}")
            continue
        _write(path, apply_replacements(content, replacements))
        print(f"changed ({len(replacements)} lines): {path}")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        tab_width = _resolve_tab_width(args.tab_width)
        if args.command == "check":
            return _check(args.paths, tab_width)
        return _convert(args.command, args.paths, tab_width, args.dry_run)
    except InvalidTabWidthError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
