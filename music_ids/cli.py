"""Command-line interface for music-ids."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from music_ids import __version__
from music_ids.core.identifier import OutputFormat
from music_ids.core.kinds import KINDS


def _add_mode_flags(parser: argparse.ArgumentParser) -> None:
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--relaxed",
        dest="relaxed",
        action="store_true",
        default=None,
        help="Report malformed values instead of failing",
    )
    mode.add_argument(
        "--strict",
        dest="relaxed",
        action="store_false",
        default=None,
        help="Fail on malformed values (default unless configured otherwise)",
    )
    parser.add_argument(
        "--format",
        choices=[item.value for item in OutputFormat],
        help="Rendering to print (default: full)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="music-ids",
        description="Parse and re-present ISRC and GRid identifiers",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"music-ids {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings JSON path (default: ~/.config/music-ids/settings.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse identifiers and print their canonical renderings",
    )
    parse_parser.add_argument(
        "kind",
        choices=sorted(KINDS),
        help="Identifier kind",
    )
    parse_parser.add_argument(
        "values",
        nargs="+",
        help="Identifier strings to parse",
    )
    _add_mode_flags(parse_parser)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Read ISRC tags from audio files and check them",
    )
    scan_parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Audio files or directories to scan",
    )
    _add_mode_flags(scan_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        # Import here to avoid slow startup
        from .settings import default_config_path, load_settings

        settings = load_settings(args.config or default_config_path())
        if args.command == "parse":
            from .commands.parse import run_parse
            return run_parse(args, settings=settings)
        elif args.command == "scan":
            from .commands.scan import run_scan
            return run_scan(args, settings=settings)
        else:
            parser.print_help()
            return 1
    except Exception as exc:
        from .errors import exit_code_for_exception

        print(str(exc), file=sys.stderr)
        return exit_code_for_exception(exc)


if __name__ == "__main__":
    sys.exit(main())
