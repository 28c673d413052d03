"""
Command-Line Interface (CLI) setup for convert-footage.

This module uses Python's `argparse` to turn the command line into a
`CliRequest`. Parsing is a pure function of `argv`: nothing is printed and the
process is never exited from here. Invalid input raises `UsageError`, and the
entry point decides how to report it.
"""
import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set

from .config.common import DEFAULT_LOG_LEVEL, LOG_LEVELS
from .config.video import DEFAULT_QUALITY, PROG_NAME, QUALITY_MAX, QUALITY_MIN
from .domain.conversion import ConversionSettings
from .domain.exceptions import UsageError

ACTION_CONVERT = "convert"
ACTION_HELP = "help"
ACTION_EXAMPLES = "examples"

_QUALITY_PATTERN = re.compile(r"[0-9]+")
HELP_FLAGS = frozenset({"-h", "--help"})
EXAMPLES_FLAGS = frozenset({"-e", "--examples"})


@dataclass(frozen=True)
class CliRequest:
    action: str
    settings: Optional[ConversionSettings] = None


class _ArgumentParser(argparse.ArgumentParser):
    """An ArgumentParser that raises instead of printing and exiting."""

    def error(self, message):
        raise UsageError(message)


def parse_quality(raw: str) -> int:
    """
    Validates a quality value given on the command line.

    Only plain decimal digits are accepted, so '-3', '+3', '3.0' and '' are all
    rejected, as is anything outside the supported range.

    Raises:
        UsageError: If `raw` is not a valid quality.
    """
    if _QUALITY_PATTERN.fullmatch(raw) is None or not QUALITY_MIN <= int(raw) <= QUALITY_MAX:
        raise UsageError(
            f"Invalid quality '{raw}': expected a whole number from {QUALITY_MIN} to {QUALITY_MAX}."
        )
    return int(raw)


def _leading_options(argv: List[str]) -> Set[str]:
    """Returns the arguments before a `--` separator, where options may appear."""
    if "--" in argv:
        argv = argv[: argv.index("--")]
    return set(argv)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(prog=PROG_NAME, add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-e", "--examples", action="store_true")
    parser.add_argument("-q", "--quality", default=str(DEFAULT_QUALITY))
    parser.add_argument("-n", "--dry-run", action="store_true")
    parser.add_argument("--log-level", type=str.upper, default=DEFAULT_LOG_LEVEL)
    parser.add_argument("paths", nargs="*")
    return parser


def parse_args(argv: List[str]) -> CliRequest:
    """
    Parses command-line arguments for convert-footage.

    `-h` and `-e` take precedence over every other check, so help is available
    even for an otherwise broken command line.

    Args:
        argv: The arguments without the program name.

    Returns:
        A `CliRequest` whose `settings` are set for the convert action.

    Raises:
        UsageError: For unrecognised options, a bad quality or log level, or a
                    missing or surplus path.
    """
    options = _leading_options(argv)
    if options & HELP_FLAGS:
        return CliRequest(ACTION_HELP)
    if options & EXAMPLES_FLAGS:
        return CliRequest(ACTION_EXAMPLES)

    args, extras = _build_parser().parse_known_args(argv)

    unknown_options = [extra for extra in extras if extra.startswith("-")]
    if unknown_options:
        raise UsageError(f"Invalid option: {unknown_options[0]}")

    quality = parse_quality(args.quality)

    if args.log_level not in LOG_LEVELS:
        raise UsageError(
            f"Invalid log level '{args.log_level}': expected one of {', '.join(LOG_LEVELS)}."
        )

    paths = args.paths + extras
    if not paths:
        raise UsageError("No file or folder given.")
    if len(paths) > 1:
        raise UsageError(f"Expected one file or folder, got {len(paths)}: {' '.join(paths)}")

    return CliRequest(
        ACTION_CONVERT,
        ConversionSettings(
            target=Path(paths[0]).expanduser(),
            quality=quality,
            dry_run=args.dry_run,
            log_level=args.log_level,
        ),
    )
