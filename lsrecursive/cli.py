"""Command-line front door for ls-recursive.

Parses CLI options, loads config defaults and the ignore file, then runs the
walker and prints one line per entry.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ListingDefaults, load_listing_defaults, save_listing_defaults
from .exclusions import DEFAULT_IGNORE_FILE, load_exclusion_set
from .listing import SCOPE_CUMULATIVE, SCOPE_PER_DIRECTORY, list_tree, normalize_type_filter
from .render import write_entries

UNEXPECTED_ARGUMENT_MESSAGE = "Unexpected argument."


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ls-recursive",
        description="Recursively list files with type, permissions, size and path.",
    )
    parser.add_argument("-d", "--directory", default=".", help="Directory to list. Defaults to current directory.")
    parser.add_argument("-t", "--type", dest="type_filter", default=None, help="Only show 'file' or 'dir' entries.")
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Entry count that triggers the confirmation prompt (default: config or 100).",
    )
    parser.add_argument(
        "--per-directory",
        action="store_true",
        default=None,
        help="Apply the limit to each directory instead of the running total.",
    )
    parser.add_argument("-y", "--yes", action="store_true", help="Never prompt; list everything.")
    parser.add_argument(
        "--ignore-file",
        type=Path,
        default=DEFAULT_IGNORE_FILE,
        help="Ignore file with one excluded name per line (default: .gitignore).",
    )
    parser.add_argument("--no-ignore-file", action="store_true", help="Do not read an ignore file.")
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional name to exclude. May be repeated.",
    )
    parser.add_argument(
        "--honor-negation",
        action="store_true",
        default=None,
        help="Let '!name' ignore-file lines override exclusions.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --limit, --per-directory, --honor-negation and --exclude as config defaults.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _merge_defaults(args: argparse.Namespace, defaults: ListingDefaults) -> ListingDefaults:
    """Overlay explicit CLI flags on config defaults."""
    return ListingDefaults(
        limit=args.limit if args.limit is not None else defaults.limit,
        per_directory=args.per_directory if args.per_directory is not None else defaults.per_directory,
        honor_negation=args.honor_negation if args.honor_negation is not None else defaults.honor_negation,
        excludes=(*defaults.excludes, *args.exclude),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, walk the target directory and print entries.

    Bare tokens and unknown flags abort the run with a message and no listing. A
    declined confirmation prompt is a normal early stop, not an error.
    """
    parser = build_parser()
    args, unexpected = parser.parse_known_args(argv)

    if unexpected:
        print(UNEXPECTED_ARGUMENT_MESSAGE)
        return

    _configure_logging(args.verbose)

    settings = _merge_defaults(args, load_listing_defaults())
    if args.save_defaults:
        save_listing_defaults(settings)

    exclusions = load_exclusion_set(
        None if args.no_ignore_file else args.ignore_file,
        extra=settings.excludes,
        honor_negation=settings.honor_negation,
    )
    entries = list_tree(
        args.directory,
        exclusions,
        type_filter=normalize_type_filter(args.type_filter),
        limit=settings.limit,
        scope=SCOPE_PER_DIRECTORY if settings.per_directory else SCOPE_CUMULATIVE,
        assume_yes=args.yes,
    )

    color = not args.no_color and sys.stdout.isatty()
    write_entries(entries, sys.stdout, color=color)


if __name__ == "__main__":
    main()
