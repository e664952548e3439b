from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from autoclear import __version__
from autoclear.errors import DirectoryUnreadable
from autoclear.logging import configure_logging
from autoclear.selector import DEFAULT_STRATEGY, STRATEGIES

EXIT_OK = 0
EXIT_DIRECTORY_UNREADABLE = 1
EXIT_PARTIAL_FAILURE = 3

logger = logging.getLogger(__name__)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="autoclear-backup",
        description=(
            "Auto clear old backup files. Keeps a time-stratified subset "
            "(one day, one week, one month, one year and two years back)."
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to be cleared (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default=None,
        help="File prefix to filter files to be cleared. Without it nothing is removed.",
    )
    parser.add_argument(
        "-t",
        "--test",
        action="store_true",
        help="Test mode: only print files to be removed",
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default=DEFAULT_STRATEGY,
        help=f"Retention strategy (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every decision")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.verbose)
    directory = normalize_directory(args.directory)

    from autoclear.cleanup import clear_old_files

    try:
        report = clear_old_files(
            Path(directory),
            prefix=args.prefix,
            dry_run=args.test,
            strategy=args.strategy,
        )
    except DirectoryUnreadable as exc:
        logger.error("%s", exc)
        return EXIT_DIRECTORY_UNREADABLE

    if report.result.failed:
        return EXIT_PARTIAL_FAILURE
    return EXIT_OK


def normalize_directory(directory: str | None) -> str:
    if not directory:
        return "." + os.sep
    if directory.endswith(os.sep):
        return directory
    return directory + os.sep


if __name__ == "__main__":
    raise SystemExit(main())
