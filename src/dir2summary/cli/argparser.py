"""Command-line argument parsing for dir2summary.

This module defines the command-line interface for dir2summary,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from dir2summary import __version__


def positive_int(value: str) -> int:
    """argparse type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_exclude_patterns(value: Optional[str]) -> List[str]:
    """Split a comma-separated list of glob patterns.

    Items are trimmed and empty items dropped. Order is kept, although it has no
    effect on which entries are excluded.

    Example:
        >>> parse_exclude_patterns("*/node_modules/*, *.lock,,")
        ['*/node_modules/*', '*.lock']
        >>> parse_exclude_patterns(None)
        []
    """
    if not value:
        return []
    return [pattern.strip() for pattern in value.split(",") if pattern.strip()]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2summary's options.
    """
    description = """
    dir2summary: Generate a summary of a repository or directory.

    The summary is a single text file with three sections:
    - the directory tree,
    - the contents of every text file, with line numbers,
    - project statistics (file and directory counts, lines per file type).

    Hidden files and directories are always skipped, as are binary files and
    anything listed in .ignore files or, inside a git repository, in .gitignore
    files and .git/info/exclude.
    """

    epilog = """
    Examples:
      # Summarize a project
      dir2summary /path/to/project summary.txt

      # Leave out dependencies and build output (comma-separated glob patterns)
      dir2summary -e "*/node_modules/*,*/target/*" /path/to/project summary.txt

      # Include files listed in .gitignore/.ignore
      dir2summary --no-ignore /path/to/project summary.txt

      # Count lines with at most 4 worker threads
      dir2summary -j 4 /path/to/project summary.txt

      # Display version information and exit
      dir2summary -V
    """

    parser = argparse.ArgumentParser(
        prog="dir2summary",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2summary {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "input_dir",
        type=Path,
        help="Directory to summarize.",
    )
    parser.add_argument(
        "output_file",
        type=Path,
        help="Output file path. The file is created or overwritten.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERNS",
        help=(
            "Comma-separated glob patterns. Files and directories whose path matches any pattern are "
            "excluded, directories together with everything below them."
        ),
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=positive_int,
        metavar="N",
        help="Number of worker threads used to count lines (default: chosen by Python).",
    )
    parser.add_argument(
        "--no-ignore",
        action="store_true",
        help="Do not honour .gitignore and .ignore files.",
    )

    return parser
