"""Command-line interface for dir2summary.

Progress messages go to stdout, warnings about skipped or degraded items and fatal
errors go to stderr.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    $ dir2summary -e "*/node_modules/*" /path/to/project summary.txt
    Starting directory analysis...
    Summary generated successfully at: summary.txt
"""

import logging
import sys
from typing import List, Optional, Sequence, TextIO

from dir2summary.cli.argparser import create_parser, parse_exclude_patterns
from dir2summary.summarizer import generate_summary

LOGGER_NAME = "dir2summary"


def configure_logging(stream: Optional[TextIO] = None) -> logging.Logger:
    """Send the package's warnings to stderr as ``Warning: <message>`` lines.

    Args:
        stream: Stream for the handler. Defaults to sys.stderr.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.WARNING)

    # Avoid duplicate handlers when main() runs more than once in a process
    if not logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter("Warning: %(message)s"))
        logger.addHandler(handler)

    return logger


def format_error_chain(message: str, error: BaseException) -> str:
    """Describe an error and the chain of errors that caused it.

    Example:
        >>> try:
        ...     try:
        ...         raise FileNotFoundError("No such file or directory")
        ...     except OSError as e:
        ...         raise RuntimeError("Failed to write statistics") from e
        ... except RuntimeError as e:
        ...     print(format_error_chain("Failed to generate summary", e))
        Error: Failed to generate summary
          Caused by: Failed to write statistics
          Caused by: No such file or directory
    """
    lines: List[str] = [f"Error: {message}"]
    current: Optional[BaseException] = error
    while current is not None:
        lines.append(f"  Caused by: {current}")
        current = current.__cause__
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dir2summary command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    logger = configure_logging()
    exclude_patterns = parse_exclude_patterns(args.exclude)

    print("Starting directory analysis...")

    try:
        generate_summary(
            args.input_dir,
            args.output_file,
            exclude_patterns,
            respect_ignore_files=not args.no_ignore,
            max_workers=args.jobs,
            logger=logger,
        )
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(format_error_chain("Failed to generate summary", e), file=sys.stderr)
        sys.exit(1)

    print(f"Summary generated successfully at: {args.output_file}")


if __name__ == "__main__":
    main()
