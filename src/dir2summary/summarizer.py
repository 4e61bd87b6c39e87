"""Directory summary generation.

This module sequences a complete run: validate the input directory, create the
output artifact, walk the directory, then write the rendered tree, the file
contents, and the statistics, and flush.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from dir2summary.exceptions import InputDirectoryError, OutputWriteError
from dir2summary.exclusion_rules.path_filter import PathFilter
from dir2summary.exclusion_rules.path_rules import PathExclusionRules
from dir2summary.file_content_printer import FileContentPrinter
from dir2summary.file_system_tree.traversal import TraversalDriver
from dir2summary.io.summary_writer import SummaryWriter
from dir2summary.stats import FileStats, collect_stats, format_statistics
from dir2summary.types import PathType

_logger = logging.getLogger(__name__)


def _write_section(writer: SummaryWriter, stage: str, text: str) -> None:
    try:
        writer.write(text)
    except OSError as e:
        raise OutputWriteError(stage) from e


def generate_summary(
    input_dir: PathType,
    output_file: PathType,
    exclude_patterns: Sequence[str] = (),
    *,
    respect_ignore_files: bool = True,
    max_workers: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> FileStats:
    """Generate a summary of a directory into a single text file.

    The output file is created or truncated, then receives three sections in
    order: the directory tree rooted at ``input_dir`` as given, one line-numbered
    block per accepted file, and the project statistics.

    Problems with individual entries or files (permission errors, undecodable
    content, malformed exclude patterns) are logged as warnings on ``logger`` and
    never abort the run. If the output file lies inside ``input_dir`` it is left out
    of the summary.

    Args:
        input_dir: Directory to summarize.
        output_file: Path of the output artifact.
        exclude_patterns: Glob patterns matched against entry paths; matching entries
            (and, for directories, everything below them) are left out.
        respect_ignore_files: Whether ``.gitignore``/``.ignore`` files are honoured.
        max_workers: Worker threads used for line counting.
        logger: Logger for recoverable problems. Defaults to the module logger.

    Returns:
        The statistics written to the summary.

    Raises:
        InputDirectoryError: If ``input_dir`` does not exist or is not a directory.
        OutputFileError: If the output file cannot be created.
        OutputWriteError: If writing any section of the output fails.

    Example:
        >>> stats = generate_summary("project", "summary.txt", ["*/target/*"])  # doctest: +SKIP
        >>> stats.total_files  # doctest: +SKIP
        12
    """
    logger = logger or _logger

    input_path = Path(input_dir)
    if not input_path.exists():
        raise InputDirectoryError(input_dir)
    if not input_path.is_dir():
        raise InputDirectoryError(input_dir, reason="is not a directory")

    with SummaryWriter(output_file) as writer:
        path_filter = PathFilter(
            exclude_patterns,
            extra_rules=[PathExclusionRules([output_file])],
            logger=logger,
        )
        driver = TraversalDriver(
            input_dir,
            path_filter,
            respect_ignore_files=respect_ignore_files,
            logger=logger,
        )
        result = driver.run()
        logger.debug(
            "Traversal accepted %d files, skipped %d binary files", len(result.files), result.skipped_binary
        )

        _write_section(writer, "tree structure", result.tree.render() + "\n\n\n")

        printer = FileContentPrinter(logger=logger)
        try:
            printer.write_all(writer, result.files)
        except OSError as e:
            raise OutputWriteError("file contents") from e

        stats = collect_stats(result.files, max_workers=max_workers, logger=logger)
        _write_section(writer, "statistics", format_statistics(stats))

        try:
            writer.flush()
        except OSError as e:
            raise OutputWriteError("output", action="flush") from e

    return stats
