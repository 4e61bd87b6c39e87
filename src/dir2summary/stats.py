"""Statistics over the accepted files of a summary.

Line counting is the only parallel stage of a run: every file is counted on a
thread pool, independently of the others, and the results are reduced into the
counters afterwards on the calling thread.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from dir2summary.types import PathType

_logger = logging.getLogger(__name__)

NO_EXTENSION_LABEL = "[no extension]"


@dataclass(frozen=True)
class FileStats:
    """Aggregate statistics about the accepted files.

    Attributes:
        total_files: Number of accepted files, including those whose lines could not be counted.
        total_directories: Number of distinct parent directories of the accepted files.
        total_lines: Sum of the line counts of all successfully counted files.
        extension_counts: Number of counted files per extension ("" means no extension).
        extension_lines: Sum of line counts per extension.
        failed_files: Number of files whose line count could not be computed.
    """

    total_files: int = 0
    total_directories: int = 0
    total_lines: int = 0
    extension_counts: Mapping[str, int] = field(default_factory=dict)
    extension_lines: Mapping[str, int] = field(default_factory=dict)
    failed_files: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "extension_counts", MappingProxyType(dict(self.extension_counts)))
        object.__setattr__(self, "extension_lines", MappingProxyType(dict(self.extension_lines)))


def file_extension(file_path: PathType) -> str:
    """Get the extension of a file's base name, without the leading period.

    Names without a period, and names whose only period is the leading one, have no
    extension.

    Example:
        >>> file_extension("src/main.rs")
        'rs'
        >>> file_extension("archive.tar.gz")
        'gz'
        >>> file_extension("Makefile")
        ''
        >>> file_extension(".bashrc")
        ''
    """
    stem, dot, extension = os.path.basename(file_path).rpartition(".")
    if not dot or not stem:
        return ""
    return extension


def count_lines(file_path: PathType) -> int:
    """Count lines as a line iterator would read them.

    Every ``\\n`` ends a line, and trailing content without a terminator counts as
    one more line. Bytes are not decoded.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(file_path, "rb") as file:
        return sum(1 for _ in file)


def _measure(file_path: str) -> Tuple[str, Union[Tuple[str, int], OSError]]:
    try:
        return file_path, (file_extension(file_path), count_lines(file_path))
    except OSError as e:
        return file_path, e


def collect_stats(
    file_paths: Sequence[PathType],
    max_workers: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> FileStats:
    """Collect statistics about the given files.

    Directory and file totals come straight from the paths. Extension and line
    counts are computed in parallel; files are dispatched sorted by path and their
    results reduced in that same order, so totals do not depend on scheduling.

    A file whose lines cannot be counted is logged as a warning. It still counts in
    ``total_files`` (and ``failed_files``) but is left out of the extension tables and
    the line total.

    Args:
        file_paths: Accepted files.
        max_workers: Maximum number of worker threads. Defaults to the
            ThreadPoolExecutor default.
        logger: Logger receiving per-file warnings. Defaults to the module logger.

    Returns:
        The aggregated statistics.
    """
    logger = logger or _logger
    paths = sorted(os.fspath(path) for path in file_paths)

    directories = {os.path.dirname(path) for path in paths}

    extension_counts: Dict[str, int] = {}
    extension_lines: Dict[str, int] = {}
    total_lines = 0
    failed_files = 0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(_measure, paths))

    for path, result in results:
        if isinstance(result, OSError):
            logger.warning("Failed to process file statistics for %s: %s", path, result)
            failed_files += 1
            continue
        extension, line_count = result
        extension_counts[extension] = extension_counts.get(extension, 0) + 1
        extension_lines[extension] = extension_lines.get(extension, 0) + line_count
        total_lines += line_count

    return FileStats(
        total_files=len(paths),
        total_directories=len(directories),
        total_lines=total_lines,
        extension_counts=extension_counts,
        extension_lines=extension_lines,
        failed_files=failed_files,
    )


def _ranked(table: Mapping[str, int]) -> List[Tuple[str, int]]:
    return sorted(table.items(), key=lambda item: (-item[1], item[0]))


def _extension_label(extension: str) -> str:
    return extension or NO_EXTENSION_LABEL


def stream_statistics(stats: FileStats) -> Iterable[str]:
    """Generate the statistics section one line at a time.

    Yields:
        Lines without trailing newlines. Blank separator lines are empty strings.
    """
    yield "Project Statistics"
    yield "=================="
    yield f"Total files: {stats.total_files}"
    yield f"Total directories: {stats.total_directories}"
    yield f"Total lines of code: {stats.total_lines}"

    if stats.extension_counts:
        yield ""
        yield "File types:"
        for extension, count in _ranked(stats.extension_counts):
            yield f"  {_extension_label(extension)}: {count} files"

    if stats.extension_lines:
        yield ""
        yield "Lines of code by file type:"
        for extension, lines in _ranked(stats.extension_lines):
            yield f"  {_extension_label(extension)}: {lines} lines"


def format_statistics(stats: FileStats) -> str:
    """Render the statistics section, newline-terminated.

    Example:
        >>> stats = FileStats(1, 1, 2, {"txt": 1}, {"txt": 2})
        >>> print(format_statistics(stats), end="")
        Project Statistics
        ==================
        Total files: 1
        Total directories: 1
        Total lines of code: 2
        <BLANKLINE>
        File types:
          txt: 1 files
        <BLANKLINE>
        Lines of code by file type:
          txt: 2 lines
    """
    return "\n".join(stream_statistics(stats)) + "\n"
