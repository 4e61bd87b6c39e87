"""Traversal driver feeding the summary tree and collecting accepted files."""

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dir2summary.exclusion_rules.path_filter import PathFilter
from dir2summary.file_system_tree.binary_detector import is_binary_file
from dir2summary.file_system_tree.summary_tree import SummaryTree
from dir2summary.file_system_tree.walker import DirectoryWalker
from dir2summary.types import PathType, TraversalEntry

_logger = logging.getLogger(__name__)

BinaryDetector = Callable[[str], bool]


@dataclass
class TraversalResult:
    """Outcome of a traversal.

    Attributes:
        tree: The populated summary tree.
        files: Accepted (filtered, non-binary) file paths in discovery order.
        skipped_binary: Number of files left out because they were classified binary.
    """

    tree: SummaryTree
    files: List[str] = field(default_factory=list)
    skipped_binary: int = 0


class TraversalDriver:
    """Walks a directory once, building the summary tree and the accepted-file list.

    Entries are processed strictly sequentially, in the order the walker produces
    them:

    - an entry that cannot be accessed is logged as a warning and skipped;
    - the root directory is skipped (it is the tree's root label);
    - directories are inserted into the tree;
    - files are classified; binary files are dropped entirely, text files are
      inserted into the tree and appended to the accepted files;
    - symlinks are inserted as labelled leaves and never followed or accepted.

    Attributes:
        root (str): The directory to walk, as given.
        path_filter (PathFilter): Predicate applied by the walker to every entry.
        respect_ignore_files (bool): Whether ``.gitignore``/``.ignore`` files are honoured.

    Example:
        >>> driver = TraversalDriver("project", PathFilter(["*/target/*"]))  # doctest: +SKIP
        >>> result = driver.run()  # doctest: +SKIP
        >>> result.files  # doctest: +SKIP
        ['project/Cargo.toml', 'project/src/main.rs']
    """

    def __init__(
        self,
        root: PathType,
        path_filter: Optional[PathFilter] = None,
        *,
        respect_ignore_files: bool = True,
        binary_detector: Optional[BinaryDetector] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.root = os.fspath(root)
        self.logger = logger or _logger
        self.path_filter = path_filter or PathFilter(logger=self.logger)
        self.respect_ignore_files = respect_ignore_files
        self._is_binary: BinaryDetector = binary_detector or (lambda path: is_binary_file(path, logger=self.logger))

    def _on_walk_error(self, error: OSError) -> None:
        self.logger.warning("Failed to access entry: %s", error)

    def run(self) -> TraversalResult:
        """Perform the traversal.

        Returns:
            The populated tree and the accepted files.

        Raises:
            NotADirectoryError: If the root is not a directory.
        """
        result = TraversalResult(tree=SummaryTree(self.root))
        walker = DirectoryWalker(
            self.root,
            filter_entry=self.path_filter,
            respect_ignore_files=self.respect_ignore_files,
            onerror=self._on_walk_error,
        )

        for entry in walker:
            self._process(entry, result)

        return result

    def _process(self, entry: TraversalEntry, result: TraversalResult) -> None:
        if entry.depth == 0:
            return

        if entry.is_dir:
            result.tree.add_directory(entry.path)
        elif entry.is_file:
            if self._is_binary(entry.path):
                result.skipped_binary += 1
                return
            result.tree.add_file(entry.path)
            result.files.append(entry.path)
        elif entry.is_symlink:
            result.tree.add_symlink(entry.path, entry.symlink_target)
