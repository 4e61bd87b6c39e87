"""Exclusion of specific, known paths."""

import os
from typing import Iterable

from dir2summary.types import PathType

from .base_rules import BaseExclusionRules


class PathExclusionRules(BaseExclusionRules):
    """Exclude an explicit set of paths, compared by absolute path.

    The summarizer uses this to keep its own output artifact out of the summary when
    the output file is written inside the directory being summarized.

    Example:
        >>> rules = PathExclusionRules(["/repo/summary.txt"])
        >>> rules.exclude("/repo/summary.txt")
        True
        >>> rules.exclude("/repo/src/summary.txt")
        False
    """

    def __init__(self, paths: Iterable[PathType]):
        self.paths = frozenset(os.path.abspath(path) for path in paths)

    def exclude(self, path: str) -> bool:
        stripped = path.rstrip("/\\") or path
        return os.path.abspath(stripped) in self.paths
