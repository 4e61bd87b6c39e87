"""Entry-level filter predicate combining the default and user exclusion rules."""

import logging
from typing import Optional, Sequence

from dir2summary.types import TraversalEntry

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .dotfile_rules import DotfileExclusionRules
from .glob_rules import GlobExclusionRules


class PathFilter:
    """Predicate deciding whether a traversal entry is kept.

    The filter combines the always-on dotfile rule with the user's glob patterns (and
    any extra rules supplied by the caller). An entry must pass every rule to be
    accepted. The walker applies the filter before descending, so rejecting a
    directory prunes its whole subtree.

    Glob patterns are matched against the entry's path string as discovered. For
    directories the path is also tried with a trailing slash, so that a pattern such as
    ``*/node_modules/*`` removes the ``node_modules`` directory itself rather than only
    emptying it.

    Attributes:
        glob_rules (GlobExclusionRules): The user-supplied patterns that compiled.
        rules (CompositeExclusionRules): All active rules.

    Example:
        >>> from dir2summary.types import FileType, TraversalEntry
        >>> path_filter = PathFilter(["*/node_modules/*"])
        >>> path_filter.accept(TraversalEntry("web/node_modules", FileType.DIRECTORY, 1))
        False
        >>> path_filter.accept(TraversalEntry("web/.env", FileType.FILE, 1))
        False
        >>> path_filter.accept(TraversalEntry("web/index.js", FileType.FILE, 1))
        True
    """

    def __init__(
        self,
        exclude_patterns: Sequence[str] = (),
        *,
        extra_rules: Sequence[BaseExclusionRules] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.glob_rules = GlobExclusionRules(exclude_patterns, logger=logger)
        self.rules = CompositeExclusionRules([DotfileExclusionRules(), self.glob_rules, *extra_rules])

    def accept(self, entry: TraversalEntry) -> bool:
        path = entry.path
        if self.rules.exclude(path):
            return False
        if entry.is_dir and not path.endswith("/") and self.rules.exclude(path + "/"):
            return False
        return True

    __call__ = accept
