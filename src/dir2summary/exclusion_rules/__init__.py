"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .dotfile_rules import DotfileExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .glob_rules import GlobExclusionRules
from .path_filter import PathFilter
from .path_rules import PathExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DotfileExclusionRules",
    "GitIgnoreExclusionRules",
    "GlobExclusionRules",
    "PathExclusionRules",
    "PathFilter",
]
