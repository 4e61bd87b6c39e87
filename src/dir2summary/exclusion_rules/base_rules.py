from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2summary.types import PathType


class BaseExclusionRules(ABC):
    """
    Interface shared by every family of exclusion rules.

    A rule family answers one question: should this path string be left out of the
    summary? Families are independent of each other; CompositeExclusionRules combines
    them. Reading rules from files and adding single rules are optional capabilities,
    available only where the family has something to configure.

    Example:
        >>> from dir2summary.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules()
        >>> rules.add_rule("*.lock")
        >>> rules.exclude("project/poetry.lock")
        True
        >>> rules.exclude("project/pyproject.toml")
        False
        >>>
        >>> # The dotfile rule has nothing to configure
        >>> from dir2summary.exclusion_rules.dotfile_rules import DotfileExclusionRules
        >>> DotfileExclusionRules().exclude("project/.env")
        True
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Decide whether a path is left out.

        Args:
            path (str): The path to check. Which form it takes (as discovered, or
                relative to some base directory) depends on the rule family.

        Returns:
            bool: True to exclude the path, False to keep it.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Read rules from one or more files.

        Raises:
            NotImplementedError: Unless the rule family reads rule files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add one rule, e.g. the glob ``"*/node_modules/*"``.

        Raises:
            NotImplementedError: Unless the rule family accepts individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
