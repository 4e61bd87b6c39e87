"""Conjunction of exclusion rule families."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Several rule families acting as one.

    A path is excluded as soon as one member rule excludes it. Seen from the
    accepting side this is a logical AND: an entry must pass every rule to be kept.
    Members are consulted in order and evaluation stops at the first exclusion.

    Attributes:
        rules (List[BaseExclusionRules]): The member rules, in evaluation order.

    Example:
        >>> from dir2summary.exclusion_rules.dotfile_rules import DotfileExclusionRules
        >>> from dir2summary.exclusion_rules.glob_rules import GlobExclusionRules
        >>> composite = CompositeExclusionRules([DotfileExclusionRules(), GlobExclusionRules(["*.log"])])
        >>> composite.exclude("repo/.git")
        True
        >>> composite.exclude("repo/server.log")
        True
        >>> composite.exclude("repo/main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Combine the given rules.

        Raises:
            ValueError: If no rules are given.
            TypeError: If a member is not a BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for index, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {index} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)
