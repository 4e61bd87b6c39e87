"""Unit tests for composite exclusion rules."""

from unittest.mock import Mock

import pytest

from dir2summary.exclusion_rules.base_rules import BaseExclusionRules
from dir2summary.exclusion_rules.composite_rules import CompositeExclusionRules
from dir2summary.exclusion_rules.dotfile_rules import DotfileExclusionRules
from dir2summary.exclusion_rules.glob_rules import GlobExclusionRules


class FixedExclusionRules(BaseExclusionRules):
    """Rules excluding an explicit list of path strings."""

    def __init__(self, excluded=None):
        self.excluded = excluded or []

    def exclude(self, path: str) -> bool:
        return path in self.excluded


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_init_with_multiple_rules(self):
        rule1 = FixedExclusionRules()
        rule2 = FixedExclusionRules()
        composite = CompositeExclusionRules([rule1, rule2])

        assert composite.rules == [rule1, rule2]

    def test_init_with_empty_rules(self):
        with pytest.raises(ValueError, match="At least one exclusion rule must be provided"):
            CompositeExclusionRules([])

    def test_init_with_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule at index 0 must implement BaseExclusionRules"):
            CompositeExclusionRules(["*.log"])

        with pytest.raises(TypeError, match="Rule at index 1 must implement BaseExclusionRules"):
            CompositeExclusionRules([FixedExclusionRules(), "*.log"])

    def test_exclude_none_match(self):
        composite = CompositeExclusionRules(
            [FixedExclusionRules(["repo/a.txt"]), FixedExclusionRules(["repo/b.txt"])]
        )
        assert not composite.exclude("repo/c.txt")

    def test_exclude_any_match(self):
        composite = CompositeExclusionRules(
            [FixedExclusionRules(["repo/a.txt"]), FixedExclusionRules(["repo/b.txt"])]
        )
        assert composite.exclude("repo/a.txt")
        assert composite.exclude("repo/b.txt")

    def test_exclude_short_circuit(self):
        """A later rule is not consulted once an earlier one excludes the path."""
        rule2 = Mock(spec=BaseExclusionRules)
        rule2.exclude = Mock(return_value=False)
        composite = CompositeExclusionRules([FixedExclusionRules(["repo/a.txt"]), rule2])

        assert composite.exclude("repo/a.txt")
        rule2.exclude.assert_not_called()

    def test_dotfile_and_glob_families(self):
        composite = CompositeExclusionRules([DotfileExclusionRules(), GlobExclusionRules(["*.log"])])
        assert composite.exclude("repo/.env")
        assert composite.exclude("repo/build.log")
        assert not composite.exclude("repo/main.py")

    def test_file_operations_not_supported(self):
        composite = CompositeExclusionRules([DotfileExclusionRules()])
        with pytest.raises(NotImplementedError):
            composite.load_rules("rules.txt")
        with pytest.raises(NotImplementedError):
            composite.add_rule("*.log")
