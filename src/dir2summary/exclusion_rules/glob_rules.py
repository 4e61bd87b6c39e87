"""Implementation of exclusion rules using shell-style glob patterns."""

import fnmatch
import logging
import re
from typing import List, Optional, Pattern, Sequence

from .base_rules import BaseExclusionRules

_logger = logging.getLogger(__name__)


def validate_glob(pattern: str) -> None:
    """Check that a glob pattern is well formed.

    ``fnmatch`` accepts any string, silently treating an unclosed ``[`` as a literal.
    Patterns are rejected here instead so that a typo is reported rather than
    quietly matching something unexpected.

    Args:
        pattern: The glob pattern to check.

    Raises:
        ValueError: If the pattern has an unclosed character class, a run of more
            than two ``*`` wildcards, or a ``**`` that is not a whole path component.

    Example:
        >>> validate_glob("*/node_modules/*")
        >>> validate_glob("src/[abc")
        Traceback (most recent call last):
        ...
        ValueError: invalid glob 'src/[abc': unclosed character class at position 4
    """
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            run = i
            while i < n and pattern[i] == "*":
                i += 1
            if i - run > 2:
                raise ValueError(f"invalid glob {pattern!r}: wildcards are either '*' or '**' at position {run}")
            if i - run == 2 and not ((run == 0 or pattern[run - 1] == "/") and (i == n or pattern[i] == "/")):
                raise ValueError(
                    f"invalid glob {pattern!r}: recursive wildcards must form a single path component"
                    f" at position {run}"
                )
            continue
        if char == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A ']' directly after the opening bracket is part of the class
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise ValueError(f"invalid glob {pattern!r}: unclosed character class at position {i}")
            i = j
        i += 1


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules matching whole path strings against shell-style globs.

    Each pattern is matched case-sensitively against the full path string of an entry
    as it was discovered (for example ``project/node_modules/pkg``). ``*`` also
    matches path separators, so ``*/node_modules/*`` excludes everything below any
    ``node_modules`` directory. Patterns are independent: there is no precedence and
    no negation.

    A pattern that fails validation is logged as a warning and then ignored, so it
    excludes nothing and never aborts the run.

    Attributes:
        patterns (List[str]): The accepted patterns, in the order they were added.

    Example:
        >>> rules = GlobExclusionRules(["*/node_modules/*", "*.min.js"])
        >>> rules.exclude("web/node_modules/react/index.js")
        True
        >>> rules.exclude("web/dist/app.min.js")
        True
        >>> rules.exclude("web/src/app.js")
        False
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None, logger: Optional[logging.Logger] = None):
        """Initialize GlobExclusionRules.

        Args:
            patterns: Glob patterns to add. Malformed ones are skipped with a warning.
            logger: Logger receiving warnings about malformed patterns. Defaults to the
                module logger.
        """
        self.logger = logger or _logger
        self.patterns: List[str] = []
        self._compiled: List[Pattern[str]] = []

        for pattern in patterns or ():
            self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern.

        Args:
            rule: The glob pattern, e.g. ``"*/build/*"``.
        """
        try:
            validate_glob(rule)
            compiled = re.compile(fnmatch.translate(rule))
        except (ValueError, re.error) as e:
            self.logger.warning("Ignoring invalid exclude pattern %r: %s", rule, e)
            return

        self.patterns.append(rule)
        self._compiled.append(compiled)

    def exclude(self, path: str) -> bool:
        return any(regex.match(path) for regex in self._compiled)
