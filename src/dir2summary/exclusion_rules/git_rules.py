"""Ignore-file rules (``.gitignore``/``.ignore``) matched with gitignore semantics."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dir2summary.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Patterns read from one directory's ignore files.

    Matching is delegated to pathspec's ``GitWildMatchPattern``, which implements
    the pattern language Git uses: ``*``/``?``/``[...]`` wildcards, ``**`` across
    directories, a trailing ``/`` restricting a pattern to directories, a leading
    ``!`` re-including a path, and ``#`` comments.

    The directory walker creates one instance per directory that holds a
    ``.gitignore`` or ``.ignore`` file, with ``base_dir`` set to that directory.
    Paths passed to :meth:`exclude` and :meth:`check` are relative to it, use
    forward slashes, and carry a trailing slash when they name a directory.

    Attributes:
        spec (PathSpec): The accumulated patterns, in load order.
        base_dir (Optional[Path]): Directory the patterns are relative to.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude("node_modules/")
        True
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.check("keep.log") is False
        True
        >>> rules.check("main.py") is None
        True
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base_dir: Optional[PathType] = None,
    ):
        """Create the rules, optionally reading ignore files right away.

        Args:
            rules_files: Ignore file(s) to read, in precedence order (later wins).
            base_dir: Directory the patterns are relative to. Informational; matching
                is always done on the relative path handed to exclude() or check().

        Raises:
            FileNotFoundError: If one of the ignore files is missing.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.base_dir = Path(base_dir) if base_dir is not None else None

        if rules_files is not None:
            self.load_rules(rules_files)

    def check(self, path: str) -> Optional[bool]:
        """Find the verdict of the last pattern matching a path.

        Unlike :meth:`exclude`, this distinguishes "no pattern applies" from "a negated
        pattern re-included the path", which is what lets a nested ignore file override
        the one in its parent directory.

        Args:
            path: Path relative to ``base_dir``, with a trailing slash for directories.

        Returns:
            True if the path is ignored, False if it is explicitly re-included by a
            negated pattern, None if no pattern matches.
        """
        verdict: Optional[bool] = None
        for pattern in self.spec.patterns:
            if pattern.include is not None and pattern.match_file(path) is not None:
                verdict = pattern.include
        return verdict

    def exclude(self, path: str) -> bool:
        return self.check(path) is True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more ignore files.

        Files are read as UTF-8, replacing undecodable bytes. Their patterns are
        appended after the ones already loaded, so a later file can override an
        earlier one with a negated pattern.

        Raises:
            FileNotFoundError: If one of the ignore files is missing.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()

            new_patterns = PathSpec.from_lines(GitWildMatchPattern, lines).patterns
            self.spec.patterns = list(self.spec.patterns) + list(new_patterns)

    def add_rule(self, rule: str) -> None:
        """Append one pattern, e.g. ``"build/"`` or ``"!keep.log"``."""
        self.spec.patterns = list(self.spec.patterns) + [GitWildMatchPattern(rule)]
