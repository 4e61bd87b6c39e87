"""Default exclusion of hidden (dot-prefixed) files and directories."""

import os

from .base_rules import BaseExclusionRules


class DotfileExclusionRules(BaseExclusionRules):
    """Exclude every entry whose base name starts with a period.

    The literal names ``.`` and ``..`` are not considered hidden, so summarizing the
    current or parent directory works as expected. This rule is always active and
    needs no configuration.

    Example:
        >>> rules = DotfileExclusionRules()
        >>> rules.exclude("repo/.gitignore")
        True
        >>> rules.exclude("repo/.github/")
        True
        >>> rules.exclude("repo/src/main.py")
        False
        >>> rules.exclude("..")
        False
    """

    def exclude(self, path: str) -> bool:
        name = os.path.basename(path.rstrip("/\\"))
        return name.startswith(".") and name not in (".", "..")
