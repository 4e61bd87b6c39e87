"""Depth-first directory walker honouring ignore files and entry filters.

The walker yields every entry below a root directory, one at a time, without
following symbolic links. Two kinds of policy prune the walk:

- ignore files with gitignore semantics (patterns relative to the directory holding
  the file, nested files taking precedence over their parents, ``!`` re-including a
  path). ``.ignore`` files apply everywhere. ``.gitignore`` files and
  ``.git/info/exclude`` apply only inside a git repository, and the ones between the
  repository root and the walk root are read as well;
- an optional ``filter_entry`` predicate supplied by the caller.

An entry rejected by either is not yielded and, if it is a directory, is not
descended into.
"""

import os
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from dir2summary.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2summary.types import FileType, PathType, TraversalEntry

GIT_DIR = ".git"
GITIGNORE_FILE = ".gitignore"
DOT_IGNORE_FILE = ".ignore"

EntryFilter = Callable[[TraversalEntry], bool]
ErrorHandler = Callable[[OSError], None]

# (directory holding the ignore files, rules loaded from them)
_IgnoreScope = Tuple[str, GitIgnoreExclusionRules]


def find_repository_root(path: PathType) -> Optional[str]:
    """Find the innermost directory at or above ``path`` that holds a ``.git`` entry.

    ``.git`` may be a directory or, for worktrees and submodules, a file.

    Returns:
        The absolute path of the repository root, or None outside a repository.
    """
    current = os.path.abspath(path)
    while True:
        if os.path.exists(os.path.join(current, GIT_DIR)):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def read_symlink_target(path: PathType) -> Optional[str]:
    """Read where a symlink points, if the target can be resolved.

    Returns:
        The link target as stored in the link, or None if the link cannot be read or
        its target does not exist.
    """
    try:
        target = os.readlink(path)
    except OSError:
        return None
    if not os.path.exists(path):
        return None
    return os.fspath(target)


def _raise(error: OSError) -> None:
    raise error


class DirectoryWalker:
    """Iterable over the entries of a directory tree.

    Entries are produced in depth-first pre-order, with the entries of each directory
    sorted by name so that the order is deterministic for a given filesystem. The root
    itself is yielded first, at depth 0, and is never subject to filtering.

    Errors while listing a directory or inspecting an entry are passed to ``onerror``,
    following the convention of :func:`os.walk`. The default handler re-raises; the
    traversal driver installs one that logs a warning and lets the walk continue.

    Attributes:
        root (str): The root directory, exactly as given.
        filter_entry (Optional[EntryFilter]): Predicate an entry must satisfy.
        respect_ignore_files (bool): Whether ``.gitignore``/``.ignore`` files are honoured.

    Example:
        >>> walker = DirectoryWalker("src", filter_entry=lambda e: not e.name.endswith(".pyc"))  # doctest: +SKIP
        >>> [entry.path for entry in walker]  # doctest: +SKIP
        ['src', 'src/main.py', 'src/utils', 'src/utils/helpers.py']
    """

    def __init__(
        self,
        root: PathType,
        filter_entry: Optional[EntryFilter] = None,
        respect_ignore_files: bool = True,
        onerror: Optional[ErrorHandler] = None,
    ) -> None:
        self.root = os.fspath(root)
        self.filter_entry = filter_entry
        self.respect_ignore_files = respect_ignore_files
        self.onerror: ErrorHandler = onerror or _raise

    def __iter__(self) -> Iterator[TraversalEntry]:
        if not os.path.isdir(self.root):
            raise NotADirectoryError(f"Root path is not a directory: {self.root}")

        scopes: List[_IgnoreScope] = []
        in_repository = False
        if self.respect_ignore_files:
            repository_root = find_repository_root(self.root)
            if repository_root is not None:
                in_repository = True
                scopes = self._load_parent_scopes(repository_root)

        yield TraversalEntry(self.root, FileType.DIRECTORY, 0)
        yield from self._walk(self.root, 1, scopes, in_repository)

    def _walk(
        self, directory: str, depth: int, scopes: List[_IgnoreScope], in_repository: bool
    ) -> Iterator[TraversalEntry]:
        if self.respect_ignore_files:
            in_repository = in_repository or os.path.exists(os.path.join(directory, GIT_DIR))
            scope = self._load_ignore_files(directory, in_repository)
            if scope is not None:
                scopes = scopes + [scope]

        try:
            with os.scandir(directory) as it:
                dir_entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self.onerror(e)
            return

        for dir_entry in dir_entries:
            try:
                entry = self._make_entry(os.path.join(directory, dir_entry.name), dir_entry, depth)
            except OSError as e:
                self.onerror(e)
                continue

            # Sockets, FIFOs and device files are not part of the summary
            if entry is None:
                continue
            if self._is_ignored(entry, scopes):
                continue
            if self.filter_entry is not None and not self.filter_entry(entry):
                continue

            yield entry

            if entry.is_dir:
                yield from self._walk(entry.path, depth + 1, scopes, in_repository)

    def _make_entry(self, path: str, dir_entry: "os.DirEntry[str]", depth: int) -> Optional[TraversalEntry]:
        if dir_entry.is_symlink():
            return TraversalEntry(path, FileType.SYMLINK, depth, read_symlink_target(path))
        if dir_entry.is_dir(follow_symlinks=False):
            return TraversalEntry(path, FileType.DIRECTORY, depth)
        if dir_entry.is_file(follow_symlinks=False):
            return TraversalEntry(path, FileType.FILE, depth)
        return None

    def _load_parent_scopes(self, repository_root: str) -> List[_IgnoreScope]:
        """Load the rules that apply to the root from outside the walk.

        These are ``.git/info/exclude`` and the ignore files of every directory from
        the repository root down to the parent of the walk root, outermost first.
        """
        parents: List[str] = []
        directory = os.path.abspath(self.root)
        while directory != repository_root:
            directory = os.path.dirname(directory)
            parents.append(directory)

        scopes: List[_IgnoreScope] = []
        exclude_scope = self._load_scope(repository_root, [os.path.join(repository_root, GIT_DIR, "info", "exclude")])
        if exclude_scope is not None:
            scopes.append(exclude_scope)
        for parent in reversed(parents):
            scope = self._load_ignore_files(parent, in_repository=True)
            if scope is not None:
                scopes.append(scope)
        return scopes

    def _load_ignore_files(self, directory: str, in_repository: bool) -> Optional[_IgnoreScope]:
        # .ignore is loaded last so that its patterns win over .gitignore
        names = (GITIGNORE_FILE, DOT_IGNORE_FILE) if in_repository else (DOT_IGNORE_FILE,)
        return self._load_scope(directory, [os.path.join(directory, name) for name in names])

    def _load_scope(self, base_dir: str, candidates: Sequence[str]) -> Optional[_IgnoreScope]:
        rules_files = [path for path in candidates if os.path.isfile(path)]
        if not rules_files:
            return None

        try:
            rules = GitIgnoreExclusionRules(rules_files, base_dir=base_dir)
        except OSError as e:
            self.onerror(e)
            return None
        return base_dir, rules

    def _is_ignored(self, entry: TraversalEntry, scopes: List[_IgnoreScope]) -> bool:
        # The innermost ignore file with a matching pattern decides
        for base_dir, rules in reversed(scopes):
            relative = os.path.relpath(entry.path, base_dir).replace(os.sep, "/")
            if entry.is_dir:
                relative += "/"
            verdict = rules.check(relative)
            if verdict is not None:
                return verdict
        return False
