"""Incrementally built tree of the entries accepted during a directory walk.

Unlike a tree built by listing directories recursively, the summary tree is fed one
path at a time in discovery order. Intermediate directories are created on demand
the first time a path below them is inserted, and never duplicated afterwards.
"""

import os
from pathlib import Path, PurePath
from typing import Dict, Iterator, List, Optional

from anytree import ContStyle, RenderTree

from dir2summary.file_system_tree.file_system_node import FileSystemNode
from dir2summary.types import PathType


class SummaryTree:
    """Arena of tree nodes keyed by absolute directory path.

    Directory insertion is idempotent: inserting ``src/lib`` creates ``src`` and then
    ``lib`` below it, and inserting ``src`` or ``src/lib`` again afterwards is a no-op.
    Files and symlinks are leaves attached below their (implicitly created) parent
    directory. Children are rendered in the order they were first inserted.

    The tree is meant to be fully built and then rendered once. It is not safe for
    concurrent insertion.

    Attributes:
        root_path (Path): The directory the tree is rooted at, as given.
        root (FileSystemNode): The root node, labelled with the root's display form.

    Example:
        >>> tree = SummaryTree("project")
        >>> tree.add_file("project/src/lib/mod.rs")
        >>> tree.add_directory("project/src")
        >>> tree.add_symlink("project/latest", None)
        >>> print(tree.render())
        project
        ├── src
        │   └── lib
        │       └── mod.rs
        └── latest -> [unreadable link]
    """

    def __init__(self, root_path: PathType, label: Optional[str] = None) -> None:
        """Initialize an empty tree.

        Args:
            root_path: The directory the tree represents. Inserted paths must lie below it.
            label: Text for the root line. Defaults to the root path as given.
        """
        self.root_path = Path(root_path)
        self._abs_root = Path(os.path.abspath(root_path))
        self.root = FileSystemNode(label if label is not None else os.fspath(root_path), is_dir=True)
        self._directories: Dict[Path, FileSystemNode] = {self._abs_root: self.root}
        self._insertion_points: List[FileSystemNode] = []
        self._file_count = 0
        self._symlink_count = 0

    def _relative(self, path: PathType) -> PurePath:
        absolute = Path(os.path.abspath(path))
        try:
            return absolute.relative_to(self._abs_root)
        except ValueError:
            raise ValueError(f"Path {path} is not inside {self.root_path}") from None

    def _relative_leaf(self, path: PathType) -> PurePath:
        relative = self._relative(path)
        if not relative.parts:
            raise ValueError(f"Cannot insert the tree root {path} as a leaf")
        return relative

    def add_directory(self, path: PathType) -> FileSystemNode:
        """Insert a directory and any missing ancestors.

        Args:
            path: Directory path below (or equal to) the root.

        Returns:
            The node for the directory, newly created or already present.

        Raises:
            ValueError: If the path is not inside the root.
        """
        relative = self._relative(path)
        existing = self._directories.get(self._abs_root / relative)
        if existing is not None:
            return existing

        parent = self.root
        current = self._abs_root
        for part in relative.parts:
            current = current / part
            node = self._directories.get(current)
            if node is None:
                node = FileSystemNode(part, parent=parent, is_dir=True)
                self._directories[current] = node
            parent = node
        return parent

    def begin_child(self, directory: PathType) -> FileSystemNode:
        """Make a directory the insertion point for add_leaf(), creating it if needed."""
        node = self.add_directory(directory)
        self._insertion_points.append(node)
        return node

    def add_leaf(
        self, name: str, *, is_symlink: bool = False, symlink_target: Optional[str] = None
    ) -> FileSystemNode:
        """Attach a leaf below the current insertion point (the root if none is open)."""
        parent = self._insertion_points[-1] if self._insertion_points else self.root
        return FileSystemNode(name, parent=parent, is_symlink=is_symlink, symlink_target=symlink_target)

    def end_child(self) -> None:
        """Close the insertion point opened by the matching begin_child()."""
        if not self._insertion_points:
            raise RuntimeError("end_child() called without a matching begin_child()")
        self._insertion_points.pop()

    def add_file(self, path: PathType) -> None:
        """Insert a file below its parent directory chain.

        Raises:
            ValueError: If the path is not strictly inside the root.
        """
        relative = self._relative_leaf(path)
        self.begin_child(self._abs_root / relative.parent)
        try:
            self.add_leaf(relative.name)
        finally:
            self.end_child()
        self._file_count += 1

    def add_symlink(self, path: PathType, target: Optional[str]) -> None:
        """Insert a symlink as a leaf labelled with its target.

        Args:
            path: Path of the link itself. The link is never followed.
            target: The link target, or None if it could not be resolved, in which case
                the leaf reads ``name -> [unreadable link]``.
        """
        relative = self._relative_leaf(path)
        self.begin_child(self._abs_root / relative.parent)
        try:
            self.add_leaf(relative.name, is_symlink=True, symlink_target=target)
        finally:
            self.end_child()
        self._symlink_count += 1

    @property
    def directory_count(self) -> int:
        """Number of directory nodes, excluding the root."""
        return len(self._directories) - 1

    @property
    def file_count(self) -> int:
        return self._file_count

    @property
    def symlink_count(self) -> int:
        return self._symlink_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the rendered tree one line at a time, root label first.

        Yields:
            Lines of the tree, using box-drawing connectors.
        """
        for prefix, _, node in RenderTree(self.root, style=ContStyle()):
            yield f"{prefix}{node.label}"

    def render(self) -> str:
        """Get the complete rendered tree as a string without a trailing newline."""
        return "\n".join(self.stream_tree_representation())
