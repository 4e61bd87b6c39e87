"""Nodes of the summary tree."""

from typing import Any, Optional

from anytree import Node

UNREADABLE_LINK = "[unreadable link]"


class FileSystemNode(Node):  # type: ignore
    """An anytree node standing for a directory, file, or symlink of the summary.

    Children keep the order in which they were attached, which for the summary tree
    is the order in which the walker discovered them.

    Attributes:
        name (str): Base name of the entry (the display form of the path for the root).
        is_dir (bool): Whether the node is a directory.
        is_symlink (bool): Whether the node is a symbolic link.
        symlink_target (Optional[str]): Where the link points, None when unresolvable.

    Example:
        >>> root = FileSystemNode("project", is_dir=True)
        >>> link = FileSystemNode("latest", parent=root, is_symlink=True, symlink_target="releases/v2")
        >>> link.label
        'latest -> releases/v2'
        >>> FileSystemNode("dangling", parent=root, is_symlink=True).label
        'dangling -> [unreadable link]'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target

    @property
    def label(self) -> str:
        """Text shown for this node in the rendered tree."""
        if self.is_symlink:
            return f"{self.name} -> {self.symlink_target or UNREADABLE_LINK}"
        return str(self.name)
