import os
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Optional, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of file types for categorizing items during traversal.

    This enum is used to differentiate between regular files, directories, and symlinks
    when processing the filesystem.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class TraversalEntry:
    """A filesystem object discovered while walking a directory tree.

    Attributes:
        path: Path of the entry as discovered: the walked root exactly as given, joined
            with the entry's relative components (``./src/main.py`` when walking ``.``).
        file_type: Whether the entry is a file, a directory, or a symlink.
        depth: Distance from the walked root (0 for the root itself).
        symlink_target: For symlinks, the link target when it can be resolved.
    """

    path: str
    file_type: FileType
    depth: int = 0
    symlink_target: Optional[str] = None

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.file_type is FileType.FILE

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK
