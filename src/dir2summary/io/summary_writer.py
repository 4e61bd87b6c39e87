"""Buffered writer owning the summary output artifact."""

import types
from pathlib import Path
from typing import Optional, TextIO, Type

from dir2summary.exceptions import OutputFileError
from dir2summary.types import PathType


class SummaryWriter:
    """Exclusive, buffered handle on the output artifact for the duration of a run.

    The file is created (or truncated) when the writer is constructed and written as
    UTF-8 through a buffered text stream. Characters that cannot be encoded, such as
    the surrogates standing for undecodable bytes in file names, are written as
    ``?``. Nothing is guaranteed to be on disk until :meth:`flush` returns;
    :meth:`close` flushes as well.

    Attributes:
        path (Path): The output file.

    Example:
        >>> with SummaryWriter("summary.txt") as writer:  # doctest: +SKIP
        ...     writer.write("project\\n")
        ...     writer.flush()
    """

    def __init__(self, path: PathType):
        """Create or truncate the output file.

        Args:
            path: Path of the output artifact.

        Raises:
            OutputFileError: If the file cannot be created. The OSError is chained.
        """
        self.path = Path(path)
        self._closed = False

        try:
            self._file: TextIO = self.path.open("w", encoding="utf-8", errors="replace")
        except OSError as e:
            raise OutputFileError(self.path) from e

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: str) -> None:
        """Write a string to the output buffer.

        Raises:
            ValueError: If attempting to write to a closed writer.
            OSError: If an I/O error occurs.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SummaryWriter")
        self._file.write(data)

    def flush(self) -> None:
        """Push buffered output to the operating system.

        Raises:
            ValueError: If the writer is closed.
            OSError: If an I/O error occurs.
        """
        if self._closed:
            raise ValueError("Cannot flush closed SummaryWriter")
        self._file.flush()

    def close(self) -> None:
        """Flush and close the file. Closing twice is a no-op."""
        if self._closed:
            return
        try:
            self._file.close()
        finally:
            self._closed = True

    def __enter__(self) -> "SummaryWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the file.

        If closing fails while an exception is already propagating, the original
        exception is kept.
        """
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
