"""File content printer producing line-numbered content blocks.

Every accepted file becomes one block in the summary:

    path/to/file.py:
    --------------------------------------------------------------------------------
    1 | first line
    2 | second line
    --------------------------------------------------------------------------------
    <blank line>

A file that cannot be read or decoded at this point gets a single error line in
place of its content; the summary carries on with the next file.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Protocol, Tuple

from .types import PathType

_logger = logging.getLogger(__name__)

SEPARATOR = "-" * 80


class TextSink(Protocol):
    def write(self, data: str) -> None: ...


def split_lines(text: str) -> List[str]:
    """Split text into lines the way a line iterator reads them.

    Lines end at ``\\n``; one trailing ``\\r`` is dropped from each line, and a final
    line without terminator is kept. Other characters ``str.splitlines`` would split
    on (form feeds, Unicode separators) stay inside their line.

    Example:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_lines("a\\n\\nb")
        ['a', '', 'b']
        >>> split_lines("page\\x0cbreak")
        ['page\\x0cbreak']
        >>> split_lines("")
        []
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class FileContentPrinter:
    """Streams line-numbered content blocks for a sequence of files.

    Files are read whole with the configured encoding and no newline translation.
    Decode and read failures are recoverable: they are logged as warnings and the
    block contains ``Error reading file: <reason>`` instead of content.

    Attributes:
        encoding (str): The encoding to use when reading files.

    Example:
        >>> printer = FileContentPrinter()
        >>> for path, chunks in printer.yield_file_contents(["src/main.py"]):  # doctest: +SKIP
        ...     print("".join(chunks), end="")
        src/main.py:
        --------------------------------------------------------------------------------
        1 | print("hello")
        --------------------------------------------------------------------------------
        <BLANKLINE>
    """

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None) -> None:
        """Initialize the FileContentPrinter.

        Args:
            encoding: The encoding to use when reading files. Defaults to "utf-8".
            logger: Logger receiving warnings for unreadable files. Defaults to the
                module logger.

        Raises:
            LookupError: If the specified encoding is not available.
        """
        # Validate encoding early to fail fast
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.encoding = encoding
        self.logger = logger or _logger

    def _read_text(self, file_path: PathType) -> str:
        with open(file_path, "r", encoding=self.encoding, newline="") as file:
            return file.read()

    def format_file(self, file_path: PathType) -> Iterator[str]:
        """Yield the content block of a single file, one output line at a time.

        Each yielded string ends with a newline.
        """
        yield f"{file_path}:\n"
        yield SEPARATOR + "\n"

        try:
            content = self._read_text(file_path)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Failed to read %s: %s", file_path, e)
            yield f"Error reading file: {e}\n"
        else:
            for number, line in enumerate(split_lines(content), start=1):
                yield f"{number} | {line}\n"

        yield SEPARATOR + "\n"
        yield "\n"

    def yield_file_contents(self, files: Iterable[PathType]) -> Iterator[Tuple[PathType, Iterator[str]]]:
        """Yield each file together with the lazily produced lines of its block.

        Yields:
            Pairs of (file_path, content_iterator), in the order of ``files``.
        """
        for file_path in files:
            yield file_path, self.format_file(file_path)

    def write_all(self, sink: TextSink, files: Iterable[PathType]) -> int:
        """Write the content blocks of all files to a sink.

        Args:
            sink: Anything with a ``write(str)`` method.
            files: Accepted files, in output order.

        Returns:
            Number of blocks written.

        Raises:
            OSError: If writing to the sink fails. Read failures never raise.
        """
        count = 0
        for _, chunks in self.yield_file_contents(files):
            for chunk in chunks:
                sink.write(chunk)
            count += 1
        return count
