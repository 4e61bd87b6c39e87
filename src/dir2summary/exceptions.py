from dir2summary.types import PathType


class SummaryError(Exception):
    """
    Base class for errors that abort a summary run.

    Recoverable conditions (unreadable entries, undecodable files, malformed exclusion
    patterns) never raise; they are logged and only degrade the affected item. Anything
    deriving from this class means the output artifact could not be produced.

    Example:
        >>> error = SummaryError("Failed to generate summary")
        >>> str(error)
        'Failed to generate summary'
    """

    pass


class InputDirectoryError(SummaryError):
    """
    Exception raised when the directory to summarize is missing or is not a directory.

    Attributes:
        path (str): The input path that was rejected.

    Example:
        >>> error = InputDirectoryError("/no/such/dir")
        >>> str(error)
        'Input directory does not exist: /no/such/dir'
        >>> str(InputDirectoryError("setup.py", reason="is not a directory"))
        'Input directory is not a directory: setup.py'
    """

    def __init__(self, path: PathType, reason: str = "does not exist") -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path: The input path that was rejected.
            reason (str, optional): Why the path was rejected. Defaults to "does not exist".
        """
        self.path = str(path)
        super().__init__(f"Input directory {reason}: {self.path}")


class OutputFileError(SummaryError):
    """
    Exception raised when the output artifact cannot be created or truncated.

    The underlying OSError is available through ``__cause__``.

    Attributes:
        path (str): The output path that could not be opened.

    Example:
        >>> str(OutputFileError("/read-only/summary.txt"))
        'Failed to create output file: /read-only/summary.txt'
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"Failed to create output file: {self.path}")


class OutputWriteError(SummaryError):
    """
    Exception raised when writing a section of the output artifact fails.

    The underlying OSError is available through ``__cause__``.

    Attributes:
        stage (str): The output stage that failed (e.g. "tree structure").

    Example:
        >>> str(OutputWriteError("statistics"))
        'Failed to write statistics'
        >>> str(OutputWriteError("output", action="flush"))
        'Failed to flush output'
    """

    def __init__(self, stage: str, action: str = "write") -> None:
        self.stage = stage
        super().__init__(f"Failed to {action} {stage}")
