"""Directory summary utilities.

This package walks a directory tree and writes a single text artifact containing
the rendered tree, the line-numbered contents of every text file, and aggregate
statistics, suitable for handing a codebase to a reviewer or a Large Language Model.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2summary")
except PackageNotFoundError:
    __version__ = "unknown"
