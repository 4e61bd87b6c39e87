"""Binary file detection utilities."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from dir2summary.types import PathType

_logger = logging.getLogger(__name__)

# Number of leading bytes scanned for a NUL byte
NUL_WINDOW = 8000

# Magic numbers of common binary formats. Every (offset, bytes) part of a signature
# must match for the signature to match.
BINARY_SIGNATURES: Tuple[Tuple[Tuple[int, bytes], ...], ...] = (
    # Executables and objects
    ((0, b"\x7fELF"),),
    ((0, b"\xca\xfe\xba\xbe"),),
    ((0, b"\xfe\xed\xfa\xce"),),
    ((0, b"\xfe\xed\xfa\xcf"),),
    ((0, b"\xce\xfa\xed\xfe"),),
    ((0, b"\xcf\xfa\xed\xfe"),),
    ((0, b"\x00asm"),),
    ((0, b"!<arch>\n"),),
    ((0, b"dex\n"), (7, b"\x00"), (36, b"\x70")),
    # Images
    ((0, b"\x89PNG\r\n\x1a\n"),),
    ((0, b"\xff\xd8\xff"),),
    ((0, b"GIF87a"),),
    ((0, b"GIF89a"),),
    ((0, b"II*\x00"),),
    ((0, b"MM\x00*"),),
    ((0, b"\x00\x00\x01\x00"),),
    ((0, b"8BPS\x00\x01"),),
    ((0, b"8BPS\x00\x02"),),
    ((0, b"RIFF"), (8, b"WEBP")),
    # Audio and video
    ((0, b"RIFF"), (8, b"WAVE")),
    ((0, b"RIFF"), (8, b"AVI ")),
    ((0, b"OggS\x00"),),
    ((0, b"fLaC"), (5, b"\x00\x00\x22")),
    ((0, b"ID3\x03"),),
    ((0, b"ID3\x04"),),
    ((0, b"\xff\xfb"),),
    ((0, b"\xff\xf3"),),
    ((0, b"\xff\xf2"),),
    ((0, b"\x1aE\xdf\xa3"),),
    # ISO base media (MP4, MOV, HEIC, AVIF): a box size below 16 MiB, then "ftyp"
    ((0, b"\x00"), (4, b"ftyp")),
    # Archives and compressed streams
    ((0, b"PK\x03\x04"),),
    ((0, b"PK\x05\x06"),),
    ((0, b"PK\x07\x08"),),
    ((0, b"\x1f\x8b"),),
    ((0, b"BZh"), (4, b"1AY&SY")),
    ((0, b"\xfd7zXZ\x00"),),
    ((0, b"7z\xbc\xaf\x27\x1c"),),
    ((0, b"Rar!\x1a\x07"),),
    ((0, b"\x28\xb5\x2f\xfd"),),
    ((0, b"\x04\x22\x4d\x18"),),
    ((257, b"ustar\x00"),),
    ((257, b"ustar  \x00"),),
    # Documents, fonts, and databases
    ((0, b"%PDF-"),),
    ((0, b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"),),
    ((0, b"wOFF\x00\x01\x00\x00"),),
    ((0, b"wOFFOTTO"),),
    ((0, b"wOFFtrue"),),
    ((0, b"wOF2\x00\x01\x00\x00"),),
    ((0, b"wOF2OTTO"),),
    ((0, b"wOF2true"),),
    ((0, b"OTTO\x00"),),
    ((0, b"\x00\x01\x00\x00\x00"),),
    ((0, b"SQLite format 3\x00"),),
    ((0, b"\x89HDF\r\n\x1a\n"),),
)


def matches_binary_signature(data: bytes) -> bool:
    """Check whether content starts like a known binary format.

    Args:
        data: The file content (or at least its first few hundred bytes).

    Returns:
        True if any entry of BINARY_SIGNATURES matches.

    Example:
        >>> matches_binary_signature(b"\\x89PNG\\r\\n\\x1a\\n....")
        True
        >>> matches_binary_signature(b"RIFF\\x00\\x00\\x00\\x00WAVEfmt ")
        True
        >>> matches_binary_signature(b"RIFF is a container format")
        False
    """
    return any(
        all(data[offset : offset + len(magic)] == magic for offset, magic in signature)
        for signature in BINARY_SIGNATURES
    )


def is_binary_file(
    file_path: PathType, nul_window: int = NUL_WINDOW, logger: Optional[logging.Logger] = None
) -> bool:
    """Detect if a file is binary using signature sniffing and a NUL-byte scan.

    The whole file is read. It is classified binary when its content matches a known
    binary signature, or when a NUL byte appears within the first ``nul_window``
    bytes. Signature tables miss plenty of binary formats, so the NUL scan is the
    catch-all.

    This function never raises. A file that cannot be read is classified as text, so
    that the read failure surfaces later as content instead of the file silently
    disappearing from the summary.

    Args:
        file_path: Path to the file to analyze. Can be any path-like object.
        nul_window: Number of leading bytes scanned for NUL. Defaults to 8000.
        logger: Logger receiving a warning when the file cannot be read. Defaults to
            the module logger.

    Returns:
        True if the file appears to be binary, False if it appears to be text.

    Example:
        >>> is_binary_file("README.md")  # doctest: +SKIP
        False
        >>> is_binary_file("logo.png")  # doctest: +SKIP
        True
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        (logger or _logger).warning("Failed to read %s for binary detection: %s", file_path, e)
        return False

    # Empty files are text
    if not data:
        return False

    if matches_binary_signature(data):
        return True

    return b"\0" in data[:nul_window]
