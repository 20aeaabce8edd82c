"""Whole-file reads and writes for subtitle documents."""

from pathlib import Path


class SRTFileError(Exception):
    """Exception raised when a subtitle file cannot be read or written."""


def read_whole_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file into memory.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        File content

    Raises:
        SRTFileError: If the file does not exist, cannot be opened or decoded
    """
    try:
        with path.open(encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SRTFileError(f"Failed to read {path}: {e}") from e


def write_whole_file(path: Path, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text to a file, replacing any existing content.

    Args:
        path: Destination file
        content: Text to write
        encoding: Text encoding of the file

    Returns:
        Path to the written file

    Raises:
        SRTFileError: If the file cannot be written
    """
    try:
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except (OSError, UnicodeEncodeError) as e:
        raise SRTFileError(f"Failed to write {path}: {e}") from e
    return path
