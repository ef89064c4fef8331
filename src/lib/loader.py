"""
File loader for directive arguments

Reads a file named by a directive into a single string. Failures surface as
FileReadError so callers can decide whether to recover locally.
"""

from pathlib import Path
from typing import Optional, Union

from .exceptions import FileReadError
from .log import LOG


def path_resolve(path: str, base_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve a directive path against the base directory.

    Absolute paths are returned unchanged; relative paths are joined onto
    base_dir, or left relative to the working directory when it is None.
    """
    candidate = Path(path)
    if base_dir is None or candidate.is_absolute():
        return candidate
    return Path(base_dir) / candidate


def file_read(
    path: str, base_dir: Optional[Union[str, Path]] = None, encoding: str = "utf-8"
) -> str:
    """
    Read the full text content of a file.

    Line terminators are preserved as stored on disk.

    Args:
        path: File path as written in the directive
        base_dir: Directory relative paths are resolved against
        encoding: Text encoding of the file

    Returns:
        File contents

    Raises:
        FileReadError: file is missing, unreadable, or not valid in encoding
    """
    resolved = path_resolve(path, base_dir)
    LOG(f"Reading {resolved}", level=2)
    try:
        with open(resolved, "r", encoding=encoding, newline="") as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e

    LOG(f"Read {len(content)} characters from {resolved}", level=3)
    return content
