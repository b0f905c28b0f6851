"""Multipart filename helpers."""
from __future__ import annotations

from pathlib import Path

from unstructured_client.errors import InvalidFileName

# httpx writes multipart part headers as UTF-8.
PART_FILENAME_ENCODING = "utf-8"


def part_filename(path: str | Path) -> str:
    """Return the base name of ``path`` for use as a part filename.

    Args:
        path: Path of the file being uploaded.

    Returns:
        The final path component.

    Raises:
        InvalidFileName: If the name is empty or not encodable as UTF-8.
    """
    name = Path(path).name
    if not name:
        raise InvalidFileName(str(path), "path has no file name component")
    try:
        name.encode(PART_FILENAME_ENCODING)
    except UnicodeEncodeError as e:
        raise InvalidFileName(
            name, f"not representable in {PART_FILENAME_ENCODING}"
        ) from e
    return name
