"""File I/O for listmaker lists."""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)


def read_file(path: str) -> List[str]:
    """Load a list file, one item per line.

    Lines are trimmed and blank lines skipped, so every returned item is
    non-empty. A missing, unreadable or non-UTF-8 file raises OSError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise OSError(f"{path}: {e}") from e

    items = [line.strip() for line in lines if line.strip()]
    logger.info("Read %d items from %s", len(items), path)
    return items


def write_file(path: str, items: List[str]) -> None:
    """Rewrite the file from in-memory state.

    The text is encoded before the file is opened, so an item that cannot
    be written leaves the previous contents in place.
    """
    payload = "".join(f"{text}\n" for text in items)
    try:
        payload.encode("utf-8")
    except UnicodeEncodeError as e:
        raise OSError(f"{path}: {e}") from e

    ensure_dir_exists(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(payload)
    logger.info("Wrote %d items to %s", len(items), path)


def ensure_dir_exists(path: str) -> None:
    """Ensure the directory holding path exists."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
