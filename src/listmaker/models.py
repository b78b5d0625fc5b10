"""Data models and constants for listmaker."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_DIR = "src"
LIST_SUFFIX = ".txt"


def list_path(name: str, directory: str = DEFAULT_DIR) -> str:
    """Return the path for a named list: {directory}/{name}.txt"""
    if not name.endswith(LIST_SUFFIX):
        name += LIST_SUFFIX
    return os.path.join(directory, name)


@dataclass
class ListSession:
    """In-memory list being edited, plus its file association."""

    items: List[str] = field(default_factory=list)
    current_file: Optional[str] = None
    dirty: bool = False  # unsaved edits since the last save/load
