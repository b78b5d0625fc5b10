"""listmaker - edit an ordered list of text items at the console."""

__version__ = "1.0.0"

from .models import ListSession, DEFAULT_DIR, list_path
from .storage import read_file, write_file
from .core import insert_item, delete_item, move_item, numbered_lines
from .prompts import Prompter

__all__ = [
    "ListSession",
    "DEFAULT_DIR",
    "list_path",
    "read_file",
    "write_file",
    "insert_item",
    "delete_item",
    "move_item",
    "numbered_lines",
    "Prompter",
]
