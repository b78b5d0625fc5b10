"""List editing helpers (pure functions, no I/O).

Positions are 1-based, matching what the numbered view shows.
"""

from typing import List


def insert_item(items: List[str], pos: int, text: str) -> None:
    """Insert text so that it ends up at numbered line pos."""
    items.insert(pos - 1, text)


def delete_item(items: List[str], pos: int) -> str:
    """Remove and return the item at numbered line pos."""
    return items.pop(pos - 1)


def move_item(items: List[str], src: int, dst: int) -> None:
    """Move the item at line src so that it sits at line dst afterwards.

    dst counts against the final list, not the list after the pop.
    """
    items.insert(dst - 1, items.pop(src - 1))


def numbered_lines(items: List[str]) -> List[str]:
    """Render items as '1: text' lines, or a single '[empty]' line."""
    if not items:
        return ["[empty]"]
    return [f"{i}: {text}" for i, text in enumerate(items, start=1)]
