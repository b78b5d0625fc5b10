"""listmaker menu-driven command-line interface."""

import argparse
import logging
import os
from typing import List, Optional

from .models import ListSession, DEFAULT_DIR, list_path
from .storage import read_file, write_file
from .core import insert_item, delete_item, move_item, numbered_lines
from .prompts import Prompter

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter command [A D I M O S C V Q]"
COMMAND_PATTERN = "[AaDdIiMmOoSsCcVvQq]"

MENU_TEXT = [
    "Menu:",
    "A - Add item",
    "D - Delete item",
    "I - Insert item",
    "M - Move item",
    "O - Open list from disk",
    "S - Save current list",
    "C - Clear list",
    "V - View list",
    "Q - Quit",
]


class ListMaker:
    """Menu loop editing a single in-memory list."""

    def __init__(
        self,
        prompter: Optional[Prompter] = None,
        directory: str = DEFAULT_DIR,
        session: Optional[ListSession] = None,
    ):
        self.io = prompter or Prompter()
        self.directory = directory
        self.session = session or ListSession()
        self.actions = {
            "A": self.add_item,
            "D": self.delete_item,
            "I": self.insert_item,
            "M": self.move_item,
            "O": self.open_list,
            "S": self.save_list,
            "C": self.clear_list,
            "V": self.view_list,
            "Q": self.quit,
        }

    def message(self, text: str = "") -> None:
        self.io.say(text)

    def print_list(self) -> None:
        for line in numbered_lines(self.session.items):
            self.message(line)

    def draw(self) -> None:
        """Print the current list, its file, and the menu."""
        current = self.session.current_file
        name = os.path.basename(current) if current else "none"
        self.message()
        self.message(f"Current List (file: {name}):")
        self.print_list()
        self.message()
        for line in MENU_TEXT:
            self.message(line)

    # Edit operations

    def add_item(self) -> None:
        text = self.io.read_non_empty_string("Enter item to add")
        self.session.items.append(text)
        self.session.dirty = True

    def insert_item(self) -> None:
        top = len(self.session.items) + 1
        pos = self.io.read_ranged_int(f"Insert position (1-{top})", 1, top)
        text = self.io.read_non_empty_string("Enter item to insert")
        insert_item(self.session.items, pos, text)
        self.session.dirty = True

    def delete_item(self) -> None:
        items = self.session.items
        if not items:
            self.message("List empty.")
            return
        pos = self.io.read_ranged_int(f"Delete item # (1-{len(items)})", 1, len(items))
        removed = delete_item(items, pos)
        self.message(f"Removed: {removed}")
        self.session.dirty = True

    def move_item(self) -> None:
        items = self.session.items
        if not items:
            self.message("No items to move.")
            return
        n = len(items)
        src = self.io.read_ranged_int(f"Move which item (1-{n})?", 1, n)
        dst = self.io.read_ranged_int(f"Move to position (1-{n})?", 1, n)
        move_item(items, src, dst)
        self.session.dirty = True
        self.message("Moved item.")

    def clear_list(self) -> None:
        if self.io.read_yes_no("Clear entire list?"):
            self.session.items.clear()
            self.session.current_file = None
            self.session.dirty = True
            self.message("List cleared.")
        else:
            self.message("Clear cancelled.")

    def view_list(self) -> None:
        self.message()
        self.print_list()

    # File operations (raise OSError)

    def ask_path(self, prompt: str) -> str:
        base = self.io.read_non_empty_string(prompt)
        return list_path(base, self.directory)

    def open_list(self) -> None:
        if self.session.dirty:
            if self.io.read_yes_no("Unsaved changes exist. Save before opening another file?"):
                self.save_list()
        path = self.ask_path("Enter filename to open (no extension)")
        loaded = read_file(path)
        self.session.items[:] = loaded
        self.session.current_file = path
        self.session.dirty = False
        self.message(f"Loaded {os.path.abspath(path)}")

    def save_list(self) -> None:
        if self.session.current_file is None:
            self.session.current_file = self.ask_path("Enter base filename (no extension)")
        write_file(self.session.current_file, self.session.items)
        self.session.dirty = False
        self.message(f"Saved to {os.path.abspath(self.session.current_file)}")

    def quit(self) -> bool:
        """Return True when the user has approved quitting."""
        if not self.session.dirty:
            return self.io.read_yes_no("Are you sure you want to quit?")
        if self.io.read_yes_no("Unsaved changes. Save before quitting?"):
            self.save_list()
            return True
        return self.io.read_yes_no("Quit and discard unsaved changes?")

    def dispatch(self, choice: str) -> bool:
        """Run one command; return True if the loop should stop."""
        logger.debug("Command %s", choice)
        try:
            result = self.actions[choice]()
        except OSError as e:
            logger.info("File operation failed: %s", e)
            self.message(f"File operation failed: {e}")
            return False
        return choice == "Q" and bool(result)

    def run(self) -> None:
        """Main loop: show state, read a command, run it, until quit."""
        while True:
            self.draw()
            choice = self.io.read_matching_string(COMMAND_PROMPT, COMMAND_PATTERN).upper()
            if self.dispatch(choice):
                break
        self.message("Exiting. Goodbye.")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="listmaker", description="Edit a list of text items and save it to disk."
    )
    p.add_argument(
        "-d",
        "--dir",
        default=DEFAULT_DIR,
        help=f"Directory holding list files (default: {DEFAULT_DIR})",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic logging level (default: WARNING)",
    )
    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    app = ListMaker(directory=args.dir)
    try:
        app.run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed; leaving without saving.")
        print()


if __name__ == "__main__":
    main()
