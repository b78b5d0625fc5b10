"""Validated console input.

Every read blocks until the user supplies an acceptable value; invalid
entries print a short message and the prompt is shown again. There is no
way to cancel a prompt once it is shown. The only thing that escapes is
EOFError, when the input stream runs dry.
"""

import re
import sys
from typing import Optional, TextIO

INT_RE = re.compile(r"[+-]?[0-9]+")


class Prompter:
    """Line-oriented prompts over an input and an output stream."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> str:
        """Write prompt (no newline) and return the trimmed reply."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input closed")
        return line.strip()

    def read_non_empty_string(self, prompt: str) -> str:
        while True:
            value = self._ask(f"{prompt}: ")
            if value:
                return value
            self.say("Input cannot be empty. Please try again.")

    def read_ranged_int(self, prompt: str, low: int, high: int) -> int:
        """Read an integer in [low, high]. Caller guarantees low <= high."""
        while True:
            raw = self._ask(f"{prompt} [{low} - {high}]: ")
            if not INT_RE.fullmatch(raw):
                self.say("Invalid input. Please enter a number.")
                continue
            value = int(raw)
            if low <= value <= high:
                return value
            self.say(f"Number must be between {low} and {high}.")

    def read_yes_no(self, prompt: str) -> bool:
        """Y/N confirmation; accepts y, yes, n, no in any case."""
        while True:
            ans = self._ask(f"{prompt} [Y/N]: ").upper()
            if ans in ("Y", "YES"):
                return True
            if ans in ("N", "NO"):
                return False
            self.say("Please enter Y or N.")

    def read_matching_string(self, prompt: str, pattern: str) -> str:
        """Read a line that fully matches the regular expression pattern."""
        regex = re.compile(pattern)
        while True:
            value = self._ask(f"{prompt}: ")
            if regex.fullmatch(value):
                return value
            self.say(f"Input must match pattern: {pattern}")
