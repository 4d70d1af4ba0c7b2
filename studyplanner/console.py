"""Line-oriented terminal input and output used by the planner."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import TextIO

_INT = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _default_clear_command() -> str:
    return "cls" if os.name == "nt" else "clear"


class Console:
    """Reads user input and writes prompts on a pair of text streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_command: str | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear_command = (
            _default_clear_command() if clear_command is None else clear_command
        )

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read(self, max_len: int) -> str:
        """Read one line and keep at most ``max_len`` characters of it."""
        return self._readline()[:max_len]

    def prompt(self, message: str, max_len: int) -> str:
        self.write(message)
        return self.read(max_len)

    def read_int(self, message: str) -> int:
        """Prompt until a line starting with an integer is entered."""
        while True:
            self.write(message)
            match = _INT.match(self._readline())
            if match:
                return int(match.group())
            self.write("\nInvalid number, please try again.")

    def read_float(self, message: str) -> float:
        """Prompt until a line starting with a number is entered."""
        while True:
            self.write(message)
            match = _FLOAT.match(self._readline())
            if match:
                return float(match.group())
            self.write("\nInvalid number, please try again.")

    def read_char(self, message: str) -> str:
        """Prompt and return the first character typed, or '' for an empty line."""
        self.write(message)
        return self._readline()[:1]

    def clear(self) -> None:
        if self.clear_command:
            subprocess.run(self.clear_command, shell=True, check=False)

    def wait_for_x(self) -> None:
        """Block until the user types a line containing 'x'."""
        self.write("\n\nPress x to continue...\n")
        while True:
            line = self.stdin.readline()
            if line == "" or "x" in line:
                return