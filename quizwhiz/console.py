"""Terminal input and output helpers: colours, prompts, screen clearing and pauses."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from enum import Enum
from typing import Callable, TextIO, Union

CLEAR_COMMAND = "cls" if os.name == "nt" else "clear"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Color(Enum):
    """ANSI escape sequences for text and background colours."""

    RESET = "\033[0m"

    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BOLD_BLACK = "\033[1;30m"
    BOLD_RED = "\033[1;31m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_BLUE = "\033[1;34m"
    BOLD_MAGENTA = "\033[1;35m"
    BOLD_CYAN = "\033[1;36m"
    BOLD_WHITE = "\033[1;37m"

    BG_BLACK = "\033[40m"
    BG_RED = "\033[41m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_BLUE = "\033[44m"
    BG_MAGENTA = "\033[45m"
    BG_CYAN = "\033[46m"
    BG_WHITE = "\033[47m"

    BGB_BLACK = "\033[1;40m"
    BGB_RED = "\033[1;41m"
    BGB_GREEN = "\033[1;42m"
    BGB_YELLOW = "\033[1;43m"
    BGB_BLUE = "\033[1;44m"
    BGB_MAGENTA = "\033[1;45m"
    BGB_CYAN = "\033[1;46m"
    BGB_WHITE = "\033[1;47m"

    RED_ON_YELLOW = "\033[31m\033[43m"
    BOLD_BLUE_ON_CYAN = "\033[1;34m\033[46m"


def _code(color: Union[Color, str]) -> str:
    return color.value if isinstance(color, Color) else color


def colorize(text: str, color: Union[Color, str]) -> str:
    """Wrap *text* in the escape code of *color*, followed by a reset."""
    return f"{_code(color)}{text}{Color.RESET.value}"


class Console:
    """Line-oriented terminal used by the interactive menus."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        *,
        clear_command: str | None = CLEAR_COMMAND,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear_command = clear_command
        self._sleep = sleep

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def prompt(self, text: str) -> str:
        """Show *text* and return the next input line without its line ending."""
        self.write(text)
        line = self._in.readline()
        if not line:
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def prompt_int(self, text: str) -> int:
        """Read a line and return its leading integer, or 0 when there is none."""
        match = _LEADING_INT.match(self.prompt(text))
        return int(match.group(1)) if match else 0

    def clear(self) -> None:
        if self._clear_command:
            subprocess.run(self._clear_command, shell=True, check=False)

    def pause(self, seconds: float) -> None:
        self._sleep(seconds)