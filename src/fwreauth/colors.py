from __future__ import annotations

import sys
from typing import TextIO


class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"


def _paint(text: str, color: str, stream: TextIO) -> str:
    isatty = getattr(stream, "isatty", None)
    if not (isatty and isatty()):
        return text
    return f"{color}{text}{Colors.RESET}"


def print_success(msg: str) -> None:
    print(_paint(msg, Colors.GREEN, sys.stdout))


def print_warning(msg: str) -> None:
    print(_paint(msg, Colors.YELLOW, sys.stderr), file=sys.stderr)


def print_error(msg: str) -> None:
    print(_paint(msg, Colors.RED, sys.stderr), file=sys.stderr)
