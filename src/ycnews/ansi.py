"""ANSI SGR sequences used for terminal output."""

import re

RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
MAGENTA = "\x1b[35m"
BOLD_CYAN = "\x1b[1;36m"

_RE_SGR = re.compile(r"\x1b\[[0-9;]*m")


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def visible_len(text: str) -> int:
    """Length of text as shown on a terminal, ignoring color sequences."""
    return len(_RE_SGR.sub("", text))
