from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol


RESET = "\x1b[0m"

ANSI_CODES: Mapping[str, str] = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "orange": "\x1b[38;5;208m",
    "purple": "\x1b[38;5;55m",
    "muted": "\x1b[90m",
    "title": "\x1b[2m",
    "bold": "\x1b[1m",
}


class Style(Protocol):
    def paint(self, text: str, color: str) -> str:
        ...


class PlainStyle:
    def paint(self, text: str, color: str) -> str:
        return text


@dataclass(frozen=True)
class AnsiStyle:
    """Maps color ids to SGR escape sequences.

    Unknown ids render unstyled rather than failing, so a caller-supplied color
    table can name colors this terminal style does not know about.
    """

    codes: Mapping[str, str] = field(default_factory=lambda: dict(ANSI_CODES))

    def paint(self, text: str, color: str) -> str:
        if not color or not text:
            return text
        code = self.codes.get(color)
        if code is None:
            return text
        return f"{code}{text}{RESET}"
