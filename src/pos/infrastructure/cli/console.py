"""Terminal I/O behind a small interface.

``ClickConsole`` talks to the real terminal through click: raw key
reads, line prompts, coloured output and screen clearing. Tests swap
in a scripted console with the same interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import click


class MenuKey(Enum):
    UP = "UP"
    DOWN = "DOWN"
    TAB = "TAB"
    ENTER = "ENTER"


# Raw sequences returned by click.getchar() on POSIX terminals and Windows
_KEY_MAP: dict[str, MenuKey] = {
    "\x1b[A": MenuKey.UP,
    "\x1bOA": MenuKey.UP,
    "\xe0H": MenuKey.UP,
    "\x00H": MenuKey.UP,
    "\x1b[B": MenuKey.DOWN,
    "\x1bOB": MenuKey.DOWN,
    "\xe0P": MenuKey.DOWN,
    "\x00P": MenuKey.DOWN,
    "\t": MenuKey.TAB,
    "\r": MenuKey.ENTER,
    "\n": MenuKey.ENTER,
    "\r\n": MenuKey.ENTER,
}

SUCCESS = "success"
WARNING = "warning"
ACCENT = "accent"
SELECTED = "selected"

_STYLES: dict[str, dict[str, object]] = {
    SUCCESS: {"fg": "green"},
    WARNING: {"fg": "yellow"},
    ACCENT: {"fg": "blue"},
    SELECTED: {"fg": "green", "bold": True},
}


def decode_key(raw: str) -> MenuKey | None:
    """Map a raw key sequence to a menu key; anything else is ignored."""
    return _KEY_MAP.get(raw)


class Console(ABC):

    @abstractmethod
    def read_key(self) -> MenuKey | None:
        """Block for one key press."""

    @abstractmethod
    def prompt(self, text: str) -> str:
        """Read one line of input; blank input returns ``""``."""

    @abstractmethod
    def echo(self, message: str = "", style: str | None = None) -> None:
        """Write one line, optionally styled."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen."""

    def pause(self) -> None:
        self.prompt("Press Enter to continue...")


class ClickConsole(Console):

    def read_key(self) -> MenuKey | None:
        raw = click.getchar()
        if not raw:
            # stdin is not a terminal and has run dry
            raise EOFError
        return decode_key(raw)

    def prompt(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix=" ")

    def echo(self, message: str = "", style: str | None = None) -> None:
        if style is not None:
            message = click.style(message, **_STYLES[style])
        click.echo(message)

    def clear(self) -> None:
        click.clear()
