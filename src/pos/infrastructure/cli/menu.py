"""Top-level interactive menu.

A fixed list of commands and a single cursor. Up/Down/Tab move the
cursor (wrapping around), Enter runs the highlighted command. The
controller itself has no business logic; it only reports the
``CommandResult`` each command returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

from pos.infrastructure.bootstrap import AppState
from pos.infrastructure.cli import (
    checkout_commands,
    customer_commands,
    product_commands,
    receipt_commands,
)
from pos.infrastructure.cli.console import (
    ACCENT,
    SELECTED,
    SUCCESS,
    WARNING,
    Console,
    MenuKey,
)
from pos.infrastructure.cli.result import CommandResult, Outcome

logger = logging.getLogger(__name__)

TITLE = "--- POS Console ---"


@dataclass(frozen=True)
class MenuCommand:

    label: str
    action: Callable[[], CommandResult]


class MenuController:

    def __init__(self, console: Console, commands: Sequence[MenuCommand]) -> None:
        if not commands:
            raise ValueError("Menu needs at least one command")
        self._console = console
        self._commands = list(commands)
        self.cursor = 0

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self._commands]

    def move(self, key: MenuKey) -> None:
        count = len(self._commands)
        if key is MenuKey.UP:
            self.cursor = (self.cursor - 1) % count
        elif key in (MenuKey.DOWN, MenuKey.TAB):
            self.cursor = (self.cursor + 1) % count

    def render(self) -> None:
        self._console.clear()
        self._console.echo(TITLE, ACCENT)
        for i, command in enumerate(self._commands):
            if i == self.cursor:
                self._console.echo(f"> {command.label}", SELECTED)
            else:
                self._console.echo(f"  {command.label}")

    def dispatch(self) -> bool:
        """Run the highlighted command; return False when the menu should exit."""
        command = self._commands[self.cursor]
        logger.info("Menu command selected", extra={"extra": {"command": command.label}})

        try:
            result = command.action()
        except Exception as exc:
            logger.exception(
                "Menu command failed", extra={"extra": {"command": command.label}}
            )
            result = CommandResult.failed(f"An error occurred: {exc}")

        match result:
            case CommandResult(outcome=Outcome.EXIT):
                return False
            case CommandResult(outcome=Outcome.FAILED, message=message):
                self._console.echo(message, WARNING)
            case CommandResult(message=message) if message:
                self._console.echo(message, SUCCESS)

        self._console.pause()
        return True

    def run(self) -> None:
        while True:
            self.render()
            key = self._console.read_key()
            if key is MenuKey.ENTER:
                if not self.dispatch():
                    return
            elif key is not None:
                self.move(key)


def build_menu(app: AppState, console: Console) -> MenuController:
    def bind(action: Callable[[AppState, Console], CommandResult]) -> Callable[[], CommandResult]:
        return partial(action, app, console)

    return MenuController(
        console,
        [
            MenuCommand("View Products", bind(product_commands.view_products)),
            MenuCommand("Add Product", bind(product_commands.add_product)),
            MenuCommand("Update Product", bind(product_commands.update_product)),
            MenuCommand("Delete Product", bind(product_commands.delete_product)),
            MenuCommand("Checkout", bind(checkout_commands.checkout)),
            MenuCommand("Add Customer", bind(customer_commands.add_customer)),
            MenuCommand("View Customers", bind(customer_commands.view_customers)),
            MenuCommand("View Receipts", bind(receipt_commands.view_receipts)),
            MenuCommand("Clear Receipts", bind(receipt_commands.clear_receipts)),
            MenuCommand("Exit", CommandResult.exit),
        ],
    )
