"""Explicit outcome values returned by every menu command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    OK = "OK"
    FAILED = "FAILED"
    EXIT = "EXIT"


@dataclass(frozen=True)
class CommandResult:

    outcome: Outcome
    message: str = ""

    @staticmethod
    def ok(message: str = "") -> CommandResult:
        return CommandResult(Outcome.OK, message)

    @staticmethod
    def failed(message: str) -> CommandResult:
        return CommandResult(Outcome.FAILED, message)

    @staticmethod
    def exit() -> CommandResult:
        return CommandResult(Outcome.EXIT)
