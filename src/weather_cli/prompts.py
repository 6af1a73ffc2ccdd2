"""Interactive prompts backed by questionary."""

from __future__ import annotations

from typing import Protocol

import questionary


class Prompter(Protocol):
    """What the shell and the settings flow need from user input.

    Every method returns ``None`` when the user cancels (Ctrl-C).
    """

    def select(self, message: str, choices: list[str]) -> str | None: ...

    def text(self, message: str, default: str = "") -> str | None: ...

    def secret(self, message: str, default: str = "") -> str | None: ...


class QuestionaryPrompter:
    """Prompter that asks questions in the terminal."""

    def select(self, message: str, choices: list[str]) -> str | None:
        return questionary.select(message, choices=choices).ask()

    def text(self, message: str, default: str = "") -> str | None:
        return questionary.text(message, default=default).ask()

    def secret(self, message: str, default: str = "") -> str | None:
        return questionary.password(message, default=default).ask()
