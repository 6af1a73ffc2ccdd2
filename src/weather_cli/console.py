"""Decorative terminal output built on rich."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console as RichConsole
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

RAINBOW = ("red", "dark_orange", "yellow", "green", "blue", "purple")
PASTEL = ("#74ebd5", "#9face6", "#c3a3f1", "#f7a8d8")

WELCOME_TEXT = "Welcome to the Weather CLI!"
TITLE_TEXT = "W E A T H E R   C L I"
TAGLINE = "Get the weather via the command line!"


def _colored(text: str, colors: tuple[str, ...], offset: int = 0) -> Text:
    """Cycle ``colors`` across the non-space characters of ``text``."""
    styled = Text()
    step = offset
    for char in text:
        if char.isspace():
            styled.append(char)
            continue
        styled.append(char, style=f"bold {colors[step % len(colors)]}")
        step += 1
    return styled


class Console:
    """Thin output interface used by the shell.

    Everything that touches colours, animation or timing lives here so that
    callers only deal in plain strings.
    """

    def __init__(self, console: RichConsole | None = None) -> None:
        self._console = console or RichConsole()

    def banner(self, delay: float = 2.0) -> None:
        """Animate a rainbow welcome line for ``delay`` seconds, then print the title."""
        frame_time = 0.1
        with Live(
            _colored(WELCOME_TEXT, RAINBOW),
            console=self._console,
            transient=True,
            refresh_per_second=1 / frame_time,
        ) as live:
            frames = max(int(delay / frame_time), 0)
            for frame in range(frames):
                live.update(_colored(WELCOME_TEXT, RAINBOW, offset=frame))
                time.sleep(frame_time)

        self._console.print(
            Panel(_colored(TITLE_TEXT, PASTEL), expand=False, padding=(1, 4)),
        )
        self._console.print(TAGLINE + "\n", style="bright_green")

    def show(self, text: str) -> None:
        self._console.print(Panel(text, expand=False, border_style="cyan"))

    def info(self, message: str) -> None:
        self._console.print(message, style="blue")

    def success(self, message: str) -> None:
        self._console.print(message, style="green")

    def warning(self, message: str) -> None:
        self._console.print(message, style="yellow")

    def error(self, message: str) -> None:
        self._console.print(message, style="bold red")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        with self._console.status(message, spinner="dots"):
            yield

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)
