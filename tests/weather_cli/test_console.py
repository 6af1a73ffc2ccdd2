"""Tests for the rich-backed console."""

from __future__ import annotations

import io

import pytest
from rich.console import Console as RichConsole

from weather_cli.console import TAGLINE, Console, _colored


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(RichConsole(file=output, width=80, color_system=None))


class TestConsole:
    def test_banner(self, console: Console, output: io.StringIO) -> None:
        console.banner(delay=0)
        text = output.getvalue()
        assert "W E A T H E R   C L I" in text
        assert TAGLINE in text

    def test_messages(self, console: Console, output: io.StringIO) -> None:
        console.info("Goodbye!")
        console.error("Error: city not found")
        text = output.getvalue()
        assert "Goodbye!" in text
        assert "Error: city not found" in text

    def test_show_panel(self, console: Console, output: io.StringIO) -> None:
        console.show("Weather in London\nHumidity:    81%")
        text = output.getvalue()
        assert "Weather in London" in text
        assert "Humidity:    81%" in text

    def test_spinner_yields(self, console: Console) -> None:
        with console.spinner("Fetching..."):
            pass

    def test_pause_zero_returns(self, console: Console) -> None:
        console.pause(0)


class TestColored:
    def test_keeps_text(self) -> None:
        assert _colored("a b", ("red", "blue")).plain == "a b"

    def test_cycles_colors_over_non_space(self) -> None:
        styled = _colored("ab c", ("red", "blue"))
        styles = [str(span.style) for span in styled.spans]
        assert styles == ["bold red", "bold blue", "bold red"]
