"""Mini README: Console collaborators used by the interactive menu.

Structure:
    * Console - abstract interface for presenting lines and reading answers.
    * TyperConsole - terminal implementation built on ``typer``.
    * format_table - right-aligned fixed-width table rendering.

The menu only ever talks to ``Console`` so tests can script a session without
a terminal and alternative front ends can reuse the same flow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence

import typer


class Console(ABC):
    """Base interface for the menu's input and output."""

    @abstractmethod
    def present(self, lines: Iterable[str]) -> None:
        """Show the provided lines to the user."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Return the raw answer typed for ``prompt``."""

    def pause(self) -> None:
        """Optional hook letting the user read output before the menu redraws."""

    def say(self, line: str) -> None:
        self.present([line])


class TyperConsole(Console):
    """Interactive terminal console."""

    def __init__(self, *, pause_after_action: bool = True) -> None:
        self.pause_after_action = pause_after_action

    def present(self, lines: Iterable[str]) -> None:
        for line in lines:
            typer.echo(line)

    def ask(self, prompt: str) -> str:
        return typer.prompt(prompt, default="", show_default=False)

    def pause(self) -> None:
        if self.pause_after_action:
            typer.prompt("Press Enter to continue", default="", show_default=False)


def format_table(headers: Sequence[str], rows: Iterable[Sequence[str]], widths: Sequence[int]) -> List[str]:
    """Render rows as right-aligned columns with a dashed separator."""

    def render(cells: Sequence[str]) -> str:
        return "".join(f"{cell:>{width}}" for cell, width in zip(cells, widths))

    lines = [render(headers), "-" * sum(widths)]
    lines.extend(render(row) for row in rows)
    return lines
