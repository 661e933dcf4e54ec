"""
Presentation adapter contract.

The engine never draws anything. It tells a Presenter what to show and the
presenter decides how (panels, labels, buttons, a terminal...). Choice
buttons answer by publishing DialogueEvent.CHOICE_SELECTED with the index
they were given.
"""

from __future__ import annotations

import sys
from typing import Protocol, Sequence, TextIO, runtime_checkable


@runtime_checkable
class Presenter(Protocol):
    """What the dialogue engine needs from a UI."""

    def render_line(self, speaker: str, text: str) -> None:
        """Show a line of dialogue (opens the dialogue panel if hidden)."""
        ...

    def render_choices(self, labels: Sequence[str]) -> None:
        """Show choice options; index i of `labels` is choice i."""
        ...

    def clear_choices(self) -> None:
        """Remove any choice options currently shown."""
        ...

    def hide(self) -> None:
        """Close the dialogue panel."""
        ...


class NullPresenter:
    """Presenter that shows nothing (headless runs, servers, tests)."""

    def render_line(self, speaker: str, text: str) -> None:
        pass

    def render_choices(self, labels: Sequence[str]) -> None:
        pass

    def clear_choices(self) -> None:
        pass

    def hide(self) -> None:
        pass


class TextPresenter:
    """
    Writes dialogue to a text stream.

    Lines come out as "Speaker: text", choices as a numbered list starting
    at 1 (matching the number-key hotkeys).
    """

    def __init__(self, stream: TextIO | None = None, choice_prefix: str = "  "):
        self.stream = stream or sys.stdout
        self.choice_prefix = choice_prefix
        self.visible = False

    def render_line(self, speaker: str, text: str) -> None:
        self.visible = True
        if speaker:
            self._write(f"{speaker}: {text}")
        else:
            self._write(text)

    def render_choices(self, labels: Sequence[str]) -> None:
        for i, label in enumerate(labels, start=1):
            self._write(f"{self.choice_prefix}{i}. {label}")

    def clear_choices(self) -> None:
        pass

    def hide(self) -> None:
        if self.visible:
            self._write("")
        self.visible = False

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()
