"""Input handling module."""

from colloquy.input.handler import DialogueInput

__all__ = [
    "DialogueInput",
]
