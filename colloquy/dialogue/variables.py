"""
Variable store - scalar key/value state written by node assignments.

Getters are strict about tags: a value is returned only when its stored kind
matches the requested type, otherwise the caller's default comes back. A
string "true" is never a boolean and a boolean is never a number.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from colloquy.dialogue.models import Scalar, ScalarKind

ScalarLike = Union[Scalar, bool, int, float, str]


class VariableStore:
    """
    Mutable bag of Scalar values.

    Only the dialogue engine writes here; game code reads through the
    typed getters or a snapshot.
    """

    def __init__(self, initial: Optional[Mapping[str, ScalarLike]] = None):
        self._values: dict[str, Scalar] = {}
        if initial:
            self.reset(initial)

    def set(self, name: str, value: ScalarLike) -> None:
        """
        Set a variable, overwriting whatever was stored.

        Raises:
            TypeError: If the value is not a bool, number, string or Scalar
        """
        self._values[name] = Scalar.of(value)

    def get(self, name: str) -> Optional[Scalar]:
        """Get the raw tagged value, or None."""
        return self._values.get(name)

    def get_bool(self, name: str, default: bool = False) -> bool:
        scalar = self._values.get(name)
        if scalar is None or scalar.kind is not ScalarKind.BOOL:
            return default
        return scalar.value

    def get_string(self, name: str, default: str = "") -> str:
        scalar = self._values.get(name)
        if scalar is None or scalar.kind is not ScalarKind.STRING:
            return default
        return scalar.value

    def get_int(self, name: str, default: int = 0) -> int:
        """Get an integer; fractional numbers count as a type mismatch."""
        scalar = self._values.get(name)
        if scalar is None or scalar.kind is not ScalarKind.NUMBER:
            return default
        if not isinstance(scalar.value, int):
            return default
        return scalar.value

    def get_number(self, name: str, default: float = 0.0) -> int | float:
        scalar = self._values.get(name)
        if scalar is None or scalar.kind is not ScalarKind.NUMBER:
            return default
        return scalar.value

    def reset(self, initial: Mapping[str, ScalarLike]) -> None:
        """Replace every binding with `initial`."""
        values = {name: Scalar.of(value) for name, value in initial.items()}
        self._values = values

    def snapshot(self) -> dict[str, Any]:
        """Plain copy of all values, safe to hand to readers."""
        return {name: scalar.value for name, scalar in self._values.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
