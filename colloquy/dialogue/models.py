"""
Dialogue data models - conversations, nodes, choices and scalar values.

Models are immutable data containers built once at load time by the parser.
All traversal logic lives in the engine. Pydantic gives us:
- Validation at construction (bad shapes fail at load, not mid-conversation)
- Frozen instances that can be shared between runs safely
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)


class DialogueModel(BaseModel):
    """
    Base class for dialogue data.

    IMPORTANT: instances are frozen. Build new ones instead of mutating.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )


class ScalarKind(Enum):
    """Tag of a Scalar value."""
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"


class Scalar(DialogueModel):
    """
    Tagged variable value: a boolean, a number or a string.

    Usage:
        Scalar.of(True)      # kind=BOOL
        Scalar.of(5)         # kind=NUMBER
        Scalar.of("Mira")    # kind=STRING
    """
    kind: ScalarKind
    value: Union[StrictBool, StrictInt, StrictFloat, StrictStr]

    @model_validator(mode="after")
    def _check_tag(self) -> Scalar:
        if _kind_of(self.value) is not self.kind:
            raise ValueError(
                f"{type(self.value).__name__} value cannot be tagged {self.kind.value}"
            )
        return self

    @classmethod
    def of(cls, raw: Any) -> Scalar:
        """Build a Scalar from a plain Python value, or pass a Scalar through."""
        if isinstance(raw, Scalar):
            return raw
        kind = _kind_of(raw)
        if kind is None:
            raise TypeError(
                f"Unsupported variable value {raw!r} ({type(raw).__name__}); "
                f"expected bool, number or string"
            )
        return cls(kind=kind, value=raw)

    def __str__(self) -> str:
        if self.kind is ScalarKind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)


def _kind_of(raw: Any) -> Optional[ScalarKind]:
    # bool is a subclass of int, test it first
    if isinstance(raw, bool):
        return ScalarKind.BOOL
    if isinstance(raw, (int, float)):
        return ScalarKind.NUMBER
    if isinstance(raw, str):
        return ScalarKind.STRING
    return None


class Choice(DialogueModel):
    """A labeled option routing to a target conversation."""
    text: str
    target: str


class DialogueNode(DialogueModel):
    """
    One step of a conversation.

    Attributes:
        speaker: Name shown above the line
        text: The line itself
        choices: Options offered after the line (empty = no decision)
        assignments: Variables written when the node is entered
        jump: Conversation to switch to silently instead of showing this node
    """
    speaker: str = ""
    text: str = ""
    choices: tuple[Choice, ...] = ()
    assignments: dict[str, Scalar] = Field(default_factory=dict)
    jump: Optional[str] = None

    @property
    def has_choices(self) -> bool:
        return len(self.choices) > 0

    @property
    def has_jump(self) -> bool:
        return bool(self.jump)


class Conversation(DialogueModel):
    """A named, ordered sequence of nodes."""
    id: str
    nodes: tuple[DialogueNode, ...] = ()

    def __len__(self) -> int:
        return len(self.nodes)


class DialogueDocument(DialogueModel):
    """Everything a dialogue file defines."""
    conversations: tuple[Conversation, ...] = ()
    variables: dict[str, Scalar] = Field(default_factory=dict)
