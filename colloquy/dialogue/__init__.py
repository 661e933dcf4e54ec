"""
Dialogue module - branching conversations for NPCs and events.

Provides:
- Dialogue document parsing (JSON)
- Conversation registry with forgiving id lookup
- Typed variable store
- Traversal engine with choices and jumps
- Presentation adapter contract
"""

from colloquy.dialogue.models import (
    Scalar,
    ScalarKind,
    Choice,
    DialogueNode,
    Conversation,
    DialogueDocument,
)
from colloquy.dialogue.errors import (
    DialogueError,
    DocumentError,
    ConversationNotFound,
    DanglingChoice,
    ConversationBusy,
    JumpLimitExceeded,
)
from colloquy.dialogue.parser import parse, parse_file
from colloquy.dialogue.registry import ConversationRegistry, normalize_id
from colloquy.dialogue.variables import VariableStore
from colloquy.dialogue.diagnostics import Diagnostics
from colloquy.dialogue.presentation import Presenter, NullPresenter, TextPresenter
from colloquy.dialogue.engine import DialogueEngine, DialogueState

__all__ = [
    # Models
    "Scalar",
    "ScalarKind",
    "Choice",
    "DialogueNode",
    "Conversation",
    "DialogueDocument",
    # Errors
    "DialogueError",
    "DocumentError",
    "ConversationNotFound",
    "DanglingChoice",
    "ConversationBusy",
    "JumpLimitExceeded",
    # Loading
    "parse",
    "parse_file",
    "ConversationRegistry",
    "normalize_id",
    "VariableStore",
    "Diagnostics",
    # Runtime
    "Presenter",
    "NullPresenter",
    "TextPresenter",
    "DialogueEngine",
    "DialogueState",
]
