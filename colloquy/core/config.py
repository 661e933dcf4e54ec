"""
Runtime configuration for the dialogue engine.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class RestartPolicy(Enum):
    """What `start` does while another conversation is running."""
    OVERRIDE = "override"  # replace the running conversation
    REJECT = "reject"      # keep the running conversation, report ConversationBusy


class DialogueConfig:
    """Configuration for the dialogue engine."""

    def __init__(
        self,
        document_path: str | Path = "dialogue/dialogue.json",
        max_jump_hops: int = 64,
        restart_policy: RestartPolicy | str = RestartPolicy.OVERRIDE,
        diagnostics_history: int = 100,
    ):
        if max_jump_hops < 1:
            raise ValueError(f"max_jump_hops must be positive, got {max_jump_hops}")
        if diagnostics_history < 0:
            raise ValueError(
                f"diagnostics_history must not be negative, got {diagnostics_history}"
            )

        self.document_path = Path(document_path)
        self.max_jump_hops = max_jump_hops
        self.restart_policy = RestartPolicy(restart_policy)
        self.diagnostics_history = diagnostics_history
