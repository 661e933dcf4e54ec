import pytest
from pathlib import Path
from colloquy.core.config import DialogueConfig, RestartPolicy


def test_defaults():
    config = DialogueConfig()

    assert config.document_path == Path("dialogue/dialogue.json")
    assert config.max_jump_hops == 64
    assert config.restart_policy is RestartPolicy.OVERRIDE
    assert config.diagnostics_history == 100


def test_restart_policy_from_string():
    config = DialogueConfig(restart_policy="reject")

    assert config.restart_policy is RestartPolicy.REJECT


def test_unknown_restart_policy_rejected():
    with pytest.raises(ValueError):
        DialogueConfig(restart_policy="sometimes")


@pytest.mark.parametrize("hops", [0, -1])
def test_max_jump_hops_must_be_positive(hops):
    with pytest.raises(ValueError):
        DialogueConfig(max_jump_hops=hops)


def test_negative_history_rejected():
    with pytest.raises(ValueError):
        DialogueConfig(diagnostics_history=-5)
