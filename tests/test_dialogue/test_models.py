import pytest
from pydantic import ValidationError

from colloquy.dialogue.models import (
    Choice,
    Conversation,
    DialogueNode,
    Scalar,
    ScalarKind,
)


@pytest.mark.parametrize("raw, kind", [
    (True, ScalarKind.BOOL),
    (False, ScalarKind.BOOL),
    (5, ScalarKind.NUMBER),
    (2.5, ScalarKind.NUMBER),
    ("hello", ScalarKind.STRING),
    ("", ScalarKind.STRING),
])
def test_scalar_of_tags_values(raw, kind):
    scalar = Scalar.of(raw)

    assert scalar.kind is kind
    assert scalar.value == raw
    assert type(scalar.value) is type(raw)


def test_bool_is_never_a_number():
    assert Scalar.of(True).kind is ScalarKind.BOOL
    assert Scalar.of(1).kind is ScalarKind.NUMBER


@pytest.mark.parametrize("raw", [None, [1, 2], {"a": 1}, object()])
def test_scalar_of_rejects_unsupported_shapes(raw):
    with pytest.raises(TypeError):
        Scalar.of(raw)


def test_scalar_of_passes_scalars_through():
    scalar = Scalar.of(3)
    assert Scalar.of(scalar) is scalar


def test_scalar_tag_must_match_value():
    with pytest.raises(ValidationError):
        Scalar(kind=ScalarKind.BOOL, value=1)

    with pytest.raises(ValidationError):
        Scalar(kind=ScalarKind.STRING, value=True)


def test_scalar_str():
    assert str(Scalar.of(True)) == "true"
    assert str(Scalar.of(7)) == "7"
    assert str(Scalar.of("gold")) == "gold"


def test_node_defaults():
    node = DialogueNode()

    assert node.speaker == ""
    assert node.text == ""
    assert node.choices == ()
    assert node.assignments == {}
    assert node.jump is None
    assert not node.has_choices
    assert not node.has_jump


def test_node_flags():
    node = DialogueNode(
        text="Pick one",
        choices=(Choice(text="A", target="a"),),
        jump="elsewhere",
    )

    assert node.has_choices
    assert node.has_jump


def test_models_are_frozen():
    node = DialogueNode(text="Hi")

    with pytest.raises(ValidationError):
        node.text = "Bye"


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        DialogueNode(text="Hi", portrait="mira.png")


def test_conversation_length():
    conversation = Conversation(id="intro", nodes=(DialogueNode(), DialogueNode()))

    assert len(conversation) == 2
