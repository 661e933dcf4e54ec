"""
Dialog document parser - turns raw JSON text into a DialogueDocument.

Document format:

```
{
  "variables": { "met_mira": false, "gold": 10 },
  "conversations": {
    "intro": [
      { "speaker": "Mira", "text": "Hello there.", "set": { "met_mira": true } },
      { "speaker": "Mira", "text": "Need anything?",
        "choices": [
          { "text": "Show me your wares", "goto": "shop" },
          { "text": "Goodbye", "goto": "farewell" }
        ] }
    ],
    "shop": [ { "goto": "shop_closed" } ]
  }
}
```

The parser is a pure function over text: reading the file is the caller's
business (see `parse_file` for the common case).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
from pydantic import ValidationError

from colloquy.dialogue.errors import DocumentError
from colloquy.dialogue.models import (
    Choice,
    Conversation,
    DialogueDocument,
    DialogueNode,
    Scalar,
)


SCALAR_SCHEMA: dict[str, Any] = {"type": ["boolean", "number", "string"]}

CHOICE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["text", "goto"],
    "properties": {
        "text": {"type": ["string", "null"]},
        "goto": {"type": "string"},
    },
}

NODE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "speaker": {"type": ["string", "null"]},
        "text": {"type": ["string", "null"]},
        "goto": {"type": ["string", "null"]},
        "set": {"type": "object", "additionalProperties": SCALAR_SCHEMA},
        "choices": {"type": ["array", "null"], "items": CHOICE_SCHEMA},
    },
}

DOCUMENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["conversations"],
    "properties": {
        "variables": {
            "type": ["object", "null"],
            "additionalProperties": SCALAR_SCHEMA,
        },
        "conversations": {
            "type": "object",
            "additionalProperties": {"type": "array", "items": NODE_SCHEMA},
        },
    },
}


def parse(raw: str | bytes, source: str = "") -> DialogueDocument:
    """
    Parse a dialogue document.

    Args:
        raw: Document text (bytes are decoded as UTF-8, BOM tolerated)
        source: Name used in error messages (usually the file path)

    Returns:
        The parsed document

    Raises:
        DocumentError: If the text is not valid JSON or not a valid document
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentError(f"Document is not valid UTF-8: {e.reason}", source=source) from e
    else:
        raw = raw.lstrip("\ufeff")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentError(
            f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}",
            source=source,
        ) from e

    try:
        jsonschema.validate(instance=data, schema=DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as e:
        path = "/".join(str(part) for part in e.absolute_path)
        raise DocumentError(e.message, path=path, source=source) from e

    for conversation_id in data["conversations"]:
        if not conversation_id.strip():
            raise DocumentError(
                "Conversation id must not be blank",
                path=f"conversations/{conversation_id}",
                source=source,
            )

    try:
        return _build_document(data)
    except (ValidationError, TypeError) as e:
        raise DocumentError(str(e), source=source) from e


def parse_file(path: str | Path) -> DialogueDocument:
    """Read and parse a dialogue document file."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DocumentError(f"Cannot read document: {e.strerror}", source=str(path)) from e

    return parse(raw, source=str(path))


def _build_document(data: dict[str, Any]) -> DialogueDocument:
    variables = {
        name: Scalar.of(value)
        for name, value in (data.get("variables") or {}).items()
    }

    conversations = []
    for conversation_id, node_list in data["conversations"].items():
        conversations.append(Conversation(
            id=conversation_id.strip(),
            nodes=tuple(_build_node(node_data) for node_data in node_list),
        ))

    return DialogueDocument(
        conversations=tuple(conversations),
        variables=variables,
    )


def _build_node(node_data: dict[str, Any]) -> DialogueNode:
    choices = tuple(
        Choice(text=choice_data["text"] or "", target=choice_data["goto"].strip())
        for choice_data in (node_data.get("choices") or [])
    )

    assignments = {
        name: Scalar.of(value)
        for name, value in (node_data.get("set") or {}).items()
    }

    jump = node_data.get("goto")
    if jump is not None:
        jump = jump.strip()

    return DialogueNode(
        speaker=node_data.get("speaker") or "",
        text=node_data.get("text") or "",
        choices=choices,
        assignments=assignments,
        jump=jump or None,
    )
