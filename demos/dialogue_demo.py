"""
Dialogue Demo: terminal conversation runner

Demonstrates:
- Loading a dialogue document
- Text presentation adapter
- Advancing lines and answering choices
- Event bus notifications (ended, diagnostics)
- Variable store reads after the conversation

Controls: press Enter to advance, type a number to pick a choice, q to quit.

Run: python -m demos.dialogue_demo [path/to/dialogue.json] [conversation_id]
"""

import argparse
import logging
from pathlib import Path

from colloquy import (
    DialogueConfig,
    DialogueEngine,
    DialogueInput,
    EventBus,
    TextPresenter,
)

DEFAULT_DOCUMENT = Path(__file__).parent / "data" / "dialogue.json"


def main() -> int:
    parser = argparse.ArgumentParser(description="Play a dialogue document in the terminal")
    parser.add_argument("document", nargs="?", default=str(DEFAULT_DOCUMENT))
    parser.add_argument("conversation", nargs="?", default="intro")
    parser.add_argument("--verbose", action="store_true", help="log routing decisions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    events = EventBus()
    config = DialogueConfig(document_path=args.document)
    engine = DialogueEngine(events, presenter=TextPresenter(), config=config)
    dialogue_input = DialogueInput(engine)

    engine.on_ended(lambda event: print("[conversation ended]"))

    if not engine.load_file():
        return 1
    if not dialogue_input.request_start(args.conversation):
        return 1

    while engine.is_active:
        try:
            answer = input("> ").strip()
        except EOFError:
            engine.end()
            break

        if answer.lower() == "q":
            engine.end()
        elif answer.isdigit():
            dialogue_input.request_choice(int(answer) - 1)
        else:
            dialogue_input.request_advance()

    print(f"Variables: {engine.variables.snapshot()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
