"""
Input action definitions.

Actions abstract raw input (keys) into semantic dialogue intents.
The input adapter maps keys to actions, never the engine itself. This enables:
- Key rebinding
- Keeping the dialogue engine free of any windowing library

Usage:
    bindings = DEFAULT_KEY_BINDINGS.copy()
    bindings[Action.INTERACT] = [pygame.K_e]
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    """
    Semantic input actions understood by the dialogue input adapter.
    """

    # Talking
    INTERACT = auto()
    CONFIRM = auto()

    # Choice menu navigation
    MENU_UP = auto()
    MENU_DOWN = auto()

    # Direct choice hotkeys (first nine choices)
    CHOICE_1 = auto()
    CHOICE_2 = auto()
    CHOICE_3 = auto()
    CHOICE_4 = auto()
    CHOICE_5 = auto()
    CHOICE_6 = auto()
    CHOICE_7 = auto()
    CHOICE_8 = auto()
    CHOICE_9 = auto()


CHOICE_ACTIONS: tuple[Action, ...] = (
    Action.CHOICE_1,
    Action.CHOICE_2,
    Action.CHOICE_3,
    Action.CHOICE_4,
    Action.CHOICE_5,
    Action.CHOICE_6,
    Action.CHOICE_7,
    Action.CHOICE_8,
    Action.CHOICE_9,
)


DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.INTERACT: [pygame.K_SPACE],
    Action.CONFIRM: [pygame.K_RETURN, pygame.K_z],
    Action.MENU_UP: [pygame.K_UP, pygame.K_w],
    Action.MENU_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.CHOICE_1: [pygame.K_1, pygame.K_KP1],
    Action.CHOICE_2: [pygame.K_2, pygame.K_KP2],
    Action.CHOICE_3: [pygame.K_3, pygame.K_KP3],
    Action.CHOICE_4: [pygame.K_4, pygame.K_KP4],
    Action.CHOICE_5: [pygame.K_5, pygame.K_KP5],
    Action.CHOICE_6: [pygame.K_6, pygame.K_KP6],
    Action.CHOICE_7: [pygame.K_7, pygame.K_KP7],
    Action.CHOICE_8: [pygame.K_8, pygame.K_KP8],
    Action.CHOICE_9: [pygame.K_9, pygame.K_KP9],
}
