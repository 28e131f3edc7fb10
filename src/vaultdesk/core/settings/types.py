"""Enumerations stored by symbolic name in settings documents."""

from __future__ import annotations

from enum import Enum


class UiTheme(Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTOMATIC = "automatic"


class NodeOrientation(Enum):
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"
    INHERIT = "inherit"


class WhenUnlocked(Enum):
    """What to do with a vault's drive once it has been unlocked."""

    IGNORE = "ignore"
    REVEAL = "reveal"
    ASK = "ask"
