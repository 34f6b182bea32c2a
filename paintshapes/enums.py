"""Enumerations shared by the drawing tools, palette and toolbar."""

from enum import Enum


class Tool(Enum):
    """Drawing tool chosen on the toolbar."""

    PENCIL = 0
    ERASER = 1
    CIRCLE = 2
    TRIANGLE = 3
    RECTANGLE = 4
    POLYGON = 5
    SELECT = 6


class ColorChoice(Enum):
    """Palette entry chosen in the colour selector."""

    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    INDIGO = 5
    VIOLET = 6


class Action(Enum):
    """One-shot toolbar action."""

    NONE = 0
    CLEAR = 1
    UNDO = 2