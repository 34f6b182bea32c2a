"""Vertical toolbar choosing the drawing tool or triggering an action."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from paintshapes.enums import Action, Tool

BUTTON_SIZE = 50
COLLAPSED_HEIGHT = 50
EXPANDED_HEIGHT = 500


class ToolbarButton(Enum):
    """Buttons on the toolbar, top to bottom, valued by their icon name."""

    PENCIL = "pencil"
    ERASER = "eraser"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    CLEAR = "clear"
    UNDO = "undo"
    SELECT = "mouse"

    @property
    def image(self) -> str:
        """Path of the icon shown on the button."""
        return f"./assets/{self.value}.png"


_BUTTON_TOOLS: dict[ToolbarButton, Tool] = {
    ToolbarButton.PENCIL: Tool.PENCIL,
    ToolbarButton.ERASER: Tool.ERASER,
    ToolbarButton.CIRCLE: Tool.CIRCLE,
    ToolbarButton.TRIANGLE: Tool.TRIANGLE,
    ToolbarButton.RECTANGLE: Tool.RECTANGLE,
    ToolbarButton.POLYGON: Tool.POLYGON,
}

_BUTTON_ACTIONS: dict[ToolbarButton, Action] = {
    ToolbarButton.CLEAR: Action.CLEAR,
    ToolbarButton.UNDO: Action.UNDO,
}

ChangeHandler = Callable[["Toolbar"], None]


class Toolbar:
    """Holds the current tool and the action of the latest click."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int = 50,
        height: int = 400,
        on_change: ChangeHandler | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.on_change = on_change
        self.tool = Tool.PENCIL
        self.action = Action.NONE
        self.collapsed = False
        self.layout: dict[ToolbarButton, tuple[int, int, int, int]] = {
            button: (x, y + BUTTON_SIZE * offset, BUTTON_SIZE, BUTTON_SIZE)
            for offset, button in enumerate(ToolbarButton)
        }

    @property
    def highlighted(self) -> ToolbarButton | None:
        """The button drawn as selected, if the current tool has one."""
        for button, tool in _BUTTON_TOOLS.items():
            if tool is self.tool:
                return button
        return None

    def click(self, button: ToolbarButton | str) -> None:
        """Handle a press of `button` and notify the change handler."""
        button = ToolbarButton(button)
        self.action = Action.NONE

        if button in _BUTTON_TOOLS:
            self.tool = _BUTTON_TOOLS[button]
        elif button in _BUTTON_ACTIONS:
            self.action = _BUTTON_ACTIONS[button]
        else:
            self.collapsed = not self.collapsed
            self.height = COLLAPSED_HEIGHT if self.collapsed else EXPANDED_HEIGHT
            self.tool = Tool.SELECT

        if self.on_change is not None:
            self.on_change(self)