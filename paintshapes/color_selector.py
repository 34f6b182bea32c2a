"""Palette of seven colours with a single selected entry."""

from __future__ import annotations

from paintshapes.enums import ColorChoice
from paintshapes.shapes import Color

SWATCHES: dict[ColorChoice, tuple[int, int, int]] = {
    ColorChoice.RED: (255, 0, 0),
    ColorChoice.ORANGE: (255, 127, 0),
    ColorChoice.YELLOW: (255, 255, 0),
    ColorChoice.GREEN: (0, 255, 0),
    ColorChoice.BLUE: (0, 0, 255),
    ColorChoice.INDIGO: (75, 0, 130),
    ColorChoice.VIOLET: (148, 0, 211),
}

SELECTED_LABEL = "@+5square"
BUTTON_SIZE = 50


class ColorSelector:
    """A row of colour buttons; the chosen one is marked by its label."""

    def __init__(self, x: int = 0, y: int = 0, width: int = 350, height: int = 50) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.choice = ColorChoice.RED
        self.layout: dict[ColorChoice, tuple[int, int, int, int]] = {
            choice: (x + BUTTON_SIZE * offset, y, BUTTON_SIZE, BUTTON_SIZE)
            for offset, choice in enumerate(ColorChoice)
        }

    @property
    def labels(self) -> dict[ColorChoice, str]:
        """Label shown on each button: a marker on the chosen one, empty elsewhere."""
        return {
            choice: SELECTED_LABEL if choice is self.choice else ""
            for choice in ColorChoice
        }

    def select(self, choice: ColorChoice | int) -> None:
        """Make `choice` the current colour."""
        self.choice = ColorChoice(choice)

    def color(self) -> Color:
        """The current colour with components scaled to 0..1."""
        r, g, b = SWATCHES[self.choice]
        return Color(r / 255.0, g / 255.0, b / 255.0)