"""Terminal colors for log headers"""

from enum import Enum
from typing import Dict


RESET = "\033[0m"


class Color(Enum):
    """Symbolic header color. NONE leaves text uncolored."""

    NONE = "None"
    BLACK = "Black"
    BLUE = "Blue"
    CYAN = "Cyan"
    GREEN = "Green"
    GRAY = "Gray"
    MAGENTA = "Magenta"
    RED = "Red"
    WHITE = "White"
    YELLOW = "Yellow"

    def __str__(self) -> str:
        return self.value

    @property
    def escape_code(self) -> str:
        """ANSI escape sequence for this color."""
        return COLOR_CODES[self]

    @classmethod
    def from_string(cls, name: str) -> "Color":
        """
        Convert string to Color (case-insensitive).

        Raises:
            ValueError: If name is not a known color
        """
        for color in cls:
            if color.value.lower() == name.strip().lower():
                return color
        raise ValueError(f"Invalid color: {name}")


COLOR_CODES: Dict[Color, str] = {
    Color.NONE: "",
    Color.BLACK: "\033[30m",
    Color.BLUE: "\033[34m",
    Color.CYAN: "\033[36m",
    Color.GREEN: "\033[32m",
    Color.GRAY: "\033[90m",
    Color.MAGENTA: "\033[35m",
    Color.RED: "\033[31m",
    Color.WHITE: "\033[37m",
    Color.YELLOW: "\033[33m",
}


def color_text(text: str, color: Color) -> str:
    """
    Wrap text in the escape sequence for color.

    Color.NONE returns the text unchanged.
    """
    if color is Color.NONE:
        return text
    return f"{color.escape_code}{text}{RESET}"
