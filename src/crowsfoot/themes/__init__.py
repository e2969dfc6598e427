"""Theme definitions for ER diagrams."""

from crowsfoot.themes.dark import DARK_THEME
from crowsfoot.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
