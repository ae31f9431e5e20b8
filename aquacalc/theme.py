"""
Theme preference resolution.

The stored mode is 'light', 'dark' or 'system'. 'system' follows whatever
theme the client reports for its OS, falling back to light.
"""

from .models import ThemeMode

PALETTES = {
    "light": {
        "primary": "#1976d2",
        "secondary": "#9c27b0",
        "background": {"default": "#f5f5f5", "paper": "#ffffff"},
    },
    "dark": {
        "primary": "#90caf9",
        "secondary": "#ce93d8",
        "background": {"default": "#121212", "paper": "#1e1e1e"},
    },
}


def resolve_theme(mode, system_theme: str = "light") -> str:
    """Concrete 'light' or 'dark' theme for a stored mode."""
    mode = ThemeMode(mode)
    if mode == ThemeMode.SYSTEM:
        return "dark" if system_theme == "dark" else "light"
    return mode.value


def palette_for(mode, system_theme: str = "light") -> dict:
    return PALETTES[resolve_theme(mode, system_theme)]
