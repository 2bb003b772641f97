"""
DeskCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "DeskCalc Professional Calculator"
VERSION = "1.0.0"

# Engine limits
MAX_INPUT_LENGTH = 15        # characters in the operand being typed
MAX_MAGNITUDE = 1e15         # hard domain boundary for every number
ROUNDING_FACTOR = 1e8        # results rounded to 8 decimal places
MAX_HISTORY_ITEMS = 10

# Display formatting (exponential outside this window)
EXP_DISPLAY_LOW = 1e-6
EXP_DISPLAY_HIGH = 1e9
EXP_DIGITS = 6

# Transient error message lifetime (GUI only)
ERROR_DISPLAY_MS = 2000

# Window Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 600
DISPLAY_FONT = ("Consolas", 28, "bold")
HISTORY_FONT = ("Consolas", 12)
BUTTON_FONT = ("Segoe UI", 13)
LABEL_FONT = ("Segoe UI", 10)

# ── Palettes ───────────────────────────────────────────────────────────────────

THEME_DARK = {
    "bg":           "#1E2530",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # LCD green-on-dark
    "subtext":      "#4E6070",
    "btn_bg":       "#283040",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "function_fg":  "#5E8FC8",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "danger":       "#E55A4E",
    "accent":       "#4DB888",
}

THEME_LIGHT = {
    "bg":           "#DDE6ED",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",
    "subtext":      "#6E8090",
    "btn_bg":       "#E8EEF4",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "function_fg":  "#2C5F8A",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "danger":       "#B03A2E",
    "accent":       "#2E8B57",
}

THEME_HIGH_CONTRAST = {
    "bg":           "#000000",
    "display_bg":   "#000000",
    "display_fg":   "#FFFF00",
    "subtext":      "#FFFFFF",
    "btn_bg":       "#000000",
    "btn_fg":       "#FFFFFF",
    "operator_fg":  "#00FFFF",
    "function_fg":  "#FF00FF",
    "equals_bg":    "#FFFF00",
    "equals_fg":    "#000000",
    "danger":       "#FF0000",
    "accent":       "#FFFF00",
}

THEMES = {
    "dark": THEME_DARK,
    "light": THEME_LIGHT,
    "high-contrast": THEME_HIGH_CONTRAST,
}
THEME_ORDER = ["dark", "light", "high-contrast"]
DEFAULT_THEME = "dark"


def get_theme(name: str) -> dict:
    """Return the colour palette for a theme name (dark if unknown)."""
    return THEMES.get(name, THEMES[DEFAULT_THEME])


def next_theme(name: str) -> str:
    """Cycle dark -> light -> high-contrast -> dark."""
    if name not in THEME_ORDER:
        return DEFAULT_THEME
    return THEME_ORDER[(THEME_ORDER.index(name) + 1) % len(THEME_ORDER)]


# Settings persistence (theme preference)
SETTINGS_FILE = os.path.join(os.path.dirname(__file__), "settings.json")

# Graph settings
GRAPH_FIGSIZE = (4.0, 2.6)
GRAPH_DPI = 90
GRAPH_RANGE = (-360.0, 360.0)   # degrees
GRAPH_POINTS = 241

# Web API settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
