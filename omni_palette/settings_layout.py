"""Layout arithmetic, theme colour lookup and shortcut capture for the settings window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from omni_palette.models import HotkeyModifiers, Key, KeyboardShortcut

SETTINGS_WIDTH = 1180.0
SETTINGS_HEIGHT = 840.0
SIDEBAR_WIDTH = 220.0
ROW_LABEL_WIDTH = 148.0
SETTING_ROW_HEIGHT = 30.0
HELP_ICON_DIAMETER = 15.0
HELP_ICON_GAP = 6.0
RADIO_OPTION_SPACING = 14.0
TEXT_INPUT_WIDTH = 480.0
CATALOG_ROW_HEIGHT = 76.0
CATALOG_MIN_VISIBLE_ROWS = 3.0
CATALOG_MIN_HEIGHT = CATALOG_ROW_HEIGHT * CATALOG_MIN_VISIBLE_ROWS
CATALOG_MAX_HEIGHT = 300.0
ACTION_BUTTON_SPACING = 12.0
EXTENSION_SOURCE_ROW_SPACING = 12.0
EXTENSION_STATUS_LABEL_WIDTH = 66.0
EXTENSION_ACTION_SLOT_WIDTH = 188.0

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.left + self.width

    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.top + self.height

    def center(self) -> tuple[float, float]:
        """Centre point as ``(x, y)``."""
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)


@dataclass(frozen=True)
class SettingsTheme:
    """Colours used by the settings window."""

    bg: Color
    sidebar_bg: Color
    surface: Color
    surface_alt: Color
    input_bg: Color
    input_hover: Color
    border: Color
    border_soft: Color
    accent: Color
    accent_soft: Color
    text_primary: Color
    text_secondary: Color
    text_muted: Color
    text_on_accent: Color
    warning: Color
    error: Color
    success: Color
    nav_selected: Color
    info_bg: Color
    warning_bg: Color
    error_bg: Color
    primary_button_text: Color
    primary_button_bg: Color
    primary_button_border: Color
    danger_button_text: Color
    danger_button_bg: Color
    danger_button_border: Color
    shadow: Color


class SettingsTextTone(Enum):
    """Emphasis levels for settings text."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    MUTED = "muted"
    WARNING = "warning"
    ERROR = "error"


class BannerTone(Enum):
    """Kinds of inline banner."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class HelpIconVisuals:
    """Colours of the small help icon next to a setting label."""

    fill: Color
    stroke: Color
    text: Color


def setting_help_label_left(row_rect: Rect, label_width: float) -> float:
    """Left edge of the label so that label and icon are centred in the row."""
    group_width = label_width + HELP_ICON_GAP + HELP_ICON_DIAMETER
    return row_rect.left + max((row_rect.width - group_width) / 2.0, 0.0)


def setting_help_icon_rect(row_rect: Rect, label_width: float) -> Rect:
    """Rectangle of the help icon, right after the label and inside the row."""
    left = min(
        setting_help_label_left(row_rect, label_width) + label_width + HELP_ICON_GAP,
        row_rect.right() - HELP_ICON_DIAMETER,
    )
    _, center_y = row_rect.center()
    return Rect(
        left=left,
        top=center_y - HELP_ICON_DIAMETER / 2.0,
        width=HELP_ICON_DIAMETER,
        height=HELP_ICON_DIAMETER,
    )


def setting_help_icon_visuals(theme: SettingsTheme, hovered: bool) -> HelpIconVisuals:
    """Help icon colours, highlighted while hovered."""
    if hovered:
        return HelpIconVisuals(
            fill=theme.input_hover, stroke=theme.accent, text=theme.accent
        )
    return HelpIconVisuals(
        fill=theme.surface_alt, stroke=theme.border, text=theme.text_muted
    )


def extension_action_area_width_for_toggle(toggle_width: float) -> float:
    """Width of the status label, toggle and action slot of an extension row."""
    return (
        EXTENSION_STATUS_LABEL_WIDTH
        + toggle_width
        + EXTENSION_ACTION_SLOT_WIDTH
        + ACTION_BUTTON_SPACING * 2.0
    )


def settings_text_color(theme: SettingsTheme, tone: SettingsTextTone) -> Color:
    """Theme colour for a text tone."""
    return {
        SettingsTextTone.PRIMARY: theme.text_primary,
        SettingsTextTone.SECONDARY: theme.text_secondary,
        SettingsTextTone.MUTED: theme.text_muted,
        SettingsTextTone.WARNING: theme.warning,
        SettingsTextTone.ERROR: theme.error,
    }[tone]


def banner_colors(
    theme: SettingsTheme, tone: BannerTone
) -> tuple[Color, Color, SettingsTextTone]:
    """Fill colour, border colour and text tone of a banner."""
    if tone is BannerTone.INFO:
        return theme.info_bg, theme.accent_soft, SettingsTextTone.SECONDARY
    if tone is BannerTone.WARNING:
        return theme.warning_bg, theme.warning, SettingsTextTone.WARNING
    return theme.error_bg, theme.error, SettingsTextTone.ERROR


def save_bar_status(theme: SettingsTheme, dirty: bool, saving: bool) -> tuple[str, Color]:
    """Badge text and colour of the save bar."""
    if saving:
        return "Saving settings...", theme.accent
    if dirty:
        return "Unsaved changes", theme.warning
    return "All changes saved", theme.success


_LETTERS = {chr(code): Key[f"KEY_{chr(code)}"] for code in range(ord("A"), ord("Z") + 1)}
_DIGITS = {f"Num{digit}": Key[f"KEY_{digit}"] for digit in range(10)}
_FUNCTION_KEYS = {f"F{number}": Key[f"F{number}"] for number in range(1, 13)}
_NAMED_KEYS = {
    "Semicolon": Key.SEMICOLON,
    "Colon": Key.SEMICOLON,
    "Equals": Key.EQUAL,
    "Plus": Key.EQUAL,
    "Comma": Key.COMMA,
    "Minus": Key.MINUS,
    "Period": Key.PERIOD,
    "Slash": Key.SLASH,
    "Questionmark": Key.SLASH,
    "Backtick": Key.GRAVE,
    "OpenBracket": Key.LEFT_BRACKET,
    "OpenCurlyBracket": Key.LEFT_BRACKET,
    "Backslash": Key.BACKSLASH,
    "Pipe": Key.BACKSLASH,
    "CloseBracket": Key.RIGHT_BRACKET,
    "CloseCurlyBracket": Key.RIGHT_BRACKET,
    "Quote": Key.APOSTROPHE,
    "Enter": Key.ENTER,
    "Space": Key.SPACE,
    "Tab": Key.TAB,
    "Escape": Key.ESCAPE,
    "Delete": Key.DELETE,
    "Backspace": Key.BACKSPACE,
    "Home": Key.HOME,
    "End": Key.END,
    "PageUp": Key.PAGE_UP,
    "PageDown": Key.PAGE_DOWN,
    "Insert": Key.INSERT,
    "ArrowLeft": Key.LEFT_ARROW,
    "ArrowRight": Key.RIGHT_ARROW,
    "ArrowUp": Key.UP_ARROW,
    "ArrowDown": Key.DOWN_ARROW,
}
_KEY_MAP: dict[str, Key] = {**_LETTERS, **_DIGITS, **_FUNCTION_KEYS, **_NAMED_KEYS}


def map_key(name: str) -> Key | None:
    """Shortcut key for a UI key name such as ``"A"``, ``"Num1"`` or ``"ArrowUp"``."""
    return _KEY_MAP.get(name)


def capture_shortcut(events: Iterable[Any]) -> KeyboardShortcut | None:
    """First shortcut formed by a fresh key press among the input events.

    Each event exposes ``key`` (a key name), ``pressed``, ``repeat`` and the
    modifier flags ``ctrl``, ``shift`` and ``alt``; events without a ``key``
    are ignored. The Windows key is never recorded.
    """
    for event in events:
        name = getattr(event, "key", None)
        if name is None:
            continue
        if not getattr(event, "pressed", False) or getattr(event, "repeat", False):
            continue
        key = map_key(name)
        if key is None:
            continue
        return KeyboardShortcut(
            key=key,
            modifier=HotkeyModifiers(
                control=bool(getattr(event, "ctrl", False)),
                shift=bool(getattr(event, "shift", False)),
                alt=bool(getattr(event, "alt", False)),
                win=False,
            ),
        )
    return None