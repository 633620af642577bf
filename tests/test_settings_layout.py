from types import SimpleNamespace

import pytest

from omni_palette.models import HotkeyModifiers, Key, KeyboardShortcut
from omni_palette.settings_layout import (
    ACTION_BUTTON_SPACING,
    EXTENSION_ACTION_SLOT_WIDTH,
    EXTENSION_STATUS_LABEL_WIDTH,
    HELP_ICON_DIAMETER,
    HELP_ICON_GAP,
    ROW_LABEL_WIDTH,
    BannerTone,
    HelpIconVisuals,
    Rect,
    SettingsTextTone,
    SettingsTheme,
    banner_colors,
    capture_shortcut,
    extension_action_area_width_for_toggle,
    map_key,
    save_bar_status,
    setting_help_icon_rect,
    setting_help_icon_visuals,
    setting_help_label_left,
    settings_text_color,
)


def rgb(n):
    return (n, n, n, 255)


@pytest.fixture
def theme():
    return SettingsTheme(
        bg=(0, 0, 0, 255),
        sidebar_bg=(0, 0, 0, 255),
        surface=rgb(1),
        surface_alt=rgb(2),
        input_bg=rgb(3),
        input_hover=rgb(4),
        border=rgb(5),
        border_soft=rgb(6),
        accent=rgb(7),
        accent_soft=rgb(8),
        text_primary=rgb(9),
        text_secondary=rgb(10),
        text_muted=rgb(11),
        text_on_accent=rgb(12),
        warning=rgb(13),
        error=rgb(14),
        success=rgb(15),
        nav_selected=rgb(16),
        info_bg=rgb(17),
        warning_bg=rgb(18),
        error_bg=rgb(19),
        primary_button_text=rgb(20),
        primary_button_bg=rgb(21),
        primary_button_border=rgb(22),
        danger_button_text=rgb(23),
        danger_button_bg=rgb(24),
        danger_button_border=rgb(25),
        shadow=rgb(26),
    )


def key_event(key, pressed=True, repeat=False, ctrl=False, shift=False, alt=False):
    return SimpleNamespace(
        key=key, pressed=pressed, repeat=repeat, ctrl=ctrl, shift=shift, alt=alt
    )


def test_rect_edges_and_center():
    rect = Rect(10.0, 20.0, 30.0, 40.0)
    assert rect.right() == 40.0
    assert rect.bottom() == 60.0
    assert rect.center() == (25.0, 40.0)


def test_setting_help_icon_sits_after_label_text_inside_label_column():
    row_rect = Rect(0.0, 0.0, ROW_LABEL_WIDTH, 30.0)
    label_width = 42.0
    group_width = label_width + HELP_ICON_GAP + HELP_ICON_DIAMETER
    expected_icon_left = (
        row_rect.left + (row_rect.width - group_width) / 2.0 + label_width + HELP_ICON_GAP
    )

    icon_rect = setting_help_icon_rect(row_rect, label_width)

    assert icon_rect.width == HELP_ICON_DIAMETER
    assert icon_rect.height == HELP_ICON_DIAMETER
    assert icon_rect.left == expected_icon_left
    assert icon_rect.right() <= row_rect.right()
    assert icon_rect.center()[1] == row_rect.center()[1]


def test_help_icon_is_clamped_inside_row_for_long_label():
    row_rect = Rect(0.0, 0.0, ROW_LABEL_WIDTH, 30.0)
    icon_rect = setting_help_icon_rect(row_rect, 400.0)
    assert setting_help_label_left(row_rect, 400.0) == 0.0
    assert icon_rect.left == ROW_LABEL_WIDTH - HELP_ICON_DIAMETER
    assert icon_rect.right() == row_rect.right()


def test_setting_help_icon_visuals_change_on_hover(theme):
    idle = setting_help_icon_visuals(theme, False)
    hovered = setting_help_icon_visuals(theme, True)

    assert idle.fill != hovered.fill
    assert hovered.fill == theme.input_hover
    assert hovered.text == theme.accent
    assert idle == HelpIconVisuals(
        fill=theme.surface_alt, stroke=theme.border, text=theme.text_muted
    )


def test_extension_action_area_reserves_a_fixed_trailing_action_slot():
    toggle_width = 40.0
    expected_width = (
        EXTENSION_STATUS_LABEL_WIDTH
        + ACTION_BUTTON_SPACING
        + toggle_width
        + ACTION_BUTTON_SPACING
        + EXTENSION_ACTION_SLOT_WIDTH
    )
    assert extension_action_area_width_for_toggle(toggle_width) == expected_width


def test_settings_text_tones_map_to_theme_tokens(theme):
    assert settings_text_color(theme, SettingsTextTone.PRIMARY) == theme.text_primary
    assert settings_text_color(theme, SettingsTextTone.SECONDARY) == theme.text_secondary
    assert settings_text_color(theme, SettingsTextTone.MUTED) == theme.text_muted
    assert settings_text_color(theme, SettingsTextTone.WARNING) == theme.warning
    assert settings_text_color(theme, SettingsTextTone.ERROR) == theme.error


def test_banner_colors_per_tone(theme):
    assert banner_colors(theme, BannerTone.INFO) == (
        theme.info_bg,
        theme.accent_soft,
        SettingsTextTone.SECONDARY,
    )
    assert banner_colors(theme, BannerTone.WARNING) == (
        theme.warning_bg,
        theme.warning,
        SettingsTextTone.WARNING,
    )
    assert banner_colors(theme, BannerTone.ERROR) == (
        theme.error_bg,
        theme.error,
        SettingsTextTone.ERROR,
    )


def test_save_bar_status(theme):
    assert save_bar_status(theme, True, True) == ("Saving settings...", theme.accent)
    assert save_bar_status(theme, True, False) == ("Unsaved changes", theme.warning)
    assert save_bar_status(theme, False, False) == ("All changes saved", theme.success)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("A", Key.KEY_A),
        ("Z", Key.KEY_Z),
        ("Num0", Key.KEY_0),
        ("Num9", Key.KEY_9),
        ("F12", Key.F12),
        ("Colon", Key.SEMICOLON),
        ("Plus", Key.EQUAL),
        ("Questionmark", Key.SLASH),
        ("OpenCurlyBracket", Key.LEFT_BRACKET),
        ("Pipe", Key.BACKSLASH),
        ("Quote", Key.APOSTROPHE),
        ("Backspace", Key.BACKSPACE),
        ("ArrowDown", Key.DOWN_ARROW),
    ],
)
def test_map_key_known_names(name, expected):
    assert map_key(name) is expected


def test_map_key_unknown_name():
    assert map_key("F20") is None


def test_capture_shortcut_takes_first_fresh_press():
    events = [
        SimpleNamespace(text="x"),
        key_event("K", pressed=False, ctrl=True),
        key_event("K", repeat=True, ctrl=True),
        key_event("F20", ctrl=True),
        key_event("K", ctrl=True, shift=True),
        key_event("J", alt=True),
    ]
    assert capture_shortcut(events) == KeyboardShortcut(
        key=Key.KEY_K, modifier=HotkeyModifiers(control=True, shift=True)
    )


def test_capture_shortcut_none_without_key_press():
    assert capture_shortcut([key_event("A", pressed=False)]) is None
    assert capture_shortcut([]) is None