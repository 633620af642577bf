"""Command palette selection, capping and label highlighting logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

PALETTE_WIDTH = 780.0
MAX_FILTERED_COMMANDS = 18
MAX_VISIBLE_COMMAND_ROWS = 10
ROW_HEIGHT = 38.0
SETTINGS_DIVIDER_HEIGHT = 13.0
FIXED_ACTION_ROW_HEIGHT = 30.0
FAVORITE_ICON = "\u2665"


@dataclass(frozen=True)
class MatchRange:
    """A half-open span ``[start, end)`` of a label that matched the query."""

    start: int
    end: int


@dataclass
class FilteredCommand:
    """One row of filter output, pointing back into the full command list."""

    command_index: int
    score: int = 0
    label_matches: list[MatchRange] = field(default_factory=list)
    is_prefix: bool = False
    span: int = 0


class FixedPaletteAction(Enum):
    """Rows that always follow the command results."""

    REFRESH_EXTENSIONS = "fixed_refresh_extensions"
    OPEN_SETTINGS = "fixed_open_settings"

    def label(self) -> str:
        """Text shown on the row."""
        if self is FixedPaletteAction.REFRESH_EXTENSIONS:
            return "Refresh extensions"
        return "Open settings for Omni Palette"

    def id(self) -> str:
        """Stable identifier of the row."""
        return self.value


FIXED_PALETTE_ACTIONS: tuple[FixedPaletteAction, ...] = (
    FixedPaletteAction.REFRESH_EXTENSIONS,
    FixedPaletteAction.OPEN_SETTINGS,
)


def cap_filtered_commands(commands: Iterable[FilteredCommand]) -> list[FilteredCommand]:
    """Keep at most ``MAX_FILTERED_COMMANDS`` rows, in order."""
    return list(commands)[:MAX_FILTERED_COMMANDS]


def wrapped_selection_index(current: int, visible_count: int, delta: int) -> int:
    """Move the selection by ``delta`` rows, wrapping around; 0 when nothing is shown."""
    if visible_count <= 0:
        return 0
    return (current + delta) % visible_count


def fixed_action_for_index(
    selected_index: int, visible_command_count: int
) -> FixedPaletteAction | None:
    """Return the fixed action at ``selected_index``, or None for a command row."""
    fixed_index = selected_index - visible_command_count
    if 0 <= fixed_index < len(FIXED_PALETTE_ACTIONS):
        return FIXED_PALETTE_ACTIONS[fixed_index]
    return None


def highlight_segments(
    label: str, ranges: Sequence[MatchRange]
) -> list[tuple[str, bool]]:
    """Split ``label`` into ``(text, highlighted)`` pieces; invalid ranges are ignored."""
    segments: list[tuple[str, bool]] = []
    cursor = 0
    length = len(label)
    for match in ranges:
        if match.start > length or match.end > length or match.start >= match.end:
            continue
        if match.start < 0:
            continue
        if cursor < match.start:
            segments.append((label[cursor:match.start], False))
        segments.append((label[match.start:match.end], True))
        cursor = match.end
    if cursor < length:
        segments.append((label[cursor:], False))
    return segments