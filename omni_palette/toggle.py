"""Geometry and state of the pill-shaped toggle switch."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH_FACTOR = 1.85
HEIGHT_FACTOR = 0.92
TRACK_EXPAND = 1.0
KNOB_RADIUS_FACTOR = 0.66


@dataclass(frozen=True)
class ToggleGeometry:
    """Where the track and the knob of a toggle are drawn."""

    left: float
    top: float
    width: float
    height: float
    radius: float
    knob_x: float
    knob_y: float
    knob_radius: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


def toggle_size(interact_height: float) -> tuple[float, float]:
    """Size a toggle takes for a given interaction height, as ``(width, height)``."""
    return interact_height * WIDTH_FACTOR, interact_height * HEIGHT_FACTOR


def toggle_geometry(
    left: float, top: float, width: float, height: float, how_on: float
) -> ToggleGeometry:
    """Lay out the track around an allocated rect and place the knob.

    ``how_on`` runs from 0.0 (off, knob at the left) to 1.0 (on, knob at the right).
    """
    track_left = left - TRACK_EXPAND
    track_top = top - TRACK_EXPAND
    track_width = width + 2 * TRACK_EXPAND
    track_height = height + 2 * TRACK_EXPAND
    radius = 0.5 * track_height
    start = track_left + radius
    end = track_left + track_width - radius
    knob_x = start + (end - start) * how_on
    knob_y = track_top + track_height / 2.0
    return ToggleGeometry(
        left=track_left,
        top=track_top,
        width=track_width,
        height=track_height,
        radius=radius,
        knob_x=knob_x,
        knob_y=knob_y,
        knob_radius=KNOB_RADIUS_FACTOR * radius,
    )


def flip(on: bool) -> bool:
    """State after a click."""
    return not on