from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class ViewState:
    """Camera state for one loaded dataset.

    The camera is described by two angles in degrees.  The horizontal
    angle pans about the vertical (y) axis; the vertical angle then
    tilts about the camera's horizontal axis.  ``(0, 0)`` looks at the
    front of the dataset along +z.  See
    :func:`dalton.ordering.depth.view_direction` for the exact
    convention.

    Angles accumulate without wrapping under repeated pan and tilt;
    consumers reduce them modulo 360 when evaluating trigonometry.

    Attributes:
        horizontal_angle: Pan angle in degrees.
        vertical_angle: Tilt angle in degrees.
        zoom: Net radius offset applied to the points since they were
            loaded.
    """

    horizontal_angle: float = 0.0
    vertical_angle: float = 0.0
    zoom: float = 0.0

    def __post_init__(self) -> None:
        for name in ("horizontal_angle", "vertical_angle", "zoom"):
            val = getattr(self, name)
            if not math.isfinite(val):
                raise ValueError(f"{name} must be finite, got {val}")

    def reset(self) -> None:
        """Return to the front view with no zoom offset."""
        self.horizontal_angle = 0.0
        self.vertical_angle = 0.0
        self.zoom = 0.0

    def set_angles(self, horizontal: float, vertical: float) -> ViewState:
        """Jump to an absolute viewpoint, keeping the zoom offset.

        Returns ``self`` so callers can chain.
        """
        self.horizontal_angle = float(horizontal)
        self.vertical_angle = float(vertical)
        return self

    def pan(self, step: float) -> None:
        """Rotate about the vertical axis by *step* degrees."""
        self.horizontal_angle += step

    def tilt(self, step: float) -> None:
        """Rotate about the horizontal axis by *step* degrees."""
        self.vertical_angle += step
