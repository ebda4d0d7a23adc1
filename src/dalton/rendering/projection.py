"""Projection helpers and viewport sizing."""

from __future__ import annotations

import numpy as np

from dalton.model import PointStore, ViewState
from dalton.ordering import camera_basis

# Default unit circle for point rendering (closed polygon).
_N_CIRCLE = 48
_UNIT_CIRCLE = np.column_stack([
    np.cos(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
    np.sin(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
])


def _make_unit_circle(n: int) -> np.ndarray:
    """Build a unit circle polygon with *n* segments."""
    if n == _N_CIRCLE:
        return _UNIT_CIRCLE
    return np.column_stack([
        np.cos(np.linspace(0, 2 * np.pi, n + 1)),
        np.sin(np.linspace(0, 2 * np.pi, n + 1)),
    ])


def screen_coords(coords: np.ndarray, view: ViewState) -> np.ndarray:
    """Orthographic projection of world coordinates onto the screen.

    Drops the depth axis of the camera basis returned by
    :func:`~dalton.ordering.camera_basis`.  Screen y grows downward, so
    at the front view the result is simply the ``(x, y)`` columns.

    Args:
        coords: Array of shape ``(n, 3)``.
        view: Current view angles.

    Returns:
        Array of shape ``(n, 2)``.
    """
    basis = camera_basis(view.horizontal_angle, view.vertical_angle)
    coords = np.asarray(coords, dtype=float).reshape(-1, 3)
    return coords @ basis[:2].T


def _scene_extent(points: PointStore) -> float:
    """Rotation-invariant viewport half-extent for *points*.

    Views rotate about the world origin, so the largest distance from
    the origin plus the largest drawn radius bounds every projection.
    """
    if len(points) == 0:
        return 1.0
    dists = np.linalg.norm(points.coords, axis=1)
    return float(np.max(dists + points.display_radii)) or 1.0
