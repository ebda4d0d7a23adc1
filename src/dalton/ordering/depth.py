"""View-dependent depth ordering for the painter's algorithm.

A viewing angle pair ``(h, v)`` in degrees defines the unit vector the
camera looks along.  The horizontal rotation is applied first, turning
the front axis +z about the vertical axis; the vertical rotation then
tilts that direction about the camera's horizontal axis::

    d = (-sin h cos v,  -sin v,  cos h cos v)

The projected depth of a point ``p`` is ``p . d``: larger values are
farther from the viewer.  Painting in descending depth gives correct
occlusion for opaque circles under orthographic projection.

The six axis-aligned viewpoints use exact unit vectors from
:data:`CANONICAL_VIEWS`.  Because :func:`view_direction` evaluates
multiples of 90 degrees exactly, the general formula reproduces those
vectors bit for bit at the canonical angles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from dalton.model import PointStore, ViewState


class ViewKind(StrEnum):
    """Which reordering a view command asks for.

    Attributes:
        FRONT: Looking along +z; larger z is farther.
        BACK: Looking along -z; smaller z is farther.
        LEFT: Looking along +x; larger x is farther.
        RIGHT: Looking along -x; smaller x is farther.
        TOP: Looking along +y; larger y is farther.
        BOTTOM: Looking along -y; smaller y is farther.
        PAN: Arbitrary angles reached by panning.
        TILT: Arbitrary angles reached by tilting.
    """

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    PAN = "pan"
    TILT = "tilt"


@dataclass(frozen=True)
class CanonicalView:
    """An axis-aligned viewpoint.

    Attributes:
        horizontal_angle: Pan angle in degrees that selects this view.
        vertical_angle: Tilt angle in degrees that selects this view.
        direction: Exact unit viewing direction.
    """

    horizontal_angle: float
    vertical_angle: float
    direction: tuple[float, float, float]


CANONICAL_VIEWS: dict[ViewKind, CanonicalView] = {
    ViewKind.FRONT: CanonicalView(0.0, 0.0, (0.0, 0.0, 1.0)),
    ViewKind.BACK: CanonicalView(-180.0, 0.0, (0.0, 0.0, -1.0)),
    ViewKind.LEFT: CanonicalView(-90.0, 0.0, (1.0, 0.0, 0.0)),
    ViewKind.RIGHT: CanonicalView(90.0, 0.0, (-1.0, 0.0, 0.0)),
    ViewKind.TOP: CanonicalView(0.0, -90.0, (0.0, 1.0, 0.0)),
    ViewKind.BOTTOM: CanonicalView(0.0, 90.0, (0.0, -1.0, 0.0)),
}
"""The six axis-aligned viewpoints and their precomputed directions."""

# (cos, sin) at 0, 90, 180 and 270 degrees.
_QUADRANTS = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))


def _cos_sin_degrees(angle: float) -> tuple[float, float]:
    """Return ``(cos, sin)`` of *angle* degrees after reducing modulo 360.

    Multiples of 90 degrees return exact ``0.0`` and ``+-1.0`` rather
    than the rounding residue of :func:`math.sin` on a radian value.
    """
    reduced = angle % 360.0
    if reduced == 360.0:
        # Tiny negative angles round up to a full turn.
        reduced = 0.0
    quadrant, remainder = divmod(reduced, 90.0)
    if remainder == 0.0:
        return _QUADRANTS[int(quadrant)]
    rad = math.radians(reduced)
    return math.cos(rad), math.sin(rad)


def view_direction(horizontal_angle: float, vertical_angle: float) -> np.ndarray:
    """Unit vector the camera looks along for the given angles (degrees)."""
    cos_h, sin_h = _cos_sin_degrees(horizontal_angle)
    cos_v, sin_v = _cos_sin_degrees(vertical_angle)
    return np.array([-sin_h * cos_v, -sin_v, cos_h * cos_v])


def camera_basis(horizontal_angle: float, vertical_angle: float) -> np.ndarray:
    """Return the camera axes as the rows of a 3x3 matrix.

    Rows are ``[right, down, forward]``: screen-right, screen-down, and
    the viewing direction.  At the front view this is the identity, so
    screen x is world x and screen y is world y (growing downward).
    """
    cos_h, sin_h = _cos_sin_degrees(horizontal_angle)
    forward = view_direction(horizontal_angle, vertical_angle)
    right = np.array([cos_h, 0.0, sin_h])
    down = np.cross(forward, right)
    return np.array([right, down, forward])


def projected_depth(coords: np.ndarray, direction: np.ndarray) -> np.ndarray:
    """Depth of each point along *direction* (larger = farther).

    Args:
        coords: Array of shape ``(n, 3)``.
        direction: Unit viewing direction, shape ``(3,)``.

    Returns:
        Array of shape ``(n,)``.
    """
    coords = np.asarray(coords, dtype=float).reshape(-1, 3)
    return coords @ np.asarray(direction, dtype=float)


def further(p, q, direction) -> int:
    """Compare two positions along *direction*.

    The pairwise form of the ordering: returns ``1`` if *p* is farther
    from the viewer than *q*, ``-1`` if it is nearer, and ``0`` when
    both lie in the same plane perpendicular to *direction*.
    """
    s = float(np.dot(direction, np.subtract(p, q, dtype=float)))
    return (s > 0) - (s < 0)


def direction_for(kind: ViewKind | str, view: ViewState) -> np.ndarray:
    """Viewing direction used to reorder for *kind*.

    Axis-aligned kinds use their precomputed vector and ignore *view*;
    pan and tilt derive the vector from the angles in *view*.
    """
    kind = ViewKind(kind)
    canonical = CANONICAL_VIEWS.get(kind)
    if canonical is not None:
        return np.array(canonical.direction)
    return view_direction(view.horizontal_angle, view.vertical_angle)


def reorder(
    points: PointStore,
    view: ViewState,
    kind: ViewKind | str,
) -> np.ndarray:
    """Back-to-front painting order for *points*.

    The sort is stable: points at exactly equal depth keep their input
    order, so repeated calls with an unchanged view return identical
    results and coincident points never swap.

    Args:
        points: The points to order.  Not modified.
        view: Current view angles.  Not modified.
        kind: The requested reordering.

    Returns:
        Integer array of shape ``(len(points),)``: a permutation of the
        point indices, farthest first.
    """
    direction = direction_for(kind, view)
    depth = projected_depth(points.coords, direction)
    return np.argsort(-depth, kind="stable")
