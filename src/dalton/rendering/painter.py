"""Painter's algorithm drawing of ordered points.

Projects each point to the screen, then draws the circles into a
matplotlib Axes as a single PolyCollection whose polygon order is the
painting order.
"""

from __future__ import annotations

import matplotlib.patheffects as path_effects
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection

from dalton.model import PointStore, Settings, ViewState, normalise_colour
from dalton.rendering.projection import _make_unit_circle, screen_coords

# Font size (points) for scene titles rendered inside the viewport.
_TITLE_FONT_SIZE = 12.0


def _draw_points(
    ax: Axes,
    points: PointStore,
    view: ViewState,
    order: np.ndarray,
    settings: Settings,
    *,
    viewport_extent: float | None = None,
    title: str = "",
) -> None:
    """Paint *points* onto *ax* in the given back-to-front *order*.

    Clears the previous draw's artists first.  Does **not** create or
    show the figure; the caller owns the figure lifecycle.

    Points whose radius has been zoomed to zero or below are skipped.

    Args:
        ax: A matplotlib ``Axes`` to draw into.
        points: The points to draw.
        view: Current view angles (selects the screen axes).
        order: Painting order, farthest first, as returned by
            :func:`~dalton.ordering.reorder`.
        settings: Drawing settings.
        viewport_extent: If given, use this as the fixed half-extent
            for axis limits instead of fitting the projected points.
            Keeps the scene from jumping while the view changes.
        title: Optional title drawn at the top of the viewport.
    """
    # Remove previous draw's collection(s) and leftover artists.
    while ax.collections:
        ax.collections[0].remove()
    for t in ax.texts[:]:
        t.remove()

    bg_rgb = normalise_colour(settings.background)
    outline_rgb = normalise_colour(settings.outline_colour)
    unit_circle = _make_unit_circle(settings.circle_segments)

    xy = screen_coords(points.coords, view)
    radii = points.display_radii

    all_verts: list[np.ndarray] = []
    face_colours: list[tuple[float, float, float, float]] = []
    edge_colours: list[tuple[float, float, float, float]] = []
    line_widths: list[float] = []
    for k in order:
        if radii[k] <= 0.0:
            continue
        fc = (*points.colours[k], 1.0)
        all_verts.append(unit_circle * radii[k] + xy[k])
        face_colours.append(fc)
        if settings.show_outlines:
            edge_colours.append((*outline_rgb, 1.0))
            line_widths.append(settings.outline_width)
        else:
            edge_colours.append(fc)
            line_widths.append(0.0)

    if all_verts:
        pc = PolyCollection(
            all_verts,
            closed=True,
            facecolors=face_colours,
            edgecolors=edge_colours,
            linewidths=line_widths,
        )
        ax.add_collection(pc)

    ax.set_facecolor(bg_rgb)

    # ---- Axes and layout ----
    ax.set_aspect("equal")
    if viewport_extent is not None:
        pad_x = pad_y = viewport_extent * 1.15
        cx = cy = 0.0
    elif len(xy) == 0:
        pad_x = pad_y = 1.0
        cx = cy = 0.0
    else:
        margin = np.max(radii) + 1.0
        cx = (xy[:, 0].max() + xy[:, 0].min()) / 2
        cy = (xy[:, 1].max() + xy[:, 1].min()) / 2
        pad_x = (xy[:, 0].max() - xy[:, 0].min()) / 2 + margin
        pad_y = (xy[:, 1].max() - xy[:, 1].min()) / 2 + margin
    ax.set_xlim(cx - pad_x, cx + pad_x)
    # Screen y grows downward.
    ax.set_ylim(cy + pad_y, cy - pad_y)
    ax.axis("off")

    if title:
        ax.text(
            0.5, 0.97, title,
            transform=ax.transAxes,
            ha="center", va="top",
            fontsize=_TITLE_FONT_SIZE,
            path_effects=[
                path_effects.withStroke(
                    linewidth=_TITLE_FONT_SIZE * 0.25, foreground="white",
                ),
            ],
        )
