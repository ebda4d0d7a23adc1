"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from dalton.model import PointStore, Settings, ViewState, normalise_colour
from dalton.ordering import ViewKind, reorder
from dalton.rendering.painter import _draw_points

logger = logging.getLogger(__name__)


def render_mpl(
    points: PointStore,
    view: ViewState,
    order: np.ndarray | None = None,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    settings: Settings | None = None,
    title: str = "",
    show: bool | None = None,
) -> Figure:
    """Render ordered points as a static matplotlib figure.

    Circles are painted back-to-front in *order*, so nearer points
    cover farther ones.

    Example usage::

        points = PointStore.load("water.txt", ElementCatalog.load("element-table.txt"))
        view = ViewState().set_angles(-180, 0)
        render_mpl(points, view, reorder(points, view, ViewKind.BACK), "back.png")

    Args:
        points: The points to render.
        view: Current view angles.
        order: Painting order, farthest first.  If ``None``, it is
            computed from *view* with the general pan/tilt ordering.
        output: Optional file path to save the figure.  The format is
            inferred from the extension (e.g. ``.svg``, ``.png``).
            Ignored when *ax* is provided.
        ax: Optional matplotlib :class:`~matplotlib.axes.Axes` to draw
            into.  The caller then owns the parent figure, and
            *output* and *show* are ignored.
        settings: Drawing settings.  If ``None``, defaults are used.
        title: Optional title drawn inside the viewport.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``, ``False`` when saving to a file.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    settings = settings if settings is not None else Settings()
    if order is None:
        order = reorder(points, view, ViewKind.PAN)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_points(ax, points, view, order, settings, title=title)
        return fig

    fig, ax = plt.subplots(1, 1, figsize=settings.figsize, dpi=settings.dpi)
    fig.set_facecolor(normalise_colour(settings.background))

    _draw_points(ax, points, view, order, settings, title=title)

    fig.tight_layout()

    if output is not None:
        fig.savefig(str(output), dpi=settings.dpi, bbox_inches="tight")
        logger.info(f"Saved figure to {output}")

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
