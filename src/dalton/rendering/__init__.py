"""Rendering: back-to-front matplotlib output (static and interactive)."""

from dalton.rendering.interactive import render_mpl_interactive
from dalton.rendering.projection import screen_coords
from dalton.rendering.static import render_mpl

__all__ = [
    "render_mpl",
    "render_mpl_interactive",
    "screen_coords",
]
