"""Dalton: painter's-algorithm rendering of atoms from any viewing angle.

Dalton draws a set of 3D points as coloured circles, ordered back to
front for the current view so that nearer atoms hide farther ones.

Example usage::

    from dalton import Viewer

    viewer = Viewer.from_settings()          # reads element-table.txt
    viewer.load("water.txt")
    viewer.execute("PanRight")
    viewer.render_mpl("water.png")
"""

from dalton.errors import (
    CatalogLoadError,
    DaltonError,
    DatasetLoadError,
    UnknownElementError,
)
from dalton.model import (
    Colour,
    ElementCatalog,
    ElementSpec,
    Point,
    PointStore,
    Settings,
    ViewState,
    normalise_colour,
)
from dalton.ordering import CANONICAL_VIEWS, ViewKind, reorder, view_direction
from dalton.construction import load_settings, save_settings
from dalton.rendering import render_mpl, render_mpl_interactive
from dalton.viewer import Command, Viewer, parse_command

__all__ = [
    "CANONICAL_VIEWS",
    "CatalogLoadError",
    "Colour",
    "Command",
    "DaltonError",
    "DatasetLoadError",
    "ElementCatalog",
    "ElementSpec",
    "Point",
    "PointStore",
    "Settings",
    "UnknownElementError",
    "ViewKind",
    "ViewState",
    "Viewer",
    "load_settings",
    "normalise_colour",
    "parse_command",
    "render_mpl",
    "render_mpl_interactive",
    "reorder",
    "save_settings",
    "view_direction",
]
