"""Core data model for dalton: catalog, point storage, view, and settings.

Everything is re-exported here so that ``from dalton.model import
ViewState`` works without knowing the submodule layout.
"""

from dalton.model.catalog import ElementCatalog
from dalton.model.colour import (
    RGB,
    Colour,
    colour_from_bytes,
    normalise_colour,
)
from dalton.model.element_spec import ElementSpec
from dalton.model.point_store import Point, PointStore
from dalton.model.settings import Settings
from dalton.model.view_state import ViewState

__all__ = [
    "Colour",
    "ElementCatalog",
    "ElementSpec",
    "Point",
    "PointStore",
    "RGB",
    "Settings",
    "ViewState",
    "colour_from_bytes",
    "normalise_colour",
]
