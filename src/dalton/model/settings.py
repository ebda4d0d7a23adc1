from __future__ import annotations

from dataclasses import MISSING, dataclass, fields

from dalton._constants import (
    DEFAULT_CATALOG_PATH,
    DEFAULT_PAN_STEP,
    DEFAULT_ZOOM_STEP,
)
from dalton.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({"background", "outline_colour"})
_SPECIAL = _COLOUR_FIELDS | {"figsize"}


@dataclass(frozen=True)
class Settings:
    """Viewer configuration: input location, command steps, and drawing.

    Every field has a default, so ``Settings()`` reproduces the
    classic behaviour: 5-degree pan/tilt steps, a zoom step of 15, and
    the element table read from ``element-table.txt``.

    Attributes:
        catalog_path: Element table read at startup.
        pan_step: Degrees per pan or tilt command.
        zoom_step: Radius offset per zoom command.
        background: Figure background colour.
        show_outlines: Whether circles get an outline stroke.
        outline_colour: Outline stroke colour.
        outline_width: Outline stroke width in points.
        circle_segments: Polygon segments per circle.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output.
    """

    catalog_path: str = DEFAULT_CATALOG_PATH
    pan_step: float = DEFAULT_PAN_STEP
    zoom_step: float = DEFAULT_ZOOM_STEP
    background: Colour = "white"
    show_outlines: bool = True
    outline_colour: Colour = (0.15, 0.15, 0.15)
    outline_width: float = 1.0
    circle_segments: int = 48
    figsize: tuple[float, float] = (5.0, 5.0)
    dpi: int = 150

    def __post_init__(self) -> None:
        if self.pan_step <= 0:
            raise ValueError(f"pan_step must be positive, got {self.pan_step}")
        if self.zoom_step <= 0:
            raise ValueError(
                f"zoom_step must be positive, got {self.zoom_step}"
            )
        if self.outline_width < 0:
            raise ValueError(
                f"outline_width must be non-negative, got {self.outline_width}"
            )
        if self.circle_segments < 3:
            raise ValueError(
                f"circle_segments must be >= 3, got {self.circle_segments}"
            )
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if len(self.figsize) != 2 or min(self.figsize) <= 0:
            raise ValueError(
                f"figsize must be two positive numbers, got {self.figsize}"
            )
        for name in _COLOUR_FIELDS:
            normalise_colour(getattr(self, name))

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        written as normalised ``[r, g, b]`` lists.
        """
        d: dict = {}
        for name in sorted(_COLOUR_FIELDS):
            actual = normalise_colour(getattr(self, name))
            if actual != normalise_colour(getattr(type(self), name)):
                d[name] = list(actual)
        if tuple(self.figsize) != type(self).figsize:
            d["figsize"] = list(self.figsize)
        for f in fields(self):
            if f.name in _SPECIAL:
                continue
            val = getattr(self, f.name)
            if f.default is MISSING or val != f.default:
                d[f.name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Settings:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown settings keys: {sorted(unknown)}")
        kwargs: dict = {}
        for name, val in d.items():
            if name in _SPECIAL and isinstance(val, list):
                val = tuple(val)
            kwargs[name] = val
        return cls(**kwargs)
