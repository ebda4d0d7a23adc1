from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from dalton.model.catalog import ElementCatalog
from dalton.model.colour import RGB


def _as_rows(values: object, name: str) -> np.ndarray:
    """Coerce *values* to a float array of shape ``(n, 3)``."""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (n_points, 3), got {arr.shape}")
    return arr


@dataclass(frozen=True)
class Point:
    """One rendered atom: position plus the display attributes it was given.

    Attributes:
        element: Name of the element the point was built from.
        x: Horizontal coordinate.
        y: Vertical coordinate (grows downward on screen).
        z: Depth coordinate (grows away from the front viewer).
        colour: Normalised ``(r, g, b)`` fill colour.
        radius: Current display radius, including any zoom offset.
    """

    element: str
    x: float
    y: float
    z: float
    colour: RGB
    radius: float


@dataclass
class PointStore:
    """Columnar storage for the points of one loaded dataset.

    Positions and colours never change after construction; radii move
    only through :meth:`zoom`.  An empty store (the default) is valid
    everywhere a loaded one is.

    Attributes:
        elements: Element name per point.
        coords: Cartesian coordinates, shape ``(n_points, 3)``.
        colours: Normalised RGB fill colours, shape ``(n_points, 3)``.
        radii: Display radii, shape ``(n_points,)``.

    Raises:
        ValueError: If the arrays disagree on the number of points or
            have the wrong shape.
    """

    elements: list[str] = field(default_factory=list)
    coords: np.ndarray = field(
        default_factory=lambda: np.empty((0, 3), dtype=float)
    )
    colours: np.ndarray = field(
        default_factory=lambda: np.empty((0, 3), dtype=float)
    )
    radii: np.ndarray = field(
        default_factory=lambda: np.empty(0, dtype=float)
    )

    def __post_init__(self) -> None:
        n_points = len(self.elements)
        self.coords = _as_rows(self.coords, "coords")
        self.colours = _as_rows(self.colours, "colours")
        self.radii = np.asarray(self.radii, dtype=float)
        if self.radii.ndim != 1:
            raise ValueError(
                f"radii must be one-dimensional, got shape {self.radii.shape}"
            )
        for name, arr in [
            ("coords", self.coords),
            ("colours", self.colours),
            ("radii", self.radii),
        ]:
            if len(arr) != n_points:
                raise ValueError(
                    f"elements has {n_points} points but {name} has {len(arr)}"
                )

    @classmethod
    def from_elements(
        cls,
        elements: Sequence[str],
        coords: np.ndarray | Sequence[Sequence[float]],
        catalog: ElementCatalog,
    ) -> PointStore:
        """Build a store by resolving each element name in *catalog*.

        Args:
            elements: Element name per point.
            coords: Coordinates, shape ``(n_points, 3)``.
            catalog: Source of each point's radius and colour.

        Raises:
            UnknownElementError: If any name is missing from *catalog*.
                No partial store is returned.
        """
        specs = [catalog.lookup(name) for name in elements]
        return cls(
            elements=list(elements),
            coords=coords,
            colours=np.array([spec.colour for spec in specs], dtype=float),
            radii=np.array([spec.radius for spec in specs], dtype=float),
        )

    @classmethod
    def load(cls, source: str | Path, catalog: ElementCatalog) -> PointStore:
        """Read a dataset file of ``<element> <x> <y> <z>`` records.

        Args:
            source: Path to the dataset, or its content as a string.
            catalog: Catalog used to resolve element names.

        Raises:
            DatasetLoadError: On I/O failure or a malformed record.
            UnknownElementError: If a record names an element the
                catalog lacks.

        See Also:
            :func:`dalton.construction.parser.parse_dataset`
        """
        from dalton.construction.parser import parse_dataset

        return parse_dataset(source, catalog)

    def zoom(self, delta: float) -> None:
        """Add *delta* to every point's radius.

        Radii are stored unclamped so that opposite zooms cancel
        exactly; see :attr:`display_radii` for the drawable values.
        """
        self.radii = self.radii + delta

    @property
    def display_radii(self) -> np.ndarray:
        """Radii clamped at zero, as used for drawing."""
        return np.maximum(self.radii, 0.0)

    def take(self, order: Sequence[int] | np.ndarray) -> list[Point]:
        """Return the points at the indices in *order*, in that order."""
        return [self[int(i)] for i in order]

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Point:
        x, y, z = self.coords[index]
        r, g, b = self.colours[index]
        return Point(
            element=self.elements[index],
            x=float(x),
            y=float(y),
            z=float(z),
            colour=(float(r), float(g), float(b)),
            radius=float(self.radii[index]),
        )
