"""Command dispatch: the state machine behind each viewer button.

A :class:`Viewer` owns the catalog, the loaded points, and the view.
Each :class:`Command` runs to completion: it mutates the view (or the
points, for zoom), recomputes the painting order, and leaves the
result in :attr:`Viewer.order` for the renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from dalton.errors import DatasetLoadError, UnknownElementError
from dalton.model import ElementCatalog, Point, PointStore, Settings, ViewState
from dalton.ordering import CANONICAL_VIEWS, ViewKind, reorder

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


class Command(StrEnum):
    """User commands, named after the viewer's buttons."""

    LOAD = "Load"
    FROM_FRONT = "FromFront"
    FROM_BACK = "FromBack"
    FROM_LEFT = "FromLeft"
    FROM_RIGHT = "FromRight"
    FROM_TOP = "FromTop"
    FROM_BOTTOM = "FromBottom"
    PAN_LEFT = "PanLeft"
    PAN_RIGHT = "PanRight"
    TILT_TOP = "TiltTop"
    TILT_BOTTOM = "TiltBottom"
    ZOOM_IN = "ZoomIn"
    ZOOM_OUT = "ZoomOut"


_VIEWPOINTS: dict[Command, ViewKind] = {
    Command.FROM_FRONT: ViewKind.FRONT,
    Command.FROM_BACK: ViewKind.BACK,
    Command.FROM_LEFT: ViewKind.LEFT,
    Command.FROM_RIGHT: ViewKind.RIGHT,
    Command.FROM_TOP: ViewKind.TOP,
    Command.FROM_BOTTOM: ViewKind.BOTTOM,
}

# Sign applied to the configured step for each incremental command.
_PANS = {Command.PAN_LEFT: -1.0, Command.PAN_RIGHT: 1.0}
_TILTS = {Command.TILT_TOP: 1.0, Command.TILT_BOTTOM: -1.0}
_ZOOMS = {Command.ZOOM_IN: 1.0, Command.ZOOM_OUT: -1.0}


def parse_command(text: str) -> tuple[Command, str | None]:
    """Parse a command word such as ``"PanRight"`` or ``"Load=water.txt"``.

    Matching is case-insensitive.  Only ``Load`` takes an argument,
    separated by ``=``.

    Raises:
        ValueError: If the word is not a command, ``Load`` has no
            path, or another command is given an argument.
    """
    word, sep, arg = text.partition("=")
    lookup = {c.value.lower(): c for c in Command}
    command = lookup.get(word.strip().lower())
    if command is None:
        raise ValueError(
            f"unknown command {word!r}; expected one of "
            f"{', '.join(c.value for c in Command)}"
        )
    if command is Command.LOAD:
        if not arg:
            raise ValueError("Load needs a path, e.g. Load=molecule.txt")
        return command, arg
    if sep:
        raise ValueError(f"{command.value} takes no argument")
    return command, None


@dataclass
class Viewer:
    """Viewer session: one catalog, the current dataset, and its view.

    Attributes:
        catalog: Element catalog used to build every dataset.
        settings: Step sizes and drawing settings.
        points: The current dataset.  Empty until :meth:`load` succeeds.
        view: Current view angles and zoom offset.
        order: Current painting order, farthest first.
        source: Path of the current dataset, or ``None``.
        last_error: Message from the most recent failed load, or
            ``None`` if the last load succeeded.
    """

    catalog: ElementCatalog
    settings: Settings = field(default_factory=Settings)
    points: PointStore = field(default_factory=PointStore)
    view: ViewState = field(default_factory=ViewState)
    order: np.ndarray = field(
        default_factory=lambda: np.empty(0, dtype=np.intp)
    )
    source: Path | None = None
    last_error: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Viewer:
        """Create a viewer, reading the catalog named by *settings*.

        Raises:
            CatalogLoadError: If the catalog cannot be loaded.  Nothing
                can be drawn without it.
        """
        settings = settings if settings is not None else Settings()
        catalog = ElementCatalog.load(Path(settings.catalog_path))
        return cls(catalog=catalog, settings=settings)

    def load(self, path: str | Path) -> bool:
        """Replace the current dataset with the one at *path*.

        The dataset is parsed into a new store and swapped in only on
        success, after which the view returns to the front.  On failure
        the error is logged and recorded in :attr:`last_error`, and the
        previous dataset, view, and order are left untouched.

        Returns:
            ``True`` if the dataset was loaded.
        """
        path = Path(path)
        try:
            points = PointStore.load(path, self.catalog)
        except (DatasetLoadError, UnknownElementError) as exc:
            self.last_error = f"Reading molecule file {path} failed: {exc}"
            logger.error(self.last_error)
            return False

        self.points = points
        self.source = path
        self.last_error = None
        self.view.reset()
        self.order = reorder(self.points, self.view, ViewKind.FRONT)
        return True

    def execute(self, command: Command | str, path: str | Path | None = None) -> np.ndarray:
        """Run one command and return the new painting order.

        Args:
            command: The command to run.
            path: Dataset path; required for :attr:`Command.LOAD` and
                ignored otherwise.

        Returns:
            The painting order, also stored in :attr:`order`.

        Raises:
            ValueError: If *command* is unknown, or ``Load`` is given
                no path.
        """
        command = Command(command)
        step = self.settings.pan_step

        if command is Command.LOAD:
            if path is None:
                raise ValueError("Load needs a dataset path")
            self.load(path)
            return self.order

        if command in _VIEWPOINTS:
            kind = _VIEWPOINTS[command]
            canonical = CANONICAL_VIEWS[kind]
            self.view.set_angles(
                canonical.horizontal_angle, canonical.vertical_angle,
            )
        elif command in _PANS:
            kind = ViewKind.PAN
            self.view.pan(_PANS[command] * step)
        elif command in _TILTS:
            kind = ViewKind.TILT
            self.view.tilt(_TILTS[command] * step)
        else:
            delta = _ZOOMS[command] * self.settings.zoom_step
            self.points.zoom(delta)
            self.view.zoom += delta
            logger.debug(f"{command.value}: zoom offset now {self.view.zoom}")
            return self.order

        self.order = reorder(self.points, self.view, kind)
        logger.debug(
            f"{command.value}: angles ({self.view.horizontal_angle}, "
            f"{self.view.vertical_angle})"
        )
        return self.order

    def ordered_points(self) -> list[Point]:
        """The current points in painting order."""
        return self.points.take(self.order)

    def render_mpl(self, output: str | Path | None = None, **kwargs) -> Figure:
        """Render the current order as a static figure.

        Keyword arguments are passed to
        :func:`dalton.rendering.static.render_mpl`.
        """
        from dalton.rendering.static import render_mpl

        kwargs.setdefault("settings", self.settings)
        kwargs.setdefault("title", self.source.stem if self.source else "")
        return render_mpl(self.points, self.view, self.order, output, **kwargs)

    def render_mpl_interactive(self) -> ViewState:
        """Open an interactive window driven by this viewer.

        See :func:`dalton.rendering.interactive.render_mpl_interactive`.
        """
        from dalton.rendering.interactive import render_mpl_interactive

        return render_mpl_interactive(self)
