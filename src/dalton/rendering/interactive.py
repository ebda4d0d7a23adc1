"""Interactive matplotlib viewer driven by keyboard commands."""

from __future__ import annotations

import matplotlib.pyplot as plt

from dalton.model import ViewState, normalise_colour
from dalton.rendering.painter import _draw_points
from dalton.rendering.projection import _scene_extent
from dalton.viewer import Command, Viewer

_KEY_COMMANDS: dict[str, Command] = {
    "1": Command.FROM_FRONT,
    "2": Command.FROM_BACK,
    "3": Command.FROM_LEFT,
    "4": Command.FROM_RIGHT,
    "5": Command.FROM_TOP,
    "6": Command.FROM_BOTTOM,
    "left": Command.PAN_LEFT,
    "right": Command.PAN_RIGHT,
    "up": Command.TILT_TOP,
    "down": Command.TILT_BOTTOM,
    "+": Command.ZOOM_IN,
    "=": Command.ZOOM_IN,
    "-": Command.ZOOM_OUT,
}

_HELP_TEXT = """\
1 2        Front / Back    3 4       Left / Right
5 6        Top / Bottom    Left Right  Pan
Up Down    Tilt            +  =  -   Zoom
h          Toggle help"""


def _apply_key_action(key: str, viewer: Viewer, state: dict) -> str:
    """Apply a keyboard action, mutating *viewer* and *state*.

    Returns a string indicating the required redraw kind:

    - ``"view"``: a command ran; the order or radii may have changed.
    - ``"help"``: only the help overlay was toggled.
    - ``"none"``: unrecognised key, no redraw needed.
    """
    command = _KEY_COMMANDS.get(key)
    if command is not None:
        viewer.execute(command)
        return "view"
    if key == "h":
        state["help_visible"] = not state["help_visible"]
        return "help"
    return "none"


def render_mpl_interactive(viewer: Viewer) -> ViewState:
    """Open a matplotlib window that repaints after every command.

    **Keyboard:**

    - **1**-**6** jump to the front, back, left, right, top, and
      bottom viewpoints.
    - **Left** / **Right** pan by the configured step.
    - **Up** / **Down** tilt by the configured step.
    - **+** / **=** / **-** zoom in/out.
    - **h** toggles a help overlay listing all keybindings.

    Each key press runs to completion (view update, reorder, repaint)
    before the next is handled.

    Args:
        viewer: The session to drive.  Its view and points are updated
            in place.

    Returns:
        The viewer's :class:`ViewState` when the window is closed.
    """
    settings = viewer.settings
    fig, ax = plt.subplots(1, 1, figsize=settings.figsize, dpi=settings.dpi)
    fig.set_facecolor(normalise_colour(settings.background))
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    title = viewer.source.stem if viewer.source is not None else ""
    state: dict = {
        "help_visible": False,
        "extent": _scene_extent(viewer.points),
    }

    def _redraw() -> None:
        """Repaint the current order using the fixed viewport extent."""
        _draw_points(
            ax, viewer.points, viewer.view, viewer.order, settings,
            viewport_extent=state["extent"], title=title,
        )
        if state["help_visible"]:
            ax.text(
                0.02, 0.98, _HELP_TEXT,
                transform=ax.transAxes,
                fontsize=7,
                fontfamily="monospace",
                verticalalignment="top",
                bbox=dict(
                    boxstyle="round,pad=0.5",
                    facecolor="white",
                    alpha=0.85,
                    edgecolor="grey",
                ),
                zorder=1000,
            )
        fig.canvas.draw_idle()

    def on_key_press(event):
        if event.key is None:
            return
        kind = _apply_key_action(event.key, viewer, state)
        if kind == "view":
            # Zooming changes the radii, so refit the viewport.
            state["extent"] = _scene_extent(viewer.points)
        if kind != "none":
            _redraw()

    _redraw()
    fig.canvas.mpl_connect("key_press_event", on_key_press)

    # Disconnect matplotlib's default key handler to avoid conflicts
    # (e.g. 'left' for back navigation).
    manager = fig.canvas.manager
    if manager is not None:
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            fig.canvas.mpl_disconnect(handler_id)

    plt.show()
    return viewer.view
