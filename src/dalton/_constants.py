"""Shared constants used across the model, ordering, and rendering layers."""

DEFAULT_CATALOG_PATH: str = "element-table.txt"
"""Element table read at startup when no other path is configured."""

DEFAULT_PAN_STEP: float = 5.0
"""Degrees added to or removed from a view angle per pan or tilt command."""

DEFAULT_ZOOM_STEP: float = 15.0
"""Radius offset applied to every point per zoom command."""
