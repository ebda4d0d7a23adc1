"""Depth ordering: view vectors, projected depth, and painting order."""

from dalton.ordering.depth import (
    CANONICAL_VIEWS,
    CanonicalView,
    ViewKind,
    camera_basis,
    direction_for,
    further,
    projected_depth,
    reorder,
    view_direction,
)

__all__ = [
    "CANONICAL_VIEWS",
    "CanonicalView",
    "ViewKind",
    "camera_basis",
    "direction_for",
    "further",
    "projected_depth",
    "reorder",
    "view_direction",
]
