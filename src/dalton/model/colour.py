from __future__ import annotations

#: Colour values accepted by element tables and settings: a matplotlib
#: colour name or hex string (``"red"``, ``"#ff0000"``), or an
#: ``(r, g, b)`` tuple or list with each channel in ``[0, 1]``.
Colour = str | tuple[float, float, float] | list[float]

#: A normalised ``(r, g, b)`` triple with each channel in ``[0, 1]``.
RGB = tuple[float, float, float]


def _check_unit_channels(channels: tuple[float, float, float]) -> RGB:
    for name, val in zip("rgb", channels):
        if not 0.0 <= val <= 1.0:
            raise ValueError(f"RGB component {name} must be in [0, 1], got {val}")
    return channels


def normalise_colour(colour: Colour) -> RGB:
    """Return *colour* as a normalised ``(r, g, b)`` tuple.

    Raises:
        ValueError: If *colour* is neither a known colour string nor a
            three-channel sequence in ``[0, 1]``.
    """
    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}") from None

    if not isinstance(colour, (tuple, list)):
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    if len(colour) != 3:
        raise ValueError(f"RGB sequence must have 3 elements, got {len(colour)}")
    r, g, b = colour
    return _check_unit_channels((float(r), float(g), float(b)))


def colour_from_bytes(red: int, green: int, blue: int) -> RGB:
    """Convert 8-bit ``0``-``255`` channels to a normalised RGB tuple.

    Raises:
        ValueError: If any channel lies outside ``[0, 255]``.
    """
    for name, val in zip("rgb", (red, green, blue)):
        if not 0 <= val <= 255:
            raise ValueError(
                f"8-bit component {name} must be in [0, 255], got {val}"
            )
    return (red / 255.0, green / 255.0, blue / 255.0)
