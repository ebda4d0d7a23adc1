"""Element-table and dataset file parsers.

Both formats are line oriented and whitespace delimited.  Blank lines
and lines starting with ``#`` are skipped.

Element table, one element per line::

    Carbon 77 0 0 0
    Oxygen 66 255 0 0

Dataset, one atom per line with integer coordinates::

    Carbon 0 0 10
    Oxygen 0 0 -10
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from dalton.errors import CatalogLoadError, DatasetLoadError
from dalton.model import (
    Colour,
    ElementCatalog,
    ElementSpec,
    PointStore,
    colour_from_bytes,
)

logger = logging.getLogger(__name__)


def _read_source(source: str | Path) -> str:
    """Read file content from a path or return inline string content.

    A string containing a newline is treated as content; any other
    string is treated as a path.
    """
    if isinstance(source, Path):
        return source.read_text()
    if "\n" in source:
        return source
    return Path(source).read_text()


def _describe(source: str | Path) -> str:
    """Short label for *source* in log and error messages."""
    if isinstance(source, str) and "\n" in source:
        return "<string>"
    return str(source)


def _records(text: str) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, tokens)`` for each non-blank, non-comment line."""
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield lineno, line.split()


def _parse_colour_tokens(tokens: list[str]) -> Colour:
    """Parse the colour part of an element-table record.

    Three integers are 8-bit channels, three reals are ``[0, 1]``
    fractions, and a single token is a colour name or hex string.
    """
    if len(tokens) == 3:
        try:
            channels = [int(t) for t in tokens]
        except ValueError:
            return (float(tokens[0]), float(tokens[1]), float(tokens[2]))
        return colour_from_bytes(*channels)
    if len(tokens) == 1:
        return tokens[0]
    raise ValueError(f"Cannot parse colour from tokens: {tokens}")


def parse_catalog(source: str | Path) -> ElementCatalog:
    """Parse an element table into an :class:`ElementCatalog`.

    Args:
        source: Path to the table, or the table content as a string.

    Returns:
        The populated catalog.

    Raises:
        CatalogLoadError: If the table cannot be read, a record is
            malformed, or no elements are defined.
    """
    label = _describe(source)
    try:
        text = _read_source(source)
    except (OSError, ValueError) as exc:
        raise CatalogLoadError(
            f"cannot read element table {label}: {exc}"
        ) from exc

    specs: list[ElementSpec] = []
    for lineno, parts in _records(text):
        if len(parts) < 3:
            raise CatalogLoadError(
                f"{label}, line {lineno}: expected "
                f"'<name> <radius> <colour>', got {' '.join(parts)!r}"
            )
        try:
            radius = float(parts[1])
            colour = _parse_colour_tokens(parts[2:])
            specs.append(ElementSpec(name=parts[0], radius=radius, colour=colour))
        except ValueError as exc:
            raise CatalogLoadError(f"{label}, line {lineno}: {exc}") from exc

    if not specs:
        raise CatalogLoadError(f"element table {label} defines no elements")

    catalog = ElementCatalog(specs)
    logger.info(f"Read {len(catalog)} elements from {label}")
    return catalog


def parse_dataset(source: str | Path, catalog: ElementCatalog) -> PointStore:
    """Parse a dataset into a new :class:`PointStore`.

    Every record is validated before any point is built, so a failure
    never yields a partial store.

    Args:
        source: Path to the dataset, or its content as a string.
        catalog: Catalog used to resolve each element name.

    Returns:
        A new store holding one point per record, in file order.

    Raises:
        DatasetLoadError: If the dataset cannot be read or a record is
            not ``<element> <x> <y> <z>`` with integer coordinates.
        UnknownElementError: If a record names an element absent from
            *catalog*.
    """
    label = _describe(source)
    try:
        text = _read_source(source)
    except (OSError, ValueError) as exc:
        raise DatasetLoadError(f"cannot read dataset {label}: {exc}") from exc

    elements: list[str] = []
    coords: list[list[float]] = []
    for lineno, parts in _records(text):
        if len(parts) != 4:
            raise DatasetLoadError(
                f"{label}, line {lineno}: expected '<element> <x> <y> <z>', "
                f"got {' '.join(parts)!r}"
            )
        try:
            xyz = [float(int(t)) for t in parts[1:]]
        except ValueError as exc:
            raise DatasetLoadError(
                f"{label}, line {lineno}: coordinates must be integers"
            ) from exc
        except OverflowError as exc:
            raise DatasetLoadError(
                f"{label}, line {lineno}: coordinate out of range"
            ) from exc
        elements.append(parts[0])
        coords.append(xyz)

    points = PointStore.from_elements(elements, coords, catalog)
    logger.info(f"Read {len(points)} atoms from {label}")
    return points
