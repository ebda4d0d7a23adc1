from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from dalton.errors import UnknownElementError
from dalton.model.element_spec import ElementSpec


class ElementCatalog:
    """Lookup table from element name to :class:`ElementSpec`.

    Built once at startup, normally via :meth:`load`, and read-only
    afterwards.  When two specs share a name the later one wins.
    """

    def __init__(self, specs: Iterable[ElementSpec] = ()) -> None:
        self._specs: dict[str, ElementSpec] = {}
        for spec in specs:
            self._specs[spec.name] = spec

    @classmethod
    def load(cls, source: str | Path) -> ElementCatalog:
        """Read a catalog from an element-table file.

        Args:
            source: Path to the table, or its content as a string.

        Raises:
            CatalogLoadError: If the table is missing, unreadable,
                malformed, or empty.

        See Also:
            :func:`dalton.construction.parser.parse_catalog`
        """
        from dalton.construction.parser import parse_catalog

        return parse_catalog(source)

    def lookup(self, name: str) -> ElementSpec:
        """Return the spec for *name*.

        Raises:
            UnknownElementError: If the catalog has no entry for *name*.
        """
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownElementError(name) from None

    @property
    def names(self) -> list[str]:
        """Element names in the order they were first defined."""
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[ElementSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"ElementCatalog({self.names!r})"
