"""Exception hierarchy for catalog and dataset loading."""


class DaltonError(Exception):
    """Base class for errors raised by dalton."""


class CatalogLoadError(DaltonError):
    """The element catalog could not be read or parsed.

    Nothing can be rendered without a catalog, so the command-line
    front end treats this error as fatal.
    """


class DatasetLoadError(DaltonError):
    """A dataset could not be read or contained a malformed record."""


class UnknownElementError(DaltonError):
    """A dataset referenced an element name that the catalog lacks.

    Attributes:
        name: The element name that failed to resolve.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown element: {name!r}")
        self.name = name
