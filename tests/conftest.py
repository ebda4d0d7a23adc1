"""Shared test fixtures for dalton."""

from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

from dalton.model import ElementCatalog  # noqa: E402
from dalton.viewer import Viewer  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def catalog_path():
    """Return the path to the element table fixture."""
    return FIXTURES_DIR / "element-table.txt"


@pytest.fixture
def co_path():
    """Return the path to the two-atom Carbon/Oxygen dataset."""
    return FIXTURES_DIR / "co.txt"


@pytest.fixture
def water_path():
    """Return the path to the water dataset."""
    return FIXTURES_DIR / "water.txt"


@pytest.fixture
def catalog(catalog_path):
    """The fixture element table, loaded."""
    return ElementCatalog.load(catalog_path)


@pytest.fixture
def viewer(catalog):
    """A viewer with the fixture catalog and no dataset loaded."""
    return Viewer(catalog=catalog)
