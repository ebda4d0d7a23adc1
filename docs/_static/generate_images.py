"""Generate static images for the documentation."""

from pathlib import Path

import numpy as np

from dalton import (
    Command, ElementCatalog, ElementSpec, PointStore,
    Settings, Viewer, ViewState, render_mpl,
)

OUT = Path(__file__).resolve().parent
FIXTURES = Path(__file__).resolve().parent.parent.parent / "tests" / "fixtures"


def water_viewer() -> Viewer:
    """Build a viewer holding the water test fixture."""
    settings = Settings(catalog_path=str(FIXTURES / "element-table.txt"))
    viewer = Viewer.from_settings(settings)
    viewer.load(FIXTURES / "water.txt")
    return viewer


def lattice_points() -> PointStore:
    """Build a 3x3x3 simple cubic grid of alternating elements."""
    catalog = ElementCatalog([
        ElementSpec("Na", 40, (0.6, 0.4, 0.9)),
        ElementSpec("Cl", 55, (0.2, 0.8, 0.3)),
    ])
    grid = np.arange(-1, 2) * 100
    coords = np.array([[x, y, z] for x in grid for y in grid for z in grid])
    elements = [
        "Na" if (x + y + z) // 100 % 2 == 0 else "Cl" for x, y, z in coords
    ]
    return PointStore.from_elements(elements, coords, catalog)


def generate_docs_images() -> None:
    # Water from the front, then panned and tilted.
    viewer = water_viewer()
    viewer.render_mpl(OUT / "water_front.svg", show=False)
    print(f"  wrote {OUT / 'water_front.svg'}")

    for _ in range(6):
        viewer.execute(Command.PAN_RIGHT)
    for _ in range(4):
        viewer.execute(Command.TILT_TOP)
    viewer.render_mpl(OUT / "water_panned.svg", show=False)
    print(f"  wrote {OUT / 'water_panned.svg'}")

    # Cubic grid at an oblique angle -- hero image
    points = lattice_points()
    style = Settings(figsize=(6.0, 6.0), circle_segments=72, outline_width=0.6)
    render_mpl(
        points, ViewState(horizontal_angle=30.0, vertical_angle=-20.0),
        OUT / "lattice.svg", settings=style,
    )
    print(f"  wrote {OUT / 'lattice.svg'}")


if __name__ == "__main__":
    generate_docs_images()
