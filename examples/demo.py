"""Demo script: load water and render it from every canonical viewpoint."""

from pathlib import Path

from dalton import Command, Settings, Viewer

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"
OUTPUT = Path(__file__).resolve().parent


def main():
    settings = Settings(catalog_path=str(FIXTURES / "element-table.txt"))
    viewer = Viewer.from_settings(settings)
    viewer.load(FIXTURES / "water.txt")
    print(f"Loaded {len(viewer.points)} atoms: {viewer.points.elements}")
    print(f"Elements in catalog: {viewer.catalog.names}")

    for command in (
        Command.FROM_FRONT, Command.FROM_BACK, Command.FROM_LEFT,
        Command.FROM_RIGHT, Command.FROM_TOP, Command.FROM_BOTTOM,
    ):
        viewer.execute(command)
        order = [p.element for p in viewer.ordered_points()]
        output = OUTPUT / f"water_{command.value}.pdf"
        viewer.render_mpl(output, show=False)
        print(f"{command.value:<10s} {order} -> {output.name}")


if __name__ == "__main__":
    main()
