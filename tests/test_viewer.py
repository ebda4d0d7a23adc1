"""Tests for dalton.viewer: command dispatch and session state."""

import numpy as np
import pytest
from matplotlib.figure import Figure

from dalton.errors import CatalogLoadError
from dalton.model import Settings
from dalton.ordering import ViewKind, reorder
from dalton.viewer import Command, Viewer, parse_command


def _elements(viewer):
    return [p.element for p in viewer.ordered_points()]


@pytest.fixture
def loaded(viewer, co_path):
    assert viewer.load(co_path)
    return viewer


class TestParseCommand:
    def test_plain_command(self):
        assert parse_command("PanRight") == (Command.PAN_RIGHT, None)

    def test_case_insensitive(self):
        assert parse_command("frombottom") == (Command.FROM_BOTTOM, None)

    def test_load_with_path(self):
        assert parse_command("Load=water.txt") == (Command.LOAD, "water.txt")

    def test_load_without_path_raises(self):
        with pytest.raises(ValueError, match="needs a path"):
            parse_command("Load")

    def test_argument_on_other_command_raises(self):
        with pytest.raises(ValueError, match="takes no argument"):
            parse_command("ZoomIn=3")

    def test_unknown_command_raises(self):
        with pytest.raises(ValueError, match="unknown command"):
            parse_command("Spin")


class TestFromSettings:
    def test_reads_catalog(self, catalog_path):
        viewer = Viewer.from_settings(Settings(catalog_path=str(catalog_path)))
        assert "Nitrogen" in viewer.catalog

    def test_missing_catalog_raises(self, tmp_path):
        settings = Settings(catalog_path=str(tmp_path / "missing.txt"))
        with pytest.raises(CatalogLoadError):
            Viewer.from_settings(settings)


class TestLoad:
    def test_initial_state_is_empty(self, viewer):
        assert len(viewer.points) == 0
        assert len(viewer.order) == 0
        assert viewer.ordered_points() == []

    def test_load_orders_as_front(self, loaded):
        assert _elements(loaded) == ["Carbon", "Oxygen"]
        assert loaded.source.name == "co.txt"
        assert loaded.last_error is None

    def test_load_resets_view(self, loaded, water_path):
        loaded.execute(Command.PAN_RIGHT)
        loaded.execute(Command.ZOOM_IN)
        assert loaded.load(water_path)
        assert (loaded.view.horizontal_angle, loaded.view.vertical_angle) == (0.0, 0.0)
        assert loaded.view.zoom == 0.0
        np.testing.assert_array_equal(loaded.points.radii, [66.0, 37.0, 37.0])

    def test_failed_load_keeps_previous_dataset(self, loaded, fixtures_dir):
        loaded.execute(Command.FROM_BACK)
        order = loaded.order.copy()
        assert not loaded.load(fixtures_dir / "unknown.txt")
        assert "Unobtainium" in loaded.last_error
        assert loaded.source.name == "co.txt"
        assert loaded.view.horizontal_angle == -180.0
        np.testing.assert_array_equal(loaded.order, order)

    def test_malformed_dataset_reported(self, loaded, fixtures_dir):
        assert not loaded.load(fixtures_dir / "malformed.txt")
        assert loaded.last_error.startswith("Reading molecule file")
        assert len(loaded.points) == 2

    def test_oversized_coordinate_keeps_previous_dataset(self, loaded, tmp_path):
        path = tmp_path / "huge.txt"
        path.write_text(f"Carbon {'1' + '0' * 400} 0 0\n")
        assert not loaded.load(path)
        assert "out of range" in loaded.last_error
        assert loaded.source.name == "co.txt"
        assert _elements(loaded) == ["Carbon", "Oxygen"]

    def test_null_byte_path_reported(self, loaded):
        assert not loaded.load("bad\0name.txt")
        assert loaded.last_error.startswith("Reading molecule file")
        assert len(loaded.points) == 2

    def test_failed_load_logged(self, loaded, tmp_path, caplog):
        with caplog.at_level("ERROR", logger="dalton"):
            loaded.load(tmp_path / "missing.txt")
        assert "missing.txt" in caplog.text

    def test_success_clears_error(self, loaded, fixtures_dir, co_path):
        loaded.load(fixtures_dir / "unknown.txt")
        assert loaded.load(co_path)
        assert loaded.last_error is None

    def test_load_command(self, loaded, water_path):
        loaded.execute("Load", water_path)
        assert loaded.source.name == "water.txt"

    def test_load_command_needs_path(self, loaded):
        with pytest.raises(ValueError):
            loaded.execute(Command.LOAD)


class TestExecute:
    @pytest.mark.parametrize("command, angles", [
        (Command.FROM_FRONT, (0.0, 0.0)),
        (Command.FROM_BACK, (-180.0, 0.0)),
        (Command.FROM_LEFT, (-90.0, 0.0)),
        (Command.FROM_RIGHT, (90.0, 0.0)),
        (Command.FROM_TOP, (0.0, -90.0)),
        (Command.FROM_BOTTOM, (0.0, 90.0)),
    ])
    def test_viewpoint_sets_angles(self, loaded, command, angles):
        loaded.execute(Command.PAN_RIGHT)
        loaded.execute(command)
        view = loaded.view
        assert (view.horizontal_angle, view.vertical_angle) == angles

    def test_pan_steps(self, loaded):
        loaded.execute(Command.PAN_RIGHT)
        loaded.execute(Command.PAN_RIGHT)
        loaded.execute(Command.PAN_LEFT)
        assert loaded.view.horizontal_angle == 5.0
        assert loaded.view.vertical_angle == 0.0

    def test_tilt_steps(self, loaded):
        loaded.execute(Command.TILT_TOP)
        loaded.execute(Command.TILT_BOTTOM)
        loaded.execute(Command.TILT_BOTTOM)
        assert loaded.view.vertical_angle == -5.0
        assert loaded.view.horizontal_angle == 0.0

    def test_configured_step(self, catalog, co_path):
        viewer = Viewer(catalog=catalog, settings=Settings(pan_step=30.0))
        viewer.load(co_path)
        viewer.execute(Command.PAN_LEFT)
        assert viewer.view.horizontal_angle == -30.0

    def test_accepts_string(self, loaded):
        loaded.execute("FromBack")
        assert _elements(loaded) == ["Oxygen", "Carbon"]

    def test_unknown_string_raises(self, loaded):
        with pytest.raises(ValueError):
            loaded.execute("Spin")

    def test_returns_order(self, loaded):
        order = loaded.execute(Command.FROM_BACK)
        assert order is loaded.order

    def test_pan_matches_pure_reorder(self, loaded, water_path):
        loaded.load(water_path)
        for _ in range(7):
            loaded.execute(Command.PAN_RIGHT)
        loaded.execute(Command.TILT_TOP)
        expected = reorder(loaded.points, loaded.view, ViewKind.TILT)
        np.testing.assert_array_equal(loaded.order, expected)


class TestZoom:
    def test_zoom_in_grows_radii(self, loaded):
        loaded.execute(Command.ZOOM_IN)
        np.testing.assert_array_equal(loaded.points.radii, [92.0, 81.0])
        assert loaded.view.zoom == 15.0

    def test_zoom_does_not_reorder(self, loaded):
        loaded.execute(Command.FROM_BACK)
        order = loaded.order
        loaded.execute(Command.ZOOM_OUT)
        assert loaded.order is order

    def test_zoom_reversible(self, loaded):
        before = loaded.points.radii.copy()
        for _ in range(10):
            loaded.execute(Command.ZOOM_OUT)
        for _ in range(10):
            loaded.execute(Command.ZOOM_IN)
        np.testing.assert_array_equal(loaded.points.radii, before)

    def test_zoom_out_below_zero_hides(self, loaded):
        for _ in range(6):
            loaded.execute(Command.ZOOM_OUT)
        assert np.all(loaded.points.display_radii == 0.0)
        assert np.all(loaded.points.radii < 0.0)

    def test_ordered_points_report_radius(self, loaded):
        loaded.execute(Command.ZOOM_IN)
        assert [p.radius for p in loaded.ordered_points()] == [92.0, 81.0]


class TestScenarios:
    def test_front_paints_carbon_first(self, loaded):
        loaded.execute(Command.FROM_FRONT)
        assert _elements(loaded) == ["Carbon", "Oxygen"]

    def test_back_reverses(self, loaded):
        loaded.execute(Command.FROM_BACK)
        assert _elements(loaded) == ["Oxygen", "Carbon"]

    @pytest.mark.parametrize("command", list(Command)[1:])
    def test_coincident_points_keep_input_order(self, catalog, tmp_path, command):
        path = tmp_path / "pair.txt"
        path.write_text("Carbon 5 5 5\nOxygen 5 5 5\n")
        viewer = Viewer(catalog=catalog)
        assert viewer.load(path)
        viewer.execute(Command.PAN_RIGHT)
        viewer.execute(command)
        assert _elements(viewer) == ["Carbon", "Oxygen"]

    def test_full_turn_restores_order(self, catalog, tmp_path):
        rng = np.random.default_rng(3)
        lines = [
            f"{rng.choice(['Carbon', 'Oxygen', 'Hydrogen'])} "
            f"{rng.integers(-50, 50)} {rng.integers(-50, 50)} {rng.integers(-50, 50)}"
            for _ in range(30)
        ]
        path = tmp_path / "cloud.txt"
        path.write_text("\n".join(lines) + "\n")
        viewer = Viewer(catalog=catalog)
        assert viewer.load(path)
        viewer.execute(Command.PAN_RIGHT)
        viewer.execute(Command.PAN_LEFT)
        start = viewer.order.copy()
        for _ in range(72):
            viewer.execute(Command.PAN_RIGHT)
        assert viewer.view.horizontal_angle % 360 == 0.0
        np.testing.assert_array_equal(viewer.order, start)


class TestRender:
    def test_render_to_file(self, loaded, tmp_path):
        output = tmp_path / "co.png"
        fig = loaded.render_mpl(output)
        assert isinstance(fig, Figure)
        assert output.exists()

    def test_title_defaults_to_dataset_name(self, loaded):
        fig = loaded.render_mpl(show=False)
        assert [t.get_text() for t in fig.axes[0].texts] == ["co"]
