"""Tests for the dalton public API."""

import dalton


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in dalton.__all__:
            assert hasattr(dalton, name), f"{name} not importable from dalton"

    def test_catalog_and_points(self, catalog_path, water_path):
        catalog = dalton.ElementCatalog.load(catalog_path)
        points = dalton.PointStore.load(water_path, catalog)
        assert len(points) == 3

    def test_end_to_end_load_to_png(self, catalog_path, water_path, tmp_path):
        viewer = dalton.Viewer.from_settings(
            dalton.Settings(catalog_path=str(catalog_path))
        )
        assert viewer.load(water_path)
        viewer.execute("PanRight")
        viewer.execute("TiltTop")
        out = tmp_path / "water.png"
        viewer.render_mpl(out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_errors_share_a_base(self):
        for exc in (
            dalton.CatalogLoadError,
            dalton.DatasetLoadError,
            dalton.UnknownElementError,
        ):
            assert issubclass(exc, dalton.DaltonError)
