"""Tests for DatasetRegistry."""

import logging

import pytest

from dem_slope_viewer.constants import ELEVATION_PALETTE
from dem_slope_viewer.core.registry import DatasetRegistry


@pytest.fixture
def registry():
    return DatasetRegistry()


class TestResolve:
    @pytest.mark.parametrize(
        "dataset_id, band",
        [
            ("SRTM90_V4", "elevation"),
            ("GMTED2010_FULL", "min"),
            ("AW3D30_V4_1", "DSM"),
        ],
    )
    def test_band_and_palette(self, registry, dataset_id, band):
        d = registry.resolve(dataset_id)
        assert d.id == dataset_id
        assert d.band == band
        assert list(d.visualization.palette) == ELEVATION_PALETTE
        assert d.visualization.min == 506
        assert d.visualization.max == 553

    def test_alos_is_mosaic(self, registry):
        d = registry.resolve("AW3D30_V4_1")
        assert d.is_mosaic
        assert d.native_projection

    def test_single_image_datasets(self, registry):
        for dataset_id in ("SRTM90_V4", "GMTED2010_FULL"):
            d = registry.resolve(dataset_id)
            assert not d.is_mosaic
            assert not d.native_projection

    @pytest.mark.parametrize("unknown", ["", "srtm90_v4", "COP30", "AW3D30"])
    def test_unknown_falls_back_to_srtm(self, registry, unknown):
        assert registry.resolve(unknown) == registry.resolve("SRTM90_V4")

    def test_fallback_logs_warning(self, registry, caplog):
        with caplog.at_level(logging.WARNING):
            registry.resolve("NOPE")
        assert "Unknown DEM dataset 'NOPE'" in caplog.text

    def test_same_instance_each_time(self, registry):
        assert registry.resolve("GMTED2010_FULL") is registry.resolve("GMTED2010_FULL")

    def test_strict_rejects_unknown(self):
        strict = DatasetRegistry(strict=True)
        with pytest.raises(ValueError, match="Unknown DEM dataset 'NOPE'"):
            strict.resolve("NOPE")

    def test_strict_still_resolves_known(self):
        assert DatasetRegistry(strict=True).resolve("AW3D30_V4_1").band == "DSM"


class TestConstruction:
    def test_default_must_exist(self):
        with pytest.raises(ValueError, match="Unknown DEM dataset"):
            DatasetRegistry(default_id="COP30")

    def test_custom_table(self):
        table = {
            "X": {
                "id": "X",
                "label": "X DEM",
                "asset_id": "a/x",
                "source_kind": "image",
                "band": "b",
                "resolution_m": 10,
                "period": "2020",
                "native_projection": False,
                "visualization": {"min": 0, "max": 1, "palette": ["000000", "ffffff"]},
            }
        }
        registry = DatasetRegistry(datasets=table, default_id="X")
        assert registry.first_id == "X"
        assert registry.resolve("anything").id == "X"


class TestListing:
    def test_first_id_is_srtm(self, registry):
        assert registry.first_id == "SRTM90_V4"

    def test_ids_in_table_order(self, registry):
        assert registry.ids == ["SRTM90_V4", "GMTED2010_FULL", "AW3D30_V4_1"]

    def test_is_known(self, registry):
        assert registry.is_known("GMTED2010_FULL")
        assert not registry.is_known("NOPE")

    def test_options_are_label_value_pairs(self, registry):
        options = registry.options()
        assert options[0] == ("SRTM Digital Elevation Data Version 4 - 90m - 2000", "SRTM90_V4")
        assert options[2] == ("ALOS World 3D - 30m DSM - 2006-11", "AW3D30_V4_1")

    def test_list_datasets_keys(self, registry):
        for item in registry.list_datasets():
            assert set(item) == {"id", "label", "resolution_m", "source_kind", "band"}

    def test_describe_dataset(self, registry):
        data = registry.describe_dataset("AW3D30_V4_1")
        assert data["asset_id"] == "JAXA/ALOS/AW3D30/V4_1"
        assert data["visualization"]["min"] == 506

    def test_describe_returns_copy(self, registry):
        data = registry.describe_dataset("SRTM90_V4")
        data["band"] = "modified"
        assert registry.describe_dataset("SRTM90_V4")["band"] == "elevation"

    def test_describe_unknown_raises_even_when_lenient(self, registry):
        with pytest.raises(ValueError, match="Unknown DEM dataset"):
            registry.describe_dataset("NOPE")
