"""Tests for domain models and response models."""

import json

import pytest
from pydantic import ValidationError

from dem_slope_viewer.models import (
    CapabilitiesResponse,
    DatasetDescriptor,
    DatasetDetailResponse,
    DatasetInfo,
    DatasetsResponse,
    ErrorResponse,
    StatusResponse,
    ViewResponse,
    ViewState,
    VisInfo,
    VisualizationParams,
    format_response,
)


def _vis(**overrides):
    data = {"min": 506, "max": 553, "palette": ("0000ff", "ffffff")}
    data.update(overrides)
    return VisualizationParams(**data)


def _descriptor(**overrides):
    data = {
        "id": "SRTM90_V4",
        "label": "SRTM",
        "asset_id": "CGIAR/SRTM90_V4",
        "source_kind": "image",
        "band": "elevation",
        "resolution_m": 90,
        "period": "2000",
        "native_projection": False,
        "visualization": _vis(),
    }
    data.update(overrides)
    return DatasetDescriptor(**data)


class TestVisualizationParams:
    def test_to_ee(self):
        assert _vis().to_ee() == {"min": 506, "max": 553, "palette": ["0000ff", "ffffff"]}

    def test_palette_list_coerced_to_tuple(self):
        vis = _vis(palette=["0000ff", "00ffff"])
        assert vis.palette == ("0000ff", "00ffff")

    def test_is_frozen(self):
        vis = _vis()
        with pytest.raises(ValidationError):
            vis.min = 0

    def test_empty_palette_rejected(self):
        with pytest.raises(ValidationError, match="at least one color"):
            _vis(palette=())

    def test_bad_color_rejected(self):
        with pytest.raises(ValidationError, match="Invalid palette color"):
            _vis(palette=("#0000ff",))

    def test_min_must_be_below_max(self):
        with pytest.raises(ValidationError, match="must be <"):
            _vis(min=10, max=10)

    def test_negative_min_allowed(self):
        assert _vis(min=-1, max=5).min == -1

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            VisualizationParams(min=0, max=1, palette=("000000",), opacity=0.5)

    def test_equal_instances_compare_equal(self):
        assert _vis() == _vis()


class TestDatasetDescriptor:
    def test_is_mosaic(self):
        assert _descriptor(source_kind="mosaic").is_mosaic is True
        assert _descriptor().is_mosaic is False

    def test_invalid_kind(self):
        with pytest.raises(ValidationError, match="Invalid source kind"):
            _descriptor(source_kind="tiles")

    def test_frozen(self):
        d = _descriptor()
        with pytest.raises(ValidationError):
            d.band = "DSM"


class TestViewState:
    def test_defaults(self):
        d = _descriptor()
        state = ViewState(
            dataset_id=d.id,
            requested_id=d.id,
            descriptor=d,
            slope_visualization=_vis(min=-1, max=5),
            elevation_title="SRTM90_V4 Elevation",
            slope_title="SRTM90_V4 Slope",
        )
        assert state.phase == "idle"
        assert state.native_projection_applied is False


class TestFormatResponse:
    def test_json_mode(self):
        out = format_response(ErrorResponse(error="boom"))
        assert json.loads(out) == {"error": "boom"}

    def test_text_mode(self):
        assert format_response(ErrorResponse(error="boom"), "text") == "Error: boom"


class TestResponseText:
    def test_vis_info(self):
        vis = VisInfo(min=-1, max=5, palette=["c2e699", "005a32"])
        assert vis.to_text() == "-1 to 5 [c2e699, 005a32]"

    def test_datasets_response(self):
        resp = DatasetsResponse(
            datasets=[
                DatasetInfo(
                    id="SRTM90_V4",
                    label="SRTM",
                    resolution_m=90,
                    source_kind="image",
                    band="elevation",
                )
            ],
            default="SRTM90_V4",
            message="1 DEM datasets available",
        )
        text = resp.to_text()
        assert "Default: SRTM90_V4" in text
        assert "SRTM90_V4: SRTM (band elevation, image)" in text

    def test_detail_mentions_native_projection(self):
        resp = DatasetDetailResponse(
            id="AW3D30_V4_1",
            label="ALOS",
            asset_id="JAXA/ALOS/AW3D30/V4_1",
            source_kind="mosaic",
            band="DSM",
            resolution_m=30,
            period="2006-2011",
            native_projection=True,
            visualization=VisInfo(min=506, max=553, palette=["0000ff"]),
            message="ok",
        )
        assert "native tile projection" in resp.to_text()

    def test_view_response_notes_fallback(self):
        vis = VisInfo(min=0, max=1, palette=["000000"])
        resp = ViewResponse(
            dataset="SRTM90_V4",
            requested="NOPE",
            region="users/test/roi",
            elevation_title="SRTM90_V4 Elevation",
            slope_title="SRTM90_V4 Slope",
            elevation_vis=vis,
            slope_vis=vis,
            native_projection_applied=False,
            elevation_tile_url="https://e/{z}/{x}/{y}",
            slope_tile_url="https://s/{z}/{x}/{y}",
            message="ok",
        )
        assert "'NOPE' is unknown" in resp.to_text()

    def test_status_text(self):
        resp = StatusResponse(
            default_dataset="SRTM90_V4",
            available_datasets=["SRTM90_V4"],
        )
        text = resp.to_text()
        assert "Region: not configured" in text
        assert "fall back to default" in text
        assert "not initialized" in text

    def test_capabilities_tool_count_non_negative(self):
        with pytest.raises(ValidationError):
            CapabilitiesResponse(
                server="x",
                version="0",
                datasets=[],
                default_dataset="SRTM90_V4",
                slope_vis=VisInfo(min=-1, max=5, palette=["000000"]),
                tool_count=-1,
                llm_guidance="",
                message="",
            )
