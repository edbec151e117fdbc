"""Shared test fixtures for dem-slope-viewer."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import ipyleaflet
import pytest

from dem_slope_viewer.config import ViewerConfig


class FakeImage:
    """Stand-in for a lazy ee.Image; records the operation chain."""

    def __init__(self, label: str) -> None:
        self.label = label

    def __repr__(self) -> str:
        return f"FakeImage({self.label})"


class FakeRasterSource:
    """Raster source that records every call instead of talking to Earth Engine."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.initialized = False

    def initialize(self, config) -> None:
        self.calls.append(("initialize", config))
        self.initialized = True

    def load_elevation(self, descriptor):
        self.calls.append(("load_elevation", descriptor.id))
        kind = "mosaic" if descriptor.is_mosaic else "image"
        return FakeImage(f"{kind}:{descriptor.asset_id}/{descriptor.band}")

    def native_projection(self, descriptor):
        self.calls.append(("native_projection", descriptor.asset_id))
        return f"proj:first:{descriptor.asset_id}"

    def set_default_projection(self, image, projection):
        self.calls.append(("set_default_projection", image.label, projection))
        return FakeImage(f"{image.label}@{projection}")

    def terrain_slope(self, image):
        self.calls.append(("terrain_slope", image.label))
        return FakeImage(f"slope({image.label})")

    def clip(self, image, region):
        self.calls.append(("clip", image.label, region))
        return FakeImage(f"clip({image.label})")

    def load_region(self, asset_id):
        self.calls.append(("load_region", asset_id))
        return f"region:{asset_id}"

    def tile_url(self, image, vis):
        self.calls.append(("tile_url", image.label, vis))
        return f"https://tiles.example/{image.label}/{{z}}/{{x}}/{{y}}"

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


class FakePane:
    """Display pane that keeps plain lists of layers and widgets."""

    def __init__(self) -> None:
        self.layers: list[tuple] = []
        self.widgets: list = []
        self.title = ""
        self.centered: list[tuple] = []
        self.reset_count = 0

    def reset_layers(self) -> None:
        self.reset_count += 1
        self.layers = []

    def add_layer(self, image, vis, name) -> None:
        self.layers.append((image, vis, name))

    def set_title(self, text) -> None:
        self.title = text

    def add_widget(self, widget, position):
        control = SimpleNamespace(widget=widget, position=position)
        self.widgets.append(control)
        return control

    def remove_widget(self, control) -> None:
        if control is not None and control in self.widgets:
            self.widgets.remove(control)

    def center_object(self, region, zoom) -> None:
        self.centered.append((region, zoom))


class FakeGeeMap(ipyleaflet.Map):
    """ipyleaflet map with the geemap methods the viewer uses."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.ee_layers: dict = {}
        self.centered: list[tuple] = []

    def add_layer(self, ee_object, vis_params=None, name=None):
        layer = ipyleaflet.TileLayer(url="https://tiles.example/{z}/{x}/{y}", name=name)
        self.ee_layers[name] = {"ee_object": ee_object, "vis_params": vis_params}
        self.add(layer)

    def find_layer(self, name):
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def center_object(self, ee_object, zoom=None):
        self.centered.append((ee_object, zoom))


@pytest.fixture
def fake_source():
    return FakeRasterSource()


@pytest.fixture
def left_pane():
    return FakePane()


@pytest.fixture
def right_pane():
    return FakePane()


@pytest.fixture
def region():
    return "region:users/test/study_area"


@pytest.fixture
def legend_factory():
    """Legend builder that returns a lightweight record instead of widgets."""
    return lambda vis, title: SimpleNamespace(vis=vis, title=title)


@pytest.fixture
def controller(left_pane, right_pane, fake_source, region, legend_factory):
    from dem_slope_viewer.core.registry import DatasetRegistry
    from dem_slope_viewer.core.view_controller import ViewController

    return ViewController(
        left_pane,
        right_pane,
        DatasetRegistry(),
        fake_source,
        region,
        legend_factory=legend_factory,
    )


@pytest.fixture
def viewer_config():
    return ViewerConfig(region_asset="users/test/study_area")


@pytest.fixture
def mock_manager(viewer_config, fake_source):
    """DEMViewManager with a recording raster source."""
    from dem_slope_viewer.core.view_manager import DEMViewManager

    return DEMViewManager(config=viewer_config, source=fake_source)


@pytest.fixture
def mock_mcp():
    """Mock ChukMCPServer."""
    mcp = MagicMock()
    mcp.tool = MagicMock(return_value=lambda fn: fn)
    return mcp


@pytest.fixture
def gee_map_factory():
    return FakeGeeMap


@pytest.fixture
def gee_map():
    return FakeGeeMap()
