"""
Notebook application: elevation and slope maps side by side.

Usage (Jupyter):

    from dem_slope_viewer.app import build_app
    from dem_slope_viewer.config import ViewerConfig

    app = build_app(config=ViewerConfig(region_asset="users/me/study_area"))
    app.widget
"""

import logging
from dataclasses import dataclass
from typing import Any

import geemap
import ipywidgets as widgets

from .config import ViewerConfig
from .constants import (
    LEFT_TITLE_POSITION,
    MAP_HEIGHT,
    RIGHT_TITLE_POSITION,
    SELECT_POSITION,
    ErrorMessages,
)
from .core.panes import MapPane
from .core.raster_source import EarthEngineSource
from .core.registry import DatasetRegistry
from .core.view_controller import ViewController
from .models.descriptors import ViewState

logger = logging.getLogger(__name__)


@dataclass
class DemSlopeApp:
    """Handles to the assembled viewer."""

    widget: Any
    controller: ViewController
    selector: Any
    left: MapPane
    right: MapPane

    @property
    def state(self) -> ViewState | None:
        return self.controller.state


def _make_map() -> Any:
    m = geemap.Map(height=MAP_HEIGHT, ee_initialize=False)
    m.layout.width = "50%"
    return m


def build_selector(registry: DatasetRegistry, on_change: Any, value: str | None = None) -> Any:
    """Dropdown of dataset labels; calls on_change(dataset_id) on every change."""
    selector = widgets.Dropdown(
        options=registry.options(),
        value=value or registry.first_id,
        layout=widgets.Layout(width="auto"),
    )

    def _observe(change: dict) -> None:
        on_change(change["new"])

    selector.observe(_observe, names="value")
    return selector


def build_app(
    region: Any | None = None,
    config: ViewerConfig | None = None,
    source: EarthEngineSource | None = None,
    map_factory: Any = _make_map,
) -> DemSlopeApp:
    """Assemble the linked split view, wire the selector, and show the first dataset.

    Args:
        region: ee.FeatureCollection / ee.Geometry to clip and center on.
            Falls back to the DEM_VIEWER_REGION_ASSET asset when omitted.
        config: Viewer settings (defaults to the environment)
        source: Raster source (defaults to a new EarthEngineSource)
        map_factory: Callable returning a geemap.Map-compatible widget

    Returns:
        DemSlopeApp whose .widget is ready to display
    """
    config = config or ViewerConfig.from_env()
    source = source or EarthEngineSource()
    source.initialize(config)

    if region is None:
        if not config.region_asset:
            raise RuntimeError(ErrorMessages.REGION_NOT_BOUND)
        region = source.load_region(config.region_asset)

    registry = DatasetRegistry(strict=config.strict_ids)

    left_map = map_factory()
    right_map = map_factory()
    left = MapPane(left_map, LEFT_TITLE_POSITION)
    right = MapPane(right_map, RIGHT_TITLE_POSITION)

    widgets.jslink((left_map, "center"), (right_map, "center"))
    widgets.jslink((left_map, "zoom"), (right_map, "zoom"))

    controller = ViewController(left, right, registry, source, region)
    initial = config.default_dataset if registry.is_known(config.default_dataset) else None
    selector = build_selector(registry, controller.on_dataset_change, value=initial)
    left.add_widget(selector, SELECT_POSITION)

    controller.start(selector.value, zoom=config.zoom)

    split = widgets.HBox([left_map, right_map], layout=widgets.Layout(width="100%"))
    return DemSlopeApp(
        widget=split, controller=controller, selector=selector, left=left, right=right
    )
