"""
View controller: keeps the elevation and slope panes in step with the
selected dataset.

Every selection is a full reset: each pane's layers are cleared and exactly
one layer is added, and the legend the controller attached last time is
removed before a new one is attached.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from ..constants import (
    DEFAULT_ZOOM,
    LEGEND_POSITION,
    ErrorMessages,
    ViewPhase,
    elevation_title,
    slope_title,
)
from ..models.descriptors import DatasetDescriptor, ViewState, VisualizationParams
from .legend import build_legend
from .registry import DatasetRegistry
from .slope import derive_slope

logger = logging.getLogger(__name__)


@dataclass
class ViewLayers:
    """Clipped elevation and slope images for one selection."""

    descriptor: DatasetDescriptor
    elevation: Any
    slope: Any
    elevation_vis: VisualizationParams
    slope_vis: VisualizationParams
    native_projection_applied: bool

    @property
    def elevation_title(self) -> str:
        return elevation_title(self.descriptor.id)

    @property
    def slope_title(self) -> str:
        return slope_title(self.descriptor.id)


def compute_layers(descriptor: DatasetDescriptor, source: Any, region: Any) -> ViewLayers:
    """Load elevation, derive slope, and clip both to the region."""
    if region is None:
        raise RuntimeError(ErrorMessages.REGION_NOT_BOUND)

    elevation = source.load_elevation(descriptor)
    slope = derive_slope(elevation, descriptor, source)
    return ViewLayers(
        descriptor=descriptor,
        elevation=source.clip(elevation, region),
        slope=source.clip(slope.image, region),
        elevation_vis=descriptor.visualization,
        slope_vis=slope.visualization,
        native_projection_applied=slope.native_projection_applied,
    )


class ViewController:
    """Drives the left (elevation) and right (slope) panes."""

    def __init__(
        self,
        left: Any,
        right: Any,
        registry: DatasetRegistry,
        source: Any,
        region: Any,
        legend_factory: Callable[[VisualizationParams, str], Any] = build_legend,
    ) -> None:
        self.left = left
        self.right = right
        self.registry = registry
        self.source = source
        self.region = region
        self.legend_factory = legend_factory
        self.phase = ViewPhase.IDLE
        self.state: ViewState | None = None
        self._left_legend: Any = None
        self._right_legend: Any = None

    def start(self, dataset_id: str | None = None, zoom: int = DEFAULT_ZOOM) -> ViewState:
        """Center both panes on the region once, then show the first dataset."""
        if self.region is None:
            raise RuntimeError(ErrorMessages.REGION_NOT_BOUND)
        self.left.center_object(self.region, zoom)
        self.right.center_object(self.region, zoom)
        return self.on_dataset_change(dataset_id or self.registry.first_id)

    def on_dataset_change(self, dataset_id: str) -> ViewState:
        """Recompute and redraw both panes for a dataset selection."""
        descriptor = self.registry.resolve(dataset_id)
        self.phase = ViewPhase.UPDATING
        try:
            layers = compute_layers(descriptor, self.source, self.region)
            self._show(layers)
        finally:
            self.phase = ViewPhase.IDLE

        self.state = ViewState(
            dataset_id=descriptor.id,
            requested_id=dataset_id,
            descriptor=descriptor,
            slope_visualization=layers.slope_vis,
            elevation_title=layers.elevation_title,
            slope_title=layers.slope_title,
            native_projection_applied=layers.native_projection_applied,
            phase=self.phase,
        )
        logger.info(f"Showing {layers.elevation_title} / {layers.slope_title}")
        return self.state

    def _show(self, layers: ViewLayers) -> None:
        self.left.reset_layers()
        self.right.reset_layers()

        self.left.add_layer(layers.elevation, layers.elevation_vis.to_ee(), layers.elevation_title)
        self.right.add_layer(layers.slope, layers.slope_vis.to_ee(), layers.slope_title)

        self.left.set_title(layers.elevation_title)
        self.right.set_title(layers.slope_title)

        self.left.remove_widget(self._left_legend)
        self.right.remove_widget(self._right_legend)
        self._left_legend = self.left.add_widget(
            self.legend_factory(layers.elevation_vis, layers.elevation_title), LEGEND_POSITION
        )
        self._right_legend = self.right.add_widget(
            self.legend_factory(layers.slope_vis, layers.slope_title), LEGEND_POSITION
        )
