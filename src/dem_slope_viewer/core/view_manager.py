"""
View Manager: headless orchestrator for the MCP tools.

Runs the same resolve / slope / clip pipeline as the notebook viewer and
returns tile URL templates instead of drawing panes. Earth Engine client
calls block on HTTP, so async methods wrap them via asyncio.to_thread().
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from ..config import ViewerConfig
from ..constants import ErrorMessages
from ..models.descriptors import VisualizationParams
from .raster_source import EarthEngineSource
from .registry import DatasetRegistry
from .view_controller import compute_layers

logger = logging.getLogger(__name__)


@dataclass
class ViewResult:
    """Result of rendering one dataset selection."""

    dataset_id: str
    requested_id: str
    region: str
    elevation_title: str
    slope_title: str
    elevation_vis: VisualizationParams
    slope_vis: VisualizationParams
    native_projection_applied: bool
    elevation_tile_url: str
    slope_tile_url: str


class DEMViewManager:
    """Central manager for dataset discovery and headless view rendering."""

    def __init__(
        self,
        config: ViewerConfig | None = None,
        source: Any | None = None,
        registry: DatasetRegistry | None = None,
    ) -> None:
        self.config = config or ViewerConfig.from_env()
        self.source = source or EarthEngineSource()
        self.registry = registry or DatasetRegistry(strict=self.config.strict_ids)

    @property
    def default_dataset(self) -> str:
        return self.config.default_dataset

    # ------------------------------------------------------------------
    # Discovery (sync, no I/O)
    # ------------------------------------------------------------------

    def list_datasets(self) -> list[dict]:
        return self.registry.list_datasets()

    def describe_dataset(self, dataset_id: str) -> dict:
        return self.registry.describe_dataset(dataset_id)

    @property
    def earth_engine_ready(self) -> bool:
        return bool(getattr(self.source, "initialized", False))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    async def render_view(self, dataset_id: str, region_asset: str | None = None) -> ViewResult:
        """Resolve a dataset and produce elevation/slope tile URLs for a region."""
        region_id = region_asset or self.config.region_asset
        if not region_id:
            raise RuntimeError(ErrorMessages.REGION_NOT_BOUND)

        descriptor = self.registry.resolve(dataset_id)
        await asyncio.to_thread(self.source.initialize, self.config)

        region = self.source.load_region(region_id)
        layers = compute_layers(descriptor, self.source, region)

        elevation_url = await asyncio.to_thread(
            self.source.tile_url, layers.elevation, layers.elevation_vis
        )
        slope_url = await asyncio.to_thread(self.source.tile_url, layers.slope, layers.slope_vis)

        logger.info(f"Rendered {descriptor.id} for region {region_id}")
        return ViewResult(
            dataset_id=descriptor.id,
            requested_id=dataset_id,
            region=region_id,
            elevation_title=layers.elevation_title,
            slope_title=layers.slope_title,
            elevation_vis=layers.elevation_vis,
            slope_vis=layers.slope_vis,
            native_projection_applied=layers.native_projection_applied,
            elevation_tile_url=elevation_url,
            slope_tile_url=slope_url,
        )
