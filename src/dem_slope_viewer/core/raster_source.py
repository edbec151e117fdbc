"""
Earth Engine raster source.

Thin wrapper over earthengine-api. All raster objects returned here are lazy
ee.Image / ee.Projection references; nothing is computed until Earth Engine
renders a tile. Failures (missing asset, empty collection) surface from
Earth Engine and are not retried.
"""

import logging
from typing import Any

import ee
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import ViewerConfig
from ..constants import (
    RETRY_ATTEMPTS,
    RETRY_WAIT_MAX,
    RETRY_WAIT_MIN,
    ErrorMessages,
)
from ..models.descriptors import DatasetDescriptor, VisualizationParams

logger = logging.getLogger(__name__)


_retry_init = retry(
    stop=stop_after_attempt(RETRY_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=RETRY_WAIT_MIN, max=RETRY_WAIT_MAX),
    retry=retry_if_exception_type(ee.EEException),
    reraise=True,
)


class EarthEngineSource:
    """Loads DEM imagery and terrain products from Earth Engine."""

    def __init__(self) -> None:
        self.initialized = False

    @_retry_init
    def _initialize(self, config: ViewerConfig) -> None:
        if config.uses_service_account:
            credentials = ee.ServiceAccountCredentials(
                config.ee_service_account, config.ee_key_file
            )
            ee.Initialize(credentials, project=config.ee_project)
        else:
            ee.Initialize(project=config.ee_project)

    def initialize(self, config: ViewerConfig) -> None:
        """Initialize the Earth Engine client once per process."""
        if self.initialized:
            return
        try:
            self._initialize(config)
        except ee.EEException as e:
            logger.error(ErrorMessages.EE_INIT_FAILED.format(e))
            raise RuntimeError(ErrorMessages.EE_INIT_FAILED.format(e)) from e
        self.initialized = True
        auth = "service account" if config.uses_service_account else "default credentials"
        logger.info(f"Earth Engine initialized ({auth}, project: {config.ee_project})")

    # ------------------------------------------------------------------
    # Imagery
    # ------------------------------------------------------------------

    def load_elevation(self, descriptor: DatasetDescriptor) -> Any:
        """Elevation band of a dataset, as a single image or a collection mosaic."""
        if descriptor.is_mosaic:
            image = ee.ImageCollection(descriptor.asset_id).mosaic()
        else:
            image = ee.Image(descriptor.asset_id)
        return image.select(descriptor.band)

    def native_projection(self, descriptor: DatasetDescriptor) -> Any:
        """Projection of the first image in the dataset's collection."""
        first = ee.ImageCollection(descriptor.asset_id).first()
        return first.select(descriptor.band).projection()

    def load_region(self, asset_id: str) -> Any:
        return ee.FeatureCollection(asset_id)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_default_projection(self, image: Any, projection: Any) -> Any:
        return image.setDefaultProjection(projection)

    def terrain_slope(self, image: Any) -> Any:
        """Slope in degrees."""
        return ee.Terrain.slope(image)

    def clip(self, image: Any, region: Any) -> Any:
        return image.clip(region)

    def tile_url(self, image: Any, vis: VisualizationParams) -> str:
        """XYZ tile URL template for a visualized image."""
        map_id = image.getMapId(vis.to_ee())
        return map_id["tile_fetcher"].url_format
