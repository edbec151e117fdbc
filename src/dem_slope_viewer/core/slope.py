"""
Slope derivation for DEM datasets.

The mosaic-backed dataset (AW3D30) is the one special case: a collection
mosaic carries a default WGS84 projection at 1 degree, so ee.Terrain.slope
would run on the wrong grid. Its elevation is re-tagged with the projection
of the collection's first tile before the slope is taken.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..constants import SLOPE_MAX, SLOPE_MIN, SLOPE_PALETTE
from ..models.descriptors import DatasetDescriptor, VisualizationParams

logger = logging.getLogger(__name__)

SLOPE_VIS = VisualizationParams(min=SLOPE_MIN, max=SLOPE_MAX, palette=tuple(SLOPE_PALETTE))


@dataclass
class SlopeResult:
    """Slope image with its display parameters."""

    image: Any
    visualization: VisualizationParams
    native_projection_applied: bool


def derive_slope(elevation: Any, descriptor: DatasetDescriptor, source: Any) -> SlopeResult:
    """Compute slope for a resolved elevation image.

    Args:
        elevation: Elevation image from source.load_elevation(descriptor)
        descriptor: Resolved dataset descriptor
        source: Raster source (EarthEngineSource or compatible)

    Returns:
        SlopeResult with the fixed slope visualization
    """
    if descriptor.native_projection:
        projection = source.native_projection(descriptor)
        elevation = source.set_default_projection(elevation, projection)
        logger.debug(f"{descriptor.id}: slope in native projection of first tile")
        return SlopeResult(
            image=source.terrain_slope(elevation),
            visualization=SLOPE_VIS,
            native_projection_applied=True,
        )

    return SlopeResult(
        image=source.terrain_slope(elevation),
        visualization=SLOPE_VIS,
        native_projection_applied=False,
    )
