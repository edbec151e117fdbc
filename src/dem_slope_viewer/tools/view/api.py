"""
View tools: render elevation and slope for a dataset selection.
"""

import logging

from ...constants import DEFAULT_DATASET, SuccessMessages
from ...models.responses import ErrorResponse, ViewResponse, VisInfo, format_response

logger = logging.getLogger(__name__)


def register_view_tools(mcp, manager):
    """Register view tools with the MCP server."""

    @mcp.tool()
    async def dem_render_view(
        dataset: str = DEFAULT_DATASET,
        region_asset: str | None = None,
        output_mode: str = "json",
    ) -> str:
        """Compute elevation and slope for a DEM dataset, clipped to the region of
        interest, and return Earth Engine XYZ tile URL templates for both layers.

        Unknown dataset ids fall back to SRTM90_V4 unless the server runs with
        DEM_VIEWER_STRICT_IDS set.

        Args:
            dataset: Dataset ID (SRTM90_V4, GMTED2010_FULL, AW3D30_V4_1)
            region_asset: FeatureCollection asset id (defaults to DEM_VIEWER_REGION_ASSET)
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Layer titles, display parameters and tile URLs
        """
        try:
            result = await manager.render_view(dataset, region_asset)
            template = (
                SuccessMessages.VIEW_RENDERED_NATIVE
                if result.native_projection_applied
                else SuccessMessages.VIEW_RENDERED
            )
            response = ViewResponse(
                dataset=result.dataset_id,
                requested=result.requested_id,
                region=result.region,
                elevation_title=result.elevation_title,
                slope_title=result.slope_title,
                elevation_vis=VisInfo(**result.elevation_vis.to_ee()),
                slope_vis=VisInfo(**result.slope_vis.to_ee()),
                native_projection_applied=result.native_projection_applied,
                elevation_tile_url=result.elevation_tile_url,
                slope_tile_url=result.slope_tile_url,
                message=template.format(result.dataset_id, result.region),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"dem_render_view failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
