"""
Dataset tools: DEM dataset listing, description, status, capabilities.

These tools require no network I/O and return information about the
datasets the viewer offers and the server configuration.
"""

import logging

from ...constants import DEFAULT_DATASET, ServerConfig, SuccessMessages
from ...core.slope import SLOPE_VIS
from ...models.responses import (
    CapabilitiesResponse,
    DatasetDetailResponse,
    DatasetInfo,
    DatasetsResponse,
    ErrorResponse,
    StatusResponse,
    VisInfo,
    format_response,
)

logger = logging.getLogger(__name__)


def register_dataset_tools(mcp, manager):
    """Register dataset tools with the MCP server."""

    @mcp.tool()
    async def dem_list_datasets(output_mode: str = "json") -> str:
        """List the DEM datasets the viewer can show, with band and resolution.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            List of available DEM datasets
        """
        try:
            datasets = [DatasetInfo(**d) for d in manager.list_datasets()]
            response = DatasetsResponse(
                datasets=datasets,
                default=manager.default_dataset,
                message=SuccessMessages.DATASETS_LIST.format(len(datasets)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"dem_list_datasets failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def dem_describe_dataset(
        dataset: str = DEFAULT_DATASET, output_mode: str = "json"
    ) -> str:
        """Get full metadata for a DEM dataset: Earth Engine asset, band,
        elevation display range and palette, and whether slope is computed in
        the native tile projection.

        Args:
            dataset: Dataset ID (SRTM90_V4, GMTED2010_FULL, AW3D30_V4_1)
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Detailed dataset metadata
        """
        try:
            data = manager.describe_dataset(dataset)
            vis = data.pop("visualization")
            response = DatasetDetailResponse(
                **data,
                visualization=VisInfo(**vis),
                message=SuccessMessages.DATASET_DESCRIBE.format(
                    data["label"], data["resolution_m"], data["source_kind"]
                ),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"dem_describe_dataset failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def dem_status(output_mode: str = "json") -> str:
        """Get server status: version, datasets, configured region, and Earth Engine state.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Server status information
        """
        try:
            response = StatusResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                default_dataset=manager.default_dataset,
                available_datasets=manager.registry.ids,
                region_asset=manager.config.region_asset,
                strict_ids=manager.registry.strict,
                earth_engine_ready=manager.earth_engine_ready,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"dem_status failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def dem_capabilities(output_mode: str = "json") -> str:
        """Get full server capabilities: datasets, slope display, and tool guidance.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Complete server capabilities
        """
        try:
            datasets = [DatasetInfo(**d) for d in manager.list_datasets()]
            response = CapabilitiesResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                datasets=datasets,
                default_dataset=manager.default_dataset,
                slope_vis=VisInfo(**SLOPE_VIS.to_ee()),
                tool_count=5,
                llm_guidance=(
                    "Use dem_list_datasets to see the three DEMs. "
                    "Use dem_describe_dataset for asset, band and display range. "
                    "Use dem_render_view to get elevation and slope tile URLs "
                    "clipped to the region of interest. "
                    "AW3D30_V4_1 slope is computed in the native tile projection."
                ),
                message=f"{ServerConfig.NAME} v{ServerConfig.VERSION} capabilities",
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"dem_capabilities failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
