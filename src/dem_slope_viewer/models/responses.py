"""
Response models for dem-slope-viewer tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

from pydantic import BaseModel, ConfigDict, Field


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json())


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")

    def to_text(self) -> str:
        return f"Error: {self.error}"


class VisInfo(BaseModel):
    """Visualization parameters as reported by tools."""

    model_config = ConfigDict(extra="forbid")

    min: float = Field(..., description="Display minimum")
    max: float = Field(..., description="Display maximum")
    palette: list[str] = Field(..., description="Ordered hex colors")

    def to_text(self) -> str:
        return f"{self.min:g} to {self.max:g} [{', '.join(self.palette)}]"


class DatasetInfo(BaseModel):
    """Summary information about a DEM dataset."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Dataset identifier (e.g., SRTM90_V4)")
    label: str = Field(..., description="Human-readable dataset name")
    resolution_m: int = Field(..., description="Nominal resolution in metres")
    source_kind: str = Field(..., description="'image' or 'mosaic'")
    band: str = Field(..., description="Elevation band name")

    def to_text(self) -> str:
        return f"{self.id}: {self.label} (band {self.band}, {self.source_kind})"


class DatasetsResponse(BaseModel):
    """Response model for listing available DEM datasets."""

    model_config = ConfigDict(extra="forbid")

    datasets: list[DatasetInfo] = Field(..., description="Available DEM datasets")
    default: str = Field(..., description="Dataset shown at startup")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message, f"Default: {self.default}", ""]
        for d in self.datasets:
            lines.append(f"  {d.to_text()}")
        return "\n".join(lines)


class DatasetDetailResponse(BaseModel):
    """Response model for detailed DEM dataset description."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Dataset identifier")
    label: str = Field(..., description="Human-readable dataset name")
    asset_id: str = Field(..., description="Earth Engine asset id")
    source_kind: str = Field(..., description="'image' or 'mosaic'")
    band: str = Field(..., description="Elevation band name")
    resolution_m: int = Field(..., description="Nominal resolution in metres")
    period: str = Field(..., description="Acquisition period")
    native_projection: bool = Field(
        ..., description="Whether slope runs in the first tile's native projection"
    )
    visualization: VisInfo = Field(..., description="Elevation display parameters")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.label} ({self.id})",
            f"Asset: {self.asset_id} ({self.source_kind}, band {self.band})",
            f"Resolution: {self.resolution_m}m",
            f"Period: {self.period}",
            f"Elevation display: {self.visualization.to_text()}",
        ]
        if self.native_projection:
            lines.append("Slope: computed in native tile projection")
        return "\n".join(lines)


class ViewResponse(BaseModel):
    """Response model for a rendered elevation/slope view."""

    model_config = ConfigDict(extra="forbid")

    dataset: str = Field(..., description="Resolved dataset identifier")
    requested: str = Field(..., description="Dataset identifier that was requested")
    region: str = Field(..., description="Region of interest asset id")
    elevation_title: str = Field(..., description="Elevation layer and pane title")
    slope_title: str = Field(..., description="Slope layer and pane title")
    elevation_vis: VisInfo = Field(..., description="Elevation display parameters")
    slope_vis: VisInfo = Field(..., description="Slope display parameters")
    native_projection_applied: bool = Field(
        ..., description="Whether slope used the native projection override"
    )
    elevation_tile_url: str = Field(..., description="XYZ tile URL template for elevation")
    slope_tile_url: str = Field(..., description="XYZ tile URL template for slope")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            self.message,
            f"{self.elevation_title}: {self.elevation_vis.to_text()}",
            f"  tiles: {self.elevation_tile_url}",
            f"{self.slope_title}: {self.slope_vis.to_text()}",
            f"  tiles: {self.slope_tile_url}",
        ]
        if self.requested != self.dataset:
            lines.append(f"NOTE: '{self.requested}' is unknown; showing {self.dataset}")
        return "\n".join(lines)


class StatusResponse(BaseModel):
    """Response model for server status queries."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(default="dem-slope-viewer", description="Server name")
    version: str = Field(default="0.1.0", description="Server version")
    default_dataset: str = Field(..., description="Dataset shown at startup")
    available_datasets: list[str] = Field(..., description="Available dataset identifiers")
    region_asset: str | None = Field(None, description="Configured region of interest asset")
    strict_ids: bool = Field(default=False, description="Whether unknown ids are rejected")
    earth_engine_ready: bool = Field(
        default=False, description="Whether Earth Engine has been initialized"
    )

    def to_text(self) -> str:
        ee_status = "initialized" if self.earth_engine_ready else "not initialized"
        lines = [
            f"{self.server} v{self.version}",
            f"Default dataset: {self.default_dataset}",
            f"Datasets: {', '.join(self.available_datasets)}",
            f"Region: {self.region_asset or 'not configured'}",
            f"Unknown ids: {'rejected' if self.strict_ids else 'fall back to default'}",
            f"Earth Engine: {ee_status}",
        ]
        return "\n".join(lines)


class CapabilitiesResponse(BaseModel):
    """Response model for server capabilities listing."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    datasets: list[DatasetInfo] = Field(..., description="Available DEM datasets")
    default_dataset: str = Field(..., description="Dataset shown at startup")
    slope_vis: VisInfo = Field(..., description="Fixed slope display parameters")
    tool_count: int = Field(..., description="Number of available tools", ge=0)
    llm_guidance: str = Field(..., description="LLM-friendly usage guidance for the server")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Tools: {self.tool_count}",
            f"Default dataset: {self.default_dataset}",
            f"Datasets: {', '.join(d.id for d in self.datasets)}",
            f"Slope display: {self.slope_vis.to_text()}",
            f"Guidance: {self.llm_guidance}",
        ]
        return "\n".join(lines)
