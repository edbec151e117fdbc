"""
Domain models for dem-slope-viewer.

Descriptors and view state are immutable; a new ViewState replaces the old
one on every dataset selection.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import ErrorMessages, SourceKind, ViewPhase

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


class VisualizationParams(BaseModel):
    """Display range and palette shared by a map layer and its legend."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min: float = Field(..., description="Value mapped to the first palette color")
    max: float = Field(..., description="Value mapped to the last palette color")
    palette: tuple[str, ...] = Field(..., description="Ordered hex colors without '#'")

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError(ErrorMessages.EMPTY_PALETTE)
        for color in value:
            if not _HEX_COLOR.match(color):
                raise ValueError(ErrorMessages.INVALID_PALETTE_COLOR.format(color))
        return value

    @model_validator(mode="after")
    def _check_range(self) -> "VisualizationParams":
        if self.min >= self.max:
            raise ValueError(ErrorMessages.INVALID_RANGE.format(self.min, self.max))
        return self

    def to_ee(self) -> dict:
        """Return the vis-params dict Earth Engine and geemap expect."""
        return {"min": self.min, "max": self.max, "palette": list(self.palette)}


class DatasetDescriptor(BaseModel):
    """Everything needed to load and display one DEM dataset."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., description="Dataset identifier (e.g., SRTM90_V4)")
    label: str = Field(..., description="Human-readable name shown in the selector")
    asset_id: str = Field(..., description="Earth Engine asset id")
    source_kind: str = Field(..., description="'image' or 'mosaic' of a collection")
    band: str = Field(..., description="Elevation band name")
    resolution_m: int = Field(..., description="Nominal resolution in metres")
    period: str = Field(..., description="Acquisition period")
    native_projection: bool = Field(
        ..., description="Whether slope must be computed in the first tile's projection"
    )
    visualization: VisualizationParams = Field(..., description="Elevation display params")

    @field_validator("source_kind")
    @classmethod
    def _check_kind(cls, value: str) -> str:
        if value not in (SourceKind.IMAGE, SourceKind.MOSAIC):
            raise ValueError(f"Invalid source kind '{value}'")
        return value

    @property
    def is_mosaic(self) -> bool:
        return self.source_kind == SourceKind.MOSAIC


class ViewState(BaseModel):
    """Currently displayed selection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dataset_id: str = Field(..., description="Resolved dataset identifier")
    requested_id: str = Field(..., description="Identifier the selection asked for")
    descriptor: DatasetDescriptor = Field(..., description="Resolved dataset descriptor")
    slope_visualization: VisualizationParams = Field(..., description="Slope display params")
    elevation_title: str = Field(..., description="Left pane title")
    slope_title: str = Field(..., description="Right pane title")
    native_projection_applied: bool = Field(
        False, description="Whether slope used the native projection override"
    )
    phase: str = Field(ViewPhase.IDLE, description="'idle' or 'updating'")
