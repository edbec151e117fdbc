"""Domain and response models for dem-slope-viewer."""

from .descriptors import DatasetDescriptor, ViewState, VisualizationParams
from .responses import (
    CapabilitiesResponse,
    DatasetDetailResponse,
    DatasetInfo,
    DatasetsResponse,
    ErrorResponse,
    StatusResponse,
    ViewResponse,
    VisInfo,
    format_response,
)

__all__ = [
    "VisualizationParams",
    "DatasetDescriptor",
    "ViewState",
    "ErrorResponse",
    "VisInfo",
    "DatasetInfo",
    "DatasetsResponse",
    "DatasetDetailResponse",
    "ViewResponse",
    "StatusResponse",
    "CapabilitiesResponse",
    "format_response",
]
