"""
Constants for dem-slope-viewer.

All magic strings, dataset metadata, palettes, and configuration values live here.
"""


class ServerConfig:
    NAME = "dem-slope-viewer"
    VERSION = "0.1.0"
    DESCRIPTION = "Side-by-side DEM Elevation & Slope Viewer for Google Earth Engine"


class EnvVar:
    EE_PROJECT = "EE_PROJECT"
    EE_SERVICE_ACCOUNT = "EE_SERVICE_ACCOUNT"
    EE_KEY_FILE = "EE_KEY_FILE"
    REGION_ASSET = "DEM_VIEWER_REGION_ASSET"
    DEFAULT_DATASET = "DEM_VIEWER_DEFAULT_DATASET"
    STRICT_IDS = "DEM_VIEWER_STRICT_IDS"
    ZOOM = "DEM_VIEWER_ZOOM"
    MCP_STDIO = "MCP_STDIO"


class DEMDataset:
    SRTM90_V4 = "SRTM90_V4"
    GMTED2010_FULL = "GMTED2010_FULL"
    AW3D30_V4_1 = "AW3D30_V4_1"


class SourceKind:
    IMAGE = "image"
    MOSAIC = "mosaic"


class ViewPhase:
    IDLE = "idle"
    UPDATING = "updating"


DEFAULT_DATASET = DEMDataset.SRTM90_V4

ELEVATION_PALETTE = ["0000ff", "00ffff", "ffff00", "ff0000", "ffffff"]
ELEVATION_MIN = 506
ELEVATION_MAX = 553

SLOPE_PALETTE = ["c2e699", "a6d96a", "66a61e", "4d7b16", "238b45", "005a32"]
SLOPE_MIN = -1
SLOPE_MAX = 5

# Dataset table, in dropdown order. The first entry is the startup selection.
DEM_DATASETS: dict[str, dict] = {
    DEMDataset.SRTM90_V4: {
        "id": DEMDataset.SRTM90_V4,
        "label": "SRTM Digital Elevation Data Version 4 - 90m - 2000",
        "asset_id": "CGIAR/SRTM90_V4",
        "source_kind": SourceKind.IMAGE,
        "band": "elevation",
        "resolution_m": 90,
        "period": "2000",
        "native_projection": False,
        "visualization": {
            "min": ELEVATION_MIN,
            "max": ELEVATION_MAX,
            "palette": ELEVATION_PALETTE,
        },
    },
    DEMDataset.GMTED2010_FULL: {
        "id": DEMDataset.GMTED2010_FULL,
        "label": "Global Multi-resolution Terrain Elevation Data - 200m - 2010",
        "asset_id": "USGS/GMTED2010_FULL",
        "source_kind": SourceKind.IMAGE,
        "band": "min",
        "resolution_m": 200,
        "period": "2010",
        "native_projection": False,
        "visualization": {
            "min": ELEVATION_MIN,
            "max": ELEVATION_MAX,
            "palette": ELEVATION_PALETTE,
        },
    },
    DEMDataset.AW3D30_V4_1: {
        "id": DEMDataset.AW3D30_V4_1,
        "label": "ALOS World 3D - 30m DSM - 2006-11",
        "asset_id": "JAXA/ALOS/AW3D30/V4_1",
        "source_kind": SourceKind.MOSAIC,
        "band": "DSM",
        "resolution_m": 30,
        "period": "2006-2011",
        # Mosaics carry a coarse default projection; slope must run on the tile grid.
        "native_projection": True,
        "visualization": {
            "min": ELEVATION_MIN,
            "max": ELEVATION_MAX,
            "palette": ELEVATION_PALETTE,
        },
    },
}

ALL_DATASET_IDS = list(DEM_DATASETS.keys())

# Display layout
DEFAULT_ZOOM = 13
MAP_HEIGHT = "600px"
LEGEND_POSITION = "bottomleft"
SELECT_POSITION = "topleft"
LEFT_TITLE_POSITION = "topright"
RIGHT_TITLE_POSITION = "topleft"
TITLE_FONT_SIZE = "18px"
LEGEND_TITLE_FONT_SIZE = "16px"
LEGEND_SWATCH_WIDTH = 100
LEGEND_SWATCH_HEIGHT = 10

ELEVATION_SUFFIX = "Elevation"
SLOPE_SUFFIX = "Slope"

# Retry (Earth Engine initialization only)
RETRY_ATTEMPTS = 3
RETRY_WAIT_MIN = 1
RETRY_WAIT_MAX = 10

TRUTHY_VALUES = ("1", "true", "yes", "on")


def elevation_title(dataset_id: str) -> str:
    """Title shared by the elevation layer, pane label, and legend."""
    return f"{dataset_id} {ELEVATION_SUFFIX}"


def slope_title(dataset_id: str) -> str:
    """Title shared by the slope layer, pane label, and legend."""
    return f"{dataset_id} {SLOPE_SUFFIX}"


class ErrorMessages:
    UNKNOWN_DATASET = "Unknown DEM dataset '{}'. Available: {}"
    INVALID_PALETTE_COLOR = "Invalid palette color '{}': expected 6 hex digits"
    EMPTY_PALETTE = "Palette must contain at least one color"
    INVALID_RANGE = "Visualization min ({}) must be < max ({})"
    REGION_NOT_BOUND = (
        "No region of interest bound. Pass a region to the viewer or set "
        "DEM_VIEWER_REGION_ASSET to a FeatureCollection asset id."
    )
    EE_INIT_FAILED = "Earth Engine initialization failed: {}"
    INVALID_ZOOM = "Invalid zoom '{}': must be an integer between 0 and 24"


class SuccessMessages:
    DATASETS_LIST = "{} DEM datasets available"
    DATASET_DESCRIBE = "Dataset: {} ({}m, {})"
    VIEW_RENDERED = "Rendered {} elevation and slope for region {}"
    VIEW_RENDERED_NATIVE = "Rendered {} elevation and slope (native projection) for region {}"
    STATUS = "DEM Slope Viewer v{} ({} datasets, region: {})"
