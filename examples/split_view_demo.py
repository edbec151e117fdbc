"""
Split View Demo -- dem-slope-viewer

Builds the two-pane elevation/slope viewer. Run the cells in Jupyter (or
paste into a notebook); the last expression of the second cell displays
the linked maps with the dataset selector on the left pane.

Requires Earth Engine credentials and a region asset, either set below or
via DEM_VIEWER_REGION_ASSET.
"""

# %%
import dataclasses

from dem_slope_viewer.app import build_app
from dem_slope_viewer.config import ViewerConfig

config = ViewerConfig.from_env()
if not config.region_asset:
    config = dataclasses.replace(config, region_asset="users/your_user/study_area")

# %%
# Earth Engine is initialized inside build_app before the region is loaded
app = build_app(config=config)
app.widget

# %%
# Switching programmatically runs the same path as picking from the dropdown
app.selector.value = "AW3D30_V4_1"
print(app.state.elevation_title, app.state.native_projection_applied)
