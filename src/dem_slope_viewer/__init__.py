"""
dem-slope-viewer: Side-by-side DEM Elevation & Slope Viewer

Shows elevation and slope for SRTM, GMTED2010 and ALOS AW3D30 in two linked
geemap panes clipped to a region of interest, and exposes the same pipeline
as MCP tools for headless use.
"""
