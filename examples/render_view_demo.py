#!/usr/bin/env python3
"""
Render View Demo -- dem-slope-viewer

Renders elevation and slope for every dataset over the configured region
and prints the Earth Engine tile URL templates. Requires Earth Engine
credentials (``earthengine authenticate`` or a service account) and
DEM_VIEWER_REGION_ASSET pointing at a FeatureCollection asset.

Usage:
    DEM_VIEWER_REGION_ASSET=users/me/study_area python examples/render_view_demo.py
"""

import asyncio
import sys

from tool_runner import ToolRunner


async def main() -> None:
    runner = ToolRunner()

    if not runner.manager.config.region_asset:
        print("DEM_VIEWER_REGION_ASSET is not set", file=sys.stderr)
        sys.exit(1)

    listing = await runner.run("dem_list_datasets")
    for d in listing["datasets"]:
        print("=" * 60)
        print(await runner.run_text("dem_render_view", dataset=d["id"]))

    # Unknown ids fall back to the default dataset unless strict mode is on
    print("=" * 60)
    print(await runner.run_text("dem_render_view", dataset="COP30"))


if __name__ == "__main__":
    asyncio.run(main())
