#!/usr/bin/env python3
"""
Capabilities Demo -- dem-slope-viewer

Quick-start script showing what the server offers without touching Earth
Engine. Lists the DEM datasets, server status, capabilities, and shows the
dual output mode (JSON vs text).

Usage:
    python examples/capabilities_demo.py
"""

import asyncio

from tool_runner import ToolRunner


async def main() -> None:
    runner = ToolRunner()

    print("=" * 60)
    print("dem-slope-viewer -- Server Capabilities")
    print("=" * 60)

    print(f"\nRegistered tools ({len(runner.tool_names)}):")
    for name in sorted(runner.tool_names):
        print(f"  - {name}")

    datasets = await runner.run("dem_list_datasets")
    print(f"\nDEM Datasets ({len(datasets['datasets'])}):")
    print(f"  Default: {datasets['default']}")
    for d in datasets["datasets"]:
        print(
            f"  {d['id']:15s}  {d['resolution_m']:4d}m  "
            f"{d['source_kind']:6s}  band={d['band']:9s}  {d['label']}"
        )

    # The mosaic dataset is the one with the native projection override
    detail = await runner.run("dem_describe_dataset", dataset="AW3D30_V4_1")
    vis = detail["visualization"]
    print(f"\n{detail['label']}")
    print(f"  Asset: {detail['asset_id']} ({detail['source_kind']})")
    print(f"  Period: {detail['period']}")
    print(f"  Native projection slope: {detail['native_projection']}")
    print(f"  Elevation display: {vis['min']}..{vis['max']} {', '.join(vis['palette'])}")

    status = await runner.run("dem_status")
    print("\nServer Status:")
    print(f"  {status['server']} v{status['version']}")
    print(f"  Region: {status['region_asset'] or 'not configured'}")
    print(f"  Strict ids: {status['strict_ids']}")

    print("\n" + "-" * 60)
    print("Dual Output Mode Demo")
    print("-" * 60)

    print("\ndem_capabilities (output_mode='text'):")
    print(await runner.run_text("dem_capabilities"))

    print("\ndem_list_datasets (output_mode='text'):")
    print(await runner.run_text("dem_list_datasets"))

    print("\n" + "=" * 60)
    print("Set DEM_VIEWER_REGION_ASSET and run render_view_demo.py")
    print("to fetch live Earth Engine tile URLs.")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
