#!/usr/bin/env python3
"""
Async DEM Slope Viewer MCP Server using chuk-mcp-server

Headless access to the elevation/slope viewer: dataset discovery and
Earth Engine tile URLs for elevation and slope clipped to a region.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .constants import ServerConfig
from .core.view_manager import DEMViewManager
from .tools.datasets import register_dataset_tools
from .tools.view import register_view_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(ServerConfig.NAME)

# Create view manager instance (Earth Engine is initialized on first render)
manager = DEMViewManager()

# Register all tool modules
register_dataset_tools(mcp, manager)
register_view_tools(mcp, manager)

# Run the server
if __name__ == "__main__":
    logger.info("Starting DEM Slope Viewer MCP Server...")
    mcp.run(stdio=True)
