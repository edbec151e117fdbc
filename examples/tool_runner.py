"""
Shared helper for running dem-slope-viewer MCP tools directly from Python.

Provides a ToolRunner class that registers all MCP tools without requiring
a full MCP transport layer. Demo scripts use this to call tools as plain
async functions.

Usage:
    from tool_runner import ToolRunner

    async def main():
        runner = ToolRunner()
        result = await runner.run("dem_list_datasets")
        print(result)
"""

from __future__ import annotations

import json
from typing import Any

from dem_slope_viewer.config import ViewerConfig
from dem_slope_viewer.core.view_manager import DEMViewManager
from dem_slope_viewer.tools.datasets import register_dataset_tools
from dem_slope_viewer.tools.view import register_view_tools


class _MiniMCP:
    """Minimal MCP server that captures tools registered via @mcp.tool."""

    def __init__(self) -> None:
        self._tools: dict[str, Any] = {}

    def tool(self) -> Any:
        """Decorator factory matching @mcp.tool() usage."""

        def decorator(fn: Any) -> Any:
            self._tools[fn.__name__] = fn
            return fn

        return decorator

    def get_tool(self, name: str) -> Any:
        return self._tools[name]


class ToolRunner:
    """
    Run dem-slope-viewer MCP tools directly from Python.

    All 5 tools are registered and callable via run(tool_name, **kwargs).
    Returns parsed JSON by default. Use run_text() for human-readable
    output. Configuration is read from the environment unless a
    ViewerConfig is passed in.
    """

    def __init__(self, config: ViewerConfig | None = None) -> None:
        self._mcp = _MiniMCP()
        self.manager = DEMViewManager(config=config)
        register_dataset_tools(self._mcp, self.manager)
        register_view_tools(self._mcp, self.manager)

    @property
    def tool_names(self) -> list[str]:
        return list(self._mcp._tools.keys())

    async def run(self, tool_name: str, **kwargs: Any) -> dict[str, Any]:
        """Call a tool by name and return parsed JSON."""
        fn = self._mcp.get_tool(tool_name)
        raw = await fn(**kwargs)
        return json.loads(raw)

    async def run_text(self, tool_name: str, **kwargs: Any) -> str:
        """Call a tool by name with output_mode='text' and return plaintext."""
        fn = self._mcp.get_tool(tool_name)
        return await fn(output_mode="text", **kwargs)
