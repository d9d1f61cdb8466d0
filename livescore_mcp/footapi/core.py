"""Core MCP server implementation for the football data tools.

This module provides the LiveScoreMCPServer class which wires the tool
registry and the static resources into a low-level MCP server.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from mcp import types as mcp_types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents

from .resources import INFO_MIME_TYPE, SERVER_NAME, SERVER_VERSION, list_resources, read_resource
from .tools import ToolRegistry


class ToolCallError(Exception):
    """Raised inside the call_tool handler so the SDK reports `isError=true`"""


class LiveScoreMCPServer:
    """MCP server that serves the football data tools and the info resource

    Args:
        registry: ToolRegistry providing tool declarations and handlers
    """

    def __init__(self, registry: Optional[ToolRegistry] = None):
        self.registry = registry if registry is not None else ToolRegistry()
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self._setup_server()
        logging.info(f"[MCP] Initialized MCP server '{SERVER_NAME}' v{SERVER_VERSION}")

    def _setup_server(self) -> None:
        """Register the tool and resource handlers on the MCP server"""

        @self.server.list_tools()
        async def list_tools() -> List[mcp_types.Tool]:
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[mcp_types.TextContent]:
            return await self.call_tool(name, arguments)

        @self.server.list_resources()
        async def list_resources_handler() -> List[mcp_types.Resource]:
            return list_resources()

        @self.server.read_resource()
        async def read_resource_handler(uri) -> List[ReadResourceContents]:
            return [ReadResourceContents(content=read_resource(str(uri)), mime_type=INFO_MIME_TYPE)]

    def list_tools(self) -> List[mcp_types.Tool]:
        tools = self.registry.list_mcp_tools()
        logging.info(f"[MCP] Returning {len(tools)} tools to MCP client")
        return tools

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[mcp_types.TextContent]:
        """Run a tool and convert its result to MCP content

        Raises:
            ToolCallError: If the tool produced an error result
        """
        logging.info(f"[MCP] Tool call: {name} with args: {json.dumps(arguments or {})}")
        result = await self.registry.call(name, arguments)
        if result.is_error:
            raise ToolCallError(result.text)
        return [mcp_types.TextContent(type="text", text=result.text)]

    def get_server(self) -> Server:
        """Get the configured MCP server instance

        Returns:
            The underlying MCP Server instance
        """
        return self.server


__all__ = [
    "LiveScoreMCPServer",
    "ToolCallError",
]
