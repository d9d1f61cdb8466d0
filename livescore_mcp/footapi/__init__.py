"""Football data MCP package.

This package declares the football data tools, forwards their calls to the
upstream API and exposes them through a low-level MCP server.
"""

from .client import UpstreamClient
from .core import LiveScoreMCPServer, ToolCallError
from .models import ToolDefinition, ToolParameter, ToolResult
from .tools import ToolRegistry

__all__ = [
    "LiveScoreMCPServer",
    "ToolCallError",
    "ToolRegistry",
    "UpstreamClient",
    "ToolDefinition",
    "ToolParameter",
    "ToolResult",
]
