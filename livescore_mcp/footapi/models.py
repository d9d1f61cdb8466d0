"""Data models for the football data tools.

This module contains the core data structures used to declare the tools
exposed over MCP and the results they hand back to the transport.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


FOOTAPI_BASE_URL = "https://uitslagen.live/footapi"
DEFAULT_LANGUAGE = "en"
DEFAULT_VERSION = 2800
USER_AGENT = "LiveScore-MCP/1.0"


class HTTPMethod(Enum):
    """HTTP methods used against the upstream API"""
    GET = "GET"
    HEAD = "HEAD"


class ParameterType(Enum):
    """JSON-Schema types a tool parameter can declare"""
    STRING = "string"
    NUMBER = "number"


@dataclass(frozen=True)
class ToolParameter:
    """Configuration for a tool parameter

    Args:
        name: Parameter name
        type: Parameter type (string or number)
        description: Parameter description for tool documentation
        required: Whether the transport should require the parameter
        default: Value used when the argument is absent or has the wrong type
    """
    name: str
    type: ParameterType
    description: str
    required: bool = False
    default: Optional[Any] = None

    def to_schema(self) -> Dict[str, Any]:
        return {"type": self.type.value, "description": self.description}


@dataclass(frozen=True)
class ToolDefinition:
    """Declaration of a single MCP tool

    Args:
        name: Unique tool name
        description: Tool description shown to MCP clients
        parameters: Ordered parameter declarations
        path: Upstream path template, formatted with escaped argument values
        title: Title template prefixed to the upstream payload
        query: Names of arguments forwarded as extra query parameters
    """
    name: str
    description: str
    parameters: Tuple[ToolParameter, ...] = ()
    path: Optional[str] = None
    title: Optional[str] = None
    query: Tuple[str, ...] = ()

    def input_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
        }
        required = [p.name for p in self.parameters if p.required]
        if required:
            schema["required"] = required
        return schema


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool invocation: either text content or an error message"""
    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)


@dataclass(frozen=True)
class UpstreamRequest:
    """A single request against the upstream API

    Args:
        url: Absolute request URL
        method: HTTP method to use
        timeout: Total request timeout in seconds
        headers: Headers sent with the request
    """
    url: str
    method: HTTPMethod = HTTPMethod.GET
    timeout: float = 30.0
    headers: Dict[str, str] = field(default_factory=dict)


__all__ = [
    "FOOTAPI_BASE_URL",
    "DEFAULT_LANGUAGE",
    "DEFAULT_VERSION",
    "USER_AGENT",
    "HTTPMethod",
    "ParameterType",
    "ToolParameter",
    "ToolDefinition",
    "ToolResult",
    "UpstreamRequest",
]
