"""Decoding of raw MCP tool arguments.

Arguments arrive as an untyped JSON mapping. They are decoded once per call
against the tool's declared parameters, so handlers only ever see resolved
values with defaults applied.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .models import (
    DEFAULT_LANGUAGE,
    DEFAULT_VERSION,
    ParameterType,
    ToolDefinition,
)


def coerce_string(value: Any, default: str = "") -> str:
    """Return `value` if it is a non-empty string, otherwise `default`."""
    if isinstance(value, str) and value != "":
        return value
    return default


def coerce_number(value: Any, default: int = 0) -> int:
    """Return `value` truncated to int if it is a finite JSON number, otherwise `default`."""
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return default


@dataclass(frozen=True)
class ToolArguments:
    """Resolved arguments for one tool invocation

    Args:
        values: Declared parameters with defaults applied
        language: Upstream `lang` query value
        version: Upstream `version` query value
    """
    values: Dict[str, Any] = field(default_factory=dict)
    language: str = DEFAULT_LANGUAGE
    version: int = DEFAULT_VERSION

    @classmethod
    def resolve(cls, definition: ToolDefinition, raw: Optional[Mapping[str, Any]]) -> "ToolArguments":
        raw = raw if isinstance(raw, Mapping) else {}
        values: Dict[str, Any] = {}
        for param in definition.parameters:
            if param.type is ParameterType.NUMBER:
                default = param.default if param.default is not None else 0
                values[param.name] = coerce_number(raw.get(param.name), default)
            else:
                default = param.default if param.default is not None else ""
                values[param.name] = coerce_string(raw.get(param.name), default)

        return cls(
            values=values,
            language=coerce_string(raw.get("language"), DEFAULT_LANGUAGE),
            version=coerce_number(raw.get("version"), DEFAULT_VERSION),
        )

    def __getitem__(self, name: str) -> Any:
        return self.values[name]


__all__ = [
    "coerce_string",
    "coerce_number",
    "ToolArguments",
]
