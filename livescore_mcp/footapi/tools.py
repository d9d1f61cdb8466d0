"""Tool registry for the football data API.

This module declares the ten MCP tools the server exposes and binds each to
a handler built from the URL builder and the UpstreamClient.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from mcp import types as mcp_types

from .arguments import ToolArguments
from .client import UpstreamClient
from .models import ParameterType, ToolDefinition, ToolParameter, ToolResult
from .urls import build_image_url, build_search_url, build_url, path_segment

Handler = Callable[[ToolDefinition, ToolArguments], Awaitable[ToolResult]]

LANGUAGE = ToolParameter(
    "language", ParameterType.STRING, "Language code (en, nl, de, etc.). Default: en", default="en",
)


def _required(name: str, description: str) -> ToolParameter:
    return ToolParameter(name, ParameterType.STRING, description, required=True)


TOOL_DEFINITIONS = (
    ToolDefinition(
        name="health",
        description="Health check - echo back a message",
        parameters=(_required("message", "Message to echo"),),
    ),
    ToolDefinition(
        name="get_live_scores",
        description="Get currently live football matches and scores. All timestamps are GMT/UTC.",
        parameters=(LANGUAGE,),
        path="fixtures/feed_livenow.json",
        title="Live Scores",
    ),
    ToolDefinition(
        name="get_fixtures",
        description=("Get fixtures for a specific competition "
                     "(e.g. EurocupsUEFAChampionsLeague_small). All timestamps are GMT/UTC."),
        parameters=(_required("competition", "Competition identifier"), LANGUAGE),
        path="fixtures_v2/{competition}.json",
        title="Fixtures for {competition}",
    ),
    ToolDefinition(
        name="search",
        description="Search for teams, players, or competitions by name",
        parameters=(
            _required("q", "Search term (team, player, or competition name)"),
            LANGUAGE,
            ToolParameter("country", ParameterType.STRING, "Country filter (e.g. Netherlands, England)"),
        ),
        title="Search results for '{q}'",
    ),
    ToolDefinition(
        name="get_league_fixtures",
        description=("Get fixtures for a specific league (e.g. NetherlandsEredivisie). "
                     "All timestamps are GMT/UTC."),
        parameters=(_required("league_key", "League key from search results"), LANGUAGE),
        path="fixtures_v2/{league_key}_small.json",
        title="League fixtures for {league_key}",
    ),
    ToolDefinition(
        name="get_team",
        description="Get detailed team information (squad, stats) by team ID",
        parameters=(_required("id", "Team ID from search results (e.g. 13183 for Ajax)"), LANGUAGE),
        path="team_gs/{id}.json",
        title="Team info for ID {id}",
    ),
    ToolDefinition(
        name="get_player",
        description="Get detailed player information (stats, career) by player ID",
        parameters=(_required("id", "Player ID (e.g. 474972)"), LANGUAGE),
        path="players/{id}.json",
        title="Player info for ID {id}",
    ),
    ToolDefinition(
        name="get_match",
        description=("Get detailed match information (events, lineups, stats) "
                     "with optional head-to-head data"),
        parameters=(
            _required("id", "Match ID from live scores or fixtures"),
            LANGUAGE,
            ToolParameter("h2h", ParameterType.NUMBER,
                          "Include head-to-head data: 1=yes, 0=no. Default: 1", default=1),
        ),
        path="matches/{id}.json",
        title="Match info for ID {id}",
        query=("h2h",),
    ),
    ToolDefinition(
        name="get_day_fixtures",
        description="Get all fixtures for a specific date. All timestamps are GMT/UTC.",
        parameters=(
            _required("date", "Date in DD/MM/YYYY format (e.g. 30/08/2025)"),
            LANGUAGE,
            ToolParameter("tzoffset", ParameterType.NUMBER,
                          "Timezone offset in minutes (e.g. 120 for UTC+2). Default: 0", default=0),
        ),
        path="fixtures/feed_matches_aggregated.json",
        title="Fixtures for {date}",
        query=("date", "tzoffset"),
    ),
    ToolDefinition(
        name="get_team_image",
        description="Get team logo PNG URL by team ID",
        parameters=(_required("id", "Team ID"),),
    ),
)


class ToolRegistry:
    """Holds the tool declarations and dispatches calls to their handlers

    Args:
        client: UpstreamClient used by every data-bearing tool
    """

    def __init__(self, client: Optional[UpstreamClient] = None):
        self.client = client if client is not None else UpstreamClient()
        self.definitions: Dict[str, ToolDefinition] = {}
        self.handlers: Dict[str, Handler] = {}

        custom = {
            "health": self._health,
            "search": self._search,
            "get_team_image": self._team_image,
        }
        for definition in TOOL_DEFINITIONS:
            self.add_tool(definition, custom.get(definition.name, self._forward))
        logging.info(f"[Tools] Registered {len(self.definitions)} tools")

    def add_tool(self, definition: ToolDefinition, handler: Handler) -> None:
        """Register a tool

        Raises:
            ValueError: If a tool with the same name already exists
        """
        if definition.name in self.definitions:
            raise ValueError(f"Tool '{definition.name}' already exists")
        self.definitions[definition.name] = definition
        self.handlers[definition.name] = handler

    def names(self) -> List[str]:
        return list(self.definitions)

    def list_mcp_tools(self) -> List[mcp_types.Tool]:
        return [
            mcp_types.Tool(
                name=d.name,
                description=d.description,
                inputSchema=d.input_schema(),
            )
            for d in self.definitions.values()
        ]

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        """Run a tool and return its result; never raises

        Args:
            name: Tool name
            arguments: Raw argument mapping from the MCP client

        Returns:
            The handler's ToolResult, or an error result for unknown tools
            and unexpected failures
        """
        definition = self.definitions.get(name)
        if definition is None:
            logging.warning(f"[Tools] Tool '{name}' not found")
            return ToolResult.error(f"Tool '{name}' not found")

        try:
            args = ToolArguments.resolve(definition, arguments)
            return await self.handlers[name](definition, args)
        except Exception as e:
            logging.exception(f"[Tools] Error executing tool '{name}': {e}")
            return ToolResult.error(f"Error executing tool: {e}")

    async def _health(self, definition: ToolDefinition, args: ToolArguments) -> ToolResult:
        return ToolResult.ok(f"Echo: {args['message'] or 'ok'}")

    async def _forward(self, definition: ToolDefinition, args: ToolArguments) -> ToolResult:
        escaped = {name: path_segment(value) for name, value in args.values.items()}
        path = definition.path.format(**escaped)
        extra = [(name, args[name]) for name in definition.query]
        url = build_url(self.client.base_url, path, args, extra)
        return await self.client.fetch(url, definition.title.format(**args.values))

    async def _search(self, definition: ToolDefinition, args: ToolArguments) -> ToolResult:
        url = build_search_url(self.client.base_url, args)
        return await self.client.fetch(url, definition.title.format(**args.values))

    async def _team_image(self, definition: ToolDefinition, args: ToolArguments) -> ToolResult:
        team_id = args["id"]
        return await self.client.check_image(build_image_url(self.client.base_url, team_id), team_id)


__all__ = [
    "TOOL_DEFINITIONS",
    "ToolRegistry",
]
