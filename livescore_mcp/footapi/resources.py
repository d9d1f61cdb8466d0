"""Static resources exposed over MCP."""

from mcp import types as mcp_types

SERVER_NAME = "livescore-mcp"
SERVER_VERSION = "1.0.0"

INFO_URI = "server://info"
INFO_NAME = "LiveScore MCP Server Info"
INFO_MIME_TYPE = "text/plain"

SERVER_INFO = f"""LiveScore MCP Server v{SERVER_VERSION}

A football livescore MCP providing real-time data about matches, teams, players, fixtures, standings, goals, events, lineups, and stats.

Available Tools:
- health: Echo test for connectivity check
- get_live_scores: Currently live matches with real-time scores
- get_fixtures: Competition fixtures (e.g. Champions League)
- search: Search teams, players, or competitions by name
- get_league_fixtures: League fixtures by league key (e.g. NetherlandsEredivisie)
- get_team: Detailed team info (squad, stats) by team ID
- get_player: Detailed player info (career, stats) by player ID
- get_match: Match details (events, lineups, stats, h2h) by match ID
- get_day_fixtures: All fixtures for a specific date
- get_team_image: Team logo PNG URL by team ID

All timestamps are in GMT/UTC - convert to local timezone as needed.
Supports multiple languages: en, nl, de, fr, es, pt, it, etc.

Example Queries:
- "Show me live football matches right now"
- "Get Champions League fixtures"
- "Search for Ajax"
- "Get Eredivisie fixtures"
- "Show matches for today"
- "Get detailed info about player 474972\""""


def list_resources() -> list[mcp_types.Resource]:
    return [
        mcp_types.Resource(uri=INFO_URI, name=INFO_NAME, mimeType=INFO_MIME_TYPE),
    ]


def read_resource(uri: str) -> str:
    """Return the text of the resource at `uri`

    Raises:
        ValueError: If no resource is published under `uri`
    """
    # pydantic may normalise the URI with a trailing slash
    if str(uri).rstrip("/") != INFO_URI:
        raise ValueError(f"Unknown resource: {uri}")
    return SERVER_INFO


__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "INFO_URI",
    "INFO_MIME_TYPE",
    "SERVER_INFO",
    "list_resources",
    "read_resource",
]
