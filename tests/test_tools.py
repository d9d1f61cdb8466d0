import json
import unittest

from fake_upstream import FakeUpstream

from livescore_mcp.footapi.client import UpstreamClient
from livescore_mcp.footapi.models import ParameterType, ToolDefinition, ToolParameter, ToolResult
from livescore_mcp.footapi.tools import ToolRegistry

EXPECTED_TOOLS = [
    "health",
    "get_live_scores",
    "get_fixtures",
    "search",
    "get_league_fixtures",
    "get_team",
    "get_player",
    "get_match",
    "get_day_fixtures",
    "get_team_image",
]


class TestToolDeclarations(unittest.TestCase):

    def setUp(self):
        self.registry = ToolRegistry(UpstreamClient("http://127.0.0.1:1/footapi"))

    def test_ten_tools_in_order(self):
        self.assertEqual(self.registry.names(), EXPECTED_TOOLS)

    def test_match_schema(self):
        tool = {t.name: t for t in self.registry.list_mcp_tools()}["get_match"]
        self.assertEqual(tool.inputSchema["required"], ["id"])
        self.assertEqual(tool.inputSchema["properties"]["h2h"]["type"], "number")
        self.assertEqual(tool.inputSchema["properties"]["language"]["type"], "string")

    def test_live_scores_has_no_required(self):
        tool = {t.name: t for t in self.registry.list_mcp_tools()}["get_live_scores"]
        self.assertNotIn("required", tool.inputSchema)

    def test_duplicate_registration_rejected(self):
        definition = ToolDefinition(
            name="health",
            description="dup",
            parameters=(ToolParameter("message", ParameterType.STRING, "m", required=True),),
        )

        async def handler(definition, args):
            return ToolResult.ok("")

        with self.assertRaises(ValueError):
            self.registry.add_tool(definition, handler)


class TestToolCalls(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.upstream = FakeUpstream()
        await self.upstream.start()
        self.registry = ToolRegistry(UpstreamClient(self.upstream.base_url))

    async def asyncTearDown(self):
        await self.upstream.close()

    async def test_health_echo_is_local(self):
        print("\n--- Testing health ---")
        result = await self.registry.call("health", {"message": "ping"})
        self.assertEqual(result, ToolResult.ok("Echo: ping"))
        self.assertEqual(self.upstream.requests, [])

    async def test_live_scores_defaults(self):
        self.upstream.respond("fixtures/feed_livenow.json", body='{"matches":[]}')
        result = await self.registry.call("get_live_scores", {})

        self.assertFalse(result.is_error)
        self.assertTrue(result.text.startswith("Live Scores:\n\n"))
        self.assertEqual(self.upstream.last["query"], {"lang": "en", "version": "2800"})

    async def test_language_forwarded(self):
        await self.registry.call("get_live_scores", {"language": "de"})
        self.assertEqual(self.upstream.last["query"]["lang"], "de")

    async def test_fixtures_path_and_title(self):
        self.upstream.respond("fixtures_v2/EurocupsUEFAChampionsLeague_small.json", body="[]")
        result = await self.registry.call("get_fixtures", {"competition": "EurocupsUEFAChampionsLeague_small"})

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, "Fixtures for EurocupsUEFAChampionsLeague_small:\n\n[]")

    async def test_league_fixtures_path(self):
        await self.registry.call("get_league_fixtures", {"league_key": "NetherlandsEredivisie"})
        self.assertEqual(self.upstream.last["path"], "/footapi/fixtures_v2/NetherlandsEredivisie_small.json")

    async def test_team_and_player_paths(self):
        await self.registry.call("get_team", {"id": "13183"})
        self.assertEqual(self.upstream.last["path"], "/footapi/team_gs/13183.json")
        await self.registry.call("get_player", {"id": "474972"})
        self.assertEqual(self.upstream.last["path"], "/footapi/players/474972.json")

    async def test_match_h2h_default_and_explicit(self):
        print("\n--- Testing get_match h2h ---")
        await self.registry.call("get_match", {"id": "42"})
        self.assertEqual(self.upstream.last["path"], "/footapi/matches/42.json")
        self.assertEqual(self.upstream.last["query"]["h2h"], "1")

        await self.registry.call("get_match", {"id": "42", "h2h": 0})
        self.assertEqual(self.upstream.last["query"]["h2h"], "0")

    async def test_non_finite_numbers_use_defaults(self):
        """JSON Infinity/NaN arguments never escape as exceptions."""
        print("\n--- Testing non-finite number arguments ---")
        arguments = json.loads('{"id": "1", "h2h": Infinity, "version": NaN}')
        await self.registry.call("get_match", arguments)
        self.assertEqual(self.upstream.last["query"]["h2h"], "1")
        self.assertEqual(self.upstream.last["query"]["version"], "2800")

        await self.registry.call("get_day_fixtures", {"date": "01/01/2026", "tzoffset": float("-inf")})
        self.assertEqual(self.upstream.last["query"]["tzoffset"], "0")

    async def test_day_fixtures_query(self):
        await self.registry.call("get_day_fixtures", {"date": "30/08/2025", "tzoffset": 120})
        self.assertEqual(self.upstream.last["path"], "/footapi/fixtures/feed_matches_aggregated.json")
        self.assertEqual(self.upstream.last["query"], {
            "date": "30/08/2025",
            "tzoffset": "120",
            "lang": "en",
            "version": "2800",
        })

    async def test_search_country(self):
        print("\n--- Testing search country filter ---")
        self.upstream.respond("search_v3", body='{"teams":[]}')
        result = await self.registry.call("search", {"q": "Ajax"})
        self.assertTrue(result.text.startswith("Search results for 'Ajax':"))
        self.assertNotIn("country", self.upstream.last["query"])

        await self.registry.call("search", {"q": "Ajax", "country": "Netherlands"})
        self.assertEqual(self.upstream.last["query"]["country"], "Netherlands")

    async def test_upstream_error_is_relayed(self):
        result = await self.registry.call("get_team", {"id": "999"})
        self.assertTrue(result.is_error)
        self.assertIn("404", result.text)
        self.assertIn("not found", result.text)

    async def test_missing_required_id_hits_upstream_with_empty_segment(self):
        result = await self.registry.call("get_player", {})
        self.assertTrue(result.is_error)
        self.assertEqual(self.upstream.last["path"], "/footapi/players/.json")

    async def test_identifier_is_escaped(self):
        await self.registry.call("get_team", {"id": "a/b"})
        self.assertEqual(self.upstream.last["raw_path"].split("?")[0], "/footapi/team_gs/a%2Fb.json")

    async def test_team_image(self):
        print("\n--- Testing get_team_image ---")
        self.upstream.respond("images/teams_gs/13183.png", content_type="image/png")
        result = await self.registry.call("get_team_image", {"id": "13183"})
        self.assertFalse(result.is_error)
        self.assertIn(f"{self.upstream.base_url}/images/teams_gs/13183.png", result.text)

        result = await self.registry.call("get_team_image", {"id": "404404"})
        self.assertTrue(result.is_error)
        self.assertIn("404404", result.text)
        self.assertIn("404", result.text)

    async def test_unknown_tool(self):
        result = await self.registry.call("get_standings", {})
        self.assertTrue(result.is_error)
        self.assertIn("get_standings", result.text)


if __name__ == '__main__':
    unittest.main()
