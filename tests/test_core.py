import unittest

from fake_upstream import FakeUpstream
from mcp import types as mcp_types

from livescore_mcp.footapi import LiveScoreMCPServer, ToolCallError, ToolRegistry, UpstreamClient
from livescore_mcp.footapi.resources import INFO_URI, SERVER_INFO, list_resources, read_resource


class TestLiveScoreMCPServer(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.upstream = FakeUpstream()
        await self.upstream.start()
        self.mcp = LiveScoreMCPServer(ToolRegistry(UpstreamClient(self.upstream.base_url)))

    async def asyncTearDown(self):
        await self.upstream.close()

    async def test_list_tools(self):
        tools = self.mcp.list_tools()
        self.assertEqual(len(tools), 10)
        self.assertTrue(all(isinstance(t, mcp_types.Tool) for t in tools))

    async def test_call_tool_returns_text_content(self):
        content = await self.mcp.call_tool("health", {"message": "ping"})
        self.assertEqual(len(content), 1)
        self.assertEqual(content[0].type, "text")
        self.assertEqual(content[0].text, "Echo: ping")

    async def test_error_result_raises(self):
        with self.assertRaises(ToolCallError) as ctx:
            await self.mcp.call_tool("get_team", {"id": "1"})
        self.assertIn("404", str(ctx.exception))

    async def test_call_tool_through_protocol_handler(self):
        """The SDK request handler reports tool errors with isError set."""
        print("\n--- Testing call_tool via MCP request handler ---")
        handler = self.mcp.get_server().request_handlers[mcp_types.CallToolRequest]

        ok = await handler(mcp_types.CallToolRequest(
            method="tools/call",
            params=mcp_types.CallToolRequestParams(name="health", arguments={"message": "ping"}),
        ))
        self.assertFalse(ok.root.isError)
        self.assertEqual(ok.root.content[0].text, "Echo: ping")

        failed = await handler(mcp_types.CallToolRequest(
            method="tools/call",
            params=mcp_types.CallToolRequestParams(name="get_match", arguments={"id": "7"}),
        ))
        self.assertTrue(failed.root.isError)
        self.assertIn("404", failed.root.content[0].text)

    async def test_read_resource_through_protocol_handler(self):
        handler = self.mcp.get_server().request_handlers[mcp_types.ReadResourceRequest]
        result = await handler(mcp_types.ReadResourceRequest(
            method="resources/read",
            params=mcp_types.ReadResourceRequestParams(uri=INFO_URI),
        ))
        contents = result.root.contents
        self.assertEqual(len(contents), 1)
        self.assertEqual(contents[0].text, SERVER_INFO)
        self.assertEqual(contents[0].mimeType, "text/plain")


class TestResources(unittest.TestCase):

    def test_single_info_resource(self):
        resources = list_resources()
        self.assertEqual(len(resources), 1)
        self.assertEqual(str(resources[0].uri).rstrip("/"), INFO_URI)
        self.assertEqual(resources[0].mimeType, "text/plain")

    def test_info_lists_every_tool(self):
        text = read_resource(INFO_URI)
        self.assertTrue(text.startswith("LiveScore MCP Server v1.0.0"))
        for name in ("health", "get_live_scores", "search", "get_team_image"):
            self.assertIn(f"- {name}:", text)

    def test_unknown_resource(self):
        with self.assertRaises(ValueError):
            read_resource("server://other")


if __name__ == '__main__':
    unittest.main()
