"""LiveScore MCP server: football live scores and fixtures for AI agents over MCP/SSE."""
