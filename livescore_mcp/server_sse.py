import asyncio
import contextlib
import logging
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Optional

from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from livescore_mcp.config import Settings
from livescore_mcp.footapi import LiveScoreMCPServer
from livescore_mcp.footapi.resources import SERVER_NAME, SERVER_VERSION
from livescore_mcp.pages import LANDING_HTML, PRIVACY_HTML, ROBOTS_TXT, SITEMAP_XML, TERMS_HTML
from livescore_mcp.ratelimit import RateLimiter, RateLimitMiddleware

STATIC_DIR = Path(__file__).parent / "static"
MESSAGE_PATH = "/message/"


async def health_handler(request: Request) -> JSONResponse:
    """Health check endpoint"""
    return JSONResponse({"status": "ok", "server": SERVER_NAME, "version": SERVER_VERSION})


async def robots_handler(request: Request) -> PlainTextResponse:
    return PlainTextResponse(ROBOTS_TXT)


async def sitemap_handler(request: Request) -> Response:
    return Response(SITEMAP_XML, media_type="application/xml")


async def privacy_handler(request: Request) -> HTMLResponse:
    return HTMLResponse(PRIVACY_HTML)


async def terms_handler(request: Request) -> HTMLResponse:
    return HTMLResponse(TERMS_HTML)


def build_app(settings: Optional[Settings] = None,
              mcp_server: Optional[LiveScoreMCPServer] = None,
              limiter: Optional[RateLimiter] = None) -> Starlette:
    """Build the Starlette application serving MCP over SSE and the static pages

    Args:
        settings: Process settings; read from the environment when omitted
        mcp_server: LiveScoreMCPServer to expose
        limiter: RateLimiter guarding the message endpoint

    Returns:
        Configured Starlette application
    """
    if settings is None:
        settings = Settings.from_env()
    if mcp_server is None:
        mcp_server = LiveScoreMCPServer()
    if limiter is None:
        limiter = RateLimiter()
    server = mcp_server.get_server()
    sse = SseServerTransport(MESSAGE_PATH)

    async def handle_sse(request: Request) -> Response:
        """Open an MCP session over SSE for the lifetime of the connection"""
        logging.info(f"[LiveScoreHTTP] SSE connection from {request.client.host if request.client else '-'}")
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    async def landing_handler(request: Request) -> Response:
        if "text/event-stream" in request.headers.get("accept", ""):
            return await handle_sse(request)
        return HTMLResponse(LANDING_HTML)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        """Run the rate limiter sweep for the lifetime of the application"""
        sweeper = asyncio.create_task(limiter.run_sweeper())
        logging.info(f"[LiveScoreHTTP] LiveScore MCP Server {SERVER_VERSION} started on {settings.host}:{settings.port}")
        logging.info("[LiveScoreHTTP] Available endpoints:")
        logging.info(f"[LiveScoreHTTP]   - GET {settings.public_url}/sse (MCP SSE stream)")
        logging.info(f"[LiveScoreHTTP]   - POST {settings.public_url}{MESSAGE_PATH} (MCP messages, rate limited)")
        logging.info(f"[LiveScoreHTTP]   - GET {settings.public_url}/health (Health check)")
        logging.info(f"[LiveScoreHTTP]   - Tools: {mcp_server.registry.names()}")
        try:
            yield
        finally:
            sweeper.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sweeper
            logging.info("[LiveScoreHTTP] LiveScore MCP Server shutting down...")

    return Starlette(
        routes=[
            Route("/", landing_handler, methods=["GET"]),
            Route("/sse", handle_sse, methods=["GET"]),
            Mount(MESSAGE_PATH, app=RateLimitMiddleware(sse.handle_post_message, limiter)),
            Route("/health", health_handler, methods=["GET"]),
            Route("/robots.txt", robots_handler, methods=["GET"]),
            Route("/sitemap.xml", sitemap_handler, methods=["GET"]),
            Route("/privacy", privacy_handler, methods=["GET"]),
            Route("/terms", terms_handler, methods=["GET"]),
            Mount("/static", app=StaticFiles(directory=STATIC_DIR), name="static"),
        ],
        lifespan=lifespan,
    )


def main() -> None:
    """Main function to start the LiveScore MCP SSE server"""
    settings = Settings.from_env()
    logging.basicConfig(stream=sys.stderr, level=settings.log_level, format='[%(levelname)s] %(message)s')

    app = build_app(settings)

    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

__all__ = [
    "build_app",
    "health_handler",
    "main",
]
