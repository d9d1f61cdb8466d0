"""HTTP client for the upstream football data API.

This module provides the UpstreamClient class which issues one request per
tool call and converts the response into a ToolResult.
"""

import asyncio
import json
import logging

import aiohttp

from .models import FOOTAPI_BASE_URL, USER_AGENT, HTTPMethod, ToolResult, UpstreamRequest

GET_TIMEOUT = 30.0
HEAD_TIMEOUT = 15.0


class UpstreamClient:
    """Forwards tool calls to the upstream API

    Every call opens its own session, sends a single request and never
    retries. Failures are returned as error results rather than raised.

    Args:
        base_url: Upstream API base URL
        user_agent: User-Agent header sent with every request
    """

    def __init__(self, base_url: str = FOOTAPI_BASE_URL, user_agent: str = USER_AGENT):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def _request(self, url: str, method: HTTPMethod, timeout: float) -> UpstreamRequest:
        return UpstreamRequest(
            url=url,
            method=method,
            timeout=timeout,
            headers={"Accept": "application/json", "User-Agent": self.user_agent},
        )

    async def fetch(self, url: str, title: str) -> ToolResult:
        """GET `url` and format the payload under `title`

        Args:
            url: Absolute upstream URL
            title: Heading placed before the payload

        Returns:
            Text result with pretty-printed JSON (or the raw body), or an
            error result on transport failure or a non-2xx status
        """
        request = self._request(url, HTTPMethod.GET, GET_TIMEOUT)
        logging.info(f"[FootAPI] {request.method.value} {request.url}")

        try:
            timeout = aiohttp.ClientTimeout(total=request.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(request.url, headers=request.headers) as response:
                    status = response.status
                    body = await response.read()
        except asyncio.TimeoutError:
            logging.warning(f"[FootAPI] Request to {url} timed out after {request.timeout} seconds")
            return ToolResult.error(f"request failed: timed out after {request.timeout:g}s")
        except aiohttp.ClientError as e:
            logging.warning(f"[FootAPI] Request to {url} failed: {e}")
            return ToolResult.error(f"request failed: {e}")

        text = body.decode("utf-8", errors="replace")
        if not 200 <= status < 300:
            logging.warning(f"[FootAPI] {url} returned {status}")
            return ToolResult.error(f"API error (status {status}): {text}")

        return ToolResult.ok(f"{title}:\n\n{format_payload(text)}")

    async def check_image(self, url: str, team_id: str) -> ToolResult:
        """HEAD `url` to confirm a team logo exists; the image itself is never downloaded"""
        request = self._request(url, HTTPMethod.HEAD, HEAD_TIMEOUT)
        logging.info(f"[FootAPI] {request.method.value} {request.url}")

        try:
            timeout = aiohttp.ClientTimeout(total=request.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.head(request.url, headers=request.headers, allow_redirects=True) as response:
                    status = response.status
        except asyncio.TimeoutError:
            logging.warning(f"[FootAPI] Image check for {url} timed out")
            return ToolResult.error(f"error checking image: timed out after {request.timeout:g}s")
        except aiohttp.ClientError as e:
            logging.warning(f"[FootAPI] Image check for {url} failed: {e}")
            return ToolResult.error(f"error checking image: {e}")

        if not 200 <= status < 300:
            return ToolResult.error(f"image not available (status {status}) for team ID {team_id}")

        return ToolResult.ok(f"Team logo URL for ID {team_id}:\n{url}")


def format_payload(text: str) -> str:
    """Pretty-print `text` if it is JSON, otherwise return it unchanged."""
    try:
        data = json.loads(text)
    except ValueError:
        return text
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)


__all__ = [
    "UpstreamClient",
    "format_payload",
    "GET_TIMEOUT",
    "HEAD_TIMEOUT",
]
