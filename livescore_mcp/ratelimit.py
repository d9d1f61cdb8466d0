"""Per-IP token bucket rate limiting for the MCP message endpoint.

This module provides the RateLimiter class, which keeps one token bucket per
client IP and sweeps idle entries, and RateLimitMiddleware, an ASGI wrapper
that rejects requests once a client's bucket is empty.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

# 30 requests/min per IP, burst of 10
DEFAULT_RATE = 0.5
DEFAULT_BURST = 10
IDLE_TIMEOUT = 10 * 60
SWEEP_INTERVAL = 5 * 60
RETRY_AFTER = 60


class TokenBucket:
    """Token bucket that starts full and refills continuously

    Args:
        rate: Tokens added per second
        capacity: Maximum number of tokens (the burst size)
        now: Current clock reading
    """

    def __init__(self, rate: float, capacity: int, now: float):
        self.rate = rate
        self.capacity = capacity
        self.tokens = float(capacity)
        self.updated = now
        self._lock = threading.Lock()

    def allow(self, now: float) -> bool:
        """Consume one token if available"""
        with self._lock:
            elapsed = max(0.0, now - self.updated)
            self.tokens = min(float(self.capacity), self.tokens + elapsed * self.rate)
            self.updated = now
            if self.tokens >= 1.0:
                self.tokens -= 1.0
                return True
            return False


@dataclass
class RateLimitEntry:
    bucket: TokenBucket
    last_seen: float


class RateLimiter:
    """Tracks a token bucket per client IP

    A single lock guards the IP map for both the per-request path and the
    idle sweep.

    Args:
        rate: Tokens refilled per second
        burst: Bucket capacity
        idle_timeout: Seconds without requests after which an entry is swept
        sweep_interval: Seconds between sweeps in run_sweeper
        clock: Monotonic clock, injectable for tests
    """

    def __init__(self, rate: float = DEFAULT_RATE, burst: int = DEFAULT_BURST,
                 idle_timeout: float = IDLE_TIMEOUT, sweep_interval: float = SWEEP_INTERVAL,
                 clock: Callable[[], float] = time.monotonic):
        self.rate = rate
        self.burst = burst
        self.idle_timeout = idle_timeout
        self.sweep_interval = sweep_interval
        self.clock = clock
        self._visitors: Dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    def bucket_for(self, ip: str) -> TokenBucket:
        now = self.clock()
        with self._lock:
            entry = self._visitors.get(ip)
            if entry is None:
                entry = RateLimitEntry(bucket=TokenBucket(self.rate, self.burst, now), last_seen=now)
                self._visitors[ip] = entry
            else:
                entry.last_seen = now
            return entry.bucket

    def allow(self, ip: str) -> bool:
        return self.bucket_for(ip).allow(self.clock())

    def sweep(self) -> int:
        """Drop entries idle for longer than idle_timeout

        Returns:
            Number of entries removed
        """
        now = self.clock()
        with self._lock:
            idle = [ip for ip, entry in self._visitors.items() if now - entry.last_seen > self.idle_timeout]
            for ip in idle:
                del self._visitors[ip]
        if idle:
            logging.info(f"[RateLimit] Swept {len(idle)} idle clients")
        return len(idle)

    async def run_sweeper(self) -> None:
        """Sweep forever; cancel the task to stop it"""
        while True:
            await asyncio.sleep(self.sweep_interval)
            self.sweep()

    def __len__(self) -> int:
        with self._lock:
            return len(self._visitors)

    def __contains__(self, ip: str) -> bool:
        with self._lock:
            return ip in self._visitors


def client_ip(scope: Scope) -> str:
    """Client IP from the connection, overridden by X-Forwarded-For when present"""
    forwarded = Headers(scope=scope).get("x-forwarded-for")
    if forwarded:
        return forwarded
    client = scope.get("client")
    return client[0] if client else ""


class RateLimitMiddleware:
    """ASGI middleware that rejects requests from clients over their rate

    Args:
        app: Wrapped ASGI application
        limiter: RateLimiter holding the per-IP buckets
    """

    def __init__(self, app: ASGIApp, limiter: RateLimiter):
        self.app = app
        self.limiter = limiter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        ip = client_ip(scope)
        if not self.limiter.allow(ip):
            logging.warning(f"[RateLimit] Rate limit exceeded for {ip} on {scope.get('path', '')}")
            response = JSONResponse(
                {"error": "rate limit exceeded", "retry_after": RETRY_AFTER},
                status_code=429,
                headers={"Retry-After": str(RETRY_AFTER)},
            )
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)


__all__ = [
    "TokenBucket",
    "RateLimitEntry",
    "RateLimiter",
    "RateLimitMiddleware",
    "client_ip",
]
