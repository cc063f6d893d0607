"""
Fixed-window rate limiting per client address.

Counters live in process memory and reset at the end of each window.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


@dataclass
class Window:
    """Request count for one client in the current window."""

    started_at: float
    count: int = 0


class FixedWindowLimiter:
    """
    Allow ``limit`` hits per key in each window of ``window_seconds``.

    A key's window starts on its first hit.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, Window] = {}

    def hit(self, key: str) -> tuple[bool, int]:
        """
        Record one request for ``key``.

        Returns:
            Tuple of (allowed, seconds until the window resets)
        """
        now = self._clock()
        window = self._windows.get(key)
        if window is None or now - window.started_at >= self.window_seconds:
            self._prune(now)
            window = Window(started_at=now)
            self._windows[key] = window

        retry_after = max(1, int(window.started_at + self.window_seconds - now))
        if window.count >= self.limit:
            return False, retry_after

        window.count += 1
        return True, retry_after

    def reset(self) -> None:
        self._windows.clear()

    def _prune(self, now: float) -> None:
        expired = [
            key for key, w in self._windows.items()
            if now - w.started_at >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests over the limit with 429 and a JSON error body."""

    def __init__(self, app: ASGIApp, limiter: FixedWindowLimiter) -> None:
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client_address = request.client.host if request.client else "unknown"
        allowed, retry_after = self.limiter.hit(client_address)
        if not allowed:
            logger.warning("Rate limit exceeded for %s", client_address)
            return JSONResponse(
                status_code=429,
                content={
                    "success": False,
                    "error": "RATE_LIMITED",
                    "message": "Too many requests, please try again later",
                },
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)
