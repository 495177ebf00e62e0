from __future__ import annotations

import threading
import time
from typing import Dict, Tuple

from fastapi import HTTPException, Request


class RateLimiter:
    """Fixed-window hit counter keyed by arbitrary strings."""

    def __init__(self) -> None:
        self._hits: Dict[str, Tuple[int, float]] = {}
        self._lock = threading.Lock()

    def check(self, key: str, limit: int, window_seconds: int) -> None:
        now = time.time()
        with self._lock:
            count, reset = self._hits.get(key, (0, now + window_seconds))
            if now > reset:
                count = 0
                reset = now + window_seconds
            count += 1
            self._hits[key] = (count, reset)
            if count > limit:
                raise HTTPException(429, "Too many login attempts, please try again later.")

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)


def client_ip(request: Request, trust_proxy: bool = False) -> str:
    """Peer address; ``X-Forwarded-For`` only counts behind a trusted proxy."""
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def rate_limit_ip(request: Request, scope: str, *, limit: int, window_seconds: int) -> None:
    limiter = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        raise RuntimeError("rate limiter not configured")
    settings = getattr(request.app.state, "settings", None)
    trust_proxy = bool(getattr(settings, "trust_proxy", False))
    key = f"{scope}:{client_ip(request, trust_proxy)}"
    limiter.check(key, limit, window_seconds)
