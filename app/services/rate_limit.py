from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Protocol

import redis

from app.core.config import settings

_LOG = logging.getLogger("app.rate_limit")

KEY_PREFIX = "storefront:rl"


@dataclass
class RateLimitResult:
    allowed: bool
    retry_after_seconds: int
    current_value: int
    limit: int

    @property
    def remaining(self) -> int:
        return max(self.limit - self.current_value, 0)


class RateLimiter(Protocol):
    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        ...


class InMemoryRateLimiter:
    def __init__(self):
        self._windows: dict[str, tuple[int, datetime]] = {}
        self._lock = Lock()

    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        now = datetime.now(timezone.utc)
        with self._lock:
            count, resets_at = self._windows.get(key, (0, now))
            if resets_at <= now:
                count = 0
                resets_at = now + timedelta(seconds=max(int(window_seconds), 1))
            count += 1
            self._windows[key] = (count, resets_at)
            retry_after = max(0, int((resets_at - now).total_seconds()))
        return RateLimitResult(allowed=count <= limit, retry_after_seconds=retry_after, current_value=count, limit=limit)


class RedisRateLimiter:
    def __init__(self, client: redis.Redis):
        self.client = client

    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        window = int(max(window_seconds, 1))
        pipe = self.client.pipeline()
        pipe.incr(key)
        pipe.ttl(key)
        count, ttl = pipe.execute()
        count = int(count)
        if count == 1 or int(ttl) < 0:
            self.client.expire(key, window)
            ttl = window
        return RateLimitResult(allowed=count <= limit, retry_after_seconds=int(ttl), current_value=count, limit=limit)


_cached_limiter: RateLimiter | None = None


def _build_limiter() -> RateLimiter:
    try:
        client = redis.Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=0.4,
            socket_connect_timeout=0.4,
        )
        client.ping()
        return RedisRateLimiter(client)
    except redis.RedisError:
        _LOG.warning("Redis limiter unavailable; fallback to in-memory limiter")
        return InMemoryRateLimiter()


def get_rate_limiter() -> RateLimiter:
    global _cached_limiter
    if _cached_limiter is None:
        _cached_limiter = _build_limiter()
    return _cached_limiter


def set_rate_limiter(limiter: RateLimiter | None) -> None:
    global _cached_limiter
    _cached_limiter = limiter


def client_rate_key(client_host: str | None) -> str:
    host = str(client_host or "").strip() or "unknown"
    return f"{KEY_PREFIX}:{host}"


def hit_client_window(client_host: str | None) -> RateLimitResult:
    return get_rate_limiter().hit(
        client_rate_key(client_host),
        limit=settings.RATE_LIMIT_MAX_REQUESTS,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
