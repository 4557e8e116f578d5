"""Per-IP attempt limiter for the auth endpoints.

Each IP gets a 15 minute window of 5 attempts. The attempt after the fifth is
refused and blocks the IP for 30 minutes. Only a successful login resets the
counter, so failures accumulate within a window.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from fastapi import Request

from friterie.services.kv_store import InMemoryStore, KeyValueStore
from friterie.utils.time import Clock, utc_now

logger = logging.getLogger(__name__)

MAX_ATTEMPTS: int = 5
WINDOW: timedelta = timedelta(minutes=15)
BLOCK_DURATION: timedelta = timedelta(minutes=30)
SWEEP_INTERVAL: timedelta = timedelta(minutes=10)
UNKNOWN_IP: str = "unknown"


@dataclass
class RateLimitEntry:
    attempts: int
    reset_at: datetime
    blocked_until: datetime | None = None

    def is_stale(self, now: datetime) -> bool:
        return self.reset_at < now and (self.blocked_until is None or self.blocked_until < now)


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_at: datetime
    retry_after: int | None = None


def client_ip(request: Request) -> str:
    """Resolve the caller IP from proxy headers.

    Direct clients without proxy headers all share the ``"unknown"`` bucket.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return UNKNOWN_IP


class RateLimiter:
    sweep_interval: timedelta = SWEEP_INTERVAL

    def __init__(
        self,
        store: KeyValueStore[RateLimitEntry] | None = None,
        clock: Clock = utc_now,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self._store: KeyValueStore[RateLimitEntry] = store if store is not None else InMemoryStore()
        self._clock = clock
        self.max_attempts = max_attempts

    def _open_window(self, ip: str, now: datetime) -> RateLimitResult:
        entry = RateLimitEntry(attempts=1, reset_at=now + WINDOW)
        self._store.set(ip, entry)
        return RateLimitResult(allowed=True, remaining=self.max_attempts - 1, reset_at=entry.reset_at)

    def check(self, ip: str) -> RateLimitResult:
        """Record one attempt from ``ip`` and say whether it may proceed."""
        now = self._clock()
        entry = self._store.get(ip)
        if entry is None:
            return self._open_window(ip, now)

        if entry.blocked_until is not None and entry.blocked_until > now:
            return RateLimitResult(
                allowed=False,
                remaining=0,
                reset_at=entry.reset_at,
                retry_after=math.ceil((entry.blocked_until - now).total_seconds()),
            )

        if entry.reset_at < now:
            return self._open_window(ip, now)

        if entry.attempts >= self.max_attempts:
            entry.blocked_until = now + BLOCK_DURATION
            self._store.set(ip, entry)
            logger.warning("[RATE] ip=%s blocked for %ss after %s attempts", ip, int(BLOCK_DURATION.total_seconds()), entry.attempts)
            return RateLimitResult(
                allowed=False,
                remaining=0,
                reset_at=entry.reset_at,
                retry_after=math.ceil(BLOCK_DURATION.total_seconds()),
            )

        entry.attempts += 1
        self._store.set(ip, entry)
        return RateLimitResult(allowed=True, remaining=self.max_attempts - entry.attempts, reset_at=entry.reset_at)

    def reset(self, ip: str) -> None:
        self._store.delete(ip)

    def sweep(self, now: datetime | None = None) -> int:
        cutoff = now or self._clock()
        removed = self._store.sweep(lambda entry: entry.is_stale(cutoff))
        if removed:
            logger.debug("[SWEEP] removed %s stale rate-limit entries", removed)
        return removed

    def __len__(self) -> int:
        return len(self._store)
