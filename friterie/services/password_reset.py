"""One-time password reset tokens."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from friterie.services.kv_store import InMemoryStore, KeyValueStore
from friterie.utils.time import Clock, utc_now

logger = logging.getLogger(__name__)

TOKEN_TTL: timedelta = timedelta(hours=1)
SWEEP_INTERVAL: timedelta = timedelta(minutes=10)


@dataclass(frozen=True)
class ResetToken:
    token: str
    username: str
    expires_at: datetime


class ResetTokenStore:
    """Issue and validate reset tokens; a user may hold several at once."""

    sweep_interval: timedelta = SWEEP_INTERVAL

    def __init__(self, store: KeyValueStore[ResetToken] | None = None, clock: Clock = utc_now) -> None:
        self._store: KeyValueStore[ResetToken] = store if store is not None else InMemoryStore()
        self._clock = clock

    def generate(self, username: str) -> str:
        token = secrets.token_hex(32)
        self._store.set(token, ResetToken(token=token, username=username, expires_at=self._clock() + TOKEN_TTL))
        return token

    def validate(self, token: str) -> str | None:
        """Return the token's username, dropping the token if it has expired."""
        entry = self._store.get(token)
        if entry is None:
            return None
        if entry.expires_at < self._clock():
            self._store.delete(token)
            return None
        return entry.username

    def consume(self, token: str) -> bool:
        """Delete the token. Call only after it was validated and used."""
        return self._store.delete(token)

    def sweep(self, now: datetime | None = None) -> int:
        cutoff = now or self._clock()
        removed = self._store.sweep(lambda entry: entry.expires_at < cutoff)
        if removed:
            logger.debug("[SWEEP] removed %s expired reset tokens", removed)
        return removed

    def __len__(self) -> int:
        return len(self._store)
