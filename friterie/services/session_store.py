"""Admin session store.

Sessions live only in memory and expire after 24 hours, or 30 days when the
admin ticked "remember me". Expiry is checked on every read; the periodic
sweep only reclaims memory for sessions nobody reads again.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from friterie.services.kv_store import InMemoryStore, KeyValueStore
from friterie.utils.time import Clock, utc_now

logger = logging.getLogger(__name__)

SESSION_DURATION: timedelta = timedelta(hours=24)
REMEMBER_ME_DURATION: timedelta = timedelta(days=30)
SWEEP_INTERVAL: timedelta = timedelta(minutes=5)


@dataclass
class Session:
    session_id: str
    username: str
    created_at: datetime
    expires_at: datetime
    remember_me: bool = False

    @property
    def duration(self) -> timedelta:
        return REMEMBER_ME_DURATION if self.remember_me else SESSION_DURATION


class SessionStore:
    """Create, look up, extend and expire admin sessions."""

    sweep_interval: timedelta = SWEEP_INTERVAL

    def __init__(self, store: KeyValueStore[Session] | None = None, clock: Clock = utc_now) -> None:
        self._store: KeyValueStore[Session] = store if store is not None else InMemoryStore()
        self._clock = clock

    def create(self, username: str, remember_me: bool = False) -> str:
        now = self._clock()
        session_id = secrets.token_hex(32)
        session = Session(
            session_id=session_id,
            username=username,
            created_at=now,
            expires_at=now,
            remember_me=remember_me,
        )
        session.expires_at = now + session.duration
        self._store.set(session_id, session)
        return session_id

    def get(self, session_id: str) -> Session | None:
        session = self._store.get(session_id)
        if session is None:
            return None
        if session.expires_at < self._clock():
            self._store.delete(session_id)
            return None
        return session

    def delete(self, session_id: str) -> bool:
        return self._store.delete(session_id)

    def extend(self, session_id: str) -> bool:
        """Slide the expiry of a still-valid session forward by its original duration."""
        session = self.get(session_id)
        if session is None:
            return False
        session.expires_at = self._clock() + session.duration
        self._store.set(session_id, session)
        return True

    def sweep(self, now: datetime | None = None) -> int:
        cutoff = now or self._clock()
        removed = self._store.sweep(lambda session: session.expires_at < cutoff)
        if removed:
            logger.debug("[SWEEP] removed %s expired sessions", removed)
        return removed

    def __len__(self) -> int:
        return len(self._store)
