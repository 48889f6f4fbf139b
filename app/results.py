from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel

from app.schemas.business import BusinessInfo

DEFAULT_SESSION = "default"


class Session(BaseModel):
    session_id: str
    updated_at: datetime
    results: list[BusinessInfo] = []


class ResultStore:
    def __init__(self, max_sessions: int = 1000) -> None:
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions

    def _evict(self) -> None:
        if len(self._sessions) <= self._max_sessions:
            return
        # Drop the least recently updated sessions first
        candidates = sorted(self._sessions.values(), key=lambda s: s.updated_at)
        while len(self._sessions) > self._max_sessions and candidates:
            self._sessions.pop(candidates.pop(0).session_id, None)

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def get_results(self, session_id: str) -> list[BusinessInfo]:
        if session := self._sessions.get(session_id):
            return list(session.results)
        return []

    def prepend(self, session_id: str, businesses: list[BusinessInfo]) -> int:
        """Put a new block of results in front of the session's list. Returns the new total."""
        if not businesses:
            return len(self.get_results(session_id))

        now = datetime.now(timezone.utc)
        session = self._sessions.get(session_id)
        if session is None:
            session = Session(session_id=session_id, updated_at=now)
            self._sessions[session_id] = session

        session.results = [*businesses, *session.results]
        session.updated_at = now
        self._evict()
        return len(session.results)

    def clear(self, session_id: str) -> int:
        session = self._sessions.get(session_id)
        if session is None:
            return 0
        cleared = len(session.results)
        session.results = []
        session.updated_at = datetime.now(timezone.utc)
        return cleared
