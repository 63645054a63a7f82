"""
Session storage for PrepCoach.

The orchestrator only talks to the ``SessionStore`` contract; the bundled
implementation keeps sessions in process memory.
"""

import logging
from abc import ABC, abstractmethod

from prepcoach.models.interview import InterviewSession

logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Persistence contract for interview sessions."""

    @abstractmethod
    async def get(self, session_id: str) -> InterviewSession | None:
        """Load a session, or None if it does not exist."""

    @abstractmethod
    async def save(self, session: InterviewSession) -> None:
        """Insert or replace a session."""

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> list[InterviewSession]:
        """All sessions belonging to one owner, in no particular order."""


class InMemorySessionStore(SessionStore):
    """
    Dict-backed store.

    Sessions are copied on the way in and out, so a caller mutating a
    loaded session never changes stored state without calling ``save``.
    """

    def __init__(self):
        self._sessions: dict[str, InterviewSession] = {}

    async def get(self, session_id: str) -> InterviewSession | None:
        session = self._sessions.get(session_id)
        return session.model_copy(deep=True) if session else None

    async def save(self, session: InterviewSession) -> None:
        self._sessions[session.id] = session.model_copy(deep=True)
        logger.debug(f"Saved session {session.id} ({session.status.value})")

    async def list_by_owner(self, owner_id: str) -> list[InterviewSession]:
        return [
            session.model_copy(deep=True)
            for session in self._sessions.values()
            if session.owner_id == owner_id
        ]

    def __len__(self) -> int:
        return len(self._sessions)
