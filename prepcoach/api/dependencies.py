"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import Header, HTTPException

from prepcoach.config.settings import get_settings
from prepcoach.core.interview_orchestrator import InterviewOrchestrator
from prepcoach.core.provider_registry import ProviderRegistry
from prepcoach.core.session_store import InMemorySessionStore


class SessionLocks:
    """One asyncio.Lock per session id, so requests on a session run one at a time."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, session_id: str):
        """Serialise the body against other holders; the entry is dropped once unused."""
        lock = self._locks.setdefault(session_id, asyncio.Lock())
        self._holders[session_id] = self._holders.get(session_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[session_id] -= 1
            if not self._holders[session_id]:
                del self._holders[session_id]
                del self._locks[session_id]


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_registry: ProviderRegistry | None = None
_orchestrator: InterviewOrchestrator | None = None
_session_locks: SessionLocks | None = None


def get_registry() -> ProviderRegistry:
    """Get the provider registry singleton, resolved once from settings."""
    global _registry

    if _registry is None:
        _registry = ProviderRegistry.from_settings(get_settings())

    return _registry


def get_orchestrator() -> InterviewOrchestrator:
    """
    Get the interview orchestrator singleton.

    Lazily initializes the registry and the in-memory session store.
    """
    global _orchestrator

    if _orchestrator is None:
        _orchestrator = InterviewOrchestrator(
            registry=get_registry(),
            store=InMemorySessionStore(),
            settings=get_settings(),
        )

    return _orchestrator


def get_session_locks() -> SessionLocks:
    """Get the per-session lock registry."""
    global _session_locks

    if _session_locks is None:
        _session_locks = SessionLocks()

    return _session_locks


def get_owner_id(x_user_id: str | None = Header(default=None)) -> str:
    """Identify the caller from the X-User-Id header."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


async def cleanup():
    """Cleanup resources on shutdown."""
    global _registry, _orchestrator, _session_locks

    if _registry:
        await _registry.close()

    _registry = None
    _orchestrator = None
    _session_locks = None
