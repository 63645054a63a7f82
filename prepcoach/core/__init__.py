"""
Core business logic modules for PrepCoach

Contains:
- Interview Orchestrator: Session state machine and bounded timeouts
- Provider Registry: Tier selection and per-call fallback
- Remote / Fallback Providers: Question generation and evaluation backends
- Evaluation Engine: Transcript evaluation and heuristic scoring
- Session Store: Session persistence
- Analytics: Aggregates over completed sessions
"""

from prepcoach.core.interview_orchestrator import InterviewOrchestrator
from prepcoach.core.provider_registry import ProviderRegistry
from prepcoach.core.remote_provider import RemoteProvider
from prepcoach.core.fallback_provider import FallbackProvider
from prepcoach.core.evaluation_engine import EvaluationEngine, HeuristicEvaluator
from prepcoach.core.session_store import InMemorySessionStore, SessionStore
from prepcoach.core.analytics import compute_analytics

__all__ = [
    "InterviewOrchestrator",
    "ProviderRegistry",
    "RemoteProvider",
    "FallbackProvider",
    "EvaluationEngine",
    "HeuristicEvaluator",
    "InMemorySessionStore",
    "SessionStore",
    "compute_analytics",
]
