"""
Interview API endpoints

Handles interview session lifecycle:
- Starting interviews
- Submitting answers and resuming failed steps
- Reading sessions, history, and analytics
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from prepcoach.api.dependencies import (
    SessionLocks,
    get_orchestrator,
    get_owner_id,
    get_session_locks,
)
from prepcoach.core.interview_orchestrator import InterviewOrchestrator
from prepcoach.models.analytics import InterviewAnalytics
from prepcoach.models.interview import (
    AnswerOutcome,
    InterviewSession,
    InterviewStart,
    SessionSummary,
)

router = APIRouter()


# ============================================================================
# REQUEST MODELS
# ============================================================================

class StartRequest(BaseModel):
    """Request model for starting an interview."""
    role: str
    difficulty: str
    interview_type: str = "Technical"
    total_questions: int | None = None


class AnswerRequest(BaseModel):
    """Request model for submitting an answer."""
    answer: str
    elapsed_seconds: float = Field(default=0.0, ge=0)
    was_voice_input: bool = False


# ============================================================================
# REST ENDPOINTS
# ============================================================================

@router.post("/start", response_model=InterviewStart, status_code=201)
async def start_interview(
    request: StartRequest,
    owner_id: str = Depends(get_owner_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> InterviewStart:
    """
    Start a new interview.

    Creates the session and returns its first question.
    """
    return await orchestrator.start(
        owner_id=owner_id,
        role=request.role,
        difficulty=request.difficulty,
        interview_type=request.interview_type,
        total_questions=request.total_questions,
    )


@router.get("", response_model=list[SessionSummary])
async def list_interviews(
    owner_id: str = Depends(get_owner_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> list[SessionSummary]:
    """List the caller's interviews, newest first."""
    return await orchestrator.list_sessions(owner_id)


@router.get("/analytics/overview", response_model=InterviewAnalytics)
async def get_analytics(
    owner_id: str = Depends(get_owner_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> InterviewAnalytics:
    """Performance overview across the caller's completed interviews."""
    return await orchestrator.get_analytics(owner_id)


@router.post("/{session_id}/answer", response_model=AnswerOutcome)
async def submit_answer(
    session_id: str,
    request: AnswerRequest,
    owner_id: str = Depends(get_owner_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
    locks: SessionLocks = Depends(get_session_locks),
) -> AnswerOutcome:
    """
    Submit an answer to the current question.

    Returns the next question, or the evaluation after the final answer.
    """
    async with locks.hold(session_id):
        return await orchestrator.submit_answer(
            session_id=session_id,
            owner_id=owner_id,
            answer_text=request.answer,
            elapsed_seconds=request.elapsed_seconds,
            was_voice_input=request.was_voice_input,
        )


@router.post("/{session_id}/resume", response_model=AnswerOutcome)
async def resume_interview(
    session_id: str,
    owner_id: str = Depends(get_owner_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
    locks: SessionLocks = Depends(get_session_locks),
) -> AnswerOutcome:
    """Retry the question or evaluation step that failed after the last answer."""
    async with locks.hold(session_id):
        return await orchestrator.resume(session_id=session_id, owner_id=owner_id)


@router.get("/{session_id}", response_model=InterviewSession)
async def get_interview(
    session_id: str,
    owner_id: str = Depends(get_owner_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> InterviewSession:
    """Get the full session record."""
    return await orchestrator.get_session(session_id, owner_id)
