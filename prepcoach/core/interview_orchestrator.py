"""
Interview Orchestrator - State machine for managing interview lifecycle.

This is the central coordinator for the entire interview process.
It validates requests, drives question generation and evaluation
through the provider registry, and persists every step so that partial
progress survives provider failures.
"""

import logging

from prepcoach.config.settings import Settings, get_settings
from prepcoach.core.analytics import compute_analytics
from prepcoach.core.errors import (
    NotOwnerError,
    PendingStepError,
    SessionAlreadyCompletedError,
    SessionNotFoundError,
    ValidationError,
)
from prepcoach.core.evaluation_engine import EvaluationEngine
from prepcoach.core.provider_registry import ProviderRegistry
from prepcoach.core.providers import QuestionRequest
from prepcoach.core.session_store import InMemorySessionStore, SessionStore
from prepcoach.models.analytics import InterviewAnalytics
from prepcoach.models.interview import (
    AnswerOutcome,
    InterviewSession,
    InterviewSetup,
    InterviewStart,
    SessionStatus,
    SessionSummary,
)
from prepcoach.models.roles import Difficulty, InterviewType, Role
from prepcoach.prompts.evaluator import EvaluatorPrompts
from prepcoach.prompts.interviewer import InterviewerPrompts

logger = logging.getLogger(__name__)


class InterviewOrchestrator:
    """
    Manages the interview lifecycle.

    States:
        in_progress → completed
        in_progress → abandoned   (external idle cleanup only)

    Within in_progress a session alternates between awaiting an answer
    and, after a failed provider step, a pending step that ``resume``
    retries. The orchestrator never retries on its own.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        store: SessionStore | None = None,
        settings: Settings | None = None,
        evaluation_engine: EvaluationEngine | None = None,
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            registry: Provider registry (tier selection and fallback)
            store: Session storage
            settings: Application settings (timeouts, prompt bounds)
            evaluation_engine: Evaluation engine; built from the registry if omitted
        """
        self.settings = settings if settings is not None else get_settings()
        self.registry = registry
        self.store = store if store is not None else InMemorySessionStore()
        self.prompts = InterviewerPrompts(
            question_max_chars=self.settings.context_question_max_chars,
            answer_max_chars=self.settings.context_answer_max_chars,
        )
        self.evaluation_engine = evaluation_engine if evaluation_engine is not None else EvaluationEngine(
            registry,
            EvaluatorPrompts(
                recent_turns=self.settings.evaluation_recent_turns,
                turn_max_chars=self.settings.evaluation_turn_max_chars,
                prompt_max_chars=self.settings.evaluation_prompt_max_chars,
            ),
        )

    # =========================================================================
    # SESSION START
    # =========================================================================

    def _build_setup(
        self,
        role: Role | str,
        difficulty: Difficulty | str,
        interview_type: InterviewType | str | None,
        total_questions: int | None,
    ) -> InterviewSetup:
        try:
            return InterviewSetup(
                role=Role(role),
                difficulty=Difficulty(difficulty),
                interview_type=InterviewType(interview_type or InterviewType.TECHNICAL),
                total_questions=(
                    total_questions if total_questions is not None
                    else self.settings.default_total_questions
                ),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid interview configuration: {e}") from e

    async def start(
        self,
        owner_id: str,
        role: Role | str,
        difficulty: Difficulty | str,
        interview_type: InterviewType | str | None = None,
        total_questions: int | None = None,
    ) -> InterviewStart:
        """
        Create a session and ask its first question.

        Nothing is persisted unless a first question was produced.

        Raises:
            ValidationError: Unknown role, difficulty, type, or bad total
            QuestionGenerationError: No tier produced a question in time
        """
        if not owner_id or not owner_id.strip():
            raise ValidationError("Owner id is required")

        setup = self._build_setup(role, difficulty, interview_type, total_questions)

        request = QuestionRequest(
            system_prompt=self.prompts.system_prompt(setup.role, setup.difficulty, setup.interview_type),
            user_prompt=self.prompts.first_question_prompt(setup.role, setup.difficulty, setup.interview_type),
            role=setup.role,
            difficulty=setup.difficulty,
            interview_type=setup.interview_type,
            question_number=1,
        )
        text = await self.registry.generate_question(
            request, timeout=self.settings.first_question_timeout_seconds
        )

        session = InterviewSession(owner_id=owner_id, setup=setup)
        session.add_question(text)
        await self.store.save(session)

        logger.info(
            f"Started interview {session.id}: {setup.role.value}/{setup.difficulty.value}/"
            f"{setup.interview_type.value}, {setup.total_questions} questions"
        )

        return InterviewStart(
            session_id=session.id,
            first_question=text,
            question_number=1,
            total_questions=setup.total_questions,
            status=session.status,
        )

    # =========================================================================
    # ANSWERS
    # =========================================================================

    async def submit_answer(
        self,
        session_id: str,
        owner_id: str,
        answer_text: str,
        elapsed_seconds: float = 0.0,
        was_voice_input: bool = False,
    ) -> AnswerOutcome:
        """
        Record an answer, then ask the next question or evaluate.

        The answer is saved before any provider call, so it survives a
        failed step; ``resume`` retries that step later.

        Raises:
            SessionNotFoundError, NotOwnerError: Lookup failures
            SessionAlreadyCompletedError: The session is finished
            PendingStepError: The current question is already answered
            ValidationError: Empty answer or abandoned session
            QuestionGenerationError, EvaluationError: Provider step failed
        """
        session = await self._load(session_id, owner_id)
        self._ensure_active(session)

        if session.has_pending_step:
            raise PendingStepError(
                f"Question {session.current_question_number} is already answered; resume the interview"
            )

        text = (answer_text or "").strip()
        if not text:
            raise ValidationError("Answer is required")

        session.add_answer(text, elapsed_seconds=elapsed_seconds, was_voice_input=was_voice_input)
        await self.store.save(session)
        logger.debug(f"Session {session.id}: answer {session.current_question_number} recorded")

        return await self._advance(session)

    async def resume(self, session_id: str, owner_id: str) -> AnswerOutcome:
        """
        Retry the step that failed after the last recorded answer.

        Raises:
            ValidationError: Nothing is pending
        """
        session = await self._load(session_id, owner_id)
        self._ensure_active(session)

        if not session.has_pending_step:
            raise ValidationError("Interview has no pending step to resume")

        logger.info(f"Resuming session {session.id} at question {session.current_question_number}")
        return await self._advance(session)

    async def _advance(self, session: InterviewSession) -> AnswerOutcome:
        if session.is_last_question:
            return await self._finish(session)

        next_number = session.current_question_number + 1
        last_question = session.get_current_question()
        last_answer = session.get_last_answer()

        request = QuestionRequest(
            system_prompt=self.prompts.system_prompt(session.role, session.difficulty, session.interview_type),
            user_prompt=self.prompts.context_prompt(
                last_question.text,
                last_answer.text,
                session.role,
                session.difficulty,
                session.interview_type,
                next_number,
            ),
            role=session.role,
            difficulty=session.difficulty,
            interview_type=session.interview_type,
            question_number=next_number,
        )
        text = await self.registry.generate_question(
            request, timeout=self.settings.next_question_timeout_seconds
        )

        question = session.add_question(text)
        await self.store.save(session)

        return AnswerOutcome(
            completed=False,
            next_question=question.text,
            question_number=question.number,
            total_questions=session.total_questions,
        )

    async def _finish(self, session: InterviewSession) -> AnswerOutcome:
        evaluation = await self.evaluation_engine.evaluate(
            session, timeout=self.settings.evaluation_timeout_seconds
        )

        session.complete(evaluation)
        await self.store.save(session)
        logger.info(f"Interview {session.id} completed with score {session.score}")

        return AnswerOutcome(
            completed=True,
            total_questions=session.total_questions,
            evaluation=evaluation,
            score=session.score,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def get_session(self, session_id: str, owner_id: str) -> InterviewSession:
        """Get a session owned by the caller."""
        return await self._load(session_id, owner_id)

    async def list_sessions(self, owner_id: str) -> list[SessionSummary]:
        """List the caller's sessions, newest first."""
        sessions = await self.store.list_by_owner(owner_id)
        sessions.sort(key=lambda s: s.created_at, reverse=True)
        return [s.to_summary() for s in sessions]

    async def get_analytics(self, owner_id: str) -> InterviewAnalytics:
        """Aggregate the caller's completed sessions."""
        return compute_analytics(await self.store.list_by_owner(owner_id))

    # =========================================================================
    # CLEANUP HOOK
    # =========================================================================

    async def abandon(self, session_id: str) -> InterviewSession:
        """
        Mark an in-progress session abandoned.

        Called by external idle cleanup; finished sessions are left as they are.

        Raises:
            SessionNotFoundError: Unknown id
        """
        session = await self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        if session.status == SessionStatus.IN_PROGRESS:
            session.status = SessionStatus.ABANDONED
            await self.store.save(session)
            logger.info(f"Session {session_id} abandoned")

        return session

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _load(self, session_id: str, owner_id: str) -> InterviewSession:
        session = await self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        if session.owner_id != owner_id:
            logger.warning(f"Owner mismatch on session {session_id}")
            raise NotOwnerError(session_id)
        return session

    def _ensure_active(self, session: InterviewSession) -> None:
        if session.status == SessionStatus.COMPLETED:
            raise SessionAlreadyCompletedError(session.id)
        if session.status == SessionStatus.ABANDONED:
            raise ValidationError(f"Interview was abandoned: {session.id}")
