"""
Interview session and state models for PrepCoach
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from prepcoach.models.evaluation import EvaluationSource, InterviewEvaluation
from prepcoach.models.roles import Difficulty, InterviewType, Role


def utc_now() -> datetime:
    """Timezone-aware current time used for every session timestamp."""
    return datetime.now(timezone.utc)


class SessionStatus(str, Enum):
    """Interview session lifecycle states."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"  # Set by external idle cleanup only


class Speaker(str, Enum):
    """Who produced a transcript entry."""

    INTERVIEWER = "interviewer"
    CANDIDATE = "candidate"


class InterviewSetup(BaseModel):
    """Immutable session configuration chosen by the candidate."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Target role for the interview")
    difficulty: Difficulty = Field(..., description="Difficulty level")
    interview_type: InterviewType = Field(
        default=InterviewType.TECHNICAL,
        description="Technical, behavioral, or mixed interview"
    )
    total_questions: int = Field(
        default=7, ge=5, le=10,
        description="Number of questions in the session"
    )


class QuestionRecord(BaseModel):
    """A question asked by the interviewer."""

    text: str
    number: int = Field(..., ge=1)
    asked_at: datetime = Field(default_factory=utc_now)
    context: str = ""


class AnswerRecord(BaseModel):
    """A candidate answer to one question."""

    text: str
    number: int = Field(..., ge=1)
    submitted_at: datetime = Field(default_factory=utc_now)
    elapsed_seconds: float = Field(default=0.0, ge=0)
    was_voice_input: bool = False


class TranscriptEntry(BaseModel):
    """One turn of the interview conversation."""

    speaker: Speaker
    text: str
    timestamp: datetime = Field(default_factory=utc_now)


class InterviewSession(BaseModel):
    """Complete interview session state."""

    # Identification
    id: str = Field(default_factory=lambda: str(uuid4()))
    owner_id: str

    # Setup
    setup: InterviewSetup

    # State
    status: SessionStatus = Field(default=SessionStatus.IN_PROGRESS)
    current_question_number: int = Field(default=1, ge=1)

    # Timing
    created_at: datetime = Field(default_factory=utc_now)
    completed_at: datetime | None = None

    # Questions & Answers
    questions: list[QuestionRecord] = Field(default_factory=list)
    answers: list[AnswerRecord] = Field(default_factory=list)
    transcript: list[TranscriptEntry] = Field(default_factory=list)

    # Result
    evaluation: InterviewEvaluation | None = None
    score: int | None = Field(default=None, ge=0, le=100)
    provider: EvaluationSource | None = None

    @property
    def role(self) -> Role:
        return self.setup.role

    @property
    def difficulty(self) -> Difficulty:
        return self.setup.difficulty

    @property
    def interview_type(self) -> InterviewType:
        return self.setup.interview_type

    @property
    def total_questions(self) -> int:
        return self.setup.total_questions

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    @property
    def is_last_question(self) -> bool:
        """Whether the current question is the final one."""
        return self.current_question_number >= self.setup.total_questions

    @property
    def awaiting_answer(self) -> bool:
        """The current question has been asked but not answered."""
        return (
            self.status == SessionStatus.IN_PROGRESS
            and len(self.questions) > 0
            and len(self.answers) == len(self.questions) - 1
        )

    @property
    def has_pending_step(self) -> bool:
        """
        The current question is answered, but neither the next question
        nor the final evaluation has been produced yet.
        """
        return (
            self.status == SessionStatus.IN_PROGRESS
            and len(self.questions) > 0
            and len(self.answers) == len(self.questions)
        )

    def add_question(self, text: str) -> QuestionRecord:
        """
        Append the next question and its transcript entry.

        The first question is numbered 1; every later question advances
        current_question_number by one.
        """
        if self.status != SessionStatus.IN_PROGRESS:
            raise ValueError(f"Cannot add a question to a {self.status.value} session")

        if not self.questions:
            number = 1
            context = "Initial question"
        else:
            if len(self.answers) != len(self.questions):
                raise ValueError("Previous question has not been answered")
            number = self.current_question_number + 1
            if number > self.setup.total_questions:
                raise ValueError("Session already reached its final question")
            context = f"Follow-up to question {number - 1}"

        question = QuestionRecord(text=text, number=number, context=context)
        self.questions.append(question)
        self.current_question_number = number
        self.transcript.append(
            TranscriptEntry(speaker=Speaker.INTERVIEWER, text=text, timestamp=question.asked_at)
        )
        return question

    def add_answer(
        self,
        text: str,
        elapsed_seconds: float = 0.0,
        was_voice_input: bool = False,
    ) -> AnswerRecord:
        """Record the candidate's answer to the current question."""
        if not self.awaiting_answer:
            raise ValueError("Session is not awaiting an answer")

        answer = AnswerRecord(
            text=text,
            number=self.current_question_number,
            elapsed_seconds=max(0.0, elapsed_seconds or 0.0),
            was_voice_input=was_voice_input,
        )
        self.answers.append(answer)
        self.transcript.append(
            TranscriptEntry(speaker=Speaker.CANDIDATE, text=text, timestamp=answer.submitted_at)
        )
        return answer

    def complete(self, evaluation: InterviewEvaluation) -> None:
        """Freeze the session with its final evaluation."""
        if len(self.answers) != self.setup.total_questions:
            raise ValueError("Cannot complete a session with unanswered questions")

        self.evaluation = evaluation
        self.score = evaluation.overall_score
        self.provider = evaluation.source
        self.status = SessionStatus.COMPLETED
        self.completed_at = utc_now()

    def get_current_question(self) -> QuestionRecord | None:
        """Get the most recently asked question."""
        return self.questions[-1] if self.questions else None

    def get_last_answer(self) -> AnswerRecord | None:
        return self.answers[-1] if self.answers else None

    def candidate_answers(self) -> list[str]:
        """Answer texts in the order they were given."""
        return [entry.text for entry in self.transcript if entry.speaker == Speaker.CANDIDATE]

    def get_duration_seconds(self) -> float:
        """Get interview duration in seconds."""
        end = self.completed_at or utc_now()
        return (end - self.created_at).total_seconds()

    def to_summary(self) -> "SessionSummary":
        return SessionSummary(
            id=self.id,
            role=self.setup.role,
            difficulty=self.setup.difficulty,
            interview_type=self.setup.interview_type,
            score=self.score,
            status=self.status,
            created_at=self.created_at,
            completed_at=self.completed_at,
            duration_seconds=self.get_duration_seconds() if self.completed_at else None,
        )


class SessionSummary(BaseModel):
    """Condensed session row for history listings."""

    id: str
    role: Role
    difficulty: Difficulty
    interview_type: InterviewType
    score: int | None = None
    status: SessionStatus
    created_at: datetime
    completed_at: datetime | None = None
    duration_seconds: float | None = None


class InterviewStart(BaseModel):
    """Result of starting an interview."""

    session_id: str
    first_question: str
    question_number: int = 1
    total_questions: int
    status: SessionStatus = SessionStatus.IN_PROGRESS


class AnswerOutcome(BaseModel):
    """Result of submitting an answer or resuming a pending step."""

    completed: bool
    next_question: str | None = None
    question_number: int | None = None
    total_questions: int
    evaluation: InterviewEvaluation | None = None
    score: int | None = None
