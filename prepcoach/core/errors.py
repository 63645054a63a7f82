"""
Error taxonomy for the interview engine.

Every error carries a stable ``code`` so the HTTP layer can map it to a
status and the client can tell failures apart.
"""


class InterviewEngineError(Exception):
    """Base class for all engine errors."""

    code = "engine_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProviderError(InterviewEngineError):
    """The remote completion tier failed (network, auth, or bad response)."""

    code = "provider_error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429


class QuestionGenerationError(InterviewEngineError):
    """No tier could produce the next question in time."""

    code = "question_generation_failed"


class EvaluationError(InterviewEngineError):
    """No tier could evaluate the interview in time."""

    code = "evaluation_failed"


class SessionNotFoundError(InterviewEngineError):
    """No session exists with the requested id."""

    code = "session_not_found"

    def __init__(self, session_id: str):
        super().__init__(f"Interview session not found: {session_id}")
        self.session_id = session_id


class NotOwnerError(InterviewEngineError):
    """The caller does not own the session."""

    code = "not_owner"

    def __init__(self, session_id: str):
        super().__init__(f"Not authorized to access session: {session_id}")
        self.session_id = session_id


class SessionAlreadyCompletedError(InterviewEngineError):
    """An answer was submitted to a finished session."""

    code = "session_completed"

    def __init__(self, session_id: str):
        super().__init__(f"Interview already completed: {session_id}")
        self.session_id = session_id


class PendingStepError(InterviewEngineError):
    """The current answer is recorded; the next step must be resumed first."""

    code = "pending_step"


class ValidationError(InterviewEngineError):
    """Invalid session configuration or answer."""

    code = "validation_error"
