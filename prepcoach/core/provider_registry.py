"""
Provider Registry for PrepCoach

Decides once, at start-up, which completion tier serves requests, and
owns the per-call fallback policy:
- Remote tier when a credential is configured and fallback is not forced
- Offline fallback tier otherwise
- A failed or timed-out remote call is retried on the fallback tier once
"""

import logging

import httpx

from prepcoach.config.settings import ProviderMode, Settings
from prepcoach.core.errors import EvaluationError, ProviderError, QuestionGenerationError
from prepcoach.core.fallback_provider import FallbackProvider
from prepcoach.core.providers import CompletionProvider, EvaluationRequest, QuestionRequest
from prepcoach.core.remote_provider import RemoteProvider
from prepcoach.core.timeouts import CallTimeout, race
from prepcoach.models.evaluation import InterviewEvaluation

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Immutable pairing of a primary tier and an optional fallback tier."""

    def __init__(
        self,
        primary: CompletionProvider,
        fallback: CompletionProvider | None = None,
    ):
        self._primary = primary
        self._fallback = fallback

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ProviderRegistry":
        """
        Resolve the provider tiers from configuration.

        Args:
            settings: Application settings
            transport: Optional httpx transport handed to the remote tier

        Returns:
            Registry with the remote tier as primary when it is usable
        """
        fallback = FallbackProvider(settings.heuristic)

        if settings.provider_mode == ProviderMode.FORCE_FALLBACK:
            logger.info("Provider mode forces the offline fallback tier")
            return cls(fallback)

        if not settings.remote_api_key:
            logger.warning("No remote API key configured, using the offline fallback tier")
            return cls(fallback)

        logger.info(f"Using remote provider at {settings.remote_base_url}")
        return cls(RemoteProvider(settings, transport=transport), fallback)

    @property
    def primary(self) -> CompletionProvider:
        return self._primary

    @property
    def fallback(self) -> CompletionProvider | None:
        return self._fallback

    @property
    def provider_name(self) -> str:
        """Name of the tier that serves requests first."""
        return self._primary.name

    # =========================================================================
    # QUESTIONS
    # =========================================================================

    async def generate_question(self, request: QuestionRequest, timeout: float) -> str:
        """
        Produce one question, falling back once if the primary tier fails.

        Raises:
            QuestionGenerationError: If no tier produced a question in time
        """
        label = f"Question {request.question_number} generation"
        try:
            return await race(self._primary.generate_question(request), timeout, label)
        except (ProviderError, CallTimeout) as e:
            if self._fallback is None:
                raise QuestionGenerationError(f"Failed to generate question: {e}") from e
            logger.warning(f"{self._primary.name} tier failed ({e}), using {self._fallback.name} tier")

        try:
            return await race(self._fallback.generate_question(request), timeout, label)
        except (ProviderError, CallTimeout) as e:
            logger.error(f"Fallback question generation failed: {e}")
            raise QuestionGenerationError(f"Failed to generate question: {e}") from e

    # =========================================================================
    # EVALUATION
    # =========================================================================

    async def evaluate(self, request: EvaluationRequest, timeout: float) -> InterviewEvaluation:
        """
        Evaluate a finished interview, falling back once if the primary tier fails.

        Raises:
            EvaluationError: If no tier produced an evaluation in time
        """
        label = "Interview evaluation"
        try:
            return await race(self._primary.evaluate_transcript(request), timeout, label)
        except (ProviderError, CallTimeout) as e:
            if self._fallback is None:
                raise EvaluationError(f"Failed to evaluate interview: {e}") from e
            logger.warning(f"{self._primary.name} evaluation failed ({e}), using {self._fallback.name} tier")

        try:
            return await race(self._fallback.evaluate_transcript(request), timeout, label)
        except (ProviderError, CallTimeout) as e:
            logger.error(f"Fallback evaluation failed: {e}")
            raise EvaluationError(f"Failed to evaluate interview: {e}") from e

    async def close(self) -> None:
        """Release resources held by every tier."""
        await self._primary.close()
        if self._fallback is not None:
            await self._fallback.close()
