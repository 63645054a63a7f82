"""
Remote completion provider for PrepCoach

Talks to an OpenAI-compatible chat-completions API (Groq by default):
- A fast model for question generation (higher temperature, variety)
- A larger model for evaluation (low temperature, consistency)

Every failure is normalized into a single ProviderError.
Integrated with Langfuse for optional tracing of each call.
"""

import json
import logging
import re
from typing import Any

import httpx
from langfuse import Langfuse

from prepcoach.config.settings import Settings
from prepcoach.core.errors import ProviderError
from prepcoach.core.providers import CompletionProvider, EvaluationRequest, QuestionRequest
from prepcoach.models.evaluation import EvaluationSource, InterviewEvaluation

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*\n?|\n?```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` (or bare ```) wrapper."""
    return _FENCE_RE.sub("", text.strip()).strip()


def parse_json_object(text: str) -> Any:
    """
    Parse model output as JSON, tolerating markdown fences and chatter
    around a single top-level object.

    Raises:
        json.JSONDecodeError: If no JSON object can be recovered
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        json_start = cleaned.find("{")
        json_end = cleaned.rfind("}") + 1
        if json_start >= 0 and json_end > json_start:
            return json.loads(cleaned[json_start:json_end])
        raise


class RemoteProvider(CompletionProvider):
    """
    Completion provider backed by a hosted chat-completions endpoint.

    Model Selection:
    - question_model: opening and follow-up questions (low latency)
    - evaluation_model: final interview evaluation (deep reasoning)
    """

    name = "remote"

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the provider.

        Args:
            settings: Application settings carrying the credential and models
            transport: Optional httpx transport (used to stub the API)

        Raises:
            ValueError: If no remote credential is configured
        """
        api_key = settings.remote_api_key
        if not api_key:
            raise ValueError("Remote provider requires an API key")

        self.settings = settings
        self.client = httpx.AsyncClient(
            base_url=settings.remote_base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )
        self.langfuse = self._init_langfuse()

    def _init_langfuse(self) -> Langfuse | None:
        if not self.settings.langfuse_enabled:
            return None
        if not (self.settings.langfuse_secret_key and self.settings.langfuse_public_key):
            logger.info("Langfuse keys not configured, tracing disabled")
            return None
        try:
            client = Langfuse(
                secret_key=self.settings.langfuse_secret_key,
                public_key=self.settings.langfuse_public_key,
                host=self.settings.langfuse_base_url,
            )
            logger.info("Langfuse initialized for LLM observability")
            return client
        except Exception as e:
            logger.warning(f"Failed to initialize Langfuse: {e}")
            return None

    async def close(self) -> None:
        """Close the HTTP client and flush Langfuse."""
        await self.client.aclose()
        if self.langfuse:
            try:
                self.langfuse.flush()
            except Exception as e:
                logger.warning(f"Failed to flush Langfuse: {e}")

    # =========================================================================
    # CORE API CALL
    # =========================================================================

    def _extract_content(self, result: Any) -> str:
        """
        Extract text content from API response, handling list/dict formats.

        Raises:
            ProviderError: If the body is not a chat-completion shape
        """
        if not isinstance(result, dict):
            raise ProviderError("Malformed response from remote API")
        choices = result.get("choices")
        if not isinstance(choices, list) or not choices:
            raise ProviderError("Malformed response from remote API: no choices")
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            raise ProviderError("Malformed response from remote API: no message")
        content = message.get("content", "")

        # Handle case where content is a list (multi-part response)
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        if content is None:
            return ""
        return content if isinstance(content, str) else str(content)

    def _error_detail(self, response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:200] or response.reason_phrase
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str):
                return error
        return response.reason_phrase

    async def _call_model(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
        trace_name: str,
    ) -> str:
        """
        Send one chat-completion request and return the reply text.

        Raises:
            ProviderError: On HTTP, transport, or empty-response failures
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        payload = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        generation = self._start_generation(trace_name, model, messages, temperature, max_tokens)

        try:
            response = await self.client.post(self.settings.remote_chat_path, json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = self._error_detail(e.response)
            logger.error(f"Remote API error {status}: {detail}")
            self._end_generation(generation, error=detail)
            if status == 429:
                raise ProviderError(f"Remote API rate limit exceeded: {detail}", status_code=status) from e
            raise ProviderError(f"Remote API error ({status}): {detail}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.error(f"Remote API request failed: {e!r}")
            self._end_generation(generation, error=str(e))
            raise ProviderError(f"Remote API request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            self._end_generation(generation, error="non-JSON body")
            raise ProviderError("Remote API returned a non-JSON body") from e

        try:
            content = self._extract_content(result).strip()
        except ProviderError as e:
            self._end_generation(generation, error=str(e))
            raise
        if not content:
            self._end_generation(generation, error="empty completion")
            raise ProviderError("Empty response from remote API")

        self._end_generation(generation, output=content)
        return content

    # =========================================================================
    # QUESTION GENERATION
    # =========================================================================

    async def generate_question(self, request: QuestionRequest) -> str:
        """Generate one question with the fast model."""
        text = await self._call_model(
            model=self.settings.question_model,
            system_prompt=request.system_prompt,
            user_prompt=request.user_prompt,
            temperature=self.settings.question_temperature,
            max_tokens=self.settings.question_max_tokens,
            trace_name="question_generation",
        )

        question = text.strip().strip('"').strip()
        if not question:
            raise ProviderError("Remote API returned a blank question")
        return question

    # =========================================================================
    # EVALUATION
    # =========================================================================

    async def evaluate_transcript(self, request: EvaluationRequest) -> InterviewEvaluation:
        """Evaluate the interview with the larger model and repair the JSON."""
        text = await self._call_model(
            model=self.settings.evaluation_model,
            system_prompt=request.system_prompt,
            user_prompt=request.evaluation_prompt,
            temperature=self.settings.evaluation_temperature,
            max_tokens=self.settings.evaluation_max_tokens,
            trace_name="interview_evaluation",
        )

        try:
            data = parse_json_object(text)
            evaluation = InterviewEvaluation.from_raw(data, source=EvaluationSource.REMOTE)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Failed to parse evaluation JSON: {e}")
            raise ProviderError("Invalid JSON response from remote API") from e

        logger.info(f"Remote evaluation complete: score={evaluation.overall_score}")
        return evaluation

    # =========================================================================
    # TRACING
    # =========================================================================

    def _start_generation(
        self,
        name: str,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> Any:
        if not self.langfuse:
            return None
        try:
            return self.langfuse.start_generation(
                name=name,
                model=model,
                input=messages,
                model_parameters={"temperature": temperature, "max_tokens": max_tokens},
            )
        except Exception as lf_err:
            logger.warning(f"Langfuse generation start failed: {lf_err}")
            return None

    def _end_generation(self, generation: Any, output: str | None = None, error: str | None = None) -> None:
        if generation is None:
            return
        try:
            if error:
                generation.update(level="ERROR", status_message=error)
            else:
                generation.update(output=output)
            generation.end()
        except Exception as lf_err:
            logger.warning(f"Langfuse generation end failed: {lf_err}")
