"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from enum import Enum
from functools import lru_cache

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prepcoach.models.evaluation import HeuristicThresholds

PLACEHOLDER_API_KEY = "your-groq-api-key-here"


class ProviderMode(str, Enum):
    """How the completion provider tier is chosen at startup."""

    AUTO = "auto"
    FORCE_FALLBACK = "force_fallback"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Application
    app_name: str = "PrepCoach"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Provider selection
    provider_mode: ProviderMode = Field(
        default=ProviderMode.AUTO,
        validation_alias=AliasChoices("provider_mode", "ai_provider"),
    )

    # Remote completion API (OpenAI-compatible, Groq by default)
    groq_api_key: str = ""
    remote_base_url: str = "https://api.groq.com/openai/v1"
    remote_chat_path: str = "/chat/completions"
    http_timeout_seconds: float = 60.0

    # Model choices: a fast one for questions, a larger one for evaluation
    question_model: str = "llama-3.1-8b-instant"
    evaluation_model: str = "llama-3.3-70b-versatile"
    question_temperature: float = 0.7
    evaluation_temperature: float = 0.3
    question_max_tokens: int = 150
    evaluation_max_tokens: int = 1200

    # Per-operation timeouts
    first_question_timeout_seconds: float = 30.0
    next_question_timeout_seconds: float = 15.0
    evaluation_timeout_seconds: float = 45.0

    # Prompt size bounds
    context_question_max_chars: int = 100
    context_answer_max_chars: int = 150
    evaluation_recent_turns: int = 10
    evaluation_turn_max_chars: int = 200
    evaluation_prompt_max_chars: int = 2000

    # Interview settings
    default_total_questions: int = 7

    # Offline evaluator thresholds (HEURISTIC__WEAK_PENALTY=12, ...)
    heuristic: HeuristicThresholds = Field(default_factory=HeuristicThresholds)

    # Langfuse tracing (optional)
    langfuse_enabled: bool = False
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    # CORS - stored as comma-separated string in env
    # Uses validation_alias to read from CORS_ORIGINS env var
    cors_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        validation_alias="cors_origins"
    )

    @field_validator("provider_mode", mode="before")
    @classmethod
    def _map_legacy_provider(cls, value: object) -> object:
        # AI_PROVIDER=mock forces the offline tier; any remote name means auto
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("mock", "fallback", "force_fallback", "forcefallback"):
                return ProviderMode.FORCE_FALLBACK
            return ProviderMode.AUTO
        return value

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def remote_api_key(self) -> str | None:
        """The remote credential, or None when unset or left as the placeholder."""
        key = self.groq_api_key.strip()
        if not key or key == PLACEHOLDER_API_KEY:
            return None
        return key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
