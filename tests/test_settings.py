from prepcoach.config.settings import ProviderMode, Settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("AI_PROVIDER", raising=False)
    monkeypatch.delenv("PROVIDER_MODE", raising=False)

    settings = Settings(_env_file=None)

    assert settings.provider_mode == ProviderMode.AUTO
    assert settings.remote_api_key is None
    assert settings.first_question_timeout_seconds == 30
    assert settings.next_question_timeout_seconds == 15
    assert settings.evaluation_timeout_seconds == 45
    assert settings.heuristic.baseline_score == 50


def test_legacy_mock_provider_forces_fallback(monkeypatch) -> None:
    monkeypatch.setenv("AI_PROVIDER", "mock")

    assert Settings(_env_file=None).provider_mode == ProviderMode.FORCE_FALLBACK


def test_remote_provider_name_means_auto(monkeypatch) -> None:
    monkeypatch.setenv("AI_PROVIDER", "groq")

    assert Settings(_env_file=None).provider_mode == ProviderMode.AUTO


def test_placeholder_key_is_not_a_credential(monkeypatch) -> None:
    monkeypatch.setenv("GROQ_API_KEY", "your-groq-api-key-here")
    assert Settings(_env_file=None).remote_api_key is None

    monkeypatch.setenv("GROQ_API_KEY", "  gsk_live  ")
    assert Settings(_env_file=None).remote_api_key == "gsk_live"


def test_nested_heuristic_overrides(monkeypatch) -> None:
    monkeypatch.setenv("HEURISTIC__WEAK_PENALTY", "12")

    assert Settings(_env_file=None).heuristic.weak_penalty == 12


def test_cors_origins_parsed(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]
