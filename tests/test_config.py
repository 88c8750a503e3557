from mindmate.config import (
    DEFAULT_CHAT_HISTORY_WINDOW,
    DEFAULT_MAX_JOURNAL_CHARS,
    DEFAULT_PROVIDER_TIMEOUT_SECONDS,
    Settings,
    load_settings,
    resolve_log_level,
)


def test_defaults_from_empty_environment():
    assert load_settings({}) == Settings()
    settings = Settings()
    assert settings.openai_model == "gpt-3.5-turbo"
    assert settings.gcp_location == "us-central1"
    assert settings.provider_timeout_seconds == DEFAULT_PROVIDER_TIMEOUT_SECONDS == 8.0
    assert settings.chat_history_window == DEFAULT_CHAT_HISTORY_WINDOW == 20
    assert settings.max_journal_chars == DEFAULT_MAX_JOURNAL_CHARS


def test_values_are_read_and_cleaned():
    settings = load_settings({
        "OPENAI_API_KEY": "  sk-test  ",
        "OPENAI_MODEL": "gpt-4o-mini",
        "GCP_PROJECT": "my-project",
        "GCP_LOCATION": "europe-west1",
        "VERTEX_MODEL_NAME": "gemini-1.5-flash",
        "PROVIDER_TIMEOUT_SECONDS": "2.5",
        "CHAT_HISTORY_WINDOW": "0",
        "MAX_JOURNAL_CHARS": "500",
        "LOG_LEVEL": "debug",
    })
    assert settings.openai_api_key == "sk-test"
    assert settings.openai_model == "gpt-4o-mini"
    assert settings.gcp_project == "my-project"
    assert settings.gcp_location == "europe-west1"
    assert settings.vertex_model_name == "gemini-1.5-flash"
    assert settings.provider_timeout_seconds == 2.5
    assert settings.chat_history_window == 0
    assert settings.max_journal_chars == 500
    assert settings.log_level == "DEBUG"


def test_blank_values_count_as_unset():
    settings = load_settings({"OPENAI_API_KEY": "   ", "OPENAI_MODEL": "", "GCP_PROJECT": ""})
    assert settings.openai_api_key is None
    assert settings.openai_model == "gpt-3.5-turbo"
    assert settings.gcp_project is None


def test_invalid_numbers_fall_back_to_defaults(caplog):
    settings = load_settings({
        "PROVIDER_TIMEOUT_SECONDS": "soon",
        "CHAT_HISTORY_WINDOW": "-3",
        "MAX_JOURNAL_CHARS": "0",
    })
    assert settings.provider_timeout_seconds == DEFAULT_PROVIDER_TIMEOUT_SECONDS
    assert settings.chat_history_window == DEFAULT_CHAT_HISTORY_WINDOW
    assert settings.max_journal_chars == DEFAULT_MAX_JOURNAL_CHARS
    assert "PROVIDER_TIMEOUT_SECONDS" in caplog.text


def test_zero_timeout_uses_default():
    assert load_settings({"PROVIDER_TIMEOUT_SECONDS": "0"}).provider_timeout_seconds == DEFAULT_PROVIDER_TIMEOUT_SECONDS


def test_process_environment_is_used_when_no_mapping_given(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    assert load_settings().openai_api_key == "sk-env"


def test_log_level_is_validated(caplog):
    assert load_settings({"LOG_LEVEL": "warning"}).log_level == "WARNING"
    assert load_settings({"LOG_LEVEL": "verbose"}).log_level == "INFO"
    assert "LOG_LEVEL" in caplog.text


def test_resolve_log_level():
    assert resolve_log_level(None) == "INFO"
    assert resolve_log_level("  debug ") == "DEBUG"
    assert resolve_log_level("loud") == "INFO"
