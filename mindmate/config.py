"""
config.py - Process configuration for the MindMate AI server

Settings are read once at startup from the process environment (after loading
a `.env` file if one is found) and passed explicitly into the orchestrator
factory. Request handlers never read the environment themselves.

Environment variables:
- OPENAI_API_KEY / OPENAI_MODEL: enable and configure the OpenAI provider.
- GCP_PROJECT / GCP_LOCATION / VERTEX_MODEL_NAME: enable and configure the Vertex AI provider.
- PROVIDER_TIMEOUT_SECONDS: upper bound for a single provider attempt.
- CHAT_HISTORY_WINDOW: number of most recent chat messages forwarded (0 = all).
- MAX_JOURNAL_CHARS: journal entries longer than this are truncated before prompting.
- LOG_LEVEL: root logging level.
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv, find_dotenv

_logger = logging.getLogger(__name__)

DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
DEFAULT_GCP_LOCATION = "us-central1"
DEFAULT_PROVIDER_TIMEOUT_SECONDS = 8.0
DEFAULT_CHAT_HISTORY_WINDOW = 20
DEFAULT_MAX_JOURNAL_CHARS = 3000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    gcp_project: Optional[str] = None
    gcp_location: str = DEFAULT_GCP_LOCATION
    vertex_model_name: Optional[str] = None
    provider_timeout_seconds: float = DEFAULT_PROVIDER_TIMEOUT_SECONDS
    chat_history_window: int = DEFAULT_CHAT_HISTORY_WINDOW
    max_journal_chars: int = DEFAULT_MAX_JOURNAL_CHARS
    log_level: str = DEFAULT_LOG_LEVEL


def load_env_file() -> None:
    """Load variables from a .env file without overriding the real environment."""
    try:
        env_path = find_dotenv(usecwd=True)
        if env_path:
            load_dotenv(env_path, override=False)
            _logger.debug("Loaded .env from %s", env_path)
    except Exception as e:
        _logger.warning("Error loading .env: %s", e)


def _clean(value: Optional[str]) -> Optional[str]:
    """Treat unset and whitespace-only values the same way."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _number(environ: Mapping[str, str], key: str, default, cast):
    raw = _clean(environ.get(key))
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        _logger.warning("Invalid value for %s: %r. Using default %s.", key, raw, default)
        return default
    if value < 0:
        _logger.warning("Negative value for %s: %r. Using default %s.", key, raw, default)
        return default
    return value


def resolve_log_level(value: Optional[str]) -> str:
    """Upper-cased logging level name; unknown names fall back to INFO."""
    level = (_clean(value) or DEFAULT_LOG_LEVEL).upper()
    # getLevelName maps known names to ints and anything else to "Level <name>"
    if not isinstance(logging.getLevelName(level), int):
        _logger.warning("Invalid value for LOG_LEVEL: %r. Using default %s.", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from a mapping of environment variables.

    When `environ` is None the .env file is loaded first and os.environ is used.
    Passing an explicit mapping skips .env loading (used by tests).
    """
    if environ is None:
        load_env_file()
        environ = os.environ

    timeout = _number(environ, "PROVIDER_TIMEOUT_SECONDS", DEFAULT_PROVIDER_TIMEOUT_SECONDS, float)
    if timeout == 0:
        _logger.warning("PROVIDER_TIMEOUT_SECONDS must be positive. Using default %s.", DEFAULT_PROVIDER_TIMEOUT_SECONDS)
        timeout = DEFAULT_PROVIDER_TIMEOUT_SECONDS

    settings = Settings(
        openai_api_key=_clean(environ.get("OPENAI_API_KEY")),
        openai_model=_clean(environ.get("OPENAI_MODEL")) or DEFAULT_OPENAI_MODEL,
        gcp_project=_clean(environ.get("GCP_PROJECT")),
        gcp_location=_clean(environ.get("GCP_LOCATION")) or DEFAULT_GCP_LOCATION,
        vertex_model_name=_clean(environ.get("VERTEX_MODEL_NAME")),
        provider_timeout_seconds=timeout,
        chat_history_window=_number(environ, "CHAT_HISTORY_WINDOW", DEFAULT_CHAT_HISTORY_WINDOW, int),
        max_journal_chars=_number(environ, "MAX_JOURNAL_CHARS", DEFAULT_MAX_JOURNAL_CHARS, int) or DEFAULT_MAX_JOURNAL_CHARS,
        log_level=resolve_log_level(environ.get("LOG_LEVEL")),
    )

    _logger.debug(
        "OPENAI_API_KEY_set=%s, OPENAI_MODEL=%s, GCP_PROJECT=%s, GCP_LOCATION=%s, VERTEX_MODEL_NAME=%s",
        bool(settings.openai_api_key),
        settings.openai_model,
        settings.gcp_project,
        settings.gcp_location,
        settings.vertex_model_name,
    )
    return settings
