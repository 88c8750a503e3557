"""
Shared fixtures: fake providers, orchestrators and an HTTP test client.
"""

import asyncio
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from mindmate.config import Settings
from mindmate.orchestrator import AIOrchestrator
from mindmate.providers import GenerationRequest, ProviderResult, TextProvider

PROVIDER_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "GCP_PROJECT",
    "GCP_LOCATION",
    "VERTEX_MODEL_NAME",
    "PROVIDER_TIMEOUT_SECONDS",
    "CHAT_HISTORY_WINDOW",
    "MAX_JOURNAL_CHARS",
)


class FakeProvider(TextProvider):
    """In-memory provider that records requests and returns a canned outcome."""

    def __init__(self, name: str, response: Optional[str] = None, error: Optional[Exception] = None,
                 available: bool = True, delay: float = 0.0):
        self.name = name
        self.response = response
        self.error = error
        self._available = available
        self.delay = delay
        self.requests: List[GenerationRequest] = []

    @property
    def available(self) -> bool:
        return self._available

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def generate(self, request: GenerationRequest) -> ProviderResult:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return ProviderResult(provider=self.name, raw_text=self.response)


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Keep .env files and real provider credentials out of tests."""
    monkeypatch.setattr("mindmate.config.load_dotenv", lambda *_args, **_kwargs: False)
    for key in PROVIDER_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_orchestrator():
    def _make(*providers: TextProvider, timeout_seconds: float = 1.0) -> AIOrchestrator:
        return AIOrchestrator(list(providers), timeout_seconds=timeout_seconds)
    return _make


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def api_client(settings):
    """
    Factory for a TestClient whose routes use the given orchestrator.

    Usage: client = api_client(orchestrator)
    """
    from mindmate.main import app
    from mindmate.routes import get_orchestrator, get_settings

    def _make(orchestrator: AIOrchestrator) -> TestClient:
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator
        app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
