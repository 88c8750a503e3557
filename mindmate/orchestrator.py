"""
orchestrator.py - Ordered multi-provider generation

Purpose:
- Turn a GenerationRequest into raw model text by trying each configured
  provider in a fixed priority order.
- Only providers whose credentials are configured are attempted.
- Each provider gets exactly one attempt, bounded by a timeout; the first
  success is returned and later providers are never called.
- When every eligible provider fails (or none is eligible) ProviderExhausted
  is raised so the feature caller can serve fallback content.

The orchestrator holds no per-request state and is shared by all requests.
"""

import asyncio
import logging
from typing import List, Sequence

from .config import Settings
from .errors import ProviderExhausted
from .providers import GenerationRequest, OpenAIProvider, TextProvider, VertexProvider

_logger = logging.getLogger(__name__)


class AIOrchestrator:

    def __init__(self, providers: Sequence[TextProvider], timeout_seconds: float = 8.0):
        self._providers = tuple(providers)
        self.timeout_seconds = timeout_seconds

    def eligible_providers(self) -> List[TextProvider]:
        """Providers with credentials present, in priority order."""
        return [p for p in self._providers if p.available]

    def provider_names(self) -> List[str]:
        return [p.name for p in self.eligible_providers()]

    async def generate(self, request: GenerationRequest) -> str:
        """
        Return the raw text of the first provider that succeeds.

        Raises:
          - ValueError if the prompt or system instruction is empty.
          - ProviderExhausted if no provider is eligible or all of them fail.
        """
        if not request.prompt or not request.prompt.strip():
            raise ValueError("GenerationRequest.prompt must be non-empty")
        if not request.system_instruction or not request.system_instruction.strip():
            raise ValueError("GenerationRequest.system_instruction must be non-empty")

        attempts = self.eligible_providers()
        if not attempts:
            _logger.warning("No AI providers configured; skipping generation.")
            raise ProviderExhausted()

        attempted = []
        for provider in attempts:
            attempted.append(provider.name)
            try:
                result = await asyncio.wait_for(provider.generate(request), timeout=self.timeout_seconds)
            except asyncio.TimeoutError:
                _logger.warning("Provider %s timed out after %.1fs", provider.name, self.timeout_seconds)
                continue
            except Exception as e:
                _logger.warning("Provider %s failed: %s", provider.name, e)
                continue

            _logger.info("Generation succeeded with provider %s (json=%s)", provider.name, request.expect_json)
            return result.raw_text

        _logger.error("All AI providers failed: %s", ", ".join(attempted))
        raise ProviderExhausted(attempted)


def build_providers(settings: Settings) -> List[TextProvider]:
    """Provider list in priority order: OpenAI first, then Vertex AI."""
    return [
        OpenAIProvider(api_key=settings.openai_api_key, model=settings.openai_model),
        VertexProvider(
            project=settings.gcp_project,
            location=settings.gcp_location,
            model_name=settings.vertex_model_name,
        ),
    ]


def build_orchestrator(settings: Settings) -> AIOrchestrator:
    orchestrator = AIOrchestrator(build_providers(settings), timeout_seconds=settings.provider_timeout_seconds)
    names = orchestrator.provider_names()
    if names:
        _logger.info("AI providers available (in priority order): %s", ", ".join(names))
    else:
        _logger.warning("No AI provider credentials set. AI features will serve fallback content.")
    return orchestrator
