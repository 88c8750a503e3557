"""
providers.py - Text-generation providers for the MindMate AI pipeline

Each provider wraps one external text-generation service behind the same
small interface:
- `name`: identifier used in logs.
- `available`: True when the credentials it needs are configured.
- `generate(request)`: one async call returning a ProviderResult, raising
  ProviderTransportError on any failure.

Providers never retry; the orchestrator decides what happens after a failure.

Variants:
1. OpenAIProvider - OpenAI chat completions (JSON mode via response_format).
2. VertexProvider - Vertex AI Gemini models (JSON mode via response_mime_type).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import openai
from google import genai
from google.genai import types as genai_types

from .errors import ProviderTransportError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """
    One generation call.

    `history` optionally carries the chat as {role, content} messages for
    providers that accept a message list; `prompt` always holds the same
    content as plain text for providers that take a single string.
    """
    prompt: str
    system_instruction: str
    expect_json: bool = False
    history: Optional[List[Dict[str, str]]] = field(default=None)


@dataclass(frozen=True)
class ProviderResult:
    provider: str
    raw_text: str


class TextProvider(ABC):
    name: str = "provider"

    @property
    @abstractmethod
    def available(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> ProviderResult:
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} name={self.name} available={self.available}>"


# -------------------------
# OpenAI
# -------------------------
class OpenAIProvider(TextProvider):
    name = "openai"

    def __init__(self, api_key: Optional[str], model: str = "gpt-3.5-turbo", client: Any = None):
        self._api_key = api_key
        self.model = model
        self._client = client

    @property
    def available(self) -> bool:
        return bool(self._api_key) or self._client is not None

    def _get_client(self):
        # Created on first use so that building the provider list never touches the network stack
        if self._client is None:
            self._client = openai.AsyncOpenAI(api_key=self._api_key, max_retries=0)
        return self._client

    @staticmethod
    def _build_messages(request: GenerationRequest) -> List[Dict[str, str]]:
        messages = [{"role": "system", "content": request.system_instruction}]
        if request.history:
            messages.extend({"role": m["role"], "content": m["content"]} for m in request.history)
        else:
            messages.append({"role": "user", "content": request.prompt})
        return messages

    async def generate(self, request: GenerationRequest) -> ProviderResult:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": self._build_messages(request),
        }
        if request.expect_json:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._get_client().chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            # Covers connection errors, auth failures, rate limits and insufficient_quota
            raise ProviderTransportError(self.name, f"{type(e).__name__}: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderTransportError(self.name, f"malformed response: {e}") from e

        if not content or not content.strip():
            raise ProviderTransportError(self.name, "empty response content")

        _logger.debug("OpenAI raw response (first 500 chars): %s", content[:500])
        return ProviderResult(provider=self.name, raw_text=content)


# -------------------------
# Vertex AI
# -------------------------
class VertexProvider(TextProvider):
    """
    Gemini models served from Vertex AI (Application Default Credentials).

    The system instruction travels in the request config; chat history is
    already rendered into `request.prompt`.
    """
    name = "vertex"

    def __init__(self, project: Optional[str], location: str = "us-central1", model_name: Optional[str] = None,
                 temperature: float = 0.7, top_p: float = 0.9, max_output_tokens: int = 2048, client: Any = None):
        self.project = project
        self.location = location
        self.model_name = model_name
        self.temperature = temperature
        self.top_p = top_p
        self.max_output_tokens = max_output_tokens
        self._client = client

    @property
    def available(self) -> bool:
        return bool(self.model_name) and (bool(self.project) or self._client is not None)

    def _get_client(self):
        if self._client is None:
            try:
                _logger.info("Initializing Vertex AI: project=%s, location=%s", self.project, self.location)
                self._client = genai.Client(vertexai=True, project=self.project, location=self.location)
            except Exception as e:
                raise ProviderTransportError(self.name, f"initialization failed: {e}") from e
        return self._client

    def _generation_config(self, request: GenerationRequest):
        config = {
            "system_instruction": request.system_instruction,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_output_tokens": self.max_output_tokens,
        }
        if request.expect_json:
            config["response_mime_type"] = "application/json"
        return genai_types.GenerateContentConfig(**config)

    async def generate(self, request: GenerationRequest) -> ProviderResult:
        if not self.available:
            raise ProviderTransportError(self.name, "Vertex AI is not configured")

        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model_name,
                contents=request.prompt,
                config=self._generation_config(request),
            )
        except Exception as e:
            raise ProviderTransportError(self.name, f"{type(e).__name__}: {e}") from e

        # A response without candidates was blocked by the safety filters
        if not response.candidates:
            _logger.warning("Vertex AI response was blocked. Prompt Feedback: %s", response.prompt_feedback)
            raise ProviderTransportError(self.name, "response blocked by safety filters")

        text = response.text
        if not text or not text.strip():
            raise ProviderTransportError(self.name, "empty response content")

        _logger.debug("Vertex raw response (first 500 chars): %s", text[:500])
        return ProviderResult(provider=self.name, raw_text=text)
