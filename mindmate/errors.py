"""
errors.py - Error taxonomy for the MindMate AI pipeline

Only InvalidInput ever reaches an HTTP client (as a 400). The other errors are
absorbed inside the pipeline:
- ProviderTransportError: one provider attempt failed; the orchestrator moves on.
- ProviderExhausted: no provider produced output; feature callers serve fallback content.
- MalformedStructuredOutput: expected-JSON output could not be parsed; a synthetic
  object is built around the raw text instead.
"""

from typing import Iterable, Optional


class MindMateError(Exception):
    """Base class for all MindMate errors."""


class InvalidInput(MindMateError, ValueError):
    """A request failed a structural precondition (missing field, wrong shape)."""


class ProviderTransportError(MindMateError):
    """A single provider call failed (network, auth, quota, rate limit, bad response)."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message


class ProviderExhausted(MindMateError):
    """Every eligible provider failed, or none was eligible."""

    def __init__(self, attempted: Optional[Iterable[str]] = None):
        self.attempted = list(attempted or [])
        if self.attempted:
            msg = "All providers failed: " + ", ".join(self.attempted)
        else:
            msg = "No AI providers are configured"
        super().__init__(msg)


class MalformedStructuredOutput(MindMateError, ValueError):
    """Provider output contained no parseable JSON object."""
