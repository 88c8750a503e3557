"""
routes.py - HTTP endpoints for the MindMate AI features

All endpoints are POST with a JSON body and are mounted under /api/ai:
- /analyze-journal  {content}                       -> {insights, tags}
- /mood-insights    {entries}                       -> {insights}
- /chat             {messages, tone, responseLength} -> {response}
- /health-advice    {category, tone}                -> {advice}
- /mental-peace     {category, tone}                -> {technique}
- /daily-tip        {tone}                          -> {tip}

A missing or non-object body is treated as {}. Input validation failures
return 400; every other outcome is a 200 with a populated payload (AI output,
or fallback content when no provider answered).
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from . import features
from .config import Settings, load_settings
from .errors import InvalidInput
from .orchestrator import AIOrchestrator, build_orchestrator

_logger = logging.getLogger(__name__)
router = APIRouter()


# -------------------------
# Dependency helpers
# -------------------------
def get_settings(request: Request) -> Settings:
    """Settings loaded at startup; loaded on demand if startup did not run."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = load_settings()
        request.app.state.settings = settings
    return settings


def get_orchestrator(request: Request, settings: Settings = Depends(get_settings)) -> AIOrchestrator:
    """Process-wide orchestrator built from Settings at startup."""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        orchestrator = build_orchestrator(settings)
        request.app.state.orchestrator = orchestrator
    return orchestrator


def _payload(payload: Any) -> Dict[str, Any]:
    """Request body as a dict; a missing or non-object JSON body counts as {}."""
    if isinstance(payload, dict):
        return payload
    if payload is not None:
        _logger.info("Ignoring non-object request body of type %s", type(payload).__name__)
    return {}


def _bad_request(e: InvalidInput, endpoint: str):
    _logger.info("Rejected %s request: %s", endpoint, e)
    return HTTPException(status_code=400, detail=str(e))


# -------------------------
# Endpoints
# -------------------------
@router.post("/analyze-journal")
async def analyze_journal(
    payload: Any = Body(None),
    orchestrator: AIOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
):
    try:
        return await features.analyze_journal(
            orchestrator, _payload(payload).get("content"), max_chars=settings.max_journal_chars
        )
    except InvalidInput as e:
        raise _bad_request(e, "analyze-journal")


@router.post("/mood-insights")
async def mood_insights(
    payload: Any = Body(None),
    orchestrator: AIOrchestrator = Depends(get_orchestrator),
):
    try:
        return await features.mood_insights(orchestrator, _payload(payload).get("entries"))
    except InvalidInput as e:
        raise _bad_request(e, "mood-insights")


@router.post("/chat")
async def chat(
    payload: Any = Body(None),
    orchestrator: AIOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
):
    body = _payload(payload)
    try:
        return await features.chat(
            orchestrator,
            body.get("messages"),
            tone=body.get("tone"),
            response_length=body.get("responseLength", 2),
            history_window=settings.chat_history_window,
        )
    except InvalidInput as e:
        raise _bad_request(e, "chat")


@router.post("/health-advice")
async def health_advice(
    payload: Any = Body(None),
    orchestrator: AIOrchestrator = Depends(get_orchestrator),
):
    body = _payload(payload)
    try:
        return await features.health_advice(orchestrator, body.get("category"), tone=body.get("tone"))
    except InvalidInput as e:
        raise _bad_request(e, "health-advice")


@router.post("/mental-peace")
async def mental_peace(
    payload: Any = Body(None),
    orchestrator: AIOrchestrator = Depends(get_orchestrator),
):
    body = _payload(payload)
    try:
        return await features.mental_peace(orchestrator, body.get("category"), tone=body.get("tone"))
    except InvalidInput as e:
        raise _bad_request(e, "mental-peace")


@router.post("/daily-tip")
async def daily_tip(
    payload: Any = Body(None),
    orchestrator: AIOrchestrator = Depends(get_orchestrator),
):
    return await features.daily_tip(orchestrator, tone=_payload(payload).get("tone"))
