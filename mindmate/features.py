"""
features.py - AI feature callers (journal, mood, chat, health, mental peace, daily tip)

Every feature follows the same flow:
    validate input -> compose instruction + prompt -> orchestrator.generate
    -> parse/extract fields -> return
and, when the orchestrator raises ProviderExhausted, returns pre-written
content from the fallback catalogue instead. Only validation failures
(InvalidInput) propagate to the caller; everything returned is usable text.

Which features expect JSON from the model:
- analyze_journal, mood_insights, daily_tip: JSON (parsed with parse_structured)
- chat, health_advice, mental_peace: prose returned as-is
"""

import logging
from typing import Any, Dict, List

from . import fallback_content
from . import prompts
from .errors import InvalidInput, ProviderExhausted
from .orchestrator import AIOrchestrator
from .parsing import parse_structured
from .providers import GenerationRequest
from .utils import detect_safety, format_transcript

_logger = logging.getLogger(__name__)

MAX_TAGS = 5
CHAT_ROLES = ("user", "assistant")


# -------------------------
# Field extraction helpers
# -------------------------
def _text_value(value: Any) -> str:
    """Stripped string for non-blank str values, '' for anything else."""
    if isinstance(value, str):
        return value.strip()
    return ""


def _tags_value(value: Any) -> List[str]:
    """Normalize model-supplied tags to a short list of strings; defaults when unusable."""
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return list(fallback_content.DEFAULT_JOURNAL_TAGS)
    tags = []
    for tag in value:
        if isinstance(tag, (dict, list)) or tag is None:
            continue
        text = str(tag).strip()
        if text:
            tags.append(text)
    return tags[:MAX_TAGS] or list(fallback_content.DEFAULT_JOURNAL_TAGS)


def _require_category(category: Any) -> str:
    if category is None or (isinstance(category, str) and not category.strip()):
        raise InvalidInput("Category is required")
    if not isinstance(category, str):
        raise InvalidInput("Category must be a string")
    return category.strip().lower()


def normalize_chat_messages(messages: List[Any], window: int = 0) -> List[Dict[str, str]]:
    """
    Keep only well-formed {role, content} messages with a user/assistant role
    and non-blank string content, limited to the last `window` (0 = all).
    """
    cleaned = []
    for message in messages:
        if not isinstance(message, dict):
            continue
        role = message.get("role")
        content = message.get("content")
        if role not in CHAT_ROLES or not isinstance(content, str) or not content.strip():
            continue
        cleaned.append({"role": role, "content": content})
    if window and window > 0 and len(cleaned) > window:
        _logger.debug("Chat history has %d messages, forwarding last %d.", len(cleaned), window)
        cleaned = cleaned[-window:]
    return cleaned


def _latest_user_message(messages: List[Dict[str, str]]) -> str:
    for message in reversed(messages):
        if message["role"] == "user":
            return message["content"]
    return ""


# -------------------------
# Features
# -------------------------
async def analyze_journal(orchestrator: AIOrchestrator, content: Any, max_chars: int = 0) -> Dict[str, Any]:
    """Return {insights, tags} for a journal entry."""
    if not isinstance(content, str) or not content.strip():
        raise InvalidInput("Journal content is required")

    request = GenerationRequest(
        prompt=prompts.journal_prompt(content, max_chars),
        system_instruction=prompts.JOURNAL_SYSTEM_INSTRUCTION,
        expect_json=True,
    )
    try:
        raw = await orchestrator.generate(request)
    except ProviderExhausted as e:
        _logger.info("Journal analysis falling back to static content: %s", e)
        return {
            "insights": fallback_content.journal_insight(),
            "tags": list(fallback_content.DEFAULT_JOURNAL_TAGS),
        }

    parsed = parse_structured(raw, "insights", {"tags": list(fallback_content.DEFAULT_JOURNAL_TAGS)})
    return {
        "insights": _text_value(parsed.get("insights")) or fallback_content.journal_insight(),
        "tags": _tags_value(parsed.get("tags")),
    }


async def mood_insights(orchestrator: AIOrchestrator, entries: Any) -> Dict[str, str]:
    """Return {insights} describing patterns in a list of mood entries."""
    if not isinstance(entries, list):
        raise InvalidInput("Mood entries are required")

    request = GenerationRequest(
        prompt=prompts.mood_insights_prompt(entries),
        system_instruction=prompts.MOOD_SYSTEM_INSTRUCTION,
        expect_json=True,
    )
    try:
        raw = await orchestrator.generate(request)
    except ProviderExhausted as e:
        _logger.info("Mood insights falling back to static content: %s", e)
        return {"insights": fallback_content.mood_insight()}

    parsed = parse_structured(raw, "insights")
    return {"insights": _text_value(parsed.get("insights")) or fallback_content.mood_insight()}


async def chat(orchestrator: AIOrchestrator, messages: Any, tone: Any = None, response_length: Any = 2,
               history_window: int = 0) -> Dict[str, str]:
    """Return {response}, the assistant's next chat message."""
    if not isinstance(messages, list):
        raise InvalidInput("Chat messages are required")

    tone = prompts.normalize_tone(tone)
    history = normalize_chat_messages(messages, history_window)
    safety_flag, keyword = detect_safety(_latest_user_message(history))
    if safety_flag:
        _logger.warning("Safety keyword detected in chat message: %s", keyword)
    fallback_key = "crisis" if safety_flag else tone

    if not history:
        _logger.info("Chat request has no usable messages; serving static response.")
        return {"response": fallback_content.chat_response(fallback_key)}

    request = GenerationRequest(
        prompt=format_transcript(history),
        system_instruction=prompts.chat_system_instruction(tone, response_length, safety_flag),
        expect_json=False,
        history=history,
    )
    try:
        raw = await orchestrator.generate(request)
    except ProviderExhausted as e:
        _logger.info("Chat falling back to static content: %s", e)
        return {"response": fallback_content.chat_response(fallback_key)}

    return {"response": raw.strip() or fallback_content.chat_response(fallback_key)}


async def health_advice(orchestrator: AIOrchestrator, category: Any, tone: Any = None) -> Dict[str, str]:
    """Return {advice}: bullet-point tips for a health category."""
    category = _require_category(category)

    request = GenerationRequest(
        prompt=prompts.health_advice_prompt(category),
        system_instruction=prompts.health_advice_system_instruction(category, tone),
        expect_json=False,
    )
    try:
        raw = await orchestrator.generate(request)
    except ProviderExhausted as e:
        _logger.info("Health advice (%s) falling back to static content: %s", category, e)
        return {"advice": fallback_content.health_advice(category)}

    return {"advice": raw.strip() or fallback_content.health_advice(category)}


async def mental_peace(orchestrator: AIOrchestrator, category: Any, tone: Any = None) -> Dict[str, str]:
    """Return {technique}: a guided practice for a mental-peace category."""
    category = _require_category(category)

    request = GenerationRequest(
        prompt=prompts.mental_peace_prompt(category),
        system_instruction=prompts.mental_peace_system_instruction(category, tone),
        expect_json=False,
    )
    try:
        raw = await orchestrator.generate(request)
    except ProviderExhausted as e:
        _logger.info("Mental peace technique (%s) falling back to static content: %s", category, e)
        return {"technique": fallback_content.mental_peace_technique(category)}

    return {"technique": raw.strip() or fallback_content.mental_peace_technique(category)}


async def daily_tip(orchestrator: AIOrchestrator, tone: Any = None) -> Dict[str, str]:
    """Return {tip}: one actionable wellness sentence. Never fails validation."""
    request = GenerationRequest(
        prompt=prompts.DAILY_TIP_PROMPT,
        system_instruction=prompts.daily_tip_system_instruction(tone),
        expect_json=True,
    )
    try:
        raw = await orchestrator.generate(request)
    except ProviderExhausted as e:
        _logger.info("Daily tip falling back to static content: %s", e)
        return {"tip": fallback_content.daily_tip()}

    parsed = parse_structured(raw, "tip")
    return {"tip": _text_value(parsed.get("tip")) or fallback_content.DEFAULT_DAILY_TIP}
