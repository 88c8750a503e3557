"""
utils.py - Text helpers for the MindMate AI pipeline

- detect_safety: flags crisis language (self-harm, suicidal ideation) in a
  user's chat message so the chat instruction can ask for crisis resources.
- truncate_text: bounds user text before it is placed into a prompt.
- format_transcript: renders chat messages as a plain-text conversation for
  providers that accept a single prompt string.
"""

import re
import logging
from typing import Dict, List, Optional, Tuple

_logger = logging.getLogger(__name__)

# Expressions of suicidal thoughts, self-harm and acute hopelessness
SAFETY_KEYWORDS = [
    "suicide", "suicidal", "kill myself", "end my life", "hurt myself", "want to die",
    "i wish i was dead", "no reason to live", "better off dead", "can't go on", "put an end to it",
    "cut myself", "self-harm", "self harm", "hurting myself", "harm myself", "self injury",
    "can't cope", "breaking point", "no hope", "won't get better", "overdose", "hang myself",
]

_SAFETY_RE = re.compile(
    r"\b(" + r"|".join(re.escape(k) for k in SAFETY_KEYWORDS) + r")\b",
    flags=re.IGNORECASE
)

SPEAKER_LABELS = {"user": "User", "assistant": "Assistant"}


def detect_safety(text: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Detect whether a message contains crisis language.

    Returns (flagged, matched_keyword). "can't go on" is ignored when the
    message is clearly about work tasks.
    """
    if not text or not text.strip():
        return False, None

    m = _SAFETY_RE.search(text)
    if not m:
        return False, None

    matched_keyword = m.group(0)
    context = text.lower()

    if matched_keyword.lower() == "can't go on" and "work" in context and "tasks" in context:
        return False, None

    return True, matched_keyword


def truncate_text(text: str, max_chars: int) -> str:
    """Cut text to at most max_chars characters (max_chars <= 0 disables)."""
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    _logger.warning("Input text is %d chars long, truncating to %d.", len(text), max_chars)
    return text[:max_chars]


def format_transcript(messages: List[Dict[str, str]]) -> str:
    """Render {role, content} messages as 'User: ...' / 'Assistant: ...' lines."""
    return "\n".join(
        f"{SPEAKER_LABELS.get(m['role'], 'User')}: {m['content']}" for m in messages
    )
