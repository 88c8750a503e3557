"""
parsing.py - Tolerant JSON extraction from free-form model output

Models regularly wrap JSON in apologies, explanations or markdown fences even
when a JSON mode is requested. Structured output is therefore parsed in three
tiers:

1. Strict parse of the whole text as one JSON object.
2. Parse of the first balanced {...} span in the text that yields an object
   (as-is, then with trailing commas dropped, then with single quotes swapped).
3. A synthetic object holding the raw text verbatim plus fixed defaults.

Tiers 1-2 live in `extract_json_object`; `parse_structured` adds tier 3 and
never raises.
"""

import json
import re
import logging
from typing import Any, Dict, Iterator, Optional

from .errors import MalformedStructuredOutput

_logger = logging.getLogger(__name__)

_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    """json.loads that only accepts a JSON object; returns None otherwise."""
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return value if isinstance(value, dict) else None


def _span_end(raw: str, start: int) -> Optional[int]:
    """Index just past the brace closing the object opened at `start`, or None if it never closes."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(raw)):
        ch = raw[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return None


def iter_balanced_objects(raw: str) -> Iterator[str]:
    """
    Yield balanced {...} substrings of `raw` from left to right.

    Braces inside JSON string literals (including escaped quotes) are ignored
    when tracking depth. A `{` that never closes is skipped and the search
    resumes at the next `{`; after a closed span the search resumes past its end.
    """
    start = raw.find("{")
    while start != -1:
        end = _span_end(raw, start)
        if end is None:
            start = raw.find("{", start + 1)
            continue
        yield raw[start:end]
        start = raw.find("{", end)


def find_balanced_object(raw: str) -> Optional[str]:
    """Return the first balanced {...} substring of `raw`, or None."""
    return next(iter_balanced_objects(raw), None)


def _repairs(jtext: str) -> Iterator[str]:
    """Progressively looser rewrites: drop trailing commas, then also swap single quotes."""
    yield _TRAILING_COMMA_RE.sub(r"\1", jtext)
    yield _TRAILING_COMMA_RE.sub(r"\1", jtext.replace("'", '"'))


def extract_json_object(raw: Optional[str]) -> Dict[str, Any]:
    """
    Parse model output into a dict using tiers 1 and 2.

    Raises MalformedStructuredOutput when neither tier yields an object.
    """
    if not raw or not raw.strip():
        raise MalformedStructuredOutput("empty model output")

    parsed = _loads_object(raw.strip())
    if parsed is not None:
        return parsed

    found_span = False
    for span in iter_balanced_objects(raw):
        found_span = True
        parsed = _loads_object(span)
        if parsed is not None:
            _logger.debug("Recovered JSON object from surrounding text")
            return parsed
        for repaired in _repairs(span):
            parsed = _loads_object(repaired)
            if parsed is not None:
                _logger.debug("Recovered JSON object after repair")
                return parsed

    if not found_span:
        raise MalformedStructuredOutput("no JSON object found in model output")
    raise MalformedStructuredOutput("JSON object span could not be parsed")


def parse_structured(raw: Optional[str], text_field: str, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Best-effort parse of expected-JSON model output.

    On total failure returns {text_field: raw, **defaults}; auxiliary defaults
    never overwrite the text field.
    """
    try:
        return extract_json_object(raw)
    except MalformedStructuredOutput as e:
        _logger.warning("Structured output parsing failed (%s). Using raw text as '%s'.", e, text_field)
        synthetic = dict(defaults or {})
        synthetic[text_field] = raw or ""
        return synthetic
