import json

import pytest

from mindmate.errors import MalformedStructuredOutput
from mindmate.parsing import extract_json_object, find_balanced_object, iter_balanced_objects, parse_structured


def test_strict_parse():
    assert extract_json_object('{"tip": "Breathe deeply."}') == {"tip": "Breathe deeply."}


def test_strict_parse_ignores_surrounding_whitespace():
    assert extract_json_object('\n  {"a": 1}  \n') == {"a": 1}


def test_embedded_object_is_extracted():
    raw = 'Sure! Here\'s the result: {"tip":"Breathe deeply."} Hope that helps!'
    assert extract_json_object(raw) == {"tip": "Breathe deeply."}


def test_markdown_fenced_object_is_extracted():
    raw = '```json\n{"insights": "You seem tired.", "tags": ["rest", "work"]}\n```'
    assert extract_json_object(raw) == {"insights": "You seem tired.", "tags": ["rest", "work"]}


def test_nested_braces_and_braces_in_strings():
    raw = 'Result: {"a": {"b": "}{"}, "c": "say \\"{hi}\\""} trailing } text'
    assert extract_json_object(raw) == {"a": {"b": "}{"}, "c": 'say "{hi}"'}


def test_first_balanced_span_only():
    assert find_balanced_object('x {"a": 1} y {"b": 2}') == '{"a": 1}'


def test_unbalanced_text_has_no_span():
    assert find_balanced_object('{"a": 1') is None
    assert find_balanced_object("no braces here") is None


def test_repair_of_single_quotes_and_trailing_commas():
    raw = "Here you go: {'tip': 'Drink water', 'extra': [1, 2,],}"
    assert extract_json_object(raw) == {"tip": "Drink water", "extra": [1, 2]}


def test_non_object_json_is_not_accepted_at_tier_one():
    with pytest.raises(MalformedStructuredOutput):
        extract_json_object('["a", "b"]')


@pytest.mark.parametrize("raw", [None, "", "   ", "just some prose", "{not json at all}"])
def test_unparseable_output_raises(raw):
    with pytest.raises(MalformedStructuredOutput):
        extract_json_object(raw)


@pytest.mark.parametrize("obj", [
    {"tip": "Breathe deeply."},
    {"insights": "Nested {braces} \"quoted\"", "tags": ["a", "b"]},
    {"a": {"b": {"c": [1, 2, {"d": None}]}}, "e": True},
])
def test_strict_and_span_tiers_agree_on_valid_json(obj):
    text = json.dumps(obj)
    assert json.loads(text) == extract_json_object(text)
    assert json.loads(find_balanced_object(text)) == extract_json_object(text)


def test_parse_structured_synthetic_object():
    raw = "I'm sorry, I can only answer in prose today."
    result = parse_structured(raw, "insights", {"tags": ["reflection", "mindfulness", "self-awareness"]})
    assert result == {
        "insights": raw,
        "tags": ["reflection", "mindfulness", "self-awareness"],
    }


def test_parse_structured_defaults_do_not_override_text_field():
    result = parse_structured("plain", "tip", {"tip": "ignored", "x": 1})
    assert result == {"tip": "plain", "x": 1}


def test_parse_structured_returns_parsed_object():
    assert parse_structured('{"tip": "Walk."}', "tip") == {"tip": "Walk."}


def test_unclosed_brace_before_object_is_skipped():
    raw = 'Use {name as a placeholder. Result: {"tip": "Breathe."}'
    assert extract_json_object(raw) == {"tip": "Breathe."}
    assert parse_structured(raw, "tip") == {"tip": "Breathe."}


def test_unparseable_span_before_object_is_skipped():
    raw = 'Template {not json} and then {"tip": "Walk."}'
    assert extract_json_object(raw) == {"tip": "Walk."}


def test_spans_are_yielded_left_to_right_without_nesting():
    raw = 'a {x b {"k": {"n": 1}} c {"m": 2} {unclosed'
    assert list(iter_balanced_objects(raw)) == ['{"k": {"n": 1}}', '{"m": 2}']


def test_trailing_comma_repair_keeps_apostrophes():
    assert extract_json_object('{"tip": "Don\'t rush.",}') == {"tip": "Don't rush."}
