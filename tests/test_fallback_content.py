import pytest

from mindmate import fallback_content as fc


def test_pick_returns_member():
    items = ("a", "b", "c")
    for _ in range(50):
        assert fc.pick(items) in items


def test_pick_can_reach_every_element():
    items = fc.DAILY_TIPS
    seen = set()
    for _ in range(2000):
        seen.add(fc.pick(items))
        if len(seen) == len(items):
            break
    assert seen == set(items)


def test_pick_rejects_empty_collection():
    with pytest.raises(ValueError):
        fc.pick([])


def test_catalogue_sizes():
    assert len(fc.JOURNAL_INSIGHTS) == 5
    assert len(fc.MOOD_INSIGHTS) == 5
    assert len(fc.DAILY_TIPS) == 10
    assert set(fc.HEALTH_ADVICE) == {"general", "diet", "sleep", "hydration", "posture"}
    assert set(fc.MENTAL_PEACE_TECHNIQUES) == {"mindfulness", "stress", "breathing", "affirmations", "meditation"}
    for tone in ("friendly", "clinical", "spiritual", "crisis"):
        assert fc.CHAT_RESPONSES[tone]


def test_chat_response_by_tone():
    assert fc.chat_response("clinical") in fc.CHAT_RESPONSES["clinical"]
    assert fc.chat_response("spiritual") in fc.CHAT_RESPONSES["spiritual"]
    assert fc.chat_response("crisis") in fc.CHAT_RESPONSES["crisis"]


@pytest.mark.parametrize("tone", ["professional", "supportive", "", "nonsense"])
def test_chat_response_unknown_tone_uses_friendly(tone):
    assert fc.chat_response(tone) in fc.CHAT_RESPONSES["friendly"]


def test_health_advice_lookup_and_default():
    assert fc.health_advice("sleep") == fc.HEALTH_ADVICE["sleep"]
    assert "bedtime routine" in fc.health_advice("sleep")
    assert fc.health_advice("unknown") == fc.HEALTH_ADVICE["general"]


def test_mental_peace_lookup_and_default():
    assert fc.mental_peace_technique("breathing") == fc.MENTAL_PEACE_TECHNIQUES["breathing"]
    assert fc.mental_peace_technique("unknown-category") == fc.MENTAL_PEACE_TECHNIQUES["mindfulness"]


def test_random_accessors_draw_from_catalogue():
    assert fc.journal_insight() in fc.JOURNAL_INSIGHTS
    assert fc.mood_insight() in fc.MOOD_INSIGHTS
    assert fc.daily_tip() in fc.DAILY_TIPS
