"""
Tests for reading context and prompt construction
"""
from datetime import datetime, timezone

import pytest

from app.core.errors import ConfigurationError
from app.models.tarot_models import Position, ReadingContext, TarotCard
from app.services.prompt_services import (
    build_messages,
    build_prompts,
    build_reading_context,
    get_time_of_day,
)

CARDS = [
    TarotCard(name="The Fool", reversed=False, position=Position.PAST),
    TarotCard(name="The Tower", reversed=True, position=Position.PRESENT),
    TarotCard(name="The Star", reversed=False, position=Position.FUTURE),
]

CONTEXT = ReadingContext(weekday="Monday", month="October", day=19, time_of_day="evening")


@pytest.mark.parametrize(
    "hour,expected",
    [(0, "morning"), (11, "morning"), (12, "afternoon"), (16, "afternoon"), (17, "evening"), (23, "evening")],
)
def test_time_of_day_buckets(hour, expected):
    assert get_time_of_day(hour) == expected


def test_reading_context_from_clock():
    context = build_reading_context(datetime(2026, 10, 19, 14, 5))

    assert context.formatted_date == "Monday, October 19"
    assert context.time_of_day == "afternoon"


def test_reading_context_in_configured_timezone():
    # 02:00 UTC on the 20th is still the evening of the 19th in New York
    context = build_reading_context(datetime(2026, 10, 20, 2, 0, tzinfo=timezone.utc), "America/New_York")

    assert context.formatted_date == "Monday, October 19"
    assert context.time_of_day == "evening"


def test_unknown_timezone_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_reading_context(datetime(2026, 10, 19, 9, 0), "Mars/Olympus_Mons")


def test_user_prompt_lists_cards_and_time():
    _, user_prompt = build_prompts(CARDS, CONTEXT)

    assert user_prompt.startswith("Cards drawn:\nPAST: The Fool\nPRESENT: The Tower (Reversed)\nFUTURE: The Star\n")
    assert "Time: evening, Monday, October 19" in user_prompt
    assert user_prompt.endswith("What should I know about these three cards?")


def test_styles_set_different_length_ceilings():
    practical, _ = build_prompts(CARDS, CONTEXT, "practical")
    mystical, mystical_user = build_prompts(CARDS, CONTEXT, "mystical")

    assert "100-150 words" in practical
    assert "150-200 words" in mystical
    for section in ("PAST:", "PRESENT:", "FUTURE:"):
        assert section in practical
        assert section in mystical
    assert "PRESENT: The Tower (Reversed)" in mystical_user


def test_unknown_style_is_rejected():
    with pytest.raises(ConfigurationError):
        build_prompts(CARDS, CONTEXT, "sarcastic")


def test_messages_are_system_then_user():
    messages = build_messages(CARDS, CONTEXT)

    assert [m.role for m in messages] == ["system", "user"]
    assert "tarot reader" in messages[0].content
    assert "Cards drawn:" in messages[1].content
