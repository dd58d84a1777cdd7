# app/services/prompt_services.py
import logging
from datetime import datetime
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.errors import ConfigurationError
from app.models.llm_models import ChatMessage
from app.models.tarot_models import ReadingContext, TarotCard

logger = logging.getLogger(__name__)

READING_STYLES = {
    "practical": {
        "system_instruction": (
            "You are a practical tarot reader who gives clear, actionable insights.\n"
            "\n"
            "Your readings are:\n"
            "- Short and direct (2-3 sentences per card)\n"
            "- Focused on what the person can DO or UNDERSTAND\n"
            "- Written in simple, conversational language\n"
            "- Honest but encouraging\n"
            "- Free of mystical jargon\n"
            "\n"
            "Structure:\n"
            "A one-sentence introduction, then:\n"
            "PAST: [Card] - What happened or what you learned\n"
            "PRESENT: [Card] - What's happening now and what to notice\n"
            "FUTURE: [Card] - What's likely coming and how to navigate it\n"
            "\n"
            "Keep each section brief. Total reading: 100-150 words maximum."
        ),
        "request": "Give a brief, practical reading. What should I know about these three cards?",
    },
    "mystical": {
        "system_instruction": (
            "You are a warm, intuitive tarot reader with a gift for evocative imagery.\n"
            "\n"
            "Your readings are:\n"
            "- Poetic but never vague\n"
            "- Grounded in each card's traditional meaning, honoring reversals\n"
            "- Gentle and encouraging in tone\n"
            "\n"
            "Structure:\n"
            "A short opening that sets the mood of the spread, then:\n"
            "PAST: [Card] - The roots of the current path\n"
            "PRESENT: [Card] - The energy surrounding the seeker now\n"
            "FUTURE: [Card] - Where the path is leading and how to meet it\n"
            "\n"
            "Total reading: 150-200 words maximum."
        ),
        "request": "Read these three cards for me and tell me the story they share.",
    },
}


def get_time_of_day(hour: int) -> str:
    if hour < 12:
        return "morning"
    if hour < 17:
        return "afternoon"
    return "evening"


def build_reading_context(now: datetime, timezone: Optional[str] = None) -> ReadingContext:
    """Computes the date and time-of-day flavor for the prompt, optionally in an IANA time zone."""
    if timezone:
        try:
            now = now.astimezone(ZoneInfo(timezone))
        except ZoneInfoNotFoundError:
            raise ConfigurationError(f"Unknown reading time zone: {timezone}")
    return ReadingContext(
        weekday=now.strftime("%A"),
        month=now.strftime("%B"),
        day=now.day,
        time_of_day=get_time_of_day(now.hour),
    )


def format_card_line(card: TarotCard) -> str:
    suffix = " (Reversed)" if card.reversed else ""
    return f"{card.position.value.upper()}: {card.name}{suffix}"


def build_prompts(cards: List[TarotCard], context: ReadingContext, style: str = "practical") -> Tuple[str, str]:
    """
    Returns (system_prompt, user_prompt) for the three-card spread.
    """
    prompt_data = READING_STYLES.get(style)
    if prompt_data is None:
        raise ConfigurationError(f"Unsupported reading style: {style}")

    card_lines = "\n".join(format_card_line(card) for card in cards)
    user_prompt = (
        f"Cards drawn:\n"
        f"{card_lines}\n"
        f"\n"
        f"Time: {context.time_of_day}, {context.formatted_date}\n"
        f"\n"
        f"{prompt_data['request']}"
    )
    return prompt_data["system_instruction"], user_prompt


def build_messages(cards: List[TarotCard], context: ReadingContext, style: str = "practical") -> List[ChatMessage]:
    system_prompt, user_prompt = build_prompts(cards, context, style)
    logger.debug(f"User prompt:\n{user_prompt}")
    return [
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=user_prompt),
    ]
