# app/services/reading_services.py
import logging
from datetime import datetime
from typing import Callable

import httpx

from app.core.config import Settings
from app.core.errors import ConfigurationError
from app.models.tarot_models import TarotReadingResponse
from app.services.llm.llm_services import generate_completion
from app.services.prompt_services import READING_STYLES, build_messages, build_reading_context
from app.services.tarot_services import build_spread, fetch_random_cards

logger = logging.getLogger(__name__)


class ReadingOrchestrator:
    """
    Draws a three-card spread and asks the configured language model to interpret it.

    Each call is a single linear pipeline: configuration check, card fetch, prompt
    construction, model call. Any failure raises a ReadingError and ends the request;
    nothing is retried.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient, clock: Callable[[], datetime] = datetime.now):
        self.settings = settings
        self.http_client = http_client
        self.clock = clock

    async def draw_reading(self) -> TarotReadingResponse:
        # Configuration problems must surface before any network call.
        llm_config = self.settings.llm_config()
        if self.settings.READING_STYLE not in READING_STYLES:
            raise ConfigurationError(f"Unsupported reading style: {self.settings.READING_STYLE}")
        context = build_reading_context(self.clock(), self.settings.READING_TIMEZONE)

        raw_cards = await fetch_random_cards(self.http_client, self.settings.TAROT_API_URL)
        cards = build_spread(
            raw_cards,
            backfill_images=self.settings.BACKFILL_CARD_IMAGES,
            image_base_url=self.settings.CARD_IMAGE_BASE_URL,
        )
        logger.info("Cards drawn: " + ", ".join(f"{c.position.value}={c.name}{' (R)' if c.reversed else ''}" for c in cards))

        messages = build_messages(cards, context, self.settings.READING_STYLE)
        reading = await generate_completion(llm_config, messages, self.http_client)

        logger.info("Success! Returning reading.")
        return TarotReadingResponse(cards=cards, reading=reading)
