# app/services/tarot_services.py
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.errors import CardServiceUnavailableError, InvalidCardDataError
from app.models.tarot_models import SPREAD_POSITIONS, TarotCard

logger = logging.getLogger(__name__)

SPREAD_SIZE = len(SPREAD_POSITIONS)


async def fetch_random_cards(http_client: httpx.AsyncClient, tarot_api_url: str, count: int = SPREAD_SIZE) -> List[Dict[str, Any]]:
    """
    Draws `count` random cards from the card service.
    Returns the raw card dicts; only the shape of the envelope is validated here.
    """
    logger.info("Fetching tarot cards...")
    try:
        response = await http_client.get(tarot_api_url, params={"n": count})
    except httpx.HTTPError as e:
        logger.error(f"Tarot API request failed: {e!r}")
        raise CardServiceUnavailableError()

    logger.info(f"Tarot API status: {response.status_code}")

    if not response.is_success:
        logger.error(f"Tarot API error: {response.text}")
        raise CardServiceUnavailableError()

    try:
        data = response.json()
    except ValueError:
        logger.error(f"Tarot API returned a non-JSON body: {response.text[:200]}")
        raise InvalidCardDataError()

    cards = data.get("cards") if isinstance(data, dict) else None
    if not isinstance(cards, list) or len(cards) < count:
        logger.error(f"Invalid tarot response format: {data}")
        raise InvalidCardDataError()

    logger.info("Tarot API response received")
    return cards


def resolve_card_image(card: Dict[str, Any], backfill: bool = False, image_base_url: str = "") -> Optional[str]:
    """
    Card images are passed through as-is. With backfill enabled, a card lacking an image
    but carrying a short code gets a best-effort URL built from that code; nothing is guessed otherwise.
    """
    image = card.get("image")
    if image:
        return image
    if backfill and card.get("name_short"):
        url = f"{image_base_url.rstrip('/')}/{card['name_short']}.jpg"
        logger.debug(f"Backfilled image for {card.get('name')}: {url}")
        return url
    return None


def is_reversed(card: Dict[str, Any]) -> bool:
    """Only a real boolean true (or 1) marks a card reversed; strings such as "false" do not."""
    return card.get("reversed") in (True, 1)


def build_spread(raw_cards: List[Dict[str, Any]], backfill_images: bool = False, image_base_url: str = "") -> List[TarotCard]:
    """Assigns Past, Present, Future to the first three cards in order."""
    if len(raw_cards) < SPREAD_SIZE:
        raise InvalidCardDataError()

    spread = []
    for position, card in zip(SPREAD_POSITIONS, raw_cards):
        if not isinstance(card, dict) or not isinstance(card.get("name"), str):
            logger.error(f"Invalid tarot card entry: {card}")
            raise InvalidCardDataError()
        spread.append(
            TarotCard(
                name=card["name"],
                image=resolve_card_image(card, backfill_images, image_base_url),
                reversed=is_reversed(card),
                position=position,
            )
        )
    return spread
