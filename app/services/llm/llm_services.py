# app/services/llm/llm_services.py
import logging
from typing import List

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.core.errors import EmptyReadingError, ModelCallError
from app.models.llm_models import ChatCompletionRequest, ChatMessage, LLMConfig
from app.services.llm.llm_utils import extract_completion_text, extract_provider_error

logger = logging.getLogger(__name__)


def get_gemini_client(api_key: str, timeout_seconds: float) -> genai.Client:
    # HttpOptions.timeout is in milliseconds
    return genai.Client(api_key=api_key, http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)))


async def generate_completion(config: LLMConfig, messages: List[ChatMessage], http_client: httpx.AsyncClient) -> str:
    """
    Sends the system + user messages to the configured provider and returns the trimmed completion.
    Raises ModelCallError on provider failures and EmptyReadingError when no text comes back.
    """
    logger.info(f"Calling {config.label} API (model={config.model})...")
    if config.type == "gemini":
        reading = await query_gemini_api(config, messages)
    else:
        reading = await query_chat_completions_api(config, messages, http_client)

    if not reading:
        raise EmptyReadingError()
    return reading


async def query_chat_completions_api(config: LLMConfig, messages: List[ChatMessage], http_client: httpx.AsyncClient) -> str | None:
    """Queries an OpenAI-compatible /chat/completions endpoint."""
    payload = ChatCompletionRequest(
        model=config.model,
        messages=messages,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
    )
    fallback_message = f"{config.label} API error"

    try:
        response = await http_client.post(
            config.endpoint,
            json=payload.model_dump(),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.api_key}",
            },
        )
    except httpx.TimeoutException as e:
        logger.error(f"{config.label} API timed out: {e}")
        raise ModelCallError(f"{config.label} API timed out")
    except httpx.HTTPError as e:
        logger.error(f"{config.label} API request failed: {e}")
        raise ModelCallError(fallback_message)

    logger.info(f"{config.label} API status: {response.status_code}")

    if not response.is_success:
        message = extract_provider_error(response)
        if message is None:
            logger.error(f"{config.label} error text: {response.text}")
        else:
            logger.error(f"{config.label} error message: {message}")
        raise ModelCallError(message or fallback_message)

    try:
        data = response.json()
    except ValueError:
        logger.error(f"Unparsable {config.label} response: {response.text}")
        raise ModelCallError(fallback_message)

    reading = extract_completion_text(data)
    if not reading:
        logger.error(f"No reading in {config.label} response: {data}")
    return reading


async def query_gemini_api(config: LLMConfig, messages: List[ChatMessage]) -> str | None:
    """Queries Gemini with the system message as system_instruction and the user message as contents."""
    system_instruction = "\n\n".join(m.content for m in messages if m.role == "system")
    contents = "\n\n".join(m.content for m in messages if m.role != "system")

    client = get_gemini_client(config.api_key, config.timeout_seconds)
    try:
        response = await client.aio.models.generate_content(
            model=config.model,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction or None,
                temperature=config.temperature,
                max_output_tokens=config.max_tokens,
            ),
        )
    except genai_errors.APIError as e:
        logger.error(f"Gemini API error ({config.model}): {e}")
        raise ModelCallError(e.message or f"{config.label} API error")
    except httpx.TimeoutException as e:
        logger.error(f"{config.label} API timed out: {e}")
        raise ModelCallError(f"{config.label} API timed out")
    finally:
        await client.aio.aclose()

    text = getattr(response, "text", None)
    reading = text.strip() if isinstance(text, str) else None
    if not reading:
        logger.error(f"No reading in {config.label} response")
    return reading
