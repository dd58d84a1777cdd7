from typing import Optional

import httpx

LLM_PROVIDERS = {
    # OpenAI-compatible chat completion endpoints
    "groq": {
        "label": "Groq",
        "type": "openai",
        "endpoint": "https://api.groq.com/openai/v1/chat/completions",
        "model": "llama-3.3-70b-versatile",
        "api_key_setting": "GROQ_API_KEY",
    },
    "openai": {
        "label": "OpenAI",
        "type": "openai",
        "endpoint": "https://api.openai.com/v1/chat/completions",
        "model": "gpt-4o-mini",
        "api_key_setting": "OPENAI_API_KEY",
    },
    # Google Gemini through the google-genai SDK
    "gemini": {
        "label": "Gemini",
        "type": "gemini",
        "endpoint": None,
        "model": "gemini-2.0-flash-lite",
        "api_key_setting": "GEMINI_API_KEY",
    },
}


def extract_provider_error(response: httpx.Response) -> Optional[str]:
    """
    Pull the provider-supplied message out of an error body shaped like
    {"error": {"message": "..."}}. Returns None when the body is not JSON or has no message.
    """
    try:
        data = response.json()
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return message if isinstance(message, str) and message else None
    if isinstance(error, str) and error:
        return error
    return None


def extract_completion_text(data) -> Optional[str]:
    """Return choices[0].message.content stripped, or None if it is absent or blank."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(content, str):
        return None
    return content.strip() or None
