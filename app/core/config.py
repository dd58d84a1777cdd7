# app/core/config.py
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.errors import ConfigurationError
from app.models.llm_models import LLMConfig
from app.services.llm.llm_utils import LLM_PROVIDERS

DEFAULT_TAROT_API_URL = "https://tarot-api-3hv5.onrender.com/api/v1/cards/random"


class Settings(BaseSettings):
    LLM_PROVIDER: str = "groq"
    GROQ_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None
    LLM_MODEL: Optional[str] = None
    LLM_ENDPOINT: Optional[str] = None
    LLM_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)
    LLM_MAX_TOKENS: int = Field(default=250, gt=0)

    READING_STYLE: str = "practical"
    READING_TIMEZONE: Optional[str] = None

    TAROT_API_URL: str = DEFAULT_TAROT_API_URL
    BACKFILL_CARD_IMAGES: bool = False
    CARD_IMAGE_BASE_URL: str = "https://www.sacred-texts.com/tarot/pkt/img"

    HTTP_TIMEOUT_SECONDS: float = Field(default=15.0, gt=0)
    TAROT_ROUTE: str = "/api/tarot"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def llm_config(self) -> LLMConfig:
        """
        Resolve the active provider profile into a concrete LLM configuration.
        Raises ConfigurationError when the provider is unknown or its API key is missing.
        """
        provider = self.LLM_PROVIDER.lower()
        profile = LLM_PROVIDERS.get(provider)
        if profile is None:
            raise ConfigurationError(f"Unsupported LLM provider: {self.LLM_PROVIDER}")

        api_key = getattr(self, profile["api_key_setting"])
        if not api_key:
            raise ConfigurationError(f"Missing {provider.upper()} API key")

        return LLMConfig(
            provider=provider,
            label=profile["label"],
            type=profile["type"],
            endpoint=self.LLM_ENDPOINT or profile["endpoint"],
            model=self.LLM_MODEL or profile["model"],
            api_key=api_key,
            temperature=self.LLM_TEMPERATURE,
            max_tokens=self.LLM_MAX_TOKENS,
            timeout_seconds=self.HTTP_TIMEOUT_SECONDS,
        )


def get_settings() -> Settings:
    """Settings are read per request so credential changes apply without a restart."""
    return Settings()
