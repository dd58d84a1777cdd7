# app/models/llm_models.py
from typing import List, Literal, Optional

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    model: str
    messages: List[ChatMessage]
    temperature: float = 0.7
    max_tokens: int = 250


class LLMConfig(BaseModel):
    provider: str
    label: str
    type: Literal["openai", "gemini"]
    endpoint: Optional[str] = None
    model: str
    api_key: str
    temperature: float = 0.7
    max_tokens: int = 250
    timeout_seconds: float = 15.0
