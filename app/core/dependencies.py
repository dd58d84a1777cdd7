# app/core/dependencies.py
from datetime import datetime
from typing import AsyncGenerator, Callable

import httpx
from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.reading_services import ReadingOrchestrator


async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Dependency to provide an outbound HTTP client bounded by the configured timeout."""
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS, follow_redirects=True) as client:
        yield client


def get_clock() -> Callable[[], datetime]:
    return datetime.now


def get_reading_orchestrator(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> ReadingOrchestrator:
    return ReadingOrchestrator(settings, http_client, clock)
