# app/api/routes/tarot_routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.core.dependencies import get_reading_orchestrator
from app.core.errors import ReadingError
from app.models.tarot_models import ErrorResponse, TarotReadingResponse
from app.services.reading_services import ReadingOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=TarotReadingResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_tarot_reading(orchestrator: ReadingOrchestrator = Depends(get_reading_orchestrator)):
    """
    Draw three cards (Past, Present, Future) and return them with a generated reading.
    """
    try:
        return await orchestrator.draw_reading()
    except ReadingError as e:
        logger.error(f"Tarot reading failed: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.exception(f"API Error: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error")


@router.options("")
async def tarot_preflight():
    """CORS preflight; the headers are added by the app-wide middleware."""
    return Response(status_code=200)


@router.api_route(
    "",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def tarot_method_not_allowed():
    raise HTTPException(status_code=405, detail="Method not allowed")
