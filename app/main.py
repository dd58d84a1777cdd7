# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import root_routes, tarot_routes
from app.core.config import get_settings
from app.models.tarot_models import ErrorResponse

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(title="Tarot Reading API")


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Every response, errors included, carries the same CORS headers."""
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {e}")
        response = JSONResponse(status_code=500, content=ErrorResponse(error=str(e) or "Unknown error").model_dump())
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=getattr(exc, "headers", None),
    )


app.include_router(root_routes.router)
app.include_router(tarot_routes.router, prefix=settings.TAROT_ROUTE, tags=["Tarot"])
