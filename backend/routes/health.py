"""Health and readiness check routes."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()

ACK_MESSAGE = "DigiLens Unsplash Collection Server Running"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return ACK_MESSAGE


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check — no external calls."""
    return {
        "status": "ok",
        "service": "digilens-proxy",
        "commit": request.app.state.config.git_sha,
        "cache": request.app.state.cache.stats(),
    }
