"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Any failure talking to the Unsplash API.

    Routes catch this themselves and answer with their own fixed error body.
    """


class UpstreamNetworkError(UpstreamError):
    pass


class UpstreamStatusError(UpstreamError):
    def __init__(self, url: str, upstream_status: int):
        super().__init__(f"Upstream returned HTTP {upstream_status} for {url}")
        self.upstream_status = upstream_status


class UpstreamDecodeError(UpstreamError):
    pass


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
