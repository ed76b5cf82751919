"""FastAPI application entry point for the DigiLens collection proxy."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import register_error_handlers
from services.cache import CacheStore
from services.unsplash import UnsplashClient

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    config: Settings = settings,
    cache: CacheStore | None = None,
    client: UnsplashClient | None = None,
) -> FastAPI:
    app = FastAPI(title="DigiLens Collection Proxy", version="1.0.0")

    app.state.config = config
    app.state.cache = cache if cache is not None else CacheStore(ttl_seconds=config.cache_ttl_seconds)
    app.state.unsplash = client if client is not None else UnsplashClient(
        access_key=config.unsplash_access_key,
        base_url=config.unsplash_api_url,
        username=config.digilens_username,
        timeout=config.upstream_timeout,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if config.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.digilens import router as digilens_router

    app.include_router(health_router)
    app.include_router(digilens_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = config.validate()
        if missing:
            logger.warning("Missing env vars (Unsplash calls will fail): %s", ", ".join(missing))

    @app.on_event("shutdown")
    async def _close_client() -> None:
        await app.state.unsplash.aclose()

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
