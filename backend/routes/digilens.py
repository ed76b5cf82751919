"""DigiLens proxy routes — cached pass-through to the Unsplash API.

GET /api/digilens/collections               → cached per process (TTL)
GET /api/digilens/collections/{id}/photos   → cached per collection id (TTL)
GET /api/digilens/download/{id}             → never cached
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from errors import UpstreamError
from services.cache import CacheStore
from services.unsplash import UnsplashClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/digilens")


def get_cache(request: Request) -> CacheStore:
    return request.app.state.cache


def get_client(request: Request) -> UnsplashClient:
    return request.app.state.unsplash


def _error(message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=500)


@router.get("/collections")
async def collections(
    cache: CacheStore = Depends(get_cache),
    client: UnsplashClient = Depends(get_client),
):
    """The DigiLens user's collections, straight from Unsplash."""
    cached = cache.get_collections()
    if cached is not None:
        return cached

    try:
        data = await client.fetch_collections()
    except UpstreamError as e:
        logger.warning("Collections fetch failed: %s", e)
        return _error("Failed to fetch DigiLens collections")

    cache.put_collections(data)
    return data


@router.get("/collections/{collection_id}/photos")
async def collection_photos(
    collection_id: str,
    cache: CacheStore = Depends(get_cache),
    client: UnsplashClient = Depends(get_client),
):
    """Photos in one collection, cached independently per collection id."""
    cached = cache.get_photos(collection_id)
    if cached is not None:
        return cached

    try:
        data = await client.fetch_photos(collection_id)
    except UpstreamError as e:
        logger.warning("Photos fetch failed for collection %s: %s", collection_id, e)
        return _error("Failed to fetch photos for this collection")

    cache.put_photos(collection_id, data)
    return data


@router.get("/download/{photo_id}")
async def register_download(
    photo_id: str,
    client: UnsplashClient = Depends(get_client),
):
    """Register a download with Unsplash. Every call goes upstream."""
    try:
        result = await client.register_download(photo_id)
    except UpstreamError as e:
        logger.warning("Download registration failed for photo %s: %s", photo_id, e)
        return _error("Failed to register download")

    return {"success": True, "url": result["url"]}
