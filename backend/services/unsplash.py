"""Unsplash API client for the DigiLens collections.

The access key is passed as the ``client_id`` query parameter on every call.
No retries: a single failed attempt is raised as an UpstreamError subclass.
Calls time out after UPSTREAM_TIMEOUT seconds (10 by default) instead of
waiting forever; a timeout surfaces as UpstreamNetworkError.
"""

import logging
from typing import Any

import httpx

from errors import UpstreamDecodeError, UpstreamNetworkError, UpstreamStatusError

logger = logging.getLogger(__name__)

PER_PAGE = 30


class UnsplashClient:
    def __init__(
        self,
        access_key: str | None,
        base_url: str = "https://api.unsplash.com",
        username: str = "digilens",
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_key = access_key
        self.username = username
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get_json(self, path: str, params: dict | None = None) -> Any:
        query = dict(params or {})
        query["client_id"] = self.access_key or ""

        logger.info("GET %s", path)
        try:
            resp = await self._http.get(path, params=query)
        except httpx.HTTPError as e:
            raise UpstreamNetworkError(f"Request to {path} failed: {e}") from e

        if resp.is_error:
            raise UpstreamStatusError(path, resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamDecodeError(f"Invalid JSON from {path}: {e}") from e

    async def fetch_collections(self) -> Any:
        """List the configured user's collections (first page)."""
        return await self._get_json(
            f"/users/{self.username}/collections", params={"per_page": PER_PAGE}
        )

    async def fetch_photos(self, collection_id: str) -> Any:
        """List photos in a collection (first page)."""
        return await self._get_json(
            f"/collections/{collection_id}/photos", params={"per_page": PER_PAGE}
        )

    async def register_download(self, photo_id: str) -> dict:
        """Tell Unsplash a photo is being downloaded; returns the download url."""
        data = await self._get_json(f"/photos/{photo_id}/download")
        if not isinstance(data, dict) or not isinstance(data.get("url"), str):
            raise UpstreamDecodeError(f"Download response for {photo_id} has no url")
        return {"url": data["url"]}
