"""
GitHub transport for the component catalog.

Two endpoints are used:
- the contents API, to list the component folders at a ref
- raw.githubusercontent.com, to fetch a component's usage document

The contents API is authenticated with ``GITHUB_TOKEN``/``GH_TOKEN`` when
present. Without a token requests still work but share the low anonymous
rate limit.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import CatalogConfig
from .errors import RemoteUnavailable

logger = logging.getLogger(__name__)


class GitHubSource:
    """Lists component folders and fetches raw usage documents."""

    def __init__(self, config: CatalogConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

    def _client(self, headers: dict[str, str] | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=headers,
            timeout=self.config.http_timeout,
            transport=self._transport,
            follow_redirects=True,
        )

    def _api_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    async def list_entries(self) -> list[dict[str, Any]]:
        """Return the raw directory listing, following pagination.

        Raises:
            RemoteUnavailable: On a non-success status or connection failure
        """
        url: str | None = self.config.listing_url
        params: dict[str, str] | None = {"ref": self.config.ref}
        entries: list[dict[str, Any]] = []

        async with self._client(self._api_headers()) as client:
            while url:
                try:
                    response = await client.get(url, params=params)
                except httpx.HTTPError as e:
                    logger.warning("GitHub listing request failed: %s", e)
                    raise RemoteUnavailable(None, str(e), url) from e

                if not response.is_success:
                    logger.warning(
                        "GitHub listing returned %d for %s", response.status_code, response.url
                    )
                    raise RemoteUnavailable(
                        response.status_code, response.reason_phrase, str(response.url)
                    )

                data = response.json()
                if not isinstance(data, list):
                    raise RemoteUnavailable(
                        response.status_code, f"expected a directory listing at {self.config.path}"
                    )
                entries.extend(data)

                # Next-page URLs already carry the query string
                url = response.links.get("next", {}).get("url")
                params = None

        logger.debug("GitHub listing returned %d entries", len(entries))
        return entries

    async def list_folders(self) -> list[str]:
        """Return the names of directory entries, in listing order."""
        entries = await self.list_entries()
        return [entry["name"] for entry in entries if entry.get("type") == "dir"]

    async def fetch_usage(self, canonical: str) -> str | None:
        """Fetch the upstream usage document, or None when unavailable."""
        url = self.config.usage_url(canonical)
        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Usage fetch for %s failed: %s", canonical, e)
            return None

        if not response.is_success:
            logger.info("No upstream usage for %s (%d)", canonical, response.status_code)
            return None
        return response.text or None
