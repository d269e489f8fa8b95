"""NewsAPI (``https://newsapi.org/v2``) client.

Each endpoint accepts the documented query parameters as keyword arguments;
only truthy values are sent, in the order NewsAPI documents them.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..base.errors import ApiError
from ..base.http import ApiClient, JSON, build_query
from ..base.logging import LogContext, log_event
from ..config.defaults import NEWS_DEFAULT_BASE_URL

TOP_HEADLINES_PARAMS = ("country", "category", "sources", "q", "pageSize", "page")
EVERYTHING_PARAMS = (
    "q",
    "searchIn",
    "sources",
    "domains",
    "excludeDomains",
    "from",
    "to",
    "language",
    "sortBy",
    "pageSize",
    "page",
)
SOURCES_PARAMS = ("category", "language", "country")


class NewsClient(ApiClient):
    """Client for the News API."""

    provider_name = "news"

    def __init__(self, api_key: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = api_key
        super().__init__(NEWS_DEFAULT_BASE_URL, {"X-Api-Key": api_key}, transport=transport)

    async def get_top_headlines(self, **params: Any) -> JSON:
        return await self.get(f"/top-headlines{build_query(params, TOP_HEADLINES_PARAMS)}")

    async def get_everything(self, **params: Any) -> JSON:
        # ``from`` is a keyword; accept ``from_`` as well
        if "from_" in params:
            params.setdefault("from", params.pop("from_"))
        return await self.get(f"/everything{build_query(params, EVERYTHING_PARAMS)}")

    async def get_sources(self, **params: Any) -> JSON:
        """List sources; with no filters the English sources are returned."""
        query = build_query(params, SOURCES_PARAMS) or build_query({"language": "en"}, SOURCES_PARAMS)
        return await self.get(f"/sources{query}")

    async def search_news(
        self,
        query: str,
        *,
        language: Optional[str] = None,
        sort_by: Optional[str] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        response = await self.get_everything(
            q=query,
            language=language,
            sortBy=sort_by or "publishedAt",
            pageSize=page_size or 10,
            page=page or 1,
        )
        return response.get("articles", [])

    async def get_headlines_by_category(self, category: str, country: str = "us", page_size: int = 10) -> List[Dict[str, Any]]:
        response = await self.get_top_headlines(category=category, country=country, pageSize=page_size)
        return response.get("articles", [])

    async def get_latest_news(self, country: str = "us", page_size: int = 10) -> List[Dict[str, Any]]:
        response = await self.get_top_headlines(country=country, pageSize=page_size)
        return response.get("articles", [])

    async def test_connection(self) -> bool:
        """Probe ``sources`` and fall back to ``top-headlines``; never raises."""
        try:
            try:
                await self.get("/sources" + build_query({"language": "en", "pageSize": 1}, ("language", "pageSize")))
            except ApiError:
                await self.get_top_headlines(country="us", pageSize=1)
            return True
        except Exception as exc:  # noqa: BLE001 - reported as False by contract
            log_event(
                self._logger,
                "client.test_connection.failed",
                LogContext(provider=self.provider_name),
                level=logging.WARNING,
                error=str(exc),
            )
            return False


__all__ = ["NewsClient"]
