"""API Ninjas client for nutrition and exercise data."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NinjaClient(Protocol):
    """Interface for API Ninjas lookups."""

    async def nutrition(self, query: str) -> list[dict[str, object]]:
        """Return nutrition items for a free-text query."""

    async def exercises(self, params: dict[str, str]) -> list[dict[str, object]]:
        """Return exercises matching the filter params."""


@dataclass
class HttpxNinjaClient(NinjaClient):
    """HTTPX-backed API Ninjas client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxNinjaClient":
        """Create a client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def nutrition(self, query: str) -> list[dict[str, object]]:
        return await self._get("/nutrition", {"query": query})

    async def exercises(self, params: dict[str, str]) -> list[dict[str, object]]:
        return await self._get("/exercises", params)

    async def _get(
        self, path: str, params: dict[str, str]
    ) -> list[dict[str, object]]:
        response = await self.http_client.get(
            f"{self.base_url}{path}",
            params=params,
            headers={"X-Api-Key": self.api_key},
            timeout=15,
        )
        response.raise_for_status()
        data = response.json()
        return data if isinstance(data, list) else []

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
