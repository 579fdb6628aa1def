"""USDA FoodData Central API client."""

from dataclasses import dataclass, field
from typing import Protocol

import httpx

DEFAULT_DATA_TYPES = ("Foundation", "Survey (FNDDS)", "SR Legacy", "Branded")


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    @property
    def has_credentials(self) -> bool:
        """Return True when an API key is configured."""

    async def search_foods(self, query: str, page_size: int = 25) -> dict[str, object]:
        """Search foods by query and return raw API data."""


@dataclass(frozen=True)
class FdcConfig:
    """Connection settings for FoodData Central."""

    api_key: str | None
    base_url: str = "https://api.nal.usda.gov/fdc/v1"
    timeout_seconds: float = 15.0
    data_types: tuple[str, ...] = field(default=DEFAULT_DATA_TYPES)


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    config: FdcConfig
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, config: FdcConfig) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(config=config, http_client=httpx.AsyncClient())

    @property
    def has_credentials(self) -> bool:
        return bool(self.config.api_key)

    async def search_foods(self, query: str, page_size: int = 25) -> dict[str, object]:
        """Search foods by query."""
        url = f"{self.config.base_url}/foods/search"
        response = await self.http_client.post(
            url,
            params={"api_key": self.config.api_key},
            json={
                "query": query,
                "pageSize": page_size,
                "dataType": list(self.config.data_types),
            },
            timeout=self.config.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
