"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_SEARCH_FIELDS = "product_name,nutriments,code,brands,serving_size"


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts interactions."""

    async def search_products(
        self, query: str, page_size: int = 20
    ) -> dict[str, object]:
        """Search products by free text and return raw API data."""

    async def get_product(self, barcode: str) -> dict[str, object] | None:
        """Fetch a product by barcode; ``None`` when the API reports 404."""


@dataclass(frozen=True)
class OpenFoodFactsConfig:
    """Connection settings for Open Food Facts."""

    base_url: str = "https://world.openfoodfacts.org"
    timeout_seconds: float = 20.0
    user_agent: str = "NutriScan/1.0"


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    config: OpenFoodFactsConfig
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, config: OpenFoodFactsConfig) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            config=config,
            http_client=httpx.AsyncClient(
                headers={"User-Agent": config.user_agent}
            ),
        )

    async def search_products(
        self, query: str, page_size: int = 20
    ) -> dict[str, object]:
        """Search products with the legacy full-text endpoint."""
        url = f"{self.config.base_url}/cgi/search.pl"
        response = await self.http_client.get(
            url,
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "page_size": page_size,
                "fields": _SEARCH_FIELDS,
            },
            timeout=self.config.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def get_product(self, barcode: str) -> dict[str, object] | None:
        """Fetch a single product by barcode."""
        url = f"{self.config.base_url}/api/v2/product/{barcode}.json"
        response = await self.http_client.get(
            url, timeout=self.config.timeout_seconds
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
