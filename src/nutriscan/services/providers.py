"""Search providers that return normalized nutrient records."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from nutriscan.adapters.fdc_client import FdcClient
from nutriscan.adapters.off_client import OpenFoodFactsClient
from nutriscan.domain.errors import ProviderError
from nutriscan.domain.nutrition import NutrientRecord, NutrientSource
from nutriscan.services.normalizer import normalize_fdc, normalize_off

MAX_RESULTS = 15

_logger = logging.getLogger(__name__)


class SearchProvider(Protocol):
    """A nutrition database that can be searched by free text."""

    name: str
    source: NutrientSource

    async def search(self, query: str) -> list[NutrientRecord]:
        """Return normalized matches, or raise ``ProviderError``."""


@dataclass
class FdcSearchProvider(SearchProvider):
    """Primary provider backed by USDA FoodData Central."""

    client: FdcClient
    max_results: int = MAX_RESULTS
    page_size: int = 25
    name: str = "usda"
    source: NutrientSource = NutrientSource.PRIMARY

    async def search(self, query: str) -> list[NutrientRecord]:
        """Search FDC and normalize the foods it returns."""
        if not self.client.has_credentials:
            raise ProviderError(self.name, "API key not configured")
        try:
            payload = await self.client.search_foods(query, page_size=self.page_size)
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderError(self.name, _describe(exc)) from exc
        foods = _list_field(self.name, payload, "foods")
        records = [
            normalize_fdc(food)
            for food in foods
            if isinstance(food, dict) and food.get("description")
        ]
        _logger.info("Provider %s returned %s foods", self.name, len(records))
        return records[: self.max_results]


@dataclass
class OpenFoodFactsSearchProvider(SearchProvider):
    """Secondary provider backed by Open Food Facts."""

    client: OpenFoodFactsClient
    max_results: int = MAX_RESULTS
    page_size: int = 20
    name: str = "openfoodfacts"
    source: NutrientSource = NutrientSource.SECONDARY

    async def search(self, query: str) -> list[NutrientRecord]:
        """Search Open Food Facts and normalize the products it returns."""
        try:
            payload = await self.client.search_products(
                query, page_size=self.page_size
            )
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderError(self.name, _describe(exc)) from exc
        products = _list_field(self.name, payload, "products")
        records = [
            normalize_off(product)
            for product in products
            if isinstance(product, dict) and product.get("product_name")
        ]
        _logger.info("Provider %s returned %s products", self.name, len(records))
        return records[: self.max_results]


def _list_field(provider: str, payload: object, key: str) -> list[object]:
    """Return ``payload[key]`` as a list; a missing key means no matches."""
    if not isinstance(payload, dict):
        raise ProviderError(provider, "unexpected response body")
    items = payload.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ProviderError(provider, f"unexpected {key!r} field")
    return items


def _describe(exc: Exception) -> str:
    """Short description of a transport failure, with status when present."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    if isinstance(exc, httpx.TimeoutException):
        return "timed out"
    return f"{type(exc).__name__}: {exc}"
