"""Barcode lookup backed by a write-once product cache."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

import httpx

from nutriscan.adapters.off_client import OpenFoodFactsClient
from nutriscan.domain.errors import NotFoundError, UpstreamError
from nutriscan.domain.nutrition import NutrientRecord, ProductLookup
from nutriscan.services.normalizer import normalize_off

DEFAULT_SERVING_SIZE = "100g"

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for cached products."""

    def get_by_barcode(self, barcode: str) -> NutrientRecord | None:
        """Return the cached product for a barcode, if present."""

    def create_product(self, product: NutrientRecord) -> bool:
        """Insert a product; return False when the barcode already exists."""


@dataclass
class ProductLookupService:
    """Resolve barcodes from the cache first, then Open Food Facts."""

    repository: ProductRepository
    client: OpenFoodFactsClient

    async def lookup(self, barcode: str) -> ProductLookup:
        """Return the product for a barcode.

        Raises ``NotFoundError`` when the product is unknown upstream and
        ``UpstreamError`` when the upstream call itself fails.
        """
        code = barcode.strip()
        cached = self.repository.get_by_barcode(code)
        if cached is not None:
            _logger.info("Barcode %s served from cache", code)
            return ProductLookup(source="cache", product=cached)

        try:
            payload = await self.client.get_product(code)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Barcode %s upstream lookup failed: %s", code, exc)
            raise UpstreamError(f"Product lookup failed for {code}") from exc

        product_data = _product_from_payload(payload)
        if product_data is None:
            _logger.info("Barcode %s not found", code)
            raise NotFoundError(f"Product {code} not found")

        normalized = normalize_off(product_data)
        product = replace(
            normalized,
            barcode=code,
            name=_text(product_data.get("product_name")) or "Unknown",
            serving_size=normalized.serving_size or DEFAULT_SERVING_SIZE,
        )
        if not self.repository.create_product(product):
            existing = self.repository.get_by_barcode(code)
            _logger.info("Barcode %s was cached concurrently", code)
            return ProductLookup(source="cache", product=existing or product)
        _logger.info("Barcode %s cached from upstream", code)
        return ProductLookup(source="api", product=product)


def _product_from_payload(payload: dict[str, object] | None) -> dict | None:
    """Return the product object of an OFF response, if one was found."""
    if not isinstance(payload, dict):
        return None
    if payload.get("status") == 0:
        return None
    product = payload.get("product")
    if not isinstance(product, dict) or not product:
        return None
    return product


def _text(value: object) -> str:
    return str(value).strip() if value is not None else ""
