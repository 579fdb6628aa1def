"""Supabase-backed product cache."""

from dataclasses import dataclass

from supabase import Client

from nutriscan.domain.nutrition import NutrientRecord, NutrientSource
from nutriscan.services.products import ProductRepository


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for cached products keyed by barcode."""

    client: Client
    table_name: str = "products"

    def get_by_barcode(self, barcode: str) -> NutrientRecord | None:
        """Return the cached product for a barcode, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("barcode", barcode)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def create_product(self, product: NutrientRecord) -> bool:
        """Insert a product unless the barcode is already cached."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "barcode": product.barcode,
                    "name": product.name,
                    "brand": product.brand,
                    "calories": product.calories,
                    "protein": product.protein,
                    "carbs": product.carbs,
                    "fat": product.fat,
                    "sugar": product.sugar,
                    "source": product.source.value,
                    "serving_size": product.serving_size,
                },
                on_conflict="barcode",
                ignore_duplicates=True,
            )
            .execute()
        )
        return bool(response.data)


def _parse_product(row: dict[str, object]) -> NutrientRecord:
    source_raw = str(row.get("source") or NutrientSource.SECONDARY.value)
    return NutrientRecord(
        name=str(row.get("name") or ""),
        barcode=str(row.get("barcode") or ""),
        brand=str(row.get("brand") or ""),
        calories=round(float(row.get("calories") or 0)),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        sugar=float(row.get("sugar") or 0.0),
        source=NutrientSource(source_raw),
        serving_size=row.get("serving_size"),
    )
