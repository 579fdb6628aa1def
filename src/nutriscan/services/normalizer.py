"""Map provider payloads into normalized nutrient records."""

import math
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from nutriscan.domain.nutrition import NutrientRecord, NutrientSource

_FDC_NUTRIENT_IDS: dict[str, tuple[int, ...]] = {
    "calories": (1008,),
    "protein": (1003,),
    "fat": (1004,),
    "carbs": (1005,),
    "sugar": (2000, 1063),
}

_OFF_FIELDS: dict[str, tuple[str, ...]] = {
    "protein": ("proteins_100g",),
    "carbs": ("carbohydrates_100g",),
    "fat": ("fat_100g",),
    "sugar": ("sugars_100g",),
}

KJ_PER_KCAL = 4.184


def normalize(
    record: Mapping[str, object], source: NutrientSource | str
) -> NutrientRecord:
    """Normalize a raw provider record for the given source."""
    if NutrientSource(source) is NutrientSource.PRIMARY:
        return normalize_fdc(record)
    return normalize_off(record)


def normalize_fdc(food: Mapping[str, object]) -> NutrientRecord:
    """Normalize a FoodData Central food (search or detail shape)."""
    amounts = _fdc_amounts(_as_list(food.get("foodNutrients")))

    def first(field: str) -> float:
        for nutrient_id in _FDC_NUTRIENT_IDS[field]:
            value = amounts.get(nutrient_id, 0.0)
            if value:
                return value
        return 0.0

    barcode = _text(food.get("gtinUpc"))
    if not barcode and food.get("fdcId") is not None:
        barcode = f"usda-{food['fdcId']}"
    return NutrientRecord(
        name=_text(food.get("description")),
        barcode=barcode,
        brand=_text(food.get("brandName")) or _text(food.get("brandOwner")),
        calories=int(_round(first("calories"), 0)),
        protein=_round(first("protein"), 1),
        carbs=_round(first("carbs"), 1),
        fat=_round(first("fat"), 1),
        sugar=_round(first("sugar"), 1),
        source=NutrientSource.PRIMARY,
    )


def normalize_off(product: Mapping[str, object]) -> NutrientRecord:
    """Normalize an Open Food Facts product."""
    nutriments = product.get("nutriments")
    if not isinstance(nutriments, Mapping):
        nutriments = {}

    def first(field: str) -> float:
        for name in _OFF_FIELDS[field]:
            value = _number(nutriments.get(name))
            if value:
                return value
        return 0.0

    calories = _number(nutriments.get("energy-kcal_100g"))
    if not calories:
        calories = _number(nutriments.get("energy_100g")) / KJ_PER_KCAL

    product_name = _text(product.get("product_name"))
    brands = _text(product.get("brands"))
    name = f"{product_name} - {brands}" if product_name and brands else product_name
    return NutrientRecord(
        name=name,
        barcode=_text(product.get("code")),
        brand=brands,
        calories=int(_round(calories, 0)),
        protein=_round(first("protein"), 1),
        carbs=_round(first("carbs"), 1),
        fat=_round(first("fat"), 1),
        sugar=_round(first("sugar"), 1),
        source=NutrientSource.SECONDARY,
        serving_size=_text(product.get("serving_size")) or None,
    )


def _fdc_amounts(food_nutrients: Iterable[object]) -> dict[int, float]:
    """Collect nutrient amounts keyed by FDC nutrient id, first entry wins."""
    amounts: dict[int, float] = {}
    for nutrient in food_nutrients:
        if not isinstance(nutrient, Mapping):
            continue
        info = nutrient.get("nutrient")
        nutrient_id = nutrient.get("nutrientId")
        if nutrient_id is None and isinstance(info, Mapping):
            nutrient_id = info.get("id")
        if not isinstance(nutrient_id, int) or nutrient_id in amounts:
            continue
        raw = nutrient.get("value")
        if raw is None:
            raw = nutrient.get("amount")
        amounts[nutrient_id] = _number(raw)
    return amounts


def _number(value: object) -> float:
    """Coerce a provider value to a non-negative float, or 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _round(value: float, digits: int) -> float:
    """Round half-up to the given number of decimal places."""
    quantum = Decimal(1).scaleb(-digits)
    try:
        rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return 0.0
    return float(rounded)


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_list(value: object) -> list[object]:
    return value if isinstance(value, list) else []
