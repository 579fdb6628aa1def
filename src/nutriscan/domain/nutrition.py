"""Nutrition domain models."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum

from nutriscan.domain.errors import AllProvidersFailedError, ProviderError


class NutrientSource(StrEnum):
    """Provenance tag of a nutrient record."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class NutrientRecord:
    """Normalized nutrition data for one food product."""

    name: str
    barcode: str
    brand: str
    calories: int
    protein: float
    carbs: float
    fat: float
    sugar: float
    source: NutrientSource
    serving_size: str | None = None
    search_score: int | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        data = asdict(self)
        data["source"] = self.source.value
        if self.search_score is None:
            data.pop("search_score")
        return data


@dataclass(frozen=True)
class SearchOutcome:
    """Result of a food search across providers."""

    results: list[NutrientRecord]
    source: str
    failures: list[ProviderError] = field(default_factory=list)
    error: AllProvidersFailedError | None = None

    @property
    def count(self) -> int:
        return len(self.results)


@dataclass(frozen=True)
class ProductLookup:
    """Barcode lookup result and where it came from."""

    source: str
    product: NutrientRecord
