"""Food search across an ordered chain of providers."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutriscan.domain.errors import AllProvidersFailedError, ProviderError
from nutriscan.domain.nutrition import NutrientRecord, SearchOutcome
from nutriscan.services.providers import SearchProvider
from nutriscan.services.ranking import rank

MIN_QUERY_LENGTH = 2
NO_SOURCE = "none"

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Query providers in order and rank the first non-empty answer.

    Providers are tried strictly one after another. A provider that fails
    or returns nothing hands over to the next one; the first provider to
    return at least one record ends the search. When every provider fails
    the outcome carries an ``AllProvidersFailedError`` instead of raising.
    """

    providers: Sequence[SearchProvider]

    async def search(self, query: str) -> SearchOutcome:
        """Search foods matching a free-text query."""
        term = query.strip()
        if len(term) < MIN_QUERY_LENGTH:
            return SearchOutcome(results=[], source=NO_SOURCE)

        failures: list[ProviderError] = []
        results: list[NutrientRecord] = []
        source = NO_SOURCE
        for provider in self.providers:
            try:
                results = await provider.search(term)
            except ProviderError as exc:
                _logger.warning("Search provider %s failed: %s", provider.name, exc)
                failures.append(exc)
                continue
            source = provider.source.value
            if results:
                break

        if failures and len(failures) == len(self.providers):
            return SearchOutcome(
                results=[],
                source=NO_SOURCE,
                failures=failures,
                error=AllProvidersFailedError(failures),
            )
        _logger.info(
            "Search query=%r source=%s results=%s", term, source, len(results)
        )
        return SearchOutcome(
            results=rank(results, term) if results else [],
            source=source,
            failures=failures,
        )
