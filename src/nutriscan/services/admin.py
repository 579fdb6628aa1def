"""Admin diagnostics for external providers."""

from collections.abc import Sequence
from dataclasses import dataclass

from nutriscan.domain.errors import ProviderError
from nutriscan.services.providers import SearchProvider

PROBE_QUERY = "apple"


@dataclass
class AdminService:
    """Operational checks exposed to administrators."""

    providers: Sequence[SearchProvider]

    async def check_providers(self, query: str = PROBE_QUERY) -> list[dict[str, object]]:
        """Run a probe search against every provider and report each outcome."""
        report: list[dict[str, object]] = []
        for provider in self.providers:
            entry: dict[str, object] = {
                "provider": provider.name,
                "source": provider.source.value,
            }
            try:
                results = await provider.search(query)
            except ProviderError as exc:
                entry.update(ok=False, error=str(exc.cause))
            else:
                entry.update(
                    ok=True,
                    count=len(results),
                    sample=results[0].name if results else None,
                )
            report.append(entry)
        return report
