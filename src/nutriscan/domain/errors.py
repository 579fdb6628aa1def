"""Domain error taxonomy."""


class NutriscanError(Exception):
    """Base class for errors raised by the application core."""


class ProviderError(NutriscanError):
    """A single search provider failed; recoverable by trying the next one."""

    def __init__(self, provider: str, cause: object) -> None:
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider}: {cause}")


class AllProvidersFailedError(NutriscanError):
    """Every configured search provider failed for a query."""

    def __init__(self, failures: list[ProviderError]) -> None:
        self.failures = failures
        names = ", ".join(failure.provider for failure in failures) or "none"
        super().__init__(f"All search providers failed ({names})")


class NotFoundError(NutriscanError):
    """The requested entity does not exist for the caller."""


class UpstreamError(NutriscanError):
    """The single upstream call for a lookup failed."""


class InvalidInputError(NutriscanError):
    """Caller input was rejected by a service."""


class ConfigurationError(NutriscanError):
    """A required credential or setting is missing."""
