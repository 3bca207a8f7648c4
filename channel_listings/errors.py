from __future__ import annotations


class ScraperError(Exception):
    """Base class for every error raised by the channel listings scraper."""


class NavigationError(ScraperError):
    """A page failed to load within the timeout or hit a network-level failure."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Navigation to {url} failed: {message}")
        self.url = url


class ExtractionError(ScraperError):
    """A provider extractor raised on an unexpected page structure."""


class ProviderNotFoundError(ScraperError, LookupError):
    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f'Provider "{name}" not found. Available providers: {", ".join(available)}'
        )
        self.name = name
        self.available = list(available)


class OutputWriteError(ScraperError):
    """Persisting scraped channels to storage failed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Error writing to file {path}: {message}")
        self.path = path
