"""Channel listings scraper package.

Scrapes TV channel lineups from several providers with a headless browser
and normalizes them into canonical ``{number, name}`` records.

Key modules:
    config      -- ScraperSettings run configuration
    models      -- Channel, ProviderTask, TaskResult, RunSummary dataclasses
    errors      -- ScraperError hierarchy
    session     -- SessionManager owning one browser session per task
    backoff     -- BackoffStrategy for exponential retry delays
    retry       -- RetryPolicy wrapping a fallible async operation
    normalize   -- channel name normalization and the ProviderPolicy record pipeline
    policy      -- exclusion predicate helpers
    scheduler   -- TaskScheduler running tasks in fixed-size waves
    metrics     -- ResultAggregator producing run summaries
    storage     -- StorageBase and JsonFileStorage for per-provider files
    registry    -- ProviderRegistry for provider lookup and task creation
    providers   -- DIRECTV, DISH, SKY and Virgin registrations
    service     -- ChannelListingService tying the pieces together
"""
from __future__ import annotations

from .config import ScraperSettings
from .errors import ExtractionError, NavigationError, OutputWriteError, ProviderNotFoundError, ScraperError
from .models import Channel, CustomTask, ProviderTask, RunSummary, StandardTask, TaskResult
from .normalize import normalize, normalize_channel_name
from .service import ChannelListingService, scrape_all_providers, scrape_provider

__all__ = [
    "Channel",
    "ChannelListingService",
    "CustomTask",
    "ExtractionError",
    "NavigationError",
    "OutputWriteError",
    "ProviderNotFoundError",
    "ProviderTask",
    "RunSummary",
    "ScraperError",
    "ScraperSettings",
    "StandardTask",
    "TaskResult",
    "normalize",
    "normalize_channel_name",
    "scrape_all_providers",
    "scrape_provider",
]
