from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Tuple

BLOCKED_RESOURCE_TYPES: Tuple[str, ...] = ("image", "stylesheet", "font", "media")


@dataclass(frozen=True)
class ScraperSettings:
    """Run configuration, built once and handed to each component.

    Defaults match the values the scraper has always shipped with: a headless
    browser, four providers in flight, a single attempt per provider and a
    30 second navigation timeout waiting for the network to go idle.
    """

    headless: bool = True
    max_concurrent: int = 4
    retry_attempts: int = 1
    retry_base_delay_ms: int = 1000
    navigation_timeout_ms: int = 30000
    wait_until: str = "networkidle"
    blocked_resources: Tuple[str, ...] = BLOCKED_RESOURCE_TYPES
    output_dir: str = "data"

    def __post_init__(self) -> None:
        if self.max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        if self.retry_attempts < 1:
            raise ValueError("retry_attempts must be >= 1")
        if self.retry_base_delay_ms < 0:
            raise ValueError("retry_base_delay_ms must be >= 0")
        if self.navigation_timeout_ms <= 0:
            raise ValueError("navigation_timeout_ms must be > 0")

    def with_overrides(self, **changes: Any) -> "ScraperSettings":
        """Return a copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
