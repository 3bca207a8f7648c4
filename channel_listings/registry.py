from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .errors import ProviderNotFoundError
from .models import ProviderTask
from .providers import ALL_PROVIDERS, ProviderConfig


class ProviderRegistry:
    """Looks up provider registrations and turns them into ProviderTasks.

    Names are matched case-insensitively; registration order is kept so runs
    always submit providers in the same order.
    """

    def __init__(self, providers: Iterable[ProviderConfig] = ALL_PROVIDERS) -> None:
        self._providers: Dict[str, ProviderConfig] = {}
        for config in providers:
            key = config.name.lower()
            if key in self._providers:
                raise ValueError(f"Duplicate provider name: {config.name}")
            self._providers[key] = config

    def names(self) -> List[str]:
        return [config.name for config in self._providers.values()]

    def get(self, name: str) -> ProviderConfig:
        config = self._providers.get(name.lower())
        if config is None:
            raise ProviderNotFoundError(name, self.names())
        return config

    def create_task(self, config: ProviderConfig, write_files: bool = False) -> ProviderTask:
        """Build the task for ``config``; the sink is only set when files are written."""
        return ProviderTask(
            task_id=config.name,
            source_url=config.url,
            extractor=config.extractor,
            overrides=config.overrides,
            exclude=config.exclude,
            sink=config.file_name if write_files else None,
            mode=config.mode,
        )

    def create_tasks(self, names: Optional[Iterable[str]] = None, write_files: bool = False) -> List[ProviderTask]:
        configs = [self.get(n) for n in names] if names is not None else list(self._providers.values())
        return [self.create_task(c, write_files=write_files) for c in configs]
