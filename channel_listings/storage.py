from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from typing import Iterable, List

from .errors import OutputWriteError
from .models import Channel


class StorageBase(ABC):
    """Abstract base class for all storage backends.

    Subclasses must implement write() to persist one provider's channel list.
    """

    @abstractmethod
    def write(self, name: str, channels: Iterable[Channel]) -> str:
        """Persist the channels under ``name`` and return where they went."""


class JsonFileStorage(StorageBase):
    """Stores each provider's channels as a pretty-printed JSON array in ``output_dir``."""

    def __init__(self, output_dir: str) -> None:
        self._output_dir = output_dir

    @property
    def output_dir(self) -> str:
        return self._output_dir

    def write(self, name: str, channels: Iterable[Channel]) -> str:
        """Write ``channels`` to ``name`` (a file name inside the output directory)."""
        path = os.path.join(self._output_dir, name)
        records: List[dict] = [c.to_dict() for c in channels]
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
        except OSError as exc:
            raise OutputWriteError(path, str(exc)) from exc
        return path
