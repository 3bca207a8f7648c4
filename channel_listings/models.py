from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Channel:
    number: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"number": self.number, "name": self.name}


# A raw extracted row: any of "number" / "name" may be missing or empty.
RawChannel = Mapping[str, Any]
Extractor = Callable[[Any], Awaitable[Sequence[RawChannel]]]
ExcludePredicate = Callable[[Channel], bool]


def never_exclude(channel: Channel) -> bool:
    return False


@dataclass(frozen=True)
class StandardTask:
    """Default task body: acquire a session, extract, normalize."""


@dataclass(frozen=True)
class CustomTask:
    """Task body replaced entirely by ``runner(task)``, which returns final channels."""

    runner: Callable[["ProviderTask"], Awaitable[Sequence[Channel]]]


TaskMode = Union[StandardTask, CustomTask]


@dataclass(frozen=True)
class ProviderTask:
    task_id: str
    source_url: str
    extractor: Extractor
    overrides: Mapping[str, str] = field(default_factory=dict)
    exclude: ExcludePredicate = never_exclude
    sink: Optional[str] = None
    mode: TaskMode = field(default_factory=StandardTask)

    def __post_init__(self) -> None:
        # Freeze the override table together with the task.
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))


class TaskState(enum.Enum):
    PENDING = "pending"
    ACQUIRING = "acquiring"
    NAVIGATING = "navigating"
    EXTRACTING = "extracting"
    NORMALIZING = "normalizing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_running(self) -> bool:
        return self not in (TaskState.PENDING, TaskState.SUCCEEDED, TaskState.FAILED)


@dataclass(frozen=True)
class Succeeded:
    channels: Tuple[Channel, ...]
    duration_ms: int


@dataclass(frozen=True)
class Failed:
    error: BaseException
    duration_ms: int


Outcome = Union[Succeeded, Failed]


@dataclass(frozen=True)
class TaskResult:
    task_id: str
    outcome: Outcome

    @property
    def success(self) -> bool:
        return isinstance(self.outcome, Succeeded)

    @property
    def duration_ms(self) -> int:
        return self.outcome.duration_ms

    @property
    def channels(self) -> Tuple[Channel, ...]:
        if isinstance(self.outcome, Succeeded):
            return self.outcome.channels
        return ()

    @property
    def error(self) -> Optional[BaseException]:
        if isinstance(self.outcome, Failed):
            return self.outcome.error
        return None


@dataclass(frozen=True)
class RunSummary:
    results: Tuple[TaskResult, ...]
    total_duration_ms: int
    success_rate: float
    total_channels: int
    failed: Tuple[TaskResult, ...]

    @property
    def succeeded_count(self) -> int:
        return len(self.results) - len(self.failed)

    @property
    def success_rate_label(self) -> str:
        return f"{self.succeeded_count}/{len(self.results)}"
