"""Normalization of raw extracted rows into canonical channels.

Names are made comparable across providers: upper case, no parenthetical
annotations such as "(HD)", one canonical apostrophe and ampersand, single
spaces, and a "+1" timeshift suffix glued to the name.
"""
from __future__ import annotations

import re
from typing import Awaitable, Callable, Iterable, List, Mapping, Optional, Sequence

from .models import (
    Channel,
    CustomTask,
    ExcludePredicate,
    ProviderTask,
    RawChannel,
    StandardTask,
    TaskMode,
    never_exclude,
)

_APOSTROPHES = re.compile(r"[‘’‛ʼ`´]")
_AMPERSANDS = re.compile(r"&amp;|＆|﹠", re.IGNORECASE)
_PARENTHETICAL = re.compile(r"\([^)]*\)")
_DISALLOWED = re.compile(r"[^\w\s&+'./!:-]")
_AMPERSAND_SPACING = re.compile(r"\s*&\s*")
_TIMESHIFT = re.compile(r"\s*\+\s*1\s*$")
_STRAY_PLUS = re.compile(r"(?:(?<=\s)|^)\++(?=\s|$)")
_WHITESPACE = re.compile(r"\s+")


def normalize_channel_name(name: str) -> str:
    # Upper-casing first: it can produce apostrophe variants (e.g. "ŉ" -> "ʼN").
    value = name.upper()
    value = _APOSTROPHES.sub("'", value)
    value = _AMPERSANDS.sub("&", value)
    value = _PARENTHETICAL.sub(" ", value)
    value = _DISALLOWED.sub("", value)
    value = _AMPERSAND_SPACING.sub(" & ", value)
    value = _TIMESHIFT.sub("+1", value)
    value = _STRAY_PLUS.sub(" ", value)
    value = _WHITESPACE.sub(" ", value)
    return value.strip()


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


class ProviderPolicy:
    """Per-provider naming and filtering rules the pipeline runs through.

    normalize_name() gives the canonical name for a raw one (normalization
    followed by the exact-match override lookup) and should_exclude() tells
    whether a canonical channel is dropped. The task mode says whether the
    default body runs at all or a custom runner replaces it.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        exclude: Optional[ExcludePredicate] = None,
        mode: Optional[TaskMode] = None,
    ) -> None:
        self._overrides = dict(overrides or {})
        self._exclude = exclude or never_exclude
        self.mode = mode or StandardTask()

    @classmethod
    def for_task(cls, task: ProviderTask) -> "ProviderPolicy":
        return cls(task.overrides, task.exclude, task.mode)

    @property
    def is_custom(self) -> bool:
        return isinstance(self.mode, CustomTask)

    @property
    def custom_runner(self) -> Optional[Callable[[ProviderTask], Awaitable[Sequence[Channel]]]]:
        if isinstance(self.mode, CustomTask):
            return self.mode.runner
        return None

    def normalize_name(self, name: str) -> str:
        normalized = normalize_channel_name(name)
        return self._overrides.get(normalized, normalized)

    def should_exclude(self, channel: Channel) -> bool:
        return bool(self._exclude(channel))

    def apply(self, raw: Iterable[Optional[RawChannel]]) -> List[Channel]:
        """Turn raw ``{number, name}`` rows into canonical channels.

        Rows without a number or name are dropped, the name goes through
        normalize_name(), and should_exclude() may drop the final channel.
        Extraction order is kept.
        """
        channels: List[Channel] = []
        for item in raw:
            if not item:
                continue
            number = _text(item.get("number"))
            name = _text(item.get("name"))
            if not number or not name:
                continue

            final_name = self.normalize_name(name)
            if not final_name:
                continue

            channel = Channel(number=number, name=final_name)
            if self.should_exclude(channel):
                continue
            channels.append(channel)
        return channels


def normalize(
    raw: Iterable[Optional[RawChannel]],
    overrides: Optional[Mapping[str, str]] = None,
    exclude: Optional[ExcludePredicate] = None,
) -> List[Channel]:
    """Normalize one batch with the given override table and exclusion rule."""
    return ProviderPolicy(overrides, exclude).apply(raw)
