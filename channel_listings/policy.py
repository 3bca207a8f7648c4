"""Exclusion predicate building blocks used by provider registrations.

ProviderPolicy lives with the normalization pipeline and is re-exported here.
"""
from __future__ import annotations

from .models import Channel, ExcludePredicate
from .normalize import ProviderPolicy

__all__ = ["ProviderPolicy", "any_of", "number_contains", "number_in_range", "number_startswith"]


def number_contains(fragment: str) -> ExcludePredicate:
    """Exclude channels whose number contains ``fragment`` (e.g. "-" category rows)."""

    def predicate(channel: Channel) -> bool:
        return fragment in channel.number

    return predicate


def number_startswith(prefix: str) -> ExcludePredicate:
    """Exclude channels whose number starts with ``prefix`` (e.g. radio prefixes)."""

    def predicate(channel: Channel) -> bool:
        return channel.number.startswith(prefix)

    return predicate


def number_in_range(low: int, high: int) -> ExcludePredicate:
    """Exclude channels whose number is an integer within ``[low, high]``."""

    def predicate(channel: Channel) -> bool:
        if not channel.number.isdigit():
            return False
        return low <= int(channel.number) <= high

    return predicate


def any_of(*predicates: ExcludePredicate) -> ExcludePredicate:
    def predicate(channel: Channel) -> bool:
        return any(p(channel) for p in predicates)

    return predicate
