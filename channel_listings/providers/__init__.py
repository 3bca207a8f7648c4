"""Registered channel-lineup providers, in the order they are scraped."""
from __future__ import annotations

from . import directv, dish, sky, virgin
from .base import ProviderConfig

ALL_PROVIDERS = (
    directv.PROVIDER,
    dish.PROVIDER,
    sky.PROVIDER,
    virgin.PROVIDER,
)

__all__ = ["ALL_PROVIDERS", "ProviderConfig"]
