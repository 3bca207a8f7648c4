"""DIRECTV lineup from usdirect.com.

The channel table lists the name in the first column and the number in the
second. Timeshift rows show "NNN-NNNN" and some channels list several numbers
separated by commas; only the first number is kept in both cases.
"""
from __future__ import annotations

from typing import Dict, List

from .base import ProviderConfig, cell_text, page_extractor, soup_for

URL = "https://www.usdirect.com/channels"

OVERRIDES = {
    "CHEDDAR NEWS8": "CHEDDAR NEWS",
    "DIRECTV 4K 1": "DIRECTV 4K",
    "DIRECTV 4K LIVE 1": "DIRECTV 4K LIVE",
    "DIRECTV 4K LIVE 2 1": "DIRECTV 4K LIVE 2",
}


def parse_rows(html: str) -> List[Dict[str, str]]:
    rows = soup_for(html).select("table tr")
    channels: List[Dict[str, str]] = []
    # First row is the table header.
    for row in rows[1:]:
        number = cell_text(row, "td:nth-child(2)")
        name = cell_text(row, "td:nth-child(1)")

        if "-" in number:
            number = number.split("-")[0].strip()
        if "," in number:
            number = number.split(",")[0].strip()

        if not name or not number:
            channels.append({})
            continue
        channels.append({"number": number, "name": name})
    return channels


PROVIDER = ProviderConfig(
    name="DIRECTV",
    url=URL,
    extractor=page_extractor(parse_rows),
    overrides=OVERRIDES,
    output_file="directv.json",
)
