"""DISH Network lineup from allconnect.com's channel guide."""
from __future__ import annotations

from typing import Dict, List

from .base import ProviderConfig, cell_text, page_extractor, soup_for

URL = "https://www.allconnect.com/providers/dish/channel-guide"

OVERRIDES = {
    "NICK": "NICKELODEON",
}


def parse_rows(html: str) -> List[Dict[str, str]]:
    channels: List[Dict[str, str]] = []
    for row in soup_for(html).select("#dish-channel-guide tbody tr"):
        number = cell_text(row, "td.column-2")
        name = cell_text(row, "td.column-1")

        # Dashed numbers are package ranges, not channels.
        if not name or "-" in number:
            channels.append({})
            continue
        channels.append({"number": number, "name": name})
    return channels


PROVIDER = ProviderConfig(
    name="DISH",
    url=URL,
    extractor=page_extractor(parse_rows),
    overrides=OVERRIDES,
    output_file="dish.json",
)
