"""Sky UK lineup from rxtvinfo.com."""
from __future__ import annotations

from typing import Dict, List

from ..policy import number_startswith
from .base import ProviderConfig, cell_text, page_extractor, soup_for

URL = "https://rxtvinfo.com/sky-channel-list-uk/"

OVERRIDES = {
    "DISC. SCIENCE": "DISCOVERY SCIENCE",
    "DISC. TURBO": "DISCOVERY TURBO",
    "SKY CINEMA SCI-FI/HORROR": "SKY CINEMA SCIFI/HORROR",
    "RTÉJR": "RTE JUNIOR",
    "5": "CHANNEL5",
    "5+1": "CHANNEL5+1",
}


def parse_rows(html: str) -> List[Dict[str, str]]:
    channels: List[Dict[str, str]] = []
    for row in soup_for(html).select("table tbody tr"):
        number = cell_text(row, ".column-1")
        name = cell_text(row, ".column-2")

        # Dashed numbers mark category headings.
        if not name or not number or "-" in number:
            channels.append({})
            continue
        channels.append({"number": number, "name": name})
    return channels


PROVIDER = ProviderConfig(
    name="SKY",
    url=URL,
    extractor=page_extractor(parse_rows),
    overrides=OVERRIDES,
    # Radio stations (0101 onwards) are listed on the page like any other
    # channel; dropping them is our own rule.
    exclude=number_startswith("0"),
    output_file="sky.json",
)
