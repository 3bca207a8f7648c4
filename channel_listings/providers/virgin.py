"""Virgin Media UK lineup from rxtvinfo.com."""
from __future__ import annotations

from typing import Dict, List

from ..policy import any_of, number_contains, number_in_range
from .base import ProviderConfig, cell_text, page_extractor, soup_for

URL = "https://rxtvinfo.com/virgin-media-channel-list-uk/"

OVERRIDES = {
    "TNT SPORTS ULTIMATE": "TNT ULTIMATE",
    "ITV1/STV/UTV": "ITV1",
    "SKY CINEMA SCI-FI & HORROR HD": "SKY CINEMA SCIFI/HORROR",
}


def parse_rows(html: str) -> List[Dict[str, str]]:
    channels: List[Dict[str, str]] = []
    for row in soup_for(html).select("table tbody tr"):
        # Regional variants ("In Wales", "In Scotland") duplicate a national channel.
        region = cell_text(row, ".column-3")
        if region.startswith("In"):
            channels.append({})
            continue

        channels.append(
            {
                "number": cell_text(row, ".column-1"),
                "name": cell_text(row, ".column-2"),
            }
        )
    return channels


PROVIDER = ProviderConfig(
    name="Virgin",
    url=URL,
    extractor=page_extractor(parse_rows),
    overrides=OVERRIDES,
    # Dashed numbers are category headers. The 900-999 radio block is listed on
    # the page like any other channel; dropping it is our own rule.
    exclude=any_of(number_contains("-"), number_in_range(900, 999)),
    output_file="virgin.json",
)
