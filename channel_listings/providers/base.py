from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from bs4 import BeautifulSoup

from ..models import ExcludePredicate, Extractor, TaskMode, StandardTask, never_exclude

_PARSER = "html.parser"


@dataclass(frozen=True)
class ProviderConfig:
    """Static registration of one channel-lineup source."""

    name: str
    url: str
    extractor: Extractor
    overrides: Mapping[str, str] = field(default_factory=dict)
    exclude: ExcludePredicate = never_exclude
    output_file: Optional[str] = None
    mode: TaskMode = field(default_factory=StandardTask)

    @property
    def file_name(self) -> str:
        return self.output_file or f"{self.name.lower()}.json"


def soup_for(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, _PARSER)


def cell_text(row: Any, selector: str) -> str:
    cell = row.select_one(selector)
    if cell is None:
        return ""
    return cell.get_text().strip()


def page_extractor(parse_rows: Callable[[str], List[Dict[str, str]]]) -> Extractor:
    """Build an extractor that parses the loaded page's HTML with ``parse_rows``."""

    async def extract(page: Any) -> List[Dict[str, str]]:
        html = await page.content()
        return parse_rows(html)

    extract.__name__ = f"extract_{parse_rows.__module__.rsplit('.', 1)[-1]}"
    return extract
