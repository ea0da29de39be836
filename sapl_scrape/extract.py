# -*- coding: utf-8 -*-
"""
Turn one SAPL search-results page into LegislativeMatter records.

Expected row layout (table.table):
  col 0: <a href="...?protocolo=NNN">IND 123/2025</a>
  col 1: summary (ementa)
  col 2: author
  col 3: presentation date
Header rows, separator rows and rows with an empty link are skipped.
"""

import logging
import re
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, FeatureNotFound

from .classify import classify_summary, derive_location
from .models import PROTOCOL_NOT_AVAILABLE, LegislativeMatter
from .settings import BASE, STATUS_LITERAL

logger = logging.getLogger(__name__)

PROTOCOL_RE = re.compile(r"protocolo=(\d+)")
MIN_COLUMNS = 4


# ---- Utils ----
def soupify(html: str) -> BeautifulSoup:
    """Use lxml if available; otherwise fall back to the stdlib parser."""
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def clean(s: Optional[str]) -> str:
    return re.sub(r"\s+", " ", (s or "")).strip()


def protocol_from_href(href: str) -> str:
    m = PROTOCOL_RE.search(href or "")
    return m.group(1) if m else PROTOCOL_NOT_AVAILABLE


def absolute_link(href: str, base: str = BASE) -> str:
    if (href or "").startswith("http"):
        return href
    return urljoin(base, href or "")


# ---- Row parsing ----
def parse_row(tr) -> Optional[LegislativeMatter]:
    cells = tr.find_all("td", recursive=False)
    if len(cells) < MIN_COLUMNS:
        return None

    a = cells[0].find("a")
    matter_id = clean(a.get_text(" ")) if a else ""
    if not matter_id:
        return None

    href = a.get("href", "") or ""
    summary = clean(cells[1].get_text(" "))
    return LegislativeMatter(
        id=matter_id,
        summary=summary,
        author=clean(cells[2].get_text(" ")),
        presentation_date=clean(cells[3].get_text(" ")),
        category=classify_summary(summary),
        location=derive_location(summary),
        status=STATUS_LITERAL,
        protocol=protocol_from_href(href),
        pdf_link=absolute_link(href),
    )


def extract_matters(html: str) -> List[LegislativeMatter]:
    """
    Parse every data row of a listing page. Rows are read from table.table;
    if the page lost that class, any table row is considered.
    """
    soup = soupify(html or "")
    rows = soup.select("table.table tr") or soup.select("table tr")
    matters: List[LegislativeMatter] = []
    for tr in rows:
        matter = parse_row(tr)
        if matter is not None:
            matters.append(matter)
    logger.debug(f"Extracted {len(matters)} matters from {len(rows)} rows")
    return matters
