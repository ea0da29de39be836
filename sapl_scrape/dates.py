# -*- coding: utf-8 -*-
"""
Presentation-date parsing for SAPL listings.

Two shapes show up in the wild:
  "30/07/2025" (optionally followed by a time or other text)
  "30 de julho de 2025"
Anything else maps to EPOCH, so unparseable dates sort as the oldest.
"""

import logging
import re
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1)

PT_MONTHS = {
    "janeiro": 1, "fevereiro": 2, "março": 3, "abril": 4, "maio": 5, "junho": 6,
    "julho": 7, "agosto": 8, "setembro": 9, "outubro": 10, "novembro": 11, "dezembro": 12,
}

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(s: str) -> Optional[int]:
    """'2025 às 10h' -> 2025, 'abc' -> None."""
    m = LEADING_INT_RE.match(s or "")
    return int(m.group(1)) if m else None


def _parse_numeric(text: str) -> Optional[datetime]:
    parts = text.strip().split(" ")[0].split("/")
    if len(parts) != 3:
        return None
    day, month, year = (_leading_int(p) for p in parts)
    if day is None or month is None or year is None:
        return None
    return datetime(year, month, day)


def _parse_spelled_out(text: str) -> Optional[datetime]:
    parts = text.strip().lower().split(" de ")
    if len(parts) < 3:
        return None
    day = _leading_int(parts[0])
    month = PT_MONTHS.get(parts[1].strip())
    year = _leading_int(parts[2])
    if day is None or month is None or year is None:
        return None
    return datetime(year, month, day)


DATE_PARSERS = (_parse_numeric, _parse_spelled_out)


def parse_pt_date(text: str) -> datetime:
    """Parse a presentation date; never raises, returns EPOCH on failure."""
    for parser in DATE_PARSERS:
        try:
            parsed = parser(text or "")
        except (ValueError, OverflowError, TypeError) as e:
            logger.warning(f"Failed to parse date {text!r}: {e}")
            return EPOCH
        if parsed is not None:
            return parsed
    return EPOCH
