# -*- coding: utf-8 -*-
"""
scrape -> consolidate, with the "nothing at all came back" check.
"""

import logging
from typing import Callable, List, Optional, Sequence

from .consolidate import consolidate, flatten
from .errors import DataUnavailableError
from .fetch import scrape_pages
from .models import LegislativeMatter
from .settings import listing_urls

logger = logging.getLogger(__name__)

PageScraper = Callable[[Sequence[str]], List[List[LegislativeMatter]]]


def collect_indications(urls: Optional[Sequence[str]] = None,
                        scraper: Optional[PageScraper] = None) -> List[LegislativeMatter]:
    """
    Scrape all listing pages and return the consolidated, newest-first list.
    Raises DataUnavailableError when the pages produced no records at all.
    """
    urls = list(urls) if urls is not None else listing_urls()
    scraper = scraper or scrape_pages
    page_results = scraper(urls)

    total = len(flatten(page_results))
    if total == 0:
        logger.error(f"No matters extracted from {len(urls)} page(s)")
        raise DataUnavailableError()

    matters = consolidate(page_results)
    logger.info(f"{total} rows scraped, {len(matters)} unique matters")
    return matters
