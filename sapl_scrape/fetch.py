# -*- coding: utf-8 -*-
"""
Fetch SAPL listing pages concurrently and extract their rows.

One attempt per page, no retry. A page that fails (network error, non-2xx
status, broken markup) is logged and contributes zero records; the other
pages are unaffected.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

import requests
from tqdm import tqdm

from .extract import extract_matters
from .models import LegislativeMatter
from .settings import HEADERS, MAX_WORKERS, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def build_session() -> requests.Session:
    s = requests.Session()
    s.headers.update(HEADERS)
    return s


def fetch(session: requests.Session, url: str, timeout: float = REQUEST_TIMEOUT) -> requests.Response:
    r = session.get(url, timeout=timeout)
    r.raise_for_status()
    return r


def scrape_page(session: Optional[requests.Session], url: str,
                timeout: float = REQUEST_TIMEOUT) -> List[LegislativeMatter]:
    """
    Fetch + extract one page; any failure yields [].
    Without a session, the page gets its own one, closed afterwards.
    """
    own_session = session is None
    try:
        if own_session:
            session = build_session()
        r = fetch(session, url, timeout=timeout)
        matters = extract_matters(r.text)
    except Exception as e:
        logger.error(f"Error scraping {url}: {e}")
        return []
    finally:
        if own_session and session is not None:
            session.close()
    logger.info(f"{len(matters)} matters from {url}")
    return matters


def scrape_pages(urls: Sequence[str], session: Optional[requests.Session] = None,
                 max_workers: int = MAX_WORKERS, timeout: float = REQUEST_TIMEOUT,
                 progress: bool = False) -> List[List[LegislativeMatter]]:
    """
    Scrape every URL in parallel and wait for all of them.
    Results come back in the same order as `urls`, whatever order the
    pages finish in. Each page uses its own Session unless one is passed in.
    """
    if not urls:
        return []
    results: Dict[int, List[LegislativeMatter]] = {}
    workers = max(1, min(max_workers, len(urls)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {pool.submit(scrape_page, session, url, timeout): i for i, url in enumerate(urls)}
        done = as_completed(futures)
        if progress:
            done = tqdm(done, total=len(futures), desc="SAPL pages", leave=False)
        for fut in done:
            results[futures[fut]] = fut.result()
    return [results[i] for i in range(len(urls))]
