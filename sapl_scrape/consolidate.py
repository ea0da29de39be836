# -*- coding: utf-8 -*-
"""
Merge per-page results into the served dataset.

Dedup rule: records are keyed by id and a later duplicate REPLACES an earlier
one (last seen wins) while keeping the slot of the first occurrence. With
pages flattened in URL order this means page 2 beats page 1 for the same id.
The final order is newest first: year desc, then sequence desc.
"""

from typing import Dict, Iterable, List, Sequence

from .models import LegislativeMatter, id_sort_key


def flatten(page_results: Iterable[Sequence[LegislativeMatter]]) -> List[LegislativeMatter]:
    return [m for page in page_results for m in page]


def dedupe_by_id(matters: Iterable[LegislativeMatter]) -> List[LegislativeMatter]:
    by_id: Dict[str, LegislativeMatter] = {}
    for m in matters:
        by_id[m.id] = m
    return list(by_id.values())


def sort_by_id(matters: Iterable[LegislativeMatter]) -> List[LegislativeMatter]:
    return sorted(matters, key=lambda m: id_sort_key(m.id))


def consolidate(page_results: Iterable[Sequence[LegislativeMatter]]) -> List[LegislativeMatter]:
    return sort_by_id(dedupe_by_id(flatten(page_results)))
