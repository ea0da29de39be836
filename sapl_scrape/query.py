# -*- coding: utf-8 -*-
"""
Filtering/sorting over an already consolidated list of matters.

All functions return new lists and leave the input alone, so a view can be
recomputed from scratch every time the filter state changes.
"""

from collections import Counter
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence

from .dates import parse_pt_date
from .models import ALL, CATEGORIES, LegislativeMatter, id_sort_key

SORT_BY_ID = "id"
SORT_BY_DATE = "date"
SORT_OPTIONS = (SORT_BY_ID, SORT_BY_DATE)


def filter_by_category(matters: Iterable[LegislativeMatter], category: str = ALL) -> List[LegislativeMatter]:
    if category == ALL:
        return list(matters)
    return [m for m in matters if m.category == category]


def search_fields(m: LegislativeMatter) -> List[str]:
    fields = [m.id, m.summary]
    if m.location.address:
        fields.append(m.location.address)
    if m.location.neighborhood:
        fields.append(m.location.neighborhood)
    fields.append(m.protocol)
    return fields


def filter_by_text(matters: Iterable[LegislativeMatter], search_query: str = "") -> List[LegislativeMatter]:
    q = (search_query or "").strip().lower()
    if not q:
        return list(matters)
    return [m for m in matters if any(q in f.lower() for f in search_fields(m))]


def sort_matters(matters: Iterable[LegislativeMatter], sort_by: str = SORT_BY_ID) -> List[LegislativeMatter]:
    if sort_by == SORT_BY_DATE:
        # Unparseable dates are EPOCH, i.e. last
        return sorted(matters, key=lambda m: parse_pt_date(m.presentation_date), reverse=True)
    if sort_by == SORT_BY_ID:
        return sorted(matters, key=lambda m: id_sort_key(m.id))
    raise ValueError(f"Unknown sort option: {sort_by!r} (expected one of {SORT_OPTIONS})")


def view(matters: Sequence[LegislativeMatter], category: str = ALL, search_query: str = "",
         sort_by: str = SORT_BY_ID) -> List[LegislativeMatter]:
    data = filter_by_category(matters, category)
    data = filter_by_text(data, search_query)
    return sort_matters(data, sort_by)


def toggle_category(current: str, selected: str) -> str:
    """Clicking the active category again clears the filter."""
    return ALL if current == selected else selected


def category_counts(matters: Iterable[LegislativeMatter]) -> Dict[str, int]:
    """Count per category present in the data, in the fixed category order."""
    counts = Counter(m.category for m in matters)
    return {c: counts[c] for c in CATEGORIES if counts[c]}


@dataclass(frozen=True)
class ViewState:
    category: str = ALL
    search_query: str = ""
    sort_by: str = SORT_BY_ID

    def select_category(self, category: str) -> "ViewState":
        return replace(self, category=toggle_category(self.category, category))

    def with_search(self, search_query: str) -> "ViewState":
        return replace(self, search_query=search_query)

    def with_sort(self, sort_by: str) -> "ViewState":
        return replace(self, sort_by=sort_by)

    def apply(self, matters: Sequence[LegislativeMatter]) -> List[LegislativeMatter]:
        return view(matters, self.category, self.search_query, self.sort_by)
