# -*- coding: utf-8 -*-
"""Tests for sapl_scrape.query."""
import pytest

from sapl_scrape.models import (
    ALL,
    CATEGORIES,
    COMMUNITY_SPACES,
    PUBLIC_SERVICES,
    URBAN_INFRASTRUCTURE,
)
from sapl_scrape.query import (
    SORT_BY_DATE,
    SORT_BY_ID,
    ViewState,
    category_counts,
    toggle_category,
    view,
)


@pytest.fixture
def matters(make_matter):
    return [
        make_matter("IND 5/2024", summary="Troca de lâmpada", category=PUBLIC_SERVICES,
                    presentation_date="10/03/2024", address="Rua A"),
        make_matter("IND 1/2025", summary="Reforma da praça", category=COMMUNITY_SPACES,
                    presentation_date="02/01/2025", neighborhood="Centro"),
        make_matter("IND 2/2025", summary="Buraco na rua", category=URBAN_INFRASTRUCTURE,
                    presentation_date="sem data", protocol="12345"),
        make_matter("IND 3/2025", summary="Iluminação pública", category=PUBLIC_SERVICES,
                    presentation_date="15 de fevereiro de 2025"),
    ]


class TestView:
    """Category filter, text search and sort."""

    def test_all_sorted_by_id(self, matters):
        assert [m.id for m in view(matters)] == ["IND 3/2025", "IND 2/2025", "IND 1/2025", "IND 5/2024"]

    def test_category_filter(self, matters):
        result = view(matters, category=PUBLIC_SERVICES)
        assert [m.id for m in result] == ["IND 3/2025", "IND 5/2024"]

    def test_sort_by_date_puts_unparseable_last(self, matters):
        result = view(matters, sort_by=SORT_BY_DATE)
        assert [m.id for m in result] == ["IND 3/2025", "IND 1/2025", "IND 5/2024", "IND 2/2025"]

    def test_search_matches_protocol_only(self, matters):
        result = view(matters, search_query="345")
        assert [m.id for m in result] == ["IND 2/2025"]

    def test_search_is_case_insensitive_and_trimmed(self, matters):
        assert [m.id for m in view(matters, search_query="  PRAÇA ")] == ["IND 1/2025"]

    def test_search_address_and_neighborhood(self, matters):
        assert [m.id for m in view(matters, search_query="rua a")] == ["IND 5/2024"]
        assert [m.id for m in view(matters, search_query="centro")] == ["IND 1/2025"]

    def test_search_matches_id(self, matters):
        assert [m.id for m in view(matters, search_query="5/2024")] == ["IND 5/2024"]

    def test_blank_search_keeps_everything(self, matters):
        assert len(view(matters, search_query="   ")) == len(matters)

    def test_filters_combine(self, matters):
        assert view(matters, category=COMMUNITY_SPACES, search_query="lâmpada") == []

    def test_input_not_mutated(self, matters):
        snapshot = list(matters)
        view(matters, category=PUBLIC_SERVICES, search_query="a", sort_by=SORT_BY_DATE)
        assert matters == snapshot

    def test_unknown_sort_rejected(self, matters):
        with pytest.raises(ValueError):
            view(matters, sort_by="autor")


class TestCategoryToggle:
    """Selecting the active category again clears the filter."""

    def test_toggle(self):
        assert toggle_category(ALL, PUBLIC_SERVICES) == PUBLIC_SERVICES
        assert toggle_category(PUBLIC_SERVICES, PUBLIC_SERVICES) == ALL
        assert toggle_category(PUBLIC_SERVICES, COMMUNITY_SPACES) == COMMUNITY_SPACES

    def test_filter_then_clear_equals_unfiltered_view(self, matters):
        state = ViewState(sort_by=SORT_BY_DATE)
        unfiltered = state.apply(matters)
        filtered = state.select_category(PUBLIC_SERVICES)
        assert filtered.apply(matters) != unfiltered
        cleared = filtered.select_category(PUBLIC_SERVICES)
        assert cleared.category == ALL
        assert cleared.apply(matters) == unfiltered

    def test_state_is_immutable(self):
        state = ViewState()
        state.with_search("x").with_sort(SORT_BY_DATE)
        assert state == ViewState(category=ALL, search_query="", sort_by=SORT_BY_ID)


class TestCategoryCounts:
    """category -> count aggregation."""

    def test_counts(self, matters):
        counts = category_counts(matters)
        assert list(counts) == [c for c in CATEGORIES if c in counts]
        assert set(counts) == {PUBLIC_SERVICES, COMMUNITY_SPACES, URBAN_INFRASTRUCTURE}
        assert counts[PUBLIC_SERVICES] == 2
        assert counts[COMMUNITY_SPACES] == 1
        assert counts[URBAN_INFRASTRUCTURE] == 1
        assert sum(counts.values()) == len(matters)

    def test_absent_categories_are_left_out(self, make_matter):
        counts = category_counts([make_matter(category=COMMUNITY_SPACES)])
        assert counts == {COMMUNITY_SPACES: 1}

    def test_empty(self):
        assert category_counts([]) == {}
