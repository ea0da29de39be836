# -*- coding: utf-8 -*-
"""Tests for sapl_scrape.extract."""
from sapl_scrape.extract import absolute_link, clean, extract_matters, protocol_from_href
from sapl_scrape.models import PUBLIC_SERVICES, URBAN_INFRASTRUCTURE
from sapl_scrape.settings import BASE, STATUS_LITERAL


class TestExtractMatters:
    """Row parsing from a listing page."""

    def test_skips_header_and_empty_link_rows(self, listing_html):
        matters = extract_matters(listing_html)
        assert [m.id for m in matters] == ["IND 12/2025", "IND 13/2025"]

    def test_first_row_fields(self, listing_html):
        m = extract_matters(listing_html)[0]
        assert m.summary == "Solicita conserto de buraco na Rua Marechal Deodoro, bairro Centro."
        assert m.author == "Vereador Fulano"
        assert m.presentation_date == "30/07/2025"
        assert m.protocol == "3456"
        assert m.pdf_link == BASE + "/materia/101?protocolo=3456"
        assert m.category == URBAN_INFRASTRUCTURE
        assert m.location.address == "Solicita conserto de buraco na Rua Marechal Deodoro"
        assert m.status == STATUS_LITERAL

    def test_whitespace_is_collapsed_and_absolute_links_kept(self, listing_html):
        m = extract_matters(listing_html)[1]
        assert m.summary == "Pede instalação de lâmpada na praça central"
        assert m.category == PUBLIC_SERVICES
        assert m.protocol == "N/A"
        assert m.pdf_link == "https://sapl.example.org/materia/102"

    def test_rows_with_fewer_than_four_cells_are_skipped(self):
        html = """
        <table class="table"><tr>
          <td><a href="/m/1">IND 1/2025</a></td><td>Resumo</td><td>Autor</td>
        </tr></table>
        """
        assert extract_matters(html) == []

    def test_falls_back_to_any_table(self):
        html = """
        <table><tr>
          <td><a href="/m/1?protocolo=7">IND 1/2025</a></td>
          <td>Poda de árvore</td><td>Autor</td><td>02/01/2025</td>
        </tr></table>
        """
        matters = extract_matters(html)
        assert len(matters) == 1
        assert matters[0].protocol == "7"

    def test_malformed_markup_does_not_raise(self):
        # truncated page: no closing tr/table/body
        html = "<table class='table'><tr><td><a href='/x'>IND 2/2025</a></td><td>Resumo</td><td>A</td><td>01/02/2025"
        matters = extract_matters(html)
        assert [m.id for m in matters] == ["IND 2/2025"]

    def test_empty_page(self):
        assert extract_matters("") == []
        assert extract_matters("<html><body><p>Nenhum resultado</p></body></html>") == []


class TestHelpers:
    """Small parsing helpers."""

    def test_protocol_from_href(self):
        assert protocol_from_href("/materia/1?ano=2025&protocolo=12345&x=1") == "12345"
        assert protocol_from_href("/materia/1") == "N/A"
        assert protocol_from_href("") == "N/A"

    def test_absolute_link(self):
        assert absolute_link("/media/doc.pdf") == BASE + "/media/doc.pdf"
        assert absolute_link("http://other.org/doc.pdf") == "http://other.org/doc.pdf"
        assert absolute_link("") == BASE

    def test_clean(self):
        assert clean("  a \n\t b  ") == "a b"
        assert clean(None) == ""
