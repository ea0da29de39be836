# -*- coding: utf-8 -*-
import pytest

from sapl_scrape.models import LegislativeMatter, Location, URBAN_INFRASTRUCTURE

LISTING_HTML = """
<html><body>
<table class="table table-striped">
  <thead>
    <tr><th>Matéria</th><th>Ementa</th><th>Autor</th><th>Data</th></tr>
  </thead>
  <tbody>
    <tr>
      <td><a href="/materia/101?protocolo=3456">IND 12/2025</a></td>
      <td>Solicita conserto de buraco na Rua Marechal Deodoro, bairro Centro.</td>
      <td>Vereador Fulano</td>
      <td>30/07/2025</td>
    </tr>
    <tr>
      <td><a href="https://sapl.example.org/materia/102">IND 13/2025</a></td>
      <td>  Pede   instalação de lâmpada
          na praça central </td>
      <td>Vereadora Beltrana</td>
      <td>1 de agosto de 2025</td>
    </tr>
    <tr>
      <td><a href="/materia/103?protocolo=999"></a></td>
      <td>linha sem identificador</td>
      <td>-</td>
      <td>-</td>
    </tr>
  </tbody>
</table>
</body></html>
"""


@pytest.fixture
def listing_html():
    return LISTING_HTML


@pytest.fixture
def make_matter():
    def _make(matter_id="IND 1/2025", summary="Resumo", category=URBAN_INFRASTRUCTURE,
              presentation_date="01/01/2025", protocol="N/A", address=None, neighborhood=None):
        return LegislativeMatter(
            id=matter_id,
            summary=summary,
            author="Autor",
            presentation_date=presentation_date,
            category=category,
            location=Location(address=address, neighborhood=neighborhood),
            status="Disponível no SAPL",
            protocol=protocol,
            pdf_link="https://sapl.camarabento.rs.gov.br/materia/1",
        )
    return _make
