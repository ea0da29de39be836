# -*- coding: utf-8 -*-
"""
Settings for the SAPL scraper. Everything here can be overridden from the CLI.
"""

# ===================== USER SETTINGS =====================
# Matter type 8 = "Indicação" on the SAPL search form
MATTER_TYPE = 8

# Year and author (SAPL internal author id) to crawl
YEAR = 2025
AUTHOR_ID = 400

# Listing pages to fetch (page 1 has no ?page= parameter)
PAGES = 2

# One worker per page is plenty; the portal is small
MAX_WORKERS = 4

# Seconds; single attempt per page, no retries
REQUEST_TIMEOUT = 45

OUT_JSON = "indicacoes.json"
OUT_CSV = "indicacoes.csv"
OUT_COUNTS_CSV = "category_counts.csv"
OUT_COUNTS_PNG = "category_counts.png"
# ===============================================================

BASE = "https://sapl.camarabento.rs.gov.br"
HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Accept-Language": "pt-BR,pt;q=0.9,en;q=0.8",
    "Connection": "keep-alive",
}

LISTING_URL_TMPL = (
    BASE + "/materia/pesquisar-materia"
           "?{page}tipo={tipo}&ementa=&numero=&numeracao__numero_materia=&numero_protocolo="
           "&ano={year}&autoria__autor={author}&autoria__primeiro_autor=unknown"
           "&autoria__autor__tipo=&autoria__autor__parlamentar_set__filiacao__partido=&o="
           "&tipo_listagem=1&tipo_origem_externa=&numero_origem_externa=&ano_origem_externa="
           "&data_origem_externa_0=&data_origem_externa_1=&local_origem_externa="
           "&data_apresentacao_0=&data_apresentacao_1=&data_publicacao_0=&data_publicacao_1="
           "&relatoria__parlamentar_id=&em_tramitacao=&tramitacao__unidade_tramitacao_destino="
           "&tramitacao__status=&materiaassunto__assunto=&indexacao=&regime_tramitacao="
           "&salvar=Pesquisar"
)

# Provenance marker stamped on every extracted record
STATUS_LITERAL = "Disponível no SAPL"

# The portal changes slowly and scraping it is expensive: 12h fresh, 1h grace
CACHE_CONTROL = "s-maxage=43200, stale-while-revalidate=3600"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def listing_urls(year: int = YEAR, author: int = AUTHOR_ID, pages: int = PAGES,
                 tipo: int = MATTER_TYPE):
    """Listing page URLs for one author/year, page 1 first."""
    urls = []
    for n in range(1, max(1, pages) + 1):
        page = "" if n == 1 else f"page={n}&"
        urls.append(LISTING_URL_TMPL.format(page=page, tipo=tipo, year=year, author=author))
    return urls
