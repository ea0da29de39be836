# -*- coding: utf-8 -*-
"""
Keyword-based category inference and best-effort location hints.

Rules are checked top to bottom and the first group with a hit wins, so a
summary mentioning both "pavimentação" and "praça" is infrastructure.
"""

import re
from typing import List, Optional, Tuple

from .models import (
    COMMUNITY_SPACES,
    ENVIRONMENT_AND_SANITATION,
    MOBILITY_AND_TRANSIT,
    PUBLIC_SAFETY,
    PUBLIC_SERVICES,
    URBAN_INFRASTRUCTURE,
    Location,
)

CATEGORY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("paviment", "asfáltica", "calçamento", "buraco", "infraestrutura"),
     URBAN_INFRASTRUCTURE),
    (("lixo", "lixeira", "reciclável", "limpeza", "boca de lobo", "poda",
      "vegetação", "entulho", "drenagem"),
     ENVIRONMENT_AND_SANITATION),
    (("trânsito", "sinalização", "faixa de segurança", "pedestre", "lombada",
      "estacionamento", "velocidade"),
     MOBILITY_AND_TRANSIT),
    (("iluminação", "lâmpada"),
     PUBLIC_SERVICES),
    (("segurança", "procon"),
     PUBLIC_SAFETY),
    (("praça", "parque"),
     COMMUNITY_SPACES),
]

DEFAULT_CATEGORY = URBAN_INFRASTRUCTURE

NEIGHBORHOOD_RE = re.compile(r"\b(?:bairro|no|na)\s+([\w\s-]+)", re.IGNORECASE)


def classify_summary(summary: str) -> str:
    s = (summary or "").lower()
    for keywords, category in CATEGORY_RULES:
        if any(kw in s for kw in keywords):
            return category
    return DEFAULT_CATEGORY


def extract_address(summary: str) -> Optional[str]:
    address = (summary or "").split(",")[0].strip()
    return address or None


def extract_neighborhood(summary: str) -> Optional[str]:
    m = NEIGHBORHOOD_RE.search(summary or "")
    if not m:
        return None
    neighborhood = re.sub(r"[,.]$", "", m.group(1)).strip()
    return neighborhood or None


def derive_location(summary: str) -> Location:
    return Location(address=extract_address(summary), neighborhood=extract_neighborhood(summary))
