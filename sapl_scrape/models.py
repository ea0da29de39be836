# -*- coding: utf-8 -*-
"""
Record types for scraped legislative matters, plus the fixed category set.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

# ---- Categories (closed set) ----
URBAN_INFRASTRUCTURE = "Infraestrutura Urbana"
ENVIRONMENT_AND_SANITATION = "Meio Ambiente e Saneamento"
MOBILITY_AND_TRANSIT = "Mobilidade e Trânsito"
PUBLIC_SERVICES = "Serviços Públicos"
PUBLIC_SAFETY = "Segurança Pública"
COMMUNITY_SPACES = "Espaços Comunitários"

CATEGORIES = (
    URBAN_INFRASTRUCTURE,
    ENVIRONMENT_AND_SANITATION,
    MOBILITY_AND_TRANSIT,
    PUBLIC_SERVICES,
    PUBLIC_SAFETY,
    COMMUNITY_SPACES,
)

# Category selector meaning "no filter"
ALL = "Todas"

PROTOCOL_NOT_AVAILABLE = "N/A"

CSV_COLUMNS = [
    "Identificador",
    "Ementa",
    "Autor",
    "Data de apresentação",
    "Categoria",
    "Endereço",
    "Bairro",
    "Situação",
    "Protocolo",
    "Link",
]

# "IND 123/2025" -> ("IND", 123, 2025)
MATTER_ID_RE = re.compile(r"^\s*(\S+)\s+(\d+)\s*/\s*(\d+)")


def parse_matter_id(matter_id: str) -> Optional[Tuple[str, int, int]]:
    m = MATTER_ID_RE.match(matter_id or "")
    if not m:
        return None
    return m.group(1), int(m.group(2)), int(m.group(3))


def id_sort_key(matter_id: str) -> Tuple[int, int, int, str]:
    """
    Ascending sort key giving year desc, then sequence desc, then the id
    itself, so ties ("IND 1/2025" vs "REQ 1/2025") never depend on input order.
    Ids that don't parse go after every parseable one.
    """
    parsed = parse_matter_id(matter_id)
    if parsed is None:
        return (1, 0, 0, matter_id or "")
    _, seq, year = parsed
    return (0, -year, -seq, matter_id)


@dataclass(frozen=True)
class Location:
    address: Optional[str] = None
    neighborhood: Optional[str] = None


@dataclass(frozen=True)
class LegislativeMatter:
    id: str
    summary: str
    author: str
    presentation_date: str
    category: str
    location: Location = field(default_factory=Location)
    status: str = ""
    protocol: str = PROTOCOL_NOT_AVAILABLE
    pdf_link: str = ""

    def to_json_dict(self) -> Dict[str, object]:
        """Payload shape served to the display client (camelCase keys)."""
        location: Dict[str, str] = {}
        if self.location.address is not None:
            location["address"] = self.location.address
        if self.location.neighborhood is not None:
            location["neighborhood"] = self.location.neighborhood
        return {
            "id": self.id,
            "summary": self.summary,
            "author": self.author,
            "presentationDate": self.presentation_date,
            "category": self.category,
            "location": location,
            "status": self.status,
            "protocol": self.protocol,
            "pdfLink": self.pdf_link,
        }

    @classmethod
    def from_json_dict(cls, data: Dict[str, object]) -> "LegislativeMatter":
        loc = data.get("location") or {}
        category = data.get("category")
        return cls(
            id=str(data.get("id", "")),
            summary=str(data.get("summary", "")),
            author=str(data.get("author", "")),
            presentation_date=str(data.get("presentationDate", "")),
            category=category if category in CATEGORIES else URBAN_INFRASTRUCTURE,
            location=Location(
                address=loc.get("address"),
                neighborhood=loc.get("neighborhood"),
            ),
            status=str(data.get("status", "")),
            protocol=str(data.get("protocol") or PROTOCOL_NOT_AVAILABLE),
            pdf_link=str(data.get("pdfLink", "")),
        )

    def to_csv_row(self) -> Dict[str, str]:
        return {
            "Identificador": self.id,
            "Ementa": self.summary,
            "Autor": self.author,
            "Data de apresentação": self.presentation_date,
            "Categoria": self.category,
            "Endereço": self.location.address or "",
            "Bairro": self.location.neighborhood or "",
            "Situação": self.status,
            "Protocolo": self.protocol,
            "Link": self.pdf_link,
        }
