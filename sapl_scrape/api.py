# -*- coding: utf-8 -*-
"""
JSON responses for the indications endpoint, independent of any web server.

  200  consolidated list, with a long shared-cache directive
  503  every page came back empty/unreachable
  500  anything else, with the exception text attached
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from .errors import DataUnavailableError
from .models import LegislativeMatter
from .pipeline import collect_indications
from .query import category_counts
from .settings import CACHE_CONTROL

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Ocorreu um erro inesperado no servidor."

Collector = Callable[[], List[LegislativeMatter]]


@dataclass
class ApiResponse:
    status: int
    body: object
    headers: Dict[str, str] = field(default_factory=dict)

    def to_bytes(self) -> bytes:
        return json.dumps(self.body, ensure_ascii=False).encode("utf-8")


def _respond(build: Callable[[List[LegislativeMatter]], object],
             collector: Collector) -> ApiResponse:
    try:
        matters = collector()
        body = build(matters)
    except DataUnavailableError as e:
        logger.error(f"Data unavailable: {e.message}")
        return ApiResponse(503, {"message": e.message})
    except Exception as e:
        logger.exception("Unexpected error building indications response")
        return ApiResponse(500, {"message": GENERIC_ERROR_MESSAGE, "error": str(e)})
    return ApiResponse(200, body, {"Cache-Control": CACHE_CONTROL})


def _default_collector(urls: Optional[Sequence[str]]) -> Collector:
    return lambda: collect_indications(urls)


def indications_response(urls: Optional[Sequence[str]] = None,
                         collector: Optional[Collector] = None) -> ApiResponse:
    collector = collector or _default_collector(urls)
    return _respond(lambda matters: [m.to_json_dict() for m in matters], collector)


def categories_response(urls: Optional[Sequence[str]] = None,
                        collector: Optional[Collector] = None) -> ApiResponse:
    collector = collector or _default_collector(urls)
    return _respond(category_counts, collector)
