# -*- coding: utf-8 -*-


class ScrapeError(Exception):
    """Base class for pipeline failures that reach the caller."""


class DataUnavailableError(ScrapeError):
    """Every source page came back empty or unreachable."""

    DEFAULT_MESSAGE = (
        "Não foi possível extrair dados do portal da câmara. O site pode estar "
        "temporariamente indisponível ou bloqueando o acesso."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
        self.message = message
