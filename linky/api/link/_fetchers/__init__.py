"""Fetchers package."""

from ..TargetKind import HttpTarget
from ._BaseFetcher import BaseFetcher
from ._HttpFetcher import HttpFetcher
from ._LocalFetcher import LocalFetcher
from .FetchedDoc import FetchedDoc
from .MimeClass import MimeClass


class Fetcher(BaseFetcher):
    """Dispatches a target to the HTTP or the local fetcher."""

    def __init__(self, http: BaseFetcher, local: BaseFetcher | None = None):
        self.http = http
        self.local = local or LocalFetcher()

    def fetch(self, target, want_body: bool) -> FetchedDoc:
        if isinstance(target, HttpTarget):
            return self.http.fetch(target, want_body)
        return self.local.fetch(target, want_body)


__all__ = [
    "BaseFetcher",
    "FetchedDoc",
    "Fetcher",
    "HttpFetcher",
    "LocalFetcher",
    "MimeClass",
]
