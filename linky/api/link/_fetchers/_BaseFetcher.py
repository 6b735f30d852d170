"""Abstract base fetcher."""

from abc import ABC, abstractmethod

from .FetchedDoc import FetchedDoc


class BaseFetcher(ABC):
    """Abstract interface for reading a resolvable target."""

    @abstractmethod
    def fetch(self, target, want_body: bool) -> FetchedDoc:
        """Fetch the target; ``want_body`` asks for the body, fetchers may read it anyway.

        Raises:
            LinkError: When the target cannot be reached
        """
        pass
