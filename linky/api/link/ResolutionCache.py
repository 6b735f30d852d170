"""Single-flight resolution cache."""

import logging
import threading
from dataclasses import dataclass, field

from ._anchors import anchors
from ._fetchers import BaseFetcher
from .LinkError import LinkError
from .ResolutionOutcome import ResolutionOutcome

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    outcome: ResolutionOutcome | None = None


class ResolutionCache:
    """Maps canonical target keys to resolution outcomes for one run.

    Every key has its own lock. The first caller for a key fetches while
    holding it; later callers for the same key block on it and then read the
    stored outcome, so each key is fetched at most once. The lock guarding
    the key map is never held across I/O. Failures are stored like successes
    and never retried.
    """

    def __init__(self, fetcher: BaseFetcher):
        self._fetcher = fetcher
        self._entries: dict[str, _Entry] = {}
        self._entries_lock = threading.Lock()
        self._expected: set[str] = set()
        self._fetch_count = 0
        self._count_lock = threading.Lock()

    @property
    def fetch_count(self) -> int:
        """Number of fetcher calls issued so far."""
        return self._fetch_count

    def __len__(self) -> int:
        return len(self._entries)

    def expect_anchors(self, key: str) -> None:
        """Announce that a fragment will be checked against ``key``.

        The first fetch of an announced key reads the body, so a later anchor
        lookup does not need a second request.
        """
        with self._entries_lock:
            self._expected.add(key)

    def _entry(self, key: str) -> _Entry:
        with self._entries_lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            return entry

    def _fetch(self, target, want_body: bool) -> ResolutionOutcome:
        with self._count_lock:
            self._fetch_count += 1
        try:
            document = self._fetcher.fetch(target, want_body)
        except LinkError as err:
            logger.debug("Fetching %s failed: %s", target.key, err)
            return ResolutionOutcome.from_error(err)
        return ResolutionOutcome.from_document(document)

    def get_or_fetch(self, target, need_anchors: bool) -> ResolutionOutcome:
        """Return the outcome for ``target``, fetching it on first use.

        Args:
            target: A classified target with a canonical ``key``
            need_anchors: Also compute the target's anchor set
        """
        key = target.key
        entry = self._entry(key)
        with entry.lock:
            if entry.outcome is None:
                with self._entries_lock:
                    want_body = need_anchors or key in self._expected
                entry.outcome = self._fetch(target, want_body)
            outcome = entry.outcome
            if need_anchors and outcome.error is None and not outcome.has_anchors:
                self._upgrade(target, outcome)
            return outcome

    def _upgrade(self, target, outcome: ResolutionOutcome) -> None:
        """Compute anchors in place from the stored body.

        Only an outcome from an HTTP ``HEAD`` lacks a body; that one target is
        fetched again with ``GET``.
        """
        document = outcome.document
        if document.body is None:
            logger.debug("Fetching body of %s for anchor lookup", target.key)
            refetched = self._fetch(target, want_body=True)
            if refetched.error is not None:
                outcome.anchor_error = refetched.error
                return
            document = outcome.document = refetched.document
        try:
            outcome.anchors = anchors(document)
        except LinkError as err:
            outcome.anchor_error = err
