"""Per-link resolver."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .classify import classify
from .LinkError import LinkError
from .LinkRecord import LinkRecord
from .match_fragment import match_fragment
from .ResolutionCache import ResolutionCache
from .Status import OK, Status
from .Tag import Tag
from .TargetKind import LocalAbsoluteTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """A link's status plus, for failures, the error explaining it."""

    status: Status
    error: LinkError | None = None

    def lines(self) -> list[str]:
        if self.error is None:
            return [self.status.describe()]
        return list(self.error.lines())


class Resolver:
    """Resolves one link record at a time against a shared cache.

    Classification, fetching and anchor matching never raise link failures;
    every record resolves to exactly one ``Status``.
    """

    def __init__(
        self,
        cache: ResolutionCache,
        root: Path | None = None,
        prefixes: Sequence[str] = (),
        urldecode: bool = False,
        cancelled: threading.Event | None = None,
    ):
        self.cache = cache
        self.root = root
        self.prefixes = tuple(prefixes)
        self.urldecode = urldecode
        self.cancelled = cancelled or threading.Event()

    def _classify(self, record: LinkRecord):
        return classify(record.raw_target, record.source_path, self.root, self.urldecode)

    def plan(self, record: LinkRecord) -> tuple[str, bool] | None:
        """Return ``(key, needs_anchors)`` without fetching, or ``None`` when no fetch is needed."""
        try:
            target = self._classify(record)
        except LinkError:
            return None
        key = target.key
        if key is None:
            return None
        return key, bool(target.fragment)

    def resolve(self, record: LinkRecord) -> Resolution:
        try:
            target = self._classify(record)
        except LinkError as err:
            return self._failed(record, err)

        if isinstance(target, LocalAbsoluteTarget) and target.path is None:
            err = LinkError(Tag.ABSOLUTE, message=f"no root configured for {target.raw_path}")
            return self._failed(record, err)

        if self.cancelled.is_set():
            raise CancelledResolution(record)

        fragment = target.fragment
        outcome = self.cache.get_or_fetch(target, need_anchors=bool(fragment))

        if outcome.error is not None:
            return self._failed(record, outcome.error)
        if not fragment:
            return Resolution(OK)
        if outcome.anchor_error is not None:
            return self._failed(record, outcome.anchor_error)

        status = match_fragment(fragment, outcome.anchors, self.prefixes)
        if status.is_ok:
            return Resolution(status)
        err = LinkError(status.tag, message=f"fragment {fragment!r} in {outcome.document.location}")
        return self._failed(record, err)

    def _failed(self, record: LinkRecord, err: LinkError) -> Resolution:
        if logger.isEnabledFor(logging.DEBUG):
            for line in err.lines():
                logger.debug("%s:%d: %s", record.source_path, record.line_number, line)
        return Resolution(err.status, err)


class CancelledResolution(Exception):
    """Raised instead of fetching once the run has been cancelled."""

    def __init__(self, record: LinkRecord):
        super().__init__(f"Resolution of {record} cancelled")
        self.record = record
