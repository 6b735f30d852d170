"""Bounded worker pool that resolves link records and keeps input order."""

import logging
import os
from collections.abc import Iterable, Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait

from ._OrderedSink import _OrderedSink
from .LinkRecord import LinkRecord
from .Resolver import CancelledResolution, Resolution, Resolver

logger = logging.getLogger(__name__)

# Outstanding submissions per worker
QUEUE_FACTOR = 4


def default_jobs() -> int:
    """Logical core count, at least 1."""
    return os.cpu_count() or 1


class Scheduler:
    """Dispatches records to ``jobs`` worker threads.

    Workers finish in any order; ``run`` yields results in input order,
    releasing each contiguous completed prefix as soon as it is ready.
    """

    def __init__(self, resolver: Resolver, jobs: int | None = None):
        if jobs is not None and jobs < 1:
            raise ValueError(f"jobs must be a positive integer, got {jobs}")
        self.resolver = resolver
        self.jobs = jobs or default_jobs()
        self._cancelled = resolver.cancelled

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop dispatching, drop queued work and stop yielding results."""
        if not self._cancelled.is_set():
            logger.info("Cancelling link resolution")
        self._cancelled.set()

    def _announce(self, records: list[LinkRecord]) -> None:
        for record in records:
            planned = self.resolver.plan(record)
            if planned is not None and planned[1]:
                self.resolver.cache.expect_anchors(planned[0])

    def _resolve(self, index: int, record: LinkRecord) -> tuple[int, tuple[LinkRecord, Resolution] | None]:
        if self._cancelled.is_set():
            return index, None
        try:
            return index, (record, self.resolver.resolve(record))
        except CancelledResolution:
            return index, None

    def run(self, records: Iterable[LinkRecord]) -> Iterator[tuple[LinkRecord, Resolution]]:
        """Resolve records concurrently and yield ``(record, resolution)`` in input order."""
        records = list(records)
        self._announce(records)
        logger.debug("Resolving %d links with %d workers", len(records), self.jobs)

        sink = _OrderedSink()
        window = self.jobs * QUEUE_FACTOR
        pending: set[Future] = set()
        executor = ThreadPoolExecutor(max_workers=self.jobs, thread_name_prefix="linky")
        try:
            for index, record in enumerate(records):
                if self._cancelled.is_set():
                    break
                pending.add(executor.submit(self._resolve, index, record))
                if len(pending) >= window:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    yield from self._release(done, sink)

            while pending and not self._cancelled.is_set():
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                yield from self._release(done, sink)
        except BaseException:
            self.cancel()
            raise
        finally:
            executor.shutdown(wait=not self._cancelled.is_set(), cancel_futures=True)

    def _release(self, done: set[Future], sink: _OrderedSink) -> Iterator[tuple[LinkRecord, Resolution]]:
        for future in done:
            index, result = future.result()
            sink.push(index, result)
        for result in sink.drain():
            if result is None or self._cancelled.is_set():
                return
            yield result
