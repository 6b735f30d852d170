"""Unit tests for the ordered worker pool."""

import random
import threading
import time

import pytest

from linky.api.link import LinkRecord, ResolutionCache, Resolver, Scheduler, check_records
from linky.api.link._fetchers import BaseFetcher, FetchedDoc, MimeClass
from linky.api.link._OrderedSink import _OrderedSink
from linky.api.link.Scheduler import default_jobs

pytestmark = [pytest.mark.concurrency, pytest.mark.timeout(30)]


class SlowFetcher(BaseFetcher):
    """Serves every URL after a random short delay."""

    def __init__(self, max_delay=0.005, seed=7):
        self.max_delay = max_delay
        self._random = random.Random(seed)
        self._lock = threading.Lock()
        self.calls: list[tuple[str, bool]] = []

    def fetch(self, target, want_body):
        with self._lock:
            self.calls.append((target.key, want_body))
            delay = self._random.uniform(0, self.max_delay)
        time.sleep(delay)
        body = b"# Intro\n" if want_body else None
        return FetchedDoc(target.key, MimeClass.MARKDOWN, body=body)


def make_scheduler(fetcher, jobs=8):
    return Scheduler(Resolver(ResolutionCache(fetcher)), jobs=jobs)


def http_records(count, fragment=""):
    return [LinkRecord("a.md", i + 1, f"https://example.com/{i}{fragment}") for i in range(count)]


def test_results_keep_input_order():
    records = http_records(100)
    results = list(make_scheduler(SlowFetcher()).run(records))
    assert [record for record, _ in results] == records
    assert all(resolution.status.is_ok for _, resolution in results)


def test_single_worker_keeps_input_order():
    records = http_records(10)
    results = list(make_scheduler(SlowFetcher(), jobs=1).run(records))
    assert [record for record, _ in results] == records


def test_empty_input():
    assert list(make_scheduler(SlowFetcher()).run([])) == []


def test_each_key_fetched_once_with_body_when_any_fragment_needs_it():
    records = [LinkRecord("a.md", i, "https://example.com/doc" + ("#intro" if i % 3 else "")) for i in range(30)]
    fetcher = SlowFetcher()
    results = list(make_scheduler(fetcher).run(records))
    assert len(results) == 30
    assert fetcher.calls == [("https://example.com/doc", True)]
    assert all(resolution.status.is_ok for _, resolution in results)


def test_cancel_stops_output():
    scheduler = make_scheduler(SlowFetcher(max_delay=0.02), jobs=2)
    results = scheduler.run(http_records(50))
    next(results)
    scheduler.cancel()
    assert list(results) == []
    assert scheduler.cancelled


def test_consumer_abandoning_the_run_cancels_it():
    scheduler = make_scheduler(SlowFetcher(), jobs=2)
    results = scheduler.run(http_records(50))
    next(results)
    results.close()
    assert scheduler.cancelled


def test_invalid_jobs():
    with pytest.raises(ValueError, match="positive integer"):
        make_scheduler(SlowFetcher(), jobs=0)


def test_default_jobs():
    assert make_scheduler(SlowFetcher(), jobs=None).jobs == default_jobs() >= 1


def test_check_records_end_to_end(config, docs, fake_http):
    source = str(docs / "README.md")
    records = [
        LinkRecord(source, 3, "usage.md#install"),
        LinkRecord(source, 3, "sub/api.md#section-two"),
        LinkRecord(source, 4, "missing.md"),
        LinkRecord(source, 5, "https://example.com/gone"),
    ]
    results = list(check_records(records, config, session_factory=fake_http()))
    assert [str(resolution.status) for _, resolution in results] == ["OK", "OK", "NO_DOC", "HTTP_404"]


def test_ordered_sink():
    sink = _OrderedSink()
    sink.push(2, "c")
    sink.push(1, "b")
    assert list(sink.drain()) == []
    sink.push(0, "a")
    assert list(sink.drain()) == ["a", "b", "c"]
    assert len(sink) == 0
    with pytest.raises(ValueError, match="already released"):
        sink.push(1, "again")


def test_nul_in_path_does_not_abort_the_run(config, docs):
    source = str(docs / "README.md")
    records = [
        LinkRecord(source, 1, "usage.md"),
        LinkRecord(source, 2, "bad%00name.md"),
        LinkRecord(source, 3, "bad\x00name.md#x"),
        LinkRecord(source, 4, "usage.md#install"),
    ]
    results = list(check_records(records, config.merge(urldecode=True)))
    assert [str(resolution.status) for _, resolution in results] == ["OK", "URL_ERR", "URL_ERR", "OK"]
