"""Unit tests for the single-flight resolution cache."""

import threading
import time

import pytest

from linky.api.link import LinkError, ResolutionCache, Tag
from linky.api.link._fetchers import BaseFetcher, FetchedDoc, LocalFetcher, MimeClass
from linky.api.link.Existence import Existence
from linky.api.link.TargetKind import HttpTarget, LocalRelativeTarget

pytestmark = pytest.mark.concurrency

TARGET = HttpTarget("https://example.com/doc")


class CountingFetcher(BaseFetcher):
    """Serves one Markdown document, counting calls and bodies read."""

    def __init__(self, body=b"# Intro\n", delay=0.0, error=None, mime=MimeClass.MARKDOWN):
        self.body = body
        self.delay = delay
        self.error = error
        self.mime = mime
        self.calls: list[tuple[str, bool]] = []
        self._lock = threading.Lock()

    def fetch(self, target, want_body):
        with self._lock:
            self.calls.append((target.key, want_body))
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return FetchedDoc(target.key, self.mime, body=self.body if want_body else None)


def test_concurrent_requests_fetch_once():
    fetcher = CountingFetcher(delay=0.05)
    cache = ResolutionCache(fetcher)
    barrier = threading.Barrier(16)
    outcomes = []

    def worker():
        barrier.wait()
        outcomes.append(cache.get_or_fetch(TARGET, need_anchors=True))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert cache.fetch_count == 1
    assert len(fetcher.calls) == 1
    assert len({id(outcome) for outcome in outcomes}) == 1
    assert outcomes[0].anchors == frozenset({"intro"})


def test_errors_are_cached():
    fetcher = CountingFetcher(error=LinkError(Tag.NO_DOCUMENT, existence=Existence.NOT_FOUND))
    cache = ResolutionCache(fetcher)
    first = cache.get_or_fetch(TARGET, need_anchors=False)
    second = cache.get_or_fetch(TARGET, need_anchors=True)
    assert first is second
    assert first.error.tag is Tag.NO_DOCUMENT
    assert first.existence is Existence.NOT_FOUND
    assert len(fetcher.calls) == 1


def test_head_outcome_then_anchors_refetches_body():
    # CountingFetcher leaves the body out like an HTTP HEAD
    fetcher = CountingFetcher()
    cache = ResolutionCache(fetcher)
    outcome = cache.get_or_fetch(TARGET, need_anchors=False)
    assert outcome.document.body is None
    assert not outcome.has_anchors

    outcome = cache.get_or_fetch(TARGET, need_anchors=True)
    assert outcome.anchors == frozenset({"intro"})
    assert fetcher.calls == [(TARGET.key, False), (TARGET.key, True)]


def test_expected_anchors_read_body_on_first_fetch():
    fetcher = CountingFetcher()
    cache = ResolutionCache(fetcher)
    cache.expect_anchors(TARGET.key)
    cache.get_or_fetch(TARGET, need_anchors=False)
    outcome = cache.get_or_fetch(TARGET, need_anchors=True)
    assert outcome.anchors == frozenset({"intro"})
    assert fetcher.calls == [(TARGET.key, True)]


def test_anchor_errors_are_cached():
    fetcher = CountingFetcher(body=b"\x89PNG", mime=MimeClass.OTHER)
    cache = ResolutionCache(fetcher)
    first = cache.get_or_fetch(TARGET, need_anchors=True)
    second = cache.get_or_fetch(TARGET, need_anchors=True)
    assert first.error is None
    assert first.anchor_error.tag is Tag.UNSUPPORTED_MIME
    assert second is first
    assert len(fetcher.calls) == 1


def test_distinct_keys_fetch_independently():
    fetcher = CountingFetcher()
    cache = ResolutionCache(fetcher)
    cache.get_or_fetch(TARGET, need_anchors=False)
    cache.get_or_fetch(HttpTarget("https://example.com/other"), need_anchors=False)
    cache.get_or_fetch(HttpTarget("https://EXAMPLE.com:443/doc#frag"), need_anchors=False)
    assert len(cache) == 2
    assert cache.fetch_count == 2


def test_local_anchors_reuse_stored_body(docs):
    cache = ResolutionCache(LocalFetcher())
    target = LocalRelativeTarget(path=docs / "usage.md")
    outcome = cache.get_or_fetch(target, need_anchors=False)
    assert outcome.document.body is not None

    outcome = cache.get_or_fetch(LocalRelativeTarget(path=docs / "usage.md", fragment="install"), need_anchors=True)
    assert "install" in outcome.anchors
    assert cache.fetch_count == 1
