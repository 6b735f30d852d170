"""Shared pytest configuration and fixtures for all tests."""

import threading
import time
from pathlib import Path

import pytest
from requests.structures import CaseInsensitiveDict

from linky.api.config.LinkyConfig import LinkyConfig


def pytest_configure(config):
    for marker in ("unit", "integration", "config", "cli", "concurrency"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def linky_home(tmp_path, monkeypatch) -> Path:
    """Point LINKY_HOME at an empty directory so no user config leaks in."""
    home = tmp_path / "linky_home"
    home.mkdir()
    monkeypatch.setenv("LINKY_HOME", str(home))
    return home


# =============================================================================
# Document trees
# =============================================================================


@pytest.fixture
def docs(tmp_path) -> Path:
    """A small documentation tree with headings, HTML anchors and a subdirectory."""
    root = tmp_path / "docs"
    (root / "sub").mkdir(parents=True)
    (root / "README.md").write_text(
        "# Intro\n\nSee [usage](usage.md#install) and [api](sub/api.md#section-two).\n\n## Intro\n",
        encoding="utf-8",
    )
    (root / "usage.md").write_text(
        "# Usage\n\n## Install\n\n## Install\n\n<a name=\"legacy-anchor\"></a>\n\n## user-content-setup\n",
        encoding="utf-8",
    )
    (root / "sub" / "api.md").write_text(
        "Section One\n===========\n\nSection Two\n-----------\n\n```\n# not a heading\n```\n",
        encoding="utf-8",
    )
    (root / "page.html").write_text(
        '<html><body><h1 id="top">Top</h1><a name="bottom"></a></body></html>',
        encoding="utf-8",
    )
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return root


@pytest.fixture
def config(docs) -> LinkyConfig:
    """Config rooted at the docs tree with a small worker pool."""
    return LinkyConfig(root=docs, jobs=4, timeout=1.0)


# =============================================================================
# Fake requests session
# =============================================================================


class FakeResponse:
    """Enough of requests.Response for HttpFetcher."""

    def __init__(self, status_code=200, content=b"", headers=None, url=""):
        self.status_code = status_code
        self._content = content
        self.headers = CaseInsensitiveDict(headers or {})
        self.url = url
        self.closed = False

    @property
    def content(self) -> bytes:
        if isinstance(self._content, Exception):
            raise self._content
        return self._content

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """A requests.Session stand-in serving canned responses.

    ``routes`` maps ``(method, url)`` or ``url`` to a FakeResponse, an
    exception instance to raise, or a callable returning either. Every
    request is recorded in ``calls``, shared across sessions made by the
    same factory.
    """

    def __init__(self, routes, calls, delay=0.0):
        self.routes = routes
        self.calls = calls
        self.delay = delay
        self.headers: dict[str, str] = {}

    def request(self, method, url, allow_redirects=True, timeout=None, stream=False):
        self.calls.append((method, url, allow_redirects))
        if self.delay:
            time.sleep(self.delay)
        route = self.routes.get((method, url), self.routes.get(url))
        if route is None:
            return FakeResponse(404, url=url)
        if callable(route) and not isinstance(route, FakeResponse):
            route = route(method, url)
        if isinstance(route, Exception):
            raise route
        return route


class FakeSessionFactory:
    """Callable passed as ``session_factory``; collects calls from every session."""

    def __init__(self, routes=None, delay=0.0):
        self.routes = routes or {}
        self.delay = delay
        self._lock = threading.Lock()
        self.calls: list[tuple[str, str, bool]] = []
        self.sessions: list[FakeSession] = []

    def __call__(self) -> FakeSession:
        session = FakeSession(self.routes, self.calls, self.delay)
        with self._lock:
            self.sessions.append(session)
        return session


@pytest.fixture
def fake_http():
    """Factory for FakeSessionFactory instances."""
    return FakeSessionFactory


@pytest.fixture
def fake_response():
    """The FakeResponse class, for building routes."""
    return FakeResponse
