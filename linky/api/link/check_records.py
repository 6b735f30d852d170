"""Wire configuration into the resolution pipeline."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

import requests

from ...utils.get_package_version import get_package_version
from ._fetchers import Fetcher, HttpFetcher
from .LinkRecord import LinkRecord
from .ResolutionCache import ResolutionCache
from .Resolver import Resolution, Resolver
from .Scheduler import Scheduler

if TYPE_CHECKING:
    from ..config.LinkyConfig import LinkyConfig


def build_scheduler(
    config: LinkyConfig,
    session_factory: Callable[[], requests.Session] = requests.Session,
) -> Scheduler:
    """Create the fetchers, cache, resolver and scheduler for one run."""
    http = HttpFetcher(
        follow=config.follow,
        timeout=config.timeout,
        user_agent=f"linky/{get_package_version()}",
        session_factory=session_factory,
    )
    cache = ResolutionCache(Fetcher(http))
    resolver = Resolver(
        cache,
        root=config.root,
        prefixes=config.prefixes,
        urldecode=config.urldecode,
    )
    return Scheduler(resolver, jobs=config.jobs)


def check_records(
    records: Iterable[LinkRecord],
    config: LinkyConfig,
    session_factory: Callable[[], requests.Session] = requests.Session,
) -> Iterator[tuple[LinkRecord, Resolution]]:
    """Resolve records with a fresh cache and yield them in input order."""
    yield from build_scheduler(config, session_factory).run(records)
