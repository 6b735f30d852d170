"""HTTP(S) fetcher built on requests."""

import logging
import threading
from collections.abc import Callable

import requests

from ..Existence import Existence
from ..LinkError import LinkError
from ..Status import Status
from ..Tag import Tag
from ._BaseFetcher import BaseFetcher
from .FetchedDoc import FetchedDoc
from .MimeClass import MimeClass, parse_content_type

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = 405


class HttpFetcher(BaseFetcher):
    """Fetcher for http and https URLs.

    Existence checks use ``HEAD`` and fall back to ``GET`` when the server
    answers 405. Bodies are only downloaded when requested. Each worker
    thread gets its own ``requests.Session``.
    """

    def __init__(
        self,
        follow: bool = False,
        timeout: float = 10.0,
        user_agent: str = "linky",
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.follow = follow
        self.timeout = timeout
        self.user_agent = user_agent
        self._session_factory = session_factory
        self._local = threading.local()

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            session.headers["User-Agent"] = self.user_agent
            self._local.session = session
        return session

    def _request(self, method: str, url: str, stream: bool) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            return self._session().request(
                method,
                url,
                allow_redirects=self.follow,
                timeout=self.timeout,
                stream=stream,
            )
        except requests.Timeout as exc:
            raise LinkError(Tag.TIMEOUT, message=f"{method} {url}") from exc
        except requests.RequestException as exc:
            raise LinkError(Tag.HTTP_OTHER, message=f"{method} {url}") from exc

    def fetch(self, target, want_body: bool) -> FetchedDoc:
        url = target.key
        if want_body:
            response = self._request("GET", url, stream=False)
        else:
            response = self._request("HEAD", url, stream=False)
            if response.status_code == METHOD_NOT_ALLOWED:
                logger.debug("HEAD not allowed for %s, retrying with GET", url)
                response.close()
                response = self._request("GET", url, stream=True)

        try:
            return self._to_document(response, url, want_body)
        finally:
            response.close()

    def _to_document(self, response: requests.Response, url: str, want_body: bool) -> FetchedDoc:
        code = response.status_code
        if not 200 <= code < 300:
            status = Status.http(code)
            existence = Existence.NOT_FOUND if code in (404, 410) else None
            raise LinkError(status.tag, code=code, message=f"fetching {url}", existence=existence)

        media_type, charset = parse_content_type(response.headers.get("Content-Type"))
        body = None
        if want_body:
            try:
                body = response.content
            except requests.RequestException as exc:
                tag = Tag.TIMEOUT if isinstance(exc, requests.Timeout) else Tag.HTTP_OTHER
                raise LinkError(tag, message=f"reading body of {url}") from exc

        return FetchedDoc(
            location=response.url or url,
            mime=MimeClass.from_media_type(media_type),
            charset=charset,
            body=body,
            status_code=code,
        )
