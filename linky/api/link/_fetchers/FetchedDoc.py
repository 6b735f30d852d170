"""FetchedDoc model (UNO: single model)."""

from dataclasses import dataclass

from .MimeClass import MimeClass


@dataclass(frozen=True)
class FetchedDoc:
    """A successfully fetched target.

    ``body`` is ``None`` when only existence was checked with an HTTP
    ``HEAD``. Local files always carry their body.
    """

    location: str
    mime: MimeClass | None
    charset: str | None = None
    body: bytes | None = None
    status_code: int | None = None
