"""MimeClass enum and content-type helpers."""

import mimetypes
from enum import Enum
from pathlib import Path

HTML_TYPES = frozenset({"text/html", "application/xhtml+xml"})
MARKDOWN_TYPES = frozenset({"text/markdown", "text/x-markdown"})


class MimeClass(Enum):
    """How a fetched document is scanned for anchors."""

    MARKDOWN = "markdown"
    HTML = "html"
    OTHER = "other"

    @classmethod
    def from_media_type(cls, media_type: str | None) -> "MimeClass | None":
        """Classify a ``type/subtype`` string; ``None`` when there is none."""
        if not media_type:
            return None
        media_type = media_type.lower()
        if media_type in HTML_TYPES:
            return cls.HTML
        if media_type in MARKDOWN_TYPES:
            return cls.MARKDOWN
        return cls.OTHER

    @classmethod
    def from_path(cls, path: Path) -> "MimeClass":
        """Classify a local file by name. Unknown and text files are Markdown."""
        media_type, _ = mimetypes.guess_type(path.name)
        if media_type in HTML_TYPES:
            return cls.HTML
        if media_type is None or media_type.startswith("text/"):
            return cls.MARKDOWN
        return cls.OTHER


def parse_content_type(header: str | None) -> tuple[str | None, str | None]:
    """Split a Content-Type header into media type and charset.

    >>> parse_content_type('text/html; charset="UTF-8"')
    ('text/html', 'UTF-8')
    """
    if not header:
        return None, None
    media_type, *params = header.split(";")
    charset = None
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset":
            charset = value.strip().strip("\"'") or None
    return media_type.strip().lower() or None, charset
