"""Status value object (UNO: single model)."""

from dataclasses import dataclass
from http import HTTPStatus

from .Tag import Tag

_LABELS = {tag.value: tag for tag in Tag if not tag.has_code}


@dataclass(frozen=True)
class Status:
    """The status attached to one checked link.

    ``code`` is set for (and only for) the HTTP redirect and error tags.
    """

    tag: Tag
    code: int | None = None

    def __post_init__(self):
        if self.tag.has_code and self.code is None:
            raise ValueError(f"{self.tag.name} requires an HTTP status code")
        if not self.tag.has_code and self.code is not None:
            raise ValueError(f"{self.tag.name} does not take a status code")

    def __str__(self) -> str:
        if self.tag.has_code:
            return f"HTTP_{self.code}"
        return self.tag.value

    @property
    def is_ok(self) -> bool:
        return self.tag is Tag.OK

    def describe(self) -> str:
        """Human readable description, e.g. ``Unexpected HTTP status 404 Not Found``."""
        if not self.tag.has_code:
            return self.tag.description
        try:
            reason = f" {HTTPStatus(self.code).phrase}"
        except ValueError:
            reason = ""
        return f"{self.tag.description} {self.code}{reason}"

    @classmethod
    def http(cls, code: int) -> "Status":
        """Status for a terminal HTTP response code that is not 2xx."""
        if 300 <= code < 400:
            return cls(Tag.HTTP_REDIRECT, code)
        return cls(Tag.HTTP_ERROR, code)

    @classmethod
    def parse(cls, label: str) -> "Status":
        """Parse a label as printed by ``str(status)``, case-insensitively.

        Raises:
            ValueError: If the label is not a known status
        """
        text = label.strip().upper()
        tag = _LABELS.get(text)
        if tag is not None:
            return cls(tag)
        if text.startswith("HTTP_") and text[5:].isdigit():
            code = int(text[5:])
            if 100 <= code <= 999:
                return cls.http(code)
        raise ValueError(f"Invalid status: {label!r}")


OK = Status(Tag.OK)
