"""ResolutionOutcome model (UNO: single model)."""

from dataclasses import dataclass

from ._fetchers import FetchedDoc, MimeClass
from .Existence import Existence
from .LinkError import LinkError
from .Tag import Tag


@dataclass
class ResolutionOutcome:
    """What the cache knows about one canonical target.

    Owned and mutated only by ``ResolutionCache``; ``anchors`` (or
    ``anchor_error``) is filled in the first time a fragment asks for it.
    """

    existence: Existence | None
    document: FetchedDoc | None = None
    error: LinkError | None = None
    anchors: frozenset[str] | None = None
    anchor_error: LinkError | None = None

    @property
    def redirect_status(self) -> int | None:
        if self.error is not None and self.error.tag is Tag.HTTP_REDIRECT:
            return self.error.status.code
        return None

    @property
    def content_kind(self) -> MimeClass | None:
        return self.document.mime if self.document is not None else None

    @property
    def has_anchors(self) -> bool:
        return self.anchors is not None or self.anchor_error is not None

    @classmethod
    def from_document(cls, document: FetchedDoc) -> "ResolutionOutcome":
        return cls(existence=Existence.EXISTS, document=document)

    @classmethod
    def from_error(cls, error: LinkError) -> "ResolutionOutcome":
        return cls(existence=error.existence, error=error)
