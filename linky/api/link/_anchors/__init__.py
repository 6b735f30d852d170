"""Anchor index: the fragment identifiers a fetched document offers."""

from ..decode_text import decode_text
from ..LinkError import LinkError
from ..Tag import Tag
from .._fetchers import FetchedDoc, MimeClass
from .extract_html_anchors import extract_html_anchors
from .extract_markdown_headings import extract_markdown_headings
from .HeadingSlugger import HeadingSlugger


def markdown_anchors(text: str) -> set[str]:
    """Heading slugs plus any raw HTML anchors written in the Markdown."""
    slugger = HeadingSlugger()
    result = {slugger.slug(heading) for _, heading in extract_markdown_headings(text)}
    if "<" in text:
        result.update(extract_html_anchors(text))
    return result


def anchors(doc: FetchedDoc) -> frozenset[str]:
    """Compute the anchor set of a fetched document.

    Raises:
        LinkError: ``NO_MIME`` or ``MIME`` for documents that cannot hold
            anchors, ``DEC_ERR`` for undecodable text
    """
    if doc.mime is None:
        raise LinkError(Tag.NO_MIME, message=f"no content type for {doc.location}")
    if doc.mime is MimeClass.OTHER:
        raise LinkError(Tag.UNSUPPORTED_MIME, message=f"cannot look up anchors in {doc.location}")
    if doc.body is None:
        raise ValueError(f"Document {doc.location} was fetched without a body")

    try:
        text = decode_text(doc.body, doc.charset)
    except LinkError as err:
        raise err.context(f"decoding {doc.location}")

    if doc.mime is MimeClass.HTML:
        return frozenset(extract_html_anchors(text))
    return frozenset(markdown_anchors(text))


__all__ = [
    "HeadingSlugger",
    "anchors",
    "extract_html_anchors",
    "extract_markdown_headings",
    "markdown_anchors",
]
