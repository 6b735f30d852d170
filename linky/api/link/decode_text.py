"""Decode fetched bytes to text (UNO: single function)."""

import codecs
import logging

from charset_normalizer import from_bytes

from .LinkError import LinkError
from .Tag import Tag

logger = logging.getLogger(__name__)

# Longest marks first: UTF-32 LE starts with the UTF-16 LE mark
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def _try_decode(body: bytes, encoding: str) -> str | None:
    try:
        return body.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        return None


def decode_text(body: bytes, charset: str | None = None) -> str:
    """Decode bytes: byte-order mark, declared charset, UTF-8, then detection.

    Args:
        body: Raw document bytes
        charset: Charset declared by the source (e.g. a Content-Type header)

    Returns:
        Decoded text

    Raises:
        LinkError: ``DEC_ERR`` when every strategy fails
    """
    for bom, encoding in _BOMS:
        if body.startswith(bom):
            text = _try_decode(body, encoding)
            if text is not None:
                return text

    for encoding in (charset, "utf-8"):
        if encoding:
            text = _try_decode(body, encoding)
            if text is not None:
                return text

    best = from_bytes(body).best()
    if best is not None:
        logger.debug("Detected encoding %s", best.encoding)
        return str(best)

    raise LinkError(Tag.DECODE_ERROR, message=f"no encoding decodes {len(body)} bytes")
