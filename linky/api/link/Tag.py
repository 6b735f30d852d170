"""Tag enum: the classification attached to every checked link."""

from enum import Enum


class Tag(Enum):
    """Link status classification.

    The value is the label printed in check output. The two HTTP tags carry a
    status code and print as ``HTTP_<code>`` through ``Status``.
    """

    OK = "OK"
    NO_DOCUMENT = "NO_DOC"
    NO_FRAGMENT = "NO_FRAG"
    CASE_INSENSITIVE_FRAGMENT = "CASE_FRAG"
    PREFIXED_FRAGMENT = "PREFIXED"
    ABSOLUTE = "ABSOLUTE"
    DIRECTORY = "DIR"
    HTTP_REDIRECT = "HTTP_REDIRECT"
    HTTP_ERROR = "HTTP_ERROR"
    HTTP_OTHER = "HTTP_OTH"
    TIMEOUT = "TIMEOUT"
    IO_ERROR = "IO_ERR"
    DECODE_ERROR = "DEC_ERR"
    UNSUPPORTED_MIME = "MIME"
    NO_MIME = "NO_MIME"
    INVALID_URL = "URL_ERR"
    PROTOCOL = "PROTOCOL"

    @property
    def has_code(self) -> bool:
        return self in (Tag.HTTP_REDIRECT, Tag.HTTP_ERROR)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Tag.OK: "Ok",
    Tag.NO_DOCUMENT: "Document not found",
    Tag.NO_FRAGMENT: "Fragment not found",
    Tag.CASE_INSENSITIVE_FRAGMENT: "Fragment not found case-sensitively",
    Tag.PREFIXED_FRAGMENT: "Fragment not found without prefix",
    Tag.ABSOLUTE: "Unable to handle absolute path",
    Tag.DIRECTORY: "Document is a directory",
    Tag.HTTP_REDIRECT: "Unfollowed HTTP redirect",
    Tag.HTTP_ERROR: "Unexpected HTTP status",
    Tag.HTTP_OTHER: "HTTP error",
    Tag.TIMEOUT: "Timeout",
    Tag.IO_ERROR: "IO error",
    Tag.DECODE_ERROR: "Decoding error",
    Tag.UNSUPPORTED_MIME: "Unrecognized mime type",
    Tag.NO_MIME: "No mime type",
    Tag.INVALID_URL: "Invalid url",
    Tag.PROTOCOL: "Unhandled protocol",
}
