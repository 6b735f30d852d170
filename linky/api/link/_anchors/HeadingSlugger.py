"""Heading slugger: GitHub-style implicit heading anchors."""

import re

CODE_SPAN_PATTERN = re.compile(r"(`+)(.+?)\1")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]*\)")
REFERENCE_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\[[^\]]*\]")
HTML_TAG_PATTERN = re.compile(r"</?[A-Za-z][^>]*>")
EMPHASIS_PATTERN = re.compile(r"\*+|~~|(?<!\w)_+|_+(?!\w)")
PUNCTUATION_PATTERN = re.compile(r"[^\w\- ]")


def _strip_markup(text: str) -> str:
    text = IMAGE_PATTERN.sub(r"\1", text)
    text = LINK_PATTERN.sub(r"\1", text)
    text = REFERENCE_LINK_PATTERN.sub(r"\1", text)
    text = HTML_TAG_PATTERN.sub("", text)
    return EMPHASIS_PATTERN.sub("", text)


def _slugify(text: str) -> str:
    pieces = []
    pos = 0
    # Code spans keep their literal text
    for match in CODE_SPAN_PATTERN.finditer(text):
        pieces.append(_strip_markup(text[pos : match.start()]))
        pieces.append(match.group(2).strip())
        pos = match.end()
    pieces.append(_strip_markup(text[pos:]))
    plain = "".join(pieces).strip().lower()
    return PUNCTUATION_PATTERN.sub("", plain).replace(" ", "-")


class HeadingSlugger:
    """Turns heading texts into unique slugs.

    Repeated slugs get a numeric suffix: ``intro``, ``intro-1``, ``intro-2``.
    One slugger is used per document.
    """

    def __init__(self):
        self._occurrences: dict[str, int] = {}

    def slug(self, heading: str) -> str:
        base = _slugify(heading)
        slug = base
        if slug in self._occurrences:
            count = self._occurrences[base]
            while slug in self._occurrences:
                count += 1
                slug = f"{base}-{count}"
            self._occurrences[base] = count
        self._occurrences[slug] = 0
        return slug
