"""Markdown heading extractor."""

import re
from collections.abc import Iterator

FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
ATX_PATTERN = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
SETEXT_PATTERN = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")


def extract_markdown_headings(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, heading_text)`` for each heading, in order.

    Handles ATX (``## Title``) and setext (underlined) headings and skips
    fenced code blocks.
    """
    fence: str | None = None
    paragraph: list[str] = []
    paragraph_start = 0

    for line_num, line in enumerate(text.splitlines(), start=1):
        fence_match = FENCE_PATTERN.match(line)
        if fence is not None:
            if fence_match and fence_match.group(1)[0] == fence[0] and len(fence_match.group(1)) >= len(fence):
                if not line.strip().lstrip(fence[0]):
                    fence = None
            continue
        if fence_match:
            fence = fence_match.group(1)
            paragraph = []
            continue

        if not line.strip():
            paragraph = []
            continue

        atx_match = ATX_PATTERN.match(line)
        if atx_match:
            paragraph = []
            yield line_num, (atx_match.group(2) or "").strip()
            continue

        setext_match = SETEXT_PATTERN.match(line)
        if setext_match and paragraph:
            yield paragraph_start, " ".join(part.strip() for part in paragraph)
            paragraph = []
            continue

        if not paragraph:
            paragraph_start = line_num
        paragraph.append(line)
