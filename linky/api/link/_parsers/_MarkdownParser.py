"""Markdown link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# Compiled regex patterns
FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
CODE_SPAN_PATTERN = re.compile(r"(`+)(?:.+?)\1")
INLINE_LINK_PATTERN = re.compile(
    r"(!)?\[((?:[^\[\]]|\[[^\]]*\])*)\]"  # [text], one level of nested brackets
    r"\(\s*(<[^>]*>|[^\s()]*(?:\([^\s()]*\)[^\s()]*)*)"  # destination, balanced parens
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"  # optional title
)
AUTOLINK_PATTERN = re.compile(r"<((?:https?|ftp|mailto):[^<>\s]+)>", re.IGNORECASE)
# Footnote definitions ([^1]: ...) are not links
REFERENCE_PATTERN = re.compile(r"^ {0,3}\[([^\]^][^\]]*)\]:\s*(<[^>]*>|\S+)")


def _mask_code_spans(line: str) -> str:
    """Blank out inline code so links inside it are ignored; columns are kept."""
    return CODE_SPAN_PATTERN.sub(lambda m: " " * len(m.group(0)), line)


def _destination(raw: str) -> str:
    raw = raw.strip()
    if raw.startswith("<") and raw.endswith(">"):
        return raw[1:-1].strip()
    return raw


class MarkdownParser(BaseParser):
    """Parser for Markdown files (CommonMark-style links)."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        fence: str | None = None
        for line_num, line in enumerate(text.splitlines(), start=1):
            fence_match = FENCE_PATTERN.match(line)
            if fence is not None:
                if fence_match and fence_match.group(1)[0] == fence[0] and len(fence_match.group(1)) >= len(fence):
                    fence = None
                continue
            if fence_match:
                fence = fence_match.group(1)
                continue

            yield from self._parse_line(line_num, _mask_code_spans(line))

    def _parse_line(self, line_num: int, line: str) -> Iterator[LinkRef]:
        found: list[LinkRef] = []
        spans: list[tuple[int, int]] = []

        # 1. Reference definitions: [ref]: target
        reference = REFERENCE_PATTERN.match(line)
        if reference:
            yield LinkRef(
                line_number=line_num,
                column_number=reference.start(2) + 1,
                raw_target=_destination(reference.group(2)),
                link_type="reference",
                text=reference.group(1).strip(),
            )
            return

        # 2. Inline links and images: [text](target "title")
        for match in INLINE_LINK_PATTERN.finditer(line):
            spans.append(match.span())
            target = _destination(match.group(3))
            if not target:
                continue
            found.append(
                LinkRef(
                    line_number=line_num,
                    column_number=match.start() + 1,
                    raw_target=target,
                    link_type="image" if match.group(1) else "link",
                    text=match.group(2).strip(),
                )
            )

        # 3. Autolinks: <https://example.com>
        for match in AUTOLINK_PATTERN.finditer(line):
            if any(start <= match.start() < end for start, end in spans):
                continue
            found.append(
                LinkRef(
                    line_number=line_num,
                    column_number=match.start() + 1,
                    raw_target=match.group(1),
                    link_type="autolink",
                )
            )

        yield from sorted(found, key=lambda ref: ref.column_number)
