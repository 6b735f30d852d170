"""Link reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRef:
    """A link found in a document, before it becomes a LinkRecord."""

    line_number: int
    column_number: int
    raw_target: str
    link_type: str  # "link", "image", "autolink" or "reference"
    text: str = ""
