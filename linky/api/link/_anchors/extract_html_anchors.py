"""HTML anchor extractor (UNO: single function)."""

from collections.abc import Iterator

from bs4 import BeautifulSoup


def extract_html_anchors(text: str) -> Iterator[str]:
    """Yield every ``id`` attribute and every ``<a name>`` attribute, verbatim."""
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup.find_all(True):
        anchor_id = tag.get("id")
        if anchor_id:
            yield anchor_id
        if tag.name == "a":
            name = tag.get("name")
            if name:
                yield name
