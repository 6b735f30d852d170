"""Extract link records from Markdown files."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ._parsers import get_parser
from .decode_text import decode_text
from .LinkError import LinkError
from .LinkRecord import LinkRecord

logger = logging.getLogger(__name__)


def extract_records(paths: Iterable[str], parser: str = "markdown") -> Iterator[LinkRecord]:
    """Yield the links of each file, in file then line order.

    Files that cannot be read or decoded are logged and skipped. Paths are
    reported exactly as given.
    """
    parser_instance = get_parser(parser)
    for path in paths:
        try:
            text = decode_text(Path(path).read_bytes())
        except OSError as exc:
            logger.error("reading file %s: %s", path, exc)
            continue
        except LinkError as err:
            logger.error("decoding file %s: %s", path, err)
            continue

        for ref in parser_instance.parse(text):
            yield LinkRecord(source_path=path, line_number=ref.line_number, raw_target=ref.raw_target)
