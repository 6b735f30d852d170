"""Read link records from piped ``path:line: target`` lines."""

import logging
from collections.abc import Iterable, Iterator

from .LinkRecord import LinkRecord

logger = logging.getLogger(__name__)


def read_records(lines: Iterable[str]) -> Iterator[LinkRecord]:
    """Parse extraction output back into records; blank and malformed lines are skipped."""
    for line_num, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield LinkRecord.from_line(line)
        except ValueError as exc:
            logger.error("input line %d: %s", line_num, exc)
