"""Output line formatting (UNO: single function)."""

from .LinkRecord import LinkRecord
from .Status import Status


def format_line(record: LinkRecord, status: Status | None = None) -> str:
    """``path:line: target``, or ``path:line: STATUS target`` in check mode."""
    if status is None:
        return str(record)
    return f"{record.source_path}:{record.line_number}: {status} {record.raw_target}"
