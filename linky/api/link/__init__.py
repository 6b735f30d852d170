"""Link API domain: extraction and resolution of Markdown links."""

from .check_records import build_scheduler, check_records
from .classify import classify
from .extract_records import extract_records
from .format_line import format_line
from .LinkError import LinkError
from .LinkRecord import LinkRecord
from .read_records import read_records
from .ResolutionCache import ResolutionCache
from .Resolver import Resolution, Resolver
from .Scheduler import Scheduler
from .Status import Status
from .Tag import Tag

__all__ = [
    "LinkError",
    "LinkRecord",
    "Resolution",
    "ResolutionCache",
    "Resolver",
    "Scheduler",
    "Status",
    "Tag",
    "build_scheduler",
    "check_records",
    "classify",
    "extract_records",
    "format_line",
    "read_records",
]
