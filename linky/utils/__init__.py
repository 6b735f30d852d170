"""linky utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .get_package_version import get_package_version

__all__ = [
    "configure_logging",
    "get_package_version",
]
