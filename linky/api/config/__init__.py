"""Config API module."""

from .LinkyConfig import LinkyConfig

__all__ = ["LinkyConfig"]
