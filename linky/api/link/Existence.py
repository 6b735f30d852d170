"""Existence enum (UNO: single model)."""

from enum import Enum


class Existence(Enum):
    """What a fetch learned about whether a target exists."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"
    NOT_READABLE = "not_readable"
    IS_DIRECTORY = "is_directory"
