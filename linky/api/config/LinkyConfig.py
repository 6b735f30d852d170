"""Top-level linky configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..link.Status import OK, Status


def _default_jobs() -> int:
    return os.cpu_count() or 1


class LinkyConfig(BaseModel):
    """Settings consumed by the link resolution engine and the CLI."""

    model_config = ConfigDict(extra="forbid")

    root: Path | None = Field(None, description="Directory that absolute local links are joined under")
    follow: bool = Field(False, description="Follow HTTP redirects")
    prefixes: list[str] = Field(default_factory=list, description="Fragment prefixes, tried in order")
    urldecode: bool = Field(False, description="Percent-decode fragments and local paths")
    jobs: int = Field(default_factory=_default_jobs, gt=0, description="Worker threads")
    timeout: float = Field(10.0, gt=0, description="Per-request HTTP timeout in seconds")
    mute: list[str] = Field(default_factory=list, description="Statuses left out of check output")
    failures_only: bool = Field(False, description="Leave OK links out of check output")
    log_file: Path | None = Field(None, description="Also write the log to this file")

    @field_validator("root", "log_file")
    @classmethod
    def _expand(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @field_validator("mute")
    @classmethod
    def _validate_mute(cls, value: list[str]) -> list[str]:
        return [str(Status.parse(label)) for label in value]

    @property
    def muted(self) -> frozenset[Status]:
        """Statuses to omit from check output."""
        muted = {Status.parse(label) for label in self.mute}
        if self.failures_only:
            muted.add(OK)
        return frozenset(muted)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get linky home directory based on LINKY_HOME or default to ~/.linky."""
        home_env = os.environ.get("LINKY_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".linky"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the config file in the linky home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "LinkyConfig":
        """Load and validate config from file.

        Without ``path`` the file in the linky home directory is used, and
        defaults are returned when it does not exist.

        Raises:
            ValueError: If an explicit config file is missing, holds invalid
                JSON or fails validation
        """
        explicit = path is not None
        path = Path(path).expanduser() if explicit else cls.get_config_path()

        if not path.exists():
            if explicit:
                raise ValueError(f"Configuration file not found at {path}")
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ValueError(f"Configuration validation error: {_first_error(e)}") from e

    def merge(self, **overrides: Any) -> "LinkyConfig":
        """Return a validated copy with every non-None override applied.

        Raises:
            ValueError: If an override fails validation
        """
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return type(self)(**values)
        except ValidationError as e:
            raise ValueError(f"Invalid option: {_first_error(e)}") from e


def _first_error(e: ValidationError) -> str:
    error_list = e.errors() or [{"msg": str(e), "loc": ()}]
    first = error_list[0]
    error_msg = first.get("msg", str(e))
    loc = first.get("loc", ())
    field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
    return f"{field}: {error_msg}" if field else error_msg
