"""Link target variants produced by the classifier."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _path_key(path: Path) -> str:
    return path.resolve().as_uri()


@dataclass(frozen=True)
class HttpTarget:
    """An http(s) URL, fragment split off."""

    url: str
    fragment: str | None = None

    @property
    def key(self) -> str:
        """Normalized URL without fragment."""
        parts = urlsplit(self.url)
        scheme = parts.scheme.lower()
        host = (parts.hostname or "").lower()
        if ":" in host:
            host = f"[{host}]"
        netloc = host
        if parts.port is not None and parts.port != _DEFAULT_PORTS.get(scheme):
            netloc = f"{host}:{parts.port}"
        if parts.username is not None:
            userinfo = parts.username
            if parts.password is not None:
                userinfo = f"{userinfo}:{parts.password}"
            netloc = f"{userinfo}@{netloc}"
        return urlunsplit((scheme, netloc, parts.path or "/", parts.query, ""))


@dataclass(frozen=True)
class LocalAbsoluteTarget:
    """A link starting with a path separator.

    ``path`` is the link joined under the configured root, or ``None`` when
    no root is configured and the link cannot be resolved.
    """

    raw_path: str
    path: Path | None = None
    fragment: str | None = None

    @property
    def key(self) -> str | None:
        return _path_key(self.path) if self.path is not None else None


@dataclass(frozen=True)
class LocalRelativeTarget:
    """A path resolved against the directory of the linking document."""

    path: Path
    fragment: str | None = None

    @property
    def key(self) -> str:
        return _path_key(self.path)


@dataclass(frozen=True)
class FragmentOnlyTarget:
    """A ``#fragment`` link: the linking document references itself."""

    path: Path
    fragment: str

    @property
    def key(self) -> str:
        return _path_key(self.path)


TargetKind = HttpTarget | LocalAbsoluteTarget | LocalRelativeTarget | FragmentOnlyTarget
LocalTarget = LocalAbsoluteTarget | LocalRelativeTarget | FragmentOnlyTarget
