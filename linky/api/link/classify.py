"""Target classifier (UNO: single function)."""

import re
from pathlib import Path
from urllib.parse import unquote, urlsplit

from .LinkError import LinkError
from .Tag import Tag
from .TargetKind import (
    FragmentOnlyTarget,
    HttpTarget,
    LocalAbsoluteTarget,
    LocalRelativeTarget,
    TargetKind,
)

# Two or more characters so that Windows drive letters are not schemes
SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]+):")
HTTP_SCHEMES = ("http", "https")


def _split_fragment(text: str) -> tuple[str, str | None]:
    base, sep, fragment = text.partition("#")
    return base, (fragment if sep else None)


def _decode(text: str | None, urldecode: bool) -> str | None:
    if text is None or not urldecode:
        return text
    return unquote(text)


def _as_relative(path: str) -> str:
    return path.lstrip("/\\")


def _classify_url(raw_target: str, urldecode: bool) -> HttpTarget:
    try:
        parts = urlsplit(raw_target)
        # Accessing port validates it
        parts.port
    except ValueError as exc:
        raise LinkError(Tag.INVALID_URL, message=f"cannot parse url {raw_target!r}") from exc
    if not parts.hostname:
        raise LinkError(Tag.INVALID_URL, message=f"url has no host: {raw_target!r}")
    if any(c.isspace() for c in parts.netloc):
        raise LinkError(Tag.INVALID_URL, message=f"url host contains whitespace: {raw_target!r}")
    url, fragment = _split_fragment(raw_target)
    return HttpTarget(url=url, fragment=_decode(fragment, urldecode))


def classify(
    raw_target: str,
    source_path: str | Path,
    root: Path | None = None,
    urldecode: bool = False,
) -> TargetKind:
    """Classify a raw link target.

    Args:
        raw_target: Link text as written in the document
        source_path: Path of the document containing the link
        root: Directory that absolute local links are joined under
        urldecode: Percent-decode fragments and local paths

    Returns:
        One of the target variants

    Raises:
        LinkError: ``URL_ERR`` for malformed URLs and local paths holding a
            NUL character, ``PROTOCOL`` for schemes
            other than http and https
    """
    target = raw_target.strip()

    scheme_match = SCHEME_PATTERN.match(target)
    if scheme_match:
        if scheme_match.group(1).lower() in HTTP_SCHEMES:
            return _classify_url(target, urldecode)
        raise LinkError(Tag.PROTOCOL, message=f"unhandled scheme {scheme_match.group(1)!r}")

    source = Path(source_path)
    path_text, fragment = _split_fragment(target)
    fragment = _decode(fragment, urldecode)
    path_text = path_text.partition("?")[0]
    path_text = _decode(path_text, urldecode) or ""
    if "\x00" in path_text:
        raise LinkError(Tag.INVALID_URL, message=f"path contains a NUL character: {raw_target!r}")

    if not path_text and target.startswith("#"):
        return FragmentOnlyTarget(path=source, fragment=fragment or "")

    if path_text.startswith(("/", "\\")):
        if root is None:
            return LocalAbsoluteTarget(raw_path=path_text, path=None, fragment=fragment)
        return LocalAbsoluteTarget(
            raw_path=path_text,
            path=Path(root) / _as_relative(path_text),
            fragment=fragment,
        )

    if not path_text:
        return LocalRelativeTarget(path=source, fragment=fragment)
    return LocalRelativeTarget(path=source.parent / path_text, fragment=fragment)
