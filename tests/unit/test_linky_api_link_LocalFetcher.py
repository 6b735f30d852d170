"""Unit tests for the local filesystem fetcher."""

import os

import pytest

from linky.api.link import LinkError, Tag
from linky.api.link._fetchers import LocalFetcher, MimeClass
from linky.api.link.Existence import Existence
from linky.api.link.TargetKind import LocalRelativeTarget


def fetch(path, want_body=False):
    return LocalFetcher().fetch(LocalRelativeTarget(path=path), want_body)


def test_existence_check_reads_body(docs):
    doc = fetch(docs / "usage.md")
    assert doc.body.startswith(b"# Usage")
    assert doc.mime is MimeClass.MARKDOWN
    assert doc.location == str(docs / "usage.md")


def test_reads_body_when_asked(docs):
    doc = fetch(docs / "usage.md", want_body=True)
    assert doc.body.startswith(b"# Usage")


@pytest.mark.parametrize(
    "name,mime",
    [("page.html", MimeClass.HTML), ("logo.png", MimeClass.OTHER), ("README.md", MimeClass.MARKDOWN)],
)
def test_mime_from_extension(docs, name, mime):
    assert fetch(docs / name).mime is mime


def test_unknown_extension_is_markdown(tmp_path):
    path = tmp_path / "NOTES"
    path.write_text("# Notes\n")
    assert fetch(path).mime is MimeClass.MARKDOWN


def test_missing_file(docs):
    with pytest.raises(LinkError) as exc_info:
        fetch(docs / "missing.md")
    assert exc_info.value.tag is Tag.NO_DOCUMENT
    assert exc_info.value.existence is Existence.NOT_FOUND
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_path_through_a_file(docs):
    with pytest.raises(LinkError) as exc_info:
        fetch(docs / "usage.md" / "child.md")
    assert exc_info.value.tag is Tag.NO_DOCUMENT


def test_directory(docs):
    with pytest.raises(LinkError) as exc_info:
        fetch(docs / "sub")
    assert exc_info.value.tag is Tag.DIRECTORY
    assert exc_info.value.existence is Existence.IS_DIRECTORY


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read anything")
def test_unreadable_file(tmp_path):
    path = tmp_path / "secret.md"
    path.write_text("# Secret\n")
    path.chmod(0)
    try:
        with pytest.raises(LinkError) as exc_info:
            fetch(path)
        assert exc_info.value.tag is Tag.NO_DOCUMENT
        assert exc_info.value.existence is Existence.NOT_READABLE
    finally:
        path.chmod(0o644)


def test_nul_in_path(docs):
    with pytest.raises(LinkError) as exc_info:
        fetch(docs / "bad\x00name.md")
    assert exc_info.value.tag is Tag.INVALID_URL
    assert isinstance(exc_info.value.__cause__, ValueError)
