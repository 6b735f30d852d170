"""Local filesystem fetcher."""

import errno
import logging
import os

from ..Existence import Existence
from ..LinkError import LinkError
from ..Tag import Tag
from ._BaseFetcher import BaseFetcher
from .FetchedDoc import FetchedDoc
from .MimeClass import MimeClass

logger = logging.getLogger(__name__)


class LocalFetcher(BaseFetcher):
    """Fetcher for files on the local filesystem.

    The body is always read, whatever ``want_body`` says, so a later anchor
    lookup only re-parses the stored bytes.
    """

    def fetch(self, target, want_body: bool) -> FetchedDoc:
        path = target.path
        logger.debug("Reading %s", path)
        if os.path.isdir(path):
            raise LinkError(Tag.DIRECTORY, message=f"{path} is a directory", existence=Existence.IS_DIRECTORY)
        try:
            with path.open("rb") as fh:
                body = fh.read()
        except FileNotFoundError as exc:
            raise LinkError(Tag.NO_DOCUMENT, message=f"reading {path}", existence=Existence.NOT_FOUND) from exc
        except PermissionError as exc:
            raise LinkError(Tag.NO_DOCUMENT, message=f"reading {path}", existence=Existence.NOT_READABLE) from exc
        except IsADirectoryError as exc:
            raise LinkError(
                Tag.DIRECTORY, message=f"{path} is a directory", existence=Existence.IS_DIRECTORY
            ) from exc
        except OSError as exc:
            if exc.errno in (errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP):
                raise LinkError(Tag.NO_DOCUMENT, message=f"reading {path}", existence=Existence.NOT_FOUND) from exc
            raise LinkError(Tag.IO_ERROR, message=f"reading {path}") from exc
        except ValueError as exc:
            # e.g. an embedded NUL byte
            raise LinkError(Tag.INVALID_URL, message=f"reading {path!r}") from exc

        return FetchedDoc(
            location=str(path),
            mime=MimeClass.from_path(path),
            body=body,
        )
