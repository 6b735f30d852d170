"""Fragment matching policy (UNO: single function)."""

import logging
from collections.abc import Collection, Sequence

from .Status import OK, Status
from .Tag import Tag

logger = logging.getLogger(__name__)


def match_fragment(fragment: str, anchors: Collection[str], prefixes: Sequence[str] = ()) -> Status:
    """Match a fragment against a document's anchors.

    Precedence: exact match, then ``prefix + fragment`` for each prefix in
    order, then a case-insensitive match. An empty fragment always matches.
    """
    if not fragment:
        return OK
    if fragment in anchors:
        return OK
    for prefix in prefixes:
        if prefix + fragment in anchors:
            logger.debug("Fragment %r found with prefix %r", fragment, prefix)
            return Status(Tag.PREFIXED_FRAGMENT)
    folded = fragment.casefold()
    if any(anchor.casefold() == folded for anchor in anchors):
        return Status(Tag.CASE_INSENSITIVE_FRAGMENT)
    logger.debug("Fragment %r not found among %s", fragment, sorted(anchors))
    return Status(Tag.NO_FRAGMENT)
