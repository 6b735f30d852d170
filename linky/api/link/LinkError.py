"""LinkError exception: a link failure travelling through the engine."""

from __future__ import annotations

from collections.abc import Iterator

from .Existence import Existence
from .Status import Status
from .Tag import Tag


class LinkError(Exception):
    """A classified link failure.

    Raised by the classifier, the fetchers and the anchor index. The resolver
    catches it and reports ``status``; it never escapes a run. Context
    messages are pushed innermost first, like the causal chain they describe.
    """

    def __init__(
        self,
        tag: Tag,
        code: int | None = None,
        message: str | None = None,
        existence: Existence | None = None,
    ):
        self.status = Status(tag, code)
        self.existence = existence
        self.messages: list[str] = [message] if message else []
        super().__init__(self.status.describe())

    @property
    def tag(self) -> Tag:
        return self.status.tag

    def context(self, message: str) -> LinkError:
        """Attach an outer context message and return self for chaining."""
        self.messages.append(message)
        return self

    def lines(self) -> Iterator[str]:
        """Yield the description, the context (outermost first) and the causes."""
        yield self.status.describe()
        for message in reversed(self.messages):
            yield f"  context: {message}"
        cause = self.__cause__
        while cause is not None:
            yield f"  caused by: {cause}"
            cause = cause.__cause__
