"""LinkRecord model (UNO: single model)."""

import re
from dataclasses import dataclass

RECORD_LINE_PATTERN = re.compile(r"^(.*):(\d+): (.*)$")


@dataclass(frozen=True)
class LinkRecord:
    """One link occurrence: the document it was found in, its line and raw target."""

    source_path: str
    line_number: int
    raw_target: str

    def __str__(self) -> str:
        return f"{self.source_path}:{self.line_number}: {self.raw_target}"

    @classmethod
    def from_line(cls, line: str) -> "LinkRecord":
        """Parse a ``path:line: target`` line as printed in extraction mode.

        Raises:
            ValueError: If the line does not have that shape
        """
        match = RECORD_LINE_PATTERN.match(line.rstrip("\r\n"))
        if not match:
            raise ValueError(f"Not a link record line: {line!r}")
        path, line_number, target = match.groups()
        if not path:
            raise ValueError(f"Missing path in link record line: {line!r}")
        return cls(source_path=path, line_number=int(line_number), raw_target=target.strip())
