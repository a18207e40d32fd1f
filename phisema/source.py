"""Source locations, spans and a cache of source file contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SrcLocation:
    """A position in a source file; line and column are 1-indexed."""

    path: str
    line: int
    col: int


@dataclass(frozen=True, init=False)
class SrcSpan:
    """A contiguous region of source between two inclusive positions."""

    start: SrcLocation
    end: SrcLocation

    def __init__(self, start: SrcLocation, end: Optional[SrcLocation] = None) -> None:
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", start if end is None else end)

    def is_multiline(self) -> bool:
        """True if the span covers more than one line."""
        return self.start.line != self.end.line

    def line_count(self) -> int:
        """Number of lines the span covers."""
        return self.end.line - self.start.line + 1


@dataclass
class SrcManager:
    """Holds source file contents for displaying diagnostics."""

    _files: Dict[str, List[str]] = field(default_factory=dict)

    def add_src_file(self, path: str, content: str) -> None:
        """Register (or replace) the content of ``path``."""
        self._files[path] = content.splitlines()

    def get_line(self, path: str, line_num: int) -> Optional[str]:
        """Return line ``line_num`` (1-indexed) of ``path``, or None."""
        lines = self._files.get(path)
        if lines is None or not 1 <= line_num <= len(lines):
            return None
        return lines[line_num - 1]

    def get_lines(self, path: str, start_line: int, end_line: int) -> List[str]:
        """Return the existing lines from ``start_line`` to ``end_line`` inclusive."""
        lines = self._files.get(path)
        if lines is None or end_line < start_line:
            return []
        return lines[max(start_line, 1) - 1 : max(end_line, 0)]

    def get_line_count(self, path: str) -> int:
        """Number of lines in ``path``, or 0 if it is unknown."""
        return len(self._files.get(path, ()))