"""Read-only document access consumed by ``TextEdit``."""

from __future__ import annotations

from typing import Callable, Protocol

from .position import Position, Range


class SourceDocument(Protocol):
    """Random access to the original text of a document.

    ``get_value`` must return exactly the text between ``text_range.start`` and
    ``text_range.end`` (1-based, end exclusive, lines joined by ``\\n``).
    """

    def get_value(self, text_range: Range) -> str:
        ...

    @property
    def end_position_exclusive(self) -> Position:
        ...


class VirtualSourceDocument:
    """``SourceDocument`` over a line accessor and a line count.

    ``get_line_content`` receives 1-based line numbers and returns the line
    without its terminator.
    """

    __slots__ = ("_get_line_content", "_line_count")

    def __init__(self, get_line_content: Callable[[int], str], line_count: int) -> None:
        self._get_line_content = get_line_content
        self._line_count = line_count

    @property
    def line_count(self) -> int:
        return self._line_count

    def get_value(self, text_range: Range) -> str:
        start, end = text_range.start, text_range.end
        if start.line == end.line:
            return self._get_line_content(start.line)[start.column - 1 : end.column - 1]
        parts = [self._get_line_content(start.line)[start.column - 1 :]]
        for line_number in range(start.line + 1, end.line):
            parts.append(self._get_line_content(line_number))
        parts.append(self._get_line_content(end.line)[: end.column - 1])
        return "\n".join(parts)

    @property
    def end_position_exclusive(self) -> Position:
        last_line = self._get_line_content(self._line_count)
        return Position(self._line_count, len(last_line) + 1)


__all__ = ["SourceDocument", "VirtualSourceDocument"]
