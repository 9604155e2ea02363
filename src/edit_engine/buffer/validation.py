"""Bounds checks for positions addressed into a ``BufferDocument``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from edit_engine.core.position import Position, Range
from edit_engine.errors import DocumentRangeError

if TYPE_CHECKING:
    from .document import BufferDocument


def ensure_position(document: "BufferDocument", position: Position) -> Position:
    if position.line > document.line_count:
        raise DocumentRangeError("Line out of range", position=position)
    line = document.get_line(position.line)
    if position.column > len(line) + 1:
        raise DocumentRangeError("Column out of range", position=position)
    return position


def ensure_range(document: "BufferDocument", text_range: Range) -> Range:
    ensure_position(document, text_range.start)
    ensure_position(document, text_range.end)
    return text_range
