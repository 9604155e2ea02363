"""Line/column extents of strings and translation of positions by them."""

from __future__ import annotations

from dataclasses import dataclass

from .position import Position


@dataclass(frozen=True, slots=True)
class TextLength:
    """How far typing a string moves a cursor.

    ``line_count`` is one more than the number of ``\\n`` characters and
    ``last_line_column_width`` is one more than the length of the text after
    the final ``\\n``.  The empty string has length ``(1, 1)``.
    """

    line_count: int
    last_line_column_width: int

    @property
    def is_single_line(self) -> bool:
        return self.line_count == 1


def length_of(text: str) -> TextLength:
    line_count = 1
    column = 1
    for char in text:
        if char == "\n":
            line_count += 1
            column = 1
        else:
            column += 1
    return TextLength(line_count, column)


def translate(position: Position, length: TextLength) -> Position:
    """Return where the cursor lands after typing ``length`` at ``position``."""

    if length.is_single_line:
        return Position(position.line, position.column + length.last_line_column_width - 1)
    return Position(position.line + length.line_count - 1, length.last_line_column_width)


__all__ = ["TextLength", "length_of", "translate"]
