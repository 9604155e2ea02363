"""1-based text coordinates and half-open ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from edit_engine.errors import InvariantViolationError
from edit_engine.runtime.telemetry import record_event


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (line, column) coordinate; both parts start at 1.

    Ordering is by line, then column.
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")

    @classmethod
    def lift(cls, value: "Position | Tuple[int, int]") -> "Position":
        if isinstance(value, Position):
            return value
        line, column = value
        return cls(line, column)

    def is_before(self, other: "Position") -> bool:
        return self < other

    def is_before_or_equal(self, other: "Position") -> bool:
        return self <= other

    def __str__(self) -> str:
        return f"({self.line},{self.column})"


@dataclass(frozen=True, slots=True)
class Range:
    """Text from ``start`` (inclusive) to ``end`` (exclusive)."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if not self.start.is_before_or_equal(self.end):
            _violation(self.start, self.end)

    @classmethod
    def of(
        cls, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> "Range":
        return cls(Position(start_line, start_column), Position(end_line, end_column))

    @classmethod
    def empty_at(cls, position: Position) -> "Range":
        return cls(position, position)

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def line_span(self) -> int:
        """Number of line breaks the range crosses."""

        return self.end.line - self.start.line

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains_position(self, position: Position) -> bool:
        return self.start <= position < self.end

    def __str__(self) -> str:
        return f"[{self.start}-{self.end})"


def range_from_positions(start: Position, end: Position) -> Range:
    """Build a range, failing loudly when ``end`` precedes ``start``."""

    if not start.is_before_or_equal(end):
        _violation(start, end)
    return Range(start, end)


def _violation(start: Position, end: Position) -> None:
    record_event(
        "core.invariant_violation",
        level="error",
        data={"start": start, "end": end},
    )
    raise InvariantViolationError(
        f"range start {start} must not be after end {end}", start=start, end=end
    )


__all__ = ["Position", "Range", "range_from_positions"]
