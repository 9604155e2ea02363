"""Edit sequences and the coordinate mapping they induce.

A ``TextEdit`` is an ordered list of non-overlapping ``SingleEdit`` values,
each replacing a range of the *original* document. Every query walks the
edits once, left to right, carrying a line delta and a column delta that is
only valid on the line where the previous edit ended. Positions before the
first edit keep their coordinates, positions inside a rewritten span map to
that edit's whole new range, and positions after an edit are carried along
by the accumulated deltas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from edit_engine.errors import InvariantViolationError
from edit_engine.runtime.config import get_settings
from edit_engine.runtime.telemetry import record_event, span

from .length import length_of, translate
from .position import Position, Range, range_from_positions
from .source import SourceDocument


@dataclass(frozen=True, slots=True)
class SingleEdit:
    """Replace ``range`` (original coordinates) with ``text``."""

    range: Range
    text: str

    @classmethod
    def replace(cls, text_range: Range, text: str) -> "SingleEdit":
        return cls(text_range, text)

    @classmethod
    def insert(cls, position: Position, text: str) -> "SingleEdit":
        return cls(Range.empty_at(position), text)

    @classmethod
    def delete(cls, text_range: Range) -> "SingleEdit":
        return cls(text_range, "")

    @property
    def is_noop(self) -> bool:
        return self.range.is_empty() and not self.text


@dataclass(frozen=True, slots=True)
class MappedPoint:
    """The position survived the edits and has a unique image."""

    position: Position

    @property
    def start(self) -> Position:
        return self.position

    @property
    def end(self) -> Position:
        return self.position


@dataclass(frozen=True, slots=True)
class MappedSpan:
    """The position was rewritten; ``range`` is the replacing text's new range."""

    range: Range

    @property
    def start(self) -> Position:
        return self.range.start

    @property
    def end(self) -> Position:
        return self.range.end


PositionMapping = Union[MappedPoint, MappedSpan]

# (original edit, its range in post-edit coordinates)
_Step = Tuple[SingleEdit, Range]


class TextEdit:
    """An immutable, ascending, non-overlapping sequence of ``SingleEdit``.

    Ordering is the caller's responsibility. Pass ``validate=True`` (or set
    ``EDIT_ENGINE_VALIDATE_EDITS``) to have it checked on construction.
    """

    __slots__ = ("_edits",)

    def __init__(
        self, edits: Iterable[SingleEdit] = (), *, validate: Optional[bool] = None
    ) -> None:
        self._edits: Tuple[SingleEdit, ...] = tuple(edits)
        if validate is None:
            validate = get_settings().validate_edits
        if validate:
            self.validate()

    @property
    def edits(self) -> Sequence[SingleEdit]:
        return self._edits

    def __len__(self) -> int:
        return len(self._edits)

    def __iter__(self) -> Iterator[SingleEdit]:
        return iter(self._edits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextEdit):
            return NotImplemented
        return self._edits == other._edits

    def __hash__(self) -> int:
        return hash(self._edits)

    def __repr__(self) -> str:
        return f"TextEdit({list(self._edits)!r})"

    def is_empty(self) -> bool:
        return not self._edits

    def validate(self) -> None:
        """Raise ``InvariantViolationError`` unless edits are sorted and disjoint."""

        for previous, current in zip(self._edits, self._edits[1:]):
            if current.range.start.is_before(previous.range.end):
                record_event(
                    "core.invariant_violation",
                    level="error",
                    data={"previous": previous.range, "current": current.range},
                )
                raise InvariantViolationError(
                    f"edit at {current.range} overlaps or precedes {previous.range}",
                    start=current.range.start,
                    end=previous.range.end,
                )

    # -- forward mapping -------------------------------------------------

    def map_position(self, position: Position) -> PositionMapping:
        anchor: Optional[_Step] = None
        for edit, new_range in self._walk():
            if position.is_before_or_equal(edit.range.start):
                break
            if position.is_before(edit.range.end):
                return MappedSpan(new_range)
            anchor = (edit, new_range)
        return MappedPoint(_carry(position, anchor))

    def map_range(self, text_range: Range) -> Range:
        start = self.map_position(text_range.start).start
        end = self.map_position(text_range.end).end
        return range_from_positions(start, end)

    def get_new_ranges(self) -> List[Range]:
        """Range of every edit's replacement text, in post-edit coordinates."""

        return [new_range for _, new_range in self._walk()]

    compute_new_ranges = get_new_ranges

    def _walk(self) -> Iterator[_Step]:
        anchor: Optional[_Step] = None
        for edit in self._edits:
            new_start = _carry(edit.range.start, anchor)
            new_end = translate(new_start, length_of(edit.text))
            step = (edit, range_from_positions(new_start, new_end))
            yield step
            anchor = step

    # -- inverse ---------------------------------------------------------

    def reverse(self, document: SourceDocument) -> "TextEdit":
        """Edits that turn the post-edit document back into ``document``."""

        with span(
            "edits::reverse",
            component="edits",
            metadata={"edit_count": len(self._edits)},
        ) as handle:
            inverse = TextEdit(
                (
                    SingleEdit(new_range, document.get_value(edit.range))
                    for edit, new_range in self._walk()
                ),
                validate=False,
            )
            handle.add_metadata("restored_length", sum(len(e.text) for e in inverse))
            return inverse

    def reverse_map_position(
        self, position: Position, document: SourceDocument
    ) -> PositionMapping:
        return self.reverse(document).map_position(position)

    def reverse_map_range(self, text_range: Range, document: SourceDocument) -> Range:
        return self.reverse(document).map_range(text_range)

    # -- text synthesis --------------------------------------------------

    def apply_to_lines(self, document: SourceDocument) -> str:
        with span(
            "edits::apply_to_lines",
            component="edits",
            metadata={"edit_count": len(self._edits)},
        ) as handle:
            parts: List[str] = []
            last_end = Position(1, 1)
            for edit in self._edits:
                gap = range_from_positions(last_end, edit.range.start)
                if not gap.is_empty():
                    parts.append(document.get_value(gap))
                parts.append(edit.text)
                last_end = edit.range.end
            tail = range_from_positions(last_end, document.end_position_exclusive)
            if not tail.is_empty():
                parts.append(document.get_value(tail))
            result = "".join(parts)
            handle.add_metadata("output_length", len(result))
            return result


EditSequence = TextEdit


def _carry(position: Position, anchor: Optional[_Step]) -> Position:
    """Shift a position lying after ``anchor``'s original range.

    The line delta is the distance between the anchor's old and new end lines.
    The column delta only applies on the anchor's end line.
    """

    if anchor is None:
        return position
    edit, new_range = anchor
    old_end, new_end = edit.range.end, new_range.end
    if position.line == old_end.line:
        return Position(new_end.line, new_end.column + position.column - old_end.column)
    return Position(position.line + new_end.line - old_end.line, position.column)


__all__ = [
    "EditSequence",
    "MappedPoint",
    "MappedSpan",
    "PositionMapping",
    "SingleEdit",
    "TextEdit",
]
