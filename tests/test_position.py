from __future__ import annotations

import pytest

from edit_engine.core import Position, Range, range_from_positions
from edit_engine.errors import InvariantViolationError


def test_positions_order_by_line_then_column() -> None:
    assert Position(1, 9) < Position(2, 1)
    assert Position(2, 1) < Position(2, 3)
    assert Position(2, 3).is_before(Position(2, 4))
    assert not Position(2, 3).is_before(Position(2, 3))
    assert Position(2, 3).is_before_or_equal(Position(2, 3))
    assert not Position(3, 1).is_before_or_equal(Position(2, 7))


@pytest.mark.parametrize("line, column", [(0, 1), (1, 0), (-2, 4)])
def test_position_rejects_non_positive_coordinates(line: int, column: int) -> None:
    with pytest.raises(ValueError):
        Position(line, column)


def test_lift_accepts_tuples_and_positions() -> None:
    position = Position(3, 4)

    assert Position.lift((3, 4)) == position
    assert Position.lift(position) is position


def test_range_from_positions_builds_half_open_range() -> None:
    built = range_from_positions(Position(1, 2), Position(2, 1))

    assert built == Range.of(1, 2, 2, 1)
    assert built.start_line == 1
    assert built.end_line == 2
    assert built.line_span == 1
    assert built.contains_position(Position(1, 2))
    assert built.contains_position(Position(1, 50))
    assert not built.contains_position(Position(2, 1))


def test_empty_range() -> None:
    empty = Range.empty_at(Position(4, 2))

    assert empty.is_empty()
    assert not empty.contains_position(Position(4, 2))
    assert not Range.of(4, 2, 4, 3).is_empty()


def test_range_with_end_before_start_is_an_invariant_violation() -> None:
    with pytest.raises(InvariantViolationError) as info:
        range_from_positions(Position(2, 5), Position(2, 4))

    assert info.value.start == Position(2, 5)
    assert info.value.end == Position(2, 4)


def test_range_constructor_enforces_order() -> None:
    with pytest.raises(InvariantViolationError):
        Range(Position(3, 1), Position(1, 1))
