from __future__ import annotations

import pytest

from edit_engine.core import Position, TextLength, length_of, translate


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", TextLength(1, 1)),
        ("abc", TextLength(1, 4)),
        ("a\nbc", TextLength(2, 3)),
        ("\n", TextLength(2, 1)),
        ("ab\n\nxyz\n", TextLength(4, 1)),
    ],
)
def test_length_of_counts_lines_and_last_line_width(
    text: str, expected: TextLength
) -> None:
    assert length_of(text) == expected


def test_translate_single_line_text_advances_column() -> None:
    assert translate(Position(3, 5), length_of("xyz")) == Position(3, 8)


def test_translate_empty_text_is_identity() -> None:
    assert translate(Position(3, 5), length_of("")) == Position(3, 5)


def test_translate_multi_line_text_moves_to_new_line() -> None:
    assert translate(Position(3, 5), length_of("xy\nz")) == Position(4, 2)
    assert translate(Position(3, 5), length_of("\n\n")) == Position(5, 1)
