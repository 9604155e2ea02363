from __future__ import annotations

import pytest

from edit_engine.buffer import BufferDocument, ensure_position, ensure_range
from edit_engine.core import Position, Range, SingleEdit, TextEdit, VirtualSourceDocument
from edit_engine.errors import DocumentRangeError


def test_from_text_keeps_trailing_empty_line() -> None:
    document = BufferDocument.from_text("abc\ndef\n")

    assert document.snapshot() == ("abc", "def", "")
    assert document.line_count == 3
    assert document.text == "abc\ndef\n"
    assert document.end_position_exclusive == Position(3, 1)


def test_empty_document_has_one_empty_line() -> None:
    document = BufferDocument.from_text("")

    assert document.snapshot() == ("",)
    assert document.end_position_exclusive == Position(1, 1)
    assert BufferDocument.from_lines([]).snapshot() == ("",)


def test_get_value_within_and_across_lines() -> None:
    document = BufferDocument.from_lines(["abc", "def", "ghi"])

    assert document.get_line(2) == "def"
    assert document.get_value(Range.of(1, 2, 1, 3)) == "b"
    assert document.get_value(Range.of(1, 3, 3, 2)) == "c\ndef\ng"
    assert document.get_value(Range.of(1, 4, 2, 1)) == "\n"
    assert document.get_value(Range.of(2, 2, 2, 2)) == ""


def test_get_value_rejects_positions_outside_document() -> None:
    document = BufferDocument.from_lines(["abc", "def"])

    with pytest.raises(DocumentRangeError) as info:
        document.get_value(Range.of(1, 1, 3, 1))
    assert info.value.position == Position(3, 1)

    with pytest.raises(DocumentRangeError):
        document.get_value(Range.of(1, 1, 1, 5))


def test_validation_helpers_return_their_input() -> None:
    document = BufferDocument.from_lines(["abc"])
    position = Position(1, 4)
    text_range = Range.of(1, 1, 1, 4)

    assert ensure_position(document, position) is position
    assert ensure_range(document, text_range) is text_range


def test_apply_returns_new_document_with_bumped_version() -> None:
    document = BufferDocument.from_text("abc\ndef")
    edit = TextEdit([SingleEdit(Range.of(1, 2, 1, 3), "XY")])

    updated = document.apply(edit)

    assert updated.text == "aXYc\ndef"
    assert updated.version == document.version + 1
    assert updated.dirty is True
    assert document.text == "abc\ndef"
    assert document.dirty is False


def test_virtual_source_document_reads_through_accessor() -> None:
    lines = ["first", "second", "third"]
    source = VirtualSourceDocument(lambda number: lines[number - 1], len(lines))

    assert source.line_count == 3
    assert source.get_value(Range.of(1, 3, 2, 4)) == "rst\nsec"
    assert source.get_value(Range.of(2, 1, 2, 7)) == "second"
    assert source.end_position_exclusive == Position(3, 6)
