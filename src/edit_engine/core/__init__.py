"""Positions, ranges, text lengths and edit sequences."""

from .edits import (
    EditSequence,
    MappedPoint,
    MappedSpan,
    PositionMapping,
    SingleEdit,
    TextEdit,
)
from .length import TextLength, length_of, translate
from .position import Position, Range, range_from_positions
from .source import SourceDocument, VirtualSourceDocument

__all__ = [
    "Position",
    "Range",
    "range_from_positions",
    "TextLength",
    "length_of",
    "translate",
    "SingleEdit",
    "TextEdit",
    "EditSequence",
    "MappedPoint",
    "MappedSpan",
    "PositionMapping",
    "SourceDocument",
    "VirtualSourceDocument",
]
