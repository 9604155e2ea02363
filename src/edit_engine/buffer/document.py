"""List-of-lines document storage usable as a ``SourceDocument``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from edit_engine.core.edits import TextEdit
from edit_engine.core.position import Position, Range
from edit_engine.core.source import VirtualSourceDocument
from edit_engine.runtime.telemetry import span

from .validation import ensure_range


@dataclass(slots=True)
class BufferDocument:
    """Text kept as a list of lines without terminators.

    Lines are addressed 1-based to match ``Position``. Applying an edit never
    mutates the document; it returns a new one with a bumped version.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0, dirty=False)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""])

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line_number: int) -> str:
        return self._lines[line_number - 1]

    def get_value(self, text_range: Range) -> str:
        ensure_range(self, text_range)
        return VirtualSourceDocument(self.get_line, self.line_count).get_value(
            text_range
        )

    @property
    def end_position_exclusive(self) -> Position:
        return Position(self.line_count, len(self._lines[-1]) + 1)

    def apply(self, edit: TextEdit) -> "BufferDocument":
        """Return the document produced by applying ``edit``."""

        with span(
            "buffer::apply",
            component="buffer",
            metadata={"version": self.version},
        ) as handle:
            text = edit.apply_to_lines(self)
            updated = BufferDocument(
                _lines=text.split("\n"), version=self.version + 1, dirty=True
            )
            handle.add_metadata("new_version", updated.version)
            handle.add_metadata("line_count", updated.line_count)
            return updated
