"""Exception types raised by the edit engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from edit_engine.core.position import Position


class InvariantViolationError(RuntimeError):
    """Raised when coordinate arithmetic produces an impossible range.

    This indicates a defect in the caller (for example a mis-sorted or
    overlapping edit list) and is never caught inside the engine.
    """

    def __init__(
        self,
        message: str,
        *,
        start: Optional["Position"] = None,
        end: Optional["Position"] = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class DocumentRangeError(RuntimeError):
    """Raised when a document is asked for text outside its lines."""

    def __init__(self, message: str, *, position: Optional["Position"] = None) -> None:
        super().__init__(message)
        self.position = position


__all__ = ["InvariantViolationError", "DocumentRangeError"]
