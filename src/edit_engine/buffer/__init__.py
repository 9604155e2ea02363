"""In-memory documents that edit sequences can read from and apply to."""

from .document import BufferDocument
from .validation import ensure_position, ensure_range

__all__ = [
    "BufferDocument",
    "ensure_position",
    "ensure_range",
]
