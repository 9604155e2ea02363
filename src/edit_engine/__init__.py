"""Position and range mapping across text edit sequences."""

__all__ = [
    "buffer",
    "core",
    "errors",
    "runtime",
]

__version__ = "0.1.0"
