"""Sheet collaborators: the protocol Table consumes and an in-memory grid."""

from .memory import InMemoryRange, InMemorySheet
from .protocol import InvalidRangeError, Range, Sheet

__all__ = [
    "InMemoryRange",
    "InMemorySheet",
    "InvalidRangeError",
    "Range",
    "Sheet",
]
