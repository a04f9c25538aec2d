"""
Exception types raised by the segment aligner.

All of them derive from ValueError, so callers that already guard sequence
input with ``except ValueError`` keep working.

Date: 2026-03-02
"""

from typing import Optional


class AlignmentError(ValueError):
    """Base class for every error raised while indexing or aligning."""


class InvalidSymbolError(AlignmentError):
    """A character outside A/T/C/G was met while encoding a sequence."""

    def __init__(self, symbol: str, name: Optional[str] = None, message: Optional[str] = None):
        self.symbol = symbol
        self.name = name
        if message is None:
            message = f"Invalid DNA character: '{symbol}'"
        super().__init__(message)


class EmptyInputError(AlignmentError):
    """The reference or the query has zero length."""


class AlignmentBreakError(AlignmentError):
    """No hashed match starts at a query position on the covering path."""

    def __init__(self, position: int, path_position: Optional[int] = None):
        self.position = position
        # Where the covering path stopped; can precede the uncoverable position
        self.path_position = position if path_position is None else path_position
        super().__init__(f"Alignment break: No match found at position {position}")
