"""Source location tracking for error messages.

Provides SourceLocation dataclass for tracking token positions in tree
notation source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in source text.

    Line and column are 1-indexed, the offset is 0-indexed.

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=4, offset=3)
            >>> f"{loc.lineno}:{loc.col_offset}"
            '1:4'

    """

    lineno: int
    col_offset: int
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.lineno}:{self.col_offset}"
