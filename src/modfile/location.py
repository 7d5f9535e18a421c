"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in manifest text.
Used by tokens and parse errors.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute offset in source text
        source_file: Source file path (optional, diagnostics only)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=9)
            >>> str(loc)
            '3:9'

            >>> str(SourceLocation(1, 1, source_file="go.mod"))
            'go.mod:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "go.mod:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
