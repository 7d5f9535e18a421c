"""Token and TokenType definitions for the modfile lexer.

The lexer produces a stream of Token objects that the parser pulls one
at a time. Each Token has a type, raw value, and source position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modfile.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    The value of each member is the description used in diagnostics.

    """

    # Keywords
    MODULE = "'module'"
    REQUIRE = "'require'"
    EXCLUDE = "'exclude'"
    REPLACE = "'replace'"

    # Literals
    STRING = "string literal"
    VERSION = "version literal"

    # Punctuation
    MAP_ARROW = "'=>'"
    LEFT_PAREN = "'('"
    RIGHT_PAREN = "')'"

    # Structure
    NEWLINE = "newline"
    EOF = "end of input"
    INVALID = "invalid input"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw text from source; string literals keep their quotes
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed)
        offset: Absolute start position in source
        source_file: Optional source file path

    """

    type: TokenType
    value: str
    lineno: int
    col: int
    offset: int = 0
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from modfile.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            source_file=self.source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def describe(self) -> str:
        """Describe the token for an error message.

        Structural tokens are described by kind only; tokens carrying
        text include it, truncated for long values.
        """
        if self.type in (TokenType.NEWLINE, TokenType.EOF):
            return self.type.value
        val = self.value
        if len(val) > 40:
            val = val[:37] + "..."
        if self.type in (TokenType.STRING, TokenType.VERSION, TokenType.INVALID):
            return f"{self.type.value} {val!r}"
        return self.type.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"
