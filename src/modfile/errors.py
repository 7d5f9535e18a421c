"""Exception classes for modfile.

Every parse failure is terminal: the first error stops the parser and is
raised to the caller of ``parse``. No partial Document is ever returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modfile.tokens import Token


class ModfileError(Exception):
    """Base exception for all modfile errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(ModfileError):
    """Error during manifest parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        *,
        expected: str | None = None,
        token: Token | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
            expected: Grammar element the parser was looking for
            token: The offending token
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.expected = expected
        self.token = token

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def unexpected(cls, expected: str, token: Token) -> ParseError:
        """Build an "expect X, got Y" error located at the offending token."""
        return cls(
            f"expect {expected}, got {token.describe()}",
            token.lineno,
            token.col,
            token.source_file,
            expected=expected,
            token=token,
        )


class StructuralError(ParseError):
    """Wrong token kind or ordering for the current grammar state."""


class LexicalError(StructuralError):
    """An unrecognized character sequence reached the parser.

    The parser only sees invalid input where it expected some grammar
    element, so this is also a StructuralError.
    """


class IncompleteInputError(StructuralError):
    """Input ended where the grammar required further tokens."""


class ConfigError(ModfileError):
    """Input rejected by the active parse configuration."""
