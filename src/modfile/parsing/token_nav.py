"""Token navigation utilities for the modfile parser.

Provides mixin for pulling tokens from the lexer and building
located parse errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modfile.errors import (
    IncompleteInputError,
    LexicalError,
    ParseError,
    StructuralError,
)
from modfile.tokens import Token, TokenType

if TYPE_CHECKING:
    from modfile.lexer import Lexer


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _lexer: Lexer

    The current token is whatever ``_next()`` last returned; there is no
    lookahead beyond it and no token is ever pushed back.

    """

    _lexer: Lexer

    def _next(self) -> Token:
        """Pull the next token from the lexer."""
        return self._lexer.next_token()

    def _skip_newlines(self) -> Token:
        """Pull tokens until one is not a NEWLINE and return it."""
        token = self._next()
        while token.type is TokenType.NEWLINE:
            token = self._next()
        return token

    def _expect_line_end(self) -> None:
        """Require the current line to end here.

        A NEWLINE ends the line. So does end of input, which the lexer
        keeps returning, so the following state sees it again.
        """
        token = self._next()
        if token.type not in (TokenType.NEWLINE, TokenType.EOF):
            raise self._fail("newline", token)

    def _fail(self, expected: str, token: Token) -> ParseError:
        """Build the error for an unexpected token.

        The error class follows the offending token: invalid input is a
        LexicalError, end of input an IncompleteInputError, anything else
        a StructuralError.
        """
        if token.type is TokenType.INVALID:
            return LexicalError.unexpected(expected, token)
        if token.type is TokenType.EOF:
            return IncompleteInputError.unexpected(expected, token)
        return StructuralError.unexpected(expected, token)
