"""Pull-based lexer for module manifests.

Scans the source once, front to back, handing out one Token per call.
Newlines are significant and come out as NEWLINE tokens; other
whitespace and ``//`` comments are skipped.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from modfile.config import get_parse_config
from modfile.lexer.classifiers import (
    INLINE_WHITESPACE,
    STRING_DELIMITERS,
    WORD_CHARS,
    classify_word,
)
from modfile.tokens import Token, TokenType


class Lexer:
    """Forward-only lexer producing a lazy token stream.

    Usage:
            >>> lexer = Lexer('module "m"\\n')
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(MODULE, 'module', 1:1)
        Token(STRING, '"m"', 1:8)
        Token(NEWLINE, '\\n', 1:11)
        Token(EOF, '', 2:1)

    Once the input is exhausted, ``next_token()`` keeps returning the same
    EOF token. The stream is not restartable; scan again with a new Lexer.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_line_start",  # Offset of the first character of the current line
        "_source_file",
        "_comments_enabled",
        "_eof",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        comments_enabled: bool | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Manifest source text
            source_file: Optional source file path for error messages
            comments_enabled: Override the active ParseConfig setting
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._line_start = 0
        self._source_file = source_file
        if comments_enabled is None:
            comments_enabled = get_parse_config().comments_enabled
        self._comments_enabled = comments_enabled
        self._eof: Token | None = None

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns:
            The next Token, or the EOF token once input is exhausted.
        """
        if self._eof is not None:
            return self._eof

        self._skip_insignificant()

        if self._pos >= self._source_len:
            self._eof = self._make_token(TokenType.EOF, self._pos, self._pos)
            return self._eof

        start = self._pos
        char = self._source[start]

        if char == "\n":
            token = self._make_token(TokenType.NEWLINE, start, start + 1)
            self._pos = start + 1
            self._lineno += 1
            self._line_start = self._pos
            return token

        if char in STRING_DELIMITERS:
            return self._scan_string(char)

        if char in WORD_CHARS:
            return self._scan_word()

        if char == "(":
            return self._commit(TokenType.LEFT_PAREN, start + 1)
        if char == ")":
            return self._commit(TokenType.RIGHT_PAREN, start + 1)
        if char == "=" and self._source.startswith("=>", start):
            return self._commit(TokenType.MAP_ARROW, start + 2)

        return self._commit(TokenType.INVALID, start + 1)

    # =========================================================================
    # Scanners
    # =========================================================================

    def _skip_insignificant(self) -> None:
        """Skip inline whitespace and comments, stopping at a newline."""
        source = self._source
        while self._pos < self._source_len:
            char = source[self._pos]
            if char in INLINE_WHITESPACE:
                self._pos += 1
            elif self._comments_enabled and source.startswith("//", self._pos):
                self._pos = self._find_line_end()
            else:
                return

    def _scan_word(self) -> Token:
        """Scan a maximal run of word characters and classify it."""
        end = self._pos
        while end < self._source_len and self._source[end] in WORD_CHARS:
            end += 1
        word = self._source[self._pos : end]
        return self._commit(classify_word(word), end)

    def _scan_string(self, quote: str) -> Token:
        """Scan a quoted string literal, keeping its delimiters.

        Double-quoted strings may contain backslash escape pairs, which are
        stepped over but not interpreted. Back-quoted strings are raw.
        Strings cannot span lines: an unterminated literal becomes an
        INVALID token running to the end of the line.

        Args:
            quote: The opening delimiter

        Returns:
            STRING token, or INVALID if the literal is unterminated.
        """
        source = self._source
        line_end = self._find_line_end()
        pos = self._pos + 1
        while pos < line_end:
            char = source[pos]
            if char == quote:
                return self._commit(TokenType.STRING, pos + 1)
            if char == "\\" and quote == '"' and pos + 1 < line_end:
                pos += 2
                continue
            pos += 1
        return self._commit(TokenType.INVALID, line_end)

    # =========================================================================
    # Position helpers
    # =========================================================================

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or EOF)."""
        idx = self._source.find("\n", self._pos)
        return idx if idx != -1 else self._source_len

    def _commit(self, token_type: TokenType, end: int) -> Token:
        """Emit a token spanning from the current position to end.

        Tokens built here never contain a newline, so only the
        position advances.
        """
        token = self._make_token(token_type, self._pos, end)
        self._pos = end
        return token

    def _make_token(self, token_type: TokenType, start: int, end: int) -> Token:
        return Token(
            type=token_type,
            value=self._source[start:end],
            lineno=self._lineno,
            col=start - self._line_start + 1,
            offset=start,
            source_file=self._source_file,
        )
