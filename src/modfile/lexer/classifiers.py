"""Word classification for the modfile lexer.

Classifiers are pure logic: they decide what a scanned word is without
touching lexer position. Keywords must match a whole word, so ``requires``
or ``modules`` are never mistaken for a verb.
"""

from __future__ import annotations

from modfile.tokens import TokenType

KEYWORDS: dict[str, TokenType] = {
    "module": TokenType.MODULE,
    "require": TokenType.REQUIRE,
    "exclude": TokenType.EXCLUDE,
    "replace": TokenType.REPLACE,
}

_ASCII_ALNUM = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")

# Characters that may form a bare word (keyword, version, or junk)
WORD_CHARS = _ASCII_ALNUM | frozenset("_.+-~")

# Characters allowed after the leading "v<digit>" of a version literal
VERSION_CHARS = _ASCII_ALNUM | frozenset(".+-")

# Skipped silently between tokens; "\n" is significant and never skipped
INLINE_WHITESPACE = frozenset(" \t\r\f")

STRING_DELIMITERS = frozenset('"`')


def is_version_literal(word: str) -> bool:
    """Check whether a word has the lexical shape of a version.

    A version is ``v`` followed by a digit, then any mix of letters,
    digits, dots, plus and minus signs (``v1.2.3``, ``v2.0.0-rc.1``,
    ``v0.0.0-20200101-abcdef``, ``v2.1.0+incompatible``). No semantic
    validation is performed.

    Args:
        word: A maximal run of WORD_CHARS

    Returns:
        True if the word is a version literal.
    """
    if len(word) < 2 or word[0] != "v" or word[1] not in "0123456789":
        return False
    return all(c in VERSION_CHARS for c in word[2:])


def classify_word(word: str) -> TokenType:
    """Classify a bare word as keyword, version, or invalid input."""
    keyword = KEYWORDS.get(word)
    if keyword is not None:
        return keyword
    if is_version_literal(word):
        return TokenType.VERSION
    return TokenType.INVALID


__all__ = [
    "INLINE_WHITESPACE",
    "KEYWORDS",
    "STRING_DELIMITERS",
    "VERSION_CHARS",
    "WORD_CHARS",
    "classify_word",
    "is_version_literal",
]
