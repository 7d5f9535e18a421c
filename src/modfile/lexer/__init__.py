"""Lexer for modfile manifests.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (scanning + position tracking)
└── classifiers.py       # Keyword table, character classes, word classification

Usage:
    >>> from modfile.lexer import Lexer
    >>> lexer = Lexer('require "p" v1.0.0\\n')
    >>> [t.type.name for t in lexer.tokenize()]
    ['REQUIRE', 'STRING', 'VERSION', 'NEWLINE', 'EOF']

"""

from modfile.lexer.core import Lexer

__all__ = ["Lexer"]
