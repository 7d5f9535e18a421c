"""Parsing mixins for the modfile parser.

Provides:
- TokenNavigationMixin: token pulls, newline handling, error construction
- ElementParsingMixin: package and mapping element readers
"""

from modfile.parsing.elements import ElementParsingMixin, unquote
from modfile.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "ElementParsingMixin",
    "TokenNavigationMixin",
    "unquote",
]
