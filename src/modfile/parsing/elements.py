"""Grammar elements shared by every verb: package lines and mapping lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modfile.nodes import Package, PackageMapping
from modfile.tokens import Token, TokenType

if TYPE_CHECKING:
    from modfile.errors import ParseError


def unquote(value: str) -> str:
    """Strip the delimiting quotes from a string literal.

    Exactly the first and last characters are removed; escape sequences
    are left as written.
    """
    return value[1:-1]


class ElementParsingMixin:
    """Mixin reading package and mapping elements.

    Each reader receives the element's first token, already pulled, and
    pulls the rest itself. The line terminator is left to the caller.

    """

    def _next(self) -> Token:
        """Pull the next token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _fail(self, expected: str, token: Token) -> ParseError:
        """Build an unexpected-token error. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _read_package(self, token: Token) -> Package:
        """Read ``STRING VERSION``.

        Args:
            token: The first token of the element

        Returns:
            Package with unquoted path and verbatim version.

        Raises:
            ParseError: If the path or version is missing or malformed.
        """
        if token.type is not TokenType.STRING:
            raise self._fail("package declaration", token)

        path = unquote(token.value)
        if not path:
            raise self._fail("non-empty package path", token)

        version = self._next()
        if version.type is not TokenType.VERSION:
            raise self._fail("package version", version)

        return Package(path, version.value)

    def _read_mapping(self, token: Token) -> PackageMapping:
        """Read ``STRING VERSION => STRING VERSION``."""
        old = self._read_package(token)

        arrow = self._next()
        if arrow.type is not TokenType.MAP_ARROW:
            raise self._fail("'=>'", arrow)

        new = self._read_package(self._next())
        return PackageMapping(old, new)
