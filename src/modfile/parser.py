"""State-machine parser producing a typed Document.

Pulls tokens from the Lexer on demand and walks the manifest grammar:

    file        := { newline } "module" STRING newline verbBlock*
    verbBlock   := requireDecl | excludeDecl | replaceDecl | newline
    requireDecl := "require" ( pkgLine | "(" newline pkgLine* ")" newline )
    excludeDecl := "exclude" ( pkgLine | "(" newline pkgLine* ")" newline )
    replaceDecl := "replace" ( mapLine | "(" newline mapLine* ")" newline )
    pkgLine     := STRING VERSION newline
    mapLine     := STRING VERSION "=>" STRING VERSION newline

Architecture:
Each state is a zero-argument callable returning the next state, or None
once input is cleanly exhausted. ``parse()`` drives the loop. Grammar
violations raise immediately; there is no recovery and no partial result.

- `TokenNavigationMixin`: token pulls, newline handling, error construction
- `ElementParsingMixin`: package and mapping element readers

Thread Safety:
Parser instances are not thread-safe. Create one per source string.
The resulting Document is immutable and safe to share.

"""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, Protocol

from modfile.config import get_parse_config
from modfile.errors import ConfigError
from modfile.lexer import Lexer
from modfile.nodes import Document, Package, PackageMapping
from modfile.parsing import ElementParsingMixin, TokenNavigationMixin, unquote
from modfile.tokens import TokenType
from modfile.utils.logger import get_logger

if TYPE_CHECKING:
    from modfile.tokens import Token

logger = get_logger(__name__)


class State(Protocol):
    """A parser state: consumes tokens, returns the next state or None."""

    def __call__(self) -> State | None: ...


class Verb(Enum):
    """Declaration verbs, valued by the Document field they append to."""

    REQUIRE = "requires"
    EXCLUDE = "excludes"
    REPLACE = "replaces"


_VERB_TOKENS: dict[TokenType, Verb] = {
    TokenType.REQUIRE: Verb.REQUIRE,
    TokenType.EXCLUDE: Verb.EXCLUDE,
    TokenType.REPLACE: Verb.REPLACE,
}


class Parser(
    TokenNavigationMixin,
    ElementParsingMixin,
):
    """Parser for module manifests.

    Usage:
            >>> parser = Parser('module "m"\\nrequire "p" v1.0.0\\n')
            >>> parser.parse()
        Document(name='m', requires=(Package(path='p', version='v1.0.0'),), ...)

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lexer",
        "_name",
        "_entries",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Manifest source text
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._name = ""
        self._entries: dict[Verb, list[Package | PackageMapping]] = {}

    def parse(self) -> Document:
        """Parse the source into a Document.

        Returns:
            Document holding the module name and every declaration in
            file order.

        Raises:
            ConfigError: If the source exceeds the configured size limit.
            ParseError: On the first lexical or structural error.
        """
        max_size = get_parse_config().max_source_size
        if max_size is not None and len(self._source) > max_size:
            msg = f"source is {len(self._source)} characters, limit is {max_size}"
            raise ConfigError(msg)

        # Per-parse state
        self._lexer = Lexer(self._source, self._source_file)
        self._name = ""
        self._entries = {verb: [] for verb in Verb}

        state: State | None = self._parse_module
        while state is not None:
            state = state()

        doc = Document(
            self._name,
            **{verb.value: tuple(entries) for verb, entries in self._entries.items()},
        )
        logger.debug(
            "Parsed module %r: %d requires, %d excludes, %d replaces",
            doc.name,
            len(doc.requires),
            len(doc.excludes),
            len(doc.replaces),
        )
        return doc

    # =========================================================================
    # States
    # =========================================================================

    def _parse_module(self) -> State | None:
        """Skip leading blank lines up to the module keyword."""
        token = self._skip_newlines()
        if token.type is not TokenType.MODULE:
            raise self._fail("module declaration", token)
        return self._parse_module_name

    def _parse_module_name(self) -> State | None:
        token = self._next()
        if token.type is not TokenType.STRING:
            raise self._fail("module name", token)

        name = unquote(token.value)
        if not name:
            raise self._fail("non-empty module name", token)
        self._name = name

        self._expect_line_end()
        return self._parse_verb

    def _parse_verb(self) -> State | None:
        """Dispatch on the next verb keyword, skipping blank lines."""
        token = self._next()
        verb = _VERB_TOKENS.get(token.type)
        if verb is not None:
            return partial(self._parse_list, verb)
        if token.type is TokenType.NEWLINE:
            return self._parse_verb
        if token.type is TokenType.EOF:
            return None
        raise self._fail("verb declaration", token)

    def _parse_list(self, verb: Verb) -> State | None:
        """Parse the inline entry or open a block after a verb keyword.

        The inline form admits no blank line between the verb and its
        entry; only blocks skip blank lines.
        """
        token = self._next()
        if token.type is TokenType.LEFT_PAREN:
            token = self._next()
            if token.type is not TokenType.NEWLINE:
                raise self._fail("newline", token)
            return partial(self._parse_list_element, verb)

        self._add(verb, token)
        return self._parse_verb

    def _parse_list_element(self, verb: Verb) -> State | None:
        """Parse one block entry, or the closing parenthesis."""
        token = self._skip_newlines()
        if token.type is TokenType.RIGHT_PAREN:
            self._expect_line_end()
            return self._parse_verb

        self._add(verb, token)
        return partial(self._parse_list_element, verb)

    # =========================================================================
    # Accumulation
    # =========================================================================

    def _add(self, verb: Verb, token: Token) -> None:
        """Read one element line starting at token and append it."""
        if verb is Verb.REPLACE:
            entry: Package | PackageMapping = self._read_mapping(token)
        else:
            entry = self._read_package(token)
        self._expect_line_end()
        self._entries[verb].append(entry)
