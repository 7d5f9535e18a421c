"""
modfile — Module Manifest Parser

Parses the line-oriented manifest format that names a module and declares
its required, excluded and replaced packages, producing an immutable,
typed Document. No I/O: callers hand in the complete text.

Quick Start:
    >>> from modfile import parse
    >>> doc = parse('module "example.com/widget"\\nrequire "example.com/dep" v1.2.3\\n')
    >>> doc.name
    'example.com/widget'
    >>> doc.requires[0]
    Package(path='example.com/dep', version='v1.2.3')

Errors:
    >>> from modfile import parse, ParseError
    >>> try:
    ...     parse('module "m"\\nbogus "x" v1\\n')
    ... except ParseError as e:
    ...     print(e)
    2:1 expect verb declaration, got invalid input 'bogus'

Installation:
    pip install modfile              # Zero runtime dependencies
    pip install modfile[test]        # + pytest and Hypothesis
"""

from modfile.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from modfile.errors import (
    ConfigError,
    IncompleteInputError,
    LexicalError,
    ModfileError,
    ParseError,
    StructuralError,
)
from modfile.lexer import Lexer
from modfile.location import SourceLocation
from modfile.nodes import Document, Package, PackageMapping
from modfile.parser import Parser
from modfile.serialization import from_dict, from_json, to_dict, to_json
from modfile.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse manifest source into a Document.

    Args:
        source: Complete manifest text
        source_file: Optional source file path for error messages

    Returns:
        Document with the module name and all declarations in file order

    Raises:
        ParseError: On the first malformed construct. Subclasses tell
            invalid input (LexicalError), misplaced tokens (StructuralError)
            and truncated input (IncompleteInputError) apart.
        ConfigError: If the source exceeds the configured size limit.

    Example:
        >>> doc = parse('module "m"\\nreplace "a" v1 => "b" v2\\n')
        >>> doc.replaces[0].to
        Package(path='b', version='v2')
    """
    return Parser(source, source_file=source_file).parse()


__all__ = [
    # Main API
    "parse",
    "Parser",
    "Lexer",
    # Document model
    "Document",
    "Package",
    "PackageMapping",
    # Tokens and locations
    "Token",
    "TokenType",
    "SourceLocation",
    # Errors
    "ModfileError",
    "ParseError",
    "LexicalError",
    "StructuralError",
    "IncompleteInputError",
    "ConfigError",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
