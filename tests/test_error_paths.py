"""Error-path and malformed input tests.

Every malformed manifest must fail with a located ParseError naming
what the parser expected and what it got instead.
"""

from __future__ import annotations

import pytest

from modfile import parse
from modfile.errors import (
    IncompleteInputError,
    LexicalError,
    ModfileError,
    ParseError,
    StructuralError,
)
from modfile.tokens import Token, TokenType

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing paren", lineno=10, col_offset=5)
        assert str(err) == "10:5 missing paren"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="widget.mod")
        assert str(err) == "widget.mod:1:1 error"

    def test_unexpected_builder(self) -> None:
        token = Token(TokenType.STRING, '"x"', lineno=3, col=7)
        err = StructuralError.unexpected("newline", token)
        assert isinstance(err, StructuralError)
        assert str(err) == "3:7 expect newline, got string literal '\"x\"'"
        assert err.expected == "newline"
        assert err.token is token

    def test_hierarchy(self) -> None:
        assert issubclass(ParseError, ModfileError)
        assert issubclass(StructuralError, ParseError)
        assert issubclass(IncompleteInputError, StructuralError)
        assert issubclass(LexicalError, ParseError)


# =========================================================================
# Module declaration
# =========================================================================


class TestModuleDeclaration:
    """The file must open with a module line."""

    def test_empty_input(self) -> None:
        with pytest.raises(IncompleteInputError, match="expect module declaration, got end of input"):
            parse("")

    def test_blank_input(self) -> None:
        with pytest.raises(IncompleteInputError, match="module declaration"):
            parse("\n\n")

    def test_verb_before_module(self) -> None:
        with pytest.raises(StructuralError) as exc_info:
            parse('require "p" v1\nmodule "m"\n')
        err = exc_info.value
        assert not isinstance(err, IncompleteInputError)
        assert str(err) == "1:1 expect module declaration, got 'require'"

    def test_unquoted_module_name(self) -> None:
        with pytest.raises(LexicalError, match="expect module name, got invalid input 'm'"):
            parse("module m\n")

    def test_missing_module_name(self) -> None:
        with pytest.raises(StructuralError, match="expect module name, got newline"):
            parse("module\n")

    def test_empty_module_name(self) -> None:
        with pytest.raises(StructuralError, match="non-empty module name"):
            parse('module ""\n')

    def test_trailing_content_after_name(self) -> None:
        with pytest.raises(StructuralError, match="expect newline") as exc_info:
            parse('module "m" "n"\n')
        assert exc_info.value.col_offset == 12

    def test_second_module_line(self) -> None:
        with pytest.raises(StructuralError, match="expect verb declaration, got 'module'"):
            parse('module "m"\nmodule "n"\n')


# =========================================================================
# Verb declarations
# =========================================================================


class TestVerbDeclaration:
    """Only known verbs may follow the module line."""

    def test_unknown_verb(self) -> None:
        with pytest.raises(StructuralError, match="verb declaration") as exc_info:
            parse('module "m"\nbogus "x" v1\n')
        err = exc_info.value
        assert (err.lineno, err.col_offset) == (2, 1)
        assert err.token is not None
        assert err.token.value == "bogus"

    def test_keyword_prefix_is_not_a_verb(self) -> None:
        with pytest.raises(StructuralError, match="verb declaration"):
            parse('module "m"\nrequires "x" v1\n')

    def test_stray_paren(self) -> None:
        with pytest.raises(StructuralError, match="expect verb declaration, got '\\)'"):
            parse('module "m"\n)\n')

    def test_invalid_character(self) -> None:
        with pytest.raises(LexicalError, match="got invalid input '@'"):
            parse('module "m"\n@\n')


# =========================================================================
# Package lines
# =========================================================================


class TestPackageLines:
    """A package line is exactly STRING VERSION newline."""

    def test_missing_version(self) -> None:
        with pytest.raises(StructuralError, match="expect package version, got newline"):
            parse('module "m"\nrequire "p"\n')

    def test_quoted_version(self) -> None:
        with pytest.raises(StructuralError, match="expect package version, got string literal"):
            parse('module "m"\nrequire "p" "v1"\n')

    def test_malformed_version(self) -> None:
        with pytest.raises(LexicalError, match="expect package version, got invalid input '1.0.0'"):
            parse('module "m"\nrequire "p" 1.0.0\n')

    def test_unquoted_path(self) -> None:
        with pytest.raises(LexicalError, match="expect package declaration"):
            parse('module "m"\nrequire p v1\n')

    def test_empty_path(self) -> None:
        with pytest.raises(StructuralError, match="non-empty package path"):
            parse('module "m"\nexclude "" v1\n')

    def test_trailing_garbage(self) -> None:
        with pytest.raises(LexicalError, match="expect newline, got invalid input 'garbage'"):
            parse('module "m"\nrequire "p" v1.0.0 garbage\n')

    def test_two_packages_on_one_line(self) -> None:
        with pytest.raises(StructuralError, match="expect newline"):
            parse('module "m"\nrequire "a" v1 "b" v2\n')

    def test_inline_form_rejects_blank_line(self) -> None:
        with pytest.raises(StructuralError, match="expect package declaration, got newline"):
            parse('module "m"\nrequire\n"p" v1\n')

    def test_verb_at_eof(self) -> None:
        with pytest.raises(IncompleteInputError, match="package declaration"):
            parse('module "m"\nrequire')

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexicalError, match="invalid input"):
            parse('module "m"\nrequire "p v1\n')


# =========================================================================
# Blocks
# =========================================================================


class TestBlocks:
    """Parenthesized blocks must open and close on their own lines."""

    def test_unclosed_block_at_eof(self) -> None:
        with pytest.raises(IncompleteInputError, match="got end of input"):
            parse('module "m"\nrequire (\n"a" v1\n')

    def test_unclosed_block_before_next_verb(self) -> None:
        with pytest.raises(StructuralError, match="got 'exclude'") as exc_info:
            parse('module "m"\nrequire (\n"a" v1\nexclude "b" v1\n)\n')
        assert exc_info.value.lineno == 4

    def test_open_paren_at_eof(self) -> None:
        with pytest.raises(IncompleteInputError, match="expect newline, got end of input"):
            parse('module "m"\nrequire (')

    def test_entry_on_open_paren_line(self) -> None:
        with pytest.raises(StructuralError, match="expect newline, got string literal"):
            parse('module "m"\nrequire ( "a" v1\n)\n')

    def test_entry_on_close_paren_line(self) -> None:
        with pytest.raises(StructuralError, match="expect newline"):
            parse('module "m"\nrequire (\n"a" v1 )\n')

    def test_content_after_close_paren(self) -> None:
        with pytest.raises(StructuralError, match="expect newline, got string literal"):
            parse('module "m"\nrequire (\n"a" v1\n) "b" v2\n')

    def test_nested_block(self) -> None:
        with pytest.raises(StructuralError, match="expect package declaration, got '\\('"):
            parse('module "m"\nrequire (\n(\n)\n)\n')


# =========================================================================
# Mapping lines
# =========================================================================


class TestMappingLines:
    """A mapping line needs both sides fully versioned."""

    def test_missing_destination_version(self) -> None:
        with pytest.raises(StructuralError, match="expect package version, got newline"):
            parse('module "m"\nreplace "a" v1 => "b"\n')

    def test_missing_arrow(self) -> None:
        with pytest.raises(StructuralError, match="expect '=>', got string literal"):
            parse('module "m"\nreplace "a" v1 "b" v2\n')

    def test_missing_source_version(self) -> None:
        with pytest.raises(StructuralError, match="expect package version, got '=>'"):
            parse('module "m"\nreplace "a" => "b" v2\n')

    def test_missing_destination(self) -> None:
        with pytest.raises(StructuralError, match="expect package declaration, got newline"):
            parse('module "m"\nreplace "a" v1 =>\n')

    def test_block_entry_without_arrow(self) -> None:
        with pytest.raises(StructuralError, match="'=>'"):
            parse('module "m"\nreplace (\n"a" v1\n)\n')


# =========================================================================
# Error context
# =========================================================================


class TestErrorContext:
    """Errors carry location and the offending token."""

    def test_source_file_in_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse('module "m"\nbogus\n', source_file="widget.mod")
        assert str(exc_info.value).startswith("widget.mod:2:1 ")
        assert exc_info.value.source_file == "widget.mod"

    def test_expected_attribute(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse('module "m"\nreplace "a" v1 "b" v2\n')
        err = exc_info.value
        assert err.expected == "'=>'"
        assert err.token is not None
        assert err.token.type == TokenType.STRING
        assert (err.lineno, err.col_offset) == (2, 16)

    def test_long_token_truncated(self) -> None:
        junk = "x" * 100
        with pytest.raises(LexicalError) as exc_info:
            parse(f'module "m"\n{junk}\n')
        assert "..." in str(exc_info.value)
        assert len(str(exc_info.value)) < 100
