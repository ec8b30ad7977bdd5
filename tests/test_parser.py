"""Unit tests for the alias line parser."""

import pytest

from format_aliases.parser import (
    AliasParseError,
    parse_alias,
    parse_name,
    parse_quoted,
    parse_tokens,
    parse_value,
)


def parsed(line):
    alias, rest = parse_alias(line)
    return alias.name, list(alias.value), rest


class TestParseName:
    """Tests for parse_name()."""

    def test_name_without_equals(self):
        """Test the whole input is the name when there is no '='."""
        assert parse_name("alias") == ("alias", "")

    def test_name_stops_at_equals(self):
        """Test the name ends at the first '='."""
        assert parse_name("alias=") == ("alias", "=")

    def test_name_may_contain_spaces(self):
        """Test spaces are part of the name."""
        assert parse_name("alias foo") == ("alias foo", "")
        assert parse_name("alias foo=") == ("alias foo", "=")

    def test_empty_name_fails(self):
        """Test a leading '=' has no name to take."""
        with pytest.raises(AliasParseError) as exc:
            parse_name("=foo")
        assert exc.value.context == "name"


class TestParseTokens:
    """Tests for parse_tokens()."""

    def test_single_token(self):
        """Test a single token parses with nothing left over."""
        assert parse_tokens("foo") == (["foo"], "")

    def test_several_tokens(self):
        """Test tokens split on whitespace runs."""
        assert parse_tokens("foo bar") == (["foo", "bar"], "")
        assert parse_tokens("foo  bar\tbaz") == (["foo", "bar", "baz"], "")

    def test_trailing_separator_is_left(self):
        """Test whitespace with no following token stays in the remainder."""
        assert parse_tokens("foo bar ") == (["foo", "bar"], " ")

    def test_stops_at_quote(self):
        """Test a quote ends the token list."""
        assert parse_tokens("foo 'bar'") == (["foo"], " 'bar'")

    def test_information_separators_are_not_whitespace(self):
        """Test U+001C..U+001F stay inside tokens."""
        assert parse_tokens("a\x1cb\x1fc d") == (["a\x1cb\x1fc", "d"], "")

    def test_unicode_whitespace_ends_token(self):
        """Test a non-breaking space ends a token."""
        assert parse_tokens("foo\u00a0bar") == (["foo"], "\u00a0bar")

    def test_leading_whitespace_fails(self):
        """Test a value may not start with whitespace."""
        with pytest.raises(AliasParseError):
            parse_tokens(" foo")


class TestParseQuoted:
    """Tests for parse_quoted()."""

    def test_double_quotes(self):
        """Test tokens between double quotes."""
        assert parse_quoted('"foo bar"') == (["foo", "bar"], "")

    def test_single_quotes(self):
        """Test tokens between single quotes."""
        assert parse_quoted("'foo bar'") == (["foo", "bar"], "")

    def test_remainder_after_closing_quote(self):
        """Test text after the closing quote is returned."""
        assert parse_quoted('"foo bar" baz') == (["foo", "bar"], " baz")
        assert parse_quoted("'foo bar' baz") == (["foo", "bar"], " baz")

    def test_mixed_quotes_fail(self):
        """Test the closing quote must match the opening one."""
        with pytest.raises(AliasParseError):
            parse_quoted("'foo bar\"")

    def test_unterminated_fails(self):
        """Test a missing closing quote fails."""
        with pytest.raises(AliasParseError):
            parse_quoted("'foo bar")


class TestParseValue:
    """Tests for parse_value()."""

    def test_bare(self):
        """Test unquoted values."""
        assert parse_value("foo") == (["foo"], "")
        assert parse_value("foo bar baz") == (["foo", "bar", "baz"], "")

    def test_quoted(self):
        """Test quoted values."""
        assert parse_value('"foo bar"') == (["foo", "bar"], "")
        assert parse_value("'foo bar' baz") == (["foo", "bar"], " baz")

    def test_empty_fails(self):
        """Test an empty value fails."""
        with pytest.raises(AliasParseError) as exc:
            parse_value("")
        assert exc.value.context == "value"

    def test_empty_quotes_fail(self):
        """Test a pair of empty quotes fails."""
        with pytest.raises(AliasParseError):
            parse_value("''")


class TestParseAlias:
    """Tests for parse_alias()."""

    def test_equals_inside_quotes(self):
        """Test '=' inside quotes is part of the token."""
        assert parsed("foo='bar=baz'") == ("foo", ["bar=baz"], "")

    def test_equals_in_bare_value(self):
        """Test only the first '=' ends the name."""
        assert parsed("foo=bar=baz") == ("foo", ["bar=baz"], "")

    def test_quoted_tokens(self):
        """Test quoted values split into tokens."""
        assert parsed("foo='bar baz qux'") == ("foo", ["bar", "baz", "qux"], "")
        assert parsed("foo='bar; baz'") == ("foo", ["bar;", "baz"], "")

    def test_trailing_whitespace(self):
        """Test trailing whitespace is returned, not rejected."""
        assert parsed("foo=bar   ") == ("foo", ["bar"], "   ")

    def test_no_equals_fails(self):
        """Test a line without '=' fails."""
        with pytest.raises(AliasParseError) as exc:
            parse_alias("not an alias")
        assert exc.value.context == "alias"

    def test_empty_value_fails(self):
        """Test nothing after '=' fails."""
        with pytest.raises(AliasParseError):
            parse_alias("foo=")
        with pytest.raises(AliasParseError):
            parse_alias("foo=''")

    def test_escaped_quotes_fail(self):
        """Test backslash-escaped quotes inside a value are not supported."""
        with pytest.raises(AliasParseError):
            parse_alias("rm='echo \"use \\\"trash\\\" instead\"'")

    def test_error_reports_position(self):
        """Test the error points past the name."""
        with pytest.raises(AliasParseError) as exc:
            parse_alias("foo='bar")
        assert exc.value.position >= len("foo=")


class TestRealAliases:
    """Lines as printed by bash and zsh."""

    @pytest.mark.parametrize(
        "line, name, value",
        [
            ("vim=nvim", "vim", ["nvim"]),
            ("tpath='path --tree'", "tpath", ["path", "--tree"]),
            ('tpath="path --tree"', "tpath", ["path", "--tree"]),
            (
                "make='colorify make --warn-undefined-variables'",
                "make",
                ["colorify", "make", "--warn-undefined-variables"],
            ),
            ("..='cd ..'", "..", ["cd", ".."]),
            ("..2='cd ../..'", "..2", ["cd", "../.."]),
            (":q=exit", ":q", ["exit"]),
        ],
    )
    def test_real_alias(self, line, name, value):
        """Test a line as printed by a shell."""
        assert parsed(line) == (name, value, "")

    def test_tokens_are_clean(self):
        """Test parsed tokens are non-empty and free of whitespace and quotes."""
        alias, _ = parse_alias("g='git  --no-pager\tlog'")
        assert "=" not in alias.name
        assert alias.value
        for token in alias.value:
            assert token
            assert not any(c.isspace() or c in "'\"" for c in token)
