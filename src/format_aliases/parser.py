"""Parse one line of ``alias`` output into an :class:`Alias`.

Accepted forms, as printed by sh, bash and zsh:

    vim=nvim
    ..='cd ..'
    tpath="path --tree"

Every ``parse_*`` function takes the remaining input and returns a
``(result, remainder)`` pair, or raises :class:`AliasParseError`. Backslash
escapes are not interpreted, so a quoted value that embeds another quote
does not parse.
"""

import re
from typing import List, Tuple

from format_aliases.models import Alias

QUOTES = ("'", '"')

# Unicode White_Space. Unlike \s this leaves the separators U+001C..U+001F alone.
_WHITESPACE_CLASS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
)

_NAME_RE = re.compile(r"[^=]+")
_TOKEN_RE = re.compile(f"[^'\"{_WHITESPACE_CLASS}]+")
_SEPARATOR_RE = re.compile(r"[ \t\r\n]+")


class AliasParseError(ValueError):
    def __init__(self, context: str, text: str, position: int = 0):
        self.context = context
        self.text = text
        self.position = position
        super().__init__(f"cannot parse {context} at column {position}: {text!r}")


def parse_name(text: str) -> Tuple[str, str]:
    """Take everything up to the first ``=``."""
    m = _NAME_RE.match(text)
    if not m:
        raise AliasParseError("name", text)
    return m.group(), text[m.end():]


def parse_token(text: str) -> Tuple[str, str]:
    m = _TOKEN_RE.match(text)
    if not m:
        raise AliasParseError("token", text)
    return m.group(), text[m.end():]


def parse_tokens(text: str) -> Tuple[List[str], str]:
    """Parse one or more tokens separated by runs of whitespace.

    A separator that is not followed by another token is left in the
    remainder, so ``"foo bar "`` gives ``(["foo", "bar"], " ")``.
    """
    try:
        token, rest = parse_token(text)
    except AliasParseError as e:
        raise AliasParseError("whitespace separated", text) from e
    tokens = [token]

    while True:
        sep = _SEPARATOR_RE.match(rest)
        if not sep:
            break
        m = _TOKEN_RE.match(rest, sep.end())
        if not m:
            break
        tokens.append(m.group())
        rest = rest[m.end():]

    return tokens, rest


def parse_quoted(text: str) -> Tuple[List[str], str]:
    """Parse tokens wrapped in a matching pair of single or double quotes."""
    quote = text[:1]
    if quote not in QUOTES:
        raise AliasParseError("between quotes", text)

    tokens, rest = parse_tokens(text[1:])
    if not rest.startswith(quote):
        raise AliasParseError("between quotes", text, len(text) - len(rest))
    return tokens, rest[1:]


def parse_value(text: str) -> Tuple[List[str], str]:
    try:
        return parse_quoted(text)
    except AliasParseError:
        pass
    try:
        return parse_tokens(text)
    except AliasParseError as e:
        raise AliasParseError("value", text) from e


def parse_alias(line: str) -> Tuple[Alias, str]:
    """Parse ``name=value`` into an :class:`Alias`.

    Trailing input that is not part of the value is returned unconsumed.
    Callers accept the alias regardless, so ``foo=bar   `` parses.
    """
    name, rest = parse_name(line)
    if not rest.startswith("="):
        raise AliasParseError("alias", line, len(name))

    offset = len(name) + 1
    try:
        value, rest = parse_value(rest[1:])
    except AliasParseError as e:
        raise AliasParseError("alias", line, offset + e.position) from e

    return Alias(name=name, value=tuple(value)), rest
