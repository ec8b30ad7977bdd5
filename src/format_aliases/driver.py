"""Read ``alias`` output, group what parses, keep what doesn't."""

from typing import Iterable, List, TextIO, Tuple

from format_aliases.groups import AliasGroups
from format_aliases.parser import AliasParseError, parse_alias
from format_aliases.render import Presenter


def collect(lines: Iterable[str]) -> Tuple[AliasGroups, List[str]]:
    """Parse every non-blank line.

    Returns the grouped aliases and the trimmed lines that did not parse,
    in input order.
    """
    groups = AliasGroups()
    unparsable: List[str] = []

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        try:
            alias, _ = parse_alias(line)
        except AliasParseError:
            unparsable.append(line)
            continue
        groups.push(alias)

    return groups, unparsable


def format_aliases(stream: TextIO, presenter: Presenter) -> None:
    """Consume *stream* to the end, then print the groups.

    Read errors (``OSError``, ``UnicodeDecodeError``) propagate to the caller.
    """
    groups, unparsable = collect(stream)
    presenter.present(groups, unparsable)
