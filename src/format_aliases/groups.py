"""Bucket aliases by the command they run."""

from typing import Dict, Iterator, List, Tuple

from format_aliases.models import Alias


class AliasGroups:
    """Aliases keyed by the first token of their value.

    Buckets keep insertion order and are never deduplicated; sorting is
    left to the readers below.
    """

    def __init__(self):
        self.buckets: Dict[str, List[Alias]] = {}

    def push(self, alias: Alias) -> None:
        self.buckets.setdefault(alias.command, []).append(alias)

    def multi_groups(self) -> List[Tuple[str, List[Alias]]]:
        """Commands with two or more aliases, by command, each sorted by name."""
        return [
            (command, sorted(aliases))
            for command, aliases in sorted(self.buckets.items())
            if len(aliases) > 1
        ]

    def general(self) -> List[Alias]:
        """Aliases that are alone in their bucket, sorted by name."""
        return sorted(
            aliases[0] for aliases in self.buckets.values() if len(aliases) == 1
        )

    def __len__(self) -> int:
        return sum(len(aliases) for aliases in self.buckets.values())

    def __iter__(self) -> Iterator[Alias]:
        for aliases in self.buckets.values():
            yield from aliases
