"""Alias record shared by the parser, grouper and presenter."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, order=True)
class Alias:
    """One shell alias: a name and the tokens it expands to.

    Comparison, ordering and hashing look at ``name`` only, so sorting a
    group of aliases sorts them by name.
    """

    name: str
    value: Tuple[str, ...] = field(compare=False)

    @property
    def command(self) -> str:
        """The program this alias invokes, i.e. its first token."""
        return self.value[0]
