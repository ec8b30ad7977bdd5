"""Print grouped aliases as ``[header]`` sections."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

import typer

from format_aliases.groups import AliasGroups
from format_aliases.models import Alias
from format_aliases.ui import paint

GENERAL_TITLE = "general"
UNPARSABLE_TITLE = "unparsable"


@dataclass
class Palette:
    header: str = "yellow"
    name: str = "green"
    unparsable: str = "bright_black"


def format_header(title: str, color: str, in_color: bool) -> str:
    return f"[{paint(title, color, in_color)}]"


def format_entry(alias: Alias, color: str, in_color: bool, indent: int = 2) -> str:
    name = paint(alias.name, color, in_color)
    return f"{' ' * indent}{name}='{' '.join(alias.value)}'"


class Presenter:
    """Write alias groups to stdout and rejected lines to stderr.

    Only headers and alias names are colored, and only when *in_color*.
    """

    def __init__(
        self,
        in_color: bool,
        palette: Optional[Palette] = None,
        indent: int = 2,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.in_color = in_color
        self.palette = palette or Palette()
        self.indent = indent
        self.out = out
        self.err = err

    def _echo(self, line: str = "") -> None:
        typer.echo(line, file=self.out, color=self.in_color)

    def _section(self, title: str, aliases: List[Alias]) -> None:
        self._echo(format_header(title, self.palette.header, self.in_color))
        for alias in aliases:
            self._echo(
                format_entry(alias, self.palette.name, self.in_color, self.indent)
            )
        self._echo()

    def present(self, groups: AliasGroups, unparsable: Sequence[str]) -> None:
        for command, aliases in groups.multi_groups():
            self._section(command, aliases)

        general = groups.general()
        if general:
            self._section(GENERAL_TITLE, general)

        if unparsable:
            self._echo(
                format_header(UNPARSABLE_TITLE, self.palette.unparsable, self.in_color)
            )
            pad = " " * self.indent
            for line in unparsable:
                typer.echo(
                    f"{pad}{line}", file=self.err, err=True, color=self.in_color
                )
