"""Group shell aliases by the command they run.

Usage:
    alias | format-aliases                # same as `format`
    alias | format-aliases format         # grouped, colored listing
    alias | format-aliases format --no-color
    eval "$(format-aliases init zsh)"     # make bare `alias` use the formatter
"""

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from format_aliases.config import (
    ConfigError,
    Settings,
    color_enabled,
    load_settings,
)
from format_aliases.driver import format_aliases
from format_aliases.render import Presenter
from format_aliases.shells import (
    UnsupportedShellError,
    resolve_shell,
    shell_function,
)
from format_aliases.ui import error_line, warning_line

app = typer.Typer(help="Group shell aliases by the command they run.")


def _fail(message: str, in_color: bool) -> NoReturn:
    typer.echo(error_line(message, in_color), err=True, color=in_color)
    raise typer.Exit(1)


def _load(config: Optional[Path], in_color: bool) -> Settings:
    try:
        settings = load_settings(config)
    except ConfigError as e:
        _fail(str(e), in_color)
    for key in settings.unknown_keys:
        typer.echo(
            warning_line(f"unknown config key '{key}'", in_color),
            err=True,
            color=in_color,
        )
    return settings


def _run_format(no_color: bool, config: Optional[Path]) -> None:
    settings = _load(config, color_enabled(Settings(), no_color))
    in_color = color_enabled(settings, no_color)

    presenter = Presenter(in_color, palette=settings.palette, indent=settings.indent)
    try:
        format_aliases(sys.stdin, presenter)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"failed to read stdin: {e}", in_color)


@app.callback(invoke_without_command=True)
def _callback(ctx: typer.Context) -> None:
    """Group shell aliases by the command they run."""
    if ctx.invoked_subcommand is None:
        _run_format(no_color=False, config=None)


@app.command("format")
def format_cmd(
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML config file"
    ),
) -> None:
    """Read `alias` output from stdin and print it grouped by command."""
    _run_format(no_color, config)


@app.command()
def init(
    shell: str = typer.Argument(help="Shell to emit the function for (sh, bash, zsh)"),
) -> None:
    """Print a shell function that pipes bare `alias` into format-aliases."""
    try:
        resolved = resolve_shell(shell)
    except UnsupportedShellError as e:
        _fail(str(e), color_enabled(Settings()))
    typer.echo(shell_function(resolved), nl=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
