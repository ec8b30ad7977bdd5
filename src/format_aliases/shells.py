"""Shell snippets for ``format-aliases init``."""

from enum import Enum

PROGRAM = "format-aliases"

_BOURNE_FUNCTION = """\
alias() {{
    if [ $# -eq 0 ]; then
        # Pipe the output of the builtin alias command to be formatted
        builtin alias | {program}
    else
        # Pass the arguments to the builtin alias command
        builtin alias "$@"
    fi
}}
"""


class UnsupportedShellError(ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported shell: {name}")


class Shell(Enum):
    BOURNE = "bourne"


SHELLS = {
    "sh": Shell.BOURNE,
    "bash": Shell.BOURNE,
    "zsh": Shell.BOURNE,
}

SHELL_FUNCTIONS = {
    Shell.BOURNE: _BOURNE_FUNCTION,
}


def resolve_shell(name: str) -> Shell:
    try:
        return SHELLS[name]
    except KeyError:
        raise UnsupportedShellError(name) from None


def shell_function(shell: Shell, program: str = PROGRAM) -> str:
    """Return a function that replaces ``alias`` when called without arguments."""
    return SHELL_FUNCTIONS[shell].format(program=program)
