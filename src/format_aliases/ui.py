from typing import Callable, Dict

# Text colors
yellow_text = lambda x: f"\x1b[33m{x}\x1b[0m"
red_text = lambda x: f"\x1b[31m{x}\x1b[0m"
green_text = lambda x: f"\x1b[32m{x}\x1b[0m"
cyan_text = lambda x: f"\x1b[36m{x}\x1b[0m"
bright_black_text = lambda x: f"\x1b[90m{x}\x1b[0m"

# Text styles
bold = lambda x: f"\x1b[1m{x}\x1b[0m"
dim = lambda x: f"\x1b[2m{x}\x1b[0m"

COLORS: Dict[str, Callable[[str], str]] = {
    "yellow": yellow_text,
    "red": red_text,
    "green": green_text,
    "cyan": cyan_text,
    "bright_black": bright_black_text,
    "bold": bold,
    "dim": dim,
}


def paint(text: str, color: str, enabled: bool = True) -> str:
    """Wrap *text* in the ANSI sequence for *color*, or return it as-is."""
    if not enabled:
        return text
    return COLORS[color](text)


def error_line(message: str, in_color: bool = True) -> str:
    """Render a diagnostic like: error: Unsupported shell: fish"""
    return f"{paint('error', 'red', in_color)}: {message}"


def warning_line(message: str, in_color: bool = True) -> str:
    return f"{paint('warning', 'yellow', in_color)}: {message}"
