"""User settings from ~/.config/format-aliases/config.yaml.

Example:

    color: true
    indent: 2
    colors:
      header: yellow
      name: green
      unparsable: bright_black
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Mapping, Optional

import yaml

from format_aliases.render import Palette
from format_aliases.ui import COLORS

CONFIG_PATH = Path.home() / ".config" / "format-aliases" / "config.yaml"
CONFIG_ENV = "FORMAT_ALIASES_CONFIG"
NO_COLOR_ENV = "NO_COLOR"

_KNOWN_KEYS = {"color", "colors", "indent"}


class ConfigError(ValueError):
    pass


@dataclass
class Settings:
    color: bool = True
    indent: int = 2
    palette: Palette = field(default_factory=Palette)
    unknown_keys: List[str] = field(default_factory=list)


def config_path(override: Optional[Path] = None) -> Path:
    if override is not None:
        return override
    env_path = os.environ.get(CONFIG_ENV)
    return Path(env_path).expanduser() if env_path else CONFIG_PATH


def _parse_palette(raw) -> Palette:
    if raw is None:
        return Palette()
    if not isinstance(raw, dict):
        raise ConfigError("'colors' must be a mapping")

    palette = Palette()
    for role, color in raw.items():
        if role not in {f.name for f in fields(Palette)}:
            raise ConfigError(f"unknown color role '{role}'")
        if not isinstance(color, str) or color not in COLORS:
            raise ConfigError(
                f"unknown color '{color}' for '{role}' "
                f"(choose from: {', '.join(COLORS)})"
            )
        setattr(palette, role, color)
    return palette


def load_settings(path: Optional[Path] = None) -> Settings:
    path = config_path(path)
    if not path.exists():
        return Settings()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"{path}: cannot read: {e}") from e

    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    color = raw.get("color", True)
    if not isinstance(color, bool):
        raise ConfigError(f"{path}: 'color' must be true or false")

    indent = raw.get("indent", 2)
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError(f"{path}: 'indent' must be a non-negative integer")

    try:
        palette = _parse_palette(raw.get("colors"))
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e

    return Settings(
        color=color,
        indent=indent,
        palette=palette,
        unknown_keys=sorted(str(k) for k in raw if k not in _KNOWN_KEYS),
    )


def color_enabled(
    settings: Settings,
    no_color_flag: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Decide whether output is colored.

    The ``--no-color`` flag wins, then a non-empty ``NO_COLOR``, then the
    config file.
    """
    if no_color_flag:
        return False
    environ = os.environ if environ is None else environ
    if environ.get(NO_COLOR_ENV):
        return False
    return settings.color
