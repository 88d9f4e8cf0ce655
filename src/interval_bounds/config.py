"""
Configuration file support for interval-bounds.

Settings are read from up to two TOML files, later ones winning:

1. User file: ~/.config/interval-bounds/config.toml
2. Project file: .interval-bounds.toml or interval-bounds.toml, found by
   walking up from the starting directory to the enclosing repository root

Only presentation is configurable (how intervals are rendered and how JSON
is laid out); the bound algebra itself has no settings.

Example::

    from interval_bounds import Interval
    from interval_bounds.config import Config
    from interval_bounds.display import format_interval

    config = Config.load()
    # with infinity = "inf" under [display]
    format_interval(Interval.left_open(0.0), config.display)   # "(0.0, inf)"
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator

from .bounds import INFINITY
from .exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Searched in order within each directory
CONFIG_FILENAMES = [".interval-bounds.toml", "interval-bounds.toml"]

USER_CONFIG_PATH = Path.home() / ".config" / "interval-bounds" / "config.toml"

# Section -> accepted keys
KNOWN_KEYS = {
    "display": {"infinity", "separator"},
    "serialization": {"indent"},
}


@dataclass
class DisplayConfig:
    """Text rendering of intervals and partitions."""

    infinity: str = INFINITY
    separator: str = ", "


@dataclass
class SerializationConfig:
    """JSON output options."""

    indent: int | None = None


@dataclass
class Config:
    """Settings merged from the user file, the project file and the defaults."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    serialization: SerializationConfig = field(default_factory=SerializationConfig)

    # "section.key" -> file that last set it
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Build a configuration from every config file in effect.

        Args:
            start_dir: Where the project file search begins (default: cwd)

        Returns:
            The merged configuration

        Raises:
            ConfigError: If a file is unreadable, is not valid TOML, or holds
                an invalid value
        """
        config = cls()
        sources: dict[str, str] = {}

        for path in _config_layers(start_dir or Path.cwd()):
            _merge_config(config, _load_toml_file(path), str(path), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Return the file that set *key* (``"section.key"``), or ``"default"``."""
        return self._sources.get(key, "default")


class ConfigError(ConfigurationError):
    """Configuration file could not be read or holds an invalid value."""

    pass


def _config_layers(start_dir: Path) -> Iterator[Path]:
    """Yield existing config files, lowest precedence first."""
    if USER_CONFIG_PATH.exists():
        yield USER_CONFIG_PATH

    project_config = _find_project_config(start_dir)
    if project_config is not None:
        yield project_config


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Look for a project config file in *start_dir* and its parents.

    The walk ends at the first directory holding ``.git`` (checked after
    that directory's own config files) or at the filesystem root.

    Returns:
        The first config file found, or None
    """
    directory = start_dir.resolve()

    for candidate in (directory, *directory.parents):
        for filename in CONFIG_FILENAMES:
            path = candidate / filename
            if path.is_file():
                return path

        if (candidate / ".git").exists():
            return None

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Parse one TOML file.

    Raises:
        ConfigError: If the file cannot be read or the TOML is invalid
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", context={"file": str(path)}) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg, context={"file": str(path)}) from e


def _as_indent(value: Any, source: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(
            f"serialization.indent must be a non-negative integer in {source}",
            context={"file": source, "indent": value},
            suggestions=["Use 0 or a positive whole number, or remove the key"],
        )
    return value


def _as_text(value: Any, source: str) -> str:
    return str(value)


# Section -> key -> converter applied to the raw TOML value
_CONVERTERS: dict[str, dict[str, Callable[[Any, str], Any]]] = {
    "display": {"infinity": _as_text, "separator": _as_text},
    "serialization": {"indent": _as_indent},
}


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Apply the settings in *data* on top of *config*.

    Args:
        config: Configuration updated in place
        data: Parsed TOML document
        source: Path of the file *data* came from
        sources: Updated with the origin of every key that was set
    """
    for section, values in data.items():
        if section not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{section}' in {source}", stacklevel=3)
            continue
        if not isinstance(values, dict):
            raise ConfigError(
                f"[{section}] must be a table in {source}",
                context={"file": source, section: values},
            )

        _warn_unknown_keys(values, KNOWN_KEYS[section], section, source)
        target = getattr(config, section)

        for key, convert in _CONVERTERS[section].items():
            if key in values:
                setattr(target, key, convert(values[key], source))
                sources[f"{section}.{key}"] = source


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Return a commented-out config file listing every setting.

    Every setting is commented out, so the result parses to empty tables.
    """
    return """# interval-bounds configuration file
# Place as .interval-bounds.toml in project root or
# ~/.config/interval-bounds/config.toml for user defaults

[display]
# Symbol used for unbounded sides, e.g. "inf" for ASCII-only output
# infinity = "∞"

# Text placed between the left and right side of an interval
# separator = ", "

[serialization]
# JSON indentation; leave unset for compact output
# indent = 2
"""


def get_config_paths() -> dict[str, Path | None]:
    """Report which user and project config files ``Config.load()`` would read."""
    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": _find_project_config(Path.cwd()),
    }


__all__ = [
    "Config",
    "ConfigError",
    "DisplayConfig",
    "SerializationConfig",
    "generate_template",
    "get_config_paths",
]
