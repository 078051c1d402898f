"""Configuration Management Package"""

import json
import re
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from commitmsg import DEFAULT_STYLE, STYLE_NAMES

DEFAULT_TIMEOUT = "5s"

_DURATION_PART = re.compile(r'(\d+(?:\.\d+)?)(ms|s|m|h)')
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


def parse_duration(value: str) -> float:
    """Parse a duration like '5s', '1m30s' or '500ms' into seconds."""
    text = value.strip()
    if not text:
        raise ValueError("empty duration")

    total = 0.0
    pos = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    if pos != len(text):
        raise ValueError(f"invalid duration '{value}' (use e.g. 5s, 1m30s, 500ms)")
    return total


@dataclass
class Config:
    """User configuration with sensible defaults."""
    style: str = DEFAULT_STYLE.value
    conventional_commit: bool = False
    timeout: str = DEFAULT_TIMEOUT
    show_cost: bool = False

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if self.style not in STYLE_NAMES:
            warnings.append(f"Invalid style '{self.style}', using '{defaults.style}'")
            self.style = defaults.style

        if not isinstance(self.conventional_commit, bool):
            warnings.append(f"Invalid conventional_commit '{self.conventional_commit}', using {defaults.conventional_commit}")
            self.conventional_commit = defaults.conventional_commit

        try:
            valid_timeout = isinstance(self.timeout, str) and parse_duration(self.timeout) > 0
        except ValueError:
            valid_timeout = False
        if not valid_timeout:
            warnings.append(f"Invalid timeout '{self.timeout}', using '{defaults.timeout}'")
            self.timeout = defaults.timeout

        if not isinstance(self.show_cost, bool):
            warnings.append(f"Invalid show_cost '{self.show_cost}', using {defaults.show_cost}")
            self.show_cost = defaults.show_cost

        return warnings

    @property
    def timeout_seconds(self) -> float:
        return parse_duration(self.timeout)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".commitmsgrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "DEFAULT_TIMEOUT",
    "load_config",
    "save_config",
    "get_config_path",
    "parse_duration",
]
