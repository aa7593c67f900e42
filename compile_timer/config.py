"""Configuration loading for compile-timer."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError


CONFIG_ENV_VAR = "COMPILE_TIMER_CONFIG"


@dataclass
class TimerConfig:
    """Settings that shape output and exit status."""
    strict_exit_codes: bool = False  # False: always exit 0
    verbose: bool = False
    precision: int = 4

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "TimerConfig":
        """Load from an explicit path, then $COMPILE_TIMER_CONFIG, else defaults."""
        path = config_path or os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return cls()

        config_file = Path(path)
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_file}")

        try:
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_file}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        for name in ("strict_exit_codes", "verbose"):
            if name in data and not isinstance(data[name], bool):
                raise ConfigError(f"{name} must be true or false, got {data[name]!r}")

        precision = data.get("precision", cls.precision)
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ConfigError(f"precision must be a non-negative integer, got {precision!r}")

        return cls(**data)

    def override(self, strict_exit_codes: bool = False, verbose: bool = False) -> "TimerConfig":
        """Apply command-line flags on top of file values."""
        return TimerConfig(
            strict_exit_codes=self.strict_exit_codes or strict_exit_codes,
            verbose=self.verbose or verbose,
            precision=self.precision,
        )
