"""Runtime configuration for daily checks and scheduling."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigError
from .utils import read_yaml_file

CONFIG_ENV_VAR = "HARDHAT_CONFIG"
DEFAULT_CONFIG_FILENAME = ".hardhat.yaml"
SKILLS_SUBPATH = Path(".openclaw") / "workspace" / ".agent" / "skills"
LOG_SUBPATH = Path(".openclaw") / "hardhat" / "logs"
DEFAULT_SCHEDULE_HOUR = 9
DEFAULT_SCHEDULE_MINUTE = 0


def home_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    return Path(home) if home else Path.home()


@dataclass(frozen=True)
class HardHatConfig:
    """Locations and schedule used outside of a single scan."""

    skills_root: Path
    log_dir: Path
    schedule_hour: int = DEFAULT_SCHEDULE_HOUR
    schedule_minute: int = DEFAULT_SCHEDULE_MINUTE

    @classmethod
    def defaults(cls, environ: Optional[Mapping[str, str]] = None) -> "HardHatConfig":
        home = home_dir(environ)
        return cls(skills_root=home / SKILLS_SUBPATH, log_dir=home / LOG_SUBPATH)


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> HardHatConfig:
    """Build the configuration, overlaying an optional YAML file on the defaults.

    The file is taken from ``path``, else ``$HARDHAT_CONFIG``, else
    ``.hardhat.yaml`` in the working directory. Only an explicitly named file
    is required to exist.
    """

    env = os.environ if environ is None else environ
    config = HardHatConfig.defaults(env)

    explicit = path or env.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else Path(DEFAULT_CONFIG_FILENAME)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return config

    try:
        data = read_yaml_file(config_path)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to parse config {config_path}: {exc}") from exc
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"Config at {config_path} is not a mapping")
    return _apply_overrides(config, data, config_path)


def _apply_overrides(config: HardHatConfig, data: Dict[str, Any], source: Path) -> HardHatConfig:
    schedule = data.get("schedule") or {}
    if not isinstance(schedule, dict):
        raise ConfigError(f"'schedule' in {source} must be a mapping")

    hour = _as_int(schedule.get("hour", config.schedule_hour), "schedule.hour", 0, 23, source)
    minute = _as_int(schedule.get("minute", config.schedule_minute), "schedule.minute", 0, 59, source)
    skills_root = data.get("skills_root")
    log_dir = data.get("log_dir")
    return HardHatConfig(
        skills_root=Path(skills_root).expanduser() if skills_root else config.skills_root,
        log_dir=Path(log_dir).expanduser() if log_dir else config.log_dir,
        schedule_hour=hour,
        schedule_minute=minute,
    )


def _as_int(value: Any, key: str, low: int, high: int, source: Path) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ConfigError(f"'{key}' in {source} must be an integer between {low} and {high}")
    return value
