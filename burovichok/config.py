"""Application configuration read from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

PATH_CONFIG = "config/config.yaml"

_SUPPORTED_SUFFIXES = {".yaml", ".yml", ".json"}


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or is incomplete."""


@dataclass(slots=True)
class DBConf:
    """Database connection settings."""

    dsn: str = ""
    migrations_path: str = ""
    max_open_conns: int = 0
    max_idle_conns: int = 0
    conn_max_lifetime: int = 0
    max_retries: int = 0


@dataclass(slots=True)
class LoggerConf:
    """Logger settings."""

    env: str


@dataclass(slots=True)
class UIConf:
    """Main window settings."""

    name: str
    width: int
    height: int
    icon_path: str


@dataclass(slots=True)
class Config:
    """Complete application configuration."""

    env: str
    db: DBConf = field(default_factory=DBConf)
    logger: LoggerConf = field(default_factory=lambda: LoggerConf(env=""))
    ui: UIConf = field(default_factory=lambda: UIConf("", 0, 0, ""))


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"section {key!r} must be a mapping")
    return value


def _str(data: dict[str, Any], key: str, path: str, required: bool = False) -> str:
    value = data.get(key)
    if value is None:
        result = ""
    elif isinstance(value, bool):
        result = "true" if value else "false"
    elif isinstance(value, (str, int, float)):
        result = str(value)
    else:
        raise ConfigError(f"field {path!r} must be a string")
    if required and not result:
        raise ConfigError(f"field {path!r} is required but the value is not provided")
    return result


def _int(data: dict[str, Any], key: str, path: str, required: bool = False) -> int:
    value = data.get(key)
    if value is None:
        result = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        result = value
    else:
        raise ConfigError(f"field {path!r} must be an integer")
    if required and result == 0:
        raise ConfigError(f"field {path!r} is required but the value is not provided")
    return result


def load(config_path: str | Path) -> Config:
    """Read and validate the configuration file at *config_path*."""
    if not config_path:
        raise ConfigError("CONFIG_PATH is not set")
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"no such file {config_path}")
    if path.suffix.lower() not in _SUPPORTED_SUFFIXES:
        raise ConfigError(f"failed to read config: file format {path.suffix!r} not supported")

    try:
        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to read config: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("failed to read config: top level must be a mapping")

    db = _section(data, "db")
    log = _section(data, "logger")
    ui = _section(data, "ui")

    return Config(
        env=_str(data, "env", "env", required=True),
        db=DBConf(
            dsn=_str(db, "dsn", "db.dsn"),
            migrations_path=_str(db, "confmigration_path", "db.confmigration_path"),
            max_open_conns=_int(db, "max_open_conns", "db.max_open_conns"),
            max_idle_conns=_int(db, "max_Idle_conns", "db.max_Idle_conns"),
            conn_max_lifetime=_int(db, "conn_max_lifetime", "db.conn_max_lifetime"),
            max_retries=_int(db, "max_retries", "db.max_retries"),
        ),
        logger=LoggerConf(env=_str(log, "env", "logger.env", required=True)),
        ui=UIConf(
            name=_str(ui, "name", "ui.name", required=True),
            width=_int(ui, "width", "ui.width", required=True),
            height=_int(ui, "height", "ui.height", required=True),
            icon_path=_str(ui, "icon_path", "ui.icon_path", required=True),
        ),
    )