"""Daemon settings.

Settings are layered, later sources winning:

1. Built-in defaults (``core/constants.py``)
2. YAML settings file (``.acp/acpd.yaml`` or ``--config``)
3. Environment (``ACPD_HOST``, ``ACPD_PORT``, ``ACPD_LOG_LEVEL``), with a
   ``.env`` file in the project root honoured
4. Explicit overrides (CLI flags)

Example ``acpd.yaml``::

    server:
      host: 127.0.0.1
      port: 9222
      cors_origins: ["http://localhost:5173"]
    logging:
      level: DEBUG
    primer:
      default_budget: 300
      catalog: custom_catalog.yaml
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from .constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_PRIMER_BUDGET,
    LOG_LEVELS,
    SETTINGS_FILE,
)
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Resolved daemon settings."""
    project_root: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    default_budget: int = DEFAULT_PRIMER_BUDGET
    catalog_path: Optional[Path] = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return data


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Settings section '{name}' must be a mapping")
    return value


def _as_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Setting '{key}' must be an integer, got {value!r}") from e


def _as_log_level(value: Any, key: str) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Setting '{key}' must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
        )
    return level


def load_settings(
    project_root: Path,
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> Settings:
    """Resolve settings for a project.

    Args:
        project_root: Directory holding the ``.acp`` snapshot files
        config_file: Explicit settings file; must exist when given
        **overrides: Final values (e.g. from CLI flags); ``None`` is ignored

    Returns:
        Frozen Settings instance

    Raises:
        ConfigError: If the settings file is unreadable or has bad values
    """
    project_root = Path(project_root).resolve()
    settings = Settings(project_root=project_root)

    if config_file is not None:
        config_path = Path(config_file)
        if not config_path.exists():
            raise ConfigError(f"Settings file not found: {config_path}")
    else:
        config_path = project_root / SETTINGS_FILE

    if config_path.exists():
        data = _read_yaml(config_path)
        server = _section(data, "server")
        primer = _section(data, "primer")
        log_cfg = _section(data, "logging")

        values: Dict[str, Any] = {}
        if "host" in server:
            values["host"] = str(server["host"])
        if "port" in server:
            values["port"] = _as_int(server["port"], "server.port")
        if "cors_origins" in server:
            values["cors_origins"] = [str(o) for o in server["cors_origins"] or []]
        if "level" in log_cfg:
            values["log_level"] = _as_log_level(log_cfg["level"], "logging.level")
        if "default_budget" in primer:
            budget = _as_int(primer["default_budget"], "primer.default_budget")
            if budget < 0:
                raise ConfigError("Setting 'primer.default_budget' must not be negative")
            values["default_budget"] = budget
        if primer.get("catalog"):
            catalog = Path(primer["catalog"])
            if not catalog.is_absolute():
                catalog = config_path.parent / catalog
            values["catalog_path"] = catalog

        settings = replace(settings, **values)
        logger.info(f"Loaded settings from {config_path}")

    load_dotenv(project_root / ".env")

    env_values: Dict[str, Any] = {}
    if os.getenv("ACPD_HOST"):
        env_values["host"] = os.environ["ACPD_HOST"]
    if os.getenv("ACPD_PORT"):
        env_values["port"] = _as_int(os.environ["ACPD_PORT"], "ACPD_PORT")
    if os.getenv("ACPD_LOG_LEVEL"):
        env_values["log_level"] = _as_log_level(os.environ["ACPD_LOG_LEVEL"], "ACPD_LOG_LEVEL")
    if env_values:
        settings = replace(settings, **env_values)

    explicit = {k: v for k, v in overrides.items() if v is not None}
    if "log_level" in explicit:
        explicit["log_level"] = _as_log_level(explicit["log_level"], "log_level")
    if explicit:
        settings = replace(settings, **explicit)

    return settings
