"""Configuration for the dashboard node, read from .defi-dashboard.yml files."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from defi_dashboard.constants import DEFAULT_BRAND_NAME, DEFAULT_ID_PREFIX

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = (".defi-dashboard.yml", ".defi-dashboard.yaml", "defi-dashboard.yml")

VALIDATE_BEFORE_EXECUTE_ENV = "DEFI_DASHBOARD_VALIDATE_BEFORE_EXECUTE"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class DashboardNodeConfig:
    """Settings for the dashboard node."""

    # Run the validator inside execute() before generating.
    # None defers to the environment, then False.
    validate_before_execute: bool | None = None

    id_prefix: str = DEFAULT_ID_PREFIX
    default_name: str = DEFAULT_BRAND_NAME

    # Include summary lines in NodeExecutionResult.logs
    log_summary: bool = True

    def __post_init__(self) -> None:
        """Load unset settings from the environment."""
        if self.validate_before_execute is None:
            self.validate_before_execute = _as_bool(
                os.environ.get(VALIDATE_BEFORE_EXECUTE_ENV), default=False
            )


def _as_bool(value: Any, default: bool) -> bool:
    """Coerce YAML or environment values, reading strings like "false" as False."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def parse_config(content: str | dict[str, Any]) -> DashboardNodeConfig:
    """Parse configuration from YAML string or dict.

    Raises:
        ValueError: If the document is not a mapping
    """
    if isinstance(content, str):
        data = yaml.safe_load(content) or {}
    else:
        data = content

    if not isinstance(data, dict):
        raise ValueError(
            f"Dashboard config must be a mapping, got {type(data).__name__}"
        )

    defaults = DashboardNodeConfig(validate_before_execute=False)
    validate_before_execute = data.get("validate_before_execute")
    return DashboardNodeConfig(
        validate_before_execute=(
            None if validate_before_execute is None
            else _as_bool(validate_before_execute, default=False)
        ),
        id_prefix=str(data.get("id_prefix", defaults.id_prefix)),
        default_name=str(data.get("default_name", defaults.default_name)),
        log_summary=_as_bool(data.get("log_summary"), default=defaults.log_summary),
    )


def load_config(path: Path | str) -> DashboardNodeConfig:
    """Load configuration from a directory or a config file path."""
    path = Path(path)

    if path.is_file():
        logger.info(f"Loading dashboard config from {path}")
        return parse_config(path.read_text())

    for name in CONFIG_FILE_NAMES:
        config_file = path / name
        if config_file.exists():
            logger.info(f"Loading dashboard config from {config_file}")
            return parse_config(config_file.read_text())

    logger.info("No dashboard config file found, using defaults")
    return DashboardNodeConfig()


EXAMPLE_CONFIG = """
# .defi-dashboard.yml
validate_before_execute: false
id_prefix: dashboard
default_name: "My 1inch DeFi Suite"
log_summary: true
"""
