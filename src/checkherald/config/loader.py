"""Configuration loader for checkherald."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import HeraldConfig


class ConfigError(Exception):
    """Configuration could not be loaded; the CLI reports it and exits 1."""


class ConfigFileNotFoundError(ConfigError):
    """An explicitly requested config file does not exist."""


class ConfigParseError(ConfigError):
    """The config file is not valid YAML or not a mapping."""


class ConfigValidationError(ConfigError):
    """The config parsed but failed schema validation.

    ``errors`` keeps pydantic's per-field error dicts.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def load_yaml(path: Path) -> dict[str, Any]:
    """Read *path* as a YAML mapping; an empty file reads as ``{}``."""
    if not path.exists():
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Failed to parse YAML in {path}: {e}") from e

    if not content:
        return {}
    if not isinstance(content, dict):
        raise ConfigParseError(f"Expected a mapping at the top of {path}")
    return content


def load_config(path: str | Path | None = None) -> HeraldConfig:
    """Load and validate checkherald configuration.

    Args:
        path: Path to configuration YAML file. ``None`` returns the defaults.

    Returns:
        Validated HeraldConfig object

    Raises:
        ConfigFileNotFoundError: If file doesn't exist
        ConfigParseError: If YAML parsing fails
        ConfigValidationError: If validation fails
    """
    if path is None:
        return HeraldConfig()

    data = load_yaml(Path(path))

    try:
        return HeraldConfig.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        error_messages = []
        for err in errors:
            loc = ".".join(str(x) for x in err["loc"])
            msg = err["msg"]
            error_messages.append(f"  - {loc}: {msg}")

        raise ConfigValidationError(
            "Configuration validation failed:\n" + "\n".join(error_messages),
            errors=[dict(err) for err in errors],
        ) from e


def save_config(config: HeraldConfig, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    data = config.model_dump(mode="json", exclude_defaults=False)

    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, indent=2)


def generate_example_config_yaml() -> str:
    """Generate example configuration YAML with comments.

    All options are shown commented-out with their defaults; an empty file
    is a valid configuration.
    """
    return """# checkherald Configuration
# =========================
# Commented fields show their DEFAULT value. When commented out, the
# default is still ACTIVE.

# ============================================================================
# SEARCH BACKEND
# ============================================================================
# elasticsearch:
#   url: http://localhost:9200
#   index: logstash-*
#   timestamp_field: "@timestamp"
#   size: 10                              # hits returned per query
#   timeout: 30.0                         # seconds
#   query_dir: /opt/checkherald/queries   # where <name>.json queries live
#   default_period: 10m                   # window when the check URL has no from=

# ============================================================================
# GRAPHS
# ============================================================================
# graphite:
#   sandbox_dir: /tmp/checkherald         # downloaded graph images
#   historical_window: 24h                # comparison graph window
#   timeout: 30.0

# ============================================================================
# ALERTING SYSTEM VARIABLES
# ============================================================================
# variables:
#   state_type: SERVICE                   # SERVICE | HOST
#   check_command: NAGIOS_SERVICECHECKCOMMAND
#   queries: NAGIOS_ELASTICSEARCH_QUERIES

# ============================================================================
# RENDERING
# ============================================================================
# render:
#   max_depth: 32                         # deeper result trees render as text

# Number of search queries run concurrently (1 = sequential)
# max_workers: 1
"""
