"""checkherald configuration module."""

from .loader import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    generate_example_config_yaml,
    load_config,
    save_config,
)
from .schema import (
    ElasticsearchConfig,
    GraphiteConfig,
    HeraldConfig,
    RenderConfig,
    StateType,
    VariablesConfig,
)

__all__ = [
    # Config classes
    "HeraldConfig",
    "ElasticsearchConfig",
    "GraphiteConfig",
    "RenderConfig",
    "VariablesConfig",
    # Enums
    "StateType",
    # Loader functions
    "load_config",
    "save_config",
    "generate_example_config_yaml",
    # Exceptions
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
