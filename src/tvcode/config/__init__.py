"""Configuration management for tvcode.

This module provides configuration loading with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (TVCODE_*)
3. Config file (~/.tvcode/config.toml)
4. Default values (lowest priority)
"""

from tvcode.config.env import EnvReader
from tvcode.config.loader import (
    ConfigError,
    get_config,
    get_default_config_path,
    load_config_file,
)
from tvcode.config.models import (
    LoggingConfig,
    ToolPathsConfig,
    TvcodeConfig,
)

__all__ = [
    # Models
    "LoggingConfig",
    "ToolPathsConfig",
    "TvcodeConfig",
    # Loader
    "ConfigError",
    "EnvReader",
    "get_config",
    "get_default_config_path",
    "load_config_file",
]
