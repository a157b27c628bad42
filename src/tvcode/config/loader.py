"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (TVCODE_*)
3. Config file (~/.tvcode/config.toml)
4. Default values

Environment variables:
- TVCODE_CONFIG_PATH: Path to config file (overrides default location)
- TVCODE_FFMPEG_PATH: Path to ffmpeg executable
- TVCODE_FFPROBE_PATH: Path to ffprobe executable
- TVCODE_LOG_LEVEL: Log level (debug, info, warning, error)
- TVCODE_LOG_FILE: Log file path
- TVCODE_PROFILE_PATH: Delivery profile YAML
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from tvcode.config.env import EnvReader
from tvcode.config.models import LoggingConfig, ToolPathsConfig, TvcodeConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".tvcode"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


class ConfigError(Exception):
    """Configuration file is unreadable or holds invalid values."""

    pass


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the config file path, honoring TVCODE_CONFIG_PATH."""
    reader = env_reader or EnvReader()
    return reader.get_path("TVCODE_CONFIG_PATH", must_exist=False) or (
        DEFAULT_CONFIG_FILE
    )


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _path_or_none(value: object) -> Path | None:
    if value is None or value == "":
        return None
    return Path(str(value)).expanduser()


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    log_level: str | None = None,
    log_file: Path | None = None,
    log_format: str | None = None,
    profile_path: Path | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
) -> TvcodeConfig:
    """Get tvcode configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides TVCODE_CONFIG_PATH).
        log_level: CLI override for the log level.
        log_file: CLI override for the log file.
        log_format: CLI override for the log format (text, json).
        profile_path: CLI override for the delivery profile path.
        env_reader: Optional EnvReader for testing (uses os.environ if None).

    Returns:
        TvcodeConfig with merged configuration.

    Raises:
        ConfigError: If the config file is unreadable or holds invalid values.
    """
    reader = env_reader or EnvReader()
    path = config_path or get_default_config_path(reader)
    file_config = load_config_file(path)

    tools_file = file_config.get("tools", {})
    logging_file = file_config.get("logging", {})
    profile_file = file_config.get("profile", {})

    tools = ToolPathsConfig(
        ffmpeg=reader.get_path("TVCODE_FFMPEG_PATH")
        or _path_or_none(tools_file.get("ffmpeg")),
        ffprobe=reader.get_path("TVCODE_FFPROBE_PATH")
        or _path_or_none(tools_file.get("ffprobe")),
    )

    try:
        logging_config = LoggingConfig(
            level=log_level
            or reader.get_str("TVCODE_LOG_LEVEL")
            or logging_file.get("level", "info"),
            file=log_file
            or reader.get_path("TVCODE_LOG_FILE", must_exist=False)
            or _path_or_none(logging_file.get("file")),
            format=log_format or logging_file.get("format", "text"),
            include_stderr=bool(logging_file.get("include_stderr", False)),
            max_bytes=int(logging_file.get("max_bytes", 10_485_760)),
            backup_count=int(logging_file.get("backup_count", 5)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid [logging] configuration: {e}") from e

    return TvcodeConfig(
        tools=tools,
        logging=logging_config,
        profile_path=profile_path
        or reader.get_path("TVCODE_PROFILE_PATH", must_exist=False)
        or _path_or_none(profile_file.get("path")),
    )
