"""
Configuration management for Music Tab
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from loguru import logger


class ConfigError(ValueError):
    """Raised when a configuration section holds invalid values."""


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MuteConfig:
    """Sound categories to mute. Read on every classification."""

    mute_own_area_sounds: bool = False
    mute_other_area_sounds: bool = False
    mute_npc_area_sounds: bool = False
    mute_environment_area_sounds: bool = False
    mute_prayer_sounds: bool = False

    def validate(self) -> None:
        """Validate mute flags.

        Raises:
            ConfigError: If any flag is not a boolean
        """
        invalid = [
            name for name, value in vars(self).items() if not isinstance(value, bool)
        ]
        if invalid:
            raise ConfigError(f"Mute flags must be true/false: {', '.join(invalid)}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # Default: ~/.local/share/music-tab/music-tab.log

    def validate(self) -> None:
        """Validate the log level.

        Raises:
            ConfigError: If level is not one of loguru's built-in levels
        """
        if self.level not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level '{self.level}'. Must be one of: {', '.join(LOG_LEVELS)}"
            )


@dataclass
class Config:
    """Main configuration object."""

    mute: MuteConfig = field(default_factory=MuteConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "music-tab"
    return Path.home() / ".config" / "music-tab"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "music-tab"
    return Path.home() / ".local" / "share" / "music-tab"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file, honouring a configured override."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "music-tab.log"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            return config_path if config_path.exists() else None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/music-tab (or ~/.config/music-tab)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Music Tab Configuration

[mute]
# Area sounds made by your own character
mute_own_area_sounds = false

# Area sounds made by other players (including sourceless teleports)
mute_other_area_sounds = false

# Area sounds made by NPCs
mute_npc_area_sounds = false

# Area sounds with no source (environment)
mute_environment_area_sounds = false

# Prayer activation and deactivation sounds
mute_prayer_sounds = false

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/music-tab/music-tab.log)
# log_file = "~/music-tab.log"
""".strip()


def parse_config(toml_data: dict[str, Any]) -> Config:
    """Build a Config from parsed TOML data.

    Raises:
        ConfigError: If a section holds invalid values
    """
    config = Config()

    if "mute" in toml_data:
        mute_data = toml_data["mute"]
        config.mute = MuteConfig(
            mute_own_area_sounds=mute_data.get(
                "mute_own_area_sounds", config.mute.mute_own_area_sounds
            ),
            mute_other_area_sounds=mute_data.get(
                "mute_other_area_sounds", config.mute.mute_other_area_sounds
            ),
            mute_npc_area_sounds=mute_data.get(
                "mute_npc_area_sounds", config.mute.mute_npc_area_sounds
            ),
            mute_environment_area_sounds=mute_data.get(
                "mute_environment_area_sounds",
                config.mute.mute_environment_area_sounds,
            ),
            mute_prayer_sounds=mute_data.get(
                "mute_prayer_sounds", config.mute.mute_prayer_sounds
            ),
        )
        config.mute.validate()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=str(logging_data.get("level", config.logging.level)).upper(),
            log_file=log_file,
        )
        config.logging.validate()

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - MUSIC_TAB_LOG_LEVEL
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
        config = Config()
    else:
        try:
            with open(config_path, "rb") as f:
                config = parse_config(tomllib.load(f))
        except (OSError, tomllib.TOMLDecodeError, ConfigError) as e:
            logger.warning(f"Error loading configuration from {config_path}: {e}")
            logger.warning("Using default configuration.")
            config = Config()

    level_override = os.environ.get("MUSIC_TAB_LOG_LEVEL")
    if level_override:
        override = LoggingConfig(level=level_override.upper(), log_file=config.logging.log_file)
        try:
            override.validate()
        except ConfigError as e:
            logger.warning(f"Ignoring MUSIC_TAB_LOG_LEVEL: {e}")
        else:
            config.logging = override

    return config
