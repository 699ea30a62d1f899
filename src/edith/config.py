"""Configuration management for Edith."""

import logging
import os
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional
import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EDITH_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.edith/config.yaml")


@dataclass
class ConfigModel:
    """Global configuration model for Edith."""

    # Persona
    bot_name: str = "Edith"
    show_welcome: bool = True

    # Display preferences
    border_style: str = "border"
    no_color: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Post-initialization normalization."""
        self.log_level = str(self.log_level).upper()
        if self.log_file:
            self.log_file = os.path.expanduser(self.log_file)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "bot_name": self.bot_name,
            "show_welcome": self.show_welcome,
            "border_style": self.border_style,
            "no_color": self.no_color,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


def get_config_path() -> Path:
    """Get the config file path, honouring the EDITH_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


class Config:
    """Configuration manager for Edith."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, or fall back to defaults."""
        if cls._instance is not None and config_path is None:
            return cls._instance

        if config_path is None:
            config_path = get_config_path()

        config = ConfigModel()
        if config_path.exists():
            try:
                config = ConfigModel.from_yaml(config_path.read_text(encoding="utf-8"))
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
                config = ConfigModel()
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding="utf-8")
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load()


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
