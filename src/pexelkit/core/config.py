"""
Configuration Management
========================

TOML-based configuration for pexelkit.

Configuration files are searched in the following order (highest to lowest priority):
1. Path passed explicitly (the CLI's --config option)
2. ./pexelkit.toml (current directory)
3. ~/.config/pexelkit/config.toml (user config)
4. Built-in defaults

Example configuration file (pexelkit.toml):

    [api]
    token = ""
    photo_url = "https://api.pexels.com/v1/"
    video_url = "https://api.pexels.com/videos/"
    timeout = 30
    user_agent = "pexelkit/0.1.0"

    [logging]
    level = "WARNING"

The API token is resolved by resolve_token(): an explicit value wins, then
the PEXELS_API_KEY environment variable, then [api] token. There is no
built-in fallback token.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pexelkit import __version__
from pexelkit.core.exceptions import ConfigurationError
from pexelkit.core.logger import get_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = get_logger(__name__)

TOKEN_ENV_VAR = "PEXELS_API_KEY"

DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "token": "",
        "photo_url": "https://api.pexels.com/v1/",
        "video_url": "https://api.pexels.com/videos/",
        "timeout": 30,
        "user_agent": f"pexelkit/{__version__}",
    },
    "logging": {
        "level": "WARNING",
    },
}

# Standard config file locations
CONFIG_LOCATIONS = [
    Path("pexelkit.toml"),
    Path("~/.config/pexelkit/config.toml").expanduser(),
]


@dataclass
class Config:
    """
    Configuration container for pexelkit settings.

    Attributes:
        api: API settings (token, base URLs, timeout, user agent)
        logging: Logging settings
        _source: Path to the config file that was loaded
    """

    api: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        if section_dict is None:
            return default
        return section_dict.get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        section_dict = getattr(self, section, None)
        if section_dict is not None:
            section_dict[key] = value

    @property
    def source(self) -> Optional[str]:
        """Path of the file this configuration was read from, if any."""
        return self._source

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "api": self.api,
            "logging": self.logging,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """Create Config from dictionary."""
        return cls(
            api=data.get("api", {}),
            logging=data.get("logging", {}),
            _source=source,
        )


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Args:
        filepath: Path to the TOML file

    Returns:
        Dictionary with configuration values

    Raises:
        ConfigurationError: If TOML parsing fails
    """
    try:
        with open(filepath, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {filepath}: {e}") from e


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Args:
        config: Configuration dictionary
        filepath: Path to save the file

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for section, values in config.items():
        if isinstance(values, dict) and values:
            lines.append(f"[{section}]")
            for key, value in values.items():
                if isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
            lines.append("")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    return str(path)


def find_config_file(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Find the configuration file to use.

    Args:
        config_path: Explicit path to config file (highest priority)

    Returns:
        Path to config file, or None if not found

    Raises:
        ConfigurationError: If an explicit path was given and does not exist
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return path
        raise ConfigurationError(f"Specified config file not found: {config_path}")

    for location in CONFIG_LOCATIONS:
        if location.exists():
            return location

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Config object with merged settings
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)

    config_file = find_config_file(config_path)
    if config_file is None:
        return Config.from_dict(config_data)

    file_config = load_toml(config_file)
    config_data = _merge_dicts(config_data, file_config)
    logger.debug(f"Loaded configuration from {config_file}")
    return Config.from_dict(config_data, source=str(config_file))


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(_deep_copy_dict(DEFAULT_CONFIG))


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """
    Create a default configuration file.

    Args:
        filepath: Path to create the file (default: ./pexelkit.toml)

    Returns:
        Path to the created file
    """
    if filepath is None:
        filepath = "pexelkit.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


def resolve_token(token: Optional[str] = None, config: Optional[Config] = None) -> str:
    """
    Resolve the API token to use.

    Args:
        token: Explicit token, used as-is when non-empty
        config: Configuration to read [api] token from (default: get_config())

    Returns:
        The token string

    Raises:
        ConfigurationError: If no token is available from any source
    """
    if token:
        return token

    env_token = os.environ.get(TOKEN_ENV_VAR)
    if env_token:
        return env_token

    if config is None:
        config = get_config()
    config_token = config.get("api", "token")
    if config_token:
        return config_token

    raise ConfigurationError(
        f"Pexels API token required. Set it via the {TOKEN_ENV_VAR} env var, "
        "[api] token in pexelkit.toml, or pass it explicitly."
    )


def _deep_copy_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Create a deep copy of a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy_dict(value)
        elif isinstance(value, list):
            result[key] = value.copy()
        else:
            result[key] = value
    return result


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base, returning a new dictionary."""
    result = _deep_copy_dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the current configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config) -> None:
    """Replace the current configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Discard the current configuration so the next get_config() reloads it."""
    global _config
    _config = None
