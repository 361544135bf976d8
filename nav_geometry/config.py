"""Configuration management for the geometry toolkit.

Loads the YAML configuration used by the scene evaluator and CLI: the
comparison tolerance for segment queries and the logging setup. CLI values
can be layered on top with :func:`merge_config_overrides`.
"""

import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

REQUIRED_SECTIONS = ['geometry', 'logging']


class ConfigError(Exception):
    """Raised when configuration is invalid or missing required fields."""
    pass


class Config:
    """Configuration container with nested attribute access.

    Allows accessing nested config values using dot notation:
        config.geometry.eps
        config.logging.level

    Attributes are dynamically created from the loaded YAML structure.
    """

    def __init__(self, config_dict: Dict[str, Any]):
        for key, value in config_dict.items():
            if isinstance(value, dict):
                setattr(self, key, Config(value))
            else:
                setattr(self, key, value)

    def __repr__(self) -> str:
        attrs = {k: v for k, v in self.__dict__.items() if not k.startswith('_')}
        return f"Config({attrs})"

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with optional default.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return getattr(self, key, default)


def default_config_path() -> Path:
    """Path of the bundled ``config/default_config.yaml``."""
    return Path(__file__).parent.parent / "config" / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default config.

    Returns:
        Config object with nested attribute access

    Raises:
        ConfigError: If config file not found, unparsable, missing a
            required section, or carries an invalid tolerance
    """
    path = default_config_path() if config_path is None else Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML config: {e}")

    if not isinstance(config_dict, dict):
        raise ConfigError(f"Configuration root must be a mapping: {path}")

    missing_sections = [
        s for s in REQUIRED_SECTIONS if s not in config_dict
    ]
    if missing_sections:
        raise ConfigError(f"Missing required config sections: {missing_sections}")

    config = Config(config_dict)
    validate_config(config)
    return config


def validate_config(config: Config) -> None:
    """Check value constraints that YAML typing cannot express.

    Raises:
        ConfigError: If ``geometry`` is not a mapping, ``geometry.eps``
            is missing, non-numeric, non-finite or not strictly positive,
            or ``logging.level`` is not a known level name
    """
    geometry = config.get('geometry')
    if not isinstance(geometry, Config):
        raise ConfigError("geometry section must be a mapping")
    eps = geometry.get('eps')
    if eps is None:
        raise ConfigError("geometry.eps is required")
    try:
        eps = float(eps)
    except (TypeError, ValueError):
        raise ConfigError(f"geometry.eps must be a number, got {eps!r}")
    if not math.isfinite(eps) or eps <= 0.0:
        raise ConfigError(f"geometry.eps must be finite and positive, got {eps}")

    logging_section = config.get('logging')
    if not isinstance(logging_section, Config):
        raise ConfigError("logging section must be a mapping")
    level = logging_section.get('level', 'INFO')
    if not isinstance(level, str) \
            or not isinstance(logging.getLevelName(level.upper()), int):
        raise ConfigError(
            f"logging.level must be a level name such as INFO, got {level!r}"
        )


def merge_config_overrides(config: Config, overrides: Dict[str, Any]) -> Config:
    """Merge CLI overrides into config object.

    Args:
        config: Base configuration
        overrides: Dictionary of override values. Keys are either dotted
            paths (``"geometry.eps"``) or bare keys that already exist in
            exactly one section (``"eps"``).

    Returns:
        Updated config object

    Raises:
        ConfigError: If a bare key matches no section, or the merged
            configuration is invalid
    """
    config_dict = config_to_dict(config)

    for key, value in overrides.items():
        if '.' in key:
            parts = key.split('.')
            current = config_dict
            for part in parts[:-1]:
                if part not in current:
                    current[part] = {}
                current = current[part]
            current[parts[-1]] = value
        else:
            for section in config_dict:
                if isinstance(config_dict[section], dict) \
                        and key in config_dict[section]:
                    config_dict[section][key] = value
                    break
            else:
                raise ConfigError(f"Unknown config key: {key}")

    merged = Config(config_dict)
    validate_config(merged)
    return merged


def config_to_dict(config: Config) -> Dict[str, Any]:
    """Convert Config object back to dictionary.

    Args:
        config: Config object

    Returns:
        Dictionary representation
    """
    result = {}
    for key, value in config.__dict__.items():
        if isinstance(value, Config):
            result[key] = config_to_dict(value)
        else:
            result[key] = value
    return result


def print_config(config: Config, indent: int = 0) -> None:
    """Pretty print configuration.

    Args:
        config: Config object to print
        indent: Current indentation level
    """
    for key, value in config.__dict__.items():
        if isinstance(value, Config):
            print("  " * indent + f"{key}:")
            print_config(value, indent + 1)
        else:
            print("  " * indent + f"{key}: {value}")
