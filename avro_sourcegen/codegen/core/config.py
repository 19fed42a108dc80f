"""
Configuration management for code generation.

Handles the immutable style configuration consulted by the naming
policy, and loading and merging generator configuration from JSON files.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional, Union
from dataclasses import dataclass, field
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


class EnumStyle(Enum):
    """Encodings available for Avro enums."""
    SCALA_ENUMERATION = "scala enumeration"  # default: object X extends Enumeration
    JAVA_ENUM = "java enum"
    CASE_OBJECT = "case object"


ENUM_STYLE_KEY = "enum"

# Values accepted on the command line and in config files
ENUM_STYLE_NAMES = {
    "default": EnumStyle.SCALA_ENUMERATION,
    "scala enumeration": EnumStyle.SCALA_ENUMERATION,
    "java enum": EnumStyle.JAVA_ENUM,
    "case object": EnumStyle.CASE_OBJECT,
}


@dataclass(frozen=True)
class StyleConfig:
    """Read-only mapping from style key ("enum") to style name."""

    custom_enum_style_map: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        if not isinstance(self.custom_enum_style_map, MappingProxyType):
            object.__setattr__(
                self,
                "custom_enum_style_map",
                MappingProxyType(dict(self.custom_enum_style_map)),
            )

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, str]] = None) -> "StyleConfig":
        """
        Build a style configuration, rejecting unknown enum styles.

        Raises:
            ConfigError: If the "enum" entry names an unsupported style
        """
        mapping = dict(mapping or {})
        style_name = mapping.get(ENUM_STYLE_KEY)
        if style_name is not None and style_name not in ENUM_STYLE_NAMES:
            raise ConfigError(
                f"Invalid enum style: {style_name!r}. "
                f"Choose from: {', '.join(sorted(ENUM_STYLE_NAMES))}"
            )
        if style_name == "default":
            del mapping[ENUM_STYLE_KEY]
        return cls(mapping)

    @classmethod
    def for_enum_style(cls, style: Union[EnumStyle, str, None]) -> "StyleConfig":
        """Build a style configuration selecting one enum style."""
        if style is None:
            return cls()
        if isinstance(style, EnumStyle):
            style = style.value
        return cls.from_mapping({ENUM_STYLE_KEY: style})

    def get(self, key: str) -> Optional[str]:
        return self.custom_enum_style_map.get(key)

    @property
    def enum_style(self) -> EnumStyle:
        """The selected enum encoding, SCALA_ENUMERATION when unset."""
        return ENUM_STYLE_NAMES.get(
            self.custom_enum_style_map.get(ENUM_STYLE_KEY), EnumStyle.SCALA_ENUMERATION
        )


@dataclass
class GeneratorConfig:
    """Base configuration for source formats."""

    # Output settings
    output_dir: Optional[str] = None
    format: str = "standard"

    # Code style settings
    enum_style: Optional[str] = None
    indent_size: int = 2
    add_comments: bool = True

    # Custom settings (format-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def style(self) -> StyleConfig:
        """Style configuration derived from ``enum_style``."""
        return StyleConfig.for_enum_style(self.enum_style)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "format": "standard",
            "enum_style": None,
            "indent_size": 2,
            "add_comments": True,
        }

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete generator configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = self._defaults.copy()

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        config = self._dict_to_config(base_config)
        self.validate_config(config)
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        # Extract known fields
        known_fields = {f.name for f in GeneratorConfig.__dataclass_fields__.values()}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Add custom fields to the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigError: On an unsupported enum style or indent size
        """
        if config.enum_style is not None and config.enum_style not in ENUM_STYLE_NAMES:
            raise ConfigError(f"Invalid enum_style: {config.enum_style}")

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            raise ConfigError(f"Invalid indent_size: {config.indent_size}")


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
