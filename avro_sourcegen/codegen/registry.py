"""
Format registry system for managing available source formats.

Provides registration and instantiation of source formats by name.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path
from .core.generator import SourceFormat
from .core.config import GeneratorConfig, load_config


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class FormatRegistry:
    """Registry for managing available source formats."""

    def __init__(self):
        """Initialize empty registry."""
        self._formats: Dict[str, Type[SourceFormat]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        name: str,
        format_class: Type[SourceFormat],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a source format.

        Args:
            name: Primary format name (e.g., 'standard')
            format_class: Class implementing SourceFormat
            aliases: Alternative names for this format

        Raises:
            RegistryError: If format class is invalid
        """
        if not issubclass(format_class, SourceFormat):
            raise RegistryError("Format class must inherit from SourceFormat")

        key = name.lower()
        self._formats[key] = format_class
        for alias in aliases or []:
            self._aliases[alias.lower()] = key

    def get_format_class(self, name: str) -> Type[SourceFormat]:
        """
        Get format class by name or alias.

        Raises:
            RegistryError: If the format is not registered
        """
        key = name.lower()

        if key in self._formats:
            return self._formats[key]

        if key in self._aliases:
            return self._formats[self._aliases[key]]

        raise RegistryError(
            f"No source format registered as: {name}. "
            f"Available: {', '.join(self.list_formats())}"
        )

    def create_format(
        self,
        name: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> SourceFormat:
        """
        Create a configured format instance.

        Args:
            name: Format name
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured format instance
        """
        format_class = self.get_format_class(name)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(custom_config=config)
        elif config is None:
            final_config = load_config()
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return format_class(final_config)

    def list_formats(self) -> List[str]:
        """Get list of registered primary format names."""
        return sorted(self._formats.keys())

    def get_aliases_for_format(self, name: str) -> List[str]:
        key = name.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == key)

    def get_format_info(self, name: str) -> Dict[str, Any]:
        """
        Get information about a registered format.

        Raises:
            RegistryError: If format not found
        """
        format_class = self.get_format_class(name)
        key = self._aliases.get(name.lower(), name.lower())
        instance = format_class(GeneratorConfig())

        return {
            "name": instance.tool_name,
            "description": instance.tool_short_description,
            "class": format_class.__name__,
            "aliases": self.get_aliases_for_format(key),
        }


# Global registry instance - created once
_global_registry: Optional[FormatRegistry] = None


def get_registry() -> FormatRegistry:
    """Get the global format registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = FormatRegistry()
        _auto_register_formats()
    return _global_registry


def _auto_register_formats():
    """Register the built-in formats."""
    from .languages.scala import StandardFormat

    _global_registry.register("standard", StandardFormat, aliases=["scala"])


def get_format(
    name: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> SourceFormat:
    """Get a format instance from the global registry."""
    return get_registry().create_format(name, config)


def list_supported_formats() -> List[str]:
    """List all formats in the global registry."""
    return get_registry().list_formats()


def get_format_info(name: str) -> Dict[str, Any]:
    """Get information about a supported format."""
    return get_registry().get_format_info(name)
