"""
Core code generation components.

Provides the resolution pipeline shared by all source formats: naming,
output paths, type registration, artifact assembly and persistence.
"""

from .artifact import Artifact, write_artifact
from .config import (
    ConfigError,
    ConfigManager,
    EnumStyle,
    GeneratorConfig,
    StyleConfig,
    load_config,
)
from .errors import (
    DestinationNotFound,
    GeneratorError,
    InvalidTopLevelType,
    MissingDestination,
    StorageFault,
)
from .generator import GeneralRenderer, PlatformEnumRenderer, SourceFormat
from .naming import (
    NameSanitizer,
    enum_reference_name,
    file_extension,
    registration_name,
)
from .paths import resolve_path
from .schema import (
    Field,
    Protocol,
    Schema,
    SchemaParseError,
    SchemaParser,
    SchemaStore,
    SchemaType,
    extract_all_schemas,
    get_local_subtypes,
)
from .templates import TemplateEngine, TemplateError
from .type_registry import TypeRegistry, TypeSymbol

__all__ = [
    # Source format interface
    "SourceFormat",
    "GeneralRenderer",
    "PlatformEnumRenderer",
    # Errors
    "GeneratorError",
    "InvalidTopLevelType",
    "MissingDestination",
    "StorageFault",
    "DestinationNotFound",
    # Schema model
    "Schema",
    "Field",
    "Protocol",
    "SchemaType",
    "SchemaStore",
    "SchemaParser",
    "SchemaParseError",
    "extract_all_schemas",
    "get_local_subtypes",
    # Naming and paths
    "NameSanitizer",
    "file_extension",
    "enum_reference_name",
    "registration_name",
    "resolve_path",
    # Registration and artifacts
    "TypeRegistry",
    "TypeSymbol",
    "Artifact",
    "write_artifact",
    # Configuration system
    "EnumStyle",
    "StyleConfig",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
]
