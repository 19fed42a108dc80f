"""
Avro Source Generation Module

Generates Scala (and Java enum) sources from Avro schemas and protocols.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..logging_config import get_logger
from .registry import FormatRegistry, RegistryError, get_format, list_supported_formats
from .core.artifact import Artifact
from .core.config import GeneratorConfig, ConfigError, StyleConfig, EnumStyle, load_config
from .core.errors import GeneratorError, InvalidTopLevelType
from .core.schema import (
    Protocol,
    Schema,
    SchemaOrProtocol,
    SchemaParseError,
    SchemaParser,
    SchemaStore,
    SchemaType,
    extract_all_schemas,
    get_local_subtypes,
    is_protocol,
)
from .core.type_registry import TypeRegistry

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def _resolve_config(config: ConfigLike) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    return load_config(custom_config=config)


TOP_LEVEL_SCHEMA_TYPES = {SchemaType.RECORD, SchemaType.ENUM, SchemaType.UNION}


def _generation_units(
    target: SchemaOrProtocol, defined_types: Optional[Iterable[Schema]] = None
) -> List[SchemaOrProtocol]:
    """
    Split a target into the units that each get their own output.

    A protocol is one unit holding its local types, followed by each record
    and enum it declares in a foreign namespace. A schema yields every named
    record and enum it contains; with ``defined_types`` given, types the
    document only referenced from another document are left out.

    Raises:
        InvalidTopLevelType: If a schema document is not a record, enum or union
    """
    if is_protocol(target):
        local_ids = {id(schema) for schema in get_local_subtypes(target)}
        foreign = [
            schema
            for schema in target.types
            if id(schema) not in local_ids and schema.type != SchemaType.FIXED
        ]
        return [target] + foreign

    if target.type not in TOP_LEVEL_SCHEMA_TYPES:
        raise InvalidTopLevelType(target.type.value)

    units = extract_all_schemas(target)
    if defined_types is not None:
        defined_ids = {id(schema) for schema in defined_types}
        units = [schema for schema in units if id(schema) in defined_ids]
    return units


def generate_artifacts(
    target: SchemaOrProtocol,
    config: ConfigLike = None,
    output_dir: Optional[Union[str, Path]] = None,
    schema_store: Optional[SchemaStore] = None,
    defined_types: Optional[Iterable[Schema]] = None,
) -> List[Artifact]:
    """
    Resolve and render every artifact for a schema or protocol.

    All types are registered in a fresh registry before anything renders.

    Args:
        target: Parsed schema or protocol
        config: Generator configuration
        output_dir: Base output directory; None renders in memory only
        schema_store: Resolver for types defined in other documents
        defined_types: Named types the target document itself defines;
            referenced types outside it are resolved, not generated

    Returns:
        Artifacts in generation order
    """
    config = _resolve_config(config)
    source_format = get_format(config.format, config)
    style = config.style
    registry = TypeRegistry()

    units = _generation_units(target, defined_types)
    for unit in units:
        source_format.register_types(unit, registry, style)

    artifacts = []
    for unit in units:
        artifacts.extend(
            source_format.as_artifacts(
                registry, unit.namespace, unit, style, schema_store, output_dir
            )
        )
    return artifacts


def generate_strings(text: str, config: ConfigLike = None) -> List[str]:
    """
    Generate source code in memory from a schema or protocol document.

    Returns:
        One source string per generated file
    """
    store = SchemaStore()
    parser = SchemaParser(store)
    target = parser.parse(text)
    artifacts = generate_artifacts(target, config, None, store, parser.defined_types)
    return [artifact.code for artifact in artifacts]


def _write_all(
    target: SchemaOrProtocol,
    output_dir: Union[str, Path],
    config: GeneratorConfig,
    schema_store: SchemaStore,
    defined_types: Iterable[Schema],
) -> List[Path]:
    source_format = get_format(config.format, config)
    written = []
    artifacts = generate_artifacts(
        target, config, output_dir, schema_store, defined_types
    )
    for artifact in artifacts:
        written.append(source_format.write_to_file(artifact))
    logger.info("Generated %d file(s) for %s", len(written), target.name)
    return written


def generate_to_files(
    text: str, output_dir: Optional[Union[str, Path]] = None, config: ConfigLike = None
) -> List[Path]:
    """
    Generate source files from a schema or protocol document.

    Returns:
        Paths written
    """
    config = _resolve_config(config)
    output_dir = output_dir or config.output_dir
    if output_dir is None:
        raise ConfigError("An output directory is required to write files")

    store = SchemaStore()
    parser = SchemaParser(store)
    target = parser.parse(text)
    return _write_all(target, output_dir, config, store, parser.defined_types)


def generate_from_files(
    paths: Iterable[Union[str, Path]],
    output_dir: Optional[Union[str, Path]] = None,
    config: ConfigLike = None,
) -> List[Path]:
    """
    Generate source files from schema and protocol files or URLs.

    Documents are parsed in order against one shared schema store, so a
    document may reference types defined by the documents before it. Each
    type is generated only by the document that defines it.

    Returns:
        Paths written
    """
    from ..utils import load_schema_text

    config = _resolve_config(config)
    output_dir = output_dir or config.output_dir
    if output_dir is None:
        raise ConfigError("An output directory is required to write files")

    store = SchemaStore()
    parser = SchemaParser(store)
    targets = []
    for source in paths:
        description, text = load_schema_text(source)
        logger.debug("Parsing %s", description)
        targets.append((parser.parse(text), parser.defined_types))

    written = []
    for target, defined_types in targets:
        written.extend(_write_all(target, output_dir, config, store, defined_types))
    return written


__all__ = [
    "FormatRegistry",
    "RegistryError",
    "GeneratorConfig",
    "GeneratorError",
    "ConfigError",
    "StyleConfig",
    "EnumStyle",
    "Artifact",
    "Schema",
    "Protocol",
    "SchemaStore",
    "SchemaParser",
    "SchemaParseError",
    "TypeRegistry",
    "generate_artifacts",
    "generate_strings",
    "generate_to_files",
    "generate_from_files",
    "get_format",
    "list_supported_formats",
]
