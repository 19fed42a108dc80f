"""
Base source format interface for all generation targets.

Defines the contract that source formats implement, plus the shared
resolution steps: file extensions and paths, type registration, artifact
assembly and persistence.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from ...logging_config import get_logger
from .artifact import Artifact, write_artifact
from .config import GeneratorConfig, StyleConfig, ENUM_STYLE_KEY
from .naming import enum_reference_name, file_extension
from .paths import resolve_path
from .schema import (
    Protocol,
    Schema,
    SchemaOrProtocol,
    SchemaStore,
    get_local_subtypes,
    is_enum,
    is_protocol,
)
from .type_registry import TypeRegistry

logger = get_logger(__name__)


class GeneralRenderer(ABC):
    """Renders records, protocols and non-native enums to source text."""

    @abstractmethod
    def render(
        self,
        registry: TypeRegistry,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        style: StyleConfig,
        schema_store: Optional[SchemaStore] = None,
    ) -> str:
        """
        Produce source text for a schema or protocol.

        Must not mutate the registry, and must not render enums that use
        the platform-native style.
        """
        pass


class PlatformEnumRenderer(ABC):
    """Renders an enum using the platform's native enum construct."""

    @abstractmethod
    def render(
        self, registry: TypeRegistry, namespace: Optional[str], schema: Schema
    ) -> str:
        """Produce source text for an enum schema."""
        pass


class SourceFormat(ABC):
    """Abstract base class for all output formats."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize format with optional configuration."""
        self.config = config or GeneratorConfig()

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the short name of the format (e.g., 'standard')."""
        pass

    @property
    @abstractmethod
    def tool_short_description(self) -> str:
        """Return a one-line description of the generated code."""
        pass

    @property
    @abstractmethod
    def general_renderer(self) -> GeneralRenderer:
        pass

    @property
    @abstractmethod
    def platform_enum_renderer(self) -> PlatformEnumRenderer:
        pass

    @abstractmethod
    def get_name(self, schema_or_protocol: SchemaOrProtocol) -> str:
        """Return the type name used for the output file."""
        pass

    @abstractmethod
    def as_artifacts(
        self,
        registry: TypeRegistry,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        style: StyleConfig,
        schema_store: Optional[SchemaStore] = None,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> List[Artifact]:
        """
        Build every artifact a schema or protocol produces.

        The registry must already hold the target's types.
        """
        pass

    # Shared resolution steps

    def file_ext(self, schema_or_protocol: SchemaOrProtocol, style: StyleConfig) -> str:
        return file_extension(schema_or_protocol, style)

    def get_file_path(
        self,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        output_dir: Optional[Union[str, Path]],
        style: StyleConfig,
    ) -> Optional[Path]:
        return resolve_path(namespace, schema_or_protocol, output_dir, style, self.get_name)

    def get_local_subtypes(self, protocol: Protocol) -> List[Schema]:
        return get_local_subtypes(protocol)

    def is_enum(self, schema: Schema) -> bool:
        return is_enum(schema)

    def is_platform_enum(self, schema_or_protocol: SchemaOrProtocol, style: StyleConfig) -> bool:
        """Check whether a target is rendered as a native Java enum."""
        return (
            not is_protocol(schema_or_protocol)
            and is_enum(schema_or_protocol)
            and style.get(ENUM_STYLE_KEY) == "java enum"
        )

    def rename_enum(self, schema: Schema, selector: str) -> str:
        return enum_reference_name(schema, selector)

    def register_types(
        self, schema_or_protocol: SchemaOrProtocol, registry: TypeRegistry, style: StyleConfig
    ) -> None:
        registry.register(schema_or_protocol, style)

    def get_platform_enum_artifact(
        self,
        registry: TypeRegistry,
        namespace: Optional[str],
        schema: Schema,
        style: StyleConfig,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Artifact:
        """Render an enum with the platform enum renderer."""
        file_path = self.get_file_path(namespace, schema, output_dir, style)
        code = self.platform_enum_renderer.render(registry, namespace, schema)
        return Artifact(file_path, code, self.file_ext(schema, style))

    def get_general_artifact(
        self,
        registry: TypeRegistry,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        style: StyleConfig,
        schema_store: Optional[SchemaStore] = None,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Artifact:
        """Render a schema or protocol with the general renderer."""
        file_path = self.get_file_path(namespace, schema_or_protocol, output_dir, style)
        code = self.general_renderer.render(
            registry, namespace, schema_or_protocol, style, schema_store
        )
        return Artifact(file_path, code, self.file_ext(schema_or_protocol, style))

    def build_artifact(
        self,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        style: StyleConfig,
        registry: TypeRegistry,
        output_dir: Optional[Union[str, Path]] = None,
        schema_store: Optional[SchemaStore] = None,
    ) -> Artifact:
        """
        Assemble the artifact for one schema or protocol.

        Java-style enums go to the platform enum renderer, everything else
        to the general renderer.
        """
        if self.is_platform_enum(schema_or_protocol, style):
            return self.get_platform_enum_artifact(
                registry, namespace, schema_or_protocol, style, output_dir
            )
        return self.get_general_artifact(
            registry, namespace, schema_or_protocol, style, schema_store, output_dir
        )

    def compile(
        self,
        registry: TypeRegistry,
        namespace: Optional[str],
        schema_or_protocol: SchemaOrProtocol,
        output_dir: Union[str, Path],
        style: StyleConfig,
        schema_store: Optional[SchemaStore] = None,
    ) -> List[Path]:
        """
        Render a schema or protocol and write every resulting file.

        Files are written one at a time; a failure leaves earlier files of
        the same protocol in place.

        Returns:
            Paths written, in generation order
        """
        artifacts = self.as_artifacts(
            registry, namespace, schema_or_protocol, style, schema_store, output_dir
        )
        return [self.write_to_file(artifact) for artifact in artifacts]

    def write_to_file(self, artifact: Artifact) -> Path:
        return write_artifact(artifact)
