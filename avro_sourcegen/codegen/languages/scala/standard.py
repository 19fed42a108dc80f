"""
Standard source format: plain Scala case classes.
"""

from pathlib import Path
from typing import List, Optional, Union

from ...core.artifact import Artifact
from ...core.config import GeneratorConfig, StyleConfig
from ...core.generator import GeneralRenderer, PlatformEnumRenderer, SourceFormat
from ...core.schema import SchemaOrProtocol, SchemaStore, SchemaType, is_protocol
from ...core.type_registry import TypeRegistry
from ..java.renderer import JavaEnumRenderer
from .renderer import ScalaRenderer


class StandardFormat(SourceFormat):
    """Generates plain Scala case classes and enums."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize the format and its renderers."""
        super().__init__(config)
        self._general_renderer = ScalaRenderer(self.config)
        self._platform_enum_renderer = JavaEnumRenderer(self.config)

    @property
    def tool_name(self) -> str:
        return "standard"

    @property
    def tool_short_description(self) -> str:
        return "Generates Scala case classes in .scala files."

    @property
    def general_renderer(self) -> GeneralRenderer:
        return self._general_renderer

    @property
    def platform_enum_renderer(self) -> PlatformEnumRenderer:
        return self._platform_enum_renderer

    def get_name(self, schema_or_protocol: SchemaOrProtocol) -> str:
        return schema_or_protocol.name

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
        Build the artifacts for a schema or protocol.

        A protocol yields one Scala file, plus one Java file per local enum
        when enums use the java enum style.
        """
        if not is_protocol(schema_or_protocol):
            return [
                self.build_artifact(
                    namespace, schema_or_protocol, style, registry, output_dir, schema_store
                )
            ]

        artifacts = []
        for schema in self.get_local_subtypes(schema_or_protocol):
            if schema.type == SchemaType.ENUM and self.is_platform_enum(schema, style):
                artifacts.append(
                    self.get_platform_enum_artifact(
                        registry, namespace, schema, style, output_dir
                    )
                )

        artifacts.append(
            self.build_artifact(
                namespace, schema_or_protocol, style, registry, output_dir, schema_store
            )
        )
        return artifacts
