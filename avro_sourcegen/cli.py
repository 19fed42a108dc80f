"""
Command-line interface for source generation.

Reads Avro schema and protocol documents and writes generated Scala and
Java sources, or prints them with ``--stdout``.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    Artifact,
    ConfigError,
    GeneratorError,
    RegistryError,
    SchemaParseError,
    SchemaParser,
    SchemaStore,
    generate_artifacts,
    generate_from_files,
    list_supported_formats,
    load_config,
)
from .codegen.core.naming import JAVA_EXTENSION
from .codegen.registry import get_format_info
from .logging_config import configure_logging, get_logger
from .utils import SchemaLoaderError, load_schema_text

logger = get_logger(__name__)

# Initialize rich console
console = Console()

ENUM_STYLE_CHOICES = ["default", "java enum", "case object"]


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avro-sourcegen",
        description="Generate Scala sources from Avro schemas and protocols",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  avro-sourcegen user.avsc -o src/main/scala
  avro-sourcegen color.avsc user.avsc --enum-style "java enum" -o out
  avro-sourcegen mail.avpr --stdout
  avro-sourcegen --list-formats
        """.strip(),
    )

    parser.add_argument(
        "inputs", nargs="*", help="Schema (.avsc) or protocol (.avpr) files or URLs"
    )
    parser.add_argument("--output-dir", "-o", help="Base directory for generated sources")
    parser.add_argument(
        "--enum-style", choices=ENUM_STYLE_CHOICES, help="Encoding used for Avro enums"
    )
    parser.add_argument("--format", "-f", help="Source format (default: standard)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-formats",
        action="store_true",
        help="List supported source formats and exit",
    )
    return parser


def _build_config(args: argparse.Namespace):
    """Merge the config file and command-line overrides."""
    overrides = {
        "output_dir": args.output_dir,
        "enum_style": args.enum_style,
        "format": args.format,
        "add_comments": False if args.no_comments else None,
    }
    return load_config(custom_config=overrides, config_file=args.config)


def _list_formats() -> int:
    """List supported source formats."""
    table = Table(title="📋 Source Formats", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Format", style="bold green", no_wrap=True)
    table.add_column("Description")
    table.add_column("Aliases", style="blue")

    for name in list_supported_formats():
        info = get_format_info(name)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {name}", info["description"], aliases)

    console.print()
    console.print(table)
    console.print()
    return 0


def lexer_for(artifact: Artifact) -> str:
    """Syntax highlighting lexer for an artifact's source language."""
    return "java" if artifact.extension == JAVA_EXTENSION else "scala"


def _print_sources(inputs: List[str], config) -> int:
    """Render every input in memory and print it."""
    store = SchemaStore()
    parser = SchemaParser(store)
    targets = []
    for source in inputs:
        _, text = load_schema_text(source)
        targets.append((parser.parse(text), parser.defined_types))

    for target, defined_types in targets:
        for artifact in generate_artifacts(target, config, None, store, defined_types):
            console.print(
                Syntax(artifact.code, lexer_for(artifact), theme="monokai", line_numbers=False)
            )
    return 0


def _write_sources(inputs: List[str], config) -> int:
    """Generate files and summarize what was written."""
    if not config.output_dir:
        console.print("[red]✗[/red] --output-dir is required unless --stdout is given")
        return 1

    written = generate_from_files(inputs, config.output_dir, config)

    table = Table(title="✅ Generated Sources", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("File", style="green")
    table.add_column("Size", justify="right")
    for path in written:
        table.add_row(str(path), f"{Path(path).stat().st_size} B")

    console.print(table)
    console.print(
        Panel(
            f"[bold]{len(written)}[/bold] file(s) written to {config.output_dir}",
            border_style="green",
        )
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.list_formats:
            return _list_formats()

        if not args.inputs:
            console.print("[red]✗[/red] At least one input file or URL is required")
            return 1

        config = _build_config(args)
        if args.stdout:
            return _print_sources(args.inputs, config)
        return _write_sources(args.inputs, config)

    except (ConfigError, RegistryError) as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        return 1
    except (SchemaLoaderError, SchemaParseError) as e:
        console.print(f"[red]✗ Input error:[/red] {e}")
        return 1
    except GeneratorError as e:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[red]✗ Generation failed:[/red] {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
