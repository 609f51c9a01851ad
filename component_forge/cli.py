"""
Command-line interface for component-forge.

Exposes generation, target and pattern discovery, the blueprint archive
and the design-token store as argparse subcommands with rich output.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    compare_targets,
    generate,
    get_registry,
    get_target_guide,
    get_target_info,
    list_patterns,
    list_targets,
    lookup_pattern,
)
from .codegen.core.blueprint import Blueprint, BlueprintError
from .codegen.core.target import DEFAULT_TARGET
from .codegen.core.variants import expand_variants
from .codegen.guides import GUIDE_TOPICS
from .logging_config import get_logger, setup_logging
from .storage import ArchiveStore, StoreError, TokenStore, format_tokens
from .storage.tokens import TOKEN_FORMATS
from .utils import BlueprintLoaderError, load_json, load_json_from_stream

logger = get_logger(__name__)

HOME_ENV = "COMPONENT_FORGE_HOME"
DEFAULT_HOME = Path.home() / ".component-forge"


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def _home(args: argparse.Namespace) -> Path:
    if args.home:
        return Path(args.home)
    return Path(os.environ.get(HOME_ENV) or DEFAULT_HOME)


def _archive(args: argparse.Namespace) -> ArchiveStore:
    return ArchiveStore(_home(args) / "archive")


def _tokens(args: argparse.Namespace) -> TokenStore:
    return TokenStore(_home(args) / "tokens.json")


def _add_input_args(parser: argparse.ArgumentParser):
    """Blueprint input options (mutually exclusive)."""
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="Blueprint JSON file")
    input_group.add_argument("--url", help="URL to fetch blueprint JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read blueprint JSON from standard input"
    )
    input_group.add_argument(
        "--pattern", metavar="KEY", help="Start from a catalogue pattern"
    )
    input_group.add_argument(
        "--archived", metavar="NAME", help="Load a blueprint from the archive"
    )


def _add_option_args(parser: argparse.ArgumentParser):
    """Generation options shared by generate and compare."""
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--no-types", action="store_true", help="Don't emit static type annotations"
    )
    parser.add_argument(
        "--no-docs", action="store_true", help="Don't emit a documentation header"
    )
    parser.add_argument(
        "--utils-import",
        metavar="PATH",
        help="Import path of the cn() helper (default: @/lib/utils)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="component-forge",
        description="Generate UI components for several frameworks from one blueprint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  component-forge generate button.json --target vue
  component-forge generate --pattern data-table -t solid -o DataTable.tsx
  component-forge compare --pattern button --targets react-tailwind vue
  component-forge guide solid --topic setup
  component-forge archive save PrimaryButton button.json
  component-forge tokens get colors --format css
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--home",
        metavar="DIR",
        help=f"Data directory for archive and tokens (default: ${HOME_ENV} or ~/.component-forge)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate
    gen = subparsers.add_parser("generate", help="Generate a component")
    _add_input_args(gen)
    gen.add_argument(
        "--target",
        "-t",
        default=DEFAULT_TARGET.value,
        help=f"Target id or alias (default: {DEFAULT_TARGET.value})",
    )
    gen.add_argument("--output", "-o", help="Output file (default: stdout)")
    _add_option_args(gen)
    gen.add_argument(
        "--raw", action="store_true", help="Print code without highlighting or borders"
    )
    gen.add_argument(
        "--metadata", action="store_true", help="Show generation result metadata"
    )
    gen.set_defaults(func=_cmd_generate)

    # targets
    targets = subparsers.add_parser("targets", help="List supported targets")
    targets.set_defaults(func=_cmd_targets)

    # target-info
    info = subparsers.add_parser("target-info", help="Show details about a target")
    info.add_argument("target", help="Target id or alias")
    info.add_argument(
        "--package-manager",
        "--pm",
        choices=["npm", "pnpm", "yarn", "bun"],
        default="npm",
        help="Package manager for the install command (default: npm)",
    )
    info.set_defaults(func=_cmd_target_info)

    # guide
    guide = subparsers.add_parser("guide", help="Show setup and conventions for a target")
    guide.add_argument("target", help="Target id or alias")
    guide.add_argument(
        "--topic",
        choices=[*GUIDE_TOPICS, "all"],
        default="all",
        help="Section to show (default: all)",
    )
    guide.add_argument(
        "--package-manager",
        "--pm",
        choices=["npm", "pnpm", "yarn", "bun"],
        default="npm",
        help="Package manager for the install command (default: npm)",
    )
    guide.set_defaults(func=_cmd_guide)

    # patterns
    patterns = subparsers.add_parser("patterns", help="List or show catalogue patterns")
    patterns.add_argument("key", nargs="?", help="Pattern key to print as JSON")
    patterns.set_defaults(func=_cmd_patterns)

    # variants
    variants = subparsers.add_parser(
        "variants", help="Show the variant cross-product of a blueprint"
    )
    _add_input_args(variants)
    variants.set_defaults(func=_cmd_variants)

    # compare
    compare = subparsers.add_parser(
        "compare", help="Render one blueprint for several targets as Markdown"
    )
    _add_input_args(compare)
    compare.add_argument(
        "--targets", nargs="+", metavar="TARGET", help="Targets to compare (default: all)"
    )
    compare.add_argument("--output", "-o", help="Output file (default: stdout)")
    _add_option_args(compare)
    compare.set_defaults(func=_cmd_compare)

    # archive
    archive = subparsers.add_parser("archive", help="Manage archived blueprints")
    archive_sub = archive.add_subparsers(dest="archive_command", metavar="ACTION")
    archive_save = archive_sub.add_parser("save", help="Archive a blueprint")
    archive_save.add_argument("name", help="Archive name")
    _add_input_args(archive_save)
    archive_load = archive_sub.add_parser("load", help="Print an archived blueprint")
    archive_load.add_argument("name", help="Archive name")
    archive_sub.add_parser("list", help="List archived blueprints")
    archive_delete = archive_sub.add_parser("delete", help="Delete an archived blueprint")
    archive_delete.add_argument("name", help="Archive name")
    archive.set_defaults(func=_cmd_archive)

    # tokens
    tokens = subparsers.add_parser("tokens", help="Read or update design tokens")
    tokens_sub = tokens.add_subparsers(dest="tokens_command", metavar="ACTION")
    tokens_get = tokens_sub.add_parser("get", help="Print tokens")
    tokens_get.add_argument(
        "category", nargs="?", default="all", help="Token category (default: all)"
    )
    tokens_get.add_argument(
        "--format", "-f", choices=TOKEN_FORMATS, default="json", help="Output format"
    )
    tokens_set = tokens_sub.add_parser(
        "set", help="Merge tokens from a JSON file (top-level keys replace)"
    )
    tokens_set.add_argument("file", help="JSON file with token categories")
    tokens.set_defaults(func=_cmd_tokens)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


# Input helpers


def _load_blueprint(args: argparse.Namespace) -> Blueprint:
    """Resolve the selected input source to a Blueprint."""
    try:
        if args.pattern:
            return lookup_pattern(args.pattern)
        if args.archived:
            return _archive(args).load(args.archived).unwrap()
        if args.stdin:
            source, data = load_json_from_stream()
        elif args.url:
            source, data = load_json(url=args.url)
        else:
            source, data = load_json(file_path=args.file)
        logger.debug("Loaded blueprint input from %s", source)
        return Blueprint.from_dict(data)
    except (BlueprintLoaderError, BlueprintError, StoreError) as e:
        raise CLIError(str(e))


def _build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge a config file and CLI flags into generation overrides."""
    options: Dict[str, Any] = {}

    if args.config:
        try:
            with open(args.config, "r", encoding="utf-8") as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CLIError(f"Failed to load config file: {e}")
        if not isinstance(file_config, dict):
            raise CLIError("Config file must contain a JSON object")
        options.update(file_config)

    if args.no_types:
        options["with_types"] = False
    if args.no_docs:
        options["with_docs"] = False
    if args.utils_import:
        options["utils_import"] = args.utils_import

    return options


def _write_output(path: str, text: str, what: str):
    output_path = Path(path)
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Failed to write to {output_path}: {e}")
    console.print(f"[green]✓[/green] {what} saved to [cyan]{output_path}[/cyan]")


# Commands


def _cmd_generate(args: argparse.Namespace) -> int:
    blueprint = _load_blueprint(args)
    options = _build_options(args)

    result = generate(blueprint, args.target, options)
    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    target_id = result.metadata["target"]
    if args.output:
        _write_output(args.output, result.code, f"Generated {target_id} code")
    elif args.raw:
        console.out(result.code, end="", highlight=False)
    else:
        generator = get_registry().create_generator(target_id)
        border = "═" * 20
        console.print(
            f"[green]{border} 📄 {blueprint.name}{result.metadata['file_extension']} "
            f"({target_id}) {border}[/green]\n"
        )
        console.print(Syntax(result.code, generator.lexer, theme="monokai"))

    if args.metadata and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}", markup=False)
    return 0


def _cmd_targets(args: argparse.Namespace) -> int:
    table = Table(title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Name")
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")

    for target_id in list_targets():
        info = get_target_info(target_id)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(target_id, info["name"], info["file_extension"], aliases)

    console.print(table)
    return 0


def _cmd_target_info(args: argparse.Namespace) -> int:
    registry = get_registry()
    if not registry.is_supported(args.target):
        console.print(f"[red]✗ Target '{args.target}' is not supported[/red]")
        console.print(f"[dim]Supported targets: {', '.join(list_targets())}[/dim]")
        return 1

    info = get_target_info(args.target)
    install = info["install_commands"][args.package_manager] or "[dim]nothing to install[/dim]"
    info_text = (
        f"[bold]Target:[/bold] {info['id']}\n"
        f"[bold]File Extension:[/bold] {info['file_extension']}\n"
        f"[bold]Typed Output:[/bold] {info['supports_types']}\n"
        f"[bold]Generator Class:[/bold] {info['class']}\n"
        f"[bold]Module:[/bold] {info['module']}"
    )
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"
    if info["dependencies"]:
        info_text += f"\n[bold]Dependencies:[/bold] {', '.join(info['dependencies'])}"
    info_text += f"\n[bold]Install:[/bold] {install}"

    console.print(Panel(info_text, title=f"🔧 {info['name']}", border_style="green"))
    return 0


def _cmd_guide(args: argparse.Namespace) -> int:
    if not get_registry().is_supported(args.target):
        console.print(f"[red]✗ Target '{args.target}' is not supported[/red]")
        console.print(f"[dim]Supported targets: {', '.join(list_targets())}[/dim]")
        return 1

    guide = get_target_guide(args.target, args.topic, args.package_manager)
    console.out(guide, end="", highlight=False)
    return 0


def _cmd_patterns(args: argparse.Namespace) -> int:
    if args.key:
        console.out(lookup_pattern(args.key).to_json(), highlight=False)
        return 0

    table = Table(title="🧩 Pattern Catalogue", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Key", style="bold green", no_wrap=True)
    table.add_column("Component")
    table.add_column("Kind", style="cyan")
    table.add_column("Variant Axes", style="blue")

    for key in list_patterns():
        blueprint = lookup_pattern(key)
        axes = ", ".join(blueprint.variants) or "[dim]none[/dim]"
        table.add_row(key, blueprint.name, blueprint.kind.value, axes)

    console.print(table)
    return 0


def _cmd_variants(args: argparse.Namespace) -> int:
    blueprint = _load_blueprint(args)
    variant_table = expand_variants(blueprint)

    table = Table(
        title=f"🎛  {blueprint.name} variants", box=box.SIMPLE, header_style="bold cyan"
    )
    for axis in variant_table.axis_names:
        table.add_column(axis, style="bold")
    table.add_column("Classes", style="green")

    for combination in variant_table.combinations():
        values = [combination.selection[axis] for axis in variant_table.axis_names]
        table.add_row(*values, combination.classes or "[dim](none)[/dim]")

    console.print(table)
    console.print(
        f"[dim]{variant_table.combination_count} combination(s) across "
        f"{len(variant_table.axes)} axis/axes[/dim]"
    )
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    blueprint = _load_blueprint(args)
    options = _build_options(args)
    document = compare_targets(blueprint, args.targets, options)

    if args.output:
        _write_output(args.output, document, "Comparison")
    else:
        console.out(document, end="", highlight=False)
    return 0


def _cmd_archive(args: argparse.Namespace) -> int:
    store = _archive(args)
    action = args.archive_command

    if action == "save":
        result = store.save(args.name, _load_blueprint(args))
    elif action == "load":
        result = store.load(args.name)
        if result.success:
            console.out(result.value.to_json(), highlight=False)
            return 0
    elif action == "list":
        result = store.list_names()
        if result.success:
            if not result.value:
                console.print("[yellow]No archived blueprints[/yellow]")
            for name in result.value:
                console.print(f"  • {name}", markup=False)
            return 0
    elif action == "delete":
        result = store.delete(args.name)
    else:
        raise CLIError("Specify an archive action: save, load, list or delete")

    if not result.success:
        console.print(f"[red]✗[/red] {result.message}")
        return 1
    console.print(f"[green]✓[/green] {result.message}")
    return 0


def _cmd_tokens(args: argparse.Namespace) -> int:
    store = _tokens(args)
    action = args.tokens_command

    if action == "get":
        result = store.read(args.category)
        if not result.success:
            console.print(f"[red]✗[/red] {result.message}")
            available = store.categories()
            if available.success:
                console.print(f"[dim]Available: {', '.join(available.value)}[/dim]")
            return 1
        console.out(format_tokens(result.value, args.format, args.category), highlight=False)
        return 0

    if action == "set":
        try:
            _, data = load_json(file_path=args.file)
        except BlueprintLoaderError as e:
            raise CLIError(str(e))
        result = store.merge(data)
        if not result.success:
            console.print(f"[red]✗[/red] {result.message}")
            return 1
        console.print(f"[green]✓[/green] {result.message}")
        return 0

    raise CLIError("Specify a tokens action: get or set")


if __name__ == "__main__":
    sys.exit(main())
