"""Command-line interface for assetsym."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from assetsym.core.catalog.models import AssetCatalog
from assetsym.core.catalog.reader import read_catalog
from assetsym.core.config.loader import load_generator_config
from assetsym.core.config.models import GeneratorConfig
from assetsym.core.emit.dialects import list_dialects
from assetsym.core.emit.parser import expected_declarations, parse_declarations
from assetsym.core.errors import AssetSymbolError
from assetsym.core.generator import SymbolGenerator
from assetsym.core.utils.json import write_json
from assetsym.core.utils.logging import configure_logging

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load config file and apply command-line overrides."""
    config = load_generator_config(args.config)

    updates: dict = {}
    if getattr(args, "dialect", None):
        updates["dialects"] = args.dialect
    if getattr(args, "out", None):
        updates["output_dir"] = Path(args.out)
    if getattr(args, "no_colors", False):
        updates["include_colors"] = False
    if updates:
        # Re-validate so overrides get the same checks as file values
        config = GeneratorConfig.model_validate({**config.model_dump(), **updates})

    configure_logging(
        level="DEBUG" if getattr(args, "verbose", False) else config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
    return config


def _load_catalog(args: argparse.Namespace) -> AssetCatalog:
    if args.name:
        return AssetCatalog.from_names(args.name)
    if args.catalog is None:
        raise AssetSymbolError("Either --catalog or --name is required")
    return read_catalog(Path(args.catalog).resolve())


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate symbol artifacts."""
    config = _load_config(args)
    catalog = _load_catalog(args)
    generator = SymbolGenerator(config)

    if args.stdout:
        result = generator.run(catalog, write=False)
        for artifact in result.artifacts:
            sys.stdout.write(artifact.text)
        return 0

    result = generator.run(catalog)
    for artifact in result.artifacts:
        status = "[green]written[/green]" if artifact.written else "[dim]unchanged[/dim]"
        console.print(f"{status} {escape(str(artifact.path))}")
    console.print(f"[bold]{len(result.symbols)} symbols[/bold]")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List catalog entries and their identifiers."""
    config = _load_config(args)
    catalog = _load_catalog(args)
    symbols = SymbolGenerator(config).build(catalog)

    if args.json:
        write_json(
            args.json,
            [
                {
                    "kind": s.kind.value,
                    "name": s.source_name,
                    "identifier": s.identifier_name,
                    "member": s.member_name,
                }
                for s in symbols
            ],
        )
        console.print(f"[green]Wrote {len(symbols)} entries to {args.json}[/green]")
        return 0

    table = Table(title=f"Asset symbols ({len(symbols)})")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Identifier")
    for symbol in symbols:
        table.add_row(symbol.kind.value, symbol.source_name, symbol.identifier_name)
    Console().print(table)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Check whether generated artifacts on disk are current."""
    config = _load_config(args)
    catalog = _load_catalog(args)
    generator = SymbolGenerator(config)

    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
        dialect = config.dialects[0]
        found = parse_declarations(text, dialect)
        expected = expected_declarations(
            generator.build(catalog), dialect, objc_prefix=config.objc_prefix
        )
        if found != expected:
            missing = sorted(set(expected) - set(found))
            extra = sorted(set(found) - set(expected))
            console.print(f"[red]Stale: {args.file}[/red]")
            for name, value in missing:
                console.print(f"  [red]- missing[/red] {name} = {value!r}")
            for name, value in extra:
                console.print(f"  [yellow]- unexpected[/yellow] {name} = {value!r}")
            return 1
        console.print(f"[green]Up to date: {args.file}[/green]")
        return 0

    stale = generator.stale_artifacts(catalog)
    for artifact in stale:
        console.print(f"[red]Stale: {artifact.path}[/red]")
    if stale:
        return 1
    console.print("[green]All artifacts up to date[/green]")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="assetsym",
        description="assetsym - generate named constants for asset catalog entries",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--catalog", help="Path to the asset catalog directory")
        parser.add_argument(
            "--name",
            action="append",
            help="Image asset name (repeatable, used instead of --catalog)",
        )
        parser.add_argument("--config", help="Path to config file (.json/.yaml)")
        parser.add_argument(
            "--dialect",
            action="append",
            choices=list_dialects(),
            help="Output dialect (repeatable, default from config)",
        )
        parser.add_argument("--no-colors", action="store_true", help="Skip color entries")
        parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    gen = sub.add_parser("generate", help="Generate symbol artifacts")
    add_common(gen)
    gen.add_argument("--out", help="Output directory (default from config)")
    gen.add_argument("--stdout", action="store_true", help="Print artifacts instead of writing")
    gen.set_defaults(func=cmd_generate)

    lst = sub.add_parser("list", help="List entries and identifiers")
    add_common(lst)
    lst.add_argument("--json", help="Write the symbol table to a JSON file")
    lst.set_defaults(func=cmd_list)

    chk = sub.add_parser("check", help="Exit 1 if generated artifacts are stale")
    add_common(chk)
    chk.add_argument("--out", help="Output directory (default from config)")
    chk.add_argument("--file", help="Check this artifact (first configured dialect)")
    chk.set_defaults(func=cmd_check)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        return args.func(args)
    except (AssetSymbolError, FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
