"""Main entry point for codeoutline."""

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .analyzers.base import ConfigError, RepoOutline
from .analyzers.treesitter import TreeSitterProvider
from .config import OutlineConfig, load_config
from .extractors.repository import outline_file, outline_repository
from .store.output import render, write_output

console = Console()


def setup_logging(level: str) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def list_languages(provider: TreeSitterProvider) -> None:
    """Print supported languages and their extensions."""
    table = Table(title="Supported languages")
    table.add_column("Language")
    table.add_column("Extensions")

    by_language: dict[str, list[str]] = {}
    for ext, language in provider.registry.extensions().items():
        by_language.setdefault(language, []).append(ext)

    for language in provider.registry.languages():
        table.add_row(language, ", ".join(by_language.get(language, [])))

    console.print(table)


def run_outline(path: Path, provider: TreeSitterProvider, config: OutlineConfig) -> RepoOutline | None:
    """Outline a file or a directory. Returns None for an unsupported file."""
    if path.is_dir():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Outlining {path}...", total=None)
            return outline_repository(path, provider, config)

    if provider.resolve(path) is None:
        return None
    return outline_file(path, provider, config, rel_path=path.name)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="codeoutline - Condense source files into signature outlines"
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File or directory to outline",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        choices=["plain", "markdown", "json"],
        help="Output format (overrides config)",
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the outline to this file instead of stdout",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        help="Files outlined concurrently (overrides config)",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    updates = {}
    if args.output_format:
        updates["output_format"] = args.output_format
    if args.workers:
        updates["workers"] = max(1, args.workers)
    if updates:
        config = config.model_copy(update=updates)

    setup_logging(config.log_level)
    provider = TreeSitterProvider()

    if args.list_languages:
        list_languages(provider)
        return 0

    if not args.path:
        parser.error("path is required unless --list-languages is given")

    path = Path(args.path)
    if not path.exists():
        console.print(f"[red]Error:[/red] Path not found: {path}")
        return 1

    result = run_outline(path, provider, config)
    if result is None:
        console.print(f"[yellow]Warning:[/yellow] Unsupported language: {path}")
        return 2

    for error in result.errors:
        console.print(f"[red]X[/red] {error}")

    if args.output:
        out_path = write_output(result, args.output, config.output_format)
        console.print(
            f"[green]✓[/green] Outlined {len(result.files)} of {result.file_count} files "
            f"into {out_path}"
        )
    else:
        print(render(result, config.output_format), end="")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
