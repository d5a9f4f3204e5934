"""Komenda: apiglot info — wersja narzędzia i wczytana konfiguracja."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from apiglot import __version__
from apiglot._config import load_config_or_exit

console = Console()


def run(args: argparse.Namespace) -> None:
    config = load_config_or_exit()

    table = Table(box=box.SIMPLE_HEAD, show_header=False, expand=False)
    table.add_column("KLUCZ", style="bold cyan", no_wrap=True)
    table.add_column("WARTOŚĆ")

    info = config.project_info
    table.add_row("wersja", __version__)
    table.add_row("plik", str(config.path) if config.path else "[dim](brak — wartości domyślne)[/dim]")
    table.add_row("projectId", config.project_id or "-")
    table.add_row("apiKey", config.masked_api_key())
    table.add_row("host", config.host)
    table.add_row("pagesDir", config.pages_dir)
    table.add_row("excludeTags", ", ".join(config.exclude_tags))
    table.add_row("projekt", (info.project_name if info else "") or "-")
    if info and info.namespaces:
        table.add_row("namespaces", ", ".join(info.namespaces))

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "info",
        help="Informacje o narzędziu i wczytanej konfiguracji.",
    )
    p.set_defaults(func=run)
