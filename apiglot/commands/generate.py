"""Komenda: apiglot generate ts-types — typy TypeScript dla kluczy tłumaczeń."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from rich.console import Console

from api_client import ApiError, ApiglotClient, fetch_namespace
from apiglot._config import load_config_or_exit
from typegen import write_type_files

console = Console()

DEFAULT_TYPES_DIR = "./src/@types/"


def run_ts_types(args: argparse.Namespace) -> None:
    out_dir = Path(args.path)
    if not out_dir.is_absolute():
        out_dir = Path.cwd() / out_dir

    config = load_config_or_exit()
    info = config.project_info
    console.print(
        "Generowanie typów TypeScript dla projektu: "
        f"[bold]{(info.project_name if info else '') or 'Projekt bez nazwy'}[/bold]"
    )

    client = ApiglotClient(config)
    resources: list[tuple[str, dict[str, Any]]] = []
    for namespace in (info.namespaces if info else []):
        console.print(f"Przetwarzanie przestrzeni nazw: [cyan]{namespace}[/cyan]")
        try:
            translations = fetch_namespace(client, config, namespace)
        except (ApiError, ValueError) as e:
            console.print(f"[red]Błąd pobierania tłumaczeń:[/red] {e}")
            continue
        resources.append((namespace, translations))

    resources_path, i18next_path = write_type_files(out_dir, resources)
    console.print(f"[green]Typy TypeScript zapisane do[/green] {resources_path}")
    console.print(f"[dim]{i18next_path}[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "generate",
        help="Generatory plików (ts-types).",
    )
    sub = p.add_subparsers(title="generatory", metavar="<generator>", dest="generator")
    sub.required = True

    p_ts = sub.add_parser(
        "ts-types",
        help="Generuje typy TypeScript dla kluczy tłumaczeń.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera tłumaczenia każdej przestrzeni nazw projektu (język źródłowy)
i zapisuje resources.d.ts oraz i18next.d.ts.

Przykłady:
  apiglot generate ts-types
  apiglot generate ts-types --path ./types
        """,
    )
    p_ts.add_argument(
        "--path", "-p",
        default=DEFAULT_TYPES_DIR,
        metavar="KATALOG",
        help=f"Katalog na wygenerowane pliki (domyślnie: {DEFAULT_TYPES_DIR}).",
    )
    p_ts.set_defaults(func=run_ts_types)
