"""Komenda: apiglot project — informacje o projekcie (info, languages)."""

from __future__ import annotations

import argparse
import json

from rich.console import Console

from api_client import ApiError, ApiglotClient
from apiglot._config import load_config_or_exit

console = Console()


def run_info(args: argparse.Namespace) -> None:
    config = load_config_or_exit()
    client = ApiglotClient(config)
    try:
        result = client.get(f"/projects/{config.project_id}/info")
    except ApiError as e:
        console.print(f"[red]Błąd pobierania informacji o projekcie:[/red] {e}")
        raise SystemExit(1)

    console.print("[blue]Informacje o projekcie:[/blue]")
    console.print_json(json.dumps(result, ensure_ascii=False))


def run_languages(args: argparse.Namespace) -> None:
    config = load_config_or_exit()

    languages = list(config.languages)
    if not languages and config.project_info:
        languages = [lang.code for lang in config.project_info.target_languages]

    if not languages:
        console.print("[yellow]Brak języków docelowych w konfiguracji.[/yellow]")
        return

    console.print("[blue]Języki docelowe projektu:[/blue]")
    for lang in languages:
        console.print(f"[green]- {lang}[/green]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "project",
        help="Komendy dotyczące projektu (info, languages).",
    )
    sub = p.add_subparsers(title="komendy projektu", metavar="<komenda>", dest="project_command")
    sub.required = True

    p_info = sub.add_parser("info", help="Pobiera informacje o projekcie z API.")
    p_info.set_defaults(func=run_info)

    p_lang = sub.add_parser("languages", help="Listuje języki docelowe projektu.")
    p_lang.set_defaults(func=run_languages)
