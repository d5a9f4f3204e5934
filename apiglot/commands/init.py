"""Komenda: apiglot init — tworzy lokalny plik konfiguracyjny projektu."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt

from api_client import ApiError, ApiglotClient, get_project_info_from_remote
from apiglot._config import CONFIG_FILE_NAME, write_config
from data_model.config import DEFAULT_HOST, ApiglotConfig

console = Console()


def run(args: argparse.Namespace) -> None:
    root = Path.cwd()
    target = root / CONFIG_FILE_NAME
    if target.exists() and not args.force:
        if not Confirm.ask(f"Plik [bold]{CONFIG_FILE_NAME}[/bold] już istnieje. Nadpisać?", default=False):
            console.print("[yellow]Przerwano.[/yellow]")
            return

    project_id = args.project_id or Prompt.ask("Podaj ID projektu Apiglot")
    api_key = args.api_key or Prompt.ask("Podaj klucz API Apiglot", password=True)

    client = ApiglotClient(ApiglotConfig(project_id=project_id, api_key=api_key, host=args.host))
    try:
        project_info = get_project_info_from_remote(client, project_id, api_key)
    except ApiError as e:
        console.print(f"[red]Błąd pobierania informacji o projekcie:[/red] {e}")
        raise SystemExit(1)

    console.print("Pobrano informacje o projekcie:")
    console.print_json(json.dumps(project_info, ensure_ascii=False))

    path = write_config(project_id, api_key, project_info, root)
    console.print(f"[green]Utworzono plik konfiguracyjny:[/green] {path.name}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "init",
        help="Tworzy lokalny plik konfiguracyjny projektu Apiglot.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""
Pyta o ID projektu i klucz API, pobiera opis projektu z API
(GET /v1/<projectId>/info) i zapisuje {CONFIG_FILE_NAME} w bieżącym katalogu.

Przykłady:
  apiglot init
  apiglot init --project-id 42
  apiglot init --project-id 42 --api-key sk_... --force
        """,
    )
    p.add_argument(
        "--project-id",
        metavar="ID",
        help="ID projektu (domyślnie: pytanie interaktywne).",
    )
    p.add_argument(
        "--api-key",
        metavar="KLUCZ",
        help="Klucz API (domyślnie: pytanie interaktywne, ukryte).",
    )
    p.add_argument(
        "--host",
        default=DEFAULT_HOST,
        metavar="URL",
        help=f"Adres API (domyślnie: {DEFAULT_HOST}).",
    )
    p.add_argument(
        "--force", "-f",
        action="store_true",
        help="Nadpisz istniejący plik konfiguracyjny bez pytania.",
    )
    p.set_defaults(func=run)
