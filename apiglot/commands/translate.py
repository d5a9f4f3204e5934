"""Komenda: apiglot translate — tłumaczenie stron .astro na języki projektu."""

from __future__ import annotations

import argparse
import time
import uuid
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from api_client import ApiError, ApiglotClient, get_project_info, request_translation
from apiglot._config import load_config_or_exit
from apiglot._git import GitError, file_created, filesystem_last_modified, get_last_modified
from data_model.config import ApiglotConfig
from data_model.extraction import ExtractionResult
from data_model.project import Language
from data_model.translation import AstroI18n, LastModified, SourceFile, TranslationRequest
from page_parser import (
    PAGE_SUFFIX,
    RegionPattern,
    extract_relevant_content,
    load_astro_config,
    reassemble,
    suggested_astro_config,
)

console = Console()

_DEFAULT_DELAY = 1.0  # sekundy między kolejnymi żądaniami (pacing API)


@dataclass(slots=True)
class _Run:
    """Stan jednego uruchomienia komendy (wspólny dla wszystkich plików)."""
    config: ApiglotConfig
    client: ApiglotClient
    astro: AstroI18n
    locales: dict[str, Language]
    source: Language
    pages_dir: Path
    pattern: RegionPattern
    batch_id: str
    delay: float
    dry_run: bool
    written: int = 0
    errors: int = 0


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _last_modified(path: Path) -> LastModified:
    try:
        return get_last_modified(path)
    except GitError as e:
        console.print(f"[yellow]\\[warn][/yellow] git: {e} — używam daty z systemu plików.")
        return filesystem_last_modified(path)


def _build_request(
    state: _Run,
    page: Path,
    extraction: ExtractionResult,
    last_modified: LastModified | None,
    target: Language,
) -> TranslationRequest:
    return TranslationRequest(
        batch_id=state.batch_id,
        source_file=SourceFile(
            name=page.name,
            size=page.stat().st_size,
            created=file_created(page),
            last_modified=last_modified.timestamp if last_modified else None,
            content=extraction.content,
        ),
        source_language_id=state.source.id,
        target_language_id=target.id,
    )


def _post_with_spinner(state: _Run, label: str, payload: dict) -> str:
    """Wysyła żądanie tłumaczenia pokazując spinner z czasem trwania."""
    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(label, total=None)
        return request_translation(state.client, state.config, payload)


# ---------------------------------------------------------------------------
# Tłumaczenie jednej strony
# ---------------------------------------------------------------------------

def _translate_page(state: _Run, page: Path) -> None:
    console.print(f"Przetwarzanie pliku [bold]{page.name}[/bold]…")

    try:
        extraction = extract_relevant_content(page, state.pattern)
    except OSError as e:
        console.print(f"  [red]Błąd odczytu pliku:[/red] {e}")
        state.errors += 1
        return

    console.print(
        f"  [dim]{len(extraction.content)} znaków do tłumaczenia, "
        f"{len(extraction.removed)} wyciętych bloków ({', '.join(state.pattern.tags)})[/dim]"
    )

    last_modified = None if state.dry_run else _last_modified(page)
    source_label = state.source.label()

    for code in state.astro.locales:
        if code == state.astro.default_locale:
            continue
        target = state.locales.get(code)
        if target is None:
            console.print(f"  [yellow]\\[warn][/yellow] Język '{code}' nie należy do projektu — pomijam.")
            continue

        out_path = state.pages_dir / target.code.lower() / page.name
        if state.dry_run:
            console.print(f"  [dim](--dry-run)[/dim] {source_label} → {target.label()}: {out_path}")
            continue

        label = (
            f"Tłumaczenie [reverse]{page.name}[/reverse] z [blue]{source_label}[/blue] "
            f"na [green]{target.label()}[/green]…"
        )
        console.print(label)

        payload = _build_request(state, page, extraction, last_modified, target).to_payload()
        try:
            output = _post_with_spinner(state, label, payload)
        except (ApiError, ValueError) as e:
            console.print(f"  [red]Błąd API tłumaczenia:[/red] {e}")
            state.errors += 1
            break

        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(reassemble(output, extraction.removed), encoding="utf-8")
        except OSError as e:
            console.print(f"  [red]Błąd zapisu pliku:[/red] {e}")
            state.errors += 1
        else:
            state.written += 1
            console.print(f"  [green]Zapisano przetłumaczony plik:[/green] {out_path}")

        if state.delay > 0:
            time.sleep(state.delay)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    root = Path.cwd()
    config = load_config_or_exit(root)
    client = ApiglotClient(config)

    console.print("Wczytywanie informacji o projekcie…")
    try:
        project = get_project_info(client, config)
    except ApiError as e:
        console.print(f"[red]Błąd pobierania informacji o projekcie:[/red] {e}")
        raise SystemExit(1)

    try:
        astro = load_astro_config(root)
    except (FileNotFoundError, OSError) as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if astro is None:
        console.print(
            "[white on red]Projekt Astro nie ma skonfigurowanego i18n. "
            "Skonfiguruj internacjonalizację przed tłumaczeniem.[/white on red]"
        )
        console.print("Zgodnie z konfiguracją projektu Apiglot astro.config.mjs powinien wyglądać tak:")
        console.print(suggested_astro_config(project), markup=False, highlight=False)
        return

    if project.source_language is None:
        console.print("[red]Projekt nie ma zdefiniowanego języka źródłowego.[/red]")
        raise SystemExit(1)

    pages_dir = Path(args.pages_dir or config.pages_dir)
    if not pages_dir.is_absolute():
        pages_dir = root / pages_dir
    if not pages_dir.is_dir():
        console.print(f"[red]Katalog stron nie istnieje:[/red] {pages_dir}")
        raise SystemExit(1)

    state = _Run(
        config=config,
        client=client,
        astro=astro,
        locales=project.locale_map(),
        source=project.source_language,
        pages_dir=pages_dir,
        pattern=RegionPattern.of(*config.exclude_tags),
        batch_id=str(uuid.uuid4()),
        delay=args.delay,
        dry_run=args.dry_run,
    )

    for entry in sorted(pages_dir.iterdir(), key=lambda p: p.name):
        console.print(f" - {entry.name} ({'plik' if entry.is_file() else 'katalog'})")
        if entry.is_file() and entry.suffix == PAGE_SUFFIX:
            _translate_page(state, entry)

    console.print()
    status = (
        "[green]Gotowe[/green]" if state.errors == 0
        else f"[yellow]Gotowe z {state.errors} błędami[/yellow]"
    )
    console.print(f"{status} — zapisano {state.written} plików (batch {state.batch_id}).")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "translate",
        help="Tłumaczy strony .astro na języki projektu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdego pliku .astro w katalogu stron (bez podkatalogów) wycina bloki
<style>, wysyła resztę do API tłumaczeń dla każdego locale z astro.config
(poza domyślnym) i zapisuje wynik do <pagesDir>/<locale>/<plik>.
Wycięte bloki są doklejane na końcu przetłumaczonego pliku.

Przykłady:
  apiglot translate
  apiglot translate --pages-dir ./src/pages/docs
  apiglot translate --delay 3
  apiglot translate --dry-run
        """,
    )
    p.add_argument(
        "--pages-dir",
        metavar="KATALOG",
        default=None,
        help="Katalog stron (domyślnie: pagesDir z konfiguracji lub ./src/pages).",
    )
    p.add_argument(
        "--delay",
        type=float,
        default=_DEFAULT_DELAY,
        metavar="SEK",
        help=f"Opóźnienie (sekundy) po każdym tłumaczeniu (domyślnie: {_DEFAULT_DELAY}).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Tylko pokaż co zostałoby przetłumaczone, nie wywołuj API tłumaczeń.",
    )
    p.set_defaults(func=run)
