"""
Konfiguracja projektu — plik apiglot.config.json + zmienne środowiskowe.

Zmienne środowiskowe (nadpisują plik; opcjonalnie z .env w katalogu roboczym):
  APIGLOT_PROJECT_ID   identyfikator projektu
  APIGLOT_API_KEY      klucz API
  APIGLOT_HOST         adres API (domyślnie https://api.apiglot.com)
  APIGLOT_PAGES_DIR    katalog stron (domyślnie ./src/pages)
  APIGLOT_TIMEOUT      timeout żądań w sekundach (domyślnie 120)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from data_model.config import (
    DEFAULT_HOST,
    DEFAULT_PAGES_DIR,
    DEFAULT_TIMEOUT,
    ApiglotConfig,
)
from data_model.project import ProjectInfo

CONFIG_FILE_NAME = "apiglot.config.json"


class ConfigError(ValueError):
    """Plik konfiguracyjny istnieje, ale nie da się go odczytać."""


def _read_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Niepoprawny JSON w {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: oczekiwano obiektu JSON, otrzymano {type(data).__name__}")
    return data


def _str_list(data: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Lista napisów z pliku; pojedynczy napis traktowany jako jednoelementowa lista."""
    value = data.get(key)
    if value is None or value == []:
        return default
    if isinstance(value, str) and value:
        return (value,)
    if isinstance(value, list) and all(isinstance(v, str) and v for v in value):
        return tuple(value)
    raise ConfigError(f"{key}: oczekiwano napisu lub listy napisów, otrzymano {value!r}")


def _timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Niepoprawny timeout: {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Niepoprawny timeout: {value!r} (musi być > 0)")
    return timeout


def load_config(root: str | Path | None = None) -> ApiglotConfig:
    """
    Buduje ApiglotConfig dla katalogu projektu (domyślnie: bieżący katalog).

    Brak pliku nie jest błędem — wypisywany jest komunikat i używane są
    wartości domyślne (plus zmienne środowiskowe).

    Raises:
        ConfigError: plik istnieje, ale nie jest poprawnym obiektem JSON,
                     albo wartość (excludeTags, languages, timeout) ma zły typ.
    """
    root = Path(root) if root is not None else Path.cwd()
    load_dotenv(root / ".env")

    path: Path | None = root / CONFIG_FILE_NAME
    if path.is_file():
        data = _read_file(path)
    else:
        print("Brak pliku konfiguracyjnego, używam wartości domyślnych.", file=sys.stderr)
        data, path = {}, None

    raw_info = data.get("projectInfo")
    timeout = os.getenv("APIGLOT_TIMEOUT") or data.get("timeout") or DEFAULT_TIMEOUT

    return ApiglotConfig(
        project_id   = os.getenv("APIGLOT_PROJECT_ID") or data.get("projectId"),
        api_key      = os.getenv("APIGLOT_API_KEY") or data.get("apiKey"),
        host         = os.getenv("APIGLOT_HOST") or data.get("host") or DEFAULT_HOST,
        pages_dir    = os.getenv("APIGLOT_PAGES_DIR") or data.get("pagesDir") or DEFAULT_PAGES_DIR,
        languages    = _str_list(data, "languages", ()),
        exclude_tags = _str_list(data, "excludeTags", ("style",)),
        project_info = ProjectInfo.from_dict(raw_info) if isinstance(raw_info, dict) else None,
        timeout      = _timeout(timeout),
        path         = path,
    )


def write_config(
    project_id: str,
    api_key: str,
    project_info: dict[str, Any],
    root: str | Path | None = None,
) -> Path:
    """Zapisuje apiglot.config.json (nadpisuje istniejący)."""
    root = Path(root) if root is not None else Path.cwd()
    path = root / CONFIG_FILE_NAME
    data = {
        "projectId": project_id,
        "apiKey": api_key,
        "projectInfo": project_info,
    }
    path.write_text(json.dumps(data, ensure_ascii=False, indent=4) + "\n", encoding="utf-8")
    return path


def load_config_or_exit(root: str | Path | None = None) -> ApiglotConfig:
    """load_config dla komend: ConfigError → komunikat + SystemExit(1)."""
    try:
        return load_config(root)
    except (ConfigError, OSError) as e:
        print(f"Błąd konfiguracji: {e}", file=sys.stderr)
        raise SystemExit(1)
