"""
data_model/config.py — konfiguracja lokalnego projektu (apiglot.config.json).

ApiglotConfig jest niemutowalna: budowana raz na proces (apiglot._config)
i przekazywana jawnie do klienta API i komend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .project import ProjectInfo

DEFAULT_HOST      = "https://api.apiglot.com"
DEFAULT_PAGES_DIR = "./src/pages"
DEFAULT_TIMEOUT   = 120.0


@dataclass(frozen=True, slots=True)
class ApiglotConfig:
    project_id: str | None = None
    api_key: str | None = None
    host: str = DEFAULT_HOST
    pages_dir: str = DEFAULT_PAGES_DIR
    languages: tuple[str, ...] = ()
    exclude_tags: tuple[str, ...] = ("style",)
    project_info: ProjectInfo | None = field(default=None, compare=False)
    timeout: float = DEFAULT_TIMEOUT
    path: Path | None = None      # None → plik nie istniał, użyto domyślnych

    def masked_api_key(self) -> str:
        if not self.api_key:
            return "-"
        if len(self.api_key) <= 8:
            return "*" * len(self.api_key)
        return f"{self.api_key[:4]}…{self.api_key[-4:]}"
