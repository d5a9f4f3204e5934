"""
data_model/translation.py — payload żądania tłumaczenia i metadane pliku.

Mapowanie na body POST /projects/<projectId>/translate:
  batch_id            → str (jeden na uruchomienie `apiglot translate`)
  source_file         → SourceFile
  source_language_id  → Language.id
  target_language_id  → Language.id
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal


@dataclass(frozen=True, slots=True)
class LastModified:
    source: Literal["git", "filesystem"]
    timestamp: str                    # ISO 8601


@dataclass(slots=True)
class SourceFile:
    name: str
    size: int
    created: str
    last_modified: str | None
    content: str


@dataclass(slots=True)
class TranslationRequest:
    batch_id: str
    source_file: SourceFile
    source_language_id: int | str | None
    target_language_id: int | str | None

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class AstroI18n:
    """Blok `i18n` z astro.config.*."""
    locales: list[str]
    default_locale: str
