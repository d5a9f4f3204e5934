"""
data_model/project.py — języki i informacje o projekcie Apiglot.

API zwraca dwa kształty opisu projektu:
  - /projects/<id>/info  → snake_case (source_language, target_languages)
  - /v1/<id>/info        → camelCase  (sourceLanguage, projectName, namespaces)
ProjectInfo.from_dict akceptuje oba.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Language:
    code: str                 # kod locale, np. "pt-BR"
    name: str = ""            # nazwa czytelna, np. "Portuguese (Brazil)"
    id: int | str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Language":
        return cls(
            code=str(data.get("code", "")),
            name=str(data.get("name", "") or ""),
            id=data.get("id"),
        )

    def label(self) -> str:
        """Etykieta do komunikatów: 'pt-BR (Portuguese - Brazil)'."""
        name = self.name.replace("(", "- ", 1).replace(")", "", 1)
        return f"{self.code} ({name})"


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(slots=True)
class ProjectInfo:
    project_name: str
    source_language: Language | None
    target_languages: list[Language] = field(default_factory=list)
    namespaces: list[str] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectInfo":
        source = _pick(data, "source_language", "sourceLanguage")
        targets = _pick(data, "target_languages", "targetLanguages", default=[])
        return cls(
            project_name=str(_pick(data, "projectName", "project_name", "name", default="")),
            source_language=Language.from_dict(source) if isinstance(source, dict) else None,
            target_languages=[Language.from_dict(t) for t in targets if isinstance(t, dict)],
            namespaces=[str(n) for n in _pick(data, "namespaces", default=[])],
            raw=dict(data),
        )

    def locales(self) -> list[Language]:
        """Język źródłowy + języki docelowe (w tej kolejności)."""
        head = [self.source_language] if self.source_language else []
        return head + list(self.target_languages)

    def locale_map(self) -> dict[str, Language]:
        return {lang.code: lang for lang in self.locales()}
