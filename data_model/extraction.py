"""data_model/extraction.py — wynik ekstrakcji wykluczonych regionów strony."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    content: str                      # dokument bez wyciętych regionów
    removed: list[str] = field(default_factory=list)  # dokładne spany, w kolejności dokumentu
