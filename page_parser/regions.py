"""
page_parser/regions.py — wycinanie wykluczonych regionów (np. <style>) ze strony.

Region = tag otwierający <tag ...> + treść + PIERWSZY tag zamykający </tag>.
Zasady skanera:
  - nazwa tagu bez rozróżniania wielkości liter; atrybuty zachowane dosłownie
  - treść może zawierać nowe linie; dopasowanie niezachłanne
  - zagnieżdżone tagi o tej samej nazwie NIE są obsługiwane: pierwszy
    </tag> zamyka region (wewnętrzny <tag> skraca dopasowanie)
  - niezamknięty tag otwierający zostaje w treści; skanowanie idzie dalej
    za nim (zamknięte regiony innych tagów nadal są wycinane)

Odtworzenie (reassemble) dokleja wycięte regiony NA KOŃCU przetłumaczonej
treści, oddzielone pustą linią — pozycje oryginalne nie są przywracane.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from data_model.extraction import ExtractionResult

REGION_SEPARATOR = "\n\n"


@dataclass(frozen=True, slots=True)
class RegionPattern:
    tags: tuple[str, ...] = ("style",)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(t.lower() for t in self.tags))

    @classmethod
    def of(cls, *tags: str) -> "RegionPattern":
        if not tags:
            raise ValueError("RegionPattern wymaga co najmniej jednej nazwy tagu.")
        return cls(tuple(tags))


class RegionScanner:
    """Jednoprzebiegowy skaner lewo → prawo dla podanego RegionPattern."""

    def __init__(self, pattern: RegionPattern) -> None:
        names = "|".join(re.escape(t) for t in pattern.tags)
        # nazwa tagu musi się kończyć: <style> / <style lang="scss"> / <style/>, ale nie <styles>
        self._open_re = re.compile(rf"<({names})(?=[\s/>])[^>]*>", re.IGNORECASE)
        self._close_res: dict[str, re.Pattern[str]] = {
            t: re.compile(rf"</{re.escape(t)}\s*>", re.IGNORECASE) for t in pattern.tags
        }

    def spans(self, document: str) -> Iterator[tuple[int, int]]:
        """Zwraca (start, end) kolejnych regionów, w kolejności dokumentu."""
        pos = 0
        while True:
            opening = self._open_re.search(document, pos)
            if opening is None:
                return
            closing = self._close_res[opening.group(1).lower()].search(document, opening.end())
            if closing is None:
                # niezamknięty tag zostaje w treści; szukamy dalej (inne tagi)
                pos = opening.end()
                continue
            yield opening.start(), closing.end()
            pos = closing.end()


def _as_pattern(pattern: RegionPattern | str | None) -> RegionPattern:
    if pattern is None:
        return RegionPattern()
    if isinstance(pattern, str):
        return RegionPattern.of(pattern)
    return pattern


def extract_excluded_regions(
    document: str,
    pattern: RegionPattern | str | None = None,
) -> ExtractionResult:
    """
    Dzieli dokument na treść do tłumaczenia i listę wyciętych regionów.

    Args:
        document: Pełny tekst pliku strony.
        pattern:  RegionPattern lub nazwa tagu (domyślnie: "style").

    Returns:
        ExtractionResult(content, removed) — content bez regionów (bez
        placeholderów, białe znaki wokół nie są przycinane), removed to
        dokładne teksty regionów w kolejności wystąpienia.
    """
    scanner = RegionScanner(_as_pattern(pattern))
    kept: list[str] = []
    removed: list[str] = []
    last = 0
    for start, end in scanner.spans(document):
        kept.append(document[last:start])
        removed.append(document[start:end])
        last = end
    kept.append(document[last:])
    return ExtractionResult(content="".join(kept), removed=removed)


def extract_file(path: str | Path, pattern: RegionPattern | str | None = None) -> ExtractionResult:
    """Czyta plik (UTF-8) i wycina regiony. Błędy odczytu są propagowane."""
    document = Path(path).read_text(encoding="utf-8")
    return extract_excluded_regions(document, pattern)


def reassemble(translated_content: str, removed: list[str] | tuple[str, ...]) -> str:
    """Dokleja wycięte regiony po przetłumaczonej treści, oddzielone pustą linią."""
    return REGION_SEPARATOR.join([translated_content, *removed])
