"""
page_parser/astro.py — obsługa projektów Astro.

Funkcje publiczne:
  find_astro_config(root)                     -> Path
  parse_astro_i18n(source)                    -> AstroI18n | None
  load_astro_config(root)                     -> AstroI18n | None
  extract_relevant_content(path, pattern)     -> ExtractionResult
  suggested_astro_config(project)             -> str

Konfiguracja Astro to moduł JS; nie wykonujemy go, tylko odczytujemy
blok `i18n: { locales: [...], defaultLocale: '...' }` wyrażeniami regularnymi.
"""

from __future__ import annotations

import re
from pathlib import Path

from data_model.extraction import ExtractionResult
from data_model.project import ProjectInfo
from data_model.translation import AstroI18n

from .regions import RegionPattern, extract_file

ASTRO_CONFIG_NAMES = (
    "astro.config.mjs",
    "astro.config.js",
    "astro.config.ts",
    "astro.config.mts",
)
PAGE_SUFFIX = ".astro"

ASTRO_CONFIG_TEMPLATE = """
import { defineConfig } from 'astro/config';

export default defineConfig({
    i18n: {
        locales: [{TARGET_LOCALES}],
        defaultLocale: '{DEFAULT_LOCALE}',
    }
});
"""

_I18N_RE       = re.compile(r"\bi18n\s*:\s*\{")
_LOCALES_RE    = re.compile(r"\blocales\s*:\s*\[")
_DEFAULT_RE    = re.compile(r"\bdefaultLocale\s*:\s*(['\"`])(.*?)\1")
# wpis tablicy locales: 'pl' | "pl" | { path: 'pl', codes: [...] }
_ENTRY_RE      = re.compile(r"\{[^{}]*\}|'([^']*)'|\"([^\"]*)\"")
_PATH_RE       = re.compile(r"\bpath\s*:\s*(['\"])(.*?)\1")
_LINE_COMMENT  = re.compile(r"(?<![:'\"])//[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def find_astro_config(root: str | Path) -> Path:
    root = Path(root)
    for name in ASTRO_CONFIG_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(
        f"Brak pliku konfiguracyjnego Astro w {root} "
        f"(szukano: {', '.join(ASTRO_CONFIG_NAMES)})"
    )


def _balanced(source: str, start: int, opening: str, closing: str) -> str | None:
    """Treść od `start` do domykającego nawiasu (z liczeniem zagnieżdżeń)."""
    depth = 1
    for i in range(start, len(source)):
        ch = source[i]
        if ch == opening:
            depth += 1
        elif ch == closing:
            depth -= 1
            if depth == 0:
                return source[start:i]
    return None


def _i18n_block(source: str) -> str | None:
    m = _I18N_RE.search(source)
    if m is None:
        return None
    return _balanced(source, m.end(), "{", "}")


def parse_astro_i18n(source: str) -> AstroI18n | None:
    """Parsuje blok i18n z tekstu astro.config.*; None gdy go brak."""
    source = _BLOCK_COMMENT.sub("", source)
    source = _LINE_COMMENT.sub("", source)
    block = _i18n_block(source)
    if block is None:
        return None

    locales: list[str] = []
    lm = _LOCALES_RE.search(block)
    entries = _balanced(block, lm.end(), "[", "]") if lm else None
    if entries:
        for entry in _ENTRY_RE.finditer(entries):
            if entry.group(0).startswith("{"):
                pm = _PATH_RE.search(entry.group(0))
                if pm:
                    locales.append(pm.group(2))
            else:
                locales.append(entry.group(1) if entry.group(1) is not None else entry.group(2))

    dm = _DEFAULT_RE.search(block)
    default_locale = dm.group(2) if dm else (locales[0] if locales else "")
    return AstroI18n(locales=locales, default_locale=default_locale)


def load_astro_config(root: str | Path) -> AstroI18n | None:
    path = find_astro_config(root)
    return parse_astro_i18n(path.read_text(encoding="utf-8"))


def extract_relevant_content(
    path: str | Path,
    pattern: RegionPattern | str | None = None,
) -> ExtractionResult:
    """Treść strony do tłumaczenia (bez <style>) + wycięte bloki."""
    return extract_file(path, pattern)


def suggested_astro_config(project: ProjectInfo) -> str:
    """Fragment astro.config.mjs zgodny z językami projektu Apiglot."""
    default = project.source_language.code if project.source_language else ""
    locales = ", ".join(f"'{lang.code}'" for lang in project.locales())
    return (
        ASTRO_CONFIG_TEMPLATE
        .replace("{DEFAULT_LOCALE}", default)
        .replace("{TARGET_LOCALES}", locales)
    )
