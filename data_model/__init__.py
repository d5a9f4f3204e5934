"""
data_model — struktury danych apiglot.

Użycie:
  from data_model import ApiglotConfig, ProjectInfo, ExtractionResult, ...

Moduły:
  config      — ApiglotConfig (apiglot.config.json + środowisko)
  project     — Language, ProjectInfo
  extraction  — ExtractionResult
  translation — LastModified, SourceFile, TranslationRequest, AstroI18n
"""

from .config import ApiglotConfig, DEFAULT_HOST, DEFAULT_PAGES_DIR, DEFAULT_TIMEOUT
from .project import Language, ProjectInfo
from .extraction import ExtractionResult
from .translation import AstroI18n, LastModified, SourceFile, TranslationRequest

__all__ = [
    "ApiglotConfig",
    "DEFAULT_HOST",
    "DEFAULT_PAGES_DIR",
    "DEFAULT_TIMEOUT",
    "Language",
    "ProjectInfo",
    "ExtractionResult",
    "AstroI18n",
    "LastModified",
    "SourceFile",
    "TranslationRequest",
]
