"""
page_parser — ekstrakcja treści do tłumaczenia ze stron projektu.

Publiczne API:
  extract_excluded_regions(document, pattern)   -> ExtractionResult
  extract_file(path, pattern)                   -> ExtractionResult
  reassemble(translated_content, removed)       -> str
  load_astro_config(root)                       -> AstroI18n | None
  extract_relevant_content(path, pattern)       -> ExtractionResult
  suggested_astro_config(project)               -> str
"""

from .regions import (
    RegionPattern,
    RegionScanner,
    extract_excluded_regions,
    extract_file,
    reassemble,
)
from .astro import (
    PAGE_SUFFIX,
    find_astro_config,
    parse_astro_i18n,
    load_astro_config,
    extract_relevant_content,
    suggested_astro_config,
)

__all__ = [
    "RegionPattern",
    "RegionScanner",
    "extract_excluded_regions",
    "extract_file",
    "reassemble",
    "PAGE_SUFFIX",
    "find_astro_config",
    "parse_astro_i18n",
    "load_astro_config",
    "extract_relevant_content",
    "suggested_astro_config",
]
