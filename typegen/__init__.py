"""typegen — deklaracje TypeScript (resources.d.ts, i18next.d.ts) dla kluczy tłumaczeń."""

from .resources import (
    I18NEXT_D_TS_TEMPLATE,
    I18NEXT_FILE,
    RESOURCES_FILE,
    merge_resources_as_interface,
    write_type_files,
)

__all__ = [
    "I18NEXT_D_TS_TEMPLATE",
    "I18NEXT_FILE",
    "RESOURCES_FILE",
    "merge_resources_as_interface",
    "write_type_files",
]
