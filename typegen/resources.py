"""
typegen/resources.py — generowanie deklaracji TypeScript dla i18next.

Wynik merge_resources_as_interface:

    interface Resources {
      "common": {
        "hello": "Hello",
        "nav": {
          "home": "Home"
        }
      }
    }

    export default Resources;
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

RESOURCES_FILE = "resources.d.ts"
I18NEXT_FILE   = "i18next.d.ts"

I18NEXT_D_TS_TEMPLATE = """import Resources from './resources.d.ts';

declare module 'i18next' {
  interface CustomTypeOptions {
    resources: Resources;
  }
}"""

_INDENT = "  "


def _literal(value: Any) -> str:
    """Typ literałowy TS dla liścia zasobów."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if value is None:
        return "null"
    return json.dumps(str(value), ensure_ascii=False)


def _render(value: Any, depth: int) -> str:
    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = _INDENT * (depth + 1)
        lines = [
            f"{pad}{json.dumps(str(k), ensure_ascii=False)}: {_render(v, depth + 1)}"
            for k, v in value.items()
        ]
        return "{\n" + ",\n".join(lines) + "\n" + _INDENT * depth + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_render(v, depth) for v in value) + "]"
    return _literal(value)


def merge_resources_as_interface(resources: list[tuple[str, dict[str, Any]]]) -> str:
    """Scala przestrzenie nazw (namespace, zasoby) w jeden interfejs `Resources`."""
    merged: dict[str, Any] = {}
    for namespace, data in resources:
        merged[namespace] = data
    return f"interface Resources {_render(merged, 0)}\n\nexport default Resources;\n"


def write_type_files(out_dir: str | Path, resources: list[tuple[str, dict[str, Any]]]) -> tuple[Path, Path]:
    """Zapisuje resources.d.ts i i18next.d.ts; tworzy katalog gdy nie istnieje."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    resources_path = out_dir / RESOURCES_FILE
    resources_path.write_text(merge_resources_as_interface(resources), encoding="utf-8")

    i18next_path = out_dir / I18NEXT_FILE
    i18next_path.write_text(I18NEXT_D_TS_TEMPLATE, encoding="utf-8")
    return resources_path, i18next_path
