"""
apiglot — narzędzie CLI dla Apiglot.

Użycie:
  apiglot <komenda> [opcje]

Komendy:
  init               Tworzy lokalny plik konfiguracyjny projektu Apiglot.
  info               Informacje o narzędziu i wczytanej konfiguracji.
  project info       Informacje o projekcie z API.
  project languages  Języki docelowe projektu.
  generate ts-types  Generuje typy TypeScript dla kluczy tłumaczeń.
  translate          Tłumaczy strony .astro na języki projektu.
"""

from __future__ import annotations

import argparse
import sys

from apiglot import __version__
from apiglot.commands import init as cmd_init
from apiglot.commands import info as cmd_info
from apiglot.commands import project as cmd_project
from apiglot.commands import generate as cmd_generate
from apiglot.commands import translate as cmd_translate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apiglot",
        description="Oficjalne CLI Apiglot — wdrażanie i18n w projektach.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"apiglot {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_init.add_parser(subparsers)
    cmd_info.add_parser(subparsers)
    cmd_project.add_parser(subparsers)
    cmd_generate.add_parser(subparsers)
    cmd_translate.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla polskich znaków.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")

    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
