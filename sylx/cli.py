"""
sylx — narzędzie CLI do ekstrakcji sylabusów kursów z dokumentów HTML.

Użycie:
  sylx <komenda> [opcje]

Komendy:
  extract   Wyciąga rekordy kursów z dokumentu HTML do JSON.
  tokens    Wyświetla strumień tokenów regionu kursów.
  tables    Listuje tabele dokumentu HTML z indeksami.
"""

from __future__ import annotations

import argparse
import sys

# JSON idzie na stdout z ensure_ascii=False, a treść sylabusów (i komunikaty)
# bywa spoza ASCII — niezależnie od kodowania terminala piszemy w UTF-8.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from sylx.commands import extract as cmd_extract
from sylx.commands import tokens as cmd_tokens
from sylx.commands import tables as cmd_tables


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sylx",
        description="sylx — ekstrakcja sylabusów kursów z HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="sylx 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_tokens.add_parser(subparsers)
    cmd_tables.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
