"""Komenda: sylx tokens — podgląd strumienia tokenów (debugowanie reguł)."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from data_model.tokens import TokenKind, describe_token
from syllabus.pipeline import tokenize
from sylx.commands.extract import _load_config, _load_region, _print_warnings, add_document_arguments

console = Console()

# Kolory per rodzaj tokenu
KIND_STYLE: dict[TokenKind, str] = {
    TokenKind.TEXT:           "white",
    TokenKind.INFO_HEADER:    "magenta",
    TokenKind.SECTION_HEADER: "yellow",
    TokenKind.COURSE_HEADER:  "bold cyan",
    TokenKind.LIST_BOUNDARY:  "dim",
}


def run(args: argparse.Namespace) -> None:
    config = _load_config(args)
    nodes = _load_region(args.html_file, args.table_index)

    tokens, warnings = tokenize(nodes, config.rules)
    _print_warnings(warnings)

    if not tokens:
        console.print("[yellow]Brak tokenów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("RODZAJ",  no_wrap=True)
    table.add_column("WARTOŚĆ", no_wrap=False, max_width=100)

    for i, token in enumerate(tokens):
        kind, value = describe_token(token)
        style = KIND_STYLE.get(token.kind, "")
        table.add_row(str(i), Text(kind, style=style), Text(value[: args.width]))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(tokens)} tokenów[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tokens",
        help="Wyświetla strumień tokenów regionu kursów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla tokeny (tekst, nagłówki sekcji, nagłówki kursów, granice list)
wyprodukowane przez tokenizer dla regionu kursów — bez składania rekordów.

Przykłady:
  sylx tokens program.html 3
  sylx tokens program.html 0 --variant extended --width 200
        """,
    )
    add_document_arguments(p)
    p.add_argument(
        "--width",
        type=int,
        default=120,
        metavar="N",
        help="Maksymalna długość wyświetlanej wartości (domyślnie: 120).",
    )
    p.set_defaults(func=run)
