"""Komenda: sylx tables — lista tabel dokumentu (pomoc przy wyborze INDEKS_TABELI)."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from html_parser.parser import list_tables, load_html, table_cell_texts

console = Console()


def run(args: argparse.Namespace) -> None:
    html_path = Path(args.html_file)
    if not html_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {html_path}")
        raise SystemExit(1)

    try:
        tables = list_tables(load_html(html_path))
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
        raise SystemExit(1)

    if not tables:
        console.print("[yellow]Dokument nie zawiera tabel.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("INDEKS",  justify="right", no_wrap=True, style="bold cyan")
    table.add_column("KOMÓREK", justify="right", no_wrap=True)
    table.add_column("POCZĄTEK", no_wrap=False, max_width=90)

    for i, t in enumerate(tables):
        cells = table_cell_texts(t)
        preview = " | ".join(c for c in cells[: args.cells] if c)
        table.add_row(str(i), str(len(cells)), Text(preview))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(tables)} tabel[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tables",
        help="Listuje tabele dokumentu HTML z indeksami.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje wszystkie tabele dokumentu (indeks 0-based, liczba komórek,
pierwsze komórki), żeby wybrać INDEKS_TABELI dla sylx extract / sylx tokens.

Przykłady:
  sylx tables program.html
  sylx tables program.html --cells 8
        """,
    )
    p.add_argument(
        "html_file",
        metavar="PLIK.html",
        help="Ścieżka do dokumentu HTML.",
    )
    p.add_argument(
        "--cells",
        type=int,
        default=4,
        metavar="N",
        help="Ile pierwszych komórek pokazać (domyślnie: 4).",
    )
    p.set_defaults(func=run)
