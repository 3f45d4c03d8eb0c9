"""Komenda: sylx extract — ekstrakcja rekordów kursów z dokumentu HTML do JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from bs4.element import Tag
from rich.console import Console
from rich.table import Table
from rich import box

from data_model.courses import CourseRecord
from html_parser.parser import DocumentRegionError, load_html, select_course_region
from syllabus.config import ExtractionConfig, load_config
from syllabus.pipeline import extract_courses
from syllabus.vocabulary import COURSE_CODE, COURSE_TITLE

# stdout zostaje na JSON — komunikaty idą na stderr
console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wspólne: plik → konfiguracja → region kursów
# ---------------------------------------------------------------------------

def _load_config(args: argparse.Namespace) -> ExtractionConfig:
    try:
        return load_config(variant=args.variant, branch=getattr(args, "branch", None))
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)


def _load_region(html_file: str, table_index: int) -> list[Tag]:
    html_path = Path(html_file)
    if not html_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {html_path}")
        raise SystemExit(1)

    try:
        soup = load_html(html_path)
        return select_course_region(soup, table_index)
    except DocumentRegionError as e:
        console.print(f"[red]Błąd regionu kursów:[/red] {e}")
        raise SystemExit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
        raise SystemExit(1)


def _print_warnings(warnings: list[str]) -> None:
    for w in warnings:
        # markup=False: komunikaty zawierają surowe teksty komórek z nawiasami
        console.print(f"[warn] {w}", style="yellow", markup=False)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(courses: list[CourseRecord]) -> None:
    if not courses:
        console.print("[yellow]Brak kursów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",      justify="right", no_wrap=True, style="dim")
    table.add_column("KOD",    no_wrap=True, style="bold cyan")
    table.add_column("TYTUŁ",  no_wrap=False, max_width=50)
    table.add_column("POLA",   justify="right", no_wrap=True)
    table.add_column("SEKCJE", no_wrap=False, max_width=60)

    for i, course in enumerate(courses):
        sections = [k for k in course if k not in (COURSE_CODE, COURSE_TITLE)]
        table.add_row(
            str(i),
            course.get(COURSE_CODE, "-"),
            course.get(COURSE_TITLE, "-")[:80],
            str(len(course)),
            ", ".join(sections),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(courses)} kursów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    config = _load_config(args)
    nodes = _load_region(args.html_file, args.table_index)

    console.print(
        f"Ekstrakcja [bold]{args.html_file}[/bold] "
        f"(tabela={args.table_index}, wariant=[cyan]{config.variant}[/cyan]) …"
    )
    result = extract_courses(nodes, config)
    _print_warnings(result.warnings)
    console.print(f"Znaleziono [bold]{len(result.courses)}[/bold] kursów.")

    data = json.dumps(result.courses, ensure_ascii=False, indent=2)
    if args.output:
        out_path = Path(args.output)
        out_path.write_text(data + "\n", encoding="utf-8")
        console.print(f"[green]JSON:[/green] {out_path}  ({len(result.courses)} kursów)")
    else:
        sys.stdout.write(data + "\n")

    if args.show:
        _show_table(result.courses)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_document_arguments(p: argparse.ArgumentParser) -> None:
    """Argumenty wspólne dla komend pracujących na regionie kursów."""
    p.add_argument(
        "html_file",
        metavar="PLIK.html",
        help="Ścieżka do dokumentu HTML.",
    )
    p.add_argument(
        "table_index",
        metavar="INDEKS_TABELI",
        type=int,
        help="Indeks (0-based) tabeli, od której zaczyna się region kursów.",
    )
    p.add_argument(
        "--variant",
        choices=["generic", "extended"],
        default=None,
        help="Wariant formatu dokumentu (domyślnie: $SYLX_VARIANT lub generic).",
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Wyciąga rekordy kursów z dokumentu HTML do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga rekordy kursów (metadane z tabel + sekcje tekstowe) z dokumentu HTML.

Region kursów zaczyna się od tabeli o podanym indeksie (patrz: sylx tables)
i obejmuje całą dalszą treść dokumentu.

Przykłady:
  sylx extract program.html 3
  sylx extract program.html 3 --branch CSE --output courses.json --show
  sylx extract program.html 0 --variant extended
        """,
    )
    add_document_arguments(p)
    p.add_argument(
        "--branch",
        metavar="NAZWA",
        default=None,
        help="Wartość pola 'branch' w każdym rekordzie (domyślnie: $SYLX_BRANCH lub '').",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PLIK.json",
        default=None,
        help="Plik wynikowy JSON (domyślnie: stdout).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę kursów w terminalu (stderr).",
    )
    p.set_defaults(func=run)
