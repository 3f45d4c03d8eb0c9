"""
syllabus/course_tables.py — odczyt metadanych kursu z tabeli.

Dwie wzajemnie wykluczające się strategie (wybór: VariantRules.table_strategy):

  LabelledTableReader     — wariant generic. Skan komórek ze wskaźnikiem
                            "oczekiwanego pola": komórka-etykieta ustawia
                            wskaźnik, następna niepusta komórka jest wartością.
  FixedColumnTableReader  — wariant extended. Dokładnie 5 komórek:
                            code | title | type | (nieużywana) | credits.

Obie strategie przyjmują teksty komórek w kolejności dokumentu i zwracają
słownik pól (lub None = zignoruj tabelę). Diagnostyka trafia do listy
`warnings` przekazanej przez wywołującego — błędy nigdy nie przerywają
przetwarzania.
"""

from __future__ import annotations

from typing import Protocol

from .variants import TableStrategy
from .vocabulary import (
    COURSE_CODE,
    COURSE_CODE_RE,
    COURSE_TITLE,
    COURSE_TYPE,
    CREDITS,
    METADATA_FIELDS,
    PREREQUISITES,
    match_phrase,
)

_FIXED_COLUMN_COUNT = 5


class CourseTableReader(Protocol):
    # True → nowy nagłówek kursu może być scalony z poprzednim / zastąpić
    # zduplikowany nagłówek tekstowy
    merges_with_previous: bool

    def read(self, cells: list[str], warnings: list[str]) -> dict[str, str] | None:
        ...


class LabelledTableReader:
    merges_with_previous = True

    def __init__(self, fields: tuple[str, ...] = METADATA_FIELDS) -> None:
        self.fields = fields

    def read(self, cells: list[str], warnings: list[str]) -> dict[str, str] | None:
        values: dict[str, str] = {}
        expected: str | None = None

        for text in cells:
            label = match_phrase(text, self.fields)
            if label is not None:
                expected = label
            elif expected is not None and text != ":" and (text != "" or expected == PREREQUISITES):
                # pusta komórka jest wartością tylko dla prerequisites ("brak wymagań")
                values[expected] = text
                expected = None

        missing = [f for f in self.fields if f not in values]
        if missing:
            warnings.append(
                f"Tabela kursu: brak pól {', '.join(missing)} "
                f"(komórki: {cells!r}, odczytano: {values!r})"
            )
        return values


class FixedColumnTableReader:
    merges_with_previous = False

    def read(self, cells: list[str], warnings: list[str]) -> dict[str, str] | None:
        if len(cells) != _FIXED_COLUMN_COUNT:
            warnings.append(
                f"Tabela kursu: oczekiwano {_FIXED_COLUMN_COUNT} komórek, "
                f"jest {len(cells)} — pomijam tabelę (komórki: {cells!r})"
            )
            return None

        code, title, course_type, _unused, credits = cells
        if not COURSE_CODE_RE.match(code):
            warnings.append(f"Tabela kursu: niepoprawny kod kursu {code!r} — pomijam tabelę")
            return None

        return {
            COURSE_CODE: code,
            COURSE_TITLE: title,
            COURSE_TYPE: course_type,
            CREDITS: credits,
        }


def reader_for(strategy: TableStrategy, fields: tuple[str, ...] = METADATA_FIELDS) -> CourseTableReader:
    if strategy is TableStrategy.FIXED_COLUMN:
        return FixedColumnTableReader()
    return LabelledTableReader(fields)
