"""
syllabus/tokenizer.py — zamiana drzewa dokumentu na strumień tokenów.

Architektura:
  węzeł → node_role() → TABLE      → odczyt tabeli kursu → CourseHeaderToken
                      → BLOCKQUOTE → rekurencja w dzieci (bez tokenu)
                      → UL / OL    → ListBoundary(START), <li> …, ListBoundary(END)
                      → pozostałe  → klasyfikacja tekstu → SectionHeader / Text

Ostatni wyemitowany token jest trzymany jako "oczekujący" (bufor jednego
tokenu). Nagłówek kursu z tabeli może go jeszcze odrzucić (zduplikowany
tytuł kursu tuż nad tabelą) albo zastąpić scalonym nagłówkiem (dwie tabele
opisujące ten sam kurs). Dopiero kolejny token zatwierdza oczekujący.

Publiczne API:
  Tokenizer(rules).visit(node) …; Tokenizer.finish() -> list[Token]
"""

from __future__ import annotations

from bs4.element import PageElement

from data_model.documents import LIST_ROLES, NodeRole
from data_model.tokens import (
    PLAIN_LEVEL,
    SECTION_TEXT_LEVEL,
    CourseHeaderToken,
    ListBoundary,
    ListBoundaryToken,
    SectionHeaderToken,
    TextToken,
    Token,
)
from html_parser.parser import child_nodes, list_items, node_role, node_text, table_cell_texts

from .course_tables import CourseTableReader, reader_for
from .variants import VariantRules
from .vocabulary import COURSE_TITLE, PREREQUISITES, SEMESTER_MARKER, match_phrase

# Poziom struktury wg roli węzła; brak w słowniku → PLAIN_LEVEL
_LEVEL_BY_ROLE: dict[NodeRole, int] = {
    NodeRole.HEADING_1: 2,
    NodeRole.HEADING_2: 2,
    NodeRole.HEADING_3: 2,
    NodeRole.HEADING_4: 3,
    NodeRole.HEADING_5: 4,
    NodeRole.HEADING_6: 5,
    NodeRole.EMPHASIS:  6,
}

# Tekst, od którego zaczyna się nagłówek "wklejony" w linię prerequisites
_RUN_IN_HEADING_MARKER = "course"


class Tokenizer:
    def __init__(self, rules: VariantRules, table_reader: CourseTableReader | None = None) -> None:
        self.rules = rules
        self.table_reader = table_reader or reader_for(rules.table_strategy, rules.metadata_fields)
        self.tokens: list[Token] = []
        self.warnings: list[str] = []
        self._pending: Token | None = None

    # ------------------------------------------------------------------
    # Bufor jednego tokenu
    # ------------------------------------------------------------------

    def _emit(self, token: Token) -> None:
        if self._pending is not None:
            self.tokens.append(self._pending)
        self._pending = token

    def finish(self) -> list[Token]:
        """Zatwierdza oczekujący token i zwraca pełny strumień."""
        if self._pending is not None:
            self.tokens.append(self._pending)
            self._pending = None
        return self.tokens

    # ------------------------------------------------------------------
    # Przechodzenie drzewa
    # ------------------------------------------------------------------

    def visit(self, node: PageElement) -> None:
        role = node_role(node)
        if role is NodeRole.TABLE:
            self._visit_course_table(node)
        elif role is NodeRole.BLOCKQUOTE:
            for child in child_nodes(node):
                self.visit(child)
        elif role in LIST_ROLES:
            self._emit(ListBoundaryToken(ListBoundary.START))
            for item in list_items(node):
                self.visit(item)
            self._emit(ListBoundaryToken(ListBoundary.END))
        else:
            self._visit_text(node_text(node), _LEVEL_BY_ROLE.get(role, PLAIN_LEVEL))

    # ------------------------------------------------------------------
    # Tabela kursu
    # ------------------------------------------------------------------

    def _visit_course_table(self, table: PageElement) -> None:
        values = self.table_reader.read(table_cell_texts(table), self.warnings)
        if values is None:
            return
        header = CourseHeaderToken(values)

        if not self.table_reader.merges_with_previous:
            self._emit(header)
            return

        pending = self._pending
        title = values.get(COURSE_TITLE)
        if (
            isinstance(pending, TextToken)
            and title is not None
            and pending.value.lower() == title.strip().lower()
        ):
            # nagłówek z tytułem kursu tuż nad tabelą — duplikat
            self._pending = header
        elif isinstance(pending, CourseHeaderToken):
            self._pending = pending.merged_with(header)
        else:
            self._emit(header)

    # ------------------------------------------------------------------
    # Tekst
    # ------------------------------------------------------------------

    def _visit_text(self, text: str, level: int) -> None:
        if SEMESTER_MARKER in text and level != PLAIN_LEVEL:
            return
        if not text:
            return

        phrase = match_phrase(text, self.rules.section_phrases)
        if phrase is not None:
            self._emit(SectionHeaderToken(phrase))
            rest = self._strip_phrase(text, phrase)
            if rest in ("", ":"):
                return
            level = SECTION_TEXT_LEVEL
            if phrase == PREREQUISITES and self.rules.split_prerequisites:
                if self._split_run_in_heading(rest, level):
                    return
            text = rest

        self._emit(TextToken(text, level))

    def _strip_phrase(self, text: str, phrase: str) -> str:
        rest = text[len(phrase):]
        if self.rules.strip_plural_suffix:
            rest = rest.removeprefix("s").strip().removeprefix(":")
        return rest.strip()

    def _split_run_in_heading(self, rest: str, level: int) -> bool:
        """
        "Prerequisites: Basic maths Course Objectives" — częsty błąd formatowania:
        treść prerequisites i następny nagłówek w jednej linii. Część przed
        "course" zostaje tekstem, reszta jest klasyfikowana jak nagłówek.
        Zwraca False, gdy nie ma czego rozcinać.
        """
        at = rest.lower().find(_RUN_IN_HEADING_MARKER)
        if at < 0:
            return False
        before, heading = rest[:at].strip(), rest[at:]
        if before:
            self._emit(TextToken(before, level))
        self._visit_text(heading, _LEVEL_BY_ROLE[NodeRole.HEADING_2])
        return True
