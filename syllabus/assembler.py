"""
syllabus/assembler.py — automat składający strumień tokenów w rekordy kursów.

Stan:
  courses        — wynik (tylko dopisywanie)
  _course        — rekord w budowie (lub None)
  _field         — bieżące pole tekstowe (lub None)
  _buffer        — tekst zbierany dla bieżącego pola
  _list_depth    — głębokość zagnieżdżenia list (licznik)

Format wartości pól wielolinijkowych:
  - element listy            → "- tekst\\n"
  - nagłówek jednostki (Unit) → "\\n\\n## Unit I …\\n\\n"
  - pozostały tekst          → "tekst\\n"
Wartość pola to bufor w postaci surowej (bez przycinania), np.
"- Book A\\n- Book B\\n".
"""

from __future__ import annotations

from data_model.courses import BRANCH_FIELD, CourseRecord
from data_model.tokens import (
    CourseHeaderToken,
    InfoHeaderToken,
    ListBoundary,
    ListBoundaryToken,
    SectionHeaderToken,
    TextToken,
    Token,
)

from .variants import VariantRules
from .vocabulary import COURSE_CODE, COURSE_CONTENT, PREREQUISITES, is_unit_heading

_LIST_ITEM_PREFIX = "- "
_UNIT_PREFIX = "\n\n## "


class Assembler:
    def __init__(self, rules: VariantRules, branch: str = "") -> None:
        self.rules = rules
        self.branch = branch
        self.courses: list[CourseRecord] = []
        self.warnings: list[str] = []
        self._course: CourseRecord | None = None
        self._field: str | None = None
        self._buffer: str = ""
        self._list_depth: int = 0

    # ------------------------------------------------------------------
    # Zamykanie pola / kursu
    # ------------------------------------------------------------------

    def _close_field(self) -> None:
        """
        Zapisuje bufor do bieżącego pola. Bez pola albo z pustym buforem nic
        się nie dzieje: bufor przechodzi do następnego pola, a licznik list
        zostaje. Dopiero zapis zeruje pole, bufor i licznik list.
        """
        if self._field is None or not self._buffer.strip():
            return
        if self._course is not None:
            previous = self._course.get(self._field, "")
            # ta sama sekcja drugi raz w jednym kursie → dopisz
            self._course[self._field] = previous + self._buffer
        self._field = None
        self._buffer = ""
        self._list_depth = 0

    def _close_course(self) -> None:
        if self._course is not None:
            self._close_field()
            self.courses.append(self._course)
            self._course = None

    # ------------------------------------------------------------------
    # Przejścia
    # ------------------------------------------------------------------

    def eat(self, token: Token) -> None:
        match token:
            case CourseHeaderToken():
                self._eat_course_header(token)
            case SectionHeaderToken() | InfoHeaderToken():
                self._close_field()
                self._field = token.value
            case TextToken():
                self._eat_text(token)
            case ListBoundaryToken(value=ListBoundary.START):
                self._list_depth += 1
            case ListBoundaryToken(value=ListBoundary.END):
                # zapis pola wewnątrz listy zeruje licznik przed końcem listy
                self._list_depth = max(0, self._list_depth - 1)

    def _eat_course_header(self, token: CourseHeaderToken) -> None:
        values = dict(token.value)
        if self.rules.inject_prerequisites:
            values.setdefault(PREREQUISITES, "")
        if COURSE_CODE not in values:
            # tabela, która nie opisuje kursu
            return

        values[BRANCH_FIELD] = self.branch
        missing = [f for f in self.rules.metadata_fields if f not in values]
        if missing:
            self.warnings.append(
                f"Kurs {values[COURSE_CODE]!r}: brak pól {', '.join(missing)}"
            )

        self._close_course()
        self._course = values

    def _eat_text(self, token: TextToken) -> None:
        is_unit = is_unit_heading(token.value)
        if is_unit and self._field != COURSE_CONTENT:
            self._close_field()
            self._field = COURSE_CONTENT

        if self._list_depth > 0:
            self._buffer += _LIST_ITEM_PREFIX
        elif is_unit:
            self._buffer += _UNIT_PREFIX
        self._buffer += token.value + "\n"
        if is_unit:
            self._buffer += "\n"

    # ------------------------------------------------------------------
    # Koniec strumienia
    # ------------------------------------------------------------------

    def finish(self) -> list[CourseRecord]:
        self._close_course()
        return self.courses
