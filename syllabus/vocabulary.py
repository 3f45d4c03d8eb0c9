"""
syllabus/vocabulary.py — stałe słowniki i wzorce rozpoznawania treści sylabusa.

  METADATA_FIELDS      : pola metadanych kursu (etykiety w tabeli kursu)
  SECTION_PHRASES      : frazy otwierające sekcje tekstowe (wariant generic)
  EXTENDED_SECTION_PHRASES : j.w. + "prerequisites" (wariant extended)
  COURSE_CODE_RE       : poprawny kod kursu (wariant tabular): 4 wielkie litery + 2 cyfry
  UNIT_HEADING_RE      : nagłówek jednostki "Unit I", "Unit-2:", "UNIT IV" …

Wszystkie frazy są małymi literami; dopasowanie jest prefiksowe i bez
rozróżniania wielkości liter. Frazy są testowane w kolejności; pierwsza
pasująca wygrywa.
"""

from __future__ import annotations

import re

COURSE_TITLE   = "course title"
COURSE_CODE    = "course code"
CREDITS        = "number of credits"
PREREQUISITES  = "prerequisites"
COURSE_TYPE    = "course type"
COURSE_CONTENT = "course content"

METADATA_FIELDS: tuple[str, ...] = (
    COURSE_TITLE,
    COURSE_CODE,
    CREDITS,
    PREREQUISITES,
    COURSE_TYPE,
)

SECTION_PHRASES: tuple[str, ...] = (
    COURSE_CONTENT,
    "course learning objectives",
    "course objectives",
    "course outcomes",
    "books",
    "reference books",
)

EXTENDED_SECTION_PHRASES: tuple[str, ...] = SECTION_PHRASES + (PREREQUISITES,)

# Nagłówki z tym słowem (poza zwykłym tekstem) to etykiety semestrów — pomijamy
SEMESTER_MARKER = "Semester"

# Wariant tabular: kod kursu np. "CSPC21"
COURSE_CODE_RE = re.compile(r"^[A-Z]{4}[0-9]{2}$")

# "Unit I", "UNIT-II:", "Unit 3.", "unit iv Advanced" — ale nie "Units", "Unitd", "Unit-c", "Unit Introduction"
UNIT_HEADING_RE = re.compile(
    r"^unit(?:\s+|\s*[-–:.]\s*)(?:[ivxl]+|\d+)\b",
    re.IGNORECASE | re.UNICODE,
)


def match_phrase(text: str, phrases: tuple[str, ...]) -> str | None:
    """Zwraca pierwszą frazę, od której (bez względu na wielkość liter) zaczyna się tekst."""
    lowered = text.lower()
    for phrase in phrases:
        if lowered.startswith(phrase):
            return phrase
    return None


def is_unit_heading(text: str) -> bool:
    return UNIT_HEADING_RE.match(text) is not None
