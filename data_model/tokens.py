"""
data_model/tokens.py — słownik tokenów przekazywanych z Tokenizera do Assemblera.

Token to unia pięciu niemutowalnych wariantów:
  TextToken          — tekst na danym poziomie struktury (1 = najwyższy,
                       PLAIN_LEVEL = treść niesklasyfikowana)
  InfoHeaderToken    — kolejna treść należy do pola metadanych
  SectionHeaderToken — kolejny tekst należy do sekcji tekstowej
  CourseHeaderToken  — (częściowe) metadane kursu wyciągnięte z tabeli
  ListBoundaryToken  — wejście / wyjście z listy (liczone, nie bool)

Tokeny są produkowane w kolejności dokumentu; pary START/END są zbalansowane.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

# Poziom "niesklasyfikowany" (zwykły akapit, element listy itp.)
PLAIN_LEVEL = 7

# Poziom wymuszany dla tekstu następującego po frazie sekcji
SECTION_TEXT_LEVEL = 2


class TokenKind(StrEnum):
    TEXT           = "text"
    INFO_HEADER    = "info_header"
    SECTION_HEADER = "section_header"
    COURSE_HEADER  = "course_header"
    LIST_BOUNDARY  = "list_boundary"


class ListBoundary(StrEnum):
    START = "start"
    END   = "end"


@dataclass(frozen=True, slots=True)
class TextToken:
    value: str
    level: int = PLAIN_LEVEL
    kind: TokenKind = field(default=TokenKind.TEXT, init=False)


@dataclass(frozen=True, slots=True)
class InfoHeaderToken:
    value: str
    kind: TokenKind = field(default=TokenKind.INFO_HEADER, init=False)


@dataclass(frozen=True, slots=True)
class SectionHeaderToken:
    value: str
    kind: TokenKind = field(default=TokenKind.SECTION_HEADER, init=False)


@dataclass(frozen=True, slots=True)
class CourseHeaderToken:
    """
    Metadane kursu z tabeli, kluczowane słownikiem pól metadanych.

    Słownik `value` nie jest modyfikowany po utworzeniu tokenu; scalanie
    dwóch tabel tworzy nowy token (merged_with).
    """
    value: dict[str, str]
    kind: TokenKind = field(default=TokenKind.COURSE_HEADER, init=False)

    def merged_with(self, other: CourseHeaderToken) -> CourseHeaderToken:
        """Nowy token: pola z `other` nadpisują pola z `self`."""
        return CourseHeaderToken({**self.value, **other.value})


@dataclass(frozen=True, slots=True)
class ListBoundaryToken:
    value: ListBoundary
    kind: TokenKind = field(default=TokenKind.LIST_BOUNDARY, init=False)


Token: TypeAlias = (
    TextToken
    | InfoHeaderToken
    | SectionHeaderToken
    | CourseHeaderToken
    | ListBoundaryToken
)


def describe_token(token: Token) -> tuple[str, str]:
    """Zwraca (rodzaj, skrócony opis wartości) — do podglądu w terminalu."""
    match token:
        case TextToken(value=value, level=level):
            return f"{token.kind} L{level}", value
        case CourseHeaderToken(value=value):
            return str(token.kind), "; ".join(f"{k}={v}" for k, v in value.items())
        case _:
            return str(token.kind), str(token.value)
