"""
data_model — struktury danych sylx.

Użycie:
  from data_model import Token, TextToken, CourseHeaderToken, CourseRecord, ...

Moduły:
  documents — NodeRole (rola węzła drzewa HTML)
  tokens    — Token i jego warianty, ListBoundary, TokenKind
  courses   — CourseRecord, BRANCH_FIELD

Przepływ:
  drzewo (NodeRole) → Tokenizer → list[Token] → Assembler → list[CourseRecord]
"""

from .documents import LIST_ROLES, NodeRole
from .tokens import (
    PLAIN_LEVEL,
    SECTION_TEXT_LEVEL,
    TokenKind,
    ListBoundary,
    TextToken,
    InfoHeaderToken,
    SectionHeaderToken,
    CourseHeaderToken,
    ListBoundaryToken,
    Token,
    describe_token,
)
from .courses import BRANCH_FIELD, CourseRecord

__all__ = [
    # documents
    "LIST_ROLES",
    "NodeRole",
    # tokens
    "PLAIN_LEVEL",
    "SECTION_TEXT_LEVEL",
    "TokenKind",
    "ListBoundary",
    "TextToken",
    "InfoHeaderToken",
    "SectionHeaderToken",
    "CourseHeaderToken",
    "ListBoundaryToken",
    "Token",
    "describe_token",
    # courses
    "BRANCH_FIELD",
    "CourseRecord",
]
