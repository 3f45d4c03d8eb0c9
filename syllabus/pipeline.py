"""
syllabus/pipeline.py — pełny przebieg: węzły regionu → tokeny → rekordy kursów.

Publiczne API:
  tokenize(nodes, rules)          -> (tokens, warnings)
  extract_courses(nodes, config)  -> ExtractionResult
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from bs4.element import PageElement

from data_model.courses import CourseRecord
from data_model.tokens import Token

from .assembler import Assembler
from .config import ExtractionConfig
from .tokenizer import Tokenizer
from .variants import VariantRules


@dataclass(slots=True)
class ExtractionResult:
    """
    Wynik jednego przebiegu.

    - courses:  rekordy kursów w kolejności dokumentu
    - tokens:   strumień tokenów (do diagnostyki)
    - warnings: komunikaty diagnostyczne tokenizera i assemblera
    """
    courses: list[CourseRecord]
    tokens: list[Token] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def tokenize(nodes: Iterable[PageElement], rules: VariantRules) -> tuple[list[Token], list[str]]:
    tokenizer = Tokenizer(rules)
    for node in nodes:
        tokenizer.visit(node)
    return tokenizer.finish(), tokenizer.warnings


def extract_courses(nodes: Iterable[PageElement], config: ExtractionConfig) -> ExtractionResult:
    rules = config.rules
    tokens, warnings = tokenize(nodes, rules)

    assembler = Assembler(rules, branch=config.branch)
    for token in tokens:
        assembler.eat(token)
    courses = assembler.finish()

    return ExtractionResult(
        courses=courses,
        tokens=tokens,
        warnings=warnings + assembler.warnings,
    )
