"""
syllabus — ekstrakcja rekordów kursów z sylabusa HTML.

Interfejs publiczny:
    ExtractionConfig, load_config  — konfiguracja (wariant, branch)
    DocumentVariant, VariantRules  — warianty formatu dokumentu
    Tokenizer                      — drzewo → tokeny
    Assembler                      — tokeny → rekordy kursów
    extract_courses, tokenize      — pełny przebieg

Typowe użycie:
    from html_parser.parser import load_html, select_course_region
    from syllabus import extract_courses, load_config

    soup   = load_html("curriculum.html")
    nodes  = select_course_region(soup, table_index=3)
    result = extract_courses(nodes, load_config(variant="generic", branch="CSE"))
    for w in result.warnings:
        print(w)
"""

from .variants import DocumentVariant, VariantRules, rules_for
from .config import ExtractionConfig, load_config
from .tokenizer import Tokenizer
from .assembler import Assembler
from .pipeline import ExtractionResult, extract_courses, tokenize

__all__ = [
    "DocumentVariant",
    "VariantRules",
    "rules_for",
    "ExtractionConfig",
    "load_config",
    "Tokenizer",
    "Assembler",
    "ExtractionResult",
    "extract_courses",
    "tokenize",
]
