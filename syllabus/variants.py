"""
syllabus/variants.py — warianty formatu dokumentu.

Każdy dokument przetwarzany jest w dokładnie jednym wariancie, wybieranym
konfiguracją (ExtractionConfig.variant) i wstrzykiwanym do Tokenizera i
Assemblera w konstruktorze:

  generic  — tabela kursu z etykietami pól ("Course Code", ":", "CS101" …),
             podstawowy zestaw fraz sekcji
  extended — tabela kursu w pięciu stałych kolumnach (code, title, type, –,
             credits), frazy sekcji + "prerequisites", rozcinanie
             prerequisites sklejonych z następnym nagłówkiem
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .vocabulary import EXTENDED_SECTION_PHRASES, METADATA_FIELDS, SECTION_PHRASES


class DocumentVariant(StrEnum):
    GENERIC  = "generic"
    EXTENDED = "extended"


class TableStrategy(StrEnum):
    LABELLED     = "labelled"       # etykieta → wartość, kolejność dowolna
    FIXED_COLUMN = "fixed_column"   # 5 komórek w stałej kolejności


@dataclass(frozen=True, slots=True)
class VariantRules:
    """
    Reguły wariantu.

    - section_phrases:      frazy otwierające sekcje tekstowe
    - metadata_fields:      pola metadanych sprawdzane w diagnostyce
    - table_strategy:       sposób czytania tabeli kursu
    - strip_plural_suffix:  po frazie sekcji usuń jeszcze "s" i ":"
    - split_prerequisites:  rozcinaj "Prerequisites … Course …" na dwa węzły
    - inject_prerequisites: brakujące pole prerequisites = "" w rekordzie
    """
    variant: DocumentVariant
    section_phrases: tuple[str, ...]
    metadata_fields: tuple[str, ...]
    table_strategy: TableStrategy
    strip_plural_suffix: bool = False
    split_prerequisites: bool = False
    inject_prerequisites: bool = False


GENERIC_RULES = VariantRules(
    variant=DocumentVariant.GENERIC,
    section_phrases=SECTION_PHRASES,
    metadata_fields=METADATA_FIELDS,
    table_strategy=TableStrategy.LABELLED,
)

EXTENDED_RULES = VariantRules(
    variant=DocumentVariant.EXTENDED,
    section_phrases=EXTENDED_SECTION_PHRASES,
    metadata_fields=METADATA_FIELDS,
    table_strategy=TableStrategy.FIXED_COLUMN,
    strip_plural_suffix=True,
    split_prerequisites=True,
    inject_prerequisites=True,
)

_RULES: dict[DocumentVariant, VariantRules] = {
    DocumentVariant.GENERIC:  GENERIC_RULES,
    DocumentVariant.EXTENDED: EXTENDED_RULES,
}


def rules_for(variant: DocumentVariant | str) -> VariantRules:
    """Zwraca reguły wariantu; ValueError dla nieznanej nazwy."""
    return _RULES[DocumentVariant(variant)]
