"""
data_model/courses.py — rekord kursu zwracany przez Assembler.

Rekord to płaski słownik str → str. Klucze pochodzą ze słownika pól
metadanych (tabela kursu), słownika fraz sekcji (tekst) oraz jednego pola
wstrzykiwanego z konfiguracji (BRANCH_FIELD).
"""

from __future__ import annotations

from typing import TypeAlias

# Pole pochodzenia (gałąź / kierunek) — wartość z konfiguracji, nie z dokumentu
BRANCH_FIELD = "branch"

# Kolekcja rekordów w kolejności dokumentu.
CourseRecord: TypeAlias = dict[str, str]
