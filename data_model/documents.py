"""
data_model/documents.py — role węzłów drzewa dokumentu HTML.

Tokenizer nie operuje na nazwach tagów, tylko na rolach (NodeRole).
Mapowanie tag → rola robi adapter html_parser.parser.node_role().
"""

from __future__ import annotations

from enum import StrEnum


class NodeRole(StrEnum):
    """Klasyfikacja węzła drzewa dokumentu."""
    HEADING_1      = "heading_1"
    HEADING_2      = "heading_2"
    HEADING_3      = "heading_3"
    HEADING_4      = "heading_4"
    HEADING_5      = "heading_5"
    HEADING_6      = "heading_6"
    EMPHASIS       = "emphasis"        # strong / b
    TABLE          = "table"
    TABLE_ROW      = "table_row"
    TABLE_CELL     = "table_cell"
    LIST_ORDERED   = "list_ordered"
    LIST_UNORDERED = "list_unordered"
    LIST_ITEM      = "list_item"
    BLOCKQUOTE     = "blockquote"
    TEXT           = "text"            # goły węzeł tekstowy
    OTHER          = "other"


LIST_ROLES: frozenset[NodeRole] = frozenset({NodeRole.LIST_ORDERED, NodeRole.LIST_UNORDERED})
