"""html_parser/parser.py — wczytanie HTML i adapter drzewa DOM dla tokenizera."""

from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from data_model.documents import NodeRole

# Tagi zawierające szum (nie treść)
_NOISE_TAGS = {"script", "style", "noscript"}

# Tagi, na których kończy się wspinanie od tabeli w górę drzewa
_ROOT_NAMES = {"body", "[document]"}

_ROLE_BY_TAG: dict[str, NodeRole] = {
    "h1": NodeRole.HEADING_1,
    "h2": NodeRole.HEADING_2,
    "h3": NodeRole.HEADING_3,
    "h4": NodeRole.HEADING_4,
    "h5": NodeRole.HEADING_5,
    "h6": NodeRole.HEADING_6,
    "strong": NodeRole.EMPHASIS,
    "b": NodeRole.EMPHASIS,
    "table": NodeRole.TABLE,
    "tr": NodeRole.TABLE_ROW,
    "td": NodeRole.TABLE_CELL,
    "th": NodeRole.TABLE_CELL,
    "ol": NodeRole.LIST_ORDERED,
    "ul": NodeRole.LIST_UNORDERED,
    "li": NodeRole.LIST_ITEM,
    "blockquote": NodeRole.BLOCKQUOTE,
}

_WS_RE = re.compile(r"\s+")


class DocumentRegionError(ValueError):
    """Nie da się wyznaczyć regionu kursów (np. indeks tabeli poza zakresem)."""


# ---------------------------------------------------------------------------
# Wczytywanie
# ---------------------------------------------------------------------------

def parse_html(markup: str) -> BeautifulSoup:
    """Parsuje tekst HTML (parser html.parser) i usuwa tagi szumu."""
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()
    return soup


def load_html(path: str | Path) -> BeautifulSoup:
    """Wczytuje plik HTML (UTF-8) z dysku."""
    return parse_html(Path(path).read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Kontrakt węzła: rola, tekst, dzieci
# ---------------------------------------------------------------------------

def node_role(node: PageElement) -> NodeRole:
    if isinstance(node, Tag):
        return _ROLE_BY_TAG.get(node.name.lower(), NodeRole.OTHER)
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeRole.TEXT
    # komentarze, doctype, CDATA
    return NodeRole.OTHER


def normalize_space(text: str) -> str:
    """Zwija białe znaki (w tym \\xa0 i \\n) do pojedynczej spacji i przycina."""
    return _WS_RE.sub(" ", text).strip()


def node_text(node: PageElement) -> str:
    """Tekst węzła po znormalizowaniu białych znaków ('' dla komentarzy itp.)."""
    if isinstance(node, Tag):
        return normalize_space(node.get_text())
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return normalize_space(str(node))
    return ""


def child_nodes(node: PageElement) -> list[PageElement]:
    """Bezpośrednie dzieci węzła (razem z węzłami tekstowymi)."""
    if isinstance(node, Tag):
        return list(node.children)
    return []


def list_items(node: PageElement) -> list[Tag]:
    """Bezpośrednie elementy <li> listy."""
    if isinstance(node, Tag):
        return node.find_all("li", recursive=False)
    return []


def table_cell_texts(node: PageElement) -> list[str]:
    """Teksty wszystkich komórek th/td tabeli w kolejności dokumentu."""
    if isinstance(node, Tag):
        return [node_text(cell) for cell in node.find_all(["th", "td"])]
    return []


# ---------------------------------------------------------------------------
# Region kursów
# ---------------------------------------------------------------------------

def list_tables(soup: BeautifulSoup) -> list[Tag]:
    return soup.find_all("table")


def _top_level_ancestor(node: Tag) -> Tag:
    """Najwyższy przodek węzła poniżej <body> (sam węzeł, jeśli jest dzieckiem body)."""
    top = node
    while top.parent is not None and top.parent.name not in _ROOT_NAMES:
        top = top.parent
    return top


def select_course_region(soup: BeautifulSoup, table_index: int) -> list[Tag]:
    """
    Zwraca węzły do przetworzenia: przodka tabeli o indeksie `table_index`
    (0-based) leżącego bezpośrednio pod <body> oraz wszystkie jego następne
    rodzeństwo (tylko elementy) aż do końca <body>.

    Raises:
        DocumentRegionError: gdy dokument nie ma tabeli o takim indeksie.
    """
    tables = list_tables(soup)
    if not 0 <= table_index < len(tables):
        raise DocumentRegionError(
            f"Indeks tabeli {table_index} poza zakresem (dokument ma {len(tables)} tabel)."
        )
    top = _top_level_ancestor(tables[table_index])
    return [top] + [s for s in top.next_siblings if isinstance(s, Tag)]
