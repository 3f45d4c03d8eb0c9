from __future__ import annotations

from pathlib import Path

import pytest
from bs4.element import Comment, NavigableString

from data_model.documents import NodeRole
from html_parser.parser import (
    DocumentRegionError,
    load_html,
    node_role,
    node_text,
    parse_html,
    select_course_region,
    table_cell_texts,
)


def test_node_role_maps_tags_to_roles() -> None:
    soup = parse_html(
        "<h1>a</h1><h4>b</h4><strong>c</strong><b>d</b><ul><li>e</li></ul>"
        "<ol></ol><blockquote>f</blockquote><table></table><div>g</div>"
    )
    roles = [node_role(tag) for tag in soup.find_all(recursive=False)]
    assert roles == [
        NodeRole.HEADING_1,
        NodeRole.HEADING_4,
        NodeRole.EMPHASIS,
        NodeRole.EMPHASIS,
        NodeRole.LIST_UNORDERED,
        NodeRole.LIST_ORDERED,
        NodeRole.BLOCKQUOTE,
        NodeRole.TABLE,
        NodeRole.OTHER,
    ]
    assert node_role(soup.find("li")) is NodeRole.LIST_ITEM


def test_node_role_text_and_comment() -> None:
    soup = parse_html("<p>x<!-- note --></p>")
    text, comment = list(soup.p.children)
    assert isinstance(text, NavigableString)
    assert isinstance(comment, Comment)
    assert node_role(text) is NodeRole.TEXT
    assert node_role(comment) is NodeRole.OTHER
    assert node_text(comment) == ""


def test_node_text_collapses_whitespace() -> None:
    soup = parse_html("<p>  Course\n    Content&nbsp;Here <b>now</b> </p>")
    assert node_text(soup.p) == "Course Content Here now"


def test_table_cell_texts_in_document_order() -> None:
    soup = parse_html(
        "<table><tr><th>Course Code</th><td> CS101 </td></tr>"
        "<tr><th>Course Title</th><td>Intro</td></tr></table>"
    )
    assert table_cell_texts(soup.table) == ["Course Code", "CS101", "Course Title", "Intro"]


def test_load_html_drops_noise_tags(tmp_path: Path) -> None:
    path = tmp_path / "doc.html"
    path.write_text(
        "<html><head><style>p{}</style></head><body><script>x()</script><p>Zażółć</p></body></html>",
        encoding="utf-8",
    )
    soup = load_html(path)
    assert soup.find("script") is None
    assert soup.find("style") is None
    assert node_text(soup.body) == "Zażółć"


def _region_soup():
    return parse_html(
        "<html><body>"
        "<h1>Curriculum</h1>"
        "<table id='a'><tr><td>x</td></tr></table>"
        "<div id='wrap'><table id='b'><tr><td>y</td></tr></table></div>"
        "<p>one</p>\n<p>two</p>"
        "</body></html>"
    )


def test_select_course_region_from_body_child_table() -> None:
    region = select_course_region(_region_soup(), 0)
    assert [n.name for n in region] == ["table", "div", "p", "p"]
    assert region[0]["id"] == "a"


def test_select_course_region_climbs_to_top_level_ancestor() -> None:
    region = select_course_region(_region_soup(), 1)
    assert [n.name for n in region] == ["div", "p", "p"]
    assert region[0]["id"] == "wrap"


def test_select_course_region_without_body() -> None:
    soup = parse_html("<p>before</p><table><tr><td>x</td></tr></table><p>after</p>")
    region = select_course_region(soup, 0)
    assert [n.name for n in region] == ["table", "p"]


def test_select_course_region_index_out_of_range() -> None:
    with pytest.raises(DocumentRegionError):
        select_course_region(_region_soup(), 2)
    with pytest.raises(ValueError):
        select_course_region(_region_soup(), -1)
