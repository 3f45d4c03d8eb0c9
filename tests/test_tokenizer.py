from __future__ import annotations

from bs4.element import Tag

from data_model.tokens import (
    CourseHeaderToken,
    ListBoundary,
    ListBoundaryToken,
    SectionHeaderToken,
    TextToken,
    Token,
)
from html_parser.parser import parse_html
from syllabus.tokenizer import Tokenizer
from syllabus.variants import EXTENDED_RULES, GENERIC_RULES, VariantRules


def _tokenize(html: str, rules: VariantRules = GENERIC_RULES) -> tuple[list[Token], list[str]]:
    tokenizer = Tokenizer(rules)
    for node in parse_html(html).children:
        if isinstance(node, Tag):
            tokenizer.visit(node)
    return tokenizer.finish(), tokenizer.warnings


_FULL_TABLE = """
<table>
  <tr><th>Course Title</th><td>:</td><td>Data Structures</td></tr>
  <tr><th>Course Code</th><td>:</td><td>CS201</td></tr>
  <tr><th>Number of Credits</th><td>:</td><td>4</td></tr>
  <tr><th>Prerequisites</th><td>:</td><td>CS101</td></tr>
  <tr><th>Course Type</th><td>:</td><td>Core</td></tr>
</table>
"""


# ---------------------------------------------------------------------------
# Klasyfikacja tekstu
# ---------------------------------------------------------------------------

def test_levels_by_role() -> None:
    tokens, _ = _tokenize(
        "<h1>A</h1><h2>B</h2><h3>C</h3><h4>D</h4><h5>E</h5><h6>F</h6>"
        "<strong>G</strong><b>H</b><p>I</p><div>J</div>"
    )
    assert tokens == [
        TextToken("A", 2),
        TextToken("B", 2),
        TextToken("C", 2),
        TextToken("D", 3),
        TextToken("E", 4),
        TextToken("F", 5),
        TextToken("G", 6),
        TextToken("H", 6),
        TextToken("I", 7),
        TextToken("J", 7),
    ]


def test_semester_headings_are_discarded_but_plain_text_kept() -> None:
    tokens, _ = _tokenize("<h3>Semester III</h3><b>Semester IV</b><p>Semester fee applies</p>")
    assert tokens == [TextToken("Semester fee applies", 7)]


def test_empty_nodes_produce_no_tokens() -> None:
    tokens, _ = _tokenize("<p>   </p><h2></h2>")
    assert tokens == []


def test_section_heading_alone() -> None:
    tokens, _ = _tokenize("<h4>Course Objectives</h4><p>Understand X.</p>")
    assert tokens == [
        SectionHeaderToken("course objectives"),
        TextToken("Understand X.", 7),
    ]


def test_section_heading_with_colon_only() -> None:
    tokens, _ = _tokenize("<p>Books :</p>")
    assert tokens == [SectionHeaderToken("books")]


def test_section_phrase_with_remainder_forces_level_two() -> None:
    tokens, _ = _tokenize("<p>COURSE CONTENT Unit I Basics</p>")
    assert tokens == [
        SectionHeaderToken("course content"),
        TextToken("Unit I Basics", 2),
    ]


def test_first_matching_phrase_wins() -> None:
    tokens, _ = _tokenize("<h3>Course Learning Objectives</h3><h3>Reference Books</h3>")
    assert tokens == [
        SectionHeaderToken("course learning objectives"),
        SectionHeaderToken("reference books"),
    ]


def test_prerequisites_is_plain_text_in_generic_variant() -> None:
    tokens, _ = _tokenize("<p>Prerequisites: Course CS101</p>")
    assert tokens == [TextToken("Prerequisites: Course CS101", 7)]


# ---------------------------------------------------------------------------
# Listy i cytaty
# ---------------------------------------------------------------------------

def test_list_emits_boundaries_around_items() -> None:
    tokens, _ = _tokenize("<ul><li>Book A</li><li>Book B</li></ul>")
    assert tokens == [
        ListBoundaryToken(ListBoundary.START),
        TextToken("Book A", 7),
        TextToken("Book B", 7),
        ListBoundaryToken(ListBoundary.END),
    ]


def test_nested_list_text_stays_in_outer_item() -> None:
    tokens, _ = _tokenize("<ol><li>Trees<ul><li>AVL</li></ul></li></ol>")
    assert tokens == [
        ListBoundaryToken(ListBoundary.START),
        TextToken("TreesAVL", 7),
        ListBoundaryToken(ListBoundary.END),
    ]


def test_blockquote_is_transparent() -> None:
    tokens, _ = _tokenize(
        "<blockquote><h4>Course Outcomes</h4><ul><li>Apply</li></ul> trailing note</blockquote>"
    )
    assert tokens == [
        SectionHeaderToken("course outcomes"),
        ListBoundaryToken(ListBoundary.START),
        TextToken("Apply", 7),
        ListBoundaryToken(ListBoundary.END),
        TextToken("trailing note", 7),
    ]


# ---------------------------------------------------------------------------
# Tabela kursu — wariant generic
# ---------------------------------------------------------------------------

def test_labelled_table_produces_course_header() -> None:
    tokens, warnings = _tokenize(_FULL_TABLE)
    assert tokens == [
        CourseHeaderToken({
            "course title": "Data Structures",
            "course code": "CS201",
            "number of credits": "4",
            "prerequisites": "CS101",
            "course type": "Core",
        })
    ]
    assert warnings == []


def test_empty_cell_accepted_only_for_prerequisites() -> None:
    tokens, warnings = _tokenize(
        "<table>"
        "<tr><td>Course Code</td><td></td><td>CS102</td></tr>"
        "<tr><td>Prerequisites</td><td></td><td>ignored</td></tr>"
        "</table>"
    )
    assert tokens == [CourseHeaderToken({"course code": "CS102", "prerequisites": ""})]
    assert len(warnings) == 1
    assert "course title" in warnings[0]
    assert "course type" in warnings[0]


def test_duplicate_title_heading_is_retracted() -> None:
    tokens, _ = _tokenize("<p>Intro</p><h3>data structures</h3>" + _FULL_TABLE)
    assert [t.kind for t in tokens] == ["text", "course_header"]
    assert tokens[0] == TextToken("Intro", 7)


def test_non_matching_heading_is_kept() -> None:
    tokens, _ = _tokenize("<h3>Algorithms</h3>" + _FULL_TABLE)
    assert tokens[0] == TextToken("Algorithms", 2)
    assert isinstance(tokens[1], CourseHeaderToken)


def test_consecutive_tables_are_merged() -> None:
    tokens, _ = _tokenize(
        "<table><tr><td>Course Title</td><td>Networks</td></tr>"
        "<tr><td>Number of Credits</td><td>3</td></tr></table>"
        "<table><tr><td>Course Code</td><td>CS310</td></tr>"
        "<tr><td>Course Type</td><td>Elective</td></tr>"
        "<tr><td>Number of Credits</td><td>4</td></tr></table>"
    )
    assert tokens == [
        CourseHeaderToken({
            "course title": "Networks",
            "number of credits": "4",
            "course code": "CS310",
            "course type": "Elective",
        })
    ]


def test_merge_does_not_mutate_previous_token() -> None:
    first = CourseHeaderToken({"course title": "A"})
    merged = first.merged_with(CourseHeaderToken({"course code": "AB12"}))
    assert first.value == {"course title": "A"}
    assert merged.value == {"course title": "A", "course code": "AB12"}


# ---------------------------------------------------------------------------
# Wariant extended (tabela w stałych kolumnach)
# ---------------------------------------------------------------------------

def _row_table(*cells: str) -> str:
    return "<table><tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr></table>"


def test_fixed_column_table() -> None:
    tokens, warnings = _tokenize(_row_table("CSPC21", "Data Structures", "PC", "", "4"), EXTENDED_RULES)
    assert tokens == [
        CourseHeaderToken({
            "course code": "CSPC21",
            "course title": "Data Structures",
            "course type": "PC",
            "number of credits": "4",
        })
    ]
    assert warnings == []


def test_fixed_column_table_with_invalid_code_is_discarded() -> None:
    tokens, warnings = _tokenize(_row_table("abcd12", "Data Structures", "PC", "", "4"), EXTENDED_RULES)
    assert tokens == []
    assert len(warnings) == 1
    assert "abcd12" in warnings[0]


def test_fixed_column_table_with_wrong_cell_count_is_discarded() -> None:
    tokens, warnings = _tokenize(_row_table("CSPC21", "Data Structures", "PC", "4"), EXTENDED_RULES)
    assert tokens == []
    assert "4" in warnings[0]


def test_fixed_column_tables_are_never_merged_or_retracted() -> None:
    tokens, _ = _tokenize(
        "<h3>Data Structures</h3>"
        + _row_table("CSPC21", "Data Structures", "PC", "", "4")
        + _row_table("CSPC22", "Algorithms", "PC", "", "3"),
        EXTENDED_RULES,
    )
    assert [t.kind for t in tokens] == ["text", "course_header", "course_header"]


def test_extended_prerequisites_section() -> None:
    tokens, _ = _tokenize("<p>Prerequisites: Programming basics</p>", EXTENDED_RULES)
    assert tokens == [
        SectionHeaderToken("prerequisites"),
        TextToken("Programming basics", 2),
    ]


def test_extended_strips_colon_after_phrase() -> None:
    tokens, _ = _tokenize("<p>Course Objectives : Learn</p>", EXTENDED_RULES)
    assert tokens == [
        SectionHeaderToken("course objectives"),
        TextToken("Learn", 2),
    ]


def test_extended_splits_run_in_heading_after_prerequisites() -> None:
    tokens, _ = _tokenize(
        "<p>Prerequisites: Data structures Course Outcomes: Solve problems</p>",
        EXTENDED_RULES,
    )
    assert tokens == [
        SectionHeaderToken("prerequisites"),
        TextToken("Data structures", 2),
        SectionHeaderToken("course outcomes"),
        TextToken("Solve problems", 2),
    ]


def test_extended_split_with_nothing_before_heading() -> None:
    tokens, _ = _tokenize("<p>Prerequisites: Course Objectives</p>", EXTENDED_RULES)
    assert tokens == [
        SectionHeaderToken("prerequisites"),
        SectionHeaderToken("course objectives"),
    ]
