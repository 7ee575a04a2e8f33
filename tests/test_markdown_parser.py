import pytest
from pydantic import ValidationError

from markdown_elements import (
    BoldTag,
    BreakpointElement,
    HeadingElement,
    ItalicTag,
    NormalTag,
    ParagraphElement,
    counter_ids,
    parse_markdown_elements,
)


def shape(elements):
    """Elements without ids, for readable comparisons."""
    out = []
    for el in elements:
        tags = [(t.type, t.content) for t in getattr(el, "tags", ())]
        if isinstance(el, HeadingElement):
            out.append(("heading", el.level, tags))
        elif isinstance(el, ParagraphElement):
            out.append(("paragraph", tags))
        else:
            out.append(("breakpoint",))
    return out


def all_ids(elements):
    ids = []
    for el in elements:
        ids.append(el.id)
        ids.extend(t.id for t in getattr(el, "tags", ()))
    return ids


def test_single_heading():
    elements = parse_markdown_elements("# Hello World")
    assert shape(elements) == [("heading", 1, [("normal", "Hello World")])]
    assert isinstance(elements[0].tags[0], NormalTag)
    assert elements[0].tag_name == "h1"


def test_heading_with_breakpoint():
    elements = parse_markdown_elements("# Hello World\n\n")
    assert shape(elements) == [
        ("heading", 1, [("normal", "Hello World")]),
        ("breakpoint",),
    ]
    assert isinstance(elements[1], BreakpointElement)


def test_different_headings_with_breakpoints():
    elements = parse_markdown_elements("# Hello World\n\n## Hello World\n\n### Hello World\n\n")
    assert [(el.type, getattr(el, "level", None)) for el in elements] == [
        ("heading", 1),
        ("breakpoint", None),
        ("heading", 2),
        ("breakpoint", None),
        ("heading", 3),
        ("breakpoint", None),
    ]


def test_hash_without_space_is_paragraph():
    elements = parse_markdown_elements("#Hello World")
    assert shape(elements) == [("paragraph", [("normal", "#Hello World")])]


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6, 7, 9])
def test_heading_level_law(level):
    heading = parse_markdown_elements("#" * level + " Title  ")
    assert shape(heading) == [("heading", level, [("normal", "Title")])]

    plain = parse_markdown_elements("#" * level + "Title  ")
    assert shape(plain) == [("paragraph", [("normal", "#" * level + "Title  ")])]


def test_heading_content_is_not_styled():
    elements = parse_markdown_elements("# **Bold** and _it_")
    assert shape(elements) == [("heading", 1, [("normal", "**Bold** and _it_")])]


def test_heading_edge_cases():
    assert shape(parse_markdown_elements("# ")) == [("heading", 1, [("normal", "")])]
    assert shape(parse_markdown_elements("#")) == [("paragraph", [("normal", "#")])]
    assert shape(parse_markdown_elements("#    Spaced   ")) == [("heading", 1, [("normal", "Spaced")])]


def test_single_paragraph():
    assert shape(parse_markdown_elements("Hello World")) == [("paragraph", [("normal", "Hello World")])]


def test_paragraphs_with_breakpoints():
    elements = parse_markdown_elements("Hello World\n\nHello World\n\n")
    assert shape(elements) == [
        ("paragraph", [("normal", "Hello World")]),
        ("breakpoint",),
        ("paragraph", [("normal", "Hello World")]),
        ("breakpoint",),
    ]


def test_headings_paragraphs_and_breakpoints():
    markdown = "# Hello World\n\nHello World\n\n## Hello World\n\nHello World\n\n### Hello World\n\nHello World\n\n"
    elements = parse_markdown_elements(markdown)
    assert [el.type for el in elements] == [
        "heading", "breakpoint", "paragraph", "breakpoint",
        "heading", "breakpoint", "paragraph", "breakpoint",
        "heading", "breakpoint", "paragraph", "breakpoint",
    ]


def test_single_newline_separates_lines_without_break():
    elements = parse_markdown_elements("Line one\nLine two")
    assert shape(elements) == [
        ("paragraph", [("normal", "Line one")]),
        ("paragraph", [("normal", "Line two")]),
    ]


def test_heading_followed_by_styled_paragraph():
    elements = parse_markdown_elements("## Title\nBody **b**")
    assert shape(elements) == [
        ("heading", 2, [("normal", "Title")]),
        ("paragraph", [("normal", "Body "), ("bold", "b")]),
    ]


def test_three_newlines():
    elements = parse_markdown_elements("a\n\n\nb")
    assert shape(elements) == [
        ("paragraph", [("normal", "a")]),
        ("breakpoint",),
        ("paragraph", [("normal", "b")]),
    ]


def test_empty_and_blank_inputs():
    assert parse_markdown_elements("") == []
    assert shape(parse_markdown_elements("\n\n")) == [("breakpoint",)]
    # A lone newline still yields a paragraph with one (empty) tag.
    assert shape(parse_markdown_elements("\n")) == [("paragraph", [("normal", "")])]
    # Paragraph text is not trimmed.
    assert shape(parse_markdown_elements("   ")) == [("paragraph", [("normal", "   ")])]


def test_single_bold():
    elements = parse_markdown_elements("**Hello World**")
    assert shape(elements) == [("paragraph", [("bold", "Hello World")])]
    assert isinstance(elements[0].tags[0], BoldTag)


def test_single_bold_with_breakpoint():
    elements = parse_markdown_elements("**Hello World**\n\n")
    assert shape(elements) == [("paragraph", [("bold", "Hello World")]), ("breakpoint",)]


def test_unterminated_bold_is_literal():
    assert shape(parse_markdown_elements("**Hello")) == [("paragraph", [("normal", "**Hello")])]


def test_italic_paragraph():
    elements = parse_markdown_elements("_Hello_ World")
    assert isinstance(elements[0].tags[0], ItalicTag)
    assert shape(elements) == [("paragraph", [("italic", "Hello"), ("normal", " World")])]


def test_ids_are_unique():
    markdown = "# T\n\nSome **b** and _i_ text\n\n## U\nplain\n\n"
    for ids in (None, counter_ids()):
        collected = all_ids(parse_markdown_elements(markdown, ids))
        assert len(collected) == len(set(collected))


def test_counter_ids_are_deterministic():
    markdown = "# T\n\nSome **b** and _i_ text"
    first = parse_markdown_elements(markdown, counter_ids())
    second = parse_markdown_elements(markdown, counter_ids())
    assert all_ids(first) == all_ids(second)
    assert set(all_ids(parse_markdown_elements("# A", counter_ids()))) == {"id-1", "id-2"}


def test_elements_are_frozen():
    element = parse_markdown_elements("# Hello")[0]
    with pytest.raises(ValidationError):
        element.level = 2
    assert isinstance(element.tags, tuple)


def _reconstruct(element):
    parts = []
    for tag in element.tags:
        if tag.type == "bold":
            parts.append(f"**{tag.content}**")
        elif tag.type == "italic":
            parts.append(f"_{tag.content}_")
        else:
            parts.append(tag.content)
    text = "".join(parts)
    if element.type == "heading":
        text = "#" * element.level + " " + text
    return text


@pytest.mark.parametrize(
    "line",
    [
        "plain text",
        "**bold** then _italic_ then rest",
        "_a_ and **b** tail",
        "x **one** y **two** z",
        "snake_case and **Hello",
        "a_b_c_d",
        "**a_b**c_",
        "### Heading text",
    ],
)
def test_coverage_law(line):
    (element,) = parse_markdown_elements(line)
    assert _reconstruct(element) == line


def test_breaks_join_independent_chunks():
    chunks = ["# T", "para **b**", "x _i_ y", "#nohead"]
    whole = shape(parse_markdown_elements("\n\n".join(chunks)))
    expected = []
    for i, chunk in enumerate(chunks):
        if i:
            expected.append(("breakpoint",))
        expected.extend(shape(parse_markdown_elements(chunk)))
    assert whole == expected


def test_json_shape():
    element = parse_markdown_elements("## Hi", counter_ids())[0]
    assert element.model_dump(mode="json") == {
        "id": "id-2",
        "type": "heading",
        "level": 2,
        "tags": [{"id": "id-1", "type": "normal", "content": "Hi"}],
    }
