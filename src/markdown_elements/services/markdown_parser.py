"""Markdown parsing to a flat list of block elements.

Line-based segmenter for a restricted syntax:
- ``#``-run + space starts a heading (level = run length, unbounded)
- ``\\n\\n`` is an explicit paragraph break
- every other line is a paragraph; its text goes through the inline parser

A single ``\\n`` ending a heading or paragraph line is consumed without output.
Anything else (lists, tables, links, escapes) is plain paragraph text.
"""

from __future__ import annotations

import logging

from ..elements import (
    BreakpointElement,
    Element,
    HeadingElement,
    NormalTag,
    ParagraphElement,
)
from .cursor import NEWLINE, TextCursor
from .ids import IdFactory, make_id_factory
from .inline_parser import extract_tags

logger = logging.getLogger(__name__)

BREAKPOINT = "\n\n"
HEADING_SIGN = "#"


def heading_level(cursor: TextCursor) -> int:
    """Heading level at the cursor, or 0 when the line is not a heading.

    ``#Hello`` (no space after the run) is not a heading.
    """
    level = cursor.run_length(HEADING_SIGN)
    if level and cursor.peek(level) == " ":
        return level
    return 0


def _parse_heading(cursor: TextCursor, level: int, ids: IdFactory) -> HeadingElement:
    end = cursor.line_end()
    # Skip the '#' run and exactly one space.
    content = cursor.text[cursor.pos + level + 1 : end].strip()
    cursor.move_to(end)
    return HeadingElement(level=level, tags=(NormalTag(content=content, id=ids()),), id=ids())


def _parse_paragraph(cursor: TextCursor, ids: IdFactory) -> ParagraphElement:
    end = cursor.line_end()
    tags = extract_tags(cursor.text[cursor.pos : end], ids)
    cursor.move_to(end)
    return ParagraphElement(tags=tuple(tags), id=ids())


def parse_markdown_elements(text: str, ids: IdFactory | None = None) -> list[Element]:
    """Parse ``text`` into headings, paragraphs and breakpoints, in source order.

    ``ids`` supplies element and tag ids; defaults to the configured strategy.
    Never raises for string input; ``""`` gives ``[]``.
    """
    if ids is None:
        ids = make_id_factory()
    elements: list[Element] = []
    cursor = TextCursor(text)

    while not cursor.at_end():
        level = heading_level(cursor)
        if level:
            elements.append(_parse_heading(cursor, level, ids))
        elif cursor.starts_with(BREAKPOINT):
            elements.append(BreakpointElement(id=ids()))
            cursor.advance(len(BREAKPOINT))
        else:
            elements.append(_parse_paragraph(cursor, ids))

        if cursor.peek() == NEWLINE and not cursor.starts_with(BREAKPOINT):
            cursor.advance(1)

    logger.debug("Parsed %d elements from %d chars", len(elements), len(text))
    return elements
