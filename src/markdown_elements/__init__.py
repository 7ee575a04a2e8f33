"""Restricted Markdown -> typed block elements with inline tags."""

from .elements import (
    BoldTag,
    BreakpointElement,
    Element,
    HeadingElement,
    ItalicTag,
    NormalTag,
    ParagraphElement,
    Tag,
)
from .services.ids import IdFactory, counter_ids, make_id_factory, uuid4_ids
from .services.inline_parser import extract_tags
from .services.markdown_parser import parse_markdown_elements

__all__ = [
    "BoldTag",
    "BreakpointElement",
    "Element",
    "HeadingElement",
    "IdFactory",
    "ItalicTag",
    "NormalTag",
    "ParagraphElement",
    "Tag",
    "counter_ids",
    "extract_tags",
    "make_id_factory",
    "parse_markdown_elements",
    "uuid4_ids",
]
