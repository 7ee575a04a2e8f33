"""Inline span extraction: one paragraph line -> normal/bold/italic tags.

Bold is a ``**`` pair, italic a ``_`` pair. A pair needs both delimiters in the
text not yet consumed; a lone opener stays literal text.

Each scan pass looks for the first bold pair and the first italic pair. The
earlier one is emitted (with the plain text before it), then only the *other*
style is searched for in what follows. The next pass starts after the last
emitted span, so later occurrences of either style are picked up there. A pass
that finds no pair emits the rest as one normal tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from ..elements import BoldTag, ItalicTag, NormalTag, Tag
from .cursor import TextCursor
from .ids import IdFactory, make_id_factory

BOLD_SIGN = "**"
ITALIC_SIGN = "_"


@dataclass(frozen=True)
class MarkerMatch:
    """A complete delimiter pair found in a text slice (indexes relative to it)."""

    style: Literal["bold", "italic"]
    start: int
    after_end: int
    content: str


def _find_pair(text: str, sign: str, style: Literal["bold", "italic"]) -> MarkerMatch | None:
    start = text.find(sign)
    if start == -1:
        return None
    close = text.find(sign, start + len(sign))
    if close == -1:
        return None
    return MarkerMatch(
        style=style,
        start=start,
        after_end=close + len(sign),
        content=text[start + len(sign) : close].strip(),
    )


def find_bold(text: str) -> MarkerMatch | None:
    return _find_pair(text, BOLD_SIGN, "bold")


def find_italic(text: str) -> MarkerMatch | None:
    return _find_pair(text, ITALIC_SIGN, "italic")


def _styled_tag(match: MarkerMatch, ids: IdFactory) -> Tag:
    if match.style == "bold":
        return BoldTag(content=match.content, id=ids())
    return ItalicTag(content=match.content, id=ids())


def _emit(tags: list[Tag], text: str, match: MarkerMatch, ids: IdFactory) -> None:
    if match.start > 0:
        tags.append(NormalTag(content=text[: match.start], id=ids()))
    tags.append(_styled_tag(match, ids))


def extract_tags(window: str, ids: IdFactory | None = None) -> list[Tag]:
    """Split ``window`` into tags covering it left to right. Never empty."""
    if ids is None:
        ids = make_id_factory()
    if not window:
        return [NormalTag(content="", id=ids())]

    cursor = TextCursor(window)
    tags: list[Tag] = []
    while not cursor.at_end():
        remaining = cursor.remaining()
        bold = find_bold(remaining)
        italic = find_italic(remaining)
        if bold is None and italic is None:
            tags.append(NormalTag(content=remaining, id=ids()))
            break

        follow_up: Callable[[str], MarkerMatch | None] | None = None
        if bold is not None and italic is not None:
            # Same start is impossible; italic wins only when strictly earlier.
            if italic.start < bold.start:
                first, follow_up = italic, find_bold
            else:
                first, follow_up = bold, find_italic
        else:
            first = bold or italic

        _emit(tags, remaining, first, ids)
        cursor.advance(first.after_end)

        if follow_up is not None:
            rest = cursor.remaining()
            second = follow_up(rest)
            if second is not None:
                _emit(tags, rest, second, ids)
                cursor.advance(second.after_end)
    return tags
