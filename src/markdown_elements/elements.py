"""Block elements and inline tags produced by the parser.

Every node carries an opaque ``id`` supplied by the caller's id factory. All
models are frozen; tag sequences are tuples so a parse result cannot be
mutated after the fact.

JSON shape (``model_dump(mode="json")``):

- ``{"type": "heading", "level": 2, "tags": [...], "id": "..."}``
- ``{"type": "paragraph", "tags": [...], "id": "..."}``
- ``{"type": "breakpoint", "id": "..."}``

Tags: ``{"type": "normal"|"bold"|"italic", "content": "...", "id": "..."}``
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class NormalTag(_Node):
    type: Literal["normal"] = "normal"
    content: str


class BoldTag(_Node):
    type: Literal["bold"] = "bold"
    content: str


class ItalicTag(_Node):
    type: Literal["italic"] = "italic"
    content: str


Tag = Annotated[Union[NormalTag, BoldTag, ItalicTag], Field(discriminator="type")]


class HeadingElement(_Node):
    type: Literal["heading"] = "heading"
    # No upper bound: "####### x" is a level-7 heading.
    level: int = Field(ge=1)
    tags: tuple[Tag, ...]

    @property
    def tag_name(self) -> str:
        """HTML-style name, e.g. ``h2``."""
        return f"h{self.level}"


class ParagraphElement(_Node):
    type: Literal["paragraph"] = "paragraph"
    tags: tuple[Tag, ...]


class BreakpointElement(_Node):
    type: Literal["breakpoint"] = "breakpoint"


Element = Annotated[
    Union[HeadingElement, ParagraphElement, BreakpointElement],
    Field(discriminator="type"),
]
