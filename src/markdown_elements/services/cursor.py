"""Index cursor over a flat string.

Conventions the parser relies on:
- line end = index of the next "\\n" at or after the position, else len(text)
- marker end = index just after the closing delimiter
"""

from __future__ import annotations

NEWLINE = "\n"


def find_line_end(text: str, start: int) -> int:
    end = text.find(NEWLINE, start)
    return len(text) if end == -1 else end


class TextCursor:
    """Position into ``text`` plus accessors for what is left of it."""

    def __init__(self, text: str, pos: int = 0, end: int | None = None) -> None:
        self.text = text
        self.pos = pos
        self.end = len(text) if end is None else end

    def __repr__(self) -> str:
        return f"TextCursor(pos={self.pos}, end={self.end})"

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        if i < 0 or i >= self.end:
            return ""
        return self.text[i]

    def remaining(self) -> str:
        return self.text[self.pos : self.end]

    def starts_with(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos, self.end)

    def line_end(self) -> int:
        return min(find_line_end(self.text, self.pos), self.end)

    def run_length(self, char: str) -> int:
        """Count consecutive ``char`` starting at the position."""
        n = 0
        while self.pos + n < self.end and self.text[self.pos + n] == char:
            n += 1
        return n

    def advance(self, n: int) -> None:
        self.pos += n

    def move_to(self, pos: int) -> None:
        self.pos = pos
