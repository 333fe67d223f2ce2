from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class Position:
    line: int
    character: int = 0


@dataclass(frozen=True)
class Selection:
    start: Position
    end: Position

    @classmethod
    def cursor(cls, line: int, character: int = 0) -> "Selection":
        pos = Position(line, character)
        return cls(pos, pos)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


class TextDocument(Protocol):
    """What the reflow action needs from an editor buffer."""

    @property
    def language_id(self) -> str: ...

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> str: ...

    def replace(self, start: Position, end: Position, text: str) -> None: ...



_LINE_BREAK_RE = re.compile(r"(\r\n|\n|\r)")


@dataclass
class LineDocument:
    """In-memory :class:`TextDocument` holding a list of lines.

    ``endings`` keeps each line's own terminator ("" for an unterminated last
    line) so text outside a replaced range is written back unchanged.
    """

    lines: List[str] = field(default_factory=list)
    language_id: str = "plaintext"
    endings: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.endings) != len(self.lines):
            self.endings = ["\n"] * max(len(self.lines) - 1, 0) + [""] * min(len(self.lines), 1)

    @classmethod
    def from_text(cls, text: str, language_id: Optional[str] = None) -> "LineDocument":
        parts = _LINE_BREAK_RE.split(text)
        lines = parts[0::2]
        endings = parts[1::2] + [""]
        if lines[-1] == "":
            # text ends with a line break, or is empty
            lines.pop()
            endings.pop()
        return cls(lines=lines, language_id=language_id or "plaintext", endings=endings)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def replace(self, start: Position, end: Position, text: str) -> None:
        head = self.lines[start.line][: start.character]
        tail = self.lines[end.line][end.character :]
        replacement = (head + text + tail).split("\n")
        newline = self.endings[start.line] or "\n"
        endings = [newline] * (len(replacement) - 1) + [self.endings[end.line]]
        self.lines[start.line : end.line + 1] = replacement
        self.endings[start.line : end.line + 1] = endings

    @property
    def text(self) -> str:
        return "".join(line + ending for line, ending in zip(self.lines, self.endings))
