from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class Paragraph:
    lines: List[str] = field(default_factory=list)


@dataclass
class ListItem:
    """A bullet line plus, when lists are wrapped, its indented continuation lines."""

    line: str
    continuation: List[str] = field(default_factory=list)


@dataclass
class CodeSpan:
    """Lines copied through verbatim: a fenced region or a verbatim tag section."""

    lines: List[str] = field(default_factory=list)


@dataclass
class TagGroup:
    token: str
    lines: List[str] = field(default_factory=list)


@dataclass
class Separator:
    pass


Unit = Union[Paragraph, ListItem, CodeSpan, TagGroup, Separator]
