from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .extract import CommentBlock
from .units import CodeSpan, ListItem, Paragraph, Separator, TagGroup, Unit
from .wrap import wrap_words


DOCUMENTATION = "documentation"
GENERIC = "generic"
MODES = (DOCUMENTATION, GENERIC)

FENCE = "```"
DEFAULT_VERBATIM_TAGS: Tuple[str, ...] = ("@examples", "@examplesIf", "@usage")

_LIST_RE = re.compile(r"^\s*[-*]\s")
_BULLET_RE = re.compile(r"^(\s*)([-*])\s+(.*)$")
_SIGNATURE_RE = re.compile(r"^(@\w+)(?:\s+(\S+))?\s*(.*)$")


@dataclass
class ReflowOptions:
    """Knobs of the reflow engine.

    ``mode`` selects how ``@tag`` lines are treated. In ``documentation`` mode
    they form tag groups: the tag signature leads the first line, continuation
    lines are indented by ``tag_indent`` and a separator line goes between
    groups with different tags. In ``generic`` mode a tag line only starts a
    new plain paragraph.
    """

    mode: str = DOCUMENTATION
    wrap_lists: bool = False
    verbatim_tags: Tuple[str, ...] = DEFAULT_VERBATIM_TAGS
    tag_indent: str = "  "

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"unknown reflow mode {self.mode!r}, expected one of {', '.join(MODES)}")

    @property
    def documentation(self) -> bool:
        return self.mode == DOCUMENTATION


def is_tag_line(line: str) -> bool:
    s = line.lstrip()
    return s.startswith("@") and not s.startswith("@@")


def is_list_line(line: str) -> bool:
    return bool(_LIST_RE.match(line))


def segment(content_lines: Sequence[str], options: Optional[ReflowOptions] = None) -> List[Unit]:
    """Split stripped comment content into reflow units."""
    options = options or ReflowOptions()
    units: List[Unit] = []
    pending: Optional[Unit] = None
    code: Optional[CodeSpan] = None
    verbatim: Optional[CodeSpan] = None
    current_tag: Optional[str] = None

    def flush():
        nonlocal pending
        if pending is not None:
            units.append(pending)
            pending = None

    for line in content_lines:
        trimmed = line.strip()

        # an open fence swallows everything up to and including its closing fence
        if code is not None:
            code.lines.append(line)
            if trimmed.startswith(FENCE):
                code = None
            continue

        if not trimmed:
            flush()
            verbatim = None
            current_tag = None
            units.append(Separator())
            continue

        if trimmed.startswith(FENCE):
            flush()
            verbatim = None
            code = CodeSpan([line])
            units.append(code)
            continue

        if is_tag_line(line):
            flush()
            verbatim = None
            if not options.documentation:
                pending = Paragraph([line])
                continue
            token = trimmed.split()[0]
            if current_tag is not None and token != current_tag:
                units.append(Separator())
            current_tag = token
            if token in options.verbatim_tags:
                verbatim = CodeSpan([line])
                units.append(verbatim)
            else:
                pending = TagGroup(token, [line])
            continue

        if verbatim is not None:
            verbatim.lines.append(line)
            continue

        if is_list_line(line):
            flush()
            item = ListItem(line)
            if options.wrap_lists:
                pending = item
            else:
                units.append(item)
            continue

        if isinstance(pending, ListItem):
            if line[:1].isspace():
                pending.continuation.append(line)
                continue
            flush()

        if pending is None:
            pending = Paragraph([line])
        else:
            pending.lines.append(line)

    flush()
    return units


def _starts_unit(word: str) -> bool:
    # read back as a bullet, tag or fence when it opens a line
    return word in ("-", "*") or is_tag_line(word) or word.startswith(FENCE)


def _bind_words(words: Sequence[str]) -> List[str]:
    bound: List[str] = []
    for word in words:
        if bound and _starts_unit(word):
            bound[-1] = f"{bound[-1]} {word}"
        else:
            bound.append(word)
    return bound


def _wrap_led(words: Sequence[str], width: int, lead_in: str, indent: str) -> List[str]:
    words = list(words)
    while words and _starts_unit(words[0]):
        lead_in = f"{lead_in} {words.pop(0)}"
    return wrap_words(_bind_words(words), width, lead_in=lead_in, indent=indent)


def _wrap_plain(lines: Sequence[str], width: int) -> List[str]:
    return wrap_words(_bind_words(" ".join(lines).split()), width)


def _wrap_list(item: ListItem, width: int, options: ReflowOptions) -> List[str]:
    m = _BULLET_RE.match(item.line)
    if not options.wrap_lists or not m:
        return [item.line, *item.continuation]
    words = m.group(3).split() + " ".join(item.continuation).split()
    bullet = m.group(1) + m.group(2)
    if not words:
        return [bullet]
    # the first word always rides on the bullet so the line stays a list item
    hang = " " * (len(bullet) + 1)
    return _wrap_led(words[1:], width, lead_in=f"{bullet} {words[0]}", indent=hang)


def _wrap_tag(group: TagGroup, width: int, options: ReflowOptions) -> List[str]:
    m = _SIGNATURE_RE.match(group.lines[0].strip())
    if not m:
        return _wrap_plain(group.lines, width)
    signature = m.group(1)
    if m.group(2):
        signature += " " + m.group(2)
    words = m.group(3).split() + " ".join(group.lines[1:]).split()
    return _wrap_led(words, width, lead_in=signature, indent=options.tag_indent)


def render(
    units: Sequence[Unit],
    block: CommentBlock,
    max_width: int,
    options: Optional[ReflowOptions] = None,
) -> List[str]:
    options = options or ReflowOptions()
    width = max_width - len(block.indentation) - len(block.prefix)
    lead = block.lead
    out: List[str] = []
    for unit in units:
        if isinstance(unit, Separator):
            body = [""]
        elif isinstance(unit, CodeSpan):
            body = unit.lines
        elif isinstance(unit, Paragraph):
            body = _wrap_plain(unit.lines, width)
        elif isinstance(unit, ListItem):
            body = _wrap_list(unit, width, options)
        elif isinstance(unit, TagGroup):
            body = _wrap_tag(unit, width, options)
        else:
            raise TypeError(f"unknown reflow unit: {unit!r}")
        out.extend((lead + text).rstrip() for text in body)
    return out


def reflow_block(block: CommentBlock, max_width: int = 80, options: Optional[ReflowOptions] = None) -> str:
    """Rewrap ``block`` to ``max_width`` columns and return the replacement text."""
    lines = render(segment(block.content_lines, options), block, max_width, options)
    if block.opener is not None:
        lines.insert(0, block.opener)
    if block.closer is not None:
        lines.append(block.closer)
    return "\n".join(lines)
