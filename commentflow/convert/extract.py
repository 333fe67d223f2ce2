from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence


# Leading whitespace, then a run of comment markers with an optional roxygen
# quote, or a lone "*" continuation marker.
_PREFIX_RE = re.compile(r"^(\s*)([#/*]+'?\s*|\*\s+)")
_DOC_TOKEN_RE = re.compile(r"^#+\s*'")
_ANY_TOKEN_RE = re.compile(r"^(?:#+\s*'|[#/*]+)")
_OPENER_RE = re.compile(r"^/\*+$")
_CLOSER_RE = re.compile(r"^\*+/$")


@dataclass
class CommentBlock:
    prefix: str
    indentation: str
    content_lines: List[str] = field(default_factory=list)
    documentation: bool = False
    # bare "/**" and "*/" delimiter lines, kept verbatim around the body
    opener: Optional[str] = None
    closer: Optional[str] = None

    @property
    def lead(self) -> str:
        return self.indentation + self.prefix


def _drop_space(text: str, limit: int) -> str:
    n = 0
    while n < limit and n < len(text) and text[n] in " \t":
        n += 1
    return text[n:]


def _strip_line(text: str, token: str, separator: str, documentation: bool) -> str:
    stripped = text.lstrip()
    if documentation:
        m = _DOC_TOKEN_RE.match(stripped)
        rest = stripped[m.end():] if m else None
    else:
        rest = stripped[len(token):] if stripped.startswith(token) else None
        if rest and len(set(token)) == 1:
            # "## Section" in a "#" block; banner lines like "#####" stay as text
            unmarked = rest.lstrip(token[0])
            if unmarked.strip():
                rest = unmarked
    if rest is None:
        # foreign marker on a later line: take off whatever marker it has
        m = _ANY_TOKEN_RE.match(stripped)
        rest = stripped[m.end():] if m else stripped
    return _drop_space(rest, len(separator)).rstrip()


def _separator_from_body(lines: Sequence[str], token: str) -> str:
    for text in lines:
        stripped = text.lstrip()
        if not stripped.startswith(token):
            continue
        rest = stripped[len(token):]
        if rest.strip():
            return " " if rest[0].isspace() else ""
    return " "


def extract_block(lines: Sequence[str]) -> Optional[CommentBlock]:
    """Parse comment lines into a :class:`CommentBlock`.

    The prefix and indentation come from the first line; ``None`` is returned
    when that line carries no recognizable comment marker. Later lines are
    stripped permissively. Bare ``/**`` and ``*/`` delimiter lines are set
    aside and reproduced unchanged.
    """
    opener = closer = None
    if lines and _OPENER_RE.match(lines[0].strip()):
        opener = lines[0].rstrip()
        lines = lines[1:]
    if lines and _CLOSER_RE.match(lines[-1].strip()):
        closer = lines[-1].rstrip()
        lines = lines[:-1]
    if not lines:
        return None
    m = _PREFIX_RE.match(lines[0])
    if not m:
        return None
    indentation = m.group(1)
    detected = m.group(2)
    documentation = "'" in detected

    if documentation:
        token = re.sub(r"\s+", "", detected)
        separator = " "
    else:
        token = detected.rstrip()
        separator = detected[len(token):]
        if not separator and not lines[0][m.end():].strip():
            # bare marker on the first line, borrow the spacing of the body
            separator = _separator_from_body(lines[1:], token)
    prefix = token + separator

    content = [_strip_line(text, token, separator, documentation) for text in lines]
    return CommentBlock(
        prefix=prefix,
        indentation=indentation,
        content_lines=content,
        documentation=documentation,
        opener=opener,
        closer=closer,
    )
