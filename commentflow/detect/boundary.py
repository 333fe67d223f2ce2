from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .classifier import rule_for


def find_block_range(
    lines: Sequence[str],
    start_line: int,
    end_line: Optional[int] = None,
    content_type: Optional[str] = None,
    is_empty: bool = True,
) -> Optional[Tuple[int, int]]:
    """Return the inclusive ``(start, end)`` line range of the comment block
    around a cursor or selection, or ``None`` when there is nothing to reflow.

    With an empty selection the cursor line itself must be a comment. A
    non-empty selection is shrunk to the comment lines at its edges and is
    rejected when code remains inside it. The range is then grown in both
    directions for as long as neighbouring lines are comments.
    """
    if not lines:
        return None
    is_comment = rule_for(content_type)
    last = len(lines) - 1
    start = min(max(start_line, 0), last)
    end = start if end_line is None else min(max(end_line, start), last)

    if is_empty:
        if not is_comment(lines[start].strip()):
            return None
        end = start
    else:
        while start <= end and not is_comment(lines[start].strip()):
            start += 1
        while end >= start and not is_comment(lines[end].strip()):
            end -= 1
        if start > end:
            return None
        if not all(is_comment(lines[i].strip()) for i in range(start, end + 1)):
            return None

    while start > 0 and is_comment(lines[start - 1].strip()):
        start -= 1
    while end < last and is_comment(lines[end + 1].strip()):
        end += 1
    return start, end
