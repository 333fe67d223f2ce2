from __future__ import annotations

from typing import Iterable, List


def wrap_words(words: Iterable[str], max_width: int, lead_in: str = "", indent: str = "") -> List[str]:
    """Greedy first-fit packing of ``words`` into lines of at most ``max_width``.

    ``lead_in`` seeds the first line (a tag signature, a list bullet) and
    ``indent`` starts every line after the first. Words are never split: a
    word that does not fit on an empty line sits there alone and overflows,
    so a width of zero or less yields one word per line.
    """
    lines: List[str] = []
    current = lead_in
    for word in words:
        if not word:
            continue
        if not current:
            current = word
            continue
        candidate = f"{current} {word}"
        if len(candidate) <= max_width:
            current = candidate
        else:
            lines.append(current.rstrip())
            current = indent + word
    if current:
        lines.append(current.rstrip())
    return lines
