from __future__ import annotations

from typing import Callable, Dict, Optional


LinePredicate = Callable[[str], bool]


def _hash_rule(trimmed: str) -> bool:
    return trimmed.startswith("#")


def _slash_rule(trimmed: str) -> bool:
    return trimmed.startswith(("//", "*", "/*"))


def _default_rule(trimmed: str) -> bool:
    return trimmed.startswith(("#", "//", "*"))


HASH_LANGUAGES = (
    "r",
    "python",
    "shellscript",
    "ruby",
    "perl",
    "yaml",
    "toml",
    "makefile",
    "dockerfile",
    "julia",
)

SLASH_LANGUAGES = (
    "typescript",
    "javascript",
    "typescriptreact",
    "javascriptreact",
    "c",
    "cpp",
    "csharp",
    "java",
    "go",
    "rust",
    "swift",
    "kotlin",
    "scala",
    "php",
)

RULES: Dict[str, LinePredicate] = {}
RULES.update({lang: _hash_rule for lang in HASH_LANGUAGES})
RULES.update({lang: _slash_rule for lang in SLASH_LANGUAGES})


def register_rule(content_type: str, predicate: LinePredicate) -> None:
    """Add or override the comment rule for a content type.

    The predicate receives the already trimmed line.
    """
    RULES[content_type.lower()] = predicate


def rule_for(content_type: Optional[str]) -> LinePredicate:
    if not content_type:
        return _default_rule
    return RULES.get(content_type.lower(), _default_rule)


def is_comment_line(line: str, content_type: Optional[str] = None) -> bool:
    return rule_for(content_type)(line.strip())
