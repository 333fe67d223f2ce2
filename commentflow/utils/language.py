from __future__ import annotations

from pathlib import Path
from typing import Dict, Union


# Editor-style language ids, keyed by lower-cased file suffix
EXTENSION_LANGUAGES: Dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".r": "r",
    ".rmd": "r",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".cs": "csharp",
    ".java": "java",
    ".go": "go",
    ".rs": "rust",
    ".swift": "swift",
    ".kt": "kotlin",
    ".scala": "scala",
    ".php": "php",
    ".sh": "shellscript",
    ".bash": "shellscript",
    ".zsh": "shellscript",
    ".rb": "ruby",
    ".pl": "perl",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".toml": "toml",
    ".jl": "julia",
}

FILENAME_LANGUAGES: Dict[str, str] = {
    "makefile": "makefile",
    "dockerfile": "dockerfile",
}


def language_for_path(path: Union[str, Path]) -> str:
    p = Path(path)
    by_name = FILENAME_LANGUAGES.get(p.name.lower())
    if by_name:
        return by_name
    return EXTENSION_LANGUAGES.get(p.suffix.lower(), "plaintext")
