# foldermd/classify.py

"""
File classification helpers.

This module decides whether a file should be embedded as text, maps file
extensions to Markdown code-fence language tags and formats byte counts for
display.
"""


from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

SNIFF_SIZE = 512

LANGUAGES = MappingProxyType(
    {
        ".go": "go",
        ".py": "python",
        ".js": "javascript",
        ".ts": "typescript",
        ".jsx": "jsx",
        ".tsx": "tsx",
        ".java": "java",
        ".c": "c",
        ".cpp": "cpp",
        ".cc": "cpp",
        ".cxx": "cpp",
        ".h": "c",
        ".hpp": "cpp",
        ".hxx": "cpp",
        ".rs": "rust",
        ".php": "php",
        ".rb": "ruby",
        ".sh": "bash",
        ".bash": "bash",
        ".zsh": "zsh",
        ".fish": "fish",
        ".ps1": "powershell",
        ".html": "html",
        ".htm": "html",
        ".css": "css",
        ".scss": "scss",
        ".sass": "sass",
        ".less": "less",
        ".xml": "xml",
        ".json": "json",
        ".yaml": "yaml",
        ".yml": "yaml",
        ".toml": "toml",
        ".ini": "ini",
        ".cfg": "ini",
        ".conf": "ini",
        ".md": "markdown",
        ".txt": "text",
        ".sql": "sql",
        ".r": "r",
        ".m": "matlab",
        ".swift": "swift",
        ".kt": "kotlin",
        ".kts": "kotlin",
        ".scala": "scala",
        ".clj": "clojure",
        ".cljs": "clojure",
        ".hs": "haskell",
        ".elm": "elm",
        ".ex": "elixir",
        ".exs": "elixir",
        ".erl": "erlang",
        ".dart": "dart",
        ".lua": "lua",
        ".pl": "perl",
        ".vim": "vim",
        ".dockerfile": "dockerfile",
        ".gitignore": "gitignore",
        ".env": "bash",
        ".makefile": "makefile",
        ".cmake": "cmake",
    }
)


def is_text_file(path: Path, *, sample_size: int = SNIFF_SIZE) -> bool:
    """
    Determine whether a file looks like text.

    The first ``sample_size`` bytes are read; a single NUL byte marks the
    file as binary. Files that cannot be opened or read are reported as
    non-text.

    Parameters
    ----------
    path : pathlib.Path
        File to inspect.
    sample_size : int, default=512
        Number of leading bytes to sniff.

    Returns
    -------
    bool
        ``True`` if no NUL byte was found in the sample.
    """

    try:
        with path.open("rb") as f:
            sample = f.read(sample_size)
    except OSError:
        return False

    return b"\x00" not in sample


def file_extension(name: str) -> str:
    """
    Return the lowercase extension of ``name``, including the leading dot.

    The extension starts at the last dot of the name, so dotfiles such as
    ``.gitignore`` are their own extension. Names without a dot have none.
    """

    idx = name.rfind(".")
    if idx < 0:
        return ""
    return name[idx:].lower()


def language_tag(extension: str) -> str:
    """Map a file extension to a code-fence language tag (``"text"`` if unknown)."""
    return LANGUAGES.get(extension.lower(), "text")


def format_file_size(size: int) -> str:
    """
    Format a byte count using 1024-based units.

    Sizes below one KiB are shown as whole bytes (``"512 B"``); larger sizes
    get one decimal place and a ``KB``..``EB`` suffix (``"1.5 KB"``).
    """

    unit = 1024
    if size < unit:
        return f"{size} B"

    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"
