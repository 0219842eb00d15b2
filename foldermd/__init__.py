"""
foldermd — generate a Markdown README from a folder structure.

This package provides small, composable tools to:
- render a directory as an ASCII tree,
- embed file contents as fenced code blocks with language tags,
- assemble both into a single Markdown document.

Every rendering function takes an explicit, immutable
:class:`~foldermd.config.FolderConfig` and yields text lazily; only
:func:`~foldermd.report.write_report` writes to disk.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .config import FolderConfig, create_ignore_file
from .content import iter_file_sections
from .report import iter_report, write_report
from .tree import build_tree, draw_tree, iter_tree_lines

__all__ = [
    "FolderConfig",
    "build_tree",
    "create_ignore_file",
    "draw_tree",
    "iter_file_sections",
    "iter_report",
    "iter_tree_lines",
    "write_report",
]
