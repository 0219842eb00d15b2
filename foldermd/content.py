# foldermd/content.py

"""
File content embedding.

This module walks the same filtered subtree as the tree renderer and yields
one Markdown section per file: a heading with the path relative to the
target directory, a metadata line and the file body inside a fenced code
block tagged with its language.

Files are not always embedded:
- files larger than :data:`MAX_FILE_SIZE` get a "too large" note,
- files classified as binary get a "binary" note,
- files that cannot be read get a note with the read error.

None of these stop the walk. Traversal order is plain lexical name order
within each directory (directories and files interleaved), independent of
the directory-first order of the tree.
"""


from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator, Optional

from foldermd.classify import file_extension, format_file_size, is_text_file, language_tag
from foldermd.config import FolderConfig
from foldermd.tree import FILE_GLYPH, is_dir, is_visible

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 1024 * 1024

_TICKS = re.compile(r"`{3,}")


def fence_for(text: str) -> str:
    """Return a backtick fence longer than any backtick run inside ``text``."""
    max_ticks = 0
    if "```" in text:
        ticks = _TICKS.findall(text)
        if ticks:
            max_ticks = max(len(t) for t in ticks)
    return "`" * max(3, max_ticks + 1)


def _heading(rel: str) -> str:
    return f"### {FILE_GLYPH} {rel}\n\n"


def file_section(path: Path, root: Path, *, encoding: str = "utf-8") -> str:
    """
    Render one file as a Markdown section.

    Parameters
    ----------
    path : pathlib.Path
        File to render.
    root : pathlib.Path
        Directory the displayed path is relative to.
    encoding : str, default="utf-8"
        Text encoding used to decode the file. Undecodable bytes are
        replaced rather than failing the section.

    Returns
    -------
    str
        The section text, ending with a blank line.
    """

    rel = path.relative_to(root).as_posix()

    try:
        size = path.stat().st_size
    except OSError as e:
        logger.debug(f"Cannot stat {rel}: {e}")
        return _heading(rel) + f"*Error reading file: {e}*\n\n"

    if size > MAX_FILE_SIZE:
        logger.debug(f"Skipping {rel}: too large ({size} bytes)")
        return _heading(rel) + f"*File too large to display ({format_file_size(size)})*\n\n"

    if not is_text_file(path):
        logger.debug(f"Skipping {rel}: binary")
        return _heading(rel) + f"*Binary file ({format_file_size(size)})*\n\n"

    try:
        data = path.read_text(encoding=encoding, errors="replace")
    except OSError as e:
        logger.debug(f"Cannot read {rel}: {e}")
        return _heading(rel) + f"*Error reading file: {e}*\n\n"

    lang = language_tag(file_extension(path.name))
    fence = fence_for(data)
    body = data if data.endswith("\n") else data + "\n"

    return (
        _heading(rel)
        + f"*Size: {format_file_size(size)} | Language: {lang}*\n\n"
        + f"{fence}{lang}\n{body}{fence}\n\n"
    )


def iter_file_sections(config: FolderConfig) -> Iterator[str]:
    """
    Yield a Markdown section for every file selected by ``config``.

    Ignore patterns and the hidden-file rule prune both files and
    directories. Files at depth ``d`` (the root's own files are at depth 0)
    are included while ``d <= config.max_depth``, or always when the limit is
    ``-1``. The output document itself is never embedded.

    Raises
    ------
    OSError
        If a directory cannot be listed. Per-file errors never raise.
    """

    root = Path(config.target_dir)
    output = _resolved(config.output_path)

    def walk(d: Path, depth: int) -> Iterator[str]:
        if config.beyond_depth(depth):
            return

        entries = sorted(d.iterdir(), key=lambda p: os.fsencode(p.name))
        for entry in entries:
            if not is_visible(entry, config):
                continue
            if is_dir(entry):
                yield from walk(entry, depth + 1)
            elif output is not None and _resolved(entry) == output:
                continue
            else:
                yield file_section(entry, root)

    yield from walk(root, 0)


def _resolved(p: Path) -> Optional[Path]:
    try:
        return p.resolve()
    except OSError:
        return None
