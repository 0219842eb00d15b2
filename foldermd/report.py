# foldermd/report.py

"""
Markdown report assembly.

:func:`iter_report` yields the document as a lazy sequence of text chunks in
a fixed order: title, generation timestamp, project overview, structure
(legend and fenced tree), optional file contents and the configuration
footer. :func:`write_report` is the only place that touches the output file.
"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from foldermd.config import FolderConfig
from foldermd.content import iter_file_sections
from foldermd.tree import DIR_GLYPH, FILE_GLYPH, iter_tree_lines

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class ProjectStats:
    """Raw entry counts below a directory."""

    files: int
    directories: int


def project_stats(root: Path) -> ProjectStats:
    """
    Count every file and directory below ``root``.

    The count ignores all ignore, hidden and depth settings and does not
    include ``root`` itself. Symbolic links are counted but never followed.
    Unreadable directories are skipped.
    """

    files = directories = 0
    for _, dirnames, filenames in Path(root).walk(on_error=_log_walk_error):
        directories += len(dirnames)
        files += len(filenames)
    return ProjectStats(files=files, directories=directories)


def _log_walk_error(e: OSError) -> None:
    logger.debug(f"Skipping unreadable directory while counting: {e}")


def project_name(root: Path) -> str:
    return Path(root).resolve().name


def iter_report(config: FolderConfig, *, generated_at: Optional[datetime] = None) -> Iterator[str]:
    """
    Yield the Markdown document for ``config`` chunk by chunk.

    Parameters
    ----------
    config : FolderConfig
        Run configuration.
    generated_at : datetime.datetime | None, optional
        Timestamp written in the header. Defaults to the current local time.

    Raises
    ------
    OSError
        If a directory cannot be listed during the tree or content pass.
    """

    when = generated_at or datetime.now()
    root = Path(config.target_dir)

    yield f"# {project_name(root)}\n\n"
    yield f"> Generated with foldermd on {when.strftime(TIMESTAMP_FORMAT)}\n\n"

    stats = project_stats(root)
    yield "## 📊 Project Overview\n\n"
    yield f"- **Total Files:** {stats.files}\n"
    yield f"- **Total Directories:** {stats.directories}\n"
    yield f"- **Project Root:** `{root}`\n\n"

    yield "## 📁 Project Structure\n\n"
    if config.include_files:
        yield f"```\nLegend: {DIR_GLYPH} Directory | {FILE_GLYPH} File\n```\n\n"

    logger.info("Building project tree...")
    yield "```\n"
    for line in iter_tree_lines(config):
        yield line + "\n"
    yield "```\n\n"

    if config.include_content:
        logger.info("Including file contents...")
        yield "## 📄 File Contents\n\n"
        yield from iter_file_sections(config)

    yield from iter_footer(config)


def iter_footer(config: FolderConfig) -> Iterator[str]:
    yield "---\n\n"
    yield "## 🛠️ Generated with foldermd\n\n"
    yield "**Configuration used:**\n"
    yield f"- Include files: `{_flag(config.include_files)}`\n"
    yield f"- Include content: `{_flag(config.include_content)}`\n"
    yield f"- Max depth: `{config.max_depth}`\n"
    yield f"- Show hidden: `{_flag(config.show_hidden)}`\n"
    yield f"- Ignore patterns: `{', '.join(config.ignore_patterns)}`\n"
    yield "\n*This README was automatically generated. Consider customizing it for your project!*\n"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def write_report(config: FolderConfig, *, generated_at: Optional[datetime] = None) -> Path:
    """
    Render the document for ``config`` into ``config.output_path``.

    The output file is created (or truncated) before anything is rendered
    and closed on every exit path. Chunks already written stay in the file
    if rendering fails midway.

    Returns
    -------
    pathlib.Path
        The written output path.

    Raises
    ------
    OSError
        If the output file cannot be created or a directory cannot be listed.
    """

    logger.info(f"Generating README for: {config.target_dir}")
    output = Path(config.output_path)
    with open(output, "w", encoding="utf-8") as f:
        for chunk in iter_report(config, generated_at=generated_at):
            f.write(chunk)
    return output
