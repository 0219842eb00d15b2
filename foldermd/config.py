# foldermd/config.py

"""
Run configuration for foldermd.

A :class:`FolderConfig` is built once per invocation from command-line
values, optionally extended with the patterns of a ``.foldermd.ignore`` file
found in the target directory, and then passed explicitly to every traversal
function. The model is frozen: nothing mutates it while a document is being
rendered.
"""


from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

IGNORE_FILENAME = ".foldermd.ignore"
DEFAULT_IGNORE = ".git,.DS_Store,node_modules,*.log"
DEFAULT_OUTPUT = "README.md"

DEFAULT_IGNORE_FILE = """\
# foldermd ignore patterns
# Lines starting with # are comments
# Use glob patterns to match files and directories

# Version control
.git
.svn
.hg

# Dependencies
node_modules
vendor
__pycache__
.venv
venv

# Build outputs
build
dist
out
target
bin
obj

# IDE and editor files
.vscode
.idea
*.swp
*.swo
*~

# OS generated files
.DS_Store
Thumbs.db
Desktop.ini

# Logs
*.log
logs

# Temporary files
tmp
temp
*.tmp
*.temp

# Archives
*.zip
*.tar.gz
*.rar
*.7z
"""


class FolderMdError(Exception):
    """Base error for fatal foldermd failures."""

    pass


class TargetDirectoryError(FolderMdError):
    """The directory to document does not exist."""

    pass


class IgnoreFileExistsError(FolderMdError):
    """An ignore file is already present where ``init`` would write one."""

    pass


class FolderConfig(BaseModel):
    """Immutable configuration for one foldermd run.

    Attributes:
        target_dir: Directory to document
        output_path: Markdown file to write
        include_files: Show files in the tree, not only directories
        include_content: Embed file contents (implies include_files)
        ignore_patterns: Exact names or glob patterns to leave out
        max_depth: Deepest level shown, root children are level 0 (-1 = unlimited)
        show_hidden: Keep dotfiles and dot-directories
    """

    target_dir: Path = Path(".")
    output_path: Path = Path(DEFAULT_OUTPUT)
    include_files: bool = False
    include_content: bool = False
    ignore_patterns: tuple[str, ...] = Field(
        default_factory=lambda: split_patterns(DEFAULT_IGNORE)
    )
    max_depth: int = Field(-1, ge=-1)
    show_hidden: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("ignore_patterns", mode="before")
    @classmethod
    def _clean_patterns(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_patterns(value)
        if isinstance(value, (list, tuple)):
            return tuple(p.strip() for p in value if isinstance(p, str) and p.strip())
        return value

    @model_validator(mode="before")
    @classmethod
    def _content_implies_files(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("include_content"):
            data = {**data, "include_files": True}
        return data

    def beyond_depth(self, depth: int) -> bool:
        """Return ``True`` if entries at ``depth`` fall below the depth limit."""
        return self.max_depth >= 0 and depth > self.max_depth

    @classmethod
    def from_options(
        cls,
        target_dir: Path | str = ".",
        *,
        output_path: Path | str = DEFAULT_OUTPUT,
        include_files: bool = False,
        include_content: bool = False,
        ignore: Optional[str] = DEFAULT_IGNORE,
        max_depth: int = -1,
        show_hidden: bool = False,
    ) -> "FolderConfig":
        """Build the run configuration from command-line values.

        Args:
            target_dir: Directory to document
            output_path: Markdown file to write
            include_files: Value of ``--files``
            include_content: Value of ``--content``
            ignore: Comma-separated ``--ignore`` string
            max_depth: Value of ``--depth``
            show_hidden: Value of ``--hidden``

        Returns:
            FolderConfig with the ignore-file patterns appended

        Raises:
            TargetDirectoryError: If ``target_dir`` does not exist
        """
        target = Path(target_dir)
        if not target.exists():
            raise TargetDirectoryError(f"directory '{target}' does not exist")

        patterns = list(split_patterns(ignore or ""))
        ignore_file = target / IGNORE_FILENAME
        if ignore_file.is_file():
            try:
                patterns.extend(read_ignore_file(ignore_file))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {ignore_file}: {e}")
            else:
                logger.info(f"Loaded ignore patterns from {IGNORE_FILENAME}")

        return cls(
            target_dir=target,
            output_path=Path(output_path),
            include_files=include_files,
            include_content=include_content,
            ignore_patterns=tuple(patterns),
            max_depth=max_depth,
            show_hidden=show_hidden,
        )


def split_patterns(value: str) -> tuple[str, ...]:
    """Split a comma-separated pattern list, trimming blanks."""
    return tuple(p.strip() for p in value.split(",") if p.strip())


def parse_ignore_lines(lines: Iterable[str]) -> list[str]:
    """Return the patterns of an ignore file, without comments and blank lines."""
    patterns = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith("#"):
            patterns.append(line)
    return patterns


def read_ignore_file(path: Path) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_ignore_lines(f)


def create_ignore_file(directory: Path | str = ".") -> Path:
    """Write the default ignore file into ``directory``.

    Args:
        directory: Directory that receives ``.foldermd.ignore``

    Returns:
        Path of the created file

    Raises:
        IgnoreFileExistsError: If the file already exists (it is left untouched)
        OSError: If the file cannot be written
    """
    path = Path(directory) / IGNORE_FILENAME
    try:
        with open(path, "x", encoding="utf-8") as f:
            f.write(DEFAULT_IGNORE_FILE)
    except FileExistsError as e:
        raise IgnoreFileExistsError(f"file {path} already exists") from e

    logger.debug(f"Wrote {path}")
    return path
