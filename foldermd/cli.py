"""CLI interface for foldermd"""

import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from foldermd import __version__
from foldermd.config import (
    DEFAULT_IGNORE,
    DEFAULT_OUTPUT,
    IGNORE_FILENAME,
    FolderConfig,
    FolderMdError,
    create_ignore_file,
)
from foldermd.report import write_report

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Route log records to stderr, at DEBUG when verbose, INFO otherwise."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Log a fatal error and abort the command with exit status 1."""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


class DefaultCommandGroup(click.Group):
    """Group that runs ``default_command`` when no subcommand is named.

    This keeps ``foldermd [DIRECTORY] [OPTIONS]`` working next to the
    ``version`` and ``init`` subcommands.
    """

    default_command = "generate"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not args or (args[0] not in self.commands and args[0] not in ("--help", "-h")):
            args = [self.default_command, *args]
        return super().parse_args(ctx, args)


@click.group(cls=DefaultCommandGroup, context_settings={"help_option_names": ["-h", "--help"]})
def cli():
    """foldermd - generate a README from a folder structure.

    \b
    Writes a Markdown document with:
    - a project structure tree
    - optional file contents with syntax highlighting
    - filtering of common ignore patterns
    """


@cli.command()
@click.argument("directory", required=False, default=".", type=click.Path(path_type=Path))
@click.option("--files", "-f", "include_files", is_flag=True, help="Include files in the tree structure")
@click.option(
    "--content",
    "-c",
    "include_content",
    is_flag=True,
    help="Include file contents with syntax highlighting (implies --files)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Output README file name",
)
@click.option(
    "--ignore",
    "-i",
    default=DEFAULT_IGNORE,
    show_default=True,
    help="Comma-separated patterns to ignore",
)
@click.option(
    "--depth",
    "-d",
    type=int,
    default=-1,
    show_default=True,
    help="Maximum directory depth to traverse (-1 for unlimited)",
)
@click.option("--hidden", is_flag=True, help="Include hidden files and directories")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (DEBUG) logging")
def generate(
    directory: Path,
    include_files: bool,
    include_content: bool,
    output: Path,
    ignore: str,
    depth: int,
    hidden: bool,
    verbose: bool,
):
    """Generate a README for DIRECTORY (default: current directory).

    \b
    Examples:
      foldermd
      foldermd --files
      foldermd --content --output PROJECT.md
      foldermd /path/to/project --files --depth 3
      foldermd --files --ignore ".git,*.log,build,dist"
    """
    setup_logging(verbose)

    try:
        config = FolderConfig.from_options(
            directory,
            output_path=output,
            include_files=include_files,
            include_content=include_content,
            ignore=ignore,
            max_depth=depth,
            show_hidden=hidden,
        )
    except (ValidationError, FolderMdError) as e:
        _die(str(e), verbose=verbose, exc=e)

    try:
        written = write_report(config)
    except OSError as e:
        _die(f"failed to generate README: {e}", verbose=verbose, exc=e)

    click.echo(f"✅ README generated successfully: {written}")


@cli.command()
def version():
    """Print the version number of foldermd"""
    click.echo(f"foldermd v{__version__}")


@cli.command()
@click.argument("directory", required=False, default=".", type=click.Path(path_type=Path))
def init(directory: Path):
    """Create a .foldermd.ignore file with common ignore patterns."""
    setup_logging()
    try:
        path = create_ignore_file(directory)
    except FolderMdError as e:
        _die(str(e), exc=e)
    except OSError as e:
        _die(f"failed to create {IGNORE_FILENAME}: {e}", exc=e)

    click.echo(f"✅ Created {path} with common ignore patterns")
    click.echo("💡 Edit this file to customize ignore patterns for your project")


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
