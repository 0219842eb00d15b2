"""Tests for CLI interface"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from foldermd import __version__
from foldermd.cli import _die, cli, setup_logging
from foldermd.config import IGNORE_FILENAME


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def proj(tmp_path):
    root = tmp_path / "proj"
    _make_file(root / "a.go", "package a\n")
    _make_file(root / ".git/HEAD", "ref\n")
    (root / "build").mkdir()
    return root


class TestLogging:
    def test_info_is_the_default_level(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_verbose_switches_to_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG


class TestDie:
    def test_raises_click_exception_with_exit_status_one(self):
        with pytest.raises(click.ClickException, match="boom") as excinfo:
            _die("boom")
        assert excinfo.value.exit_code == 1

    def test_logs_the_message_as_error(self, caplog):
        with caplog.at_level(logging.ERROR, logger="foldermd.cli"):
            with pytest.raises(click.ClickException):
                _die("cannot list proj/secret", exc=PermissionError("denied"))

        assert [r.getMessage() for r in caplog.records] == ["cannot list proj/secret"]
        assert caplog.records[0].exc_info is None

    def test_verbose_attaches_traceback(self, caplog):
        try:
            raise PermissionError("denied")
        except PermissionError as e:
            with caplog.at_level(logging.ERROR, logger="foldermd.cli"):
                with pytest.raises(click.ClickException):
                    _die("cannot list proj/secret", verbose=True, exc=e)

        assert caplog.records[0].exc_info is not None


class TestGenerateCommand:
    """Tests for the default generate command"""

    def test_default_flags(self, runner, proj, tmp_path):
        out = tmp_path / "README.md"
        result = runner.invoke(cli, [str(proj), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert "README generated successfully" in result.output
        doc = out.read_text(encoding="utf-8")
        assert doc.startswith("# proj\n\n")
        assert "```\n└── build/\n```\n" in doc
        assert "a.go" not in doc

    def test_content_flag_implies_files(self, runner, proj, tmp_path):
        out = tmp_path / "OUT.md"
        result = runner.invoke(cli, [str(proj), "--content", "--output", str(out)])

        assert result.exit_code == 0, result.output
        doc = out.read_text(encoding="utf-8")
        assert "├── 📁 build/\n└── 📄 a.go\n" in doc
        assert "```go\npackage a\n```" in doc
        assert "- Include files: `true`" in doc

    def test_options_before_directory(self, runner, proj, tmp_path):
        out = tmp_path / "README.md"
        result = runner.invoke(cli, ["-f", "-d", "0", "-o", str(out), str(proj)])

        assert result.exit_code == 0, result.output
        doc = out.read_text(encoding="utf-8")
        assert "├── build/\n└── a.go\n" in doc
        assert "- Max depth: `0`" in doc

    def test_custom_ignore_and_hidden(self, runner, proj, tmp_path):
        out = tmp_path / "README.md"
        result = runner.invoke(cli, [str(proj), "-f", "--hidden", "-i", "build, *.go", "-o", str(out)])

        assert result.exit_code == 0, result.output
        doc = out.read_text(encoding="utf-8")
        assert "```\n└── .git/\n    └── HEAD\n```\n" in doc
        assert "- Ignore patterns: `build, *.go`" in doc

    def test_ignore_file_is_merged(self, runner, proj, tmp_path):
        _make_file(proj / IGNORE_FILENAME, "# local\nbuild\n")
        out = tmp_path / "README.md"

        result = runner.invoke(cli, [str(proj), "--files", "-o", str(out)])

        assert result.exit_code == 0, result.output
        doc = out.read_text(encoding="utf-8")
        assert "```\n└── a.go\n```\n" in doc
        assert "- Ignore patterns: `.git, .DS_Store, node_modules, *.log, build`" in doc

    def test_missing_directory(self, runner, tmp_path):
        out = tmp_path / "README.md"
        result = runner.invoke(cli, [str(tmp_path / "missing"), "-o", str(out)])

        assert result.exit_code == 1
        assert "does not exist" in result.output
        assert not out.exists()

    def test_output_cannot_be_created(self, runner, proj, tmp_path):
        result = runner.invoke(cli, [str(proj), "-o", str(tmp_path / "no" / "dir" / "out.md")])

        assert result.exit_code == 1
        assert "failed to generate README" in result.output

    def test_output_is_an_existing_directory(self, runner, proj, tmp_path):
        taken = tmp_path / "taken"
        taken.mkdir()

        result = runner.invoke(cli, [str(proj), "-o", str(taken)])

        assert result.exit_code == 1
        assert "failed to generate README" in result.output
        assert taken.is_dir()

    @pytest.mark.skipif(os.name != "posix", reason="Permission bits test is POSIX-only")
    def test_unreadable_subdirectory_aborts_run(self, runner, proj, tmp_path):
        secret = proj / "secret"
        _make_file(secret / "hidden.txt")

        secret.chmod(0)
        try:
            if os.access(secret, os.R_OK):
                pytest.skip("running with privileges that bypass permission bits")
            result = runner.invoke(cli, [str(proj), "-o", str(tmp_path / "README.md")])
        finally:
            secret.chmod(stat.S_IRWXU)

        assert result.exit_code == 1
        assert "failed to generate README" in result.output

    def test_invalid_depth(self, runner, proj, tmp_path):
        result = runner.invoke(cli, [str(proj), "-d", "-5", "-o", str(tmp_path / "README.md")])
        assert result.exit_code == 1

    def test_current_directory_default(self, runner, proj):
        with runner.isolated_filesystem(temp_dir=proj.parent) as cwd:
            _make_file(Path(cwd) / "src/main.py")
            result = runner.invoke(cli, [])

            assert result.exit_code == 0, result.output
            doc = (Path(cwd) / "README.md").read_text(encoding="utf-8")
            assert f"# {Path(cwd).resolve().name}\n" in doc
            assert "└── src/" in doc


class TestVersionCommand:
    def test_version(self, runner):
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert result.output.strip() == f"foldermd v{__version__}"


class TestInitCommand:
    def test_init_creates_ignore_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["init", str(tmp_path)])

        assert result.exit_code == 0, result.output
        created = tmp_path / IGNORE_FILENAME
        assert created.is_file()
        assert "node_modules" in created.read_text(encoding="utf-8")

    def test_init_in_current_directory(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
            result = runner.invoke(cli, ["init"])
            assert result.exit_code == 0, result.output
            assert (Path(cwd) / IGNORE_FILENAME).is_file()

    def test_init_target_is_a_file(self, runner, tmp_path):
        plain = tmp_path / "plain.txt"
        plain.write_text("data\n", encoding="utf-8")

        result = runner.invoke(cli, ["init", str(plain)])

        assert result.exit_code == 1
        assert f"failed to create {IGNORE_FILENAME}" in result.output
        assert plain.read_text(encoding="utf-8") == "data\n"

    def test_init_refuses_existing_file(self, runner, tmp_path):
        existing = tmp_path / IGNORE_FILENAME
        existing.write_text("mine\n", encoding="utf-8")

        result = runner.invoke(cli, ["init", str(tmp_path)])

        assert result.exit_code != 0
        assert "already exists" in result.output
        assert existing.read_text(encoding="utf-8") == "mine\n"
