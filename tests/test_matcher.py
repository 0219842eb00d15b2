# tests/test_matcher.py
from foldermd.matcher import should_ignore


def test_empty_pattern_list_ignores_nothing():
    assert should_ignore("anything", []) is False
    assert should_ignore(".git", ()) is False


def test_exact_match():
    assert should_ignore(".git", [".git"]) is True
    assert should_ignore("node_modules", [".git", "node_modules"]) is True
    assert should_ignore(".github", [".git"]) is False


def test_exact_match_is_case_sensitive():
    assert should_ignore("Build", ["build"]) is False


def test_glob_match():
    assert should_ignore("debug.log", ["*.log"]) is True
    assert should_ignore("debug.log.txt", ["*.log"]) is False
    assert should_ignore("file1.tmp", ["file?.tmp"]) is True
    assert should_ignore("a.pyc", ["*.py[co]"]) is True


def test_patterns_are_trimmed_and_blanks_skipped():
    assert should_ignore("build", ["  build  "]) is True
    assert should_ignore("x", ["", "   "]) is False


def test_order_does_not_matter():
    patterns = ["*.log", "dist", ".git"]
    for name in ["a.log", "dist", ".git", "src"]:
        assert should_ignore(name, patterns) == should_ignore(name, list(reversed(patterns)))
