# foldermd/matcher.py

"""Name-based ignore matching."""


from __future__ import annotations

import fnmatch
from typing import Iterable

WILDCARDS = frozenset("*?[")


def has_wildcard(pattern: str) -> bool:
    return any(ch in WILDCARDS for ch in pattern)


def should_ignore(name: str, patterns: Iterable[str]) -> bool:
    """
    Return ``True`` if ``name`` is matched by any of ``patterns``.

    A pattern matches on exact equality with the entry name. Patterns that
    contain a shell wildcard (``*``, ``?`` or ``[``) are additionally matched
    as a case-sensitive glob against the name. Matching is a plain union:
    there are no negation patterns, and an empty pattern list ignores nothing.
    """

    for pattern in patterns:
        pattern = pattern.strip()
        if not pattern:
            continue
        if pattern == name:
            return True
        if has_wildcard(pattern) and fnmatch.fnmatchcase(name, pattern):
            return True
    return False
