# foldermd/tree.py

"""
Directory tree rendering.

This module turns a directory into an ASCII/Unicode tree similar to the Unix
``tree`` command. Rendering happens in two steps:

- :func:`build_tree` lists and filters the filesystem into an ``anytree``
  node hierarchy, honoring ignore patterns, the hidden-file rule, the
  files/directories switch and the depth limit;
- :func:`draw_tree` lazily yields one text line per node using the
  ``├──`` / ``└──`` / ``│`` connectors.

Ordering is deterministic: directories before files, then byte-wise,
case-sensitive name order. Directory listing errors are not swallowed; they
propagate to the caller.
"""


from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from anytree import ContStyle, Node, RenderTree

from foldermd.config import FolderConfig
from foldermd.matcher import should_ignore

DIR_GLYPH = "📁"
FILE_GLYPH = "📄"


def is_dir(p: Path) -> bool:
    """
    Safely determine whether a path is a real directory.

    Symbolic links are never treated as directories, so linked trees are
    shown as leaves and not descended into. Filesystem errors while probing
    the path yield ``False``.
    """

    try:
        return not p.is_symlink() and p.is_dir()
    except OSError:
        return False


def sort_key(p: Path) -> tuple[bool, bytes]:
    """Directories first, then byte-wise name order."""
    return (not is_dir(p), os.fsencode(p.name))


def is_visible(p: Path, config: FolderConfig) -> bool:
    """
    Apply the entry filters shared by the tree and content passes.

    An entry is dropped when it matches an ignore pattern or when it is a
    dotfile and hidden entries are not requested.
    """

    if should_ignore(p.name, config.ignore_patterns):
        return False
    if not config.show_hidden and p.name.startswith("."):
        return False
    return True


def list_children(d: Path, config: FolderConfig) -> list[Path]:
    """
    Return the filtered children of ``d`` in tree order.

    Raises
    ------
    OSError
        If the directory cannot be listed.
    """

    children = [
        c
        for c in d.iterdir()
        if is_visible(c, config) and (config.include_files or is_dir(c))
    ]
    children.sort(key=sort_key)
    return children


def build_tree(config: FolderConfig) -> Node:
    """
    Build the filtered node hierarchy under ``config.target_dir``.

    Every node carries ``fs_path``, ``is_dir`` and ``is_symlink`` attributes.
    The root's direct children are at depth 0; when ``config.max_depth`` is
    non-negative, entries deeper than it are not listed. Directories left
    empty by filtering are still part of the tree.

    Parameters
    ----------
    config : FolderConfig
        Run configuration.

    Returns
    -------
    anytree.Node
        Root node representing ``config.target_dir``.

    Raises
    ------
    OSError
        If any directory in the visited subtree cannot be listed.
    """

    root_path = Path(config.target_dir)
    root = Node(root_path.resolve().name, fs_path=root_path, is_dir=True, is_symlink=False)

    def rec(parent: Node, d: Path, depth: int) -> None:
        if config.beyond_depth(depth):
            return

        for child in list_children(d, config):
            child_is_dir = is_dir(child)
            node = Node(
                child.name,
                parent=parent,
                fs_path=child,
                is_dir=child_is_dir,
                is_symlink=child.is_symlink(),
            )
            if child_is_dir:
                rec(node, child, depth + 1)

    rec(root, root_path, 0)
    return root


def decorate(node: Node, config: FolderConfig) -> str:
    """Return the display label of a node."""
    if config.include_content:
        if node.is_dir:
            return f"{DIR_GLYPH} {node.name}/"
        return f"{FILE_GLYPH} {node.name}"
    if node.is_dir:
        return f"{node.name}/"
    return node.name


def draw_tree(root: Node, config: FolderConfig) -> Iterator[str]:
    """
    Yield the tree lines below ``root``, one per node.

    The root itself is not printed. Each line is the connector prefix
    (``├── `` for a continuing sibling, ``└── `` for the last one, with
    ``│   `` or four spaces per ancestor level) followed by the decorated
    name.
    """

    for pre, _, node in RenderTree(root, style=ContStyle()):
        if node is root:
            continue
        yield pre + decorate(node, config)


def iter_tree_lines(config: FolderConfig) -> Iterator[str]:
    """Build the tree for ``config`` and yield its lines."""
    yield from draw_tree(build_tree(config), config)
