"""Depth-limited listing of the notes tree."""

from __future__ import annotations

import logging
from pathlib import Path

from kno.core.errors import NotFound
from kno.core.store import NoteStore
from kno.models import NodeKind, NoteTreeNode

logger = logging.getLogger(__name__)

# Depth value meaning "expand everything"
UNLIMITED = 0


def build_tree(start: Path, depth: int = 1, store: NoteStore | None = None) -> NoteTreeNode:
    """Build a tree of the notes below a directory.

    Args:
        start: Directory to list (absolute, inside the notes root).
        depth: Levels to list. 1 lists the immediate children only, 0 lists
            everything. Directories at the last level are shown but not
            expanded.
        store: NoteStore to read from (defaults to one rooted at start).

    Returns:
        NoteTreeNode for start with its children populated.

    Raises:
        NotFound: If start is not an existing directory.
        ValueError: If depth is negative.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    start = Path(start)
    if store is None:
        store = NoteStore(start)
    if not start.is_dir():
        raise NotFound(start)

    root = NoteTreeNode(name=start.name, kind=NodeKind.DIRECTORY, path=start)
    remaining = None if depth == UNLIMITED else depth

    # Depth-first with an explicit stack of (node, levels still allowed)
    stack: list[tuple[NoteTreeNode, int | None]] = [(root, remaining)]
    while stack:
        node, levels = stack.pop()
        for name, kind in store.list_children(node.path):
            child = NoteTreeNode(name=name, kind=kind, path=node.path / name)
            node.children.append(child)
            if kind == NodeKind.DIRECTORY and (levels is None or levels > 1):
                stack.append((child, None if levels is None else levels - 1))

    logger.debug("Listed %s to depth %s", start, depth or "unlimited")
    return root


def count_nodes(node: NoteTreeNode) -> tuple[int, int]:
    """Count (directories, files) below a node."""
    dirs = files = 0
    for _, child in node.walk():
        if child.is_dir:
            dirs += 1
        else:
            files += 1
    return dirs, files
