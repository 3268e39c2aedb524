"""Tests for kno.core.tree module."""

from __future__ import annotations

import pytest

from kno.core.errors import NotFound
from kno.core.store import NoteStore
from kno.core.tree import build_tree, count_nodes
from kno.models import NodeKind, NoteTreeNode


def _child(node: NoteTreeNode, name: str) -> NoteTreeNode:
    return next(c for c in node.children if c.name == name)


@pytest.fixture
def sql_store(store: NoteStore, create_note) -> NoteStore:
    """Store with sql/joins.md, sql/cte.md and a top-level note."""
    create_note("sql/joins.md", "# Joins\n")
    create_note("sql/cte.md", "# Cte\n")
    create_note("inbox.md", "")
    return store


class TestBuildTree:
    """Tests for build_tree function."""

    def test_depth_one_does_not_expand(self, sql_store: NoteStore):
        tree = build_tree(sql_store.notes_root, 1, sql_store)

        sql = _child(tree, "sql")
        assert sql.kind == NodeKind.DIRECTORY
        assert sql.children == []

    def test_depth_zero_expands_everything(self, sql_store: NoteStore):
        tree = build_tree(sql_store.notes_root, 0, sql_store)

        sql = _child(tree, "sql")
        assert [c.name for c in sql.children] == ["cte.md", "joins.md"]
        assert all(c.kind == NodeKind.FILE for c in sql.children)

    def test_default_depth_is_one(self, sql_store: NoteStore):
        tree = build_tree(sql_store.notes_root, store=sql_store)
        assert _child(tree, "sql").children == []

    def test_root_node(self, sql_store: NoteStore):
        tree = build_tree(sql_store.notes_root, 1, sql_store)

        assert tree.kind == NodeKind.DIRECTORY
        assert tree.path == sql_store.notes_root
        assert tree.name == sql_store.notes_root.name

    def test_children_sorted_by_name_intermixed(self, store: NoteStore, create_note):
        create_note("b.md")
        create_note("a/x.md")
        create_note("c/y.md")

        tree = build_tree(store.notes_root, 1, store)

        assert [c.name for c in tree.children] == ["a", "b.md", "c"]

    def test_depth_limit_counts_levels(self, store: NoteStore, create_note):
        create_note("a/b/c/d.md")

        tree = build_tree(store.notes_root, 2, store)

        assert _child(_child(tree, "a"), "b").children == []

        tree = build_tree(store.notes_root, 3, store)
        assert _child(_child(_child(tree, "a"), "b"), "c").children == []

        tree = build_tree(store.notes_root, 4, store)
        c = _child(_child(_child(tree, "a"), "b"), "c")
        assert [n.name for n in c.children] == ["d.md"]

    def test_subdirectory_start(self, sql_store: NoteStore):
        tree = build_tree(sql_store.notes_root / "sql", 1, sql_store)

        assert tree.name == "sql"
        assert [c.name for c in tree.children] == ["cte.md", "joins.md"]

    def test_missing_start(self, store: NoteStore):
        with pytest.raises(NotFound):
            build_tree(store.notes_root / "missing", 1, store)

    def test_file_start(self, sql_store: NoteStore):
        with pytest.raises(NotFound):
            build_tree(sql_store.notes_root / "inbox.md", 1, sql_store)

    def test_negative_depth(self, store: NoteStore):
        with pytest.raises(ValueError):
            build_tree(store.notes_root, -1, store)

    def test_empty_root(self, store: NoteStore):
        tree = build_tree(store.notes_root, 0, store)
        assert tree.children == []

    def test_reflects_filesystem_changes(self, store: NoteStore, create_note):
        assert build_tree(store.notes_root, 1, store).children == []

        create_note("new.md")

        assert [c.name for c in build_tree(store.notes_root, 1, store).children] == [
            "new.md"
        ]


class TestWalkAndCount:
    """Tests for NoteTreeNode.walk and count_nodes."""

    def test_walk_order(self, sql_store: NoteStore):
        tree = build_tree(sql_store.notes_root, 0, sql_store)

        walked = [(depth, node.name) for depth, node in tree.walk()]

        assert walked == [
            (1, "inbox.md"),
            (1, "sql"),
            (2, "cte.md"),
            (2, "joins.md"),
        ]

    def test_count(self, sql_store: NoteStore):
        assert count_nodes(build_tree(sql_store.notes_root, 0, sql_store)) == (1, 3)
        assert count_nodes(build_tree(sql_store.notes_root, 1, sql_store)) == (1, 1)
