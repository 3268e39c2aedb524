"""Tests for kno.core.store module."""

from __future__ import annotations

from pathlib import Path

import pytest

from kno.core.errors import IOFailure, NotFound
from kno.core.store import NoteStore
from kno.models import NodeKind


class TestEnsureFile:
    """Tests for NoteStore.ensure_file."""

    def test_creates_empty_file(self, store: NoteStore):
        path = store.notes_root / "foo.md"

        assert store.ensure_file(path) is True
        assert path.read_text() == ""

    def test_existing_file_untouched(self, store: NoteStore, create_note):
        path = create_note("foo.md", "keep me\n")

        assert store.ensure_file(path) is False
        assert path.read_text() == "keep me\n"

    def test_creates_missing_parents(self, store: NoteStore):
        path = store.notes_root / "a" / "b" / "c.md"

        store.ensure_file(path)

        assert path.is_file()


class TestExists:
    """Tests for NoteStore.exists."""

    def test_exists(self, store: NoteStore, create_note):
        path = create_note("foo.md")
        assert store.exists(path) is True
        assert store.exists(store.notes_root / "bar.md") is False

    def test_no_caching(self, store: NoteStore):
        path = store.notes_root / "later.md"
        assert store.exists(path) is False

        path.write_text("created out of band")

        assert store.exists(path) is True


class TestIsEmpty:
    """Tests for NoteStore.is_empty."""

    def test_missing_is_empty(self, store: NoteStore):
        assert store.is_empty(store.notes_root / "missing.md") is True

    def test_whitespace_is_empty(self, store: NoteStore, create_note):
        assert store.is_empty(create_note("blank.md", "  \n\n")) is True

    def test_content_is_not_empty(self, store: NoteStore, create_note):
        assert store.is_empty(create_note("full.md", "text")) is False

    def test_non_utf8_content_is_not_empty(self, store: NoteStore):
        path = store.notes_root / "legacy.md"
        path.write_bytes(b"caf\xe9\n")

        assert store.is_empty(path) is False


class TestEnsureDirs:
    """Tests for NoteStore.ensure_dirs."""

    def test_idempotent(self, store: NoteStore):
        path = store.notes_root / "x" / "y"
        store.ensure_dirs(path)
        store.ensure_dirs(path)
        assert path.is_dir()

    def test_failure_raises_io_failure(self, store: NoteStore, create_note):
        create_note("x", "a file")

        with pytest.raises(IOFailure) as exc_info:
            store.ensure_dirs(store.notes_root / "x" / "y")

        assert isinstance(exc_info.value.cause, OSError)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestListChildren:
    """Tests for NoteStore.list_children."""

    def test_sorted_and_intermixed(self, store: NoteStore, create_note):
        create_note("zeta.md")
        create_note("alpha.md")
        create_note("mid/note.md")

        children = store.list_children(store.notes_root)

        assert children == [
            ("alpha.md", NodeKind.FILE),
            ("mid", NodeKind.DIRECTORY),
            ("zeta.md", NodeKind.FILE),
        ]

    def test_hidden_entries_skipped(self, store: NoteStore, create_note):
        create_note(".kno/config.yaml")
        create_note(".gitignore")
        create_note("visible.md")

        names = [name for name, _ in store.list_children(store.notes_root)]

        assert names == ["visible.md"]

    def test_non_markdown_files_listed(self, store: NoteStore, create_note):
        create_note("diagram.png")
        assert store.list_children(store.notes_root) == [("diagram.png", NodeKind.FILE)]

    def test_empty_directory(self, store: NoteStore):
        assert store.list_children(store.notes_root) == []

    def test_missing_directory(self, store: NoteStore):
        with pytest.raises(NotFound):
            store.list_children(store.notes_root / "missing")

    def test_file_is_not_a_directory(self, store: NoteStore, create_note):
        path = create_note("foo.md")
        with pytest.raises(NotFound):
            store.list_children(path)

    def test_outside_root(self, store: NoteStore, tmp_path: Path):
        with pytest.raises(NotFound):
            store.list_children(tmp_path)


class TestContains:
    """Tests for NoteStore.contains."""

    def test_root_and_children(self, store: NoteStore):
        assert store.contains(store.notes_root)
        assert store.contains(store.notes_root / "a" / "b.md")

    def test_outside(self, store: NoteStore):
        assert not store.contains(store.notes_root / ".." / "x.md")
        assert not store.contains(Path("/"))
