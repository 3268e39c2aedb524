"""Data models for kno."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class DailyIntent:
    """Empty address: today's note in the root daily folder."""


@dataclass(frozen=True)
class NamedIntent:
    """Address without a trailing separator: a single note file."""

    segments: tuple[str, ...]

    @property
    def name(self) -> str:
        return "/".join(self.segments)


@dataclass(frozen=True)
class NamedDirectoryDailyIntent:
    """Address with a trailing separator: a daily note inside a directory."""

    segments: tuple[str, ...]

    @property
    def name(self) -> str:
        return "/".join(self.segments) + "/"


AddressIntent = Union[DailyIntent, NamedIntent, NamedDirectoryDailyIntent]


@dataclass
class ResolvedNote:
    """An address mapped onto the notes tree."""

    path: Path  # Absolute
    existed: bool  # File existed before resolution
    intent: AddressIntent
    title: str  # Header written when the editor creates the note

    @property
    def is_daily(self) -> bool:
        return not isinstance(self.intent, NamedIntent)


class NodeKind(Enum):
    """Kind of an entry in the notes tree."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class NoteTreeNode:
    """A file or directory in a listing of the notes tree."""

    name: str
    kind: NodeKind
    path: Path
    children: list[NoteTreeNode] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.kind == NodeKind.DIRECTORY

    def walk(self):
        """Yield (depth, node) pairs below this node, depth-first in listing order."""
        stack = [(1, child) for child in reversed(self.children)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, c) for c in reversed(node.children))
