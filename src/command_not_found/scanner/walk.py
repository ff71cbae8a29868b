"""Physical, single-filesystem directory walk."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    """What the walk found at a path."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"  # Reported as-is, never followed
    UNREADABLE_DIRECTORY = "unreadable_directory"
    STAT_FAILED = "stat_failed"
    OTHER = "other"  # Sockets, fifos, devices


@dataclass(frozen=True)
class WalkEntry:
    """A single filesystem entry produced by the walk."""

    path: str
    kind: EntryKind
    depth: int
    error: OSError | None = None

    @property
    def name(self) -> str:
        """Final path component."""
        return os.path.basename(self.path)


def _classify(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def _visit(path: str, mode: int, depth: int) -> tuple[WalkEntry, list[str] | None]:
    """Classify an entry and list its children when it is a directory."""
    kind = _classify(mode)
    if kind is not EntryKind.DIRECTORY:
        return WalkEntry(path, kind, depth), None

    try:
        with os.scandir(path) as it:
            children = [child.path for child in it]
    except OSError as e:
        return WalkEntry(path, EntryKind.UNREADABLE_DIRECTORY, depth, e), None

    return WalkEntry(path, kind, depth), children


def walk(root: str | os.PathLike[str]) -> Iterator[WalkEntry]:
    """Walk a directory tree depth-first.

    Directories are yielded before their contents, children in listing
    order. Symbolic links are reported but never followed, and entries
    living on a different device than ``root`` are skipped along with
    everything below them. Each directory is read completely before the
    walk descends, so no directory handle stays open across yields.

    Args:
        root: Directory to start from

    Yields:
        One WalkEntry per visited path, including ``root`` itself
    """
    root = os.fspath(root)

    try:
        root_stat = os.lstat(root)
    except OSError as e:
        yield WalkEntry(root, EntryKind.STAT_FAILED, 0, e)
        return

    device = root_stat.st_dev
    entry, children = _visit(root, root_stat.st_mode, 0)
    yield entry

    pending: list[tuple[Iterator[str], int]] = []
    if children is not None:
        pending.append((iter(children), 1))

    while pending:
        paths, depth = pending[-1]
        path = next(paths, None)
        if path is None:
            pending.pop()
            continue

        try:
            st = os.lstat(path)
        except OSError as e:
            yield WalkEntry(path, EntryKind.STAT_FAILED, depth, e)
            continue

        if st.st_dev != device:
            logger.debug(f"Not crossing mount point: {path}")
            continue

        entry, children = _visit(path, st.st_mode, depth)
        yield entry

        if children is not None:
            pending.append((iter(children), depth + 1))
