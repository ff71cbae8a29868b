"""Tests for the directory walk."""

import errno
import os

import pytest

from command_not_found.scanner.walk import EntryKind, walk


class TestWalk:
    """Test walk ordering and entry classification."""

    def test_root_first(self, filelist_root) -> None:
        """The root directory is reported first at depth zero."""
        entries = list(walk(filelist_root))

        assert len(entries) == 1
        assert entries[0].path == str(filelist_root)
        assert entries[0].kind is EntryKind.DIRECTORY
        assert entries[0].depth == 0

    def test_directories_before_contents(self, filelist_root, make_manifest) -> None:
        """Directories are yielded before anything inside them."""
        make_manifest("vim.filelist", ["/usr/local/bin/vim"], subdir="a/b")
        make_manifest("git.filelist", ["/usr/local/bin/git"], subdir="c")

        paths = [entry.path for entry in walk(filelist_root)]

        a = str(filelist_root / "a")
        b = str(filelist_root / "a" / "b")
        vim = str(filelist_root / "a" / "b" / "vim.filelist")
        assert paths.index(a) < paths.index(b) < paths.index(vim)
        assert len(paths) == 6

    def test_depth(self, filelist_root, make_manifest) -> None:
        """Depth counts directory levels below the root."""
        make_manifest("vim.filelist", [], subdir="a/b")

        depths = {entry.name: entry.depth for entry in walk(filelist_root)}

        assert depths["a"] == 1
        assert depths["b"] == 2
        assert depths["vim.filelist"] == 3

    def test_files_classified(self, filelist_root, make_manifest) -> None:
        """Regular files are reported as FILE."""
        make_manifest("vim.filelist", [])

        kinds = {entry.name: entry.kind for entry in walk(filelist_root)}

        assert kinds["vim.filelist"] is EntryKind.FILE

    def test_symlinked_directory_not_followed(self, filelist_root, make_manifest) -> None:
        """A link to a directory is reported but not descended into."""
        make_manifest("vim.filelist", [], subdir="real")
        os.symlink(filelist_root / "real", filelist_root / "link")

        entries = list(walk(filelist_root))
        kinds = {entry.path: entry.kind for entry in entries}

        assert kinds[str(filelist_root / "link")] is EntryKind.SYMLINK
        assert not any(path.startswith(str(filelist_root / "link") + os.sep) for path in kinds)

    def test_dangling_symlink(self, filelist_root) -> None:
        """A link to nothing is still reported."""
        os.symlink(filelist_root / "missing", filelist_root / "gone.filelist")

        kinds = {entry.name: entry.kind for entry in walk(filelist_root)}

        assert kinds["gone.filelist"] is EntryKind.SYMLINK

    def test_missing_root(self, tmp_path) -> None:
        """A missing root yields a single stat failure for the root itself."""
        entries = list(walk(tmp_path / "does-not-exist"))

        assert len(entries) == 1
        assert entries[0].kind is EntryKind.STAT_FAILED
        assert entries[0].depth == 0
        assert isinstance(entries[0].error, FileNotFoundError)

    def test_file_root(self, make_manifest) -> None:
        """Walking a file yields just that file."""
        path = make_manifest("vim.filelist", [])

        entries = list(walk(path))

        assert [entry.kind for entry in entries] == [EntryKind.FILE]

    def test_is_lazy(self, filelist_root, make_manifest) -> None:
        """The walk is a generator consumed one entry at a time."""
        make_manifest("vim.filelist", [])

        entries = walk(filelist_root)

        assert next(entries).kind is EntryKind.DIRECTORY
        assert next(entries).name == "vim.filelist"
        with pytest.raises(StopIteration):
            next(entries)

    def test_unreadable_directory(self, filelist_root, make_manifest, monkeypatch) -> None:
        """A directory that cannot be listed is reported and skipped."""
        make_manifest("vim.filelist", [], subdir="locked")
        locked = str(filelist_root / "locked")
        real_scandir = os.scandir

        def failing_scandir(path="."):
            if os.fspath(path) == locked:
                raise PermissionError(errno.EACCES, "Permission denied", locked)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", failing_scandir)

        entries = {entry.name: entry for entry in walk(filelist_root)}

        assert entries["locked"].kind is EntryKind.UNREADABLE_DIRECTORY
        assert isinstance(entries["locked"].error, PermissionError)
        assert "vim.filelist" not in entries

    def test_mount_point_not_crossed(self, filelist_root, make_manifest, monkeypatch) -> None:
        """Entries on another device are skipped with everything below them."""
        make_manifest("vim.filelist", [])
        make_manifest("git.filelist", [], subdir="mnt/deeper")
        mount_point = str(filelist_root / "mnt")
        real_lstat = os.lstat

        def other_device_lstat(path, *args, **kwargs):
            st = real_lstat(path, *args, **kwargs)
            if os.fspath(path) != mount_point:
                return st
            fields = list(st[:10])
            fields[2] = st.st_dev + 1
            return os.stat_result(fields)

        monkeypatch.setattr(os, "lstat", other_device_lstat)

        paths = [entry.path for entry in walk(filelist_root)]

        assert paths == [str(filelist_root), str(filelist_root / "vim.filelist")]
