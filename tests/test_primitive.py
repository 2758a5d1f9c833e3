"""Tests for the single-file relocation primitive."""

import errno
import os
from unittest.mock import patch

import pytest

from trashbin.mover import primitive
from trashbin.mover.primitive import move_file

CROSS_DEVICE = OSError(errno.EXDEV, "Invalid cross-device link")


class TestMoveFile:
    """Tests for move_file."""

    @pytest.fixture
    def source_file(self, tmp_path):
        """Create a test source file."""
        source = tmp_path / "source" / "test.txt"
        source.parent.mkdir()
        source.write_text("Test content")
        return source

    @pytest.fixture
    def dest_dir(self, tmp_path):
        """Create a destination directory."""
        dest = tmp_path / "staging"
        dest.mkdir()
        return dest

    def test_rename(self, source_file, dest_dir):
        """Test a same-device move."""
        dest = dest_dir / "test.txt"

        move_file(source_file, dest)

        assert not source_file.exists()
        assert dest.read_text() == "Test content"

    def test_destination_exists(self, source_file, dest_dir):
        """Test that an existing destination is never overwritten."""
        dest = dest_dir / "test.txt"
        dest.write_text("existing")

        with pytest.raises(FileExistsError):
            move_file(source_file, dest)

        assert dest.read_text() == "existing"
        assert source_file.read_text() == "Test content"

    def test_missing_source(self, tmp_path, dest_dir):
        """Test moving a nonexistent file."""
        with pytest.raises(FileNotFoundError):
            move_file(tmp_path / "nonexistent.txt", dest_dir / "x.txt")

    def test_directory_source(self, tmp_path, dest_dir):
        """Test that directories are rejected."""
        directory = tmp_path / "mydir"
        directory.mkdir()

        with pytest.raises(IsADirectoryError):
            move_file(directory, dest_dir / "mydir")

        assert directory.is_dir()

    def test_rename_error_propagates(self, source_file, dest_dir):
        """Test that non cross-device errors are raised without copying."""
        dest = dest_dir / "test.txt"

        with patch.object(primitive.os, "rename", side_effect=PermissionError(errno.EACCES, "denied")):
            with pytest.raises(PermissionError):
                move_file(source_file, dest)

        assert source_file.exists()
        assert not dest.exists()

    def test_cross_device_fallback(self, tmp_path, dest_dir):
        """Test copy-and-delete when rename crosses devices."""
        source = tmp_path / "big.bin"
        content = os.urandom(primitive.CHUNK_SIZE * 5 + 123)
        source.write_bytes(content)
        dest = dest_dir / "big.bin"

        with patch.object(primitive.os, "rename", side_effect=CROSS_DEVICE):
            move_file(source, dest)

        assert not source.exists()
        assert dest.read_bytes() == content

    def test_cross_device_preserves_mode(self, source_file, dest_dir):
        """Test the copied file keeps its permission bits."""
        source_file.chmod(0o640)
        dest = dest_dir / "test.txt"

        with patch.object(primitive.os, "rename", side_effect=CROSS_DEVICE):
            move_file(source_file, dest)

        assert dest.stat().st_mode & 0o777 == 0o640

    def test_failed_copy_discards_partial_destination(self, source_file, dest_dir):
        """Test that a copy failure leaves the source intact and no partial file."""
        dest = dest_dir / "test.txt"

        with patch.object(primitive.os, "rename", side_effect=CROSS_DEVICE), patch.object(
            primitive.shutil, "copyfileobj", side_effect=OSError(errno.ENOSPC, "No space left")
        ):
            with pytest.raises(OSError):
                move_file(source_file, dest)

        assert source_file.read_text() == "Test content"
        assert not dest.exists()

    def test_symlink_moved_as_link(self, tmp_path, dest_dir):
        """Test that a symlink is relocated as a link, not its target."""
        target = tmp_path / "target.txt"
        target.write_text("target")
        link = tmp_path / "link.txt"
        link.symlink_to(target)
        dest = dest_dir / "link.txt"

        move_file(link, dest)

        assert dest.is_symlink()
        assert target.read_text() == "target"
        assert not os.path.lexists(link)

    def test_symlink_cross_device(self, tmp_path, dest_dir):
        """Test the fallback recreates the link."""
        target = tmp_path / "target.txt"
        target.write_text("target")
        link = tmp_path / "link.txt"
        link.symlink_to(target)
        dest = dest_dir / "link.txt"

        with patch.object(primitive.os, "rename", side_effect=CROSS_DEVICE):
            move_file(link, dest)

        assert dest.is_symlink()
        assert os.readlink(dest) == str(target)
        assert not os.path.lexists(link)
