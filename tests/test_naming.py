"""Tests for collision-free destination naming."""

import os

import pytest

from trashbin.mover.naming import disambiguate


class TestDisambiguate:
    """Tests for disambiguate."""

    def test_unused_path_is_returned_unchanged(self, tmp_path):
        """Test that a free path needs no renaming."""
        dest = tmp_path / "notes.txt"
        assert disambiguate(dest) == dest

    def test_counter_replaces_extension(self, tmp_path):
        """Test that a colliding notes.txt becomes notes.1."""
        (tmp_path / "notes.txt").write_text("existing")

        assert disambiguate(tmp_path / "notes.txt") == tmp_path / "notes.1"

    def test_counter_skips_used_candidates(self, tmp_path):
        """Test that already taken counters are skipped."""
        (tmp_path / "notes.txt").write_text("original")
        (tmp_path / "notes.1").write_text("first copy")
        (tmp_path / "notes.2").write_text("second copy")

        assert disambiguate(tmp_path / "notes.txt") == tmp_path / "notes.3"

    def test_preserve_extension(self, tmp_path):
        """Test inserting the counter before the extension."""
        (tmp_path / "report.txt").write_text("existing")
        (tmp_path / "report.1.txt").write_text("existing")

        result = disambiguate(tmp_path / "report.txt", preserve_extension=True)

        assert result == tmp_path / "report.2.txt"

    def test_name_without_extension(self, tmp_path):
        """Test names without an extension get the counter appended."""
        (tmp_path / "README").write_text("existing")
        assert disambiguate(tmp_path / "README") == tmp_path / "README.1"

    def test_dotfile(self, tmp_path):
        """Test that a leading dot is not treated as an extension."""
        (tmp_path / ".bashrc").write_text("existing")
        assert disambiguate(tmp_path / ".bashrc") == tmp_path / ".bashrc.1"

    def test_directory(self, tmp_path):
        """Test directories are disambiguated the same way."""
        (tmp_path / "proj").mkdir()
        assert disambiguate(tmp_path / "proj") == tmp_path / "proj.1"

    def test_broken_symlink_occupies_name(self, tmp_path):
        """Test a dangling symlink counts as an existing path."""
        os.symlink(tmp_path / "missing", tmp_path / "link")
        assert disambiguate(tmp_path / "link") == tmp_path / "link.1"

    def test_repeated_collisions_increase(self, tmp_path):
        """Test repeated collisions yield a strictly increasing unused sequence."""
        dest = tmp_path / "data.csv"
        dest.write_text("0")

        seen = []
        for _ in range(5):
            candidate = disambiguate(dest)
            assert candidate != dest
            assert not candidate.exists()
            assert candidate not in seen
            candidate.write_text("taken")
            seen.append(candidate)

        assert [int(p.suffix[1:]) for p in seen] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("name", ["archive.tar.gz", "photo.JPG"])
    def test_only_last_extension_replaced(self, tmp_path, name):
        """Test that only the last suffix is replaced."""
        dest = tmp_path / name
        dest.write_text("existing")

        result = disambiguate(dest)

        assert result.name == f"{dest.stem}.1"
