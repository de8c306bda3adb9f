"""Unit tests for the archive utility."""

import zipfile

import pytest

from numapprox.utils.archive import zip_files


class TestZipFiles:
    """Test cases for zip_files."""
    @pytest.fixture
    def sample_files(self, tmp_path):
        """Create two small files in a subdirectory."""
        source = tmp_path / "src"
        source.mkdir()
        first = source / "newton.txt"
        first.write_text("divided differences")
        second = source / "ifft.bin"
        second.write_bytes(bytes(range(256)) * 40)
        return [first, second]

    def test_archive_contents(self, tmp_path, sample_files):
        """Test that every file is stored under its base name."""
        archive = zip_files(sample_files, tmp_path / "out.zip")
        with zipfile.ZipFile(archive) as zf:
            assert sorted(zf.namelist()) == ["ifft.bin", "newton.txt"]
            assert zf.read("newton.txt") == b"divided differences"
            assert zf.read("ifft.bin") == bytes(range(256)) * 40
            assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in zf.infolist())

    def test_accepts_string_paths(self, tmp_path, sample_files):
        """Test that plain strings are accepted."""
        archive = zip_files([str(p) for p in sample_files], str(tmp_path / "str.zip"))
        assert archive.exists()

    def test_missing_file(self, tmp_path, sample_files):
        """Test that a missing file aborts before the archive is created."""
        target = tmp_path / "missing.zip"
        with pytest.raises(FileNotFoundError, match="File not found"):
            zip_files(sample_files + [tmp_path / "nope.txt"], target)
        assert not target.exists()

    def test_directory_rejected(self, tmp_path):
        """Test that directories are rejected."""
        with pytest.raises(ValueError, match="not a file"):
            zip_files([tmp_path], tmp_path / "dir.zip")

    def test_empty_list(self, tmp_path):
        """Test that an empty file list gives an empty archive."""
        archive = zip_files([], tmp_path / "empty.zip")
        with zipfile.ZipFile(archive) as zf:
            assert zf.namelist() == []
