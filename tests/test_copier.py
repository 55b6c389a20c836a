"""Tests for the change-aware FileCopier."""

import logging
import os

import pytest

from page_assets.assets.copier import FileCopier

FIXED_NS = 1_700_000_000_123_456_789


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "src" / "photo.jpg"
    path.parent.mkdir()
    path.write_bytes(b"original bytes")
    os.utime(path, ns=(FIXED_NS, FIXED_NS))
    return path


@pytest.fixture
def dest(tmp_path):
    path = tmp_path / "out" / "photo.jpg"
    path.parent.mkdir()
    return path


class TestCopyIfNeeded:
    """Tests for FileCopier.copy_if_needed."""

    def test_copies_when_destination_missing(self, source, dest):
        """A missing destination is copied, not treated as an error."""
        copier = FileCopier()

        assert copier.copy_if_needed(source, dest) is True
        assert dest.read_bytes() == b"original bytes"
        assert copier.copy_count == 1

    def test_propagates_timestamps_exactly(self, source, dest):
        """The destination mtime equals the source mtime to the nanosecond."""
        FileCopier().copy_if_needed(source, dest)

        assert dest.stat().st_mtime_ns == source.stat().st_mtime_ns

    def test_second_copy_is_skipped(self, source, dest):
        """An unchanged source is not copied again."""
        copier = FileCopier()
        copier.copy_if_needed(source, dest)

        assert copier.copy_if_needed(source, dest) is False
        assert copier.copy_count == 1

    def test_size_change_triggers_copy(self, source, dest):
        """Changing the source size triggers exactly one more copy."""
        copier = FileCopier()
        copier.copy_if_needed(source, dest)

        source.write_bytes(b"new and longer bytes")
        os.utime(source, ns=(FIXED_NS, FIXED_NS))

        assert copier.copy_if_needed(source, dest) is True
        assert copier.copy_if_needed(source, dest) is False
        assert copier.copy_count == 2
        assert dest.read_bytes() == b"new and longer bytes"

    def test_mtime_change_triggers_copy(self, source, dest):
        """Touching the source with a new mtime triggers a copy."""
        copier = FileCopier()
        copier.copy_if_needed(source, dest)

        os.utime(source, ns=(FIXED_NS, FIXED_NS + 1_000_000_000))

        assert copier.copy_if_needed(source, dest) is True
        assert dest.stat().st_mtime_ns == FIXED_NS + 1_000_000_000

    def test_same_size_different_mtime_is_copied(self, source, dest):
        """A destination of equal size but different mtime is replaced."""
        dest.write_bytes(b"other  bytes!!")
        assert dest.stat().st_size == source.stat().st_size

        assert FileCopier().copy_if_needed(source, dest) is True
        assert dest.read_bytes() == b"original bytes"

    def test_force_always_copies(self, source, dest):
        """force=True copies even when metadata matches."""
        copier = FileCopier(force=True)
        copier.copy_if_needed(source, dest)

        assert copier.copy_if_needed(source, dest) is True
        assert copier.copy_count == 2

    def test_same_file_is_never_copied(self, source):
        """Copying a file onto itself is a no-op, even when forced."""
        copier = FileCopier(force=True)

        assert copier.copy_if_needed(source, source) is False
        assert source.read_bytes() == b"original bytes"
        assert copier.copy_count == 0

    def test_missing_source_raises(self, tmp_path, dest):
        """A missing source raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FileCopier().copy_if_needed(tmp_path / "missing.jpg", dest)


class TestCopierLogging:
    """Tests for FileCopier progress logging."""

    def test_logs_copy(self, source, dest, caplog):
        """Copies are logged at INFO level."""
        caplog.set_level(logging.INFO)
        FileCopier().copy_if_needed(source, dest)

        assert f"Copy {source} to {dest}.." in caplog.text

    def test_logs_changed_source(self, source, dest, caplog):
        """Replacing an outdated destination is logged as a change."""
        caplog.set_level(logging.INFO)
        dest.write_bytes(b"stale")

        FileCopier().copy_if_needed(source, dest)

        assert f"{source} has changed!" in caplog.text

    def test_unchanged_logs_nothing(self, source, dest, caplog):
        """Skipped copies produce no log output."""
        copier = FileCopier()
        copier.copy_if_needed(source, dest)
        caplog.clear()
        caplog.set_level(logging.DEBUG)

        copier.copy_if_needed(source, dest)

        assert caplog.records == []

    def test_silent_suppresses_logging(self, source, dest, caplog):
        """silent=True suppresses progress messages."""
        caplog.set_level(logging.INFO)
        FileCopier(silent=True).copy_if_needed(source, dest)

        assert caplog.records == []
