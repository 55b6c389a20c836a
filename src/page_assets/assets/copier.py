"""Change-aware file copying.

A copy is skipped when the destination exists with the same modification
time and size as the source. After every copy the source's timestamps are
written onto the destination, so a second run over an unchanged tree
performs no copies.
"""

import logging
import os
import shutil
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class FileCopier:
    """Copy files only when their metadata says they changed.

    Safe to share between threads; racing copies of the same source to the
    same destination converge to the same bytes and timestamps.

    Attributes:
        force: Always copy, ignoring destination metadata
        silent: Suppress progress logging
        copy_count: Number of copies performed so far
    """

    def __init__(self, force: bool = False, silent: bool = False):
        self.force = force
        self.silent = silent
        self.copy_count = 0
        self._lock = threading.Lock()

    def is_unchanged(self, src_stat: os.stat_result, dest: Path) -> bool:
        """Check whether dest matches the source's mtime and size.

        A missing destination counts as changed.
        """
        try:
            dest_stat = dest.stat()
        except FileNotFoundError:
            return False
        return (
            dest_stat.st_mtime_ns == src_stat.st_mtime_ns
            and dest_stat.st_size == src_stat.st_size
        )

    def copy_if_needed(self, src: Path, dest: Path) -> bool:
        """Copy src to dest unless dest is already up to date.

        Args:
            src: Source file
            dest: Destination file; its directory must exist

        Returns:
            True if the file was copied, False if it was left alone
                (always False when src and dest are the same file)

        Raises:
            FileNotFoundError: If src does not exist
            OSError: If the copy or the timestamp update fails
        """
        src_stat = src.stat()
        if dest.exists() and os.path.samefile(src, dest):
            return False
        if not self.force:
            if self.is_unchanged(src_stat, dest):
                return False
            if dest.exists() and not self.silent:
                logger.info(f"{src} has changed!")

        if not self.silent:
            logger.info(f"Copy {src} to {dest}..")
        shutil.copyfile(src, dest)
        os.utime(dest, ns=(src_stat.st_atime_ns, src_stat.st_mtime_ns))

        with self._lock:
            self.copy_count += 1
        return True
