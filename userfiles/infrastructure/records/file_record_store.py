"""
Adapter: Filesystem record store.

Implements the RecordStore port with one file per user under a single
root directory. Durability and atomicity of individual writes are left
to the filesystem.
"""

import logging
import os
import threading
import weakref
from pathlib import Path

from userfiles.domain.records.entities import is_record_filename, record_filename
from userfiles.domain.records.errors import (
    MissingUserIdError,
    RecordListingError,
    RecordWriteError,
    StartupFatalError,
)
from userfiles.domain.records.ports import RecordStore

logger = logging.getLogger(__name__)

ROOT_DIR_MODE = 0o777


class FileRecordStore(RecordStore):
    """Stores each record as ``<root>/<user_id>.json``.

    The root directory is created on construction. Writes to the same
    user identifier are serialized with a per-key lock; writes to
    different identifiers proceed in parallel.
    """

    def __init__(self, root: str | Path) -> None:
        """Initialize the store and ensure its root directory exists.

        Args:
            root: Directory holding the record files. Missing parents
                are created.

        Raises:
            StartupFatalError: If the directory cannot be created, or the
                path exists and is not a directory.
        """
        self._root = Path(root)
        # Entries vanish once no writer holds the lock.
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()
        self._initialize()

    @property
    def root(self) -> Path:
        return self._root

    def _initialize(self) -> None:
        try:
            self._root.mkdir(mode=ROOT_DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            logger.critical("Failed to create user files directory %s: %s", self._root, exc)
            raise StartupFatalError(
                f"Failed to create user files directory {self._root}: {exc}"
            ) from exc
        logger.info("Record store ready at %s", self._root)

    def _path_for(self, user_id: str) -> Path:
        return self._root / record_filename(user_id)

    def _lock_for(self, user_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = self._locks[user_id] = threading.Lock()
            return lock

    def put(self, user_id: str, content: bytes) -> None:
        """Write content for a user, truncating any existing file.

        Args:
            user_id: Non-empty identifier, used verbatim in the filename.
            content: Raw bytes to store.
        """
        if not user_id:
            raise MissingUserIdError()

        path = self._path_for(user_id)
        lock = self._lock_for(user_id)
        with lock:
            try:
                path.write_bytes(content)
            except (OSError, ValueError) as exc:
                logger.error("Failed to save %s: %s", path, exc)
                raise RecordWriteError(user_id, str(exc)) from exc

    def exists(self, user_id: str) -> bool:
        """Return whether the user's file is present.

        Errors other than "not found" are reported as absence.
        """
        path = self._path_for(user_id)
        try:
            path.stat()
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as exc:
            # ValueError: embedded NUL byte in the identifier
            logger.warning("Treating %s as absent after stat error: %s", path, exc)
            return False
        return True

    def list_ids(self) -> list[str]:
        """Return filenames of non-directory ``.json`` entries under root."""
        try:
            with os.scandir(self._root) as entries:
                return [
                    entry.name
                    for entry in entries
                    if is_record_filename(entry.name)
                    and not entry.is_dir(follow_symlinks=False)
                ]
        except OSError as exc:
            logger.error("Failed to read user files from %s: %s", self._root, exc)
            raise RecordListingError(str(exc)) from exc
