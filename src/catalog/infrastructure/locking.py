"""Per-key mutual exclusion.

``KeyedLock`` hands out one ``threading.Lock`` per key, so work on
different keys runs in parallel while work on the same key is serialized.
Idle locks are dropped once nobody holds or waits for them.

``FileKeyedLock`` adds one lock file per key on top, so the same holds
across processes sharing a data directory.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Hashable, Iterator

from filelock import FileLock


class KeyedLock:

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Hashable, threading.Lock] = {}
        self._users: dict[Hashable, int] = {}

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._users[key] = self._users.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._users[key] -= 1
                if self._users[key] == 0:
                    del self._users[key]
                    del self._locks[key]

    def __len__(self) -> int:
        """Number of keys currently held or awaited."""
        with self._guard:
            return len(self._locks)


class FileKeyedLock:
    """Per-key lock shared by every process that uses ``directory``.

    Lock files are left in place after release; removing a lock file that
    another process has open would let two holders in at once.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self._directory.mkdir(parents=True, exist_ok=True)
        self._local = KeyedLock()

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._local.hold(key):
            with FileLock(str(self._directory / f"{key}.lock")):
                yield
