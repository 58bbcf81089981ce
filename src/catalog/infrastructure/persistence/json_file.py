"""A JSON document on disk holding one record list plus its ID sequence.

Every read and every read-modify-write runs under a lock file next to the
document, shared by all processes using it. New contents go to a unique
temporary file that then replaces the document, so readers never see a
partial file and concurrent writers never lose each other's records.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filelock import FileLock


class JsonDocument:

    def __init__(self, file_path: Path, collection: str) -> None:
        self._file_path = file_path
        self._collection = collection
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._thread_lock = threading.RLock()
        self._file_lock = FileLock(str(file_path) + ".lock")
        self._ensure_file()

    def records(self) -> list[dict]:
        with self._locked():
            return self._load()[self._collection]

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        """Yield the whole document; it is persisted if the block succeeds."""
        with self._locked():
            document = self._load()
            yield document
            self._persist(document)

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[None]:
        with self._thread_lock, self._file_lock:
            yield

    def _load(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, document: dict) -> None:
        tmp = tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._file_path.parent,
            prefix=self._file_path.name + ".",
            suffix=".tmp",
            delete=False,
        )
        try:
            with tmp:
                tmp.write(json.dumps(document, indent=2) + "\n")
            os.replace(tmp.name, self._file_path)
        except BaseException:
            os.unlink(tmp.name)
            raise

    def _ensure_file(self) -> None:
        with self._locked():
            if not self._file_path.exists():
                self._persist({"sequence": 0, self._collection: []})
