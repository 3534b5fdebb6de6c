"""In-memory points storage, standing in for a real database."""

import threading
from contextlib import contextmanager
from typing import Dict


class ReadWriteLock:
    """Many concurrent readers, or a single writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self):
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class PointsDB:
    def __init__(self):
        self._records: Dict[str, int] = {}
        self._lock = ReadWriteLock()

    def get(self, receipt_id: str) -> int:
        """Points stored for receipt_id, or 0 when the id is unknown."""
        with self._lock.read():
            return self._records.get(receipt_id, 0)

    def put(self, receipt_id: str, points: int) -> None:
        with self._lock.write():
            self._records[receipt_id] = points
