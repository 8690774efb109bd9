"""The storage of a single databoard level."""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from .entry import EntryData, EntryReadGuard, EntryWriteGuard
from .errors import AlreadyExistsError, NotFoundError, WrongTypeError


@contextmanager
def _held(key: str, entry: EntryData, typ: type, write: bool = False) -> Iterator[EntryData]:
    """Lock `entry` for reading or writing and check that it holds a `typ`."""
    lock = entry.lock
    acquire, release = (
        (lock.acquire_write, lock.release_write) if write else (lock.acquire_read, lock.release_read)
    )
    acquire()
    try:
        if not isinstance(entry.value, typ):
            raise WrongTypeError(key)
        yield entry
    finally:
        release()


class Database:
    """Maps keys to shared, individually lockable entries."""

    def __init__(self) -> None:
        self._storage: dict[str, EntryData] = {}
        self._lock = threading.Lock()

    def _lookup(self, key: str) -> EntryData:
        with self._lock:
            try:
                return self._storage[key]
            except KeyError:
                raise NotFoundError(key) from None

    def contains_key(self, key: str) -> bool:
        """Return True if an entry is stored under `key`."""
        with self._lock:
            return key in self._storage

    def contains(self, key: str, typ: type = object) -> bool:
        """Return True if an entry of type `typ` is stored under `key`, False if none is.

        Raises WrongTypeError if the entry has a different type.
        """
        try:
            entry = self._lookup(key)
        except NotFoundError:
            return False
        with _held(key, entry, typ):
            return True

    def create(self, key: str, value: Any) -> None:
        """Store `value` under a new `key`; raise AlreadyExistsError if it exists."""
        with self._lock:
            if key in self._storage:
                raise AlreadyExistsError(key)
            self._storage[key] = EntryData(value)

    def delete(self, key: str, typ: type = object) -> Any:
        """Remove the entry under `key` and return its value.

        Blocks while the entry is locked by a guard.
        """
        with _held(key, self._lookup(key), typ, write=True) as entry:
            with self._lock:
                if self._storage.get(key) is not entry:
                    raise NotFoundError(key)
                del self._storage[key]
            return entry.value

    def entry(self, key: str) -> EntryData:
        """Return the shared entry stored under `key`."""
        return self._lookup(key)

    def get_mut_ref(self, key: str, typ: type = object) -> EntryWriteGuard:
        """Return a write guard on the entry under `key`, waiting for the lock."""
        return EntryWriteGuard(key, self._lookup(key), typ, blocking=True)

    def get_ref(self, key: str, typ: type = object) -> EntryReadGuard:
        """Return a read guard on the entry under `key`, waiting for the lock."""
        return EntryReadGuard(key, self._lookup(key), typ, blocking=True)

    def read(self, key: str, typ: type = object) -> Any:
        """Return a copy of the value stored under `key`."""
        with _held(key, self._lookup(key), typ) as entry:
            return copy.deepcopy(entry.value)

    def sequence_id(self, key: str) -> int:
        """Return the change counter of the entry under `key`; it starts at 1."""
        with _held(key, self._lookup(key), object) as entry:
            return entry.sequence_id

    def try_get_mut_ref(self, key: str, typ: type = object) -> EntryWriteGuard:
        """Return a write guard on the entry under `key`; raise IsLockedError if it is locked."""
        return EntryWriteGuard(key, self._lookup(key), typ, blocking=False)

    def try_get_ref(self, key: str, typ: type = object) -> EntryReadGuard:
        """Return a read guard on the entry under `key`; raise IsLockedError if write locked."""
        return EntryReadGuard(key, self._lookup(key), typ, blocking=False)

    def update(self, key: str, value: Any) -> Any:
        """Replace the value under `key` with one of the same type and return the old one."""
        with _held(key, self._lookup(key), type(value), write=True) as entry:
            old, entry.value = entry.value, value
            entry.bump()
            return old