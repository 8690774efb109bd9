"""Entries of a databoard and the guards that lock them."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

from .errors import IsLockedError, WrongTypeError

T = TypeVar("T")

_SEQUENCE_MAX = 2**64 - 1


class _RwLock:
    """A readers-writer lock that is not bound to the thread that acquired it."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    def acquire_read(self, blocking: bool = True) -> bool:
        with self._cond:
            if self._writer:
                if not blocking:
                    return False
                self._cond.wait_for(lambda: not self._writer)
            self._readers += 1
            return True

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            self._cond.notify_all()

    def acquire_write(self, blocking: bool = True) -> bool:
        with self._cond:
            if self._writer or self._readers:
                if not blocking:
                    return False
                self._cond.wait_for(lambda: not self._writer and not self._readers)
            self._writer = True
            return True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()


class EntryData:
    """A stored value with its change counter and its lock."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.sequence_id = 1
        self.lock = _RwLock()

    def bump(self) -> None:
        """Count one change; the counter wraps around to 1 after its maximum."""
        if self.sequence_id < _SEQUENCE_MAX:
            self.sequence_id += 1
        else:
            self.sequence_id = 1

    def __repr__(self) -> str:
        return f"EntryData(value={self.value!r}, sequence_id={self.sequence_id})"


class EntryReadGuard(Generic[T]):
    """Holds a read lock on an entry until released, giving read access to its value."""

    def __init__(self, key: str, entry: EntryData, typ: type = object, blocking: bool = True) -> None:
        if not entry.lock.acquire_read(blocking):
            raise IsLockedError(key)
        if not isinstance(entry.value, typ):
            entry.lock.release_read()
            raise WrongTypeError(key)
        self._key = key
        self._entry = entry
        self._held = True

    @property
    def value(self) -> T:
        """The locked value."""
        return self._entry.value

    def release(self) -> None:
        """Release the read lock; further calls do nothing."""
        if self._held:
            self._held = False
            self._entry.lock.release_read()

    def __enter__(self) -> EntryReadGuard[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            self.release()


class EntryWriteGuard(Generic[T]):
    """Holds a write lock on an entry until released, giving read and write access.

    Any number of assignments while the guard is held count as a single change.
    """

    def __init__(self, key: str, entry: EntryData, typ: type = object, blocking: bool = True) -> None:
        if not entry.lock.acquire_write(blocking):
            raise IsLockedError(key)
        if not isinstance(entry.value, typ):
            entry.lock.release_write()
            raise WrongTypeError(key)
        self._key = key
        self._entry = entry
        self._modified = False
        self._held = True

    @property
    def value(self) -> T:
        """The locked value."""
        return self._entry.value

    @value.setter
    def value(self, new_value: T) -> None:
        self._modified = True
        self._entry.value = new_value

    def release(self) -> None:
        """Count a change if the value was assigned, then release the write lock."""
        if self._held:
            self._held = False
            if self._modified:
                self._entry.bump()
            self._entry.lock.release_write()

    def __enter__(self) -> EntryWriteGuard[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            self.release()