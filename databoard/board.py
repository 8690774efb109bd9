"""A hierarchical databoard built from per-level databases and remapping rules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .database import Database
from .entry import EntryData, EntryReadGuard, EntryWriteGuard
from .errors import AssignmentError, KeyFormatError, NoParentError
from .remappings import (
    Remappings,
    check_local_key,
    check_top_level_key,
    strip_board_pointer,
)

_Location = tuple[Database, str, bool]


def _stripped(check: Callable[[str], str], key: str) -> str | None:
    try:
        return check(key)
    except KeyFormatError:
        return None


class Databoard:
    """A key-value store that may delegate keys to a parent board.

    Keys starting with ``@`` address the top level board, keys starting with
    ``_`` address this board only. Other keys follow the manual remappings
    first, then, if `autoremap` is set, go to the parent with the same name,
    and otherwise stay in this board.
    """

    def __init__(
        self,
        parent: Databoard | None = None,
        remappings: Remappings | None = None,
        autoremap: bool = False,
    ) -> None:
        self._database = Database()
        self._parent = parent
        self._remappings = remappings if remappings is not None else Remappings()
        self._autoremap = autoremap

    @classmethod
    def with_parent(cls, parent: Databoard) -> Databoard:
        """Create a board below `parent` whose keys are automatically remapped to it."""
        return cls(parent, None, True)

    def __repr__(self) -> str:
        return (
            f"Databoard(parent={'yes' if self._parent else 'no'}, "
            f"remappings={self._remappings!r}, autoremap={self._autoremap})"
        )

    # --- routing -------------------------------------------------------------

    def _root(self) -> Databoard:
        board = self
        while board._parent is not None:
            board = board._parent
        return board

    def _locate(
        self, key: str, *, strict: bool = True, parent_required: bool = True
    ) -> _Location | None:
        """Follow `key` to the database holding it.

        Returns the database, the key within it and whether the key was an
        explicit local key (``_key``). A remapping to a constant raises
        AssignmentError, or gives None unless `strict`; a remapping without a
        parent raises NoParentError, or gives None unless `parent_required`.
        """
        flags = {"strict": strict, "parent_required": parent_required}
        stripped = _stripped(check_top_level_key, key)
        if stripped is not None:
            return self._root()._locate(stripped, **flags)
        local_key = _stripped(check_local_key, key)
        if local_key is not None:
            return self._database, local_key, True
        remapped = self._remappings.find(key)
        if remapped is not None:
            pointer = strip_board_pointer(remapped)
            if pointer is None:
                if strict:
                    raise AssignmentError(key, remapped)
                return None
            if self._parent is None:
                if parent_required:
                    raise NoParentError(key, pointer)
                return None
            return self._parent._locate(pointer, **flags)
        if self._autoremap and self._parent is not None:
            return self._parent._locate(key, **flags)
        return self._database, key, False

    def _call(self, method: Callable[..., Any], key: str, *args: Any) -> Any:
        database, local_key, _ = self._locate(key)
        return method(database, local_key, *args)

    # --- queries -------------------------------------------------------------

    def contains_key(self, key: str) -> bool:
        """Return True if an entry is available under `key`."""
        located = self._locate(key, strict=False, parent_required=False)
        return located is not None and located[0].contains_key(located[1])

    def contains(self, key: str, typ: type = object) -> bool:
        """Return True if an entry of type `typ` is available under `key`.

        Raises WrongTypeError if the entry has another type and NoParentError
        if `key` is remapped to a parent that does not exist.
        """
        located = self._locate(key, strict=False)
        return located is not None and located[0].contains(located[1], typ)

    def debug_message(self) -> None:
        """Print the configuration of this board for debugging."""
        lines = [
            f"Databoard: parent={'yes' if self._parent else 'no'}, autoremap={self._autoremap}"
        ]
        lines.extend(f"  {original} -> {remapped}" for original, remapped in self._remappings)
        print("\n".join(lines))

    def delete(self, key: str, typ: type = object) -> Any:
        """Remove the entry under `key` and return its value."""
        return self._call(Database.delete, key, typ)

    def entry(self, key: str) -> EntryData:
        """Return the shared entry stored under `key`."""
        return self._call(Database.entry, key)

    def get(self, key: str, typ: type = object) -> Any:
        """Return a copy of the value of type `typ` stored under `key`."""
        return self._call(Database.read, key, typ)

    def get_mut_ref(self, key: str, typ: type = object) -> EntryWriteGuard:
        """Return a write guard on the entry under `key`, waiting for the lock.

        Any number of changes while the guard is held count as one change.
        """
        return self._call(Database.get_mut_ref, key, typ)

    def get_ref(self, key: str, typ: type = object) -> EntryReadGuard:
        """Return a read guard on the entry under `key`, waiting for the lock."""
        return self._call(Database.get_ref, key, typ)

    def remappings(self) -> Remappings | None:
        """Return the remapping rules, or None if there are none."""
        return self._remappings if self._remappings else None

    def sequence_id(self, key: str) -> int:
        """Return the change counter of the entry under `key`; it starts at 1."""
        return self._call(Database.sequence_id, key)

    def set(self, key: str, value: Any) -> Any:
        """Store `value` under `key`, returning the previous value or None if it is new.

        An explicit local key (``_key``) must already exist. Raises
        WrongTypeError if the existing entry has another type.
        """
        database, local_key, explicit = self._locate(key)
        if explicit or database.contains_key(local_key):
            return database.update(local_key, value)
        database.create(local_key, value)
        return None

    def try_get_mut_ref(self, key: str, typ: type = object) -> EntryWriteGuard:
        """Return a write guard on the entry under `key`; raise IsLockedError if it is locked."""
        return self._call(Database.try_get_mut_ref, key, typ)

    def try_get_ref(self, key: str, typ: type = object) -> EntryReadGuard:
        """Return a read guard on the entry under `key`; raise IsLockedError if write locked."""
        return self._call(Database.try_get_ref, key, typ)