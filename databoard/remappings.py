"""Remapping rules and helpers that classify databoard keys and pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import AlreadyRemappedError, KeyFormatError

_FORBIDDEN = frozenset("\"':{}")


def _is_valid_db_key(key: str) -> bool:
    return not any(ch in _FORBIDDEN for ch in key)


def is_const_assignment(key: str) -> bool:
    """Return True if `key` is a constant assignment rather than a board pointer."""
    return (
        (not key.startswith("{") and not key.endswith("}"))
        or '"' in key
        or ":" in key
        or "'" in key
    )


def is_board_pointer(key: str) -> bool:
    """Return True if `key` is a pointer into a databoard, e.g. ``{key}``."""
    return key.startswith("{") and key.endswith("}") and _is_valid_db_key(key[1:-1])


def strip_board_pointer(key: str) -> str | None:
    """Return the literal inside a board pointer, or None if `key` is none."""
    return key[1:-1] if is_board_pointer(key) else None


def check_board_pointer(key: str) -> str:
    """Return the literal inside a board pointer; raise KeyFormatError otherwise."""
    if is_board_pointer(key):
        return key[1:-1]
    raise KeyFormatError(key, "board pointer")


def check_local_key(key: str) -> str:
    """Return a local key without its leading ``_``; raise KeyFormatError otherwise."""
    if key.startswith("_") and _is_valid_db_key(key[1:]):
        return key[1:]
    raise KeyFormatError(key, "local key")


def is_local_pointer(key: str) -> bool:
    """Return True if `key` is a pointer into the local databoard, e.g. ``{_key}``."""
    return key.startswith("{_") and key.endswith("}") and _is_valid_db_key(key[2:-1])


def strip_local_pointer(key: str) -> str | None:
    """Return the literal of a local pointer without ``_``, or None."""
    return key[2:-1] if is_local_pointer(key) else None


def check_local_pointer(key: str) -> str:
    """Return the literal of a local pointer; raise KeyFormatError otherwise."""
    if is_local_pointer(key):
        return key[2:-1]
    raise KeyFormatError(key, "local pointer")


def check_top_level_key(key: str) -> str:
    """Return a top level key without its leading ``@``; raise KeyFormatError otherwise."""
    if key.startswith("@") and _is_valid_db_key(key[1:]):
        return key[1:]
    raise KeyFormatError(key, "top level key")


def is_top_level_pointer(key: str) -> bool:
    """Return True if `key` is a pointer into the top level databoard, e.g. ``{@key}``."""
    return key.startswith("{@") and key.endswith("}") and _is_valid_db_key(key[2:-1])


def strip_top_level_pointer(key: str) -> str | None:
    """Return the literal of a top level pointer without ``@``, or None."""
    return key[2:-1] if is_top_level_pointer(key) else None


def check_top_level_pointer(key: str) -> str:
    """Return the literal of a top level pointer; raise KeyFormatError otherwise."""
    if is_top_level_pointer(key):
        return key[2:-1]
    raise KeyFormatError(key, "top level pointer")


class Remappings:
    """An ordered table of remapping rules from keys to values.

    A value wrapped in braces (``{remapped_key}``) points into the parent board,
    ``{@key}`` into the top level board and ``{_key}`` into the current board.
    The value ``{=}`` points to the same name in the parent board. Any other
    value is a constant assignment.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: list[tuple[str, str]] = []
        for key, remap_to in entries or ():
            self.add(key, remap_to)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Remappings):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Remappings({self._entries!r})"

    def add(self, key: str, remap_to: str) -> None:
        """Add a rule; raise AlreadyRemappedError if `key` already has one."""
        for original, remapped in self._entries:
            if original == key:
                raise AlreadyRemappedError(key, remapped)
        self._entries.append((key, remap_to))

    def overwrite(self, key: str, remapped: str) -> None:
        """Add a rule, replacing an existing rule for `key`."""
        for index, (original, _) in enumerate(self._entries):
            if original == key:
                self._entries[index] = (key, remapped)
                return
        self._entries.append((key, remapped))

    def find(self, key: str) -> str | None:
        """Return the remapped value for `key`, or None if there is no rule."""
        for original, remapped in self._entries:
            if original == key:
                return f"{{{key}}}" if remapped == "{=}" else remapped
        return None

    def remap(self, name: str) -> str:
        """Return the remapped value for `name`, or `name` itself if there is no rule."""
        for original, remapped in self._entries:
            if original == name:
                return name if remapped == "{=}" else remapped
        return name

    def shrink(self) -> None:
        """Release spare storage held by the table."""
        self._entries = list(self._entries)