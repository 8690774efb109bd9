"""Exceptions raised by the databoard."""

from __future__ import annotations


class DataboardError(Exception):
    """Base class of everything that may go wrong using a databoard."""

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}: {value}" for name, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


class AlreadyExistsError(DataboardError):
    """An entry with the given key already exists."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"cannot create data with key {key} as they already exist")


class AlreadyRemappedError(DataboardError):
    """The key already has a remapping."""

    def __init__(self, key: str, remapped: str) -> None:
        self.key = key
        self.remapped = remapped
        super().__init__(f"key {key} is already remapped as {remapped}")


class AssignmentError(DataboardError):
    """The remapping of a key is a constant assignment, not a board pointer."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"remapping of {key} contains an assignment of {value}")


class IsLockedError(DataboardError):
    """The entry is locked by someone else."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"the entry {key} is locked")


class NoParentError(DataboardError):
    """A key is remapped to a parent board, but there is no parent."""

    def __init__(self, key: str, remapped: str) -> None:
        self.key = key
        self.remapped = remapped
        super().__init__(f"remapping of {key} to {remapped} without a parent board")


class NotFoundError(DataboardError):
    """No entry is stored under the key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"an entry for the key {key} is not existing")


class WrongTypeError(DataboardError):
    """The entry is stored with a different type than requested."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"the entry for the key {key} is stored with a different type")


class UnreachableError(DataboardError):
    """Something that should be impossible happened."""

    def __init__(self, file: str, line: int) -> None:
        self.file = file
        self.line = line
        super().__init__(f"an unexpected error occured in {file} at line {line}")


class KeyFormatError(DataboardError, ValueError):
    """A key does not have the form that was checked for; `key` holds it unchanged."""

    def __init__(self, key: str, expected: str = "matching key") -> None:
        self.key = key
        self.expected = expected
        super().__init__(f"{key} is not a {expected}")