# databoard

A hierarchical, thread-safe key-value store kept in memory. A `Databoard`
holds typed entries and may have a parent board. A key can be passed on to
the parent through explicit remapping rules or through automatic remapping.
Each entry has a sequence id. It starts at 1 and goes up by one on every
change.

## Installation

From a checkout of the repository:

```
pip install .
```

## Modules

- `databoard.board`: the `Databoard` class.
- `databoard.database`: `Database`, the storage of a single board level.
- `databoard.entry`: `EntryData`, `EntryReadGuard` and `EntryWriteGuard`.
- `databoard.remappings`: the `Remappings` table and the key helpers.
- `databoard.errors`: the exception classes.

## Keys

- `name` is a plain key. The board first looks it up in its remappings. If
  there is no rule for it and `autoremap` is set, it goes to the parent under
  the same name. Otherwise it stays in the current board.
- `@name` is a key in the top-level (root) board of the hierarchy.
- `_name` is a key in the current board only. No remapping is applied. When
  you call `set` with such a key, the entry must already exist.

## Remapping values

- `{name}` points to `name` in the parent board. The pointed-to key is then
  resolved in the parent by the same rules, so it may be `{@name}` or
  `{_name}`.
- `{=}` points to the same name in the parent board.
- Any other value is a constant assignment. This covers a value that is not in
  braces, or one that contains `:`, `"` or `'`. Such a value does not point
  into any board. Operations on a key mapped this way raise `AssignmentError`,
  except `contains_key` and `contains`, which return `False`.

`Remappings` supports `add` (raises `AlreadyRemappedError` if the key already
has a rule), `overwrite`, `find`, `remap` and `shrink`. It can also be
iterated, it supports `len()`, and it can be built from an iterable of
`(key, value)` pairs.

The module `databoard.remappings` also provides helpers that classify
strings: `is_const_assignment`, `is_board_pointer`, `is_local_pointer` and
`is_top_level_pointer`. The `strip_*` helpers return the inner key or `None`.
The `check_*` helpers (`check_board_pointer`, `check_local_key`,
`check_local_pointer`, `check_top_level_key`, `check_top_level_pointer`)
return the inner key or raise `KeyFormatError`. That exception carries the
unchanged key as `.key`.

## Usage

```python
from databoard.board import Databoard
from databoard.remappings import Remappings
from databoard.errors import WrongTypeError

root = Databoard()
assert root.set("test", 42) is None
assert root.get("test", int) == 42
assert root.sequence_id("test") == 1
assert root.set("test", 24) == 42
assert root.sequence_id("test") == 2

try:
    root.get("test", str)
except WrongTypeError:
    pass

# A child board whose keys go to the parent automatically
child = Databoard.with_parent(root)
assert child.get("test", int) == 24

# Explicit remapping rules
remappings = Remappings()
remappings.add("local", "{test}")
remapped = Databoard(root, remappings, False)
assert remapped.get("local", int) == 24

assert root.delete("test", int) == 24
assert not root.contains_key("test")
```

The `typ` argument of `contains`, `get`, `delete` and the guard methods is
checked with `isinstance`. It defaults to `object`. `set` on an existing
entry requires the new value to be an instance of the stored value's type.
`get` returns a deep copy of the stored value. `remappings()` returns the
board's rules, or `None` if it has none. `debug_message()` prints the
board's configuration.

## Guards

`get_ref` returns an `EntryReadGuard`. `get_mut_ref` returns an
`EntryWriteGuard`. Both wait for the entry's lock, hold it until `release()`
is called, and can be used as context managers. The locked value is read
through `.value`. On a write guard, assigning `.value` changes the entry. Any
number of assignments through one write guard count as a single change to the
sequence id.

`try_get_ref` and `try_get_mut_ref` do not wait. A read guard cannot be taken
while a write guard is held. A write guard cannot be taken while any guard is
held. In both cases they raise `IsLockedError`. `delete`, `set`, `get` and
`sequence_id` wait while a conflicting guard is held.

## Errors

Every error is a subclass of `databoard.errors.DataboardError`:
`AlreadyExistsError`, `AlreadyRemappedError`, `AssignmentError`,
`IsLockedError`, `NoParentError`, `NotFoundError`, `WrongTypeError`,
`UnreachableError` and `KeyFormatError`. `KeyFormatError` is also a
`ValueError`.

## What it does not do

The package is a library only. Data lives in memory and is not saved
anywhere. There is no command-line tool and no server.

## Running the tests

```
pip install -e .[test]
pytest
```