import pytest

from databoard.errors import (
    AlreadyExistsError,
    AlreadyRemappedError,
    AssignmentError,
    DataboardError,
    IsLockedError,
    KeyFormatError,
    NoParentError,
    NotFoundError,
    UnreachableError,
    WrongTypeError,
)


def test_already_exists_message():
    err = AlreadyExistsError("test")
    assert err.key == "test"
    assert str(err) == "cannot create data with key test as they already exist"


def test_already_remapped_message():
    err = AlreadyRemappedError("remapped", "test")
    assert (err.key, err.remapped) == ("remapped", "test")
    assert str(err) == "key remapped is already remapped as test"


def test_assignment_message():
    err = AssignmentError("key", "value")
    assert (err.key, err.value) == ("key", "value")
    assert str(err) == "remapping of key contains an assignment of value"


def test_is_locked_message():
    err = IsLockedError("test")
    assert err.key == "test"
    assert str(err) == "the entry test is locked"


def test_no_parent_message():
    err = NoParentError("test", "manual")
    assert (err.key, err.remapped) == ("test", "manual")
    assert str(err) == "remapping of test to manual without a parent board"


def test_not_found_message():
    err = NotFoundError("test")
    assert err.key == "test"
    assert str(err) == "an entry for the key test is not existing"


def test_wrong_type_message():
    err = WrongTypeError("test")
    assert err.key == "test"
    assert str(err) == "the entry for the key test is stored with a different type"


def test_unreachable_message():
    err = UnreachableError("database.py", 42)
    assert (err.file, err.line) == ("database.py", 42)
    assert str(err) == "an unexpected error occured in database.py at line 42"


def test_key_format_error_keeps_key():
    err = KeyFormatError("{key", "board pointer")
    assert err.key == "{key"
    assert "{key" in str(err)
    assert isinstance(err, ValueError)


@pytest.mark.parametrize(
    "err, fragment",
    [
        (AlreadyExistsError("kx"), "kx"),
        (AlreadyRemappedError("kx", "rx"), "kx is already remapped as rx"),
        (AssignmentError("kx", "vx"), "kx contains an assignment of vx"),
        (IsLockedError("kx"), "entry kx is locked"),
        (NoParentError("kx", "rx"), "kx to rx without a parent"),
        (NotFoundError("kx"), "key kx is not existing"),
        (WrongTypeError("kx"), "key kx is stored"),
        (UnreachableError("fx", 1), "fx at line 1"),
        (KeyFormatError("kx"), "kx"),
    ],
)
def test_all_errors_share_base(err, fragment):
    with pytest.raises(DataboardError) as excinfo:
        raise err
    assert excinfo.value is err
    assert fragment in str(excinfo.value)


def test_repr_names_class_and_fields():
    text = repr(NotFoundError("test"))
    assert text.startswith("NotFoundError(")
    assert "key: test" in text