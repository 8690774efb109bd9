import pytest

from databoard.errors import AlreadyRemappedError, KeyFormatError
from databoard.remappings import (
    Remappings,
    check_board_pointer,
    check_local_key,
    check_local_pointer,
    check_top_level_key,
    check_top_level_pointer,
    is_board_pointer,
    is_const_assignment,
    is_local_pointer,
    is_top_level_pointer,
    strip_board_pointer,
    strip_local_pointer,
    strip_top_level_pointer,
)

JSON_OBJ = '{"x":11,"y":12}'
JSON_PREFIXED = 'json:{"x":9,"y":10}'


@pytest.mark.parametrize(
    "key, expected",
    [
        ("key", True),
        (JSON_OBJ, True),
        (JSON_PREFIXED, True),
        ("{'x'}", True),
        ("{key}", False),
        ("key}", False),
        ("{key", False),
    ],
)
def test_is_const_assignment(key, expected):
    assert is_const_assignment(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("{key}", True),
        ("{_key}", True),
        ("{@key}", True),
        ("key", False),
        ("'key", False),
        ("key}", False),
        ("{key", False),
        (JSON_OBJ, False),
        (JSON_PREFIXED, False),
    ],
)
def test_is_board_pointer(key, expected):
    assert is_board_pointer(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("{_key}", True),
        ("{@key}", False),
        ("{key}", False),
        ("_key}", False),
        ("{_key", False),
        ("{_'key}", False),
        ("_key", False),
        ("key", False),
        ("'key", False),
        (JSON_OBJ, False),
        (JSON_PREFIXED, False),
    ],
)
def test_is_local_pointer(key, expected):
    assert is_local_pointer(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("{@key}", True),
        ("{@key'}", False),
        ("{_key}", False),
        ("{key}", False),
        ("@key}", False),
        ("{@key", False),
        ("@key", False),
        (JSON_OBJ, False),
        (JSON_PREFIXED, False),
    ],
)
def test_is_top_level_pointer(key, expected):
    assert is_top_level_pointer(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("{key}", "key"),
        ("{_key}", "_key"),
        ("{@key}", "@key"),
        ("key", None),
        ("'key", None),
        ("key}", None),
        ("{key", None),
        (JSON_OBJ, None),
        (JSON_PREFIXED, None),
    ],
)
def test_strip_board_pointer(key, expected):
    assert strip_board_pointer(key) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("{_key}", "key"),
        ("{key}", None),
        ("{_'key}", None),
        ("{@key}", None),
        ("key", None),
        ("key}", None),
        ("{key", None),
        (JSON_OBJ, None),
        (JSON_PREFIXED, None),
    ],
)
def test_strip_local_pointer(key, expected):
    assert strip_local_pointer(key) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("{@key}", "key"),
        ("{key}", None),
        ("{@'key}", None),
        ("{_key}", None),
        ("key", None),
        ("key}", None),
        ("{key", None),
        (JSON_OBJ, None),
        (JSON_PREFIXED, None),
    ],
)
def test_strip_top_level_pointer(key, expected):
    assert strip_top_level_pointer(key) == expected


def test_check_local_key_accepts():
    assert check_local_key("_key") == "key"


@pytest.mark.parametrize("key", ["@key", "key", "'key", "{_key}"])
def test_check_local_key_rejects(key):
    with pytest.raises(KeyFormatError) as excinfo:
        check_local_key(key)
    assert excinfo.value.key == key


def test_check_top_level_key_accepts():
    assert check_top_level_key("@key") == "key"


@pytest.mark.parametrize("key", ["_key", "key", "'key", "{@key}"])
def test_check_top_level_key_rejects(key):
    with pytest.raises(KeyFormatError) as excinfo:
        check_top_level_key(key)
    assert excinfo.value.key == key


@pytest.mark.parametrize(
    "key, expected", [("{key}", "key"), ("{_key}", "_key"), ("{@key}", "@key")]
)
def test_check_board_pointer_accepts(key, expected):
    assert check_board_pointer(key) == expected


@pytest.mark.parametrize(
    "key", ["key", "'key", "key}", "{key", JSON_OBJ, JSON_PREFIXED]
)
def test_check_board_pointer_rejects(key):
    with pytest.raises(KeyFormatError) as excinfo:
        check_board_pointer(key)
    assert excinfo.value.key == key


def test_check_local_pointer_accepts():
    assert check_local_pointer("{_key}") == "key"


@pytest.mark.parametrize(
    "key",
    ["{key}", "{_'key}", "{@key}", "key", "key}", "{key", JSON_OBJ, JSON_PREFIXED],
)
def test_check_local_pointer_rejects(key):
    with pytest.raises(KeyFormatError) as excinfo:
        check_local_pointer(key)
    assert excinfo.value.key == key


def test_check_top_level_pointer_accepts():
    assert check_top_level_pointer("{@key}") == "key"


@pytest.mark.parametrize(
    "key",
    ["{key}", "{@'key}", "{_key}", "key", "key}", "{key", JSON_OBJ, JSON_PREFIXED],
)
def test_check_top_level_pointer_rejects(key):
    with pytest.raises(KeyFormatError) as excinfo:
        check_top_level_pointer(key)
    assert excinfo.value.key == key


def _assert_state(remappings, found, remapped):
    for key, value in found.items():
        assert remappings.find(key) == value
    for key, value in remapped.items():
        assert remappings.remap(key) == value


def test_usage():
    remappings = Remappings()
    assert remappings.find("remapped") is None

    remappings.add("remapped", "test")
    with pytest.raises(AlreadyRemappedError) as excinfo:
        remappings.add("remapped", "test")
    assert excinfo.value.key == "remapped"
    assert excinfo.value.remapped == "test"
    _assert_state(
        remappings,
        {"test": None, "remapped": "test"},
        {"test": "test", "remapped": "test"},
    )

    remappings.overwrite("remapped", "overwritten")
    _assert_state(
        remappings,
        {"test": None, "remapped": "overwritten"},
        {"test": "test", "remapped": "overwritten"},
    )

    remappings.overwrite("remapped2", "test")
    full_find = {"test": None, "remapped": "overwritten", "remapped2": "test"}
    full_remap = {"test": "test", "remapped": "overwritten", "remapped2": "test"}
    _assert_state(remappings, full_find, full_remap)
    _assert_state(remappings, {"not_remapped": None}, {"not_remapped": "not_remapped"})

    remappings.shrink()
    _assert_state(remappings, full_find, full_remap)


def test_same_name_shortcut():
    remappings = Remappings()
    remappings.add("test", "{=}")
    assert remappings.find("test") == "{test}"
    assert remappings.remap("test") == "test"


def test_container_protocol():
    remappings = Remappings()
    assert not remappings
    assert len(remappings) == 0
    remappings.add("a", "{b}")
    remappings.add("c", "{d}")
    remappings.overwrite("a", "{e}")
    assert remappings
    assert len(remappings) == 2
    assert list(remappings) == [("a", "{e}"), ("c", "{d}")]


def test_init_from_entries_rejects_duplicates():
    remappings = Remappings([("x", "{y}")])
    assert remappings.find("x") == "{y}"
    with pytest.raises(AlreadyRemappedError):
        Remappings([("x", "{y}"), ("x", "{z}")])