"""Tests for the built-in mode table and the registry lookups."""

import pytest
from returns.pipeline import is_successful

from ciplan import CODE, InvalidModeError, Mode, ModeRegistry, UnknownModeError


def test_every_name_matches_its_key():
    for mode_id, mode in CODE.items():
        assert mode.name == mode_id


def test_command_and_cache_key_are_non_empty():
    for mode in CODE.values():
        assert isinstance(mode.command, str) and mode.command
        assert isinstance(mode.cache_key, str) and mode.cache_key
        assert isinstance(mode.args, str)


def test_enumeration_is_stable():
    assert list(CODE.items()) == list(CODE.items())
    assert tuple(CODE) == ("clippy", "test", "build", "fmt", "docs")


def test_clippy_denies_warnings():
    clippy = CODE.get("clippy")
    assert clippy.command == "clippy"
    assert "-D warnings" in clippy.args


def test_docs_runs_cargo_doc():
    docs = CODE["docs"]
    assert docs.command == "doc"
    assert docs.cache_key == "doc"


def test_unknown_mode_raises():
    with pytest.raises(UnknownModeError) as e:
        CODE.get("nonexistent")
    assert e.value.mode_id == "nonexistent"
    assert "clippy" in str(e.value)

    with pytest.raises(KeyError):
        CODE["nonexistent"]


def test_lookup_returns_result():
    assert CODE.lookup("test").unwrap() is CODE["test"]

    result = CODE.lookup("nonexistent")
    assert not is_successful(result)
    assert isinstance(result.failure(), UnknownModeError)


def test_contains():
    assert "fmt" in CODE
    assert "nonexistent" not in CODE
    assert len(CODE) == 5


def test_platform_scope():
    assert CODE.platform_independent() == ("fmt", "docs")
    assert CODE.platform_dependent() == ("clippy", "test", "build")


def test_cache_groups():
    registry = ModeRegistry(
        {
            **CODE,
            "docs": Mode("docs", "doc", "", cache_key="code", platform_independent=True),
        }
    )
    assert registry.cache_groups()["code"] == ("fmt", "docs")
    assert CODE.cache_groups() == {
        "clippy": ("clippy",),
        "test": ("test",),
        "build": ("build",),
        "code": ("fmt",),
        "doc": ("docs",),
    }


def test_select_keeps_given_order():
    selected = CODE.select(["fmt", "clippy"])
    assert tuple(selected) == ("fmt", "clippy")
    assert selected["fmt"] is CODE["fmt"]

    with pytest.raises(UnknownModeError):
        CODE.select(["clippy", "miri"])


def test_select_rejects_repeated_ids():
    with pytest.raises(InvalidModeError):
        CODE.select(["fmt", "fmt", "clippy"])


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        CODE["miri"] = Mode("miri", "miri", "", "miri")  # type: ignore


def test_aliased_name_is_rejected():
    with pytest.raises(InvalidModeError):
        ModeRegistry({"docs": Mode("doc", "doc", "", "doc")})


@pytest.mark.parametrize(
    "mode",
    [
        Mode("x", "", "", "x"),
        Mode("x", "build", "", ""),
        Mode("x", "build", "--features 'a b", "x"),
        Mode("x", "build", "", "x", platform_independent="yes"),  # type: ignore
    ],
)
def test_invalid_modes_are_rejected(mode):
    with pytest.raises(InvalidModeError):
        ModeRegistry({"x": mode})
