from __future__ import annotations

import pytest

from graze.errors import DeserializeError, LoadError, LoadIOError, SerializeError, Stage


def test_messages_name_the_failing_stage():
    cause = FileNotFoundError(2, "No such file or directory")

    read_error = LoadIOError("Config.toml", cause)
    write_error = LoadIOError("Config.toml", PermissionError("denied"), Stage.WRITE)
    parse_error = DeserializeError("Config.toml", ValueError("expected '=' at line 1"))

    assert str(read_error).startswith("An error occurred while opening the configuration file: ")
    assert str(write_error) == "An error occurred while writing the configuration file: denied"
    assert str(parse_error) == "Configuration file is incorrect: expected '=' at line 1"


def test_errors_share_the_load_error_base():
    errors = [
        LoadIOError("a", OSError("x")),
        DeserializeError("a", ValueError("x")),
        SerializeError("a", TypeError("x")),
    ]

    assert all(isinstance(error, LoadError) for error in errors)
    assert [error.stage for error in errors] == [Stage.READ, Stage.DESERIALIZE, Stage.SERIALIZE]


def test_io_error_only_covers_read_and_write():
    with pytest.raises(ValueError):
        LoadIOError("a", OSError("x"), Stage.DESERIALIZE)


def test_repr_and_path_normalization(tmp_path):
    error = DeserializeError(tmp_path / "c.yaml", ValueError("bad"))

    assert error.path == str(tmp_path / "c.yaml")
    assert repr(error) == f"DeserializeError(path={str(tmp_path / 'c.yaml')!r}, stage='deserialize', error=ValueError('bad'))"


def test_stage_compares_with_plain_strings():
    assert Stage.WRITE == "write"
    assert Stage("read") is Stage.READ
