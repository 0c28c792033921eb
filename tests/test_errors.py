import pytest

from minirt.errors import (
    ERR_COLOR,
    ERR_MISSING,
    ERR_OPEN,
    ERR_ARG,
    SceneError,
)


def test_str_is_full_message():
    assert str(SceneError(ERR_COLOR)) == ERR_COLOR


def test_message_attribute():
    assert SceneError(ERR_OPEN).message == ERR_OPEN


def test_detail_strips_prefix_and_newline():
    assert SceneError(ERR_COLOR).detail == "Colors must be in [0;255]"


def test_detail_without_standard_prefix():
    assert SceneError(ERR_ARG).detail == ERR_ARG.rstrip("\n")


def test_is_value_error():
    error = SceneError(ERR_MISSING)
    assert error.message == ERR_MISSING
    assert str(error) == ERR_MISSING
    with pytest.raises(ValueError) as excinfo:
        raise error
    assert excinfo.value is error


def test_messages_start_with_error_line():
    for message in (ERR_COLOR, ERR_MISSING, ERR_OPEN):
        assert message.startswith("Error\n")
        assert message.endswith("\n")