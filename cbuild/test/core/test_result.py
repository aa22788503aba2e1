"""Tests for cbuild.core.result module."""

import pytest

from cbuild.core.result import Err, Ok, Result


class TestOk:
    def test_repr(self) -> None:
        assert repr(Ok(["--release"])) == "Ok(['--release'])"

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_pattern_match(self) -> None:
        result: Result[int, str] = Ok(3)
        match result:
            case Ok(value):
                assert value == 3
            case Err(_):
                pytest.fail("expected Ok")


class TestErr:
    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"

    def test_equality(self) -> None:
        assert Err("x") == Err("x")
        assert Err("x") != Ok("x")
