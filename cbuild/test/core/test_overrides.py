"""Tests for cbuild.core.overrides module."""

from __future__ import annotations

import pytest

from cbuild.core.overrides import Overrides, parse_overrides
from cbuild.core.result import Err, Ok


class TestOverrides:
    def test_defaults_are_empty(self) -> None:
        overrides = Overrides()
        assert overrides.release is False
        assert overrides.target is None

    def test_frozen(self) -> None:
        overrides = Overrides()
        with pytest.raises(AttributeError):
            overrides.release = True  # type: ignore[misc]


class TestParseArgs:
    """Overrides given as command-line tokens."""

    def test_no_args(self) -> None:
        assert parse_overrides([]) == Ok(Overrides())

    def test_bare_release(self) -> None:
        assert parse_overrides(["release"]) == Ok(Overrides(release=True))

    def test_release_with_value(self) -> None:
        assert parse_overrides(["release=1"]) == Ok(Overrides(release=True))

    def test_release_zero_is_still_defined(self) -> None:
        assert parse_overrides(["release=0"]) == Ok(Overrides(release=True))

    def test_empty_release_is_absent(self) -> None:
        assert parse_overrides(["release="]) == Ok(Overrides())

    def test_target(self) -> None:
        assert parse_overrides(["target=foo"]) == Ok(Overrides(target="foo"))

    def test_target_is_stripped(self) -> None:
        assert parse_overrides(["target= foo "]) == Ok(Overrides(target="foo"))

    def test_empty_target_is_absent(self) -> None:
        assert parse_overrides(["target="]) == Ok(Overrides())

    def test_both(self) -> None:
        result = parse_overrides(["target=foo", "release"])
        assert result == Ok(Overrides(release=True, target="foo"))

    def test_last_token_wins(self) -> None:
        assert parse_overrides(["target=a", "target=b"]) == Ok(Overrides(target="b"))

    @pytest.mark.parametrize("token", ["foo=1", "debug", "=x", "Release"])
    def test_unknown_token(self, token: str) -> None:
        result = parse_overrides([token])
        assert isinstance(result, Err)
        assert result.error.token == token
        assert "unknown override" in result.error.message
        assert result.error.hint is not None

    def test_target_without_value(self) -> None:
        result = parse_overrides(["target"])
        assert isinstance(result, Err)
        assert result.error.message == "target needs a value"


class TestParseEnvironment:
    """Overrides taken from environment variables."""

    def test_env_release(self) -> None:
        assert parse_overrides([], {"release": "1"}) == Ok(Overrides(release=True))

    def test_env_target(self) -> None:
        assert parse_overrides([], {"target": "foo"}) == Ok(Overrides(target="foo"))

    def test_empty_env_values_are_absent(self) -> None:
        assert parse_overrides([], {"release": "", "target": "  "}) == Ok(Overrides())

    def test_unrelated_env_ignored(self) -> None:
        assert parse_overrides([], {"RELEASE": "1", "PATH": "/bin"}) == Ok(Overrides())

    def test_args_win_over_env(self) -> None:
        result = parse_overrides(["target=cli"], {"target": "env", "release": "1"})
        assert result == Ok(Overrides(release=True, target="cli"))

    def test_empty_arg_masks_env(self) -> None:
        assert parse_overrides(["release="], {"release": "1"}) == Ok(Overrides())
