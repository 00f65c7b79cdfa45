"""Tests for formstate.extract: reading field results."""

import pytest

from formstate import (
    Initial,
    Invalid,
    Valid,
    initial,
    is_invalid,
    is_valid,
    message,
    to_string,
    valid,
    with_default,
)


class TestPredicates:
    @pytest.mark.parametrize("value", [0, "", "hello", None, [1, 2]])
    def test_valid(self, value: object) -> None:
        assert is_valid(valid(value)) is True
        assert is_invalid(valid(value)) is False
        assert message(valid(value)) is None

    @pytest.mark.parametrize("value", [0, "", "hello", None])
    def test_initial_is_neither(self, value: object) -> None:
        assert is_valid(initial(value)) is False
        assert is_invalid(initial(value)) is False

    def test_invalid(self) -> None:
        result = Invalid("Required", "")
        assert is_invalid(result) is True
        assert is_valid(result) is False

    def test_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            is_valid("Valid")  # type: ignore[arg-type]


class TestMessage:
    def test_invalid_message(self) -> None:
        assert message(Invalid("Must be a number", "abc")) == "Must be a number"

    def test_empty_message_is_still_a_message(self) -> None:
        assert message(Invalid("", "abc")) == ""

    def test_initial_has_none(self) -> None:
        assert message(Initial("x")) is None


class TestWithDefault:
    def test_initial_value(self) -> None:
        assert with_default(99, Initial(5)) == 5

    def test_valid_value(self) -> None:
        assert with_default(99, Valid(7)) == 7

    def test_invalid_falls_back(self) -> None:
        assert with_default(99, Invalid("e", "x")) == 99


class TestToString:
    def test_initial_formatted(self) -> None:
        assert to_string(str, Initial(5)) == "5"

    def test_valid_formatted(self) -> None:
        assert to_string(lambda v: f"{v:.2f}", Valid(1.5)) == "1.50"

    def test_invalid_returns_raw_input(self) -> None:
        assert to_string(str, Invalid("Must be a number", "12abc")) == "12abc"

    def test_invalid_ignores_fn(self) -> None:
        calls: list[object] = []
        assert to_string(calls.append, Invalid("e", "  typed  ")) == "  typed  "
        assert calls == []
