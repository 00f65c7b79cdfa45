"""Tests for formstate.filters: kida filters for field results."""

import pytest
from kida import Environment

from formstate import FormConfig, Initial, Invalid, Valid
from formstate.filters import FILTERS, field_error, field_state, field_value, register_filters


class TestFieldValue:
    def test_valid_formatted(self) -> None:
        assert field_value(Valid(3)) == "3"

    def test_custom_format(self) -> None:
        assert field_value(Valid(0.5), lambda v: f"{v:.1%}") == "50.0%"

    def test_invalid_shows_raw_input(self) -> None:
        assert field_value(Invalid("Must be a number", "3x")) == "3x"


class TestFieldError:
    def test_invalid(self) -> None:
        assert field_error(Invalid("Required", "")) == "Required"

    def test_initial_is_empty(self) -> None:
        assert field_error(Initial("")) == ""


class TestFieldState:
    def test_states(self) -> None:
        assert field_state(Initial("")) == "initial"
        assert field_state(Valid(1)) == "valid"
        assert field_state(Invalid("e", "x")) == "invalid"

    def test_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            field_state(None)  # type: ignore[arg-type]


class TestRegisterFilters:
    def test_all_filters_listed(self) -> None:
        assert set(FILTERS) == {"field_value", "field_error", "field_state"}

    def test_renders_invalid_field(self) -> None:
        env = register_filters(Environment())
        tpl = env.from_string("{{ r | field_value }}|{{ r | field_state }}|{{ r | field_error }}")
        html = tpl.render({"r": Invalid("Required", "abc")}).strip()
        assert html == "abc|invalid|Required"

    def test_renders_valid_field(self) -> None:
        env = register_filters(Environment())
        tpl = env.from_string("{{ r | field_value }}|{{ r | field_state }}|{{ r | field_error }}")
        html = tpl.render({"r": Valid(42)}).strip()
        assert html == "42|valid|"

    def test_prefix(self) -> None:
        env = register_filters(Environment(), config=FormConfig(filter_prefix="fs_"))
        tpl = env.from_string("{{ r | fs_field_state }}")
        assert tpl.render({"r": Initial("")}).strip() == "initial"
