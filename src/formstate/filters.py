"""Template filters for rendering field results with kida.

Register them on an Environment and read field state in templates::

    register_filters(env)

    <input name="age" value="{{ fields.age | field_value }}"
           class="{{ fields.age | field_state }}">
    <span class="error">{{ fields.age | field_error }}</span>
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from formstate.config import FormConfig
from formstate.extract import message, to_string
from formstate.result import Initial, Invalid, Valid, ValidationResult, not_a_result


def field_value(result: ValidationResult[Any], fmt: Callable[[Any], str] = str) -> str:
    """Display text for the input element.

    Formats ``Initial``/``Valid`` values with *fmt*; ``Invalid`` yields the
    raw input as typed.
    """
    return to_string(fmt, result)


def field_error(result: ValidationResult[Any]) -> str:
    """Error message for ``Invalid``, empty string otherwise."""
    return message(result) or ""


def field_state(result: ValidationResult[Any]) -> str:
    """``"initial"``, ``"valid"`` or ``"invalid"``, e.g. for a CSS class."""
    match result:
        case Initial():
            return "initial"
        case Valid():
            return "valid"
        case Invalid():
            return "invalid"
        case _:
            raise not_a_result(result)


FILTERS: dict[str, Callable[..., Any]] = {
    "field_value": field_value,
    "field_error": field_error,
    "field_state": field_state,
}


def register_filters(env: Environment, *, config: FormConfig | None = None) -> Environment:
    """Add the field filters to *env* and return it.

    ``config.filter_prefix`` is prepended to each name, e.g. ``"fs_"``
    registers ``fs_field_value``.
    """
    prefix = config.filter_prefix if config else ""
    env.update_filters({f"{prefix}{name}": func for name, func in FILTERS.items()})
    return env
