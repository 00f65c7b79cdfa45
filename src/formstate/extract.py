"""Read-only accessors for rendering a field result.

All of these are total: every variant has a defined answer.
"""

from collections.abc import Callable

from formstate.result import Initial, Invalid, Valid, ValidationResult, not_a_result


def with_default[V](default: V, result: ValidationResult[V]) -> V:
    """The value of ``Initial`` or ``Valid``, else *default*."""
    match result:
        case Initial(value) | Valid(value):
            return value
        case Invalid():
            return default
        case _:
            raise not_a_result(result)


def message(result: ValidationResult[object]) -> str | None:
    """The error text of ``Invalid``, else None."""
    match result:
        case Invalid(error, _):
            return error
        case Initial() | Valid():
            return None
        case _:
            raise not_a_result(result)


def is_valid(result: ValidationResult[object]) -> bool:
    """True only for ``Valid``. ``Initial`` counts as not valid."""
    match result:
        case Valid():
            return True
        case Initial() | Invalid():
            return False
        case _:
            raise not_a_result(result)


def is_invalid(result: ValidationResult[object]) -> bool:
    """True only for ``Invalid``. ``Initial`` counts as not invalid."""
    match result:
        case Invalid():
            return True
        case Initial() | Valid():
            return False
        case _:
            raise not_a_result(result)


def to_string[V](fn: Callable[[V], str], result: ValidationResult[V]) -> str:
    """Text to put back into the input element.

    ``Initial`` and ``Valid`` are formatted with *fn*. ``Invalid`` returns
    the rejected raw input verbatim, and *fn* is not called, so the user
    sees exactly what they typed.
    """
    match result:
        case Initial(value) | Valid(value):
            return fn(value)
        case Invalid(_, raw_input):
            return raw_input
        case _:
            raise not_a_result(result)
