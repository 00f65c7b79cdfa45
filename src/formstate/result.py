"""The tri-state field result and the parse outcome it is built from.

A field result is exactly one of three frozen dataclasses:

``Initial(value)``
    Nothing has been validated yet. Holds the default or pre-populated value.
``Valid(value)``
    The raw input parsed successfully. Holds the typed value.
``Invalid(error, raw_input)``
    Parsing failed. Holds the message and the text the user actually typed,
    so the form can redisplay it verbatim.

Parse functions report their outcome with ``Ok(value)`` or ``Err(error)``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Initial[V]:
    """No validation attempted yet (or reset)."""

    value: V


@dataclass(frozen=True, slots=True)
class Valid[V]:
    """Validation succeeded."""

    value: V


@dataclass(frozen=True, slots=True)
class Invalid:
    """Validation failed.

    Carries strings only, never a value of the field's type, so it passes
    through type-changing transforms untouched.
    """

    error: str
    raw_input: str


type ValidationResult[V] = Initial[V] | Valid[V] | Invalid


@dataclass(frozen=True, slots=True)
class Ok[V]:
    """A parse function accepted its input."""

    value: V


@dataclass(frozen=True, slots=True)
class Err:
    """A parse function rejected its input."""

    error: str


type ParseResult[V] = Ok[V] | Err


def initial[V](value: V) -> Initial[V]:
    """Wrap *value* as ``Initial``. No validation runs."""
    return Initial(value)


def valid[V](value: V) -> Valid[V]:
    """Wrap *value* as ``Valid`` without checking it.

    The usual seed for a whole-form pipeline::

        valid(lambda name: lambda age: Signup(name, age))
    """
    return Valid(value)


def not_a_result(value: object) -> TypeError:
    """Build the error raised when a non-result reaches a combinator."""
    msg = f"expected Initial, Valid or Invalid, got {type(value).__name__}"
    return TypeError(msg)
