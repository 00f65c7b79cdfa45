"""Combinators over field results.

Every function here is pure: inputs are never modified, and each call
either returns a new result or passes one of its inputs through.

Chaining dependent checks::

    signup = and_then(check_email_not_taken, validate(chain(required, email), raw))

Merging fields into a whole-form result, left to right::

    form = valid(lambda name: lambda age: Signup(name, age))
    form = and_map(name_result, form)
    form = and_map(age_result, form)

or, equivalently, ``collect(Signup, name_result, age_result)``.
"""

from collections.abc import Callable
from typing import Any

from formstate.result import (
    Err,
    Initial,
    Invalid,
    Ok,
    ParseResult,
    Valid,
    ValidationResult,
    not_a_result,
)


def validate[V](parse: Callable[[str], ParseResult[V]], raw_input: str) -> ValidationResult[V]:
    """Run *parse* on *raw_input* and wrap the outcome.

    ``Ok(v)`` becomes ``Valid(v)``; ``Err(e)`` becomes
    ``Invalid(e, raw_input)`` so the rejected text can be shown again.
    """
    match parse(raw_input):
        case Ok(value):
            return Valid(value)
        case Err(error):
            return Invalid(error, raw_input)
        case other:
            msg = f"parse function must return Ok or Err, got {type(other).__name__}"
            raise TypeError(msg)


def map[A, B](fn: Callable[[A], B], result: ValidationResult[A]) -> ValidationResult[B]:  # noqa: A001
    """Transform the value of ``Initial`` or ``Valid``; never changes the variant."""
    match result:
        case Initial(value):
            return Initial(fn(value))
        case Valid(value):
            return Valid(fn(value))
        case Invalid():
            return result
        case _:
            raise not_a_result(result)


def map_message[V](fn: Callable[[str], str], result: ValidationResult[V]) -> ValidationResult[V]:
    """Transform the error message of ``Invalid``; other variants pass through."""
    match result:
        case Invalid(error, raw_input):
            return Invalid(fn(error), raw_input)
        case Initial() | Valid():
            return result
        case _:
            raise not_a_result(result)


def and_then[A, B](
    fn: Callable[[A], ValidationResult[B]],
    result: ValidationResult[A],
) -> ValidationResult[B]:
    """Feed the value of ``Initial`` or ``Valid`` to *fn* and return its result.

    ``Initial`` is advanced eagerly like ``Valid``. ``Invalid`` short-circuits:
    it is returned as-is and *fn* is not called.
    """
    match result:
        case Initial(value) | Valid(value):
            return fn(value)
        case Invalid():
            return result
        case _:
            raise not_a_result(result)


def and_map[A, B](
    field: ValidationResult[A],
    acc: ValidationResult[Callable[[A], B]],
) -> ValidationResult[B]:
    """Apply the function held by *acc* to *field*.

    The accumulator is inspected first. An ``Invalid`` accumulator is
    returned unchanged and *field* is ignored, so the first ``Invalid`` in a
    pipeline wins over everything applied after it. Otherwise the result is
    ``map(fn, field)`` and takes *field*'s variant: ``Initial`` in the
    accumulator does not stick, a later ``Valid`` field overwrites it.
    """
    match acc:
        case Invalid():
            return acc
        case Initial(fn) | Valid(fn):
            return map(fn, field)
        case _:
            raise not_a_result(acc)


def _curry(fn: Callable[..., Any], arity: int) -> Any:
    def step(args: tuple[Any, ...]) -> Any:
        if len(args) == arity:
            return fn(*args)
        return lambda arg: step((*args, arg))

    return step(())


def collect(constructor: Callable[..., Any], *fields: ValidationResult[Any]) -> ValidationResult[Any]:
    """Merge *fields* into one result by applying *constructor* positionally.

    Same semantics as seeding ``valid`` with the curried constructor and
    calling ``and_map`` once per field, left to right.
    """
    acc: ValidationResult[Any] = Valid(_curry(constructor, len(fields)))
    for field in fields:
        acc = and_map(field, acc)
    return acc
