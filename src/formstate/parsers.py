"""Built-in parse functions for form fields.

Each parser has the signature::

    def parse(raw: str) -> Ok | Err:
        '''Ok(typed value) on success, Err(message) on failure.'''

and plugs straight into ``validate(parse, raw)``. Parameterized parsers are
factory functions that return a parser::

    def max_length(n: int) -> Parser[str]:
        def check(raw: str) -> ParseResult[str]:
            if len(raw) > n:
                return Err(f"Must be at most {n} characters")
            return Ok(raw)
        return check

``at_most`` and ``at_least`` check numbers that are already parsed; put
them after ``integer`` or ``number`` in a ``chain()``.
"""

import math
import re
from collections.abc import Callable
from typing import Any

from formstate.result import Err, Ok, ParseResult

type Parser[V] = Callable[[str], ParseResult[V]]


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(raw: str) -> ParseResult[str]:
    """Field must be present and non-blank."""
    if not raw or not raw.strip():
        return Err("This field is required")
    return Ok(raw)


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> Parser[str]:
    """String must be at most *n* characters."""

    def check(raw: str) -> ParseResult[str]:
        if len(raw) > n:
            return Err(f"Must be at most {n} characters")
        return Ok(raw)

    return check


def min_length(n: int) -> Parser[str]:
    """String must be at least *n* characters."""

    def check(raw: str) -> ParseResult[str]:
        if len(raw) < n:
            return Err(f"Must be at least {n} characters")
        return Ok(raw)

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Checks structure, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def email(raw: str) -> ParseResult[str]:
    """Value must look like an email address."""
    if not _EMAIL_RE.match(raw):
        return Err("Must be a valid email address")
    return Ok(raw)


_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def url(raw: str) -> ParseResult[str]:
    """Value must be an http or https URL."""
    if not _URL_RE.match(raw):
        return Err("Must be a valid URL")
    return Ok(raw)


def matches(pattern: str, message: str | None = None) -> Parser[str]:
    """Value must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(raw: str) -> ParseResult[str]:
        if not compiled.match(raw):
            return Err(message or f"Must match pattern: {pattern}")
        return Ok(raw)

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Parser[str]:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(raw: str) -> ParseResult[str]:
        if raw not in allowed:
            options = ", ".join(sorted(allowed))
            return Err(f"Must be one of: {options}")
        return Ok(raw)

    return check


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def integer(raw: str) -> ParseResult[int]:
    """Value must be a whole number."""
    try:
        return Ok(int(raw))
    except ValueError:
        return Err("Must be a whole number")


def number(raw: str) -> ParseResult[float]:
    """Value must be a finite number (int or float syntax)."""
    try:
        value = float(raw)
    except ValueError:
        return Err("Must be a number")
    if not math.isfinite(value):
        return Err("Must be a number")
    return Ok(value)


# ---------------------------------------------------------------------------
# Bounds on parsed numbers (after integer or number in a chain)
# ---------------------------------------------------------------------------


def at_most(limit: float) -> Callable[[Any], ParseResult[Any]]:
    """Parsed number must be ``<= limit``."""

    def check(value: Any) -> ParseResult[Any]:
        if value > limit:
            return Err(f"Must be at most {limit}")
        return Ok(value)

    return check


def at_least(limit: float) -> Callable[[Any], ParseResult[Any]]:
    """Parsed number must be ``>= limit``."""

    def check(value: Any) -> ParseResult[Any]:
        if value < limit:
            return Err(f"Must be at least {limit}")
        return Ok(value)

    return check


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def chain(first: Parser[Any], *rest: Callable[[Any], ParseResult[Any]]) -> Parser[Any]:
    """Run parsers left to right, feeding each ``Ok`` value to the next.

    Only *first* receives the raw string; each later parser receives the
    value the previous one produced, so string checks go before coercions::

        age = chain(required, integer, at_least(18))

    The first ``Err`` is returned and later parsers are skipped.
    """

    def check(raw: str) -> ParseResult[Any]:
        outcome = first(raw)
        for parse in rest:
            match outcome:
                case Ok(value):
                    outcome = parse(value)
                case Err():
                    break
        return outcome

    return check
