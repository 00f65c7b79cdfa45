"""Reading raw form data into field results.

``field()`` turns one submitted value into a field result. ``validate_form()``
does that for a list of ``FieldSpec`` and merges them into a whole-form
result with ``collect()``::

    whole, fields = validate_form(form, Signup, [
        FieldSpec("name", required),
        FieldSpec("age", chain(required, integer)),
    ])
    if not is_valid(whole):
        return Template("signup.html", fields=fields)
    save(with_default(None, whole))

Works with any ``Mapping[str, str]``: a framework's form data, query
params, or a plain ``dict``.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from formstate.combinators import collect, validate
from formstate.config import DEFAULT_CONFIG, FormConfig
from formstate.errors import ConfigurationError
from formstate.result import Invalid, ParseResult, ValidationResult

logger = logging.getLogger("formstate.forms")


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A form field name and the parser that validates it."""

    name: str
    parse: Callable[[str], ParseResult[Any]]


def field[V](
    data: Mapping[str, str],
    name: str,
    parse: Callable[[str], ParseResult[V]],
    *,
    config: FormConfig | None = None,
) -> ValidationResult[V]:
    """Validate the submitted value for *name*.

    A missing field reads as ``""``. With ``config.strip_whitespace`` the
    parser sees the stripped text, but an ``Invalid`` result still keeps
    the text exactly as submitted.
    """
    config = config or DEFAULT_CONFIG
    raw = data.get(name) or ""
    text = raw.strip() if config.strip_whitespace else raw

    result = validate(parse, text)
    if isinstance(result, Invalid):
        logger.debug("Field %r rejected: %s", name, result.error)
        return Invalid(result.error, raw)
    return result


def validate_form(
    data: Mapping[str, str],
    constructor: Callable[..., Any],
    specs: Sequence[FieldSpec],
    *,
    config: FormConfig | None = None,
) -> tuple[ValidationResult[Any], dict[str, ValidationResult[Any]]]:
    """Validate every field in *specs* and merge them into one result.

    *constructor* receives the field values positionally, in *specs* order.

    Returns:
        ``(whole_form_result, {field name: field result})``. Per-field
        results are returned for rendering; the whole-form result follows
        ``and_map`` merging (first ``Invalid`` wins).
    """
    if not specs:
        msg = "validate_form() needs at least one FieldSpec"
        raise ConfigurationError(msg)
    names = [spec.name for spec in specs]
    if len(set(names)) != len(names):
        msg = f"validate_form() got duplicate field names: {names}"
        raise ConfigurationError(msg)

    results = {spec.name: field(data, spec.name, spec.parse, config=config) for spec in specs}
    whole = collect(constructor, *results.values())
    logger.debug(
        "Form %s: %d field(s), state %s",
        getattr(constructor, "__name__", repr(constructor)),
        len(results),
        type(whole).__name__,
    )
    return whole, results
